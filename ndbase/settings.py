class Settings:

    def __init__(self, default_order="row-major", check_buffer_bounds=True):
        """Initialize the settings.
        Parameters
        ----------
        default_order : str
            Memory order used when a factory is called without an explicit order.
        check_buffer_bounds : bool
            Whether the ndarray constructor verifies that the buffer covers every
            element addressable through shape, strides and offset.
        """
        self.set_default_order(default_order)
        self.__check_buffer_bounds = check_buffer_bounds

    @property
    def default_order(self):
        """Return the default memory order."""
        return self.__default_order

    @property
    def check_buffer_bounds(self):
        """Return whether buffer coverage is verified on construction."""
        return self.__check_buffer_bounds

    def set_default_order(self, order):
        """Set the default memory order."""
        from .layout import normalize_order

        self.__default_order = normalize_order(order)

    def set_check_buffer_bounds(self):
        """Verify buffer coverage on construction."""
        self.__check_buffer_bounds = True

    def unset_check_buffer_bounds(self):
        """Skip buffer coverage verification on construction."""
        self.__check_buffer_bounds = False


settings = Settings()
