class NdbaseError(Exception):
    """Base exception for all ndbase errors."""

    pass


class InvalidDataTypeError(NdbaseError, TypeError):
    """The data type tag is not a recognized numeric data type."""

    def __init__(self, dtype):
        self.dtype = dtype
        super().__init__(
            "invalid argument. First argument must be a recognized data type. "
            f"Value: `{dtype}`."
        )


class InvalidShapeError(NdbaseError, ValueError):
    """The shape is not a sequence of non-negative integers."""

    pass


class InvalidOrderError(NdbaseError, ValueError):
    """The memory order is neither row-major nor column-major."""

    pass
