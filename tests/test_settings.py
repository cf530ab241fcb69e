import ndbase as nb
from ndbase.settings import Settings
import pytest


def test_defaults():
    settings = Settings()

    assert settings.default_order == "row-major"
    assert settings.check_buffer_bounds is True


def test_set_default_order_normalizes(restore_settings):
    restore_settings.set_default_order("F")

    assert nb.settings.default_order == "column-major"


def test_set_default_order_invalid(restore_settings):
    with pytest.raises(nb.InvalidOrderError):
        restore_settings.set_default_order("Z")

    assert nb.settings.default_order == "row-major"


def test_toggle_check_buffer_bounds(restore_settings):
    restore_settings.unset_check_buffer_bounds()
    assert nb.settings.check_buffer_bounds is False

    restore_settings.set_check_buffer_bounds()
    assert nb.settings.check_buffer_bounds is True
