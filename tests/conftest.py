import os

import ndbase as nb
import pytest


_ORDER = os.getenv("NDBASE_ORDER")
_ORDER_PARAMS = [_ORDER] if _ORDER else [nb.ROW_MAJOR, nb.COLUMN_MAJOR]


@pytest.fixture(params=_ORDER_PARAMS)
def order(request):
    """
    Parametrized fixture that runs tests on both 'row-major' and 'column-major'
    layouts.
    """
    return request.param


@pytest.fixture
def restore_settings():
    snapshot = (
        nb.settings.default_order,
        nb.settings.check_buffer_bounds,
    )
    yield nb.settings
    default_order, check_buffer_bounds = snapshot
    nb.settings.set_default_order(default_order)
    if check_buffer_bounds:
        nb.settings.set_check_buffer_bounds()
    else:
        nb.settings.unset_check_buffer_bounds()
