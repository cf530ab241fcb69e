import logging

from .buffer import buffer
from .layout import numel, shape2strides, strides2offset
from .ndarray import ndarray
from .settings import settings

logger = logging.getLogger(__name__)


def zeros(dtype, shape, order=None):
    """Create a zero-filled ndarray having a specified shape and data type.

    Parameters
    ----------
    dtype : str
        Numeric data type tag, e.g. ``"float32"``.
    shape : sequence of int
        Array shape. An empty shape creates a zero-dimensional array.
    order : str, optional
        ``"row-major"`` or ``"column-major"``. Defaults to
        ``settings.default_order``.

    Raises
    ------
    InvalidDataTypeError
        If ``dtype`` is not a recognized data type.

    Examples
    --------
    >>> arr = zeros("float32", [2, 2], "row-major")
    >>> arr.shape
    (2, 2)
    >>> arr.dtype
    'float32'
    """
    if order is None:
        order = settings.default_order

    ndims = len(shape)
    if ndims > 0:
        length = numel(shape)
        strides = shape2strides(shape, order)
    else:
        # a zero-dimensional array still holds a single element
        length = 1
        strides = (0,)

    data = buffer(dtype, length)
    logger.debug("zeros(%r, %r, %r)", dtype, tuple(shape), order)
    return ndarray(dtype, data, shape, strides, strides2offset(shape, strides), order)


def zeros_like(x):
    """Create a zero-filled ndarray with the same dtype, shape and order as ``x``."""
    if not isinstance(x, ndarray):
        raise TypeError(f"Expected an ndbase ndarray got {type(x).__name__}")
    return zeros(x.dtype, x.shape, x.order)
