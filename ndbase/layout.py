import numbers

from .exceptions import InvalidOrderError, InvalidShapeError

ROW_MAJOR = "row-major"
COLUMN_MAJOR = "column-major"

# numpy spellings are accepted as aliases
_ORDER_ALIASES = {
    ROW_MAJOR: ROW_MAJOR,
    COLUMN_MAJOR: COLUMN_MAJOR,
    "C": ROW_MAJOR,
    "F": COLUMN_MAJOR,
}


def is_order(order):
    return isinstance(order, str) and order in _ORDER_ALIASES


def normalize_order(order):
    """Return the canonical order tag for ``order``."""
    if not is_order(order):
        raise InvalidOrderError(
            f"Invalid order: {order!r}, must be '{ROW_MAJOR}' or '{COLUMN_MAJOR}'"
        )
    return _ORDER_ALIASES[order]


def check_shape(shape):
    """Validate ``shape`` and return it as a tuple of ints."""
    if isinstance(shape, (str, bytes)) or not hasattr(shape, "__iter__"):
        raise InvalidShapeError(f"Shape must be a sequence of integers, got {shape!r}")

    dims = []
    for dim in shape:
        if isinstance(dim, bool) or not isinstance(dim, numbers.Integral):
            raise InvalidShapeError(f"Invalid dimension {dim!r} in shape {tuple(shape)}")
        if dim < 0:
            raise InvalidShapeError(f"Negative dimension {dim} in shape {tuple(shape)}")
        dims.append(int(dim))
    return tuple(dims)


def numel(shape):
    """Number of elements of an array with the given shape."""
    n = 1
    for dim in check_shape(shape):
        n *= dim
    return n


def shape2strides(shape, order):
    """Strides (in elements) of a densely packed array.

    Parameters
    ----------
    shape : sequence of int
        Array shape.
    order : str
        ``"row-major"`` (last dimension varies fastest) or
        ``"column-major"`` (first dimension varies fastest).

    Returns
    -------
    tuple of int
    """
    dims = check_shape(shape)
    order = normalize_order(order)

    strides = [0] * len(dims)
    step = 1
    if order == ROW_MAJOR:
        for i in reversed(range(len(dims))):
            strides[i] = step
            step *= dims[i]
    else:
        for i in range(len(dims)):
            strides[i] = step
            step *= dims[i]
    return tuple(strides)


def strides2offset(shape, strides):
    """Buffer index of the element whose subscripts are all zero.

    Only negative strides move the origin away from the start of the buffer.
    """
    offset = 0
    for dim, stride in zip(shape, strides):
        if stride < 0:
            offset -= stride * (dim - 1)
    return offset


def max_view_index(shape, strides, offset):
    """Largest buffer index addressable by the view, or ``None`` if it is empty."""
    if 0 in shape:
        return None
    index = offset
    for dim, stride in zip(shape, strides):
        if stride > 0:
            index += stride * (dim - 1)
    return index


def min_view_index(shape, strides, offset):
    if 0 in shape:
        return None
    index = offset
    for dim, stride in zip(shape, strides):
        if stride < 0:
            index += stride * (dim - 1)
    return index
