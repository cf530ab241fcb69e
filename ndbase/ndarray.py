import numpy as np

from .datatype import get_datatype
from .exceptions import NdbaseError
from .layout import ROW_MAJOR, max_view_index, min_view_index, normalize_order
from .settings import settings


class ndarray:
    """Strided multi-dimensional view over a flat, contiguous buffer.

    Parameters
    ----------
    dtype : str
        Data type tag of the buffer elements.
    buffer : numpy.ndarray
        One-dimensional storage, owned by the array.
    shape : sequence of int
        Array shape.
    strides : sequence of int
        Per-dimension step, in elements. A zero-dimensional array uses ``(0,)``.
    offset : int
        Index in ``buffer`` of the element whose subscripts are all zero.
    order : str
        ``"row-major"`` or ``"column-major"``.
    """

    def __init__(self, dtype, buffer, shape, strides, offset, order):
        self._datatype = get_datatype(dtype)
        self._data = buffer
        self._shape = tuple(int(d) for d in shape)
        self._strides = tuple(int(s) for s in strides)
        self._offset = int(offset)
        self._order = normalize_order(order)

        if settings.check_buffer_bounds:
            self._check_bounds()

    def _check_bounds(self):
        size = len(self._data)
        if self.ndims == 0:
            if len(self._strides) != 1:
                raise NdbaseError(
                    f"A zero-dimensional array takes a single stride, got {self._strides}"
                )
            low = high = self._offset
        else:
            if len(self._strides) != self.ndims:
                raise NdbaseError(
                    f"Strides {self._strides} do not match shape {self._shape}"
                )
            low = min_view_index(self._shape, self._strides, self._offset)
            high = max_view_index(self._shape, self._strides, self._offset)
            if low is None:
                return
        if low < 0 or high >= size:
            raise NdbaseError(
                f"Buffer of length {size} cannot hold an array of shape {self._shape} "
                f"with strides {self._strides} and offset {self._offset}"
            )

    @property
    def dtype(self):
        return self._datatype.get_name()

    @property
    def data(self):
        return self._data

    @property
    def shape(self):
        return self._shape

    @property
    def strides(self):
        return self._strides

    @property
    def offset(self):
        return self._offset

    @property
    def order(self):
        return self._order

    @property
    def ndims(self):
        return len(self._shape)

    @property
    def length(self):
        n = 1
        for dim in self._shape:
            n *= dim
        return n

    @property
    def itemsize(self):
        return self._datatype.get_nbytes()

    @property
    def byte_length(self):
        return self.length * self.itemsize

    def _buffer_index(self, indices):
        if len(indices) != self.ndims:
            raise IndexError(
                f"Expected {self.ndims} indices for shape {self._shape}, got {len(indices)}"
            )
        index = self._offset
        for i, dim, stride in zip(indices, self._shape, self._strides):
            if not 0 <= i < dim:
                raise IndexError(f"Index {i} out of bounds for dimension of size {dim}")
            index += i * stride
        return index

    def _subscripts(self, idx):
        length = self.length
        if not 0 <= idx < length:
            raise IndexError(f"Linear index {idx} out of bounds for {length} elements")

        subscripts = [0] * self.ndims
        if self._order == ROW_MAJOR:
            dims = reversed(range(self.ndims))
        else:
            dims = range(self.ndims)
        for i in dims:
            idx, subscripts[i] = divmod(idx, self._shape[i])
        return tuple(subscripts)

    def get(self, *indices):
        """Return the element at the given subscripts."""
        return self._data[self._buffer_index(indices)]

    def set(self, *args):
        """Set the element at the given subscripts: ``set(*indices, value)``."""
        if not args:
            raise IndexError("set() requires a value to store")
        *indices, value = args
        self._data[self._buffer_index(indices)] = value

    def iget(self, idx):
        """Return the element at linear index ``idx``, counted in the array's order."""
        return self.get(*self._subscripts(idx))

    def iset(self, idx, value):
        self.set(*self._subscripts(idx), value)

    def to_numpy(self):
        """Return a numpy view sharing this array's buffer."""
        itemsize = self._data.itemsize
        if self.ndims == 0:
            return np.lib.stride_tricks.as_strided(self._data[self._offset :], shape=(), strides=())
        return np.lib.stride_tricks.as_strided(
            self._data[self._offset :],
            shape=self._shape,
            strides=tuple(s * itemsize for s in self._strides),
        )

    def tolist(self):
        return self.to_numpy().tolist()

    def __repr__(self):
        return (
            f"ndarray(dtype={self.dtype!r}, shape={self._shape}, strides={self._strides}, "
            f"offset={self._offset}, order={self._order!r})"
        )
