import logging

from .settings import settings
from .exceptions import (
    NdbaseError,
    InvalidDataTypeError,
    InvalidShapeError,
    InvalidOrderError,
)
from .datatype import (
    DataType,
    get_datatype,
    is_datatype,
    datatypes,
    float64,
    float32,
    float16,
    complex128,
    complex64,
    int64,
    int32,
    int16,
    int8,
    uint64,
    uint32,
    uint16,
    uint8,
    uint8c,
    bool_,
    generic,
)
from .layout import (
    ROW_MAJOR,
    COLUMN_MAJOR,
    is_order,
    normalize_order,
    numel,
    shape2strides,
    strides2offset,
)
from .buffer import buffer
from .ndarray import ndarray
from .zeros import zeros, zeros_like

logging.getLogger(__name__).addHandler(logging.NullHandler())
