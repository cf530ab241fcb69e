import numpy as np

from .exceptions import InvalidDataTypeError


class DataTypeMeta(type):
    """Metaclass used for all data type classes."""

    _instances = {}

    def __new__(mcls, name, bases, attrs):
        cls = super().__new__(mcls, name, bases, attrs)

        # Register every concrete data type under its tag
        if attrs.get("_np_type") is not None:
            tag = attrs["_name"]
            if tag in DataTypeMeta._instances:
                raise ValueError(f"DataType {tag} already exists")
            DataTypeMeta._instances[tag] = cls

        return cls

    def __repr__(cls):
        return f"ndbase.{cls._name}"


class DataType(metaclass=DataTypeMeta):
    """Base class for all data type definitions."""

    _np_type = None
    _zero = 0
    _name = "datatype"

    @classmethod
    def get_name(cls):
        return cls._name

    @classmethod
    def get_numpy(cls):
        return cls._np_type

    @classmethod
    def get_nbytes(cls):
        return np.dtype(cls._np_type).itemsize

    @classmethod
    def get_zero(cls):
        return cls._zero

    @classmethod
    def is_numeric(cls):
        return cls._np_type is not np.object_


class float64(DataType):
    _np_type = np.float64
    _zero = 0.0
    _name = "float64"


class float32(DataType):
    _np_type = np.float32
    _zero = 0.0
    _name = "float32"


class float16(DataType):
    _np_type = np.float16
    _zero = 0.0
    _name = "float16"


class complex128(DataType):
    _np_type = np.complex128
    _zero = 0j
    _name = "complex128"


class complex64(DataType):
    _np_type = np.complex64
    _zero = 0j
    _name = "complex64"


class int64(DataType):
    _np_type = np.int64
    _name = "int64"


class int32(DataType):
    _np_type = np.int32
    _name = "int32"


class int16(DataType):
    _np_type = np.int16
    _name = "int16"


class int8(DataType):
    _np_type = np.int8
    _name = "int8"


class uint64(DataType):
    _np_type = np.uint64
    _name = "uint64"


class uint32(DataType):
    _np_type = np.uint32
    _name = "uint32"


class uint16(DataType):
    _np_type = np.uint16
    _name = "uint16"


class uint8(DataType):
    _np_type = np.uint8
    _name = "uint8"


class uint8c(DataType):
    # storage is identical to uint8; values are not clamped on assignment
    _np_type = np.uint8
    _name = "uint8c"


class bool_(DataType):
    _np_type = np.bool_
    _zero = False
    _name = "bool"


class generic(DataType):
    _np_type = np.object_
    _name = "generic"


def is_datatype(dtype):
    return isinstance(dtype, str) and dtype in DataTypeMeta._instances


def datatypes():
    """Return the list of recognized data type tags."""
    return list(DataTypeMeta._instances)


def get_datatype(dtype):
    """Resolve a data type tag (or a DataType subclass) to its class.

    Raises
    ------
    InvalidDataTypeError
        If ``dtype`` is not a recognized data type.
    """
    if isinstance(dtype, type) and issubclass(dtype, DataType) and dtype is not DataType:
        return dtype
    if is_datatype(dtype):
        return DataTypeMeta._instances[dtype]
    raise InvalidDataTypeError(dtype)
