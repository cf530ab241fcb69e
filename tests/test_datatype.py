import ndbase as nb
import numpy as np
import pytest


@pytest.mark.parametrize(
    "tag, np_type",
    [
        ("float64", np.float64),
        ("float32", np.float32),
        ("float16", np.float16),
        ("complex128", np.complex128),
        ("complex64", np.complex64),
        ("int64", np.int64),
        ("int32", np.int32),
        ("int16", np.int16),
        ("int8", np.int8),
        ("uint64", np.uint64),
        ("uint32", np.uint32),
        ("uint16", np.uint16),
        ("uint8", np.uint8),
        ("uint8c", np.uint8),
        ("bool", np.bool_),
        ("generic", np.object_),
    ],
)
def test_get_datatype(tag, np_type):
    dtype = nb.get_datatype(tag)

    assert dtype.get_name() == tag
    assert dtype.get_numpy() is np_type
    assert dtype.get_nbytes() == np.dtype(np_type).itemsize
    assert nb.is_datatype(tag)


def test_get_datatype_accepts_class():
    assert nb.get_datatype(nb.float32) is nb.float32
    assert nb.get_datatype("float32") is nb.float32


@pytest.mark.parametrize("tag", ["float", "Float64", "", None, np.float64, nb.DataType])
def test_get_datatype_invalid(tag):
    assert not nb.is_datatype(tag)
    with pytest.raises(nb.InvalidDataTypeError) as exc_info:
        nb.get_datatype(tag)
    assert exc_info.value.dtype is tag


def test_datatypes_lists_catalog():
    tags = nb.datatypes()

    assert "float32" in tags
    assert "generic" in tags
    assert "datatype" not in tags
    assert len(tags) == len(set(tags)) == 16


def test_zero_values():
    assert nb.float64.get_zero() == 0.0
    assert nb.complex64.get_zero() == 0j
    assert nb.bool_.get_zero() is False
    assert nb.int8.get_zero() == 0


def test_duplicate_datatype_rejected():
    with pytest.raises(ValueError, match="already exists"):

        class another_float64(nb.DataType):
            _np_type = np.float64
            _name = "float64"


def test_repr():
    assert repr(nb.float32) == "ndbase.float32"
    assert repr(nb.bool_) == "ndbase.bool"
