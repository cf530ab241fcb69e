import logging

import ndbase as nb
import numpy as np
import pytest


@pytest.mark.parametrize("dtype", ["float64", "float32", "int32", "uint8c", "complex128", "bool"])
@pytest.mark.parametrize("length", [0, 1, 10])
def test_buffer_zero_filled(dtype, length):
    data = nb.buffer(dtype, length)

    assert data.shape == (length,)
    assert data.dtype == np.dtype(nb.get_datatype(dtype).get_numpy())
    assert not data.any()


def test_buffer_generic():
    data = nb.buffer("generic", 3)

    assert data.dtype == np.object_
    assert data.tolist() == [0, 0, 0]


def test_buffer_unknown_dtype():
    with pytest.raises(nb.InvalidDataTypeError, match="Value: `foo`"):
        nb.buffer("foo", 3)


def test_buffer_logs_allocation(caplog):
    with caplog.at_level(logging.DEBUG, logger="ndbase"):
        nb.buffer("float32", 4)

    assert "allocated float32 buffer: 4 elements, 16 bytes" in caplog.text
