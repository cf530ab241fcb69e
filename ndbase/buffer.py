import logging

import numpy as np

from .datatype import get_datatype

logger = logging.getLogger(__name__)


def buffer(dtype, length):
    """Allocate a zero-filled, contiguous buffer of ``length`` elements.

    Raises ``InvalidDataTypeError`` if ``dtype`` is not recognized.
    """
    datatype = get_datatype(dtype)

    if datatype.is_numeric():
        data = np.zeros(length, dtype=datatype.get_numpy())
    else:
        data = np.empty(length, dtype=np.object_)
        data[:] = datatype.get_zero()

    logger.debug(
        "allocated %s buffer: %d elements, %d bytes", datatype.get_name(), length, data.nbytes
    )
    return data
