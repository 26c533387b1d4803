#
# rgbfusion - Copyright (C) 2026 The rgbfusion Authors
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
import struct
from enum import Enum

import numpy as np


class ByteArgs:
    """
    Helper class for assembling the fixed-size structs passed to
    the native SDKs from argument lists of varying types.

    All multi-byte values are little-endian.
    """
    def __init__(self, size):
        self._data_ptr = 0
        self._data = np.zeros(shape=(size,), dtype=np.uint8)


    @property
    def data(self):
        """
        The byte array assembled from supplied arguments
        """
        return self._data


    @property
    def size(self):
        """
        Size of the byte array
        """
        return len(self._data)


    def put(self, arg, packing=None):
        """
        Add an argument to this array

        :param arg: The argument to append
        :type arg: varies

        :param packing: The representation passed to struct.pack
        :type packing: str

        :return: This ByteArgs instance
        :rtype: ByteArgs
        """
        if packing is not None:
            data = struct.pack(packing, arg)
        elif isinstance(arg, Enum):
            data = struct.pack('<B', arg.value)
        else:
            data = struct.pack('<B', arg)

        datalen = len(data)
        if self._data_ptr + datalen > len(self._data):
            raise ValueError('No space left in argument list')

        self._data[self._data_ptr:self._data_ptr+datalen] = \
                np.frombuffer(data, dtype=np.uint8)
        self._data_ptr += datalen

        return self


    def put_short(self, arg):
        """
        Convenience method to add an argument as an unsigned
        short to the array

        :return: This ByteArgs instance
        :rtype: ByteArgs
        """
        return self.put(arg, '<H')


    def put_int(self, arg):
        """
        Convenience method to add an argument as a signed
        integer to the array

        :return: This ByteArgs instance
        :rtype: ByteArgs
        """
        return self.put(arg, '<i')


    def put_uint(self, arg):
        """
        Convenience method to add an argument as an unsigned
        integer to the array

        :return: This ByteArgs instance
        :rtype: ByteArgs
        """
        return self.put(arg, '<I')


    def tobytes(self) -> bytes:
        return self._data.tobytes()
