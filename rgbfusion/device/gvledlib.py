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
"""
Raw wrapper around the GvLedLib peripheral SDK.
"""
import ctypes

from .library import DeviceError, NativeApi


# Device index addressing every peripheral at once
ALL_DEVICES = -1


class GvLedLibError(DeviceError):
    """
    GvLedLib reported an error
    """


class GvLedLib(NativeApi):
    """
    Thin ctypes binding of the GvLedLib entry points
    """
    error_class = GvLedLibError

    def __init__(self, lib, hardware):
        super(GvLedLib, self).__init__(lib, hardware)

        u32 = ctypes.c_uint32
        int_p = ctypes.POINTER(ctypes.c_int)
        byte_p = ctypes.POINTER(ctypes.c_ubyte)

        self._initialize = self._bind('initialize', u32, int_p, int_p)
        self._save = self._bind('save', u32, ctypes.c_int, byte_p)


    def initialize(self) -> list:
        """
        Initialize the library and enumerate peripherals

        :return: The raw type code of each device
        """
        max_devices = self._hardware.max_devices or 0
        count = ctypes.c_int(0)
        types = (ctypes.c_int * max_devices)()

        self._check('GvLedInitial', self._initialize(count, types))

        if not 0 <= count.value <= max_devices:
            raise GvLedLibError('GvLedInitial reported %d devices (max %d)'
                                % (count.value, max_devices))

        return list(types[:count.value])


    def save(self, data: bytes):
        """
        Apply a GVLED_CFG to every peripheral
        """
        self.led_save(ALL_DEVICES, data)


    def led_save(self, index: int, data: bytes):
        """
        Apply a GVLED_CFG to a single peripheral
        """
        buf = (ctypes.c_ubyte * len(data)).from_buffer_copy(data)
        self._trace('GvLedSave(%d) %s', index, data.hex())
        self._check('GvLedSave', self._save(index, buf))
