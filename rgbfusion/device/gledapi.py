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
Raw wrapper around the GLedApi motherboard SDK.
"""
import ctypes

from .library import DeviceError, NativeApi


SDK_VERSION_LEN = 64


class GLedApiError(DeviceError):
    """
    GLedApi reported an error or returned inconsistent data
    """


class GLedApi(NativeApi):
    """
    Thin ctypes binding of the GLedApi entry points

    Every method maps onto exactly one native call.
    """
    error_class = GLedApiError

    def __init__(self, lib, hardware):
        super(GLedApi, self).__init__(lib, hardware)

        u32 = ctypes.c_uint32
        byte_p = ctypes.POINTER(ctypes.c_ubyte)

        self._get_sdk_version = self._bind('get_sdk_version', u32,
                                           ctypes.c_char_p, ctypes.c_int)
        self._initialize = self._bind('initialize', u32)
        self._get_max_division = self._bind('get_max_division', ctypes.c_int)
        self._get_led_layout = self._bind('get_led_layout', u32, byte_p, ctypes.c_int)
        self._set_led_data = self._bind('set_led_data', u32, byte_p, ctypes.c_int)
        self._apply = self._bind('apply', u32, ctypes.c_int)


    def get_sdk_version(self) -> str:
        buf = ctypes.create_string_buffer(SDK_VERSION_LEN)
        self._check('GetSdkVersion', self._get_sdk_version(buf, SDK_VERSION_LEN))
        return buf.value.decode('ascii', errors='replace')


    def initialize(self):
        self._check('InitAPI', self._initialize())


    def get_max_division(self) -> int:
        divisions = self._get_max_division()
        self._trace('GetMaxDivision -> %d', divisions)
        return divisions


    def get_led_layout(self, divisions: int) -> bytes:
        """
        Fetch the LedType of each division

        :param divisions: Number of divisions to query
        :return: One raw type byte per division
        """
        buf = (ctypes.c_ubyte * divisions)()
        self._check('GetLedLayout', self._get_led_layout(buf, divisions))
        return bytes(buf)


    def set_led_data(self, data: bytes):
        """
        Stage GLED_SETTING structs for every division

        :param data: Concatenated settings, one per division
        """
        buf = (ctypes.c_ubyte * len(data)).from_buffer_copy(data)
        self._trace('SetLedData %s', data.hex())
        self._check('SetLedData', self._set_led_data(buf, len(data)))


    def apply(self, mask: int):
        """
        Commit the staged settings

        :param mask: Bitmask of divisions, or -1 for all of them
        """
        self._check('Apply', self._apply(mask))
