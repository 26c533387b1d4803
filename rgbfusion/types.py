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

# pylint: disable=invalid-name
"""
Common types and enumerations which are used by everything.
"""
from enum import IntEnum


class _UnknownFallback(IntEnum):
    """
    IntEnum which maps unrecognized raw values reported by
    the SDK to the UNKNOWN member instead of failing.
    """
    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class LedType(_UnknownFallback):
    """
    Per-division capability tags reported by GLedApi's layout call
    """
    NOT_AVAILABLE = 0x00
    MONOCOLOR = 0x01
    RGB = 0x02
    DIGITAL = 0x03
    UNKNOWN = 0xFF


class LedMode(IntEnum):
    """
    Lighting modes understood by GLedApi
    """
    OFF = 0x00
    PULSE = 0x01
    COLOR_CYCLE = 0x03
    STATIC = 0x04
    FLASH = 0x05
    DIGITAL_A = 0x0A
    DIGITAL_B = 0x0B
    DIGITAL_C = 0x0C
    DIGITAL_D = 0x0D
    DIGITAL_E = 0x0E
    DIGITAL_F = 0x0F
    DIGITAL_G = 0x10
    DIGITAL_H = 0x11
    DIGITAL_I = 0x12

    @classmethod
    def digital(cls, pattern: str) -> 'LedMode':
        """
        Get the digital mode for a pattern letter

        :param pattern: A single letter, A through I
        :return: The LedMode
        """
        return cls['DIGITAL_%s' % pattern.upper()]


class DeviceType(_UnknownFallback):
    """
    Peripheral device types reported by GvLedLib
    """
    VGA = 0x1001
    MOUSE = 0x2001
    KEYBOARD = 0x3001
    HEADSET = 0x4001
    MOUSEPAD = 0x5001
    UNKNOWN = 0xFFFF


class GvLedMode(IntEnum):
    """
    Lighting modes understood by GvLedLib
    """
    OFF = 0x00
    STATIC = 0x01
    COLOR_CYCLE = 0x04
