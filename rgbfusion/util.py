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
Various helper functions that are used across the library.
"""
from numpy import interp


def clamp(value, min_, max_):
    """
    Constrain a value to the specified range

    :param value: Input value
    :param min_: Range minimum
    :param max_: Range maximum

    :return: The constrained value
    """
    return max(min_, min(value, max_))


def scale(value, src_min, src_max, dst_min, dst_max, round_=False):
    """
    Scale a value from one range to another.

    :param value: Input value
    :param src_min: Min value of input range
    :param src_max: Max value of input range
    :param dst_min: Min value of output range
    :param dst_max: Max value of output range
    :param round_: True if the scale value should be rounded to an integer

    :return: The scaled value
    """
    scaled = interp(clamp(value, src_min, src_max), [src_min, src_max], [dst_min, dst_max])
    if round_:
        scaled = int(round(scaled))

    return scaled


def scale_brightness(brightness, levels=10):
    """
    Converts a brightness percentage (0 - 100) to the integer
    level range used by the peripheral SDK (0 - levels).

    :param brightness: The brightness percentage
    :param levels: Number of discrete levels the hardware supports

    :return: The scaled value
    """
    if brightness < 0 or brightness > 100:
        raise ValueError('Brightness must be between 0 and 100 (%s)' % brightness)

    return scale(brightness, 0, 100, 0, levels, round_=True)


def check_range(name: str, value, min_, max_):
    """
    Validate that a value lies within [min_, max_]

    :raises ValueError: if the value is out of range
    :return: The value
    """
    if value is None or not min_ <= value <= max_:
        raise ValueError('%s must be between %s and %s (got %s)' % (name, min_, max_, value))
    return value


def seconds_to_ms(seconds: float) -> int:
    return int(round(seconds * 1000))
