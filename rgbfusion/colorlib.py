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
Color parsing and conversion.

Extends ColorAide's Color with the factory methods used throughout
rgbfusion, and converts the various user-facing representations
(names, hexcodes, RGB tuples) to the packed integers the SDKs expect.
"""

import re

from typing import Iterable, Tuple, Union

from coloraide import Color as _BaseColor

from rgbfusion.util import clamp


RGB = Tuple[int, int, int]
ColorType = Union['Color', str, Iterable[int], Iterable[float], None]


class Color(_BaseColor):
    """Color class with grapefruit-style factory methods."""

    @classmethod
    def NewFromHtml(cls, html: str) -> "Color":
        """Create color from HTML hex or named color."""
        return cls(html)

    @classmethod
    def NewFromRgb(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Create color from RGB floats (0-1 range)."""
        c = cls("srgb", [r, g, b])
        c["alpha"] = a
        return c

    @property
    def rgb(self) -> tuple:
        """Get RGB as float tuple (0-1)."""
        srgb = self.convert("srgb")
        return (srgb["red"], srgb["green"], srgb["blue"])

    @property
    def intTuple(self) -> RGB:
        """Get RGB as int tuple (0-255)."""
        return rgb_to_int_tuple([x * 255 for x in self.rgb])


# bare hexcodes as typed on a command line, "ff8000" or "f80"
BARE_HEX = re.compile(r'^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def rgb_to_int_tuple(arg) -> RGB:
    """
    Convert/sanitize a 3-tuple of ints or floats

    :param arg: Tuple of RGB values

    :return: Tuple of RGB ints
    """
    if len(arg) >= 3:
        return tuple([clamp(int(round(x)), 0, 255) for x in arg[:3]])

    raise TypeError('Unable to convert %s to color' % (arg,))


def to_color(arg) -> Color:
    """
    Convert various color representations to Color

    Handles RGB triplets, hexcodes (with or without the leading '#')
    and CSS color names.

    :raises ValueError: if the string can't be parsed
    :return: The color, or None
    """
    if arg is None:
        return None
    if isinstance(arg, Color):
        return arg
    if isinstance(arg, str):
        value = arg.strip()
        if value == '':
            raise ValueError('Empty color')
        if BARE_HEX.match(value):
            value = '#' + value
        try:
            return Color.NewFromHtml(value.lower())
        except ValueError:
            raise ValueError('Unable to parse color from \'%s\'' % arg) from None
    if isinstance(arg, Iterable):
        arg = tuple(arg)
        if len(arg) >= 3:
            if all(isinstance(n, int) for n in arg[:3]):
                return Color.NewFromRgb(*[x / 255.0 for x in rgb_to_int_tuple(arg)])
            if all(isinstance(n, float) for n in arg[:3]):
                return Color.NewFromRgb(*arg[:3])

    raise TypeError('Unable to parse color from \'%s\' (%s)' % (arg, type(arg)))


def to_rgb(arg: ColorType) -> RGB:
    """
    Convert various representations to RGB tuples

    :return: An RGB int tuple
    """
    if arg is None:
        return (0, 0, 0)
    if isinstance(arg, tuple) and len(arg) == 3 and all(isinstance(n, int) for n in arg):
        return rgb_to_int_tuple(arg)
    return to_color(arg).intTuple


def rgb_to_int(rgb: RGB) -> int:
    """
    Pack an RGB tuple into the 0x00RRGGBB layout used by the SDKs
    """
    r, g, b = rgb
    return (r << 16) | (g << 8) | b


def rgb_to_html(rgb: RGB) -> str:
    """
    Format an RGB tuple as a hexcode
    """
    return '#%02x%02x%02x' % tuple(rgb)
