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
Peripheral lighting effects, serialized to GvLedLib's GVLED_CFG struct.
"""
from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from rgbfusion.byte_args import ByteArgs
from rgbfusion.colorlib import RGB, rgb_to_int, to_rgb
from rgbfusion.effects import BaseEffect
from rgbfusion.types import GvLedMode
from rgbfusion.util import check_range, scale_brightness


# Size of GVLED_CFG in bytes
CFG_SIZE = 24

MAX_SPEED = 9


@dataclass(frozen=True)
class GvEffect(BaseEffect):
    """
    Base class for peripheral effects

    Subclasses must implement cfg().
    """
    mode: ClassVar[GvLedMode]

    @abstractmethod
    def cfg(self) -> dict:
        """GVLED_CFG fields which differ from zero."""
        ...


    def to_bytes(self) -> bytes:
        """
        Serialize this effect as a GVLED_CFG struct

        :return: CFG_SIZE bytes
        """
        cfg = self.cfg()
        args = ByteArgs(CFG_SIZE)
        args.put_int(self.mode) \
            .put_int(cfg.get('speed', 0)) \
            .put_int(cfg.get('min_brightness', 0)) \
            .put_int(cfg.get('max_brightness', 0)) \
            .put_uint(cfg.get('color', 0)) \
            .put_int(0)
        return args.tobytes()


@dataclass(frozen=True)
class GvOff(GvEffect):
    """
    Peripheral lights out
    """
    mode: ClassVar[GvLedMode] = GvLedMode.OFF

    def cfg(self) -> dict:
        return {}


@dataclass(frozen=True)
class GvStaticColor(GvEffect):
    """
    A single, steady color on every peripheral
    """
    color: RGB
    brightness: int = 100

    mode: ClassVar[GvLedMode] = GvLedMode.STATIC

    def __post_init__(self):
        if self.color is None:
            raise ValueError('GvStaticColor requires a color')
        object.__setattr__(self, 'color', to_rgb(self.color))
        check_range('brightness', self.brightness, 0, 100)


    def cfg(self) -> dict:
        return {'max_brightness': scale_brightness(self.brightness),
                'color': rgb_to_int(self.color)}


@dataclass(frozen=True)
class GvColorCycle(GvEffect):
    """
    Cycle through the spectrum. Speed is the SDK's 0 (slowest)
    through 9 (fastest) scale.
    """
    speed: int = 5
    brightness: int = 100

    mode: ClassVar[GvLedMode] = GvLedMode.COLOR_CYCLE

    def __post_init__(self):
        check_range('speed', self.speed, 0, MAX_SPEED)
        check_range('brightness', self.brightness, 0, 100)


    def cfg(self) -> dict:
        return {'speed': self.speed,
                'max_brightness': scale_brightness(self.brightness)}
