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
Motherboard lighting effects.

Each effect is an immutable value describing one behavior of a
zone. Effects serialize themselves to the GLED_SETTING struct
consumed by GLedApi's SetLedData call.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import ClassVar, NamedTuple, Optional

from rgbfusion.byte_args import ByteArgs
from rgbfusion.colorlib import RGB, rgb_to_html, rgb_to_int, to_rgb
from rgbfusion.types import LedMode
from rgbfusion.util import check_range, seconds_to_ms


# Size of GLED_SETTING in bytes
SETTING_SIZE = 16

# Durations are stored as 16-bit milliseconds
MIN_SECONDS = 0.1
MAX_SECONDS = 60.0

DIGITAL_PATTERNS = 'ABCDEFGHI'


class RawSetting(NamedTuple):
    """
    Field values of a GLED_SETTING struct
    """
    mode: LedMode
    max_brightness: int = 100
    min_brightness: int = 0
    color: int = 0
    time0: int = 0
    time1: int = 0
    time2: int = 0
    ctrl0: int = 0
    ctrl1: int = 0


def _brightness(name, value):
    return check_range(name, value, 0, 100)


def _seconds(name, value):
    return check_range(name, value, MIN_SECONDS, MAX_SECONDS)


@dataclass(frozen=True)
class BaseEffect(ABC):
    """
    Base class for motherboard and peripheral effects
    """

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Serialize this effect in the SDK's native struct layout."""
        ...


    def __str__(self):
        values = []
        for field in fields(self):
            value = getattr(self, field.name)
            if field.name == 'color' and value is not None:
                value = rgb_to_html(value)
            values.append('%s=%s' % (field.name, value))
        return '%s(%s)' % (self.__class__.__name__, ', '.join(values))


@dataclass(frozen=True)
class Effect(BaseEffect):
    """
    Base class for motherboard effects

    Subclasses must implement raw().
    """
    mode: ClassVar[LedMode]

    @abstractmethod
    def raw(self) -> RawSetting:
        """Field values of the GLED_SETTING for this effect."""
        ...


    def to_bytes(self) -> bytes:
        """
        Serialize this effect as a GLED_SETTING struct

        :return: SETTING_SIZE bytes
        """
        raw = self.raw()
        args = ByteArgs(SETTING_SIZE)
        args.put(0) \
            .put(raw.mode) \
            .put(raw.max_brightness) \
            .put(raw.min_brightness) \
            .put_uint(raw.color) \
            .put_short(raw.time0) \
            .put_short(raw.time1) \
            .put_short(raw.time2) \
            .put(raw.ctrl0) \
            .put(raw.ctrl1)
        return args.tobytes()


def _set_color(effect, color, required=True):
    # frozen dataclasses need object.__setattr__ during __post_init__
    if color is None and not required:
        return
    if color is None:
        raise ValueError('%s requires a color' % effect.__class__.__name__)
    object.__setattr__(effect, 'color', to_rgb(color))


@dataclass(frozen=True)
class StaticColor(Effect):
    """
    A single, steady color
    """
    color: RGB
    brightness: int = 100

    mode: ClassVar[LedMode] = LedMode.STATIC

    def __post_init__(self):
        _set_color(self, self.color)
        _brightness('brightness', self.brightness)


    def raw(self) -> RawSetting:
        return RawSetting(self.mode, max_brightness=self.brightness,
                          color=rgb_to_int(self.color))


@dataclass(frozen=True)
class ColorCycle(Effect):
    """
    Cycle through the spectrum, holding each color for
    the given number of seconds
    """
    seconds: float = 1.0
    brightness: int = 100

    mode: ClassVar[LedMode] = LedMode.COLOR_CYCLE
    colors: ClassVar[int] = 7

    def __post_init__(self):
        _seconds('seconds', self.seconds)
        _brightness('brightness', self.brightness)


    def raw(self) -> RawSetting:
        return RawSetting(self.mode, max_brightness=self.brightness,
                          time0=seconds_to_ms(self.seconds), ctrl0=self.colors)


@dataclass(frozen=True)
class Pulse(Effect):
    """
    Fade a color in and out. One pulse lasts `speed` seconds.
    """
    color: RGB
    speed: float = 1.0
    brightness: int = 100
    min_brightness: int = 0

    mode: ClassVar[LedMode] = LedMode.PULSE

    def __post_init__(self):
        _set_color(self, self.color)
        _seconds('speed', self.speed)
        _brightness('brightness', self.brightness)
        _brightness('min_brightness', self.min_brightness)
        if self.min_brightness > self.brightness:
            raise ValueError('min_brightness (%d) exceeds brightness (%d)'
                             % (self.min_brightness, self.brightness))


    def raw(self) -> RawSetting:
        fade = seconds_to_ms(self.speed) // 2
        return RawSetting(self.mode, max_brightness=self.brightness,
                          min_brightness=self.min_brightness,
                          color=rgb_to_int(self.color), time0=fade, time1=fade)


@dataclass(frozen=True)
class Flash(Effect):
    """
    Flash a color `count` times every `interval` seconds
    """
    color: RGB
    count: int = 1
    interval: float = 2.0
    brightness: int = 100

    mode: ClassVar[LedMode] = LedMode.FLASH

    # on/off time of a single flash
    flash_ms: ClassVar[int] = 100

    def __post_init__(self):
        _set_color(self, self.color)
        check_range('count', self.count, 1, 10)
        _seconds('interval', self.interval)
        _brightness('brightness', self.brightness)
        if self.count * 2 * self.flash_ms > seconds_to_ms(self.interval):
            raise ValueError('%d flashes do not fit in %ss' % (self.count, self.interval))


    def raw(self) -> RawSetting:
        return RawSetting(self.mode, max_brightness=self.brightness,
                          color=rgb_to_int(self.color),
                          time0=self.flash_ms, time1=self.flash_ms,
                          time2=seconds_to_ms(self.interval), ctrl0=self.count)


@dataclass(frozen=True)
class DigitalPattern(Effect):
    """
    One of the built-in addressable ("digital") LED patterns, A-I.
    Patterns without a color use their own palette.
    """
    pattern: str
    color: Optional[RGB] = None
    speed: float = 1.0
    brightness: int = 100

    def __post_init__(self):
        if not isinstance(self.pattern, str) or len(self.pattern) != 1 \
                or self.pattern.upper() not in DIGITAL_PATTERNS:
            raise ValueError('Unknown digital pattern: %s' % (self.pattern,))
        object.__setattr__(self, 'pattern', self.pattern.upper())
        _set_color(self, self.color, required=False)
        _seconds('speed', self.speed)
        _brightness('brightness', self.brightness)


    @property
    def mode(self) -> LedMode:
        return LedMode.digital(self.pattern)


    def raw(self) -> RawSetting:
        color = 0 if self.color is None else rgb_to_int(self.color)
        return RawSetting(self.mode, max_brightness=self.brightness, color=color,
                          time0=seconds_to_ms(self.speed))


@dataclass(frozen=True)
class Off(Effect):
    """
    Lights out
    """
    mode: ClassVar[LedMode] = LedMode.OFF

    def raw(self) -> RawSetting:
        return RawSetting(self.mode, max_brightness=0)
