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
Motherboard LED control
"""
from typing import Iterable, Tuple

from rgbfusion.effects import Effect, Off
from rgbfusion.hardware import Hardware, Quirks
from rgbfusion.log import Log
from rgbfusion.types import LedType

from .gledapi import GLedApi, GLedApiError
from .library import load_library


# Apply mask addressing every division
ALL_DIVISIONS = -1


class Motherboard(object):
    """
    The RGB Fusion motherboard

    Construction initializes the SDK and reads the LED layout, which
    is then fixed for the lifetime of the object. Effects are staged
    per division with set_zone() and committed in one batch by apply().
    """

    def __init__(self, api, hardware: Hardware = None):
        self._api = api
        self._logger = Log.get('rgbfusion.motherboard')

        version = api.get_sdk_version()
        if not version:
            raise GLedApiError('GLedApi returned empty version')

        if hardware is None:
            hardware = api.hardware
        self._hardware = hardware.for_version(version)
        self._sdk_version = version

        api.initialize()

        self._max_divisions = api.get_max_division()
        if self._max_divisions <= 0:
            raise GLedApiError('No divisions')

        raw_layout = api.get_led_layout(self._max_divisions)
        if len(raw_layout) != self._max_divisions:
            raise GLedApiError('GetLedLayout(%d) returned %d divisions'
                               % (self._max_divisions, len(raw_layout)))

        self._layout = tuple(LedType(x) for x in raw_layout)
        self._settings = [Off()] * self._max_divisions
        self._dirty = True

        self._logger.info('GLedApi %s (%s): %d divisions',
                          version, self._hardware.name, self._max_divisions)


    @property
    def sdk_version(self) -> str:
        return self._sdk_version


    @property
    def hardware(self) -> Hardware:
        """
        The SDK description selected for the reported version
        """
        return self._hardware


    @property
    def max_divisions(self) -> int:
        return self._max_divisions


    @property
    def layout(self) -> Tuple[LedType, ...]:
        """
        The type of each division, in index order
        """
        return self._layout


    @property
    def settings(self) -> Tuple[Effect, ...]:
        """
        The current effect of each division, in index order
        """
        return tuple(self._settings)


    def _check_division(self, division: int):
        if not 0 <= division < self._max_divisions:
            raise IndexError('Division %d must be between 0 and %d'
                             % (division, self._max_divisions - 1))


    def set_zone(self, zone: int, effect: Effect):
        """
        Stage an effect for a single division. Nothing is sent to
        the hardware until apply() is called.

        :param zone: The division index
        :param effect: The new effect
        """
        self._check_division(zone)
        if not isinstance(effect, Effect):
            raise TypeError('Not an effect: %r' % (effect,))

        # an effect which can't be serialized never enters the table
        self._serialize(effect)

        self._settings[zone] = effect
        self._dirty = True


    def set_all(self, effect: Effect):
        """
        Set every division to the same effect and apply it
        """
        for zone in range(self._max_divisions):
            self.set_zone(zone, effect)

        self.apply()


    def apply(self, zones: Iterable[int] = None) -> int:
        """
        Write the staged settings and apply them to the given divisions

        :param zones: Divisions to apply, or None for all of them
        :return: The mask passed to the SDK
        """
        mask = 0
        for zone in zones or ():
            self._check_division(zone)
            mask |= (1 << zone)

        self._write()

        if mask == 0:
            mask = ALL_DIVISIONS

        self._api.apply(mask)
        return mask


    def _serialize(self, effect: Effect) -> bytes:
        data = effect.to_bytes()

        size = self._hardware.setting_size
        if size is not None and len(data) != size:
            raise GLedApiError('%s is %d bytes, %s expects %d per division'
                               % (effect.__class__.__name__, len(data),
                                  self._hardware.name, size))
        return data


    def _write(self):
        if not self._dirty:
            return

        data = b''.join(self._serialize(effect) for effect in self._settings)
        self._api.set_led_data(data)

        if self._hardware.has_quirk(Quirks.DOUBLE_WRITE):
            # a single write leaves some divisions unconfigured
            self._api.set_led_data(data)

        self._dirty = False


    def __str__(self):
        return 'Motherboard(sdk_version=%s, divisions=%d)' % (self._sdk_version, self._max_divisions)


    __repr__ = __str__


def open_motherboard(hardware: Hardware = None) -> Motherboard:
    """
    Load GLedApi and initialize the motherboard

    :param hardware: SDK description, defaults to the packaged one
    :return: The initialized Motherboard
    """
    if hardware is None:
        hardware = Hardware.get_type(Hardware.Type.MOTHERBOARD)

    return Motherboard(GLedApi(load_library(hardware), hardware), hardware)
