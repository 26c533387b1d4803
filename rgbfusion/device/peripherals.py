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
Peripheral LED control
"""
from typing import Tuple

from rgbfusion.hardware import Hardware
from rgbfusion.log import Log
from rgbfusion.peripheral_effects import GvEffect, GvOff
from rgbfusion.types import DeviceType

from .gvledlib import GvLedLib, GvLedLibError
from .library import load_library


class Peripherals(object):
    """
    RGB Fusion capable peripherals (mice, keyboards, graphics cards...)

    Unlike the motherboard, peripheral settings take effect as soon
    as they are saved.
    """

    def __init__(self, api, hardware: Hardware = None):
        self._api = api
        self._hardware = hardware if hardware is not None else api.hardware
        self._logger = Log.get('rgbfusion.peripherals')

        self._devices = tuple(DeviceType(x) for x in api.initialize())
        self._settings = [GvOff()] * len(self._devices)

        self._logger.info('GvLedLib: %d peripherals', len(self._devices))


    @property
    def devices(self) -> Tuple[DeviceType, ...]:
        """
        The type of each peripheral, in index order
        """
        return self._devices


    @property
    def settings(self) -> Tuple[GvEffect, ...]:
        return tuple(self._settings)


    def _serialize(self, effect: GvEffect) -> bytes:
        data = effect.to_bytes()

        size = self._hardware.setting_size
        if size is not None and len(data) != size:
            raise GvLedLibError('%s is %d bytes, %s expects %d'
                                % (effect.__class__.__name__, len(data),
                                   self._hardware.name, size))
        return data


    def set_device(self, index: int, effect: GvEffect):
        """
        Apply an effect to a single peripheral

        :param index: The peripheral index
        :param effect: The new effect
        """
        if not 0 <= index < len(self._devices):
            raise IndexError('Peripheral %d must be between 0 and %d'
                             % (index, len(self._devices) - 1))
        if not isinstance(effect, GvEffect):
            raise TypeError('Not a peripheral effect: %r' % (effect,))

        self._api.led_save(index, self._serialize(effect))
        self._settings[index] = effect


    def set_all(self, effect: GvEffect):
        """
        Apply an effect to every peripheral. Does nothing when
        no peripherals are present.
        """
        if not isinstance(effect, GvEffect):
            raise TypeError('Not a peripheral effect: %r' % (effect,))

        if not self._devices:
            self._logger.info('No peripherals, ignoring %s', effect)
            return

        self._api.save(self._serialize(effect))
        self._settings = [effect] * len(self._devices)


    def __str__(self):
        return 'Peripherals(%s)' % ', '.join(d.name for d in self._devices)


    __repr__ = __str__


def open_peripherals(hardware: Hardware = None) -> Peripherals:
    """
    Load GvLedLib and enumerate peripherals

    :param hardware: SDK description, defaults to the packaged one
    :return: The initialized Peripherals
    """
    if hardware is None:
        hardware = Hardware.get_type(Hardware.Type.PERIPHERALS)

    return Peripherals(GvLedLib(load_library(hardware), hardware), hardware)
