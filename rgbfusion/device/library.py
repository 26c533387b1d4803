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
Native SDK loading.

The vendor SDKs are plain shared libraries. They are located using
the search paths from the hardware description and loaded with ctypes.
"""
import ctypes
import ctypes.util
import os

from rgbfusion.hardware import Hardware
from rgbfusion.log import Log, LOG_PROTOCOL_TRACE


class DeviceError(OSError):
    """
    Base class for failures reported by, or while talking to, an SDK
    """


class SdkNotFoundError(DeviceError):
    """
    The native library could not be located or loaded
    """


def _candidates(hardware: Hardware) -> list:
    candidates = []
    for path in hardware.search_paths or ():
        candidate = os.path.join(path, '%s.dll' % hardware.library)
        if os.path.isfile(candidate):
            candidates.append(candidate)

    found = ctypes.util.find_library(hardware.library)
    if found is not None:
        candidates.append(found)

    return candidates


def load_library(hardware: Hardware):
    """
    Locate and load the native library described by hardware

    :param hardware: The SDK description
    :raises SdkNotFoundError: if no candidate could be loaded
    :return: The loaded library handle
    """
    logger = Log.get('rgbfusion.sdk')

    # the vendor DLLs use the stdcall convention
    loader = getattr(ctypes, 'WinDLL', ctypes.CDLL)

    for candidate in _candidates(hardware):
        try:
            lib = loader(candidate)
            logger.debug('Loaded %s from %s', hardware.name, candidate)
            return lib
        except OSError as err:
            logger.debug('Unable to load %s: %s', candidate, err)

    raise SdkNotFoundError('Unable to find the %s library (%s)' % (hardware.name, hardware.library))


class NativeApi:
    """
    Common plumbing for the raw SDK wrappers: binds the configured
    entry points and checks their status codes.
    """
    error_class = DeviceError

    def __init__(self, lib, hardware: Hardware):
        self._lib = lib
        self._hardware = hardware
        self._logger = Log.get('rgbfusion.%s' % hardware.name.split()[0].lower())


    @property
    def hardware(self) -> Hardware:
        return self._hardware


    def _bind(self, name: str, restype, *argtypes):
        symbol = self._hardware.symbol(name)
        try:
            func = getattr(self._lib, symbol)
        except AttributeError:
            raise self.error_class('%s does not export %s' % (self._hardware.name, symbol)) from None

        func.restype = restype
        func.argtypes = list(argtypes)
        return func


    def _trace(self, msg, *args):
        self._logger.log(LOG_PROTOCOL_TRACE, msg, *args)


    def _check(self, name: str, status: int):
        self._trace('%s -> 0x%08x', name, status)
        if status != 0:
            raise self.error_class('%s failed with status 0x%08x' % (name, status))
