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

# pylint: disable=invalid-name, no-member

import os

from enum import Enum, IntEnum

from .config import Configuration


class Quirks(IntEnum):
    """
    Various "quirks" that are found across SDK releases.
    """

    # SetLedData must be called twice before Apply, otherwise some
    # divisions keep their previous setting
    DOUBLE_WRITE = 1


BaseHardware = Configuration.create("BaseHardware", [ \
    ('name', str),
    ('library', str),
    ('search_paths', tuple),
    ('symbols', dict),
    ('sdk_version', str),
    ('quirks', Quirks),
    ('setting_size', int),
    ('max_devices', int)])


class Hardware(BaseHardware):
    """
    Static description of a native lighting SDK

    Loaded by Configuration from YAML. Children describe specific
    SDK releases and inherit everything they don't override.
    """
    class Type(Enum):
        MOTHERBOARD = 'Motherboard'
        PERIPHERALS = 'Peripherals'


    def has_quirk(self, *quirks) -> bool:
        """
        True if quirk is required for the SDK

        :param: quirks The quirks to check (varargs)

        :return: True if the quirk is required
        """
        if self.quirks is None:
            return False

        for quirk in quirks:
            if isinstance(self.quirks, (list, tuple)) and quirk in self.quirks:
                return True
            if self.quirks == quirk:
                return True

        return False


    def symbol(self, name: str) -> str:
        """
        Get the exported name of an SDK entry point

        :param name: The logical name, e.g. "apply"
        :return: The symbol exported by the library
        """
        symbols = self.symbols or {}
        if name not in symbols:
            raise KeyError('No symbol configured for %s in %s' % (name, self.name))
        return symbols[name]


    def for_version(self, sdk_version: str) -> 'Hardware':
        """
        Select the entry describing the given SDK release

        Falls back to this entry if no child matches.

        :param sdk_version: Version string reported by the SDK
        :return: The most specific matching entry
        """
        if sdk_version is not None:
            result = self.search('sdk_version', sdk_version.strip())
            if result:
                return result[-1]

        return self


    @classmethod
    def get_type(cls, hw_type) -> 'Hardware':
        if hw_type is None:
            return None

        config_path = os.path.join(os.path.dirname(__file__), 'data')
        yaml_path = os.path.join(config_path, '%s.yaml' % hw_type.name.lower())

        config = cls.load_yaml(yaml_path)
        assert config is not None

        return config
