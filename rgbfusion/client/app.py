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
Command line dispatch.

Arguments are split into a generic part (verbosity, listing, help)
and one token group per target: the default group (all zones), one
group per -z/--zone option and one for --peripherals. Every group is
resolved to an effect before anything is written to the hardware.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from typing import Dict, List, Optional, Tuple

from rgbfusion.client.effect_parsers import (MOTHERBOARD_PARSERS, PERIPHERAL_PARSERS,
                                             UsageError, resolve_effect)
from rgbfusion.client.output import Output
from rgbfusion.log import Log
from rgbfusion.version import __version__


class _GenericArgumentParser(ArgumentParser):
    def error(self, message):
        raise UsageError(message)


class Targets(object):
    """
    Argument tokens grouped by the target they apply to
    """
    def __init__(self):
        self.default: List[str] = []
        self.zones: Dict[int, List[str]] = {}
        self.peripherals: Optional[List[str]] = None


    @property
    def has_motherboard(self) -> bool:
        return bool(self.default) or bool(self.zones)


    @property
    def has_peripherals(self) -> bool:
        return self.peripherals is not None


    def __bool__(self):
        return self.has_motherboard or self.has_peripherals


def _split_zone_option(token: str) -> Tuple[bool, Optional[str]]:
    """
    Recognize -z N, -zN, --zone N and --zone=N

    :return: (is a zone option, attached value if any)
    """
    if token in ('-z', '--zone'):
        return True, None
    if token.startswith('--zone='):
        return True, token[len('--zone='):]
    if token.startswith('-z') and not token.startswith('--'):
        return True, token[len('-z'):]
    return False, None


def _parse_zone(value: str) -> int:
    try:
        zone = int(value)
    except ValueError:
        raise UsageError('Invalid zone: %r' % value) from None

    if zone < 0:
        raise UsageError('Invalid zone: %d' % zone)

    return zone


def collect_targets(tokens: List[str]) -> Targets:
    """
    Group the non-generic arguments by target

    :raises UsageError: for a malformed, missing or repeated zone
    """
    targets = Targets()
    current = targets.default

    idx = 0
    while idx < len(tokens):
        token = tokens[idx]
        idx += 1

        if token == '--peripherals':
            # repeating --peripherals starts over
            targets.peripherals = []
            current = targets.peripherals
            continue

        is_zone, value = _split_zone_option(token)
        if not is_zone:
            current.append(token)
            continue

        if value is None:
            if idx >= len(tokens):
                raise UsageError('Missing zone number after %s' % token)
            value = tokens[idx]
            idx += 1

        zone = _parse_zone(value)
        if zone in targets.zones:
            raise UsageError('Zone %d specified more than once' % zone)

        targets.zones[zone] = []
        current = targets.zones[zone]

    return targets


class Application(object):
    """
    The rgbfusion command

    Devices are created through the given factories, at most once
    per run and only when the arguments need them.
    """
    def __init__(self, motherboard_factory, peripherals_factory, stdout=None, stderr=None):
        self._motherboard_factory = motherboard_factory
        self._peripherals_factory = peripherals_factory
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr

        self.out = Output(self._stdout)
        self.err = Output(self._stderr)

        self.parser = self._create_parser()


    def _create_parser(self) -> ArgumentParser:
        parser = _GenericArgumentParser(
            prog='rgbfusion',
            description='RGB control for GIGABYTE RGB Fusion motherboards and peripherals',
            formatter_class=RawDescriptionHelpFormatter,
            epilog=self._epilog(),
            add_help=False,
            allow_abbrev=False,
        )

        parser.add_argument('-?', '-h', '--help', action='store_true',
                            help='show this help message and exit')
        parser.add_argument('--version', action='store_true',
                            help='show the version and exit')
        parser.add_argument('-v', '--verbose', action='count', default=0,
                            help='increase output verbosity (repeatable)')
        parser.add_argument('-l', '--list', action='store_true',
                            help='list motherboard zones')
        parser.add_argument('--list-peripherals', action='store_true',
                            help='list peripherals')
        parser.add_argument('-la', '--list-all', action='store_true',
                            help='list peripherals and motherboard zones')
        parser.add_argument('--no-color', action='store_true',
                            help='disable colored output')

        return parser


    def _epilog(self) -> str:
        return """\
Targets:
  EFFECT                       Apply to all motherboard zones
  -z N, -zN, --zone[=]N EFFECT Apply to zone N only (repeatable)
  --peripherals EFFECT         Apply to all peripherals

Examples:
  rgbfusion static red                       All zones red
  rgbfusion -z 0 pulse blue 2 -z 1 off       Pulse zone 0, zone 1 off
  rgbfusion colorcycle --peripherals off     Cycle zones, peripherals off
  rgbfusion -la                              List peripherals and zones
"""


    def format_help(self) -> str:
        """
        Full help: generic options followed by every effect grammar
        """
        sections = [self.parser.format_help(), 'Motherboard effects:\n']
        sections.extend(parser.format_help() for parser in MOTHERBOARD_PARSERS)
        sections.append('Peripheral effects:\n')
        sections.extend(parser.format_help() for parser in PERIPHERAL_PARSERS)
        return '\n'.join(sections)


    def _print(self, text: str = ''):
        print(text, file=self._stdout)


    def run(self, args: List[str] = None) -> int:
        """
        Run the command

        :param args: Command line arguments (defaults to sys.argv[1:])
        :return: The exit code
        """
        if args is None:
            args = sys.argv[1:]

        try:
            return self._run(list(args))

        except KeyboardInterrupt:
            self._print()
            return 130

        except Exception as err:
            Log.get('rgbfusion.app').debug('Command failed', exc_info=True)
            print(self.format_help(), file=self._stderr)
            print(file=self._stderr)
            print(self.err.error('Error: %s' % err), file=self._stderr)
            return 1


    def _run(self, args: List[str]) -> int:
        opts, rest = self.parser.parse_known_args(args)

        if opts.no_color:
            self.out = Output(force_color=False)
            self.err = Output(force_color=False)
            Log.enable_color(False)

        Log.set_verbosity(opts.verbose)

        if opts.help:
            self._print(self.format_help())
            return 0

        if opts.version:
            self._print('rgbfusion %s' % __version__)
            return 0

        targets = collect_targets(rest)
        verbose = opts.verbose > 0

        list_peripherals = opts.list_peripherals or opts.list_all \
                or (verbose and targets.has_peripherals)
        list_zones = opts.list or opts.list_all \
                or (verbose and targets.has_motherboard)

        peripherals = None
        if list_peripherals or targets.has_peripherals:
            peripherals = self._peripherals_factory()
            if list_peripherals:
                self._list_peripherals(peripherals)

        motherboard = None
        if list_zones or targets.has_motherboard:
            motherboard = self._motherboard_factory()
            if list_zones:
                self._list_zones(motherboard)

        if not targets:
            return 0

        if targets.default and targets.zones:
            raise UsageError('Unexpected options "%s" before zone-specific options'
                             % ' '.join(targets.default))

        # resolve everything before touching the hardware
        default_effect = None
        if targets.default:
            result = resolve_effect(MOTHERBOARD_PARSERS, targets.default)
            if result is None:
                raise UsageError('No LED mode specified')
            default_effect = result.effect

        zone_effects = {}
        for zone, tokens in targets.zones.items():
            if zone >= motherboard.max_divisions:
                raise UsageError('Zone %d is out of range (0-%d)'
                                 % (zone, motherboard.max_divisions - 1))
            result = resolve_effect(MOTHERBOARD_PARSERS, tokens)
            if result is None:
                raise UsageError('No LED mode specified for zone %d' % zone)
            zone_effects[zone] = result.effect

        peripheral_effect = None
        if targets.has_peripherals:
            result = resolve_effect(PERIPHERAL_PARSERS, targets.peripherals)
            if result is None:
                raise UsageError('No Peripheral LED mode specified')
            peripheral_effect = result.effect

        if default_effect is not None:
            if verbose:
                self._print(self.out.kv('Set All', str(default_effect)))
            motherboard.set_all(default_effect)

        if zone_effects:
            for zone, effect in zone_effects.items():
                if verbose:
                    self._print(self.out.kv('Set zone %d' % zone, str(effect)))
                motherboard.set_zone(zone, effect)
            motherboard.apply(list(zone_effects))

        if peripheral_effect is not None:
            if verbose:
                self._print(self.out.kv('Set All Peripherals', str(peripheral_effect)))
            peripherals.set_all(peripheral_effect)

        return 0


    def _list_peripherals(self, peripherals):
        for idx, device_type in enumerate(peripherals.devices):
            self._print(self.out.kv('Peripheral %d' % idx, device_type.name))


    def _list_zones(self, motherboard):
        for idx, led_type in enumerate(motherboard.layout):
            self._print(self.out.kv('Zone %d' % idx, led_type.name))
