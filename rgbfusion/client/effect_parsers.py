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
Effect argument parsers.

Every parser is identified by a keyword ("static", "pulse", ...) and
owns an argparse grammar for the values that follow it. A parser
only looks at the tokens between its keyword and the next keyword
of the same family, so grammars never steal each other's values.
"""

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from typing import ClassVar, List, NamedTuple, Optional, Sequence, Tuple

from rgbfusion.colorlib import to_rgb
from rgbfusion.effects import (BaseEffect, ColorCycle, DIGITAL_PATTERNS, DigitalPattern,
                               Flash, Off, Pulse, StaticColor)
from rgbfusion.log import Log
from rgbfusion.peripheral_effects import GvColorCycle, GvOff, GvStaticColor


class UsageError(ValueError):
    """
    The command line is invalid
    """


class EffectArgumentError(UsageError):
    """
    An effect keyword was found but its values are malformed
    """


class _EffectArgumentParser(ArgumentParser):
    """
    ArgumentParser which raises instead of exiting the process
    """
    def error(self, message):
        raise EffectArgumentError('%s: %s' % (self.prog, message))


class ParseResult(NamedTuple):
    """
    A matched effect, and the tokens the parser did not consume
    """
    effect: BaseEffect
    remaining: List[str]


# argparse uses the __name__ of type functions in its error messages
def color(value: str):
    return to_rgb(value)


def _add_brightness(parser: ArgumentParser, default: int = 100):
    parser.add_argument('-b', '--brightness', type=int, default=default, metavar='PERCENT',
                        help='brightness, 0-100 (default: %(default)s)')


class EffectParser(ABC):
    """
    Base class for effect parsers.

    Subclasses must implement:
    - keyword: The token which selects this effect
    - help: Short help text
    - configure_parser(): Add the effect's arguments
    - build(): Create the effect from parsed arguments
    """

    keyword: ClassVar[str]
    help: ClassVar[str]

    def __init__(self):
        self.parser = _EffectArgumentParser(
            prog=self.keyword,
            description=self.help,
            formatter_class=RawDescriptionHelpFormatter,
            add_help=False,
            allow_abbrev=False,
        )
        self.configure_parser(self.parser)

    @abstractmethod
    def configure_parser(self, parser: ArgumentParser) -> None:
        """Add effect-specific arguments to the parser."""
        ...

    @abstractmethod
    def build(self, args: Namespace) -> BaseEffect:
        """Create the effect. May raise ValueError for invalid values."""
        ...

    def _find(self, tokens: Sequence[str]) -> Optional[int]:
        for idx, token in enumerate(tokens):
            if token.lower() == self.keyword:
                return idx
        return None

    def try_parse(self, tokens: Sequence[str], keywords=()) -> Optional[ParseResult]:
        """
        Look for this parser's keyword and parse the values after it.

        :param tokens: The arguments for one target
        :param keywords: Keywords of the whole parser family; parsing
                         stops at the first one after our own keyword

        :raises EffectArgumentError: if the values are malformed
        :return: The result, or None if the keyword is absent
        """
        start = self._find(tokens)
        if start is None:
            return None

        end = start + 1
        while end < len(tokens) and tokens[end].lower() not in keywords:
            end += 1

        args, unknown = self.parser.parse_known_args(list(tokens[start + 1:end]))

        try:
            effect = self.build(args)
        except ValueError as err:
            raise EffectArgumentError('%s: %s' % (self.keyword, err)) from err

        return ParseResult(effect, [*tokens[:start], *unknown, *tokens[end:]])

    def format_help(self) -> str:
        return self.parser.format_help()


# ─────────────────────────────────────────────────────────────────────────────
# Motherboard effects
# ─────────────────────────────────────────────────────────────────────────────


class StaticColorParser(EffectParser):
    keyword = 'static'
    help = 'set a static color'
    effect_class = StaticColor

    def configure_parser(self, parser):
        parser.add_argument('color', type=color, metavar='COLOR',
                            help='color name or hexcode')
        _add_brightness(parser)

    def build(self, args):
        return self.effect_class(args.color, brightness=args.brightness)


class ColorCycleParser(EffectParser):
    keyword = 'colorcycle'
    help = 'cycle through the spectrum'

    def configure_parser(self, parser):
        parser.add_argument('seconds', type=float, nargs='?', default=1.0, metavar='SECONDS',
                            help='seconds per color (default: %(default)s)')
        _add_brightness(parser)

    def build(self, args):
        return ColorCycle(seconds=args.seconds, brightness=args.brightness)


class PulseParser(EffectParser):
    keyword = 'pulse'
    help = 'fade a color in and out'

    def configure_parser(self, parser):
        parser.add_argument('color', type=color, metavar='COLOR',
                            help='color name or hexcode')
        parser.add_argument('speed', type=float, nargs='?', default=1.0, metavar='SECONDS',
                            help='length of one pulse (default: %(default)s)')
        _add_brightness(parser)
        parser.add_argument('--min-brightness', type=int, default=0, metavar='PERCENT',
                            help='brightness between pulses (default: %(default)s)')

    def build(self, args):
        return Pulse(args.color, speed=args.speed, brightness=args.brightness,
                     min_brightness=args.min_brightness)


class FlashParser(EffectParser):
    keyword = 'flash'
    help = 'flash a color'

    def configure_parser(self, parser):
        parser.add_argument('color', type=color, metavar='COLOR',
                            help='color name or hexcode')
        parser.add_argument('-n', '--count', type=int, default=1, metavar='COUNT',
                            help='flashes per interval, 1-10 (default: %(default)s)')
        parser.add_argument('-i', '--interval', type=float, default=2.0, metavar='SECONDS',
                            help='seconds between flash groups (default: %(default)s)')
        _add_brightness(parser)

    def build(self, args):
        return Flash(args.color, count=args.count, interval=args.interval,
                     brightness=args.brightness)


class DigitalParser(EffectParser):
    help = 'digital LED pattern'

    def __init__(self, pattern: str):
        self.pattern = pattern
        self.keyword = 'digital-%s' % pattern.lower()
        self.help = 'digital LED pattern %s' % pattern
        super(DigitalParser, self).__init__()

    def configure_parser(self, parser):
        parser.add_argument('color', type=color, nargs='?', default=None, metavar='COLOR',
                            help='color name or hexcode (default: pattern palette)')
        parser.add_argument('-s', '--speed', type=float, default=1.0, metavar='SECONDS',
                            help='seconds per step (default: %(default)s)')
        _add_brightness(parser)

    def build(self, args):
        return DigitalPattern(self.pattern, color=args.color, speed=args.speed,
                              brightness=args.brightness)


class OffParser(EffectParser):
    keyword = 'off'
    help = 'turn the LEDs off'
    effect_class = Off

    def configure_parser(self, parser):
        pass

    def build(self, args):
        return self.effect_class()


# ─────────────────────────────────────────────────────────────────────────────
# Peripheral effects
# ─────────────────────────────────────────────────────────────────────────────


class GvOffParser(OffParser):
    effect_class = GvOff


class GvStaticColorParser(StaticColorParser):
    effect_class = GvStaticColor


class GvColorCycleParser(EffectParser):
    keyword = 'colorcycle'
    help = 'cycle through the spectrum'

    def configure_parser(self, parser):
        parser.add_argument('speed', type=int, nargs='?', default=5, metavar='SPEED',
                            help='0 (slow) to 9 (fast) (default: %(default)s)')
        _add_brightness(parser)

    def build(self, args):
        return GvColorCycle(speed=args.speed, brightness=args.brightness)


# Priority order, first match wins
MOTHERBOARD_PARSERS: Tuple[EffectParser, ...] = (
    StaticColorParser(),
    ColorCycleParser(),
    PulseParser(),
    FlashParser(),
    *(DigitalParser(pattern) for pattern in DIGITAL_PATTERNS),
    OffParser(),
)

PERIPHERAL_PARSERS: Tuple[EffectParser, ...] = (
    GvOffParser(),
    GvStaticColorParser(),
    GvColorCycleParser(),
)


def resolve_effect(parsers: Sequence[EffectParser], tokens: Sequence[str]) -> Optional[ParseResult]:
    """
    Try each parser in order and return the first match

    :param parsers: Parsers in priority order
    :param tokens: The arguments for one target

    :raises EffectArgumentError: if the matching parser rejects its values
    :return: The result, or None if no parser matched
    """
    keywords = frozenset(parser.keyword for parser in parsers)
    for parser in parsers:
        result = parser.try_parse(tokens, keywords)
        if result is not None:
            if result.remaining:
                Log.get('rgbfusion.parser').warning(
                    '%s: ignoring unrecognized arguments: %s',
                    parser.keyword, ' '.join(result.remaining))
            return result

    return None
