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
CLI main entry point.

Run with:
    python -m rgbfusion.client.main
    or via the 'rgbfusion' console script
"""

import sys

from argcomplete import autocomplete

from rgbfusion.client.app import Application
from rgbfusion.device import open_motherboard, open_peripherals


def main(args=None) -> int:
    """
    Main CLI entry point.

    :param args: Command line arguments (defaults to sys.argv[1:])
    :return: Exit code
    """
    app = Application(open_motherboard, open_peripherals, sys.stdout, sys.stderr)

    autocomplete(app.parser)

    return app.run(args)


def cli_entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
