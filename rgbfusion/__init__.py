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
Command-line control for GIGABYTE RGB Fusion motherboard and peripheral LEDs.
"""
from .version import __version__
