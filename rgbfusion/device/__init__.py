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
from .gledapi import GLedApi, GLedApiError
from .gvledlib import GvLedLib, GvLedLibError
from .library import DeviceError, SdkNotFoundError, load_library
from .motherboard import Motherboard, open_motherboard
from .peripherals import Peripherals, open_peripherals
