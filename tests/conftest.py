# rgbfusion test configuration and shared fixtures
from __future__ import annotations

import pytest

from rgbfusion.device import Motherboard, Peripherals
from rgbfusion.hardware import Hardware
from rgbfusion.types import DeviceType, LedType

DEFAULT_LAYOUT = (LedType.RGB, LedType.RGB, LedType.DIGITAL, LedType.MONOCOLOR)
DEFAULT_DEVICES = (DeviceType.MOUSE, DeviceType.KEYBOARD)


# ─────────────────────────────────────────────────────────────────────────────
# Fake SDK wrappers
# ─────────────────────────────────────────────────────────────────────────────


class FakeGLedApi:
    """Stands in for the GLedApi wrapper, recording every call."""

    def __init__(self, hardware, layout=DEFAULT_LAYOUT, version="1.0.0", journal=None):
        self.hardware = hardware
        self.layout = bytes(int(x) for x in layout)
        self.max_division = len(self.layout)
        self.version = version
        self.journal = journal if journal is not None else []
        self.writes = []
        self.applied = []

    def get_sdk_version(self):
        return self.version

    def initialize(self):
        self.journal.append(("motherboard", "initialize"))

    def get_max_division(self):
        return self.max_division

    def get_led_layout(self, divisions):
        return self.layout[:divisions]

    def set_led_data(self, data):
        self.journal.append(("motherboard", "set_led_data"))
        self.writes.append(data)

    def apply(self, mask):
        self.journal.append(("motherboard", "apply", mask))
        self.applied.append(mask)


class FakeGvLedLib:
    """Stands in for the GvLedLib wrapper, recording every call."""

    def __init__(self, hardware, devices=DEFAULT_DEVICES, journal=None):
        self.hardware = hardware
        self.devices = [int(x) for x in devices]
        self.journal = journal if journal is not None else []
        self.saved = []

    def initialize(self):
        self.journal.append(("peripherals", "initialize"))
        return list(self.devices)

    def save(self, data):
        self.led_save(-1, data)

    def led_save(self, index, data):
        self.journal.append(("peripherals", "save", index))
        self.saved.append((index, data))


# ─────────────────────────────────────────────────────────────────────────────
# Hardware fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def motherboard_hw():
    """The packaged GLedApi description."""
    return Hardware.get_type(Hardware.Type.MOTHERBOARD)


@pytest.fixture
def peripherals_hw():
    """The packaged GvLedLib description."""
    return Hardware.get_type(Hardware.Type.PERIPHERALS)


# ─────────────────────────────────────────────────────────────────────────────
# Device fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def journal():
    """Shared, ordered record of calls made to both fake SDKs."""
    return []


@pytest.fixture
def gled_api(motherboard_hw, journal):
    """Fake GLedApi with a four division layout."""
    return FakeGLedApi(motherboard_hw, journal=journal)


@pytest.fixture
def gvled_lib(peripherals_hw, journal):
    """Fake GvLedLib with a mouse and a keyboard."""
    return FakeGvLedLib(peripherals_hw, journal=journal)


@pytest.fixture
def motherboard(gled_api):
    return Motherboard(gled_api)


@pytest.fixture
def peripherals(gvled_lib):
    return Peripherals(gvled_lib)


@pytest.fixture
def make_gled_api(motherboard_hw, journal):
    """Factory for fake GLedApi instances with a custom layout or version."""

    def _make(**kwargs):
        kwargs.setdefault("journal", journal)
        return FakeGLedApi(motherboard_hw, **kwargs)

    return _make


@pytest.fixture
def make_gvled_lib(peripherals_hw, journal):
    """Factory for fake GvLedLib instances with a custom device list."""

    def _make(**kwargs):
        kwargs.setdefault("journal", journal)
        return FakeGvLedLib(peripherals_hw, **kwargs)

    return _make
