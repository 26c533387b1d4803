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
"""Tests for the ctypes SDK wrappers and library loading."""

from __future__ import annotations

import ctypes
import ctypes.util
from types import SimpleNamespace

import pytest

from rgbfusion.device import (
    GLedApi,
    GLedApiError,
    GvLedLib,
    GvLedLibError,
    SdkNotFoundError,
    load_library,
)
from rgbfusion.hardware import Hardware

# ─────────────────────────────────────────────────────────────────────────────
# Fake native libraries
#
# Plain functions stand in for exported symbols; the wrappers set
# restype/argtypes on whatever they look up.
# ─────────────────────────────────────────────────────────────────────────────


def gledapi_lib(calls, version=b"1.0.0", layout=b"\x02\x03", status=0):
    def get_sdk_version(buf, size):
        calls.append(("GetSdkVersion", size))
        buf.value = version
        return status

    def init_api():
        calls.append(("InitAPI",))
        return status

    def get_max_division():
        return len(layout)

    def get_led_layout(buf, size):
        for idx, value in enumerate(layout[:size]):
            buf[idx] = value
        return status

    def set_led_data(buf, size):
        calls.append(("SetLedData", bytes(buf), size))
        return status

    def apply(mask):
        calls.append(("Apply", mask))
        return status

    return SimpleNamespace(
        dllexp_GetSdkVersion=get_sdk_version,
        dllexp_InitAPI=init_api,
        dllexp_GetMaxDivision=get_max_division,
        dllexp_GetLedLayout=get_led_layout,
        dllexp_SetLedData=set_led_data,
        dllexp_Apply=apply,
    )


def gvledlib_lib(calls, devices=(0x2001, 0x3001), count=None, status=0):
    def initial(num, types):
        num.value = len(devices) if count is None else count
        for idx, value in enumerate(devices):
            types[idx] = value
        return status

    def save(index, buf):
        calls.append(("GvLedSave", index, bytes(buf)))
        return status

    return SimpleNamespace(dllexp_GvLedInitial=initial, dllexp_GvLedSave=save)


# ─────────────────────────────────────────────────────────────────────────────
# GLedApi
# ─────────────────────────────────────────────────────────────────────────────


class TestGLedApi:
    """Tests for the GLedApi binding."""

    def test_binds_configured_symbols(self, motherboard_hw):
        lib = gledapi_lib([])
        GLedApi(lib, motherboard_hw)
        assert lib.dllexp_Apply.restype is ctypes.c_uint32
        assert lib.dllexp_Apply.argtypes == [ctypes.c_int]

    def test_sdk_version(self, motherboard_hw):
        calls = []
        api = GLedApi(gledapi_lib(calls), motherboard_hw)
        assert api.get_sdk_version() == "1.0.0"
        assert calls == [("GetSdkVersion", 64)]

    def test_layout(self, motherboard_hw):
        api = GLedApi(gledapi_lib([]), motherboard_hw)
        assert api.get_max_division() == 2
        assert api.get_led_layout(2) == b"\x02\x03"

    def test_set_led_data_and_apply(self, motherboard_hw):
        calls = []
        api = GLedApi(gledapi_lib(calls), motherboard_hw)
        api.set_led_data(b"\x01" * 32)
        api.apply(0b11)
        assert calls == [("SetLedData", b"\x01" * 32, 32), ("Apply", 3)]

    def test_error_status(self, motherboard_hw):
        api = GLedApi(gledapi_lib([], status=0x10), motherboard_hw)
        with pytest.raises(GLedApiError, match="InitAPI failed with status 0x00000010"):
            api.initialize()

    def test_missing_symbol(self, motherboard_hw):
        lib = gledapi_lib([])
        del lib.dllexp_Apply
        with pytest.raises(GLedApiError, match="dllexp_Apply"):
            GLedApi(lib, motherboard_hw)


# ─────────────────────────────────────────────────────────────────────────────
# GvLedLib
# ─────────────────────────────────────────────────────────────────────────────


class TestGvLedLib:
    """Tests for the GvLedLib binding."""

    def test_initialize(self, peripherals_hw):
        api = GvLedLib(gvledlib_lib([]), peripherals_hw)
        assert api.initialize() == [0x2001, 0x3001]

    def test_initialize_bad_count(self, peripherals_hw):
        api = GvLedLib(gvledlib_lib([], count=99), peripherals_hw)
        with pytest.raises(GvLedLibError, match="99 devices"):
            api.initialize()

    def test_save_addresses_all_devices(self, peripherals_hw):
        calls = []
        api = GvLedLib(gvledlib_lib(calls), peripherals_hw)
        api.save(b"\x02" * 24)
        api.led_save(1, b"\x03" * 24)
        assert calls == [("GvLedSave", -1, b"\x02" * 24), ("GvLedSave", 1, b"\x03" * 24)]

    def test_error_status(self, peripherals_hw):
        api = GvLedLib(gvledlib_lib([], status=1), peripherals_hw)
        with pytest.raises(GvLedLibError):
            api.save(bytes(24))


# ─────────────────────────────────────────────────────────────────────────────
# Library loading
# ─────────────────────────────────────────────────────────────────────────────


class TestLoadLibrary:
    """Tests for locating the native libraries."""

    @pytest.fixture(autouse=True)
    def no_system_library(self, monkeypatch):
        monkeypatch.setattr(ctypes.util, "find_library", lambda name: None)

    def test_not_found(self, tmp_path):
        hw = Hardware(name="Test", library="NoSuchLib", search_paths=(str(tmp_path),))
        with pytest.raises(SdkNotFoundError, match="NoSuchLib"):
            load_library(hw)

    def test_found_in_search_path(self, tmp_path, monkeypatch):
        (tmp_path / "TestLib.dll").write_bytes(b"")
        loaded = []

        def loader(path):
            loaded.append(path)
            return "handle"

        monkeypatch.setattr(ctypes, "WinDLL", loader, raising=False)
        hw = Hardware(name="Test", library="TestLib", search_paths=("/nonexistent", str(tmp_path)))

        assert load_library(hw) == "handle"
        assert loaded == [str(tmp_path / "TestLib.dll")]

    def test_load_failure(self, tmp_path, monkeypatch):
        (tmp_path / "TestLib.dll").write_bytes(b"")

        def loader(path):
            raise OSError("bad image")

        monkeypatch.setattr(ctypes, "WinDLL", loader, raising=False)
        hw = Hardware(name="Test", library="TestLib", search_paths=(str(tmp_path),))

        with pytest.raises(SdkNotFoundError):
            load_library(hw)
