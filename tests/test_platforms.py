"""Tests for ic_wasm.platforms."""

from __future__ import annotations

import pytest

from ic_wasm.platforms import (
    VARIANTS,
    PlatformKey,
    current_platform,
    lookup,
    supported_platforms,
    variant_module,
)


def test_every_supported_platform_has_one_variant() -> None:
    """Each key maps to a single non-empty package name."""
    for key in supported_platforms():
        variant = lookup(key)
        assert isinstance(variant, str)
        assert variant
    assert len(set(VARIANTS.values())) == len(VARIANTS)


def test_unknown_platform_is_absent() -> None:
    assert lookup(PlatformKey("freebsd14", "x64")) is None
    assert lookup("linux-riscv64") is None


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        VARIANTS["linux-riscv64"] = "ic-wasm-linux-riscv64"  # type: ignore[index]


def test_supported_platforms_lists_all_keys() -> None:
    assert supported_platforms() == [
        "darwin-arm64",
        "darwin-x64",
        "linux-arm64",
        "linux-x64",
        "win32-x64",
    ]


@pytest.mark.parametrize(
    ("system", "machine", "expected"),
    [
        ("linux", "x86_64", "linux-x64"),
        ("linux", "aarch64", "linux-arm64"),
        ("darwin", "arm64", "darwin-arm64"),
        ("darwin", "x86_64", "darwin-x64"),
        ("win32", "AMD64", "win32-x64"),
        ("linux", "riscv64", "linux-riscv64"),
    ],
)
def test_current_platform(system: str, machine: str, expected: str) -> None:
    key = current_platform(system, machine)
    assert str(key) == expected
    assert key.os == system


def test_current_platform_reads_host(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("ic_wasm.platforms.sys.platform", "darwin")
    monkeypatch.setattr("ic_wasm.platforms.platform.machine", lambda: "arm64")
    assert current_platform() == PlatformKey("darwin", "arm64")


def test_variant_module() -> None:
    assert variant_module("ic-wasm-linux-x64") == "ic_wasm_linux_x64"
