"""Host platform detection and the platform to variant package table."""

from __future__ import annotations

import platform
import sys
from types import MappingProxyType
from typing import NamedTuple

# Host machine names mapped onto the architecture names used by the variants.
ARCH_ALIASES = MappingProxyType(
    {
        "x86_64": "x64",
        "amd64": "x64",
        "aarch64": "arm64",
        "arm64": "arm64",
    },
)

VARIANTS = MappingProxyType(
    {
        "darwin-arm64": "ic-wasm-darwin-arm64",
        "darwin-x64": "ic-wasm-darwin-x64",
        "linux-arm64": "ic-wasm-linux-arm64",
        "linux-x64": "ic-wasm-linux-x64",
        "win32-x64": "ic-wasm-win32-x64",
    },
)


class PlatformKey(NamedTuple):
    """Operating system and CPU architecture of a host."""

    os: str
    arch: str

    def __str__(self) -> str:
        """Return the ``{os}-{arch}`` lookup key."""
        return f"{self.os}-{self.arch}"


def current_platform(
    system: str | None = None,
    machine: str | None = None,
) -> PlatformKey:
    """Detect the current platform and architecture."""
    os_name = sys.platform if system is None else system
    machine = (platform.machine() if machine is None else machine).lower()
    return PlatformKey(os_name, ARCH_ALIASES.get(machine, machine))


def lookup(key: PlatformKey | str) -> str | None:
    """Return the variant package for ``key``, or None if unsupported."""
    return VARIANTS.get(str(key))


def supported_platforms() -> list[str]:
    """Return all supported platform keys."""
    return sorted(VARIANTS)


def variant_module(variant: str) -> str:
    """Return the import name of a variant package."""
    return variant.replace("-", "_")
