"""ic-wasm - platform launcher for the ic-wasm binary.

The ``ic-wasm`` command is a thin launcher. The real executable ships in one
platform-specific package per operating system and CPU architecture
(``ic-wasm-linux-x64``, ``ic-wasm-darwin-arm64``, ...). The launcher picks
the package matching the host, finds its binary and runs it, passing
arguments, standard streams and the exit status straight through.

Programmatic use::

    import ic_wasm

    ic_wasm.binary_path        # Path, raises if it cannot be resolved
    ic_wasm.find_binary_path() # Path or None
"""

from __future__ import annotations

import functools
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from . import cli, config, dispatch, locate, platforms, postinstall, resolver, utils
from .cli import main
from .config import LauncherConfig
from .dispatch import LAUNCH_FAILURE_EXIT_CODE
from .platforms import PlatformKey, current_platform, lookup, supported_platforms
from .resolver import (
    BinaryNotFoundError,
    BinaryResolver,
    LauncherError,
    UnsupportedPlatformError,
)

try:
    __version__ = version("ic-wasm")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"


@functools.lru_cache(maxsize=None)
def default_resolver() -> BinaryResolver:
    """Return the resolver shared by the module-level accessors."""
    return BinaryResolver(LauncherConfig.from_env())


def get_binary_path() -> Path:
    """Return the binary path, raising a LauncherError if it cannot be resolved."""
    return default_resolver().binary_path


def find_binary_path() -> Path | None:
    """Return the binary path, or None if it cannot be resolved."""
    return default_resolver().find_binary()


def __getattr__(name: str) -> Any:
    if name == "binary_path":
        return get_binary_path()
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "LAUNCH_FAILURE_EXIT_CODE",
    "BinaryNotFoundError",
    "BinaryResolver",
    "LauncherConfig",
    "LauncherError",
    "PlatformKey",
    "UnsupportedPlatformError",
    "cli",
    "config",
    "current_platform",
    "default_resolver",
    "dispatch",
    "find_binary_path",
    "get_binary_path",
    "locate",
    "lookup",
    "main",
    "platforms",
    "postinstall",
    "resolver",
    "supported_platforms",
    "utils",
]
