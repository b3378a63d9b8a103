"""Resolve the ic-wasm binary for the current host."""

from __future__ import annotations

import importlib
from pathlib import Path

from .config import LauncherConfig
from .locate import candidate_paths, locate
from .platforms import PlatformKey, lookup, supported_platforms, variant_module
from .utils import log


class LauncherError(Exception):
    """Base class for launcher errors."""

    def __init__(self, message: str) -> None:
        """Initialize the LauncherError."""
        self.message = message
        super().__init__(message)


class UnsupportedPlatformError(LauncherError):
    """The host platform has no variant package."""

    def __init__(self, platform_key: PlatformKey, supported: list[str]) -> None:
        """Initialize the UnsupportedPlatformError."""
        self.platform_key = platform_key
        self.supported = supported
        super().__init__(
            f"Unsupported platform: {platform_key}\n"
            f"Supported platforms: {', '.join(supported)}",
        )


class BinaryNotFoundError(LauncherError):
    """The variant is known but its binary is not on disk."""

    def __init__(
        self,
        platform_key: PlatformKey,
        variant: str | None,
        searched: list[Path],
    ) -> None:
        """Initialize the BinaryNotFoundError."""
        self.platform_key = platform_key
        self.variant = variant
        self.searched = searched
        lines = [f"Could not find ic-wasm binary for {platform_key}"]
        if variant:
            lines.append(f"Package {variant} may not have installed correctly.")
        lines.append(f"Searched paths: {', '.join(str(p) for p in searched)}")
        super().__init__("\n".join(lines))


_UNRESOLVED = object()


class BinaryResolver:
    """Resolve the binary once and remember the outcome."""

    def __init__(self, config: LauncherConfig | None = None) -> None:
        """Initialize the resolver."""
        self.config = config or LauncherConfig()
        self._resolution: Path | None | object = _UNRESOLVED

    @property
    def platform_key(self) -> PlatformKey:
        """The platform the binary is resolved for."""
        return self.config.platform_key

    @property
    def variant(self) -> str | None:
        """The variant package for the platform, if supported."""
        return lookup(self.platform_key)

    def search_paths(self) -> list[Path]:
        """Return every path that resolution looks at, in order."""
        if self.config.binary_path is not None:
            return [self.config.binary_path]
        if self.variant is None:
            return []
        return candidate_paths(
            self.variant,
            self.platform_key.os,
            self.config.package_dir,
            self.config.cwd,
        )

    def find_binary(self) -> Path | None:
        """Return the binary path, or None if it cannot be resolved."""
        if self._resolution is _UNRESOLVED:
            self._resolution = self._resolve()
        return self._resolution  # type: ignore[return-value]

    @property
    def binary_path(self) -> Path:
        """The binary path.

        Raises:
            UnsupportedPlatformError: The host platform is not supported.
            BinaryNotFoundError: No binary exists for the host platform.

        """
        binary = self.find_binary()
        if binary is not None:
            return binary
        if self.config.binary_path is None and self.variant is None:
            raise UnsupportedPlatformError(self.platform_key, supported_platforms())
        raise BinaryNotFoundError(self.platform_key, self.variant, self.search_paths())

    def _resolve(self) -> Path | None:
        override = self.config.binary_path
        if override is not None:
            log(f"Using binary from configuration: {override}", "debug")
            return override if override.exists() else None

        variant = self.variant
        if variant is None:
            log(f"No variant package for {self.platform_key}", "debug")
            return None

        binary = locate(
            variant,
            self.platform_key.os,
            self.config.package_dir,
            self.config.cwd,
        )
        if binary is None:
            binary = package_binary_path(variant)
        if binary is not None:
            log(f"Resolved {variant} binary: {binary}", "debug")
        return binary


def package_binary_path(variant: str) -> Path | None:
    """Return the ``binary_path`` exported by an installed variant package."""
    try:
        module = importlib.import_module(variant_module(variant))
    except Exception as e:  # noqa: BLE001
        log(f"Could not import variant package {variant}: {e}", "debug")
        return None
    binary = getattr(module, "binary_path", None)
    if binary and Path(binary).exists():
        return Path(binary)
    return None
