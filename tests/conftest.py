"""Configuration for pytest fixtures used in ic-wasm tests."""

from __future__ import annotations

import sys
from collections.abc import Generator
from pathlib import Path
from typing import Callable

import pytest

from ic_wasm.config import LauncherConfig
from ic_wasm.platforms import PlatformKey


@pytest.fixture(autouse=True)
def _forget_variant_packages() -> Generator[None, None, None]:
    """Drop fake variant packages imported by a test."""
    yield
    for name in [name for name in sys.modules if name.startswith("ic_wasm_")]:
        del sys.modules[name]


@pytest.fixture
def create_stub_binary() -> Callable[..., Path]:
    r"""Create an executable Python script that stands in for ic-wasm.

    Usage:
        binary = create_stub_binary(
            tmp_path / "bin" / "ic-wasm",
            body="import sys\nsys.exit(3)",
        )
    """

    def _create(path: Path, body: str = "", mode: int = 0o755) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!{sys.executable}\n{body}\n")
        path.chmod(mode)
        return path

    return _create


@pytest.fixture
def launcher_config(tmp_path: Path) -> LauncherConfig:
    """A config rooted in a fake site-packages for linux-x64."""
    site_packages = tmp_path / "site-packages"
    package_dir = site_packages / "ic_wasm"
    package_dir.mkdir(parents=True)
    cwd = tmp_path / "project"
    cwd.mkdir()
    return LauncherConfig(
        package_dir=package_dir,
        cwd=cwd,
        platform_key=PlatformKey("linux", "x64"),
    )
