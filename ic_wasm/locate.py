"""Find a variant's binary among the places it can be installed.

The launcher can be installed in several layouts, and the binary ends up in
a different place for each of them. Candidates are checked in a fixed order
and the first one that exists wins:

1. global sibling: the variant package sits next to the launcher package in
   the same ``site-packages`` directory.
2. local nested: the variant is vendored inside the launcher package.
3. working directory: the variant is installed in the ``.venv`` of the
   current working directory.
"""

from __future__ import annotations

import os
import sysconfig
from pathlib import Path
from typing import Callable

from .platforms import variant_module

BINARY_NAME = "ic-wasm"
VENDOR_DIR = "_vendor"
VENV_DIR = ".venv"

CandidateBuilder = Callable[[str, str, Path, Path], Path]


def binary_filename(os_name: str) -> str:
    """Return the binary file name for an operating system."""
    return f"{BINARY_NAME}.exe" if os_name == "win32" else BINARY_NAME


def venv_site_packages(venv: Path) -> Path:
    """Return the ``site-packages`` directory of a virtualenv."""
    scheme = "nt" if os.name == "nt" else "posix_prefix"
    purelib = sysconfig.get_path(
        "purelib",
        scheme=scheme,
        vars={"base": str(venv), "platbase": str(venv)},
    )
    return Path(purelib)


def _global_sibling(variant: str, filename: str, package_dir: Path, _cwd: Path) -> Path:
    return package_dir.parent / variant_module(variant) / "bin" / filename


def _local_nested(variant: str, filename: str, package_dir: Path, _cwd: Path) -> Path:
    return package_dir / VENDOR_DIR / variant_module(variant) / "bin" / filename


def _working_directory(variant: str, filename: str, _package_dir: Path, cwd: Path) -> Path:
    site_packages = venv_site_packages(cwd / VENV_DIR)
    return site_packages / variant_module(variant) / "bin" / filename


CANDIDATE_BUILDERS: tuple[CandidateBuilder, ...] = (
    _global_sibling,
    _local_nested,
    _working_directory,
)


def candidate_paths(
    variant: str,
    os_name: str,
    package_dir: Path,
    cwd: Path,
) -> list[Path]:
    """Return the candidate binary paths in priority order."""
    filename = binary_filename(os_name)
    return [build(variant, filename, package_dir, cwd) for build in CANDIDATE_BUILDERS]


def locate(
    variant: str,
    os_name: str,
    package_dir: Path,
    cwd: Path,
) -> Path | None:
    """Return the first candidate path that exists, or None."""
    for path in candidate_paths(variant, os_name, package_dir, cwd):
        if path.exists():
            return path
    return None
