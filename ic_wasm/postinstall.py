"""Post-install check that the right platform binary was installed.

Run once after installation (``ic-wasm-postinstall``). It never fails the
installation: every outcome, including an unexpected error, exits with 0.
"""

from __future__ import annotations

import enum
import importlib.util
import sys
from pathlib import Path

from rich.panel import Panel
from rich.text import Text

from .config import LauncherConfig
from .platforms import supported_platforms, variant_module
from .resolver import BinaryResolver
from .utils import console, log, setup_logging

REINSTALL_COMMAND = "pip install --force-reinstall ic-wasm"


class InstallStatus(enum.Enum):
    """Outcome of the install check."""

    OK = "ok"
    UNSUPPORTED_PLATFORM = "unsupported_platform"
    BINARY_NOT_FOUND = "binary_not_found"
    PACKAGE_NOT_FOUND = "package_not_found"
    CONFIGURED_BINARY_NOT_FOUND = "configured_binary_not_found"


def make_executable(binary: Path) -> bool:
    """Add execute permissions to ``binary``, ignoring permission errors."""
    try:
        binary.chmod(binary.stat().st_mode | 0o755)
    except OSError as e:
        # Some environments refuse chmod; the binary may be executable already.
        log(f"Could not set execute permission on {binary}: {e}", "debug")
        return False
    return True


def _report(title: str, lines: list[str], style: str) -> None:
    body = Text("\n".join(lines))
    console.print(Panel(body, title=title, title_align="left", border_style=style, expand=False))


def _report_unsupported(key: str) -> None:
    lines = [f"Unsupported platform: {key}", "", "Supported platforms:"]
    lines += [f"  - {platform}" for platform in supported_platforms()]
    _report("⚠️  WARNING", lines, "yellow")


def _report_success(key: str) -> None:
    lines = [
        "ic-wasm installed successfully!",
        "",
        f"Platform: {key}",
        "",
        "Usage:",
        "  $ ic-wasm --help",
    ]
    _report("✅ ic-wasm", lines, "green")


def _report_missing(key: str, variant: str, *, package_installed: bool) -> None:
    headline = "Binary not found" if package_installed else "Platform package not found"
    lines = [
        f"WARNING: {headline}",
        "",
        f"Platform: {key}",
        f"Package: {variant}",
        "",
        "The platform-specific package may not have installed",
        "correctly. Try reinstalling:",
        f"  $ {REINSTALL_COMMAND}",
    ]
    _report("⚠️  WARNING", lines, "yellow")


def _report_configured_missing(key: str, binary: Path) -> None:
    lines = [
        "WARNING: Configured binary not found",
        "",
        f"Platform: {key}",
        f"Binary path: {binary}",
        "",
        "Check IC_WASM_BINARY_PATH or binary_path in the",
        "IC_WASM_CONFIG file.",
    ]
    _report("⚠️  WARNING", lines, "yellow")


def verify_install(config: LauncherConfig | None = None) -> InstallStatus:
    """Check the installed binary, fix its permissions and print a report."""
    resolver = BinaryResolver(config)
    key = str(resolver.platform_key)
    variant = resolver.variant

    if variant is None and resolver.config.binary_path is None:
        _report_unsupported(key)
        return InstallStatus.UNSUPPORTED_PLATFORM

    binary = resolver.find_binary()
    if binary is not None:
        make_executable(binary)
        _report_success(key)
        return InstallStatus.OK

    configured = resolver.config.binary_path
    if configured is not None:
        _report_configured_missing(key, configured)
        return InstallStatus.CONFIGURED_BINARY_NOT_FOUND

    package_installed = importlib.util.find_spec(variant_module(variant)) is not None
    _report_missing(key, variant, package_installed=package_installed)
    if package_installed:
        return InstallStatus.BINARY_NOT_FOUND
    return InstallStatus.PACKAGE_NOT_FOUND


def main() -> None:
    """Run the install check and always exit successfully."""
    try:
        config = LauncherConfig.from_env()
        setup_logging(config.verbose)
        verify_install(config)
    except Exception as e:  # noqa: BLE001
        log(f"Could not verify the ic-wasm installation: {e}", "warning")
    sys.exit(0)


if __name__ == "__main__":
    main()
