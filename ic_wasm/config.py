"""Configuration management for the ic-wasm launcher."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .platforms import PlatformKey, current_platform
from .utils import log

logger = logging.getLogger(__name__)

CONFIG_ENV = "IC_WASM_CONFIG"
BINARY_PATH_ENV = "IC_WASM_BINARY_PATH"
VERBOSE_ENV = "IC_WASM_VERBOSE"

_FILE_KEYS = ("binary_path", "verbose")
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LauncherConfig:
    """Configuration for the launcher and the install verifier."""

    package_dir: Path = field(default_factory=lambda: Path(__file__).resolve().parent)
    cwd: Path = field(default_factory=Path.cwd)
    platform_key: PlatformKey = field(default_factory=current_platform)
    binary_path: Path | None = None
    verbose: bool = False

    def update(self, data: Mapping[str, Any], source: str) -> None:
        """Apply the known keys of ``data``, warning about the rest."""
        for key, value in data.items():
            if key not in _FILE_KEYS:
                log(f"Ignoring unknown key '{key}' in {source}", "warning")
                continue
            if key == "binary_path":
                self.binary_path = Path(os.path.expanduser(str(value))) if value else None
            else:
                self.verbose = _as_bool(value)

    @classmethod
    def load_from_file(cls, config_path: str | Path) -> LauncherConfig:
        """Load configuration from a YAML file.

        A missing or invalid file is reported and the defaults are used.
        """
        config = cls()
        try:
            with open(config_path) as file:
                data = yaml.safe_load(file) or {}
        except FileNotFoundError:
            log(f"Configuration file not found: {config_path}", "warning")
            return config
        except (OSError, yaml.YAMLError) as e:
            log(f"Invalid configuration file {config_path}: {e}", "warning")
            return config

        if not isinstance(data, dict):
            log(f"Configuration file {config_path} must contain a mapping", "warning")
            return config

        config.update(data, str(config_path))
        return config

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LauncherConfig:
        """Build the configuration from defaults, the config file and the environment."""
        environ = os.environ if environ is None else environ
        config_path = environ.get(CONFIG_ENV)
        config = cls.load_from_file(config_path) if config_path else cls()

        overrides: dict[str, Any] = {}
        if environ.get(BINARY_PATH_ENV):
            overrides["binary_path"] = environ[BINARY_PATH_ENV]
        if VERBOSE_ENV in environ:
            overrides["verbose"] = environ[VERBOSE_ENV]
        config.update(overrides, "environment")
        logger.debug("Loaded launcher configuration: %s", config)
        return config


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES
