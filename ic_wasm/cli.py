"""Command-line entry point: forward everything to the ic-wasm binary."""

from __future__ import annotations

import sys
from typing import Sequence

from .config import LauncherConfig
from .dispatch import LAUNCH_FAILURE_EXIT_CODE, dispatch
from .resolver import BinaryResolver, LauncherError
from .utils import log, setup_logging


def run(args: Sequence[str], resolver: BinaryResolver | None = None) -> int:
    """Resolve the binary, run it with ``args`` and return the exit code."""
    if resolver is None:
        config = LauncherConfig.from_env()
        setup_logging(config.verbose)
        resolver = BinaryResolver(config)

    try:
        binary = resolver.binary_path
    except LauncherError as e:
        for line in e.message.splitlines():
            log(line, "error")
        return LAUNCH_FAILURE_EXIT_CODE

    return dispatch(binary, args)


def main(argv: Sequence[str] | None = None) -> None:
    """Main function, exits with the status of the ic-wasm binary."""
    args = sys.argv[1:] if argv is None else list(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
