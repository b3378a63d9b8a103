"""Run the resolved binary in place of the launcher."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .utils import log

logger = logging.getLogger(__name__)

# Exit code used when the launcher itself fails, mirroring the shell's
# "command not found".
LAUNCH_FAILURE_EXIT_CODE = 127


def exit_code(returncode: int) -> int:
    """Convert a child return code into a process exit code.

    A child killed by signal N has a return code of -N, which is reported
    as ``128 + N`` the way shells do.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def dispatch(binary_path: Path | str, args: Sequence[str]) -> int:
    """Run ``binary_path`` with ``args`` and return its exit code.

    The child inherits the launcher's standard streams and environment.
    Arguments are passed through as given, without a shell.
    """
    command = [str(binary_path), *args]
    logger.debug("Running %s", command)
    try:
        process = subprocess.Popen(command)  # noqa: S603
    except OSError as e:
        log(f"Error executing ic-wasm: {e}", "error")
        return LAUNCH_FAILURE_EXIT_CODE

    with process:
        while True:
            try:
                returncode = process.wait()
                break
            except KeyboardInterrupt:
                # The terminal sent SIGINT to the child as well; let it decide.
                logger.debug("Interrupted, waiting for ic-wasm to exit")
    return exit_code(returncode)
