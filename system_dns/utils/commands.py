"""
Read-only host command runner.

Platform providers that have no file to read query the host through its
configuration tools. Commands are run without a shell and always with a
timeout so a wedged configuration daemon cannot hang the caller.
"""

import logging
import subprocess
from typing import List

from ..exceptions import ConfigUnavailable

logger = logging.getLogger(__name__)


def run_command(args: List[str], timeout: float = 5.0) -> str:
    """
    Run a host command and return its standard output.

    Args:
        args: Command and arguments
        timeout: Seconds to wait before giving up

    Returns:
        Decoded standard output

    Raises:
        ConfigUnavailable: The command is missing, timed out or failed
    """
    logger.debug(f"Running {' '.join(args)} (timeout {timeout}s)")
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise ConfigUnavailable(f"{args[0]} not found") from e
    except subprocess.TimeoutExpired as e:
        raise ConfigUnavailable(f"{args[0]} timed out after {timeout}s") from e
    except OSError as e:
        raise ConfigUnavailable(f"Failed to run {args[0]}: {e}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise ConfigUnavailable(
            f"{' '.join(args)} exited with status {result.returncode}: {stderr}"
        )
    return result.stdout
