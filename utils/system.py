"""System command helpers for terminal queries.

Runs tput/stty style commands without a shell and cleans values
before they reach log output.
"""

import logging
import re
import shutil
import subprocess
from typing import Any

import config

logger = logging.getLogger(__name__)

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")
_LOG_VALUE_MAX = 200


def run_command(cmd: list[str], env: dict[str, str] | None = None) -> str | None:
    """Run a command and return its stripped stdout.

    Never uses shell=True. The command is killed after
    config.TIMEOUT_SECONDS.

    Args:
        cmd: Command as list (e.g., ["tput", "cols"])
        env: Environment for the child process only (the parent's
            os.environ is never modified)

    Returns:
        Command output (stripped), or None if the command failed,
        timed out or could not be started.
    """
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=config.TIMEOUT_SECONDS,
            check=False,
            shell=False,
            env=env,
        )
    except subprocess.TimeoutExpired:
        logger.debug("Command timed out: %s", sanitize_for_log(" ".join(cmd)))
        return None
    except (OSError, ValueError) as e:
        logger.debug("Command failed to start: %s (%s)", sanitize_for_log(" ".join(cmd)), e)
        return None

    if result.returncode != 0:
        logger.debug("Command exited with %d: %s", result.returncode, sanitize_for_log(" ".join(cmd)))
        return None

    return result.stdout.strip()


def command_exists(cmd: str) -> bool:
    """Check if command exists in PATH."""
    return shutil.which(cmd) is not None


def sanitize_for_log(value: Any) -> str:
    """Make a value safe to embed in a single log line.

    Line breaks become spaces, ANSI color codes and other control
    characters are dropped, and the result is cut to 200 characters.
    """
    text = str(value).replace("\n", " ").replace("\r", " ")
    text = _ANSI_ESCAPE.sub("", text)
    text = "".join(c for c in text if c.isprintable() or c.isspace())

    if len(text) > _LOG_VALUE_MAX:
        text = text[: _LOG_VALUE_MAX - 3] + "..."

    return text
