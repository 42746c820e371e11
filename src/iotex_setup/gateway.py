"""OpenClaw command preflight and gateway restart."""

from __future__ import annotations

import logging
import shutil
import subprocess
import time

from .constants import OPENCLAW_COMMAND, OPENCLAW_INSTALL_HINT, RESTART_ARGS
from .errors import MissingDependencyError, RestartFailedError
from .logging import log_event


def require_command(name: str, install_hint: str) -> str:
    """Return the resolved executable path for name.

    Raises:
        MissingDependencyError: If name is not on PATH
    """
    path = shutil.which(name)
    if path is None:
        raise MissingDependencyError(name, install_hint)
    return path


def require_openclaw() -> str:
    return require_command(OPENCLAW_COMMAND, f"Install it first: {OPENCLAW_INSTALL_HINT}")


def restart_gateway(executable: str = OPENCLAW_COMMAND) -> None:
    """Run ``openclaw gateway restart`` and wait for it to finish.

    stdout stays attached to the console, stderr is discarded. There is no
    timeout.

    Raises:
        RestartFailedError: On a non-zero exit or when the command cannot start
    """
    command = [executable, *RESTART_ARGS]
    started = time.perf_counter()
    try:
        completed = subprocess.run(command, stderr=subprocess.DEVNULL, check=False)
    except OSError as exc:
        log_event(
            "gateway_restart",
            level=logging.ERROR,
            command=" ".join(command),
            error=str(exc),
        )
        raise RestartFailedError(None, str(exc)) from exc

    log_event(
        "gateway_restart",
        level=logging.INFO if completed.returncode == 0 else logging.ERROR,
        command=" ".join(command),
        returncode=completed.returncode,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    if completed.returncode != 0:
        raise RestartFailedError(completed.returncode)


def wait_for_settle(seconds: float) -> None:
    """Give the restarted gateway time to come up before reporting success."""
    if seconds > 0:
        time.sleep(seconds)
