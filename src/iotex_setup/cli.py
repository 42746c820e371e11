"""CLI entry point: resolve inputs, merge OpenClaw config, restart the gateway."""

from __future__ import annotations

import logging
import sys
import time

from .constants import PROVIDER_ID
from .errors import RestartFailedError, SetupError, UnknownModelError
from .gateway import require_openclaw, restart_gateway, wait_for_settle
from .inputs import parse_args, resolve_request
from .logging import log_event, sanitize_error_message, setup_logging
from .merge import apply_provider_upserts, merge_auth_profile
from .presenters import (
    render_error,
    render_restart_failed,
    render_summary,
    render_unknown_model,
)
from .settings import SetupSettings, load_settings
from .store import load_auth_store, load_config_document, write_json_transaction
from .terminal import LineReader, TerminalInput

__all__ = ["main", "run_setup"]


def run_setup(
    argv: list[str],
    settings: SetupSettings,
    terminal: LineReader,
) -> None:
    """Run one setup pass end to end.

    Raises:
        SetupError: For every fatal condition, including a failed restart
        OSError: If the config files cannot be written
    """
    request = resolve_request(parse_args(argv), terminal)
    log_event(
        "request_resolved",
        llm_model=request.llm_model_id,
        audio_model=request.audio_model_id,
        set_as_default=request.set_as_default,
        api_key=request.api_key,
    )

    openclaw = require_openclaw()
    config_path = settings.config_path
    auth_store_path = settings.auth_store_path

    # Both documents are merged in memory before anything touches the disk
    print()
    print(f"==> Updating {config_path.name}...")
    config = load_config_document(config_path)
    report = apply_provider_upserts(config, request)
    log_event(
        "config_merged",
        config_file=config_path,
        provider=PROVIDER_ID,
        registered_models=report.registered_models,
        primary_model=report.primary_model,
        audio_index=report.audio_index,
        audio_action=report.audio_action,
    )

    print("==> Setting up auth profile...")
    store = merge_auth_profile(load_auth_store(auth_store_path), request)

    write_json_transaction([(config_path, config), (auth_store_path, store)])
    log_event("files_written", files=[config_path, auth_store_path])

    print("==> Restarting gateway...")
    restart_gateway(openclaw)
    wait_for_settle(settings.settle_sec)

    for line in render_summary(request):
        print(line)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the setup CLI."""
    args = sys.argv[1:] if argv is None else argv
    app_started = time.perf_counter()

    try:
        settings = load_settings()
    except ValueError as e:
        print(render_error(str(e)))
        sys.exit(1)

    setup_logging(str(settings.log_file) if settings.log_file else None)
    terminal = TerminalInput()
    log_event(
        "app_start",
        openclaw_dir=settings.openclaw_dir,
        config_file=settings.config_path,
        auth_store_file=settings.auth_store_path,
        log_file=settings.log_file,
        interactive=terminal.interactive,
    )

    def _stop(reason: str, error: BaseException | None = None) -> None:
        log_event(
            "app_stop",
            level=logging.INFO if error is None else logging.ERROR,
            reason=reason,
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
            error_type=type(error).__name__ if error is not None else None,
            error=sanitize_error_message(str(error)) if error is not None else None,
        )

    try:
        run_setup(args, settings, terminal)
    except KeyboardInterrupt as e:
        print()
        print("Setup cancelled.")
        _stop("interrupted", e)
        sys.exit(1)
    except UnknownModelError as e:
        for line in render_unknown_model(e):
            print(line)
        _stop("error", e)
        sys.exit(1)
    except RestartFailedError as e:
        for line in render_restart_failed():
            print(line)
        _stop("restart_failed", e)
        sys.exit(1)
    except SetupError as e:
        print(render_error(str(e)))
        _stop("error", e)
        sys.exit(1)
    except OSError as e:
        print(render_error(f"Could not write configuration: {sanitize_error_message(str(e))}"))
        _stop("error", e)
        sys.exit(1)
    except Exception as e:
        log_event(
            "unexpected_error",
            level=logging.ERROR,
            exc_info=True,
            error_type=type(e).__name__,
            error=str(e),
        )
        print(render_error(f"Unexpected: {sanitize_error_message(str(e))}"))
        _stop("error", e)
        sys.exit(1)

    _stop("normal")
    sys.exit(0)
