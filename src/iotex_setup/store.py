"""JSON document persistence for OpenClaw's config and auth-profile files."""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

from .constants import AUTH_STORE_VERSION
from .errors import ConfigDocumentError, MissingConfigFileError
from .logging import log_event


def empty_auth_store() -> dict[str, Any]:
    return {"version": AUTH_STORE_VERSION, "profiles": {}}


def load_config_document(path: Path) -> dict[str, Any]:
    """Load OpenClaw's main config file.

    Raises:
        MissingConfigFileError: If the file does not exist
        ConfigDocumentError: If the file is not a JSON object
    """
    if not path.is_file():
        raise MissingConfigFileError(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise ConfigDocumentError(f"Could not read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigDocumentError(f"{path} does not contain a JSON object.")
    return data


def load_auth_store(path: Path) -> dict[str, Any]:
    """Load the auth-profile store, treating any failure as an empty store.

    A corrupt store is replaced on the next write, so its other profiles are
    lost. The failure is logged but never raised.
    """
    if not path.exists():
        return empty_auth_store()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        log_event(
            "auth_store_unreadable",
            level=logging.WARNING,
            auth_store_file=path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return empty_auth_store()
    if not isinstance(data, dict):
        log_event(
            "auth_store_unreadable",
            level=logging.WARNING,
            auth_store_file=path,
            error_type="TypeError",
            error=f"expected a JSON object, got {type(data).__name__}",
        )
        return empty_auth_store()
    return data


def dump_json_text(payload: Any) -> str:
    """Serialize with two-space indentation and a trailing newline."""
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def _write_temp_file(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    ) as temp_file:
        temp_path = Path(temp_file.name)
        try:
            temp_file.write(dump_json_text(payload))
            temp_file.flush()
            os.fsync(temp_file.fileno())
            if path.exists():
                shutil.copymode(path, temp_path)
        except Exception:
            temp_file.close()
            temp_path.unlink(missing_ok=True)
            raise
    return temp_path


def write_json_transaction(entries: list[tuple[Path, Any]]) -> None:
    """Write multiple JSON files with rollback so the update is all-or-nothing.

    Symlinked targets are followed so the link survives and its target is
    updated. Existing files keep their permission bits.
    """
    entries = [(Path(path).resolve(), payload) for path, payload in entries]
    temp_paths: dict[Path, Path] = {}
    backup_paths: dict[Path, Path] = {}
    had_original: dict[Path, bool] = {}
    replaced_targets: list[Path] = []

    try:
        for path, payload in entries:
            temp_paths[path] = _write_temp_file(path, payload)

        for path, _payload in entries:
            had_original[path] = path.exists()
            if path.exists():
                fd, backup_name = tempfile.mkstemp(
                    dir=path.parent,
                    prefix=f".{path.name}.",
                    suffix=".bak",
                )
                os.close(fd)
                backup_path = Path(backup_name)
                backup_path.unlink()
                os.replace(path, backup_path)
                backup_paths[path] = backup_path

        for path, _payload in entries:
            os.replace(temp_paths[path], path)
            replaced_targets.append(path)

    except Exception:
        for path in reversed(replaced_targets):
            if not had_original.get(path, False) and path.exists():
                path.unlink(missing_ok=True)

        for path, backup_path in backup_paths.items():
            os.replace(backup_path, path)

        for temp_path in temp_paths.values():
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
        raise

    for backup_path in backup_paths.values():
        backup_path.unlink(missing_ok=True)
