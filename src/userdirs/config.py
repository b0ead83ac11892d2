from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
import os
import sys

from .dirs import DEFAULT_APP_NAME, UserDirs, initialize
from .search_path import add_user_lisp_to_search_path
from .xdg import (
    DEFAULT_DOCUMENTS_COMMAND,
    CommandDocumentsResolver,
    DocumentsResolver,
    StaticDocumentsResolver,
    expand_home,
)

KNOWN_KEYS = {"app_name", "documents_command", "documents_dir", "lisp_paths"}


@dataclass(frozen=True)
class LispPath:
    path: str
    append: bool = False


@dataclass(frozen=True)
class Settings:
    app_name: str = DEFAULT_APP_NAME
    documents_command: tuple[str, ...] = DEFAULT_DOCUMENTS_COMMAND
    documents_dir: Path | None = None
    lisp_paths: list[LispPath] = field(default_factory=list)

    def documents_resolver(self) -> DocumentsResolver:
        if self.documents_dir is not None:
            return StaticDocumentsResolver(self.documents_dir)
        return CommandDocumentsResolver(self.documents_command)


def _warn(message: str) -> None:
    print(f"Config warning: {message}", file=sys.stderr)


def load_settings(path: Path) -> Settings:
    """Read settings from YAML. A missing or empty file gives the defaults."""
    if not path.exists():
        return Settings()

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        _warn(f"{path} does not contain a mapping; using defaults")
        return Settings()

    for key in sorted(set(data) - KNOWN_KEYS):
        _warn(f"unknown key '{key}'. Known: {sorted(KNOWN_KEYS)}")

    app_name = DEFAULT_APP_NAME
    if data.get("app_name") is not None:
        candidate = str(data["app_name"]).strip()
        if not candidate or "/" in candidate or (os.altsep and os.altsep in candidate) or candidate in (".", ".."):
            _warn(f"app_name {data['app_name']!r} must be a single directory name; using '{DEFAULT_APP_NAME}'")
        else:
            app_name = candidate

    command = data.get("documents_command") or list(DEFAULT_DOCUMENTS_COMMAND)
    if isinstance(command, str):
        command = command.split()
    if not isinstance(command, (list, tuple)):
        _warn(f"documents_command {command!r} is not a string or list; using the default")
        command = DEFAULT_DOCUMENTS_COMMAND
    documents_command = tuple(str(part) for part in command)

    documents_dir = None
    if data.get("documents_dir"):
        documents_dir = expand_home(str(data["documents_dir"]))

    entries = data.get("lisp_paths") or []
    if isinstance(entries, (str, dict)):
        entries = [entries]
    if not isinstance(entries, list):
        _warn(f"lisp_paths {entries!r} is not a list; ignoring it")
        entries = []

    lisp_paths: list[LispPath] = []
    for entry in entries:
        if isinstance(entry, str):
            entry = {"path": entry}
        if not isinstance(entry, dict):
            _warn(f"lisp_paths entry {entry!r} is not a string or mapping")
            continue

        rel = str(entry.get("path") or "").strip()
        if not rel:
            _warn(f"lisp_paths entry {entry!r} has no path")
            continue

        append = entry.get("append", False)
        if not isinstance(append, bool):
            _warn(f"lisp_paths entry '{rel}' has non-boolean append {append!r}; skipping")
            continue

        lisp_paths.append(LispPath(path=rel, append=append))

    return Settings(
        app_name=app_name,
        documents_command=documents_command,
        documents_dir=documents_dir,
        lisp_paths=lisp_paths,
    )


def apply_settings(settings: Settings, search_path: list[str] | None = None) -> UserDirs:
    """
    Initialize the process-wide directories and add configured lisp paths.

    Entries that are not directories are reported and skipped.
    """
    dirs = initialize(
        settings.app_name,
        documents_resolver=settings.documents_resolver(),
        search_path=search_path,
    )

    for lp in settings.lisp_paths:
        try:
            add_user_lisp_to_search_path(dirs, lp.path, append=lp.append, search_path=search_path)
        except NotADirectoryError as exc:
            _warn(f"skipping lisp path '{lp.path}': {exc}")

    return dirs
