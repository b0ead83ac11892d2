from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol, Sequence

"""
XDG path helpers for userdirs.

This module centralizes all XDG base directory resolution so:
- Config lives in XDG_CONFIG_HOME (or ~/.config)
- Persistent data lives in XDG_DATA_HOME (or ~/.local/share)
- Expendable files live in XDG_CACHE_HOME (or ~/.cache)
- Documents come from `xdg-user-dir DOCUMENTS` (or ~/Documents)

An unset or empty variable falls back to its default.
"""

DEFAULT_DOCUMENTS_COMMAND = ("xdg-user-dir", "DOCUMENTS")


def expand_home(raw: str | os.PathLike, home: Path | None = None) -> Path:
    """Expand a leading `~` against `home` (default: Path.home()) and make absolute."""
    text = os.fspath(raw)
    if home is not None and (text == "~" or text.startswith("~/")):
        return (home / text[2:]).absolute()
    return Path(text).expanduser().absolute()


def _base_dir(name: str, fallback: str, env: Mapping[str, str] | None, home: Path | None) -> Path:
    env = os.environ if env is None else env
    return expand_home(env.get(name) or fallback, home)


def xdg_config_home(env: Mapping[str, str] | None = None, home: Path | None = None) -> Path:
    return _base_dir("XDG_CONFIG_HOME", "~/.config", env, home)


def xdg_data_home(env: Mapping[str, str] | None = None, home: Path | None = None) -> Path:
    return _base_dir("XDG_DATA_HOME", "~/.local/share", env, home)


def xdg_cache_home(env: Mapping[str, str] | None = None, home: Path | None = None) -> Path:
    return _base_dir("XDG_CACHE_HOME", "~/.cache", env, home)


def user_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Settings file for userdirs itself."""
    return xdg_config_home(env) / "userdirs" / "config.yml"


# ---------------------------------------------------------------------------
# Documents directory
# ---------------------------------------------------------------------------

class DocumentsResolver(Protocol):
    def resolve(self) -> Path | None: ...


@dataclass(frozen=True)
class CommandDocumentsResolver:
    """
    Ask an external helper for the documents folder.

    Any failure (spawn error, non-zero exit, empty output) yields None so the
    caller can fall back. The call blocks until the helper exits.
    """

    command: Sequence[str] = DEFAULT_DOCUMENTS_COMMAND

    def resolve(self) -> Path | None:
        try:
            proc = subprocess.run(
                list(self.command),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            return None

        if proc.returncode != 0:
            return None

        out = proc.stdout.strip()
        return Path(out) if out else None


@dataclass(frozen=True)
class StaticDocumentsResolver:
    path: Path | None

    def resolve(self) -> Path | None:
        return self.path
