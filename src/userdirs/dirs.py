"""
userdirs.dirs

Resolution of the user directories an editor configuration works with.

A `UserDirs` record is built once at startup and passed to whatever needs a
path. The process-wide copy managed by `initialize()` is write-once: later
calls hand back the record resolved first.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping

from .xdg import (
    CommandDocumentsResolver,
    DocumentsResolver,
    expand_home,
    xdg_cache_home,
    xdg_config_home,
    xdg_data_home,
)

DEFAULT_APP_NAME = "emacs"
LISP_SUBDIR = "lisp"
DOCUMENTS_FALLBACK = "~/Documents"


class InvalidCategoryError(ValueError):
    """Raised when a directory category is not one of `Category`."""

    def __init__(self, value: object) -> None:
        self.value = value
        valid = ", ".join(c.value for c in Category)
        super().__init__(f"Invalid category {value!r}; expected one of: {valid}")


class Category(str, Enum):
    DATA = "data"
    CONFIG = "config"
    CACHE = "cache"
    LISP = "lisp"
    DOCUMENTS = "documents"

    @classmethod
    def coerce(cls, value: Category | str) -> Category:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidCategoryError(value)


@dataclass(frozen=True)
class UserDirs:
    config: Path
    data: Path
    cache: Path
    lisp: Path
    documents: Path

    def directory_for(self, category: Category | str) -> Path:
        return getattr(self, Category.coerce(category).name.lower())

    def as_dict(self) -> dict[str, str]:
        return {c.value: str(self.directory_for(c)) for c in Category}


def resolve_user_dirs(
    app_name: str = DEFAULT_APP_NAME,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
    documents_resolver: DocumentsResolver | None = None,
) -> UserDirs:
    """
    Compute all five directories.

    Base directories come from the XDG variables (empty counts as unset) with
    `app_name` appended. The lisp directory always sits under the data
    directory. Documents come from `documents_resolver`, falling back to
    ~/Documents when it has no answer.
    """
    data = xdg_data_home(env, home) / app_name

    resolver = documents_resolver or CommandDocumentsResolver()
    documents = resolver.resolve() or expand_home(DOCUMENTS_FALLBACK, home)

    return UserDirs(
        config=xdg_config_home(env, home) / app_name,
        data=data,
        cache=xdg_cache_home(env, home) / app_name,
        lisp=data / LISP_SUBDIR,
        documents=documents,
    )


# ---------------------------------------------------------------------------
# Process-wide record
# ---------------------------------------------------------------------------

_current: UserDirs | None = None


def initialize(
    app_name: str = DEFAULT_APP_NAME,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
    documents_resolver: DocumentsResolver | None = None,
    search_path: list[str] | None = None,
) -> UserDirs:
    """
    Resolve the process-wide directories if that has not happened yet.

    The first call also puts the lisp directory at the front of the search
    path (sys.path unless given). The directory does not have to exist.
    """
    global _current
    if _current is not None:
        return _current

    dirs = resolve_user_dirs(app_name, env=env, home=home, documents_resolver=documents_resolver)

    target = sys.path if search_path is None else search_path
    entry = str(dirs.lisp)
    if entry not in target:
        target.insert(0, entry)

    _current = dirs
    return dirs


def user_dirs() -> UserDirs:
    return initialize()


def reset() -> None:
    """Forget the process-wide record. Only meant for tests."""
    global _current
    _current = None


# ---------------------------------------------------------------------------
# File location
# ---------------------------------------------------------------------------

def locate_user_file(dirs: UserDirs, filename: str, category: Category | str = Category.DATA) -> Path:
    """Join `filename` onto the directory for `category`. Nothing is checked on disk."""
    return dirs.directory_for(category) / filename


def locate_user_config_file(dirs: UserDirs, filename: str) -> Path:
    return locate_user_file(dirs, filename, Category.CONFIG)


def locate_user_lisp_path(dirs: UserDirs, filename: str) -> Path:
    return locate_user_file(dirs, filename, Category.LISP)
