from __future__ import annotations

import sys
from pathlib import Path

from .dirs import Category, UserDirs, locate_user_file


def add_directory_to_search_path(
    directory: str | Path,
    append: bool = False,
    search_path: list[str] | None = None,
) -> list[str]:
    """
    Put `directory` on the search path (sys.path unless given).

    Goes to the front, or the end with `append`. An entry that is already
    present stays where it is. Raises NotADirectoryError, leaving the list
    untouched, when `directory` is missing or not a directory.
    """
    target = sys.path if search_path is None else search_path
    path = Path(directory)
    if not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")

    entry = str(path)
    if entry in target:
        return target

    if append:
        target.append(entry)
    else:
        target.insert(0, entry)
    return target


def add_user_lisp_to_search_path(
    dirs: UserDirs,
    subdirectory: str,
    append: bool = False,
    search_path: list[str] | None = None,
) -> list[str]:
    directory = locate_user_file(dirs, subdirectory, Category.LISP)
    return add_directory_to_search_path(directory, append=append, search_path=search_path)
