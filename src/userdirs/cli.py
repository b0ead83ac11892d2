"""
userdirs.cli

Command-line interface for userdirs: inspect the user directories an editor
configuration resolves, and the files located inside them.

Responsibilities:
- Parse CLI arguments and dispatch subcommands.
- Load settings (user config or --config).
- Print resolved directories as text or YAML.
- Locate files by category and validate search-path candidates.
- Write a default settings file.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from .config import apply_settings, load_settings
from .dirs import Category, InvalidCategoryError, locate_user_file
from .search_path import add_directory_to_search_path
from .xdg import user_config_path

# ---------------------------------------------------------------------------
# Config template
# ---------------------------------------------------------------------------

def default_config_template() -> str:
    return """\
# Suffix appended to XDG_CONFIG_HOME, XDG_DATA_HOME and XDG_CACHE_HOME.
app_name: emacs

# Helper printing the documents folder; falls back to ~/Documents on failure.
documents_command: [xdg-user-dir, DOCUMENTS]

# Uncomment to skip the helper entirely.
# documents_dir: ~/Documents

# Subdirectories of <data>/lisp to put on the search path.
lisp_paths: []
#  - site
#  - path: vendor
#    append: true
"""

# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def resolve_config_path(arg: str | None) -> Path:
    """
    Decide which settings file to use.

    Priority:
      1) --config value (if provided)
      2) user config path (~/.config/userdirs/config.yml)
    """
    if arg:
        return Path(arg).expanduser().resolve()
    return user_config_path()

# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def cmd_show(args: argparse.Namespace) -> int:
    dirs = apply_settings(load_settings(resolve_config_path(args.config)), search_path=[])
    table = dirs.as_dict()

    if args.format == "yaml":
        print(yaml.safe_dump(table, sort_keys=False), end="")
        return 0

    width = max(len(k) for k in table)
    for name, path in table.items():
        print(f"{name.ljust(width)}  {path}")
    return 0


def cmd_locate(args: argparse.Namespace) -> int:
    dirs = apply_settings(load_settings(resolve_config_path(args.config)), search_path=[])
    try:
        path = locate_user_file(dirs, args.filename, args.category)
    except InvalidCategoryError as exc:
        print(exc, file=sys.stderr)
        return 2
    print(path)
    return 0


def cmd_add_path(args: argparse.Namespace) -> int:
    """
    Dry-run: validate a directory the way configuration code would add it.

    The insertion happens on a throwaway copy of sys.path; nothing persists.
    """
    search_path = list(sys.path)
    try:
        add_directory_to_search_path(args.directory, append=args.append, search_path=search_path)
    except NotADirectoryError as exc:
        print(exc, file=sys.stderr)
        return 1

    entry = str(Path(args.directory))
    print(f"{entry} at position {search_path.index(entry)} of {len(search_path)}")
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    cfg_path = user_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.exists() and not args.force:
        print(f"Config already exists: {cfg_path}")
        print("Use --force to overwrite.")
        return 0

    cfg_path.write_text(default_config_template(), encoding="utf-8")
    print(f"Wrote config: {cfg_path}")
    return 0

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct top-level argument parser and subcommands.
    """
    p = argparse.ArgumentParser(prog="userdirs")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("show", help="Print the resolved user directories")
    ps.add_argument("--config", default=None, help="Path to settings YAML (overrides user config)")
    ps.add_argument("--format", choices=["text", "yaml"], default="text", help="Output format")
    ps.set_defaults(func=cmd_show)

    pl = sub.add_parser("locate", help="Print where a file lives in a user directory")
    pl.add_argument("filename", help="File name relative to the category directory")
    pl.add_argument(
        "--category",
        default=Category.DATA.value,
        help=f"One of: {', '.join(c.value for c in Category)} (default: data)",
    )
    pl.add_argument("--config", default=None, help="Path to settings YAML (overrides user config)")
    pl.set_defaults(func=cmd_locate)

    pa = sub.add_parser("add-path", help="Check that a directory can go on the search path")
    pa.add_argument("directory", help="Directory to add")
    pa.add_argument("--append", action="store_true", help="Add at the end instead of the front")
    pa.set_defaults(func=cmd_add_path)

    pi = sub.add_parser("init", help="Create a settings file at ~/.config/userdirs/config.yml")
    pi.add_argument("--force", action="store_true", help="Overwrite existing config")
    pi.set_defaults(func=cmd_init)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
