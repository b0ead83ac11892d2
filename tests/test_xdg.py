import sys
from pathlib import Path

from userdirs.xdg import (
    CommandDocumentsResolver,
    StaticDocumentsResolver,
    expand_home,
    user_config_path,
    xdg_cache_home,
    xdg_config_home,
    xdg_data_home,
)


def test_base_dirs_fall_back_to_home(tmp_path):
    env = {}
    assert xdg_config_home(env, tmp_path) == tmp_path / ".config"
    assert xdg_data_home(env, tmp_path) == tmp_path / ".local" / "share"
    assert xdg_cache_home(env, tmp_path) == tmp_path / ".cache"


def test_base_dirs_use_environment(tmp_path):
    env = {
        "XDG_CONFIG_HOME": "/srv/cfg",
        "XDG_DATA_HOME": "/srv/data",
        "XDG_CACHE_HOME": "/srv/cache",
    }
    assert xdg_config_home(env, tmp_path) == Path("/srv/cfg")
    assert xdg_data_home(env, tmp_path) == Path("/srv/data")
    assert xdg_cache_home(env, tmp_path) == Path("/srv/cache")


def test_empty_variable_counts_as_unset(tmp_path):
    assert xdg_config_home({"XDG_CONFIG_HOME": ""}, tmp_path) == tmp_path / ".config"


def test_tilde_in_variable_expands_against_home(tmp_path):
    assert xdg_cache_home({"XDG_CACHE_HOME": "~/tmp-cache"}, tmp_path) == tmp_path / "tmp-cache"
    assert expand_home("~", tmp_path) == tmp_path


def test_default_home_comes_from_process(xdg_env):
    assert xdg_config_home() == xdg_env / ".config"
    assert user_config_path() == xdg_env / ".config" / "userdirs" / "config.yml"


def test_command_resolver_strips_trailing_newline():
    cmd = (sys.executable, "-c", "print('/home/u/Documents')")
    assert CommandDocumentsResolver(cmd).resolve() == Path("/home/u/Documents")


def test_command_resolver_nonzero_exit_gives_none():
    cmd = (sys.executable, "-c", "import sys; print('/nope'); sys.exit(1)")
    assert CommandDocumentsResolver(cmd).resolve() is None


def test_command_resolver_spawn_failure_gives_none():
    assert CommandDocumentsResolver(("userdirs-no-such-helper-xyz", "DOCUMENTS")).resolve() is None


def test_command_resolver_empty_output_gives_none():
    cmd = (sys.executable, "-c", "print('')")
    assert CommandDocumentsResolver(cmd).resolve() is None


def test_static_resolver():
    assert StaticDocumentsResolver(Path("/d")).resolve() == Path("/d")
    assert StaticDocumentsResolver(None).resolve() is None
