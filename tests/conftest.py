import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from userdirs import dirs  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_user_dirs():
    """Every test starts without a process-wide record."""
    dirs.reset()
    yield
    dirs.reset()


@pytest.fixture
def xdg_env(tmp_path, monkeypatch):
    """Point HOME and the XDG variables at a scratch tree."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("XDG_CONFIG_HOME", "XDG_DATA_HOME", "XDG_CACHE_HOME"):
        monkeypatch.delenv(name, raising=False)
    return home
