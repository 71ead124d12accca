import stat
import sys
from pathlib import Path

import pytest

# Ensure project root import
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gameshelf.store import open_store


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "test_game.db"


@pytest.fixture()
def store(db_path):
    s = open_store(db_path)
    yield s
    s.close()


@pytest.fixture()
def script(tmp_path):
    """A tiny executable that exits immediately (POSIX only)."""
    p = tmp_path / "game.sh"
    p.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    p.chmod(p.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return p


class FakeProc:
    def __init__(self, pid):
        self.pid = pid


@pytest.fixture()
def popen_calls(monkeypatch):
    """Replace subprocess.Popen in the launcher with a recorder."""
    import gameshelf.launch as L
    calls = []

    def _popen(*a, **kw):
        calls.append((a, kw))
        return FakeProc(4242)

    monkeypatch.setattr(L.subprocess, "Popen", _popen)
    return calls

