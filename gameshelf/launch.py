# gameshelf/launch.py
from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, Tuple, Union

from .errors import GameShelfError, InvalidPathError, SpawnError
from .models import Game
from .utils import is_windows

log = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Small helpers
# ──────────────────────────────────────────────────────────────────────────────

def _detach_kwargs() -> Dict:
    """Popen kwargs that keep the child alive independently of us."""
    if is_windows():
        flags = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0)
        return {"creationflags": flags}
    return {"start_new_session": True}

# ──────────────────────────────────────────────────────────────────────────────
# Public API
# ──────────────────────────────────────────────────────────────────────────────

class Launcher:
    """
    Holds one executable path that existed when the launcher was built.

    The path may disappear between construction and run(); run() then raises
    SpawnError rather than re-checking.
    """

    def __init__(self, exe_path: Union[str, Path]):
        exe_path = str(exe_path)
        if not self.validate_path(exe_path):
            raise InvalidPathError(exe_path)
        self.exe_path = exe_path

    @staticmethod
    def validate_path(path: Union[str, Path]) -> bool:
        return os.path.exists(path)

    def run(self) -> int:
        """Spawn the executable with no arguments and return its pid without waiting."""
        target = str(Path(self.exe_path).resolve())
        log.info("Running exe: %s", target)
        try:
            p = subprocess.Popen([target], cwd=str(Path(target).parent), **_detach_kwargs())
        except OSError as e:
            raise SpawnError(self.exe_path, e.strerror or str(e)) from e
        log.debug("spawned %s as pid %s", target, p.pid)
        return p.pid

def launch_game(game: Game) -> Tuple[bool, str]:
    """Validate and spawn a stored game, reporting the outcome as (ok, message)."""
    try:
        pid = Launcher(game.exe_path).run()
    except GameShelfError as e:
        log.warning("launch of %r failed: %s", game.name, e)
        return False, str(e)
    return True, f"Launched {game.name} (pid {pid})."
