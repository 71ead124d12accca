import logging
import os
import sys
from pathlib import Path

def is_windows() -> bool:
    return os.name == "nt"

def default_db_path() -> Path:
    env = os.environ.get("GAMESHELF_DB")
    if env:
        return Path(env)
    return Path.home() / ".gameshelf" / "games.db"

def ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path

def settings_file_for(db_path: Path) -> Path:
    return Path(db_path).with_name("_gameshelf.json")

def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger once; stderr keeps the terminal shell's stdout clean."""
    verbose = verbose or os.environ.get("GAMESHELF_VERBOSE", "").lower() in ("1", "true", "yes")
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)
    if root.hasHandlers():
        root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
