#!/usr/bin/env python3
"""
Usage:
    python app.py [-v] [DB_PATH]        terminal shell
    python app.py web [DB_PATH]         local web shelf
"""
import sys
from pathlib import Path

from gameshelf import create_app, BIND, PORT
from gameshelf.shell import main as shell_main
from gameshelf.utils import default_db_path, ensure_parent, setup_logging

def _resolve_db_path(args) -> Path:
    if args:
        return Path(args[0]).expanduser().resolve()
    return default_db_path()

if __name__ == "__main__":
    if len(sys.argv) >= 2 and sys.argv[1] == "web":
        setup_logging()
        db_path = ensure_parent(_resolve_db_path(sys.argv[2:]))
        app = create_app(str(db_path))
        app.run(host=BIND, port=PORT, debug=False)
    else:
        raise SystemExit(shell_main(sys.argv[1:]))
