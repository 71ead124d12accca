# gameshelf/store.py
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional, Union

from .errors import ReadError, SchemaError, StoreConnectionError, WriteError
from .models import Game

log = logging.getLogger(__name__)

SCHEMA = "create table if not exists game (id integer primary key, name text, exe_path text)"

def _coerce_id(game_id: Union[int, str, None]) -> Optional[int]:
    """Ids arrive as ints from the store and as strings from forms / prompts."""
    if isinstance(game_id, bool):
        return None
    try:
        key = int(str(game_id).strip())
    except (TypeError, ValueError):
        return None
    # outside SQLite's 64-bit integer range nothing can match
    if not -2**63 <= key < 2**63:
        return None
    return key

class Store:
    """
    Owns one SQLite connection to the game table.

    Acquire with Store.open(path) and release with close(), or use it as a
    context manager. Every value goes through parameter binding.
    """

    def __init__(self, conn: sqlite3.Connection, path: str):
        self._conn = conn
        self.path = path

    @classmethod
    def open(cls, path: Union[str, Path]) -> "Store":
        path = str(path)
        try:
            conn = sqlite3.connect(path)
            # connect() is lazy about some failures (e.g. not a database); probe now
            conn.execute("pragma schema_version").fetchone()
        except sqlite3.Error as e:
            raise StoreConnectionError(f"Cannot open database {path}: {e}") from e
        conn.row_factory = sqlite3.Row
        log.debug("opened store at %s", path)
        return cls(conn, path)

    # ── lifecycle ────────────────────────────────────────────────────────────

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            log.debug("closed store at %s", self.path)

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreConnectionError(f"Store at {self.path} is closed.")
        return self._conn

    # ── schema / CRUD ────────────────────────────────────────────────────────

    def initialize_schema(self) -> None:
        conn = self._connection()
        try:
            with conn:
                conn.execute(SCHEMA)
        except sqlite3.Error as e:
            raise SchemaError(f"Cannot create game table: {e}") from e

    def add(self, game: Game) -> int:
        """Insert name and exe_path; the store assigns the id (game.id is ignored)."""
        if game.name is None or game.exe_path is None:
            raise WriteError("Game needs both a name and an exe_path.")
        conn = self._connection()
        try:
            with conn:
                cur = conn.execute(
                    "insert into game (name, exe_path) values (?, ?)",
                    (game.name, game.exe_path),
                )
        except (sqlite3.Error, OverflowError) as e:
            raise WriteError(f"Cannot add {game.name!r}: {e}") from e
        log.info("added game %r (id=%s)", game.name, cur.lastrowid)
        return cur.lastrowid

    def delete(self, game_id: Union[int, str]) -> None:
        key = _coerce_id(game_id)
        if key is None:
            # Non-numeric or out-of-range ids can never match an integer primary key.
            log.debug("delete ignored unmatchable id %r", game_id)
            return
        conn = self._connection()
        try:
            with conn:
                cur = conn.execute("delete from game where id = ?", (key,))
        except sqlite3.Error as e:
            raise WriteError(f"Cannot delete game {key}: {e}") from e
        if cur.rowcount:
            log.info("deleted game id=%s", key)
        else:
            log.debug("delete matched nothing for id=%s", key)

    def get(self, game_id: Union[int, str]) -> Optional[Game]:
        key = _coerce_id(game_id)
        if key is None:
            return None
        try:
            row = self._connection().execute(
                "select id, name, exe_path from game where id = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            raise ReadError(f"Cannot read game {key}: {e}") from e
        return _row_to_game(row) if row else None

    def list_all(self) -> List[Game]:
        try:
            rows = self._connection().execute(
                "select id, name, exe_path from game order by id"
            ).fetchall()
        except sqlite3.Error as e:
            raise ReadError(f"Cannot list games: {e}") from e
        return [_row_to_game(r) for r in rows]

def _row_to_game(row: sqlite3.Row) -> Game:
    return Game(id=row["id"], name=row["name"], exe_path=row["exe_path"])

def open_store(path: Union[str, Path]) -> Store:
    """Open the store and make sure the game table exists."""
    store = Store.open(path)
    try:
        store.initialize_schema()
    except SchemaError:
        store.close()
        raise
    return store
