import sqlite3

import pytest

from gameshelf.errors import ReadError, SchemaError, StoreConnectionError, WriteError
from gameshelf.models import Game
from gameshelf.store import Store, open_store


def dummy():
    return Game(name="dummy", exe_path="dummy.exe")


class BrokenConn:
    """Stands in for a connection whose every statement fails."""
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, *a, **kw):
        raise sqlite3.OperationalError("disk I/O error")

    def close(self):
        pass


def test_add_then_delete_scenario(store):
    store.add(dummy())
    assert len(store.list_all()) == 1

    store.delete("1")
    assert len(store.list_all()) == 0


def test_add_assigns_id_and_keeps_fields(store):
    new_id = store.add(Game(name="Doom", exe_path="/games/doom", id=99))
    games = store.list_all()
    matching = [g for g in games if g.name == "Doom" and g.exe_path == "/games/doom"]
    assert len(matching) == 1
    assert matching[0].id is not None
    assert matching[0].id == new_id
    assert new_id != 99, "caller-supplied id must be ignored"


def test_names_are_not_unique(store):
    store.add(dummy())
    store.add(dummy())
    games = store.list_all()
    assert len(games) == 2
    assert games[0].id != games[1].id


def test_delete_removes_exactly_one(store):
    ids = [store.add(Game(name=f"g{i}", exe_path=f"g{i}.exe")) for i in range(3)]
    store.delete(ids[1])
    remaining = store.list_all()
    assert [g.id for g in remaining] == [ids[0], ids[2]]


@pytest.mark.parametrize("missing", [12345, "12345", "abc", "", None,
                                     "99999999999999999999", 2**70, -2**64, 2**63])
def test_delete_missing_id_is_noop(store, missing):
    store.add(dummy())
    before = store.list_all()
    store.delete(missing)
    assert store.list_all() == before


def test_list_all_empty(store):
    assert store.list_all() == []


def test_get(store):
    new_id = store.add(dummy())
    assert store.get(new_id) == Game(name="dummy", exe_path="dummy.exe", id=new_id)
    assert store.get(str(new_id)).name == "dummy"
    assert store.get(new_id + 1) is None
    assert store.get("nope") is None


def test_values_are_bound_not_interpolated(store):
    sneaky = "x'); drop table game; --"
    store.add(Game(name=sneaky, exe_path="it's.exe"))
    store.delete("1 or 1=1")
    games = store.list_all()
    assert len(games) == 1
    assert games[0].name == sneaky
    assert games[0].exe_path == "it's.exe"


def test_initialize_schema_is_idempotent(store):
    store.add(dummy())
    store.initialize_schema()
    store.initialize_schema()
    assert len(store.list_all()) == 1


def test_schema_columns(db_path, store):
    conn = sqlite3.connect(str(db_path))
    try:
        cols = [(r[1], r[2].lower(), r[5]) for r in conn.execute("pragma table_info(game)")]
    finally:
        conn.close()
    assert cols == [("id", "integer", 1), ("name", "text", 0), ("exe_path", "text", 0)]


def test_rows_persist_across_connections(db_path):
    with open_store(db_path) as s:
        s.add(dummy())
    with open_store(db_path) as s:
        assert [g.name for g in s.list_all()] == ["dummy"]


def test_open_creates_file(db_path):
    assert not db_path.exists()
    with Store.open(db_path):
        pass
    assert db_path.exists()


def test_open_fails_for_missing_directory(tmp_path):
    with pytest.raises(StoreConnectionError):
        Store.open(tmp_path / "no" / "such" / "dir" / "games.db")


def test_open_fails_for_directory(tmp_path):
    with pytest.raises(StoreConnectionError):
        Store.open(tmp_path)


def test_open_fails_for_non_database_file(tmp_path):
    junk = tmp_path / "junk.db"
    junk.write_bytes(b"this is definitely not sqlite " * 20)
    with pytest.raises(StoreConnectionError):
        Store.open(junk)


def test_closed_store_refuses_work(db_path):
    s = open_store(db_path)
    s.close()
    assert s.closed
    s.close()  # second close is harmless
    with pytest.raises(StoreConnectionError):
        s.list_all()


def test_add_requires_fields(store):
    with pytest.raises(WriteError):
        store.add(Game(name=None, exe_path="x.exe"))
    with pytest.raises(WriteError):
        store.add(Game(name="x", exe_path=None))
    assert store.list_all() == []


def test_io_failures_map_to_error_kinds(store):
    store._conn = BrokenConn()
    with pytest.raises(SchemaError):
        store.initialize_schema()
    with pytest.raises(WriteError):
        store.add(dummy())
    with pytest.raises(WriteError):
        store.delete(1)
    with pytest.raises(ReadError):
        store.list_all()
    with pytest.raises(ReadError):
        store.get(1)


@pytest.mark.parametrize("huge", ["99999999999999999999", 2**70, 2**63])
def test_get_out_of_range_id_is_none(store, huge):
    store.add(dummy())
    assert store.get(huge) is None


def test_largest_integer_key_still_matches(store):
    conn = sqlite3.connect(store.path)
    try:
        conn.execute("insert into game (id, name, exe_path) values (?, ?, ?)", (2**63 - 1, "edge", "e.exe"))
        conn.commit()
    finally:
        conn.close()
    assert store.get(str(2**63 - 1)).name == "edge"
    store.delete(2**63 - 1)
    assert store.get(2**63 - 1) is None


def test_add_rejects_oversized_integer_field(store):
    with pytest.raises(WriteError):
        store.add(Game(name=2**70, exe_path="x.exe"))
    assert store.list_all() == []
