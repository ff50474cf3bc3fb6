"""Tests for the SQLite preference store."""

import logging
from pathlib import Path

import pytest

from services.prefs_service import THEME_KEY, PrefsService, open_prefs
from storage.db import SCHEMA_VERSION, Database
from storage.repos import PrefsRepo


@pytest.fixture
def db(tmp_path: Path):
    database = Database(db_path=str(tmp_path / "countdown.db"))
    database.init_schema()
    yield database
    database.close()


class TestDatabase:
    def test_schema_version(self, db):
        assert db.schema_version() == SCHEMA_VERSION

    def test_init_schema_is_repeatable(self, db):
        db.init_schema()
        assert db.schema_version() == SCHEMA_VERSION

    def test_close_twice(self, tmp_path: Path):
        database = Database(db_path=str(tmp_path / "x.db"))
        database.close()
        database.close()


class TestPrefsRepo:
    def test_get_missing(self, db):
        assert PrefsRepo(db).get("nope") is None

    def test_set_then_overwrite(self, db):
        repo = PrefsRepo(db)
        repo.set("k", "a")
        repo.set("k", "b")
        assert repo.get("k") == "b"

    def test_delete(self, db):
        repo = PrefsRepo(db)
        repo.set("k", "a")
        repo.delete("k")
        assert repo.get("k") is None

    def test_all_sorted_by_key(self, db):
        repo = PrefsRepo(db)
        repo.set("b", "2")
        repo.set("a", "1")
        assert list(repo.all().items()) == [("a", "1"), ("b", "2")]

    def test_updated_at_recorded(self, db):
        repo = PrefsRepo(db)
        assert repo.updated_at("k") is None
        repo.set("k", "a")
        assert repo.updated_at("k") > 0


class TestPrefsService:
    def test_default_when_unset(self, db):
        assert PrefsService(PrefsRepo(db)).load_theme("neon") == "neon"

    def test_theme_survives_reopen(self, tmp_path: Path):
        path = str(tmp_path / "prefs.db")
        first = Database(db_path=path)
        first.init_schema()
        PrefsService(PrefsRepo(first)).save_theme("sunset")
        first.close()

        second = Database(db_path=path)
        second.init_schema()
        assert PrefsService(PrefsRepo(second)).load_theme("neon") == "sunset"
        second.close()

    def test_save_rejects_unknown(self, db):
        prefs = PrefsService(PrefsRepo(db))
        with pytest.raises(ValueError):
            prefs.save_theme("plaid")
        assert PrefsRepo(db).get(THEME_KEY) is None

    def test_stale_theme_discarded(self, db, caplog):
        repo = PrefsRepo(db)
        repo.set(THEME_KEY, "retired-theme")
        with caplog.at_level(logging.WARNING, logger="services.prefs_service"):
            assert PrefsService(repo).load_theme("ocean") == "ocean"
        assert repo.get(THEME_KEY) is None
        assert "retired-theme" in caplog.text


class TestOpenPrefs:
    def test_opens_file_store(self, tmp_path: Path):
        db, prefs = open_prefs(str(tmp_path / "prefs.db"))
        prefs.save_theme("sunset")
        assert prefs.load_theme("neon") == "sunset"
        db.close()

    def test_unopenable_path_falls_back_to_memory(self, tmp_path: Path, caplog):
        path = str(tmp_path / "missing-dir" / "prefs.db")
        with caplog.at_level(logging.WARNING, logger="services.prefs_service"):
            db, prefs = open_prefs(path)
        assert db.db_path == ":memory:"
        assert "preferences unavailable" in caplog.text
        assert prefs.load_theme("neon") == "neon"
        prefs.save_theme("ocean")
        assert prefs.load_theme("neon") == "ocean"
        db.close()

    def test_read_error_returns_default(self, db, caplog):
        prefs = PrefsService(PrefsRepo(db))
        db.close()
        with caplog.at_level(logging.WARNING, logger="services.prefs_service"):
            assert prefs.load_theme("neon") == "neon"
        assert "could not read stored theme" in caplog.text
