# -*- coding: utf-8 -*-

import logging
import sqlite3
from typing import Tuple

from domain.themes import THEMES, get_theme
from storage.db import Database
from storage.repos import PrefsRepo

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


class PrefsService:
    """
    UI preferences kept between runs (currently just the theme).
    """

    def __init__(self, repo: PrefsRepo):
        self.repo = repo

    def load_theme(self, default: str) -> str:
        try:
            stored = self.repo.get(THEME_KEY)
        except sqlite3.Error as e:
            logger.warning("could not read stored theme: %s", e)
            return default
        if stored is None:
            return default
        if stored not in THEMES:
            logger.warning("discarding unknown stored theme %r", stored)
            self.repo.delete(THEME_KEY)
            return default
        return stored

    def save_theme(self, theme_id: str) -> None:
        get_theme(theme_id)
        self.repo.set(THEME_KEY, theme_id)


def open_prefs(db_path: str) -> Tuple[Database, PrefsService]:
    """
    Open the preference store at db_path. If the file cannot be opened or
    initialised, fall back to an in-memory store so the app still starts;
    choices made this session are then not remembered.
    """
    try:
        db = Database(db_path=db_path)
        db.init_schema()
    except sqlite3.Error as e:
        logger.warning("preferences unavailable at %s (%s); not saving this session", db_path, e)
        db = Database(db_path=":memory:")
        db.init_schema()
    return db, PrefsService(PrefsRepo(db))
