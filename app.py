#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from typing import Optional, Sequence

from config import DEV_LINKS, load_config
from core.clock import TkClock
from core.timer_engine import TimerEngine
from domain.themes import DEFAULT_THEME
from services.prefs_service import open_prefs
from services.timer_service import TimerService
from ui.main_window import MainWindow
from ui.ui_state import UiState

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None):
    cfg = load_config(argv)
    logging.basicConfig(
        level=cfg.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db, prefs_service = open_prefs(cfg.db_path)

    theme_id = cfg.theme or prefs_service.load_theme(DEFAULT_THEME)
    ui_state = UiState(theme_id=theme_id)

    root = tk.Tk()
    engine = TimerEngine(initial_sec=cfg.initial_duration_sec)
    timer_service = TimerService(engine, TkClock(root, cfg.tick_interval_ms))

    logger.info(
        "starting with %s on theme %s", engine.formatted_time(), ui_state.theme_id
    )
    app = MainWindow(
        root,
        timer_service,
        prefs_service,
        ui_state,
        links=DEV_LINKS,
        adjust_step_sec=cfg.adjust_step_sec,
    )
    try:
        app.run()
    finally:
        db.close()


if __name__ == "__main__":
    main()
