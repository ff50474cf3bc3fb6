# -*- coding: utf-8 -*-

from typing import Dict, List

from domain.models import Theme

DEFAULT_THEME = "neon"

THEMES: Dict[str, Theme] = {
    "neon": Theme(
        id="neon",
        label="Neon",
        primary="#00f5ff",
        secondary="#ff00ff",
        accent="#00ff88",
        background="#1a1033",
        track="#2e2450",
    ),
    "sunset": Theme(
        id="sunset",
        label="Sunset",
        primary="#ff6b6b",
        secondary="#ffa726",
        accent="#ffeb3b",
        background="#3b1418",
        track="#5a2a2a",
    ),
    "ocean": Theme(
        id="ocean",
        label="Ocean",
        primary="#4fc3f7",
        secondary="#29b6f6",
        accent="#00e5ff",
        background="#0c2a3d",
        track="#1d4257",
    ),
    "forest": Theme(
        id="forest",
        label="Forest",
        primary="#66bb6a",
        secondary="#4caf50",
        accent="#00e676",
        background="#0f2e1f",
        track="#21452f",
    ),
}


def theme_ids() -> List[str]:
    return list(THEMES.keys())


def get_theme(theme_id: str) -> Theme:
    theme = THEMES.get(theme_id)
    if theme is None:
        raise ValueError(
            f"Unknown theme '{theme_id}'. Valid options: {', '.join(THEMES)}"
        )
    return theme
