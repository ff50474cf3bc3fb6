# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import Optional

from domain.models import Theme
from domain.themes import DEFAULT_THEME, get_theme

PANELS = ("adjust", "settings", "links")


@dataclass
class UiState:
    """
    Presentation-only toggles. Never touches the timer engine.
    At most one panel is open at a time.
    """

    theme_id: str = DEFAULT_THEME
    open_panel: Optional[str] = None

    @property
    def theme(self) -> Theme:
        return get_theme(self.theme_id)

    def set_theme(self, theme_id: str) -> Theme:
        theme = get_theme(theme_id)
        self.theme_id = theme_id
        return theme

    def toggle_panel(self, name: str) -> Optional[str]:
        if name not in PANELS:
            raise ValueError(f"Unknown panel '{name}'.")
        self.open_panel = None if self.open_panel == name else name
        return self.open_panel

    def close_panels(self) -> None:
        self.open_panel = None

    def is_open(self, name: str) -> bool:
        return self.open_panel == name
