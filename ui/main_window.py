# -*- coding: utf-8 -*-

import logging
import sqlite3
import tkinter as tk
import webbrowser
from typing import Dict, Iterable

from tkinterweb import HtmlFrame

from core.timer_engine import EngineSnapshot
from domain.models import DevLink, Theme
from domain.themes import THEMES
from services.prefs_service import PrefsService
from services.timer_service import TimerService
from ui.completion_feedback import CompletionFeedback
from ui.countdown_widget import CountdownWidget
from ui.fullscreen import FullscreenError, TkFullscreenAdapter
from ui.markdown_renderer import MarkdownRenderer, links_markdown
from ui.ui_state import UiState

logger = logging.getLogger(__name__)


class MainWindow:
    def __init__(
        self,
        root: tk.Tk,
        timer_service: TimerService,
        prefs_service: PrefsService,
        ui_state: UiState,
        links: Iterable[DevLink] = (),
        adjust_step_sec: int = 300,
    ):
        self.root = root
        self.timer_service = timer_service
        self.prefs_service = prefs_service
        self.ui_state = ui_state
        self.links = list(links)
        self.adjust_step_sec = adjust_step_sec

        self.root.title("Countdown Timer")
        self.root.geometry("560x560")

        self._md = MarkdownRenderer(self.ui_state.theme)
        self._panels: Dict[str, tk.Frame] = {}
        self._theme_buttons: Dict[str, tk.Button] = {}

        self.fullscreen = TkFullscreenAdapter(self.root)
        self._build_ui()
        self.feedback = CompletionFeedback(self.root, highlight=self.countdown.set_highlight)
        self._bind_keys()

        # wire callbacks from service / adapter -> window
        self.timer_service.set_on_tick(self._on_tick)
        self.timer_service.set_on_state_change(self._on_state_change)
        self.timer_service.set_on_complete(self._on_complete)
        self.fullscreen.subscribe(self._on_fullscreen_change)

        self._apply_theme(self.ui_state.theme)
        self._render(self.timer_service.get_snapshot())

    def _build_ui(self):
        theme = self.ui_state.theme
        self.root.configure(bg=theme.background)

        # top bar (hidden in fullscreen)
        self.top_bar = tk.Frame(self.root, bg=theme.background)
        self.top_bar.pack(fill="x", padx=10, pady=(8, 0))

        self._top_buttons = []
        for label, cmd in (
            ("⛶", self._toggle_fullscreen),
            ("⚙", lambda: self._toggle_panel("settings")),
            ("±", lambda: self._toggle_panel("adjust")),
            ("🔗", lambda: self._toggle_panel("links")),
        ):
            btn = tk.Button(
                self.top_bar,
                text=label,
                command=cmd,
                relief="flat",
                borderwidth=0,
                highlightthickness=0,
                fg="white",
                width=3,
                font=("Montserrat", 12),
            )
            btn.pack(side="right", padx=3)
            self._top_buttons.append(btn)

        # panel slot
        self.panel_slot = tk.Frame(self.root, bg=theme.background)
        self.panel_slot.pack(fill="x", padx=10)

        self._panels["adjust"] = self._build_adjust_panel(self.panel_slot)
        self._panels["settings"] = self._build_settings_panel(self.panel_slot)
        self._panels["links"] = self._build_links_panel(self.panel_slot)

        self.countdown = CountdownWidget(self.root, self.timer_service, theme)
        self.countdown.pack(expand=True)

        self.info_var = tk.StringVar(value="")
        self.info_label = tk.Label(
            self.root,
            textvariable=self.info_var,
            bg=theme.background,
            fg="#fca5a5",
            font=("Montserrat", 9),
        )
        self.info_label.pack(pady=(0, 8))

    def _panel_frame(self, parent) -> tk.Frame:
        return tk.Frame(
            parent,
            bg=self.ui_state.theme.track,
            highlightthickness=1,
            highlightbackground=self.ui_state.theme.primary,
            padx=10,
            pady=8,
        )

    def _panel_button(self, parent, text, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            command=command,
            relief="flat",
            borderwidth=0,
            fg="white",
            padx=10,
            pady=4,
            font=("Montserrat", 10, "bold"),
        )

    def _build_adjust_panel(self, parent) -> tk.Frame:
        frame = self._panel_frame(parent)
        minutes = self.adjust_step_sec // 60
        self._panel_button(
            frame, f"+{minutes} min", lambda: self._adjust(self.adjust_step_sec)
        ).pack(side="left", padx=4)
        self._panel_button(
            frame, f"-{minutes} min", lambda: self._adjust(-self.adjust_step_sec)
        ).pack(side="left", padx=4)
        self._panel_button(frame, "Reset", self.timer_service.reset).pack(
            side="left", padx=4
        )
        return frame

    def _build_settings_panel(self, parent) -> tk.Frame:
        frame = self._panel_frame(parent)
        for theme_id, theme in THEMES.items():
            btn = tk.Button(
                frame,
                text=theme.label,
                command=lambda t=theme_id: self._select_theme(t),
                relief="flat",
                borderwidth=2,
                bg=theme.track,
                fg=theme.primary,
                activebackground=theme.secondary,
                padx=8,
                pady=4,
                font=("Montserrat", 10, "bold"),
            )
            btn.pack(side="left", padx=4)
            self._theme_buttons[theme_id] = btn
        return frame

    def _build_links_panel(self, parent) -> tk.Frame:
        frame = self._panel_frame(parent)
        holder = tk.Frame(frame, height=220)
        holder.pack(fill="x")
        holder.pack_propagate(False)
        self.links_view = HtmlFrame(holder, on_link_click=self._open_link)
        self.links_view.pack(fill="both", expand=True)
        self._render_links()
        return frame

    def _bind_keys(self):
        self.root.bind("<space>", lambda e: self.timer_service.toggle())
        self.root.bind("<KeyPress-r>", lambda e: self.timer_service.reset())
        self.root.bind("<KeyPress-plus>", lambda e: self._adjust(self.adjust_step_sec))
        self.root.bind("<KeyPress-equal>", lambda e: self._adjust(self.adjust_step_sec))
        self.root.bind(
            "<KeyPress-minus>", lambda e: self._adjust(-self.adjust_step_sec)
        )
        self.root.bind("<F11>", lambda e: self._toggle_fullscreen())
        self.root.bind("<Escape>", lambda e: self._exit_fullscreen())

    def run(self):
        self.root.mainloop()

    # ----- UI actions -----
    def _adjust(self, delta_sec: int):
        if self.timer_service.adjust(delta_sec):
            self.info_var.set("")
        else:
            self.info_var.set("Not enough time left to remove that much.")

    def _toggle_panel(self, name: str):
        self.ui_state.toggle_panel(name)
        self._show_open_panel()

    def _show_open_panel(self):
        for name, frame in self._panels.items():
            if self.ui_state.is_open(name):
                frame.pack(fill="x", pady=(6, 0))
            else:
                frame.pack_forget()

    def _select_theme(self, theme_id: str):
        theme = self.ui_state.set_theme(theme_id)
        try:
            self.prefs_service.save_theme(theme_id)
        except sqlite3.Error as e:
            logger.warning("could not save theme preference: %s", e)
        self._apply_theme(theme)

    def _toggle_fullscreen(self):
        self.ui_state.close_panels()
        self._show_open_panel()
        try:
            self.fullscreen.toggle()
        except FullscreenError as e:
            logger.warning("%s", e)
            self.info_var.set("Fullscreen is not available here.")

    def _exit_fullscreen(self):
        if not self.fullscreen.is_fullscreen:
            return
        try:
            self.fullscreen.exit_fullscreen()
        except FullscreenError as e:
            logger.warning("%s", e)
            self.info_var.set("Could not leave fullscreen.")

    def _open_link(self, url: str):
        logger.debug("opening %s", url)
        webbrowser.open_new_tab(url)

    # ----- Rendering -----
    def _apply_theme(self, theme: Theme):
        self.root.configure(bg=theme.background)
        for w in (self.top_bar, self.panel_slot, self.info_label):
            w.configure(bg=theme.background)
        for btn in self._top_buttons:
            btn.configure(bg=theme.track, activebackground=theme.secondary)
        for frame in self._panels.values():
            frame.configure(bg=theme.track, highlightbackground=theme.primary)
            for child in frame.winfo_children():
                if isinstance(child, tk.Button) and child not in self._theme_buttons.values():
                    child.configure(bg=theme.background, activebackground=theme.secondary)
        for theme_id, btn in self._theme_buttons.items():
            btn.configure(relief="solid" if theme_id == theme.id else "flat")
        self.countdown.apply_theme(theme)
        self._md.set_theme(theme)
        self._render_links()

    def _render_links(self):
        html = self._md.to_html(links_markdown(self.links))
        self.links_view.load_html(html)

    def _render(self, snap: EngineSnapshot):
        self.countdown.render(snap)
        self.countdown.set_controls_visible(not snap.is_fullscreen)
        if snap.is_fullscreen:
            self.top_bar.pack_forget()
        else:
            self.top_bar.pack(fill="x", padx=10, pady=(8, 0), before=self.panel_slot)

    # ----- Service / adapter callbacks -----
    def _on_tick(self, snap: EngineSnapshot):
        self.countdown.render(snap)

    def _on_state_change(self, snap: EngineSnapshot):
        self._render(snap)

    def _on_complete(self):
        self.feedback.play()

    def _on_fullscreen_change(self, is_fullscreen: bool):
        if is_fullscreen:
            self.ui_state.close_panels()
            self._show_open_panel()
        self.timer_service.set_fullscreen(is_fullscreen)
