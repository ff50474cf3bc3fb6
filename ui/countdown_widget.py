# -*- coding: utf-8 -*-

import tkinter as tk

from core.timer_engine import EngineSnapshot
from domain.models import Theme
from services.timer_service import TimerService

RING_SIZE = 260
RING_WIDTH = 12
WARN_THRESHOLD_SEC = 10
WARN_COLOR = "#fca5a5"
MUTED = "#c7c9d3"


def status_text(snap: EngineSnapshot) -> str:
    if snap.is_running:
        return "Counting down..."
    if snap.is_complete:
        return "Time's up!"
    return "Ready"


def ring_extent(progress: float) -> float:
    # progress can exceed 1 after adding time mid-run; draw a full ring then
    return -360.0 * max(0.0, min(progress, 1.0))


class CountdownWidget(tk.Frame):
    def __init__(self, master, timer_service: TimerService, theme: Theme):
        super().__init__(master, bg=theme.background)

        self.timer_service = timer_service
        self.theme = theme

        self._build_ui()
        self.render(self.timer_service.get_snapshot())

    def _build_ui(self):
        pad = RING_WIDTH
        self.canvas = tk.Canvas(
            self,
            width=RING_SIZE,
            height=RING_SIZE,
            bg=self.theme.background,
            highlightthickness=0,
        )
        self.canvas.pack(pady=(10, 14))

        box = (pad, pad, RING_SIZE - pad, RING_SIZE - pad)
        self._track = self.canvas.create_oval(
            *box, outline=self.theme.track, width=RING_WIDTH
        )
        self._arc = self.canvas.create_arc(
            *box,
            start=90,
            extent=-359.9,
            style="arc",
            outline=self.theme.primary,
            width=RING_WIDTH,
        )
        center = RING_SIZE // 2
        self._time_text = self.canvas.create_text(
            center,
            center - 8,
            text="00:00:00",
            fill="white",
            font=("Courier New", 30, "bold"),
        )
        self._status_text = self.canvas.create_text(
            center,
            center + 30,
            text="Ready",
            fill=MUTED,
            font=("Montserrat", 10),
        )

        self.btns = tk.Frame(self, bg=self.theme.background)
        self.btns.pack()

        self.toggle_btn = tk.Button(
            self.btns,
            text="▶",
            width=4,
            command=self.timer_service.toggle,
            relief="flat",
            highlightthickness=0,
            borderwidth=0,
            fg="white",
            font=("Montserrat", 14, "bold"),
        )
        self.reset_btn = tk.Button(
            self.btns,
            text="⟲",
            width=4,
            command=self.timer_service.reset,
            relief="flat",
            highlightthickness=0,
            borderwidth=0,
            fg="white",
            font=("Montserrat", 14, "bold"),
        )
        self.toggle_btn.pack(side="left", padx=8)
        self.reset_btn.pack(side="left", padx=8)

        self._paint_buttons()

    def _paint_buttons(self):
        for btn in (self.toggle_btn, self.reset_btn):
            btn.config(
                bg=self.theme.track,
                activebackground=self.theme.secondary,
                activeforeground="white",
            )

    # ---- Rendering ----
    def render(self, snap: EngineSnapshot):
        self.canvas.itemconfig(self._time_text, text=snap.formatted)

        urgent = snap.is_running and snap.remaining_sec <= WARN_THRESHOLD_SEC
        self.canvas.itemconfig(
            self._status_text,
            text=status_text(snap),
            fill=WARN_COLOR if urgent else MUTED,
        )

        extent = ring_extent(snap.progress)
        if extent <= -360.0:
            # Tk draws nothing for a full 360 degree arc
            extent = -359.9
        self.canvas.itemconfig(self._arc, extent=extent)

        self.toggle_btn.config(text="⏸" if snap.is_running else "▶")
        if snap.is_running or snap.remaining_sec > 0:
            self.toggle_btn.config(state="normal")
        else:
            self.toggle_btn.config(state="disabled")

    def apply_theme(self, theme: Theme):
        self.theme = theme
        self.configure(bg=theme.background)
        self.canvas.configure(bg=theme.background)
        self.btns.configure(bg=theme.background)
        self.canvas.itemconfig(self._track, outline=theme.track)
        self.canvas.itemconfig(self._arc, outline=theme.primary)
        self._paint_buttons()

    def set_highlight(self, on: bool):
        """Flash the ring and time text; used as the visual completion cue."""
        color = WARN_COLOR if on else self.theme.primary
        self.canvas.itemconfig(self._arc, outline=color)
        self.canvas.itemconfig(self._time_text, fill=WARN_COLOR if on else "white")

    def set_controls_visible(self, visible: bool):
        if visible:
            self.btns.pack()
        else:
            self.btns.pack_forget()
