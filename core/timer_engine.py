# -*- coding: utf-8 -*-

from dataclasses import dataclass


def format_hms(seconds: int) -> str:
    seconds = max(0, int(seconds))
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def _require_int(value, name: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class EngineSnapshot:
    remaining_sec: int
    baseline_sec: int
    is_running: bool
    is_fullscreen: bool

    @property
    def formatted(self) -> str:
        return format_hms(self.remaining_sec)

    @property
    def progress(self) -> float:
        if self.baseline_sec <= 0:
            return 0.0
        return self.remaining_sec / self.baseline_sec

    @property
    def is_complete(self) -> bool:
        return self.remaining_sec == 0


class TimerEngine:
    """
    Pure countdown engine (no Tkinter).
    The host triggers tick() once per second while running.

    baseline_sec is what progress is measured against. It follows the
    remaining time whenever the timer is idle and stays fixed while running,
    so adding time mid-countdown can push progress above 1.0.
    """

    def __init__(self, initial_sec: int = 60):
        initial_sec = _require_int(initial_sec, "initial_sec")
        if initial_sec < 0:
            raise ValueError("Initial duration cannot be negative.")

        self.remaining_sec = initial_sec
        self.baseline_sec = initial_sec
        self.is_running = False
        self.is_fullscreen = False

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            remaining_sec=self.remaining_sec,
            baseline_sec=self.baseline_sec,
            is_running=self.is_running,
            is_fullscreen=self.is_fullscreen,
        )

    # ----- Commands -----
    def start(self) -> bool:
        # starting with nothing left is a silent no-op
        if self.remaining_sec <= 0:
            return False
        self.is_running = True
        return True

    def pause(self) -> None:
        self.is_running = False

    def toggle(self) -> bool:
        """
        Returns the running flag after the toggle.
        """
        if self.is_running:
            self.pause()
        else:
            self.start()
        return self.is_running

    def reset(self) -> None:
        self.remaining_sec = self.baseline_sec
        self.is_running = False

    def adjust(self, delta_sec: int) -> bool:
        """
        Add (or remove) time. Returns False when the result would drop
        below zero; state is left untouched in that case.

        Taking a running timer down to exactly zero stops it, the same as
        the final tick would. Callers compare is_running before and after
        to tell that apart from an idle adjust.
        """
        delta_sec = _require_int(delta_sec, "delta_sec")
        new_remaining = self.remaining_sec + delta_sec
        if new_remaining < 0:
            return False

        self.remaining_sec = new_remaining
        if not self.is_running:
            self.baseline_sec = new_remaining
        elif new_remaining == 0:
            self.is_running = False
        return True

    def set_duration(self, seconds: int) -> bool:
        seconds = _require_int(seconds, "seconds")
        if seconds < 0:
            return False
        self.remaining_sec = seconds
        self.baseline_sec = seconds
        self.is_running = False
        return True

    def set_fullscreen(self, flag: bool) -> None:
        self.is_fullscreen = bool(flag)

    def tick(self) -> bool:
        """
        Returns True only on the tick that completes the countdown.
        """
        if not self.is_running or self.remaining_sec <= 0:
            return False

        self.remaining_sec -= 1

        if self.remaining_sec == 0:
            self.is_running = False
            return True

        return False

    # ----- Queries -----
    def formatted_time(self) -> str:
        return format_hms(self.remaining_sec)

    def progress_fraction(self) -> float:
        return self.snapshot().progress

    def is_complete(self) -> bool:
        return self.remaining_sec == 0
