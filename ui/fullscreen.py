# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from typing import Callable, List

logger = logging.getLogger(__name__)


class FullscreenError(RuntimeError):
    pass


class TkFullscreenAdapter:
    """
    Toggles the toplevel's -fullscreen attribute.

    Subscribers are told the state the window manager actually reports
    (read back after each request), never the requested one.
    """

    def __init__(self, toplevel):
        self.toplevel = toplevel
        self._listeners: List[Callable[[bool], None]] = []
        self._last_state = self._read_state()
        try:
            self.toplevel.bind("<Configure>", lambda e: self.sync(), add="+")
        except tk.TclError:
            logger.debug("could not bind <Configure>; relying on explicit sync")

    def subscribe(self, fn: Callable[[bool], None]) -> None:
        self._listeners.append(fn)

    @property
    def is_fullscreen(self) -> bool:
        return self._last_state

    def _read_state(self) -> bool:
        try:
            return bool(int(self.toplevel.attributes("-fullscreen")))
        except (tk.TclError, TypeError, ValueError):
            return False

    def _set(self, flag: bool) -> None:
        try:
            self.toplevel.attributes("-fullscreen", flag)
            self.toplevel.update_idletasks()
        except tk.TclError as e:
            self.sync()
            raise FullscreenError(f"Fullscreen request failed: {e}") from e
        self.sync()

    def request_fullscreen(self) -> None:
        self._set(True)

    def exit_fullscreen(self) -> None:
        self._set(False)

    def toggle(self) -> None:
        if self._read_state():
            self.exit_fullscreen()
        else:
            self.request_fullscreen()

    def sync(self) -> None:
        actual = self._read_state()
        if actual == self._last_state:
            return
        self._last_state = actual
        for fn in list(self._listeners):
            fn(actual)
