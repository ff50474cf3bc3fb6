# -*- coding: utf-8 -*-

from typing import Callable, Optional, Protocol


TickCallback = Callable[[], None]


class ClockSource(Protocol):
    """
    Anything that calls a zero-arg callback roughly once per second
    after arm(), until disarm().
    """

    @property
    def armed(self) -> bool: ...

    def arm(self, callback: TickCallback) -> None: ...

    def disarm(self) -> None: ...


class TkClock:
    """
    Tick loop driven by the Tk event loop (widget.after).
    Each tick reschedules the next one before invoking the callback,
    so a callback that disarms the clock cancels cleanly.
    """

    def __init__(self, widget, interval_ms: int = 1000):
        self.widget = widget
        self.interval_ms = int(interval_ms)
        self._callback: Optional[TickCallback] = None
        self._job = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def arm(self, callback: TickCallback) -> None:
        self._callback = callback
        if self._job is None:
            self._job = self.widget.after(self.interval_ms, self._fire)

    def disarm(self) -> None:
        self._callback = None
        if self._job is not None:
            try:
                self.widget.after_cancel(self._job)
            finally:
                self._job = None

    def _fire(self) -> None:
        self._job = None
        callback = self._callback
        if callback is None:
            return
        self._job = self.widget.after(self.interval_ms, self._fire)
        callback()


class ManualClock:
    """
    Synthetic clock: ticks only when advance() is called.
    """

    def __init__(self):
        self._callback: Optional[TickCallback] = None
        self.ticks_delivered = 0

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def arm(self, callback: TickCallback) -> None:
        self._callback = callback

    def disarm(self) -> None:
        self._callback = None

    def advance(self, ticks: int = 1) -> int:
        """
        Deliver up to `ticks` ticks. Stops early once disarmed.
        Returns how many were delivered.
        """
        delivered = 0
        for _ in range(int(ticks)):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        self.ticks_delivered += delivered
        return delivered
