# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from core.clock import ClockSource
from core.timer_engine import EngineSnapshot, TimerEngine

logger = logging.getLogger(__name__)


class TimerService:
    """
    Orchestrates:
    - TimerEngine state
    - Clock arming / disarming
    - Callbacks for UI (tick, state change, completion)
    """

    def __init__(self, engine: TimerEngine, clock: ClockSource):
        self.engine = engine
        self.clock = clock

        self._on_tick: Optional[Callable[[EngineSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[EngineSnapshot], None]] = None
        self._on_complete: Optional[Callable[[], None]] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_state_change(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_state_change = fn

    def set_on_complete(self, fn: Callable[[], None]) -> None:
        self._on_complete = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.engine.snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.engine.snapshot())

    def _emit_complete(self) -> None:
        if self._on_complete:
            self._on_complete()

    # ----- Public API -----
    def get_snapshot(self) -> EngineSnapshot:
        return self.engine.snapshot()

    def start(self) -> None:
        if not self.engine.start():
            logger.debug("start ignored: nothing left to count down")
            return
        self.clock.arm(self.tick)
        logger.info("countdown started at %s", self.engine.formatted_time())
        self._emit_state_change()

    def pause(self) -> None:
        self.clock.disarm()
        if self.engine.is_running:
            self.engine.pause()
            logger.info("countdown paused at %s", self.engine.formatted_time())
        self._emit_state_change()

    def toggle(self) -> None:
        if self.engine.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self.clock.disarm()
        self.engine.reset()
        logger.info("countdown reset to %s", self.engine.formatted_time())
        self._emit_state_change()

    def adjust(self, delta_sec: int) -> bool:
        was_running = self.engine.is_running
        accepted = self.engine.adjust(delta_sec)
        if not accepted:
            logger.debug(
                "adjust %+d rejected: only %d seconds left",
                delta_sec,
                self.engine.remaining_sec,
            )
            return False
        logger.debug("adjusted by %+d to %s", delta_sec, self.engine.formatted_time())

        if was_running and not self.engine.is_running:
            # adjusted down to zero mid-run
            self.clock.disarm()
            logger.info("countdown complete")
            self._emit_state_change()
            self._emit_complete()
            return True

        self._emit_state_change()
        return True

    def set_duration(self, seconds: int) -> bool:
        if not self.engine.set_duration(seconds):
            logger.debug("set_duration(%d) rejected", seconds)
            return False
        self.clock.disarm()
        self._emit_state_change()
        return True

    def set_fullscreen(self, flag: bool) -> None:
        if self.engine.is_fullscreen == bool(flag):
            return
        self.engine.set_fullscreen(flag)
        self._emit_state_change()

    def tick(self) -> None:
        """
        Called once per second by the clock while armed.
        """
        if not self.engine.is_running:
            # late tick after pause; the clock should already be disarmed
            self.clock.disarm()
            return

        completed = self.engine.tick()
        self._emit_tick()

        if completed:
            self.clock.disarm()
            logger.info("countdown complete")
            self._emit_state_change()
            self._emit_complete()
