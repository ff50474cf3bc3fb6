"""Tests for TimerService: engine + clock + UI callbacks."""

import logging

import pytest

from core.clock import ManualClock
from core.timer_engine import TimerEngine
from services.timer_service import TimerService


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


def make_service(clock: ManualClock, seconds: int = 60) -> TimerService:
    return TimerService(TimerEngine(initial_sec=seconds), clock)


class Recorder:
    def __init__(self, service: TimerService) -> None:
        self.ticks = []
        self.states = []
        self.completions = 0
        service.set_on_tick(self.ticks.append)
        service.set_on_state_change(self.states.append)
        service.set_on_complete(self._complete)

    def _complete(self) -> None:
        self.completions += 1


class TestArming:
    def test_start_arms_clock(self, clock):
        service = make_service(clock)
        service.start()
        assert clock.armed is True
        assert service.get_snapshot().is_running is True

    def test_start_at_zero_does_not_arm(self, clock):
        service = make_service(clock, seconds=0)
        service.start()
        assert clock.armed is False

    def test_pause_disarms(self, clock):
        service = make_service(clock)
        service.start()
        service.pause()
        assert clock.armed is False
        assert clock.advance(5) == 0
        assert service.get_snapshot().remaining_sec == 60

    def test_reset_disarms_and_restores(self, clock):
        service = make_service(clock)
        service.start()
        clock.advance(10)
        service.reset()
        snap = service.get_snapshot()
        assert clock.armed is False
        assert snap.remaining_sec == 60
        assert snap.is_running is False

    def test_toggle_round_trip(self, clock):
        service = make_service(clock)
        service.toggle()
        assert clock.armed is True
        service.toggle()
        assert clock.armed is False

    def test_set_duration_disarms(self, clock):
        service = make_service(clock)
        service.start()
        assert service.set_duration(120) is True
        assert clock.armed is False
        assert service.get_snapshot().baseline_sec == 120


class TestCompletion:
    def test_on_complete_fires_once(self, clock):
        service = make_service(clock, seconds=3)
        rec = Recorder(service)
        service.start()
        delivered = clock.advance(10)
        assert delivered == 3
        assert rec.completions == 1
        assert [s.remaining_sec for s in rec.ticks] == [2, 1, 0]
        assert clock.armed is False
        assert service.get_snapshot().is_running is False

    def test_late_tick_is_ignored(self, clock):
        service = make_service(clock, seconds=3)
        rec = Recorder(service)
        service.start()
        service.engine.pause()  # state flipped before the tick is processed
        service.tick()
        assert rec.ticks == []
        assert clock.armed is False
        assert service.get_snapshot().remaining_sec == 3

    def test_reset_never_completes(self, clock):
        service = make_service(clock, seconds=3)
        rec = Recorder(service)
        service.start()
        clock.advance(2)
        service.reset()
        assert rec.completions == 0

    def test_completion_logged(self, clock, caplog):
        service = make_service(clock, seconds=1)
        with caplog.at_level(logging.INFO, logger="services.timer_service"):
            service.start()
            clock.advance(1)
        assert "countdown complete" in caplog.text


class TestAdjust:
    def test_rejected_adjust_emits_nothing(self, clock):
        service = make_service(clock, seconds=5)
        rec = Recorder(service)
        assert service.adjust(-10) is False
        assert rec.states == []

    def test_accepted_adjust_emits_state(self, clock):
        service = make_service(clock, seconds=60)
        rec = Recorder(service)
        assert service.adjust(300) is True
        assert rec.states[-1].remaining_sec == 360
        assert rec.states[-1].baseline_sec == 360

    def test_adjust_while_running_keeps_clock_armed(self, clock):
        service = make_service(clock, seconds=60)
        service.start()
        service.adjust(300)
        assert clock.armed is True
        assert service.get_snapshot().baseline_sec == 60

    def test_running_adjust_to_zero_completes(self, clock):
        service = make_service(clock, seconds=60)
        rec = Recorder(service)
        service.start()
        assert service.adjust(-60) is True
        assert clock.armed is False
        assert rec.completions == 1
        assert rec.states[-1].is_running is False
        assert rec.states[-1].remaining_sec == 0
        assert clock.advance(5) == 0
        assert rec.completions == 1

    def test_idle_adjust_to_zero_does_not_complete(self, clock):
        service = make_service(clock, seconds=60)
        rec = Recorder(service)
        assert service.adjust(-60) is True
        assert rec.completions == 0
        assert rec.states[-1].is_complete is True


class TestFullscreen:
    def test_set_fullscreen_emits_only_on_change(self, clock):
        service = make_service(clock)
        rec = Recorder(service)
        service.set_fullscreen(True)
        service.set_fullscreen(True)
        assert len(rec.states) == 1
        assert rec.states[0].is_fullscreen is True
