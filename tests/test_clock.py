"""Tests for the clock sources."""

from core.clock import ManualClock, TkClock


class TestManualClock:
    def test_unarmed_delivers_nothing(self):
        clock = ManualClock()
        assert clock.advance(3) == 0
        assert clock.armed is False

    def test_delivers_ticks_while_armed(self):
        clock = ManualClock()
        calls = []
        clock.arm(lambda: calls.append(1))
        assert clock.advance(3) == 3
        assert len(calls) == 3
        assert clock.ticks_delivered == 3

    def test_stops_when_callback_disarms(self):
        clock = ManualClock()
        calls = []

        def cb():
            calls.append(1)
            if len(calls) == 2:
                clock.disarm()

        clock.arm(cb)
        assert clock.advance(5) == 2
        assert clock.armed is False


class TestTkClock:
    def test_arm_schedules_one_job(self, fake_widget):
        clock = TkClock(fake_widget, interval_ms=1000)
        clock.arm(lambda: None)
        clock.arm(lambda: None)
        assert len(fake_widget.jobs) == 1
        ms, _ = next(iter(fake_widget.jobs.values()))
        assert ms == 1000

    def test_fire_reschedules_and_calls(self, fake_widget):
        clock = TkClock(fake_widget)
        calls = []
        clock.arm(lambda: calls.append(1))
        fake_widget.run_pending()
        fake_widget.run_pending()
        assert len(calls) == 2
        assert len(fake_widget.jobs) == 1

    def test_disarm_cancels_pending(self, fake_widget):
        clock = TkClock(fake_widget)
        clock.arm(lambda: None)
        clock.disarm()
        assert fake_widget.jobs == {}
        assert len(fake_widget.cancelled) == 1
        assert clock.armed is False

    def test_disarm_inside_callback_stops_loop(self, fake_widget):
        clock = TkClock(fake_widget)
        calls = []

        def cb():
            calls.append(1)
            clock.disarm()

        clock.arm(cb)
        fake_widget.run_pending()
        assert calls == [1]
        assert fake_widget.jobs == {}
