import tkinter as tk
from typing import Callable, Dict, List, Tuple

import pytest


class FakeTkWidget:
    """Stands in for a Tk widget's after/after_cancel/bell scheduling."""

    def __init__(self) -> None:
        self._next_id = 0
        self.jobs: Dict[str, Tuple[int, Callable[[], None]]] = {}
        self.cancelled: List[str] = []
        self.bells = 0

    def after(self, ms: int, fn: Callable[[], None]) -> str:
        self._next_id += 1
        job = f"after#{self._next_id}"
        self.jobs[job] = (ms, fn)
        return job

    def after_cancel(self, job: str) -> None:
        self.cancelled.append(job)
        self.jobs.pop(job, None)

    def bell(self) -> None:
        self.bells += 1

    def run_pending(self) -> int:
        """Fire every job scheduled so far (not ones they schedule)."""
        pending = list(self.jobs.items())
        self.jobs.clear()
        for _, (_, fn) in pending:
            fn()
        return len(pending)


class FakeToplevel:
    """Minimal toplevel exposing the -fullscreen attribute."""

    def __init__(self, supported: bool = True, honour_requests: bool = True) -> None:
        self.supported = supported
        self.honour_requests = honour_requests
        self.state = False
        self.bindings: Dict[str, Callable] = {}

    def attributes(self, name: str, value=None):
        assert name == "-fullscreen"
        if value is None:
            return 1 if self.state else 0
        if not self.supported:
            raise tk.TclError("bad attribute \"-fullscreen\"")
        if self.honour_requests:
            self.state = bool(value)
        return ""

    def update_idletasks(self) -> None:
        pass

    def bind(self, sequence: str, fn: Callable, add=None) -> None:
        self.bindings[sequence] = fn


@pytest.fixture
def fake_widget() -> FakeTkWidget:
    return FakeTkWidget()


@pytest.fixture
def fake_toplevel() -> FakeToplevel:
    return FakeToplevel()


@pytest.fixture
def make_toplevel() -> Callable[..., FakeToplevel]:
    return FakeToplevel
