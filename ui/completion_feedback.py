# -*- coding: utf-8 -*-

from typing import Callable, Optional

BEEP_COUNT = 5
BEEP_SPACING_MS = 400


class CompletionFeedback:
    """
    Cue for the end of a countdown: a short run of bells, and optionally a
    visual flash. highlight(True/False) is called in step with the bells,
    alternating on and off, and always ends on False.
    """

    def __init__(
        self,
        widget,
        count: int = BEEP_COUNT,
        spacing_ms: int = BEEP_SPACING_MS,
        highlight: Optional[Callable[[bool], None]] = None,
    ):
        self.widget = widget
        self.count = count
        self.spacing_ms = spacing_ms
        self.highlight = highlight
        self._jobs = []

    def play(self) -> None:
        self.cancel()
        for i in range(self.count):
            delay = i * self.spacing_ms
            self._jobs.append(self.widget.after(delay, self.widget.bell))
            if self.highlight:
                self._jobs.append(self.widget.after(delay, lambda on=(i % 2 == 0): self.highlight(on)))
        if self.highlight:
            self._jobs.append(
                self.widget.after(self.count * self.spacing_ms, lambda: self.highlight(False))
            )

    def cancel(self) -> None:
        for job in self._jobs:
            self.widget.after_cancel(job)
        if self._jobs and self.highlight:
            self.highlight(False)
        self._jobs = []
