from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, Optional

from sexp_stepper import Term
from sexp_stepper import config
from sexp_stepper.errors import StepperHistoryError
from sexp_stepper.printer import to_source
from sexp_stepper.reader.parser import parse
from sexp_stepper.reduction import can_step, step

logger = logging.getLogger(__name__)


class Session:
    """
    Drives the reducer over one program and records the states it passes
    through so a caller can scrub backwards and forwards.

    Only the most recent `max_history` earlier states are kept; `first()`
    can always return to the initial program.
    """

    def __init__(self, program: Term | str, max_history: Optional[int] = None):
        if isinstance(program, str):
            program = parse(program)
        if max_history is None:
            max_history = config.get_max_history()
        self.initial: Term = program
        self.current: Term = program
        self.index: int = 0
        self.max_history = max_history
        self._history: deque[Term] = deque(maxlen=max_history)
        self._truncated = False

    @property
    def can_forward(self) -> bool:
        return can_step(self.current)

    @property
    def can_back(self) -> bool:
        return self.index > 0 and len(self._history) > 0

    def forward(self) -> Term:
        """Advance one step. At normal form the state is left as it is.

        A failing step raises and leaves the session on the last good state.
        """
        if not can_step(self.current):
            return self.current
        nxt = step(self.current)
        if self.max_history > 0:
            if len(self._history) == self.max_history and not self._truncated:
                logger.warning("history full at %d states; dropping the oldest", self.max_history)
                self._truncated = True
            self._history.append(self.current)
        self.current = nxt
        self.index += 1
        logger.debug("step %d: %s", self.index, to_source(nxt))
        return nxt

    def back(self) -> Term:
        if self.index == 0:
            return self.current
        if not self._history:
            raise StepperHistoryError(f"state {self.index - 1} is no longer recorded")
        self.current = self._history.pop()
        self.index -= 1
        return self.current

    def first(self) -> Term:
        self.current = self.initial
        self.index = 0
        self._history.clear()
        self._truncated = False
        return self.current

    @property
    def oldest_index(self) -> int:
        """Earliest step index `back()` can still reach."""
        return self.index - len(self._history)

    def seek(self, index: int) -> Term:
        """Move to step `index`. Moving forward stops early at normal form.

        Seeking behind the recorded history raises without moving.
        """
        if index < 0:
            raise StepperHistoryError(f"negative step index {index}")
        if index == 0:
            return self.first()
        if index < self.oldest_index:
            raise StepperHistoryError(
                f"state {index} is no longer recorded (oldest is {self.oldest_index})"
            )
        while self.index > index:
            self.back()
        while self.index < index and can_step(self.current):
            self.forward()
        return self.current

    def iter_steps(self, max_steps: Optional[int] = None) -> Iterator[Term]:
        """Yield each new state until normal form or `max_steps` steps."""
        taken = 0
        while can_step(self.current):
            if max_steps is not None and taken >= max_steps:
                return
            yield self.forward()
            taken += 1

    def run(self, max_steps: Optional[int] = None) -> int:
        """Step towards normal form; returns the number of steps taken."""
        taken = 0
        for _ in self.iter_steps(max_steps):
            taken += 1
        return taken
