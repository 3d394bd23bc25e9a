"""
Calculator session.

Keeps the running list of computed lines shown to a user, in the
`"<expression> = <result>"` form, and lets the caller clear it.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .engine import ComputeResult, compute, format_number
from .limits import ExpressionLimits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One submitted expression and its outcome."""

    expression: str
    result: ComputeResult

    @property
    def line(self) -> str:
        if self.result.error is not None:
            return f"{self.expression} = error: {self.result.error.message}"
        if self.result.value is None:
            raise ValueError(f"Result for '{self.expression}' has no value")
        return f"{self.expression} = {format_number(self.result.value)}"


class CalculatorSession:
    """A history of computed expressions."""

    def __init__(self, limits: Optional[ExpressionLimits] = None):
        self._limits = limits
        self._history: List[HistoryEntry] = []

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def submit(self, expression: str) -> HistoryEntry:
        """Computes an expression and records the outcome."""
        entry = HistoryEntry(expression, compute(expression, self._limits))
        self._history.append(entry)
        return entry

    def lines(self) -> List[str]:
        return [entry.line for entry in self._history]

    def reset(self) -> None:
        """Clears the history."""
        logger.debug("session_reset", extra={"entries": len(self._history)})
        self._history.clear()
