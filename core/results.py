"""
Result aggregation for finished sessions.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import SessionStateError
from core.quiz_session import SessionState


@dataclass(frozen=True)
class SessionResult:
    """Summary statistics for a finished session."""
    correct: int
    total: int
    accuracy_percent: int
    best_streak: int = 0
    degraded_count: int = 0


def accuracy_percent(correct: int, total: int) -> int:
    """
    Percentage of correct answers, rounded half up.

    Raises ZeroDivisionError for total == 0; sessions never start empty.
    """
    return (200 * correct + total) // (2 * total)


def summarize(state: SessionState) -> SessionResult:
    """
    Summarize a finished session.

    Raises:
        SessionStateError: If the session has not finished yet
    """
    if not state.finished:
        raise SessionStateError("Results are only available for a finished session")

    total = len(state.words)
    return SessionResult(
        correct=state.score,
        total=total,
        accuracy_percent=accuracy_percent(state.score, total),
        best_streak=state.best_streak,
        degraded_count=sum(1 for record in state.history if record.degraded),
    )
