"""
Tests for session result aggregation.
"""

import asyncio

import pytest

from conftest import FakeOracle, FakeWordSource, make_item
from core.errors import SessionStateError
from core.quiz_session import QuizSession, SessionState
from core.results import accuracy_percent, summarize
from core.schemas import VocabularyLevel
from core.verification import VerificationService


def finished_state(score, total):
    words = tuple(make_item(f"word{i}") for i in range(total))
    return SessionState(
        words=words,
        level=VocabularyLevel.CET6,
        position=total,
        score=score,
        total_answered=total,
        finished=True,
    )


def test_three_of_five_is_sixty_percent():
    result = summarize(finished_state(3, 5))

    assert (result.correct, result.total, result.accuracy_percent) == (3, 5, 60)


@pytest.mark.parametrize(
    "correct,total,expected",
    [(0, 5, 0), (5, 5, 100), (1, 8, 13), (2, 3, 67), (1, 3, 33), (1, 40, 3)],
)
def test_accuracy_rounds_half_up(correct, total, expected):
    assert accuracy_percent(correct, total) == expected


def test_unfinished_session_has_no_result():
    state = SessionState(words=(make_item(),), level=VocabularyLevel.CET6)

    with pytest.raises(SessionStateError):
        summarize(state)


def test_summary_counts_streak_and_degraded_answers():
    batch = [make_item("apple", ["苹果"]), make_item("pear", ["梨"]), make_item("peach", ["桃子"])]
    session = QuizSession(FakeWordSource(batch=batch), VerificationService(FakeOracle(unreachable=True)))
    asyncio.run(session.start(VocabularyLevel.CET6, 3))
    for answer in ["香蕉", "梨", "桃"]:
        asyncio.run(session.submit_answer(answer))
        session.advance()

    result = summarize(session.state)

    assert result.correct == 2
    assert result.accuracy_percent == 67
    assert result.best_streak == 2
    assert result.degraded_count == 1
