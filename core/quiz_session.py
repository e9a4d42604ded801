"""
Quiz Session - state machine for one run through a word batch.

Phases:
    IDLE -> LOADING -> PRESENTING -> VERIFYING -> RESOLVED -> (PRESENTING | FINISHED)

PRESENTING, VERIFYING and RESOLVED are the per-word steps of a ready session.
reset() returns to IDLE from anywhere. Apart from reset(), each phase admits
one operation, so a pending start() or submit_answer() keeps a second one out
until it resolves.

Pending calls are tagged with a generation counter (bumped on every start and
reset) and the word position. A result whose tag no longer matches arrived
after a reset and is dropped instead of being applied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from core.errors import GenerationError, InvalidAnswerError, SessionStateError, StaleResultError
from core.schemas import VocabularyItem, VocabularyLevel
from core.verification import VerificationOutcome, VerificationService, normalize_answer
from core.word_source import WordSource

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    """Lifecycle phase of a quiz session."""
    IDLE = "idle"
    LOADING = "loading"
    PRESENTING = "presenting"
    VERIFYING = "verifying"
    RESOLVED = "resolved"
    FINISHED = "finished"


READY_PHASES = frozenset({SessionPhase.PRESENTING, SessionPhase.VERIFYING, SessionPhase.RESOLVED})


@dataclass(frozen=True)
class AnswerRecord:
    """One answered word, kept for the result screen."""
    word: str
    submitted_answer: str
    is_correct: bool
    explanation: Optional[str] = None
    degraded: bool = False


@dataclass(frozen=True)
class SessionState:
    """
    Score and position within a fixed word batch.

    Invariants: 0 <= score <= total_answered <= position <= len(words), and
    finished is True exactly when every word has been answered.
    """
    words: tuple[VocabularyItem, ...]
    level: VocabularyLevel
    position: int = 0
    score: int = 0
    total_answered: int = 0
    streak: int = 0
    best_streak: int = 0
    finished: bool = False
    history: tuple[AnswerRecord, ...] = ()

    @property
    def current_word(self) -> Optional[VocabularyItem]:
        if self.finished or self.position >= len(self.words):
            return None
        return self.words[self.position]

    @property
    def is_last_word(self) -> bool:
        return self.position == len(self.words) - 1

    def apply_outcome(self, outcome: VerificationOutcome) -> "SessionState":
        """Return the state after recording `outcome` for the current word."""
        word = self.words[self.position]
        correct = outcome.is_correct
        streak = self.streak + 1 if correct else 0
        position = self.position + 1
        return replace(
            self,
            position=position,
            score=self.score + 1 if correct else self.score,
            total_answered=self.total_answered + 1,
            streak=streak,
            best_streak=max(self.best_streak, streak),
            finished=position == len(self.words),
            history=self.history + (
                AnswerRecord(
                    word=word.word,
                    submitted_answer=outcome.submitted_answer,
                    is_correct=correct,
                    explanation=outcome.explanation,
                    degraded=outcome.degraded,
                ),
            ),
        )


class QuizSession:
    """
    Drives one vocabulary session and owns its SessionState.

    Usage:
        session = QuizSession(source, VerificationService(oracle))
        await session.start(VocabularyLevel.CET6, 5)
        outcome = await session.submit_answer("苹果")
        state = session.advance()
    """

    def __init__(self, source: WordSource, verifier: VerificationService):
        self.source = source
        self.verifier = verifier
        self._phase = SessionPhase.IDLE
        self._state: Optional[SessionState] = None
        self._outcome: Optional[VerificationOutcome] = None
        self._generation = 0
        self._level: Optional[VocabularyLevel] = None
        self._count: Optional[int] = None

    # ---- Observable State ----

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def state(self) -> Optional[SessionState]:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._phase in READY_PHASES

    @property
    def current_word(self) -> Optional[VocabularyItem]:
        if self._state is None:
            return None
        return self._state.current_word

    @property
    def last_outcome(self) -> Optional[VerificationOutcome]:
        """Outcome of the pending submission, available while RESOLVED."""
        return self._outcome

    @property
    def level(self) -> Optional[VocabularyLevel]:
        return self._level

    # ---- Operations ----

    async def start(self, level: VocabularyLevel, count: int) -> SessionState:
        """
        Fetch a batch and begin presenting its first word.

        Raises:
            SessionStateError: If the session is not idle
            GenerationError: If the batch could not be produced or is empty
            StaleResultError: If the session was reset while loading
        """
        self._require(SessionPhase.IDLE, "start")
        if count <= 0:
            raise GenerationError(f"Batch size must be positive, got {count}")

        self._generation += 1
        generation = self._generation
        self._level = level
        self._count = count
        self._phase = SessionPhase.LOADING
        logger.info("Loading %d words for %s", count, level.short_name)

        try:
            batch = await self.source.fetch_batch(level, count)
        except GenerationError:
            self._fail_loading(generation)
            raise
        except Exception as exc:
            self._fail_loading(generation)
            raise GenerationError(f"Word source failed: {exc}") from exc

        if generation != self._generation:
            logger.info("Discarding batch that arrived after a reset")
            raise StaleResultError("Session was reset while the batch was loading")

        if not batch:
            self._fail_loading(generation)
            raise GenerationError("Word source returned an empty batch")
        if len(batch) > count:
            logger.warning("Word source returned %d words for %d requested; truncating", len(batch), count)
            batch = batch[:count]

        self._state = SessionState(words=tuple(batch), level=level)
        self._outcome = None
        self._phase = SessionPhase.PRESENTING
        logger.info("Session started with %d words", len(batch))
        return self._state

    async def submit_answer(self, raw_answer: str) -> VerificationOutcome:
        """
        Verify an answer for the current word.

        The outcome is returned to the caller and, unless the session was
        reset meanwhile, stored until advance() records it.

        Raises:
            SessionStateError: If no word is being presented
            InvalidAnswerError: If the answer is blank
        """
        self._require(SessionPhase.PRESENTING, "submit_answer")
        answer = normalize_answer(raw_answer or "")
        if not answer:
            raise InvalidAnswerError("Answer must not be empty")

        word = self._state.current_word
        ticket = (self._generation, self._state.position)
        self._phase = SessionPhase.VERIFYING

        try:
            outcome = await self.verifier.verify(word.word, word.meanings, answer)
        except Exception:
            if self._awaiting(ticket):
                self._phase = SessionPhase.PRESENTING
            raise

        if not self._awaiting(ticket):
            logger.info("Ignoring verification for %r that resolved after a reset", word.word)
            return outcome

        self._outcome = outcome
        self._phase = SessionPhase.RESOLVED
        logger.info(
            "Answer for %r: %s (%s)",
            word.word,
            "correct" if outcome.is_correct else "incorrect",
            outcome.source.value,
        )
        return outcome

    def advance(self) -> SessionState:
        """
        Record the resolved outcome and move to the next word.

        Raises:
            SessionStateError: If there is no resolved outcome to record
        """
        self._require(SessionPhase.RESOLVED, "advance")
        self._state = self._state.apply_outcome(self._outcome)
        self._outcome = None

        if self._state.finished:
            self._phase = SessionPhase.FINISHED
            logger.info("Session finished: %d/%d", self._state.score, len(self._state.words))
        else:
            self._phase = SessionPhase.PRESENTING
        return self._state

    def reset(self) -> None:
        """Return to IDLE, discarding the state and any pending result."""
        self._generation += 1
        self._phase = SessionPhase.IDLE
        self._state = None
        self._outcome = None

    async def restart(self) -> SessionState:
        """Reset, then start again with the previous level and batch size."""
        if self._level is None or self._count is None:
            raise SessionStateError("Cannot restart a session that was never started")
        level, count = self._level, self._count
        self.reset()
        return await self.start(level, count)

    # ---- Helpers ----

    def _require(self, phase: SessionPhase, operation: str) -> None:
        if self._phase is not phase:
            raise SessionStateError(
                f"{operation}() requires phase {phase.value}, session is {self._phase.value}"
            )

    def _awaiting(self, ticket: tuple[int, int]) -> bool:
        return (
            self._phase is SessionPhase.VERIFYING
            and self._state is not None
            and (self._generation, self._state.position) == ticket
        )

    def _fail_loading(self, generation: int) -> None:
        if generation == self._generation:
            self._phase = SessionPhase.IDLE
            self._state = None
