"""
Two-tier answer verification.

1. Local tier: bidirectional containment against the accepted meanings. No
   I/O; a match settles the answer and the oracle is never called.
2. Oracle tier: one semantic check through the SemanticOracle. If the oracle
   fails, the containment check runs again with its own normalization and
   the outcome is flagged as degraded.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from core.constants import (
    FALLBACK_MATCH_EXPLANATION,
    FALLBACK_NO_MATCH_EXPLANATION,
    LOCAL_MATCH_EXPLANATION,
    VerificationSource,
)
from core.errors import OracleError
from core.oracle import SemanticOracle

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of verifying one submitted answer."""
    is_correct: bool
    submitted_answer: str
    explanation: Optional[str] = None
    source: VerificationSource = VerificationSource.LOCAL
    degraded: bool = False


def normalize_answer(text: str) -> str:
    """Local-tier normalization: trim surrounding whitespace."""
    return text.strip()


def normalize_for_fallback(text: str) -> str:
    """Fallback normalization: NFKC, casefold, collapse inner whitespace."""
    text = unicodedata.normalize("NFKC", text).casefold()
    return _WHITESPACE.sub(" ", text).strip()


def contains_match(
    meanings: Sequence[str],
    answer: str,
    normalize: Callable[[str], str] = normalize_answer,
) -> bool:
    """
    True if the answer is contained in some meaning or contains one.

    Empty strings never match; an empty meaning would otherwise be a
    substring of every answer.
    """
    candidate = normalize(answer)
    if not candidate:
        return False
    for meaning in meanings:
        accepted = normalize(meaning)
        if accepted and (candidate in accepted or accepted in candidate):
            return True
    return False


class VerificationService:
    """Decides whether a free-text answer is an acceptable translation."""

    def __init__(self, oracle: SemanticOracle):
        self.oracle = oracle

    def check_locally(self, meanings: Sequence[str], answer: str) -> Optional[VerificationOutcome]:
        """Run the local tier; None when it is inconclusive."""
        normalized = normalize_answer(answer)
        if contains_match(meanings, normalized):
            return VerificationOutcome(
                is_correct=True,
                submitted_answer=normalized,
                explanation=LOCAL_MATCH_EXPLANATION,
                source=VerificationSource.LOCAL,
            )
        return None

    def fallback(self, meanings: Sequence[str], answer: str) -> VerificationOutcome:
        """Containment check used when the oracle cannot be reached."""
        matched = contains_match(meanings, answer, normalize=normalize_for_fallback)
        return VerificationOutcome(
            is_correct=matched,
            submitted_answer=normalize_answer(answer),
            explanation=FALLBACK_MATCH_EXPLANATION if matched else FALLBACK_NO_MATCH_EXPLANATION,
            source=VerificationSource.FALLBACK,
            degraded=True,
        )

    async def verify(self, word: str, meanings: Sequence[str], answer: str) -> VerificationOutcome:
        """
        Verify an answer for a word.

        Args:
            word: The English word being quizzed
            meanings: Accepted translations, in order
            answer: The learner's answer (trimmed here)

        Returns:
            VerificationOutcome; oracle failures are reported as degraded
            outcomes, never raised
        """
        local = self.check_locally(meanings, answer)
        if local is not None:
            return local

        normalized = normalize_answer(answer)
        try:
            verdict = await self.oracle.check(word, list(meanings), normalized)
        except OracleError as exc:
            logger.warning("Oracle unavailable for %r, using fallback match: %s", word, exc)
            return self.fallback(meanings, normalized)

        return VerificationOutcome(
            is_correct=verdict.is_correct,
            submitted_answer=normalized,
            explanation=verdict.explanation,
            source=VerificationSource.ORACLE,
        )
