"""
Exception hierarchy for quiz sessions and their external collaborators.
"""

from __future__ import annotations


class LexiQuestError(Exception):
    """Base class for all LexiQuest errors."""


class GenerationError(LexiQuestError):
    """
    The word source could not produce a usable batch.

    Raised for transport failures, unparseable output, malformed items and
    empty batches. Never recovered inside the session: the caller sees it and
    the session stays idle.
    """


class OracleError(LexiQuestError):
    """The semantic oracle was unreachable or returned an unparseable verdict."""


class SessionStateError(LexiQuestError):
    """An operation was called in a phase that does not allow it."""


class InvalidAnswerError(LexiQuestError):
    """A submitted answer was blank after trimming."""


class StaleResultError(LexiQuestError):
    """A pending call resolved after the session was reset and was discarded."""
