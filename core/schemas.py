"""
Pydantic models for vocabulary items and the LLM response contracts.

The AI* models describe what the generator and the oracle return through
structured outputs. They are deliberately permissive; VocabularyItem is the
strict model every batch entry must pass before a session may use it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VocabularyLevel(str, Enum):
    """Target exam levels the generator can draw words from."""
    CET6 = "CET-6 (六级)"
    KAOYAN = "Postgraduate Exam (考研)"

    @property
    def short_name(self) -> str:
        return "CET-6" if self is VocabularyLevel.CET6 else "Kaoyan"

    @property
    def description(self) -> str:
        if self is VocabularyLevel.CET6:
            return "College English Test Band 6"
        return "Postgraduate Entrance Exam"


# ---- Session Vocabulary ----

class VocabularyItem(BaseModel):
    """
    One quiz unit: an English word and its accepted Chinese meanings.

    Immutable once built. Meanings keep their order; blank entries are
    dropped and at least one must remain.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    word: str = Field(..., min_length=1, description="English vocabulary word")
    phonetic: str = Field(default="", description="IPA phonetic transcription")
    meanings: tuple[str, ...] = Field(..., min_length=1, description="Accepted Chinese translations")
    example: str = Field(..., min_length=1, description="Example sentence using the word")
    example_translation: str = Field(..., min_length=1, description="Chinese translation of the example")

    @field_validator("meanings", mode="before")
    @classmethod
    def _drop_blank_meanings(cls, value):
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return value
        return tuple(m.strip() for m in value if isinstance(m, str) and m.strip())


# ---- AI Response Models ----

class AIWordEntry(BaseModel):
    """A single word as the generator returns it."""
    word: str = Field(..., description="The English vocabulary word.")
    phonetic: str = Field(..., description="IPA phonetic transcription.")
    meanings: list[str] = Field(
        ...,
        description="A list of correct Chinese meanings/synonyms for the word. Include at least 3 variations.",
    )
    example: str = Field(..., description="An example sentence using the word.")
    example_translation: str = Field(..., description="Chinese translation of the example sentence.")

    def to_item(self) -> VocabularyItem:
        """Validate into a VocabularyItem (raises pydantic.ValidationError)."""
        return VocabularyItem(
            word=self.word,
            phonetic=self.phonetic,
            meanings=self.meanings,
            example=self.example,
            example_translation=self.example_translation,
        )


class AIWordBatch(BaseModel):
    """Structured output wrapper: the generator's whole batch."""
    words: list[AIWordEntry]


class OracleVerdict(BaseModel):
    """Semantic-equivalence judgment returned by the oracle."""
    is_correct: bool
    explanation: str = Field(..., description="Short reason in Chinese")
