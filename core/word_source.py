"""
Word sources: producers of vocabulary batches for a quiz session.

Usage:
    client = create_openai_client(settings)
    source = OpenAIWordSource(client, model=settings.model)
    items = await source.fetch_batch(VocabularyLevel.CET6, 5)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from core.constants import DEFAULT_MODEL, DEFAULT_TEMPERATURE, MIN_MEANINGS_REQUESTED
from core.errors import GenerationError
from core.prompts import BATCH_INSTRUCTIONS, SYSTEM_PROMPT_GENERATOR, format_prompt
from core.schemas import AIWordBatch, AIWordEntry, VocabularyItem, VocabularyLevel

logger = logging.getLogger(__name__)


class WordSource(ABC):
    """Produces an ordered batch of vocabulary items."""

    @abstractmethod
    async def fetch_batch(self, level: VocabularyLevel, count: int) -> list[VocabularyItem]:
        """
        Fetch `count` items for `level`.

        Raises:
            GenerationError: If no usable batch could be produced
        """


def validate_batch(entries: Iterable[AIWordEntry]) -> list[VocabularyItem]:
    """
    Validate generator entries into VocabularyItems.

    One malformed entry rejects the whole batch.

    Raises:
        GenerationError: On any invalid entry, or if there are no entries
    """
    items: list[VocabularyItem] = []
    for index, entry in enumerate(entries):
        try:
            items.append(entry.to_item())
        except ValidationError as exc:
            word = getattr(entry, "word", "?")
            raise GenerationError(f"Malformed vocabulary item #{index} ({word!r}): {exc}") from exc
    if not items:
        raise GenerationError("Word source returned an empty batch")
    return items


class OpenAIWordSource(WordSource):
    """WordSource backed by OpenAI structured outputs."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature

    def build_prompt(self, level: VocabularyLevel, count: int) -> str:
        return format_prompt(
            BATCH_INSTRUCTIONS,
            count=count,
            level=level.value,
            min_meanings=MIN_MEANINGS_REQUESTED,
        )

    async def fetch_batch(self, level: VocabularyLevel, count: int) -> list[VocabularyItem]:
        if count <= 0:
            raise GenerationError(f"Batch size must be positive, got {count}")

        prompt = self.build_prompt(level, count)
        logger.info("Requesting %d words for %s from %s", count, level.short_name, self.model)

        try:
            completion = await self.client.chat.completions.parse(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT_GENERATOR},
                    {"role": "user", "content": prompt},
                ],
                response_format=AIWordBatch,
                temperature=self.temperature,
            )
        except (OpenAIError, ValidationError) as exc:
            logger.error("Word generation failed for %s: %s", level.short_name, exc)
            raise GenerationError(f"Failed to generate vocabulary: {exc}") from exc

        message = completion.choices[0].message
        batch = message.parsed
        if batch is None:
            reason = getattr(message, "refusal", None) or "no parseable output"
            logger.error("Word generation returned nothing usable: %s", reason)
            raise GenerationError(f"Failed to parse generated vocabulary: {reason}")

        items = validate_batch(batch.words)
        logger.info("Generated %d words for %s", len(items), level.short_name)
        return items
