"""
Semantic oracle: LLM judgment of whether an answer means the same as a word.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from core.constants import DEFAULT_MODEL, ORACLE_TEMPERATURE
from core.errors import OracleError
from core.prompts import CHECK_INSTRUCTIONS, SYSTEM_PROMPT_ORACLE, format_prompt
from core.schemas import OracleVerdict

logger = logging.getLogger(__name__)


class SemanticOracle(ABC):
    """Judges answers on semantic equivalence rather than surface form."""

    @abstractmethod
    async def check(self, word: str, meanings: Sequence[str], answer: str) -> OracleVerdict:
        """
        Raises:
            OracleError: On transport failure or an unparseable verdict
        """


class OpenAISemanticOracle(SemanticOracle):
    """SemanticOracle backed by OpenAI structured outputs."""

    def __init__(self, client: AsyncOpenAI, model: str = DEFAULT_MODEL):
        self.client = client
        self.model = model

    async def check(self, word: str, meanings: Sequence[str], answer: str) -> OracleVerdict:
        prompt = format_prompt(
            CHECK_INSTRUCTIONS,
            word=word,
            meanings=", ".join(meanings),
            answer=answer,
        )

        try:
            completion = await self.client.chat.completions.parse(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT_ORACLE},
                    {"role": "user", "content": prompt},
                ],
                response_format=OracleVerdict,
                temperature=ORACLE_TEMPERATURE,
            )
        except (OpenAIError, ValidationError) as exc:
            raise OracleError(f"Semantic check failed for {word!r}: {exc}") from exc

        verdict = completion.choices[0].message.parsed
        if verdict is None:
            raise OracleError(f"Semantic check for {word!r} returned no parseable verdict")

        logger.debug("Oracle verdict for %r / %r: %s", word, answer, verdict.is_correct)
        return verdict
