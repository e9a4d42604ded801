"""
Construction of the async OpenAI client shared by the word source and oracle.
"""

from __future__ import annotations

from openai import AsyncOpenAI

from core.config import Settings


def create_openai_client(settings: Settings) -> AsyncOpenAI:
    """
    Build an AsyncOpenAI client from settings.

    The client is owned by whoever builds the session; nothing is cached at
    module level.

    Raises:
        ValueError: If OPENAI_API_KEY is not configured
    """
    if not settings.openai_api_key:
        raise ValueError("OPENAI_API_KEY not found in environment variables")
    return AsyncOpenAI(api_key=settings.openai_api_key)
