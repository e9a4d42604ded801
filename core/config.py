"""
Runtime settings loaded from the environment (and a local .env file).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from core.constants import DEFAULT_BATCH_SIZE, DEFAULT_MODEL, DEFAULT_TEMPERATURE, MAX_BATCH_SIZE


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Built once by the presentation layer and passed to whoever needs it.
    """
    openai_api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    oracle_model: str = DEFAULT_MODEL
    batch_size: int = DEFAULT_BATCH_SIZE
    temperature: float = DEFAULT_TEMPERATURE
    log_level: str = "INFO"
    log_dir: str = "log"
    log_file: str = "lexiquest.log"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Read settings from environment variables.

        Args:
            dotenv: Load a .env file first (existing variables win)

        Raises:
            ValueError: If a numeric variable cannot be parsed or the batch
                size is out of range
        """
        if dotenv:
            load_dotenv()

        model = os.getenv("LEXIQUEST_MODEL") or DEFAULT_MODEL
        batch_size = _int_env("LEXIQUEST_BATCH_SIZE", DEFAULT_BATCH_SIZE)
        if not 1 <= batch_size <= MAX_BATCH_SIZE:
            raise ValueError(
                f"LEXIQUEST_BATCH_SIZE must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}"
            )

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            model=model,
            oracle_model=os.getenv("LEXIQUEST_ORACLE_MODEL") or model,
            batch_size=batch_size,
            temperature=_float_env("LEXIQUEST_TEMPERATURE", DEFAULT_TEMPERATURE),
            log_level=(os.getenv("LEXIQUEST_LOG_LEVEL") or "INFO").upper(),
            log_dir=os.getenv("LEXIQUEST_LOG_DIR") or "log",
            log_file=os.getenv("LEXIQUEST_LOG_FILE") or "lexiquest.log",
        )
