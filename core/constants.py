"""
Quiz Constants

Tunable defaults for batch generation, verification and result reporting.
"""

from enum import Enum


# ---- Batch Generation ----

DEFAULT_BATCH_SIZE = 5     # Words fetched per session
MAX_BATCH_SIZE = 20        # Upper bound accepted from the UI
MIN_MEANINGS_REQUESTED = 3  # Meaning variations asked from the generator

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 1.0  # Higher temperature for variety
ORACLE_TEMPERATURE = 0.0


# ---- Verification ----

class VerificationSource(str, Enum):
    """Which tier produced a verification outcome."""
    LOCAL = "local"
    ORACLE = "oracle"
    FALLBACK = "fallback"


LOCAL_MATCH_EXPLANATION = "local-match"
FALLBACK_MATCH_EXPLANATION = "fallback-match"
FALLBACK_NO_MATCH_EXPLANATION = "fallback-no-match"


# ---- Logging ----

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_MAX_BYTES = 5_000_000
LOG_BACKUP_COUNT = 3
