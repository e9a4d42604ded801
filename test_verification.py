"""
Tests for the two-tier answer verification.
"""

import asyncio

import pytest

from conftest import FakeOracle
from core.constants import (
    FALLBACK_MATCH_EXPLANATION,
    FALLBACK_NO_MATCH_EXPLANATION,
    LOCAL_MATCH_EXPLANATION,
    VerificationSource,
)
from core.schemas import OracleVerdict
from core.verification import (
    VerificationService,
    contains_match,
    normalize_for_fallback,
)

MEANINGS = ["苹果", "一种水果"]


@pytest.mark.parametrize("answer", ["苹果", "水果", "一种水果", "红苹果", "  苹果  ", "一种"])
def test_containment_accepts_without_oracle(answer):
    oracle = FakeOracle(unreachable=True)
    service = VerificationService(oracle)

    outcome = asyncio.run(service.verify("apple", MEANINGS, answer))

    assert outcome.is_correct
    assert outcome.explanation == LOCAL_MATCH_EXPLANATION
    assert outcome.source is VerificationSource.LOCAL
    assert outcome.submitted_answer == answer.strip()
    assert not outcome.degraded
    assert oracle.calls == []


def test_oracle_verdict_returned_verbatim():
    oracle = FakeOracle(verdicts={"林檎": OracleVerdict(is_correct=True, explanation="日语汉字写法，意思相同")})
    service = VerificationService(oracle)

    outcome = asyncio.run(service.verify("apple", MEANINGS, " 林檎 "))

    assert outcome.is_correct
    assert outcome.explanation == "日语汉字写法，意思相同"
    assert outcome.source is VerificationSource.ORACLE
    assert outcome.submitted_answer == "林檎"
    assert oracle.calls == [("apple", MEANINGS, "林檎")]


def test_oracle_failure_falls_back_to_containment():
    oracle = FakeOracle(unreachable=True)
    service = VerificationService(oracle)

    outcome = asyncio.run(service.verify("apple", MEANINGS, "橘子"))

    assert not outcome.is_correct
    assert outcome.degraded
    assert outcome.source is VerificationSource.FALLBACK
    assert outcome.explanation == FALLBACK_NO_MATCH_EXPLANATION
    assert len(oracle.calls) == 1


def test_fallback_uses_its_own_normalization():
    # Full-width letters only match after NFKC, which the local tier skips
    oracle = FakeOracle(unreachable=True)
    service = VerificationService(oracle)

    outcome = asyncio.run(service.verify("DNA", ["ＤＮＡ分子"], "dna"))

    assert outcome.is_correct
    assert outcome.degraded
    assert outcome.explanation == FALLBACK_MATCH_EXPLANATION
    assert len(oracle.calls) == 1


def test_contains_match_ignores_blank_values():
    assert not contains_match(["", "  "], "任何")
    assert not contains_match(MEANINGS, "   ")


def test_normalize_for_fallback():
    assert normalize_for_fallback("  Ａpple   PIE ") == "apple pie"
