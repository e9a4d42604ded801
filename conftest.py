import asyncio
from types import SimpleNamespace

import pytest

from core.errors import GenerationError, OracleError
from core.oracle import SemanticOracle
from core.schemas import OracleVerdict, VocabularyItem
from core.verification import VerificationService
from core.word_source import WordSource


def make_item(word="apple", meanings=("苹果", "一种水果")):
    return VocabularyItem(
        word=word,
        phonetic="/ˈæpəl/",
        meanings=list(meanings),
        example=f"I ate an {word} today.",
        example_translation="我今天吃了一个苹果。",
    )


class FakeWordSource(WordSource):
    """Returns a fixed batch, or raises a given error."""

    def __init__(self, batch=None, error=None):
        self.batch = list(batch) if batch is not None else [make_item()]
        self.error = error
        self.calls = []
        self.release = None
        self.started = None

    def stall(self):
        """Make the next fetch wait until release.set() is called."""
        self.release = asyncio.Event()
        self.started = asyncio.Event()

    async def fetch_batch(self, level, count):
        self.calls.append((level, count))
        if self.release is not None:
            self.started.set()
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return list(self.batch)


class FakeOracle(SemanticOracle):
    """Answers from a word->verdict mapping; raises OracleError when unreachable."""

    def __init__(self, verdicts=None, unreachable=False, error=None):
        self.verdicts = verdicts or {}
        self.unreachable = unreachable
        self.error = error
        self.calls = []
        self.release = None
        self.started = None

    def stall(self):
        self.release = asyncio.Event()
        self.started = asyncio.Event()

    async def check(self, word, meanings, answer):
        self.calls.append((word, list(meanings), answer))
        if self.release is not None:
            self.started.set()
            await self.release.wait()
        if self.unreachable:
            raise OracleError("connection refused")
        if self.error is not None:
            raise self.error
        return self.verdicts.get(answer, OracleVerdict(is_correct=False, explanation="意思不符"))


class FakeCompletions:
    """Stands in for client.chat.completions of the OpenAI SDK."""

    def __init__(self, parsed=None, error=None, refusal=None):
        self.parsed = parsed
        self.error = error
        self.refusal = refusal
        self.calls = []

    async def parse(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(parsed=self.parsed, refusal=self.refusal)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_client(**kwargs):
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(**kwargs)))


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def source():
    return FakeWordSource()


@pytest.fixture
def oracle():
    return FakeOracle()


@pytest.fixture
def verifier(oracle):
    return VerificationService(oracle)


@pytest.fixture
def fake_client():
    return make_client
