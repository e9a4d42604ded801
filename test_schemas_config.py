"""
Tests for vocabulary models and settings.
"""

import pytest
from pydantic import ValidationError

from core.config import Settings
from core.constants import DEFAULT_BATCH_SIZE, DEFAULT_MODEL
from core.schemas import VocabularyItem, VocabularyLevel


def test_item_drops_blank_meanings_and_keeps_order():
    item = VocabularyItem(
        word=" abandon ",
        phonetic="/əˈbændən/",
        meanings=["放弃", " ", "抛弃 "],
        example="He abandoned the plan.",
        example_translation="他放弃了这个计划。",
    )

    assert item.word == "abandon"
    assert item.meanings == ("放弃", "抛弃")


def test_item_requires_a_meaning():
    with pytest.raises(ValidationError):
        VocabularyItem(word="abandon", meanings=[""], example="x", example_translation="y")


def test_item_is_immutable():
    item = VocabularyItem(word="abandon", meanings=["放弃"], example="x", example_translation="y")

    with pytest.raises(ValidationError):
        item.word = "other"


def test_level_labels():
    assert VocabularyLevel.CET6.short_name == "CET-6"
    assert VocabularyLevel.KAOYAN.short_name == "Kaoyan"
    assert VocabularyLevel("Postgraduate Exam (考研)") is VocabularyLevel.KAOYAN


@pytest.fixture
def clean_env(monkeypatch):
    for name in [
        "OPENAI_API_KEY",
        "LEXIQUEST_MODEL",
        "LEXIQUEST_ORACLE_MODEL",
        "LEXIQUEST_BATCH_SIZE",
        "LEXIQUEST_TEMPERATURE",
        "LEXIQUEST_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env):
    settings = Settings.from_env(dotenv=False)

    assert settings.openai_api_key is None
    assert settings.model == DEFAULT_MODEL
    assert settings.oracle_model == DEFAULT_MODEL
    assert settings.batch_size == DEFAULT_BATCH_SIZE


def test_settings_from_environment(clean_env):
    clean_env.setenv("OPENAI_API_KEY", "sk-test")
    clean_env.setenv("LEXIQUEST_MODEL", "gpt-4o")
    clean_env.setenv("LEXIQUEST_BATCH_SIZE", "8")
    clean_env.setenv("LEXIQUEST_LOG_LEVEL", "debug")

    settings = Settings.from_env(dotenv=False)

    assert settings.openai_api_key == "sk-test"
    assert settings.model == "gpt-4o"
    assert settings.oracle_model == "gpt-4o"
    assert settings.batch_size == 8
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["five", "0", "500"])
def test_settings_reject_bad_batch_size(clean_env, value):
    clean_env.setenv("LEXIQUEST_BATCH_SIZE", value)

    with pytest.raises(ValueError):
        Settings.from_env(dotenv=False)


def test_setup_logging_adds_file_handler_once(tmp_path):
    import logging
    from logging.handlers import RotatingFileHandler

    from core.log_config import setup_logging

    settings = Settings(log_dir=str(tmp_path / "log"), log_file="test.log", log_level="DEBUG")
    logger = logging.getLogger("core")
    before = list(logger.handlers)
    try:
        setup_logging(settings)
        setup_logging(settings)
        added = [h for h in logger.handlers if h not in before]

        assert len([h for h in added if isinstance(h, RotatingFileHandler)]) == 1
        assert (tmp_path / "log").is_dir()
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
                handler.close()
