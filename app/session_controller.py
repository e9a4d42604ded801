"""
Session lifecycle helpers for the Streamlit app.

A QuizSession is built each time a quiz starts and kept in st.session_state.
The OpenAI client and the event loop live for the whole browser session, so
the async client always sees the same loop and is never rebuilt per quiz.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Optional, TypeVar

import streamlit as st
from openai import AsyncOpenAI

from app.state import get_openai_client, get_settings
from core.config import Settings
from core.errors import GenerationError, InvalidAnswerError, StaleResultError
from core.oracle import OpenAISemanticOracle
from core.quiz_session import QuizSession
from core.schemas import VocabularyLevel
from core.verification import VerificationService
from core.word_source import OpenAIWordSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERATION_ERROR_MESSAGE = "Failed to generate vocabulary. Please check your connection or API key."
VERIFICATION_ERROR_MESSAGE = "Could not check your answer. Please try again."


def create_quiz_session(settings: Settings, client: AsyncOpenAI) -> QuizSession:
    """
    Wire a QuizSession to OpenAI-backed collaborators sharing `client`.
    """
    source = OpenAIWordSource(client, model=settings.model, temperature=settings.temperature)
    oracle = OpenAISemanticOracle(client, model=settings.oracle_model)
    return QuizSession(source, VerificationService(oracle))


def _run(coro: Awaitable[T]) -> T:
    return st.session_state.event_loop.run_until_complete(coro)


def get_quiz() -> Optional[QuizSession]:
    return st.session_state.quiz


def start_new_session(level: VocabularyLevel) -> None:
    """
    Start a new session at `level`, replacing any previous one.
    """
    settings = get_settings()
    st.session_state.selected_level = level
    st.session_state.error_message = ""

    quiz = get_quiz()
    if quiz is not None:
        quiz.reset()

    try:
        quiz = create_quiz_session(settings, get_openai_client(settings))
        with st.spinner("Curating your word list..."):
            _run(quiz.start(level, settings.batch_size))
    except (GenerationError, StaleResultError, ValueError) as exc:
        logger.error("Could not start session: %s", exc)
        st.session_state.quiz = None
        st.session_state.error_message = GENERATION_ERROR_MESSAGE
        return

    st.session_state.quiz = quiz


def submit_answer(raw_answer: str) -> None:
    """
    Verify an answer for the current word.
    """
    quiz = get_quiz()
    st.session_state.answer_warning = ""
    try:
        with st.spinner("Checking..."):
            _run(quiz.submit_answer(raw_answer))
    except InvalidAnswerError:
        st.session_state.answer_warning = "Please type a meaning first."
    except Exception:
        logger.exception("Answer verification failed")
        st.session_state.answer_warning = VERIFICATION_ERROR_MESSAGE


def next_word() -> None:
    """
    Record the resolved answer and move on.
    """
    get_quiz().advance()


def play_again() -> None:
    """
    Start a fresh batch at the same level.
    """
    quiz = get_quiz()
    if quiz is None or quiz.level is None:
        start_new_session(st.session_state.selected_level or VocabularyLevel.CET6)
        return

    st.session_state.error_message = ""
    try:
        with st.spinner("Curating your word list..."):
            _run(quiz.restart())
    except (GenerationError, StaleResultError) as exc:
        logger.error("Could not restart session: %s", exc)
        st.session_state.quiz = None
        st.session_state.error_message = GENERATION_ERROR_MESSAGE


def end_session() -> None:
    """
    Discard the current session and return to the menu.
    """
    quiz = get_quiz()
    if quiz is not None:
        quiz.reset()
    st.session_state.quiz = None
    st.session_state.answer_warning = ""
