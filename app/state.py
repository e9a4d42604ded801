"""
Streamlit session state and shared resource helpers.
"""

from __future__ import annotations

import asyncio

import streamlit as st
from openai import AsyncOpenAI

from core.config import Settings
from core.log_config import setup_logging
from core.openai_client import create_openai_client


@st.cache_resource
def get_settings() -> Settings:
    """
    Load settings and configure logging (cached per server process).
    """
    settings = Settings.from_env()
    setup_logging(settings)
    return settings


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "quiz" not in st.session_state:
        st.session_state.quiz = None
    if "event_loop" not in st.session_state:
        st.session_state.event_loop = asyncio.new_event_loop()
    if "openai_client" not in st.session_state:
        st.session_state.openai_client = None
    if "selected_level" not in st.session_state:
        st.session_state.selected_level = None
    if "error_message" not in st.session_state:
        st.session_state.error_message = ""
    if "answer_warning" not in st.session_state:
        st.session_state.answer_warning = ""


def get_openai_client(settings: Settings) -> AsyncOpenAI:
    """
    Return this browser session's OpenAI client, creating it on first use.

    The client is bound to the session's event loop, so it is shared by every
    quiz started in the session rather than rebuilt per quiz.

    Raises:
        ValueError: If OPENAI_API_KEY is not configured
    """
    if st.session_state.openai_client is None:
        st.session_state.openai_client = create_openai_client(settings)
    return st.session_state.openai_client
