"""
Answer Form UI

Renders the translation input for the word being presented.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st


def render_answer_form(key_suffix: str) -> Optional[str]:
    """
    Render the answer input and check button.

    Args:
        key_suffix: Unique suffix so each word gets a fresh form

    Returns:
        The submitted text, or None if nothing was submitted
    """
    with st.form(key=f"answer_form_{key_suffix}", clear_on_submit=True):
        answer = st.text_input(
            "Translate to Chinese",
            placeholder="Type meaning...",
            key=f"answer_input_{key_suffix}",
        )
        submitted = st.form_submit_button("Check Answer", type="primary", use_container_width=True)

    if not submitted:
        return None
    return answer
