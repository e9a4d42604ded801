"""
Verdict and Word Details UI

Renders the verification verdict, example sentence and accepted meanings.
"""

import streamlit as st

from app.ui.flashcard import render_card
from app.ui.flashcard_style import CORRECT_CARD_STYLE, INCORRECT_CARD_STYLE
from core.schemas import VocabularyItem
from core.verification import VerificationOutcome


def render_verdict(outcome: VerificationOutcome) -> None:
    """
    Render the correct/incorrect card with its explanation.
    """
    if outcome.is_correct:
        render_card("🎉 Correct!", subtitle=outcome.explanation or "", style=CORRECT_CARD_STYLE, min_height="110px")
    else:
        render_card("🤔 Incorrect", subtitle=outcome.explanation or "", style=INCORRECT_CARD_STYLE, min_height="110px")

    if outcome.degraded:
        st.caption("⚠️ Semantic checker unavailable; this answer was checked by simple matching.")


def render_word_details(word: VocabularyItem) -> None:
    """
    Render the example sentence and accepted meanings.
    """
    st.markdown("**Example**")
    st.markdown(f"*{word.example}*")
    st.caption(word.example_translation)

    st.markdown("**Accepted meanings**")
    st.markdown(" ".join(f"`{meaning}`" for meaning in word.meanings))
