"""
LexiQuest - Main App

Streamlit UI for AI-generated vocabulary drills.

Run with:
    streamlit run app/streamlit_app.py
"""

import streamlit as st

from app.session_controller import (
    end_session,
    get_quiz,
    next_word,
    play_again,
    start_new_session,
    submit_answer,
)
from app.state import ensure_session_state, get_settings
from app.ui import (
    render_answer_form,
    render_card,
    render_session_complete,
    render_session_stats,
    render_verdict,
    render_word_details,
)
from app.ui.flashcard_style import WORD_CARD_STYLE
from core.quiz_session import SessionPhase
from core.schemas import VocabularyLevel


# ---- Page Setup ----

st.set_page_config(
    page_title="LexiQuest",
    page_icon="📚",
    layout="centered"
)

get_settings()
ensure_session_state()


# ---- UI Rendering ----

def render_intro_screen():
    """Render intro screen with level selection."""
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("📚 LexiQuest")
    st.markdown("### Master Vocabulary with AI")
    st.markdown(
        "Select your target exam and let the AI generate challenging words, "
        "verify your meanings, and track your progress."
    )
    st.markdown("<br>", unsafe_allow_html=True)

    col1, col2 = st.columns(2)

    with col1:
        if st.button("🎓 CET-6", type="primary", use_container_width=True, help=VocabularyLevel.CET6.description):
            start_new_session(VocabularyLevel.CET6)
            st.rerun()

    with col2:
        if st.button("📖 Kaoyan", type="primary", use_container_width=True, help=VocabularyLevel.KAOYAN.description):
            start_new_session(VocabularyLevel.KAOYAN)
            st.rerun()

    if st.session_state.error_message:
        st.error(st.session_state.error_message)


def render_active_session(quiz):
    """Render the current word, answer form or verdict."""
    state = quiz.state
    word = quiz.current_word

    st.caption(quiz.level.value)
    render_card(word.word, subtitle=word.phonetic, style=WORD_CARD_STYLE)
    st.markdown("<br>", unsafe_allow_html=True)

    if quiz.phase is SessionPhase.PRESENTING:
        answer = render_answer_form(key_suffix=str(state.position))
        if answer is not None:
            submit_answer(answer)
            st.rerun()
        if st.session_state.answer_warning:
            st.warning(st.session_state.answer_warning)
        return

    outcome = quiz.last_outcome
    render_verdict(outcome)
    st.markdown("<br>", unsafe_allow_html=True)
    render_word_details(word)
    st.markdown("<br>", unsafe_allow_html=True)

    label = "See Results 🏆" if state.is_last_word else "Next Word →"
    if st.button(label, type="primary", use_container_width=True):
        next_word()
        st.rerun()


def render_result_screen(quiz):
    """Render the session summary."""
    back, again = render_session_complete(quiz)
    if back:
        end_session()
        st.rerun()
    if again:
        play_again()
        st.rerun()


# ---- Main App ----

def main():
    """Main app entry point."""
    quiz = get_quiz()

    if quiz is None or quiz.phase is SessionPhase.IDLE:
        render_intro_screen()
        return

    if quiz.phase is SessionPhase.FINISHED:
        render_result_screen(quiz)
        return

    if render_session_stats(quiz):
        end_session()
        st.rerun()

    render_active_session(quiz)


if __name__ == "__main__":
    main()
