"""
Session Statistics UI

Renders the in-game header and the completion panel.
"""

import streamlit as st

from core.quiz_session import QuizSession
from core.results import summarize


def render_session_stats(quiz: QuizSession) -> bool:
    """
    Render streak, score and progress with a quit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    state = quiz.state
    if state is None or state.finished:
        return False

    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        st.metric("🔥 Streak", state.streak)

    with col2:
        st.metric("Score", f"{state.score}/{len(state.words)}")

    with col3:
        st.metric("Word", f"{state.position + 1} of {len(state.words)}")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete(quiz: QuizSession) -> tuple[bool, bool]:
    """
    Render the completion panel.

    Returns:
        (back_to_menu_clicked, play_again_clicked)
    """
    result = summarize(quiz.state)

    st.markdown("<h1 style='text-align: center;'>🏆</h1>", unsafe_allow_html=True)
    st.markdown("<h2 style='text-align: center;'>Session Complete!</h2>", unsafe_allow_html=True)
    st.caption("Great job practicing today.")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Correct", result.correct)
    with col2:
        st.metric("Accuracy", f"{result.accuracy_percent}%")
    with col3:
        st.metric("Best Streak", result.best_streak)

    if result.degraded_count:
        st.info(
            f"{result.degraded_count} answer(s) were checked offline because the "
            "semantic checker was unavailable."
        )

    with st.expander("📋 Answers"):
        for record in quiz.state.history:
            mark = "✅" if record.is_correct else "❌"
            st.markdown(f"{mark} **{record.word}** → {record.submitted_answer}")

    col_menu, col_again = st.columns(2)
    with col_menu:
        back = st.button("Back to Menu", use_container_width=True)
    with col_again:
        again = st.button("Play Again", type="primary", use_container_width=True)
    return back, again
