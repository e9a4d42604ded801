"""UI Components for LexiQuest"""

from app.ui.flashcard import render_card
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.answer_form import render_answer_form
from app.ui.details import render_verdict, render_word_details

__all__ = [
    "render_card",
    "render_session_stats",
    "render_session_complete",
    "render_answer_form",
    "render_verdict",
    "render_word_details",
]
