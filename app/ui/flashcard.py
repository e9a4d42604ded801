"""
Card UI Component

Renders the word card and the verdict card.
"""

from __future__ import annotations

from html import escape

import streamlit as st
from app.ui.flashcard_style import CARD_MIN_HEIGHT, CARD_PADDING, CardStyle


def render_card(main_text: str, subtitle: str = "", style: CardStyle | None = None, min_height: str = CARD_MIN_HEIGHT) -> None:
    """
    Render a centered card.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller)
        style: Style preset
        min_height: CSS min-height of the card
    """
    style = style or CardStyle()

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            f'font-style: {style.subtitle_style}; margin: 15px 0 0 0; text-align: center; '
            f'font-family: monospace;">{escape(subtitle)}</p>'
        )

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        f'border: 1px solid {style.border_color}; border-radius: 15px; text-align: center; '
        'box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); '
        f'min-height: {min_height}; display: flex; flex-direction: column; '
        'align-items: center; justify-content: center;">'
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        f'font-weight: {style.main_weight}; margin: 0; overflow-wrap: anywhere;">{escape(main_text)}</h1>'
        f"{subtitle_html}</div>"
    )

    st.markdown(html, unsafe_allow_html=True)
