"""
Card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"
WORD_BG_COLOR = "#f0f2f6"
CORRECT_BG_COLOR = "#ecfdf5"
INCORRECT_BG_COLOR = "#fef2f2"


@dataclass(frozen=True)
class CardStyle:
    """
    Visual style preset for a card.
    """
    main_font_size: str = "3em"
    main_color: str = "#1f1f1f"
    main_weight: str = "bold"
    subtitle_font_size: str = "1.2em"
    subtitle_color: str = "#475569"
    subtitle_style: str = "normal"
    bg_color: str = WORD_BG_COLOR
    border_color: str = "transparent"


# ---- Presets ----

WORD_CARD_STYLE = CardStyle(main_font_size="3.2em")

CORRECT_CARD_STYLE = CardStyle(
    main_font_size="1.6em",
    main_color="#15803d",
    subtitle_font_size="1.0em",
    subtitle_color="#16a34a",
    bg_color=CORRECT_BG_COLOR,
    border_color="#bbf7d0",
)

INCORRECT_CARD_STYLE = CardStyle(
    main_font_size="1.6em",
    main_color="#b91c1c",
    subtitle_font_size="1.0em",
    subtitle_color="#dc2626",
    bg_color=INCORRECT_BG_COLOR,
    border_color="#fecaca",
)
