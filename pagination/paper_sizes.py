#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Paper Size Profiles

Closed registry of the paper sizes offered by the page editor. Each profile
carries a hard character budget (used to detect overflow while editing) and
a soft word target (informational only; page status uses WORDS_PER_PAGE).

Usage:
    from pagination.paper_sizes import get_paper_size

    profile = get_paper_size("a4")
    profile.max_chars  # 1400
"""

from dataclasses import dataclass
from typing import Dict, Union

from .errors import UnknownPaperSizeError


@dataclass(frozen=True)
class PaperSizeProfile:
    """Named character/word budget for one paper size."""
    name: str
    label: str
    max_chars: int
    max_words: int
    width: float   # inches
    height: float  # inches

    def to_dict(self) -> Dict[str, Union[str, int, float]]:
        return {
            "name": self.name,
            "label": self.label,
            "max_chars": self.max_chars,
            "max_words": self.max_words,
            "width": self.width,
            "height": self.height,
        }


# =============================================================================
# PROFILES
# =============================================================================

PAPER_SIZES: Dict[str, PaperSizeProfile] = {
    "a4": PaperSizeProfile("a4", "A4", max_chars=1400, max_words=400, width=8.27, height=11.69),
    "a5": PaperSizeProfile("a5", "A5", max_chars=800, max_words=230, width=5.83, height=8.27),
    "b5": PaperSizeProfile("b5", "B5", max_chars=1100, max_words=320, width=6.93, height=9.84),
    "letter": PaperSizeProfile("letter", "Letter", max_chars=1450, max_words=410, width=8.5, height=11.0),
    # Trade paperback: narrow measure, larger type
    "novel": PaperSizeProfile("novel", "Novel", max_chars=700, max_words=200, width=5.5, height=8.5),
}

PAGE_CHAR_LIMITS: Dict[str, int] = {name: p.max_chars for name, p in PAPER_SIZES.items()}
PAGE_WORD_LIMITS: Dict[str, int] = {name: p.max_words for name, p in PAPER_SIZES.items()}

PaperSizeLike = Union[str, PaperSizeProfile]


def get_paper_size(paper_size: PaperSizeLike) -> PaperSizeProfile:
    """
    Resolve a paper-size name or profile to a profile.

    Names are matched case-insensitively.

    Raises:
        UnknownPaperSizeError: If the name is not registered.
    """
    if isinstance(paper_size, PaperSizeProfile):
        return paper_size

    key = str(paper_size).strip().lower()
    try:
        return PAPER_SIZES[key]
    except KeyError:
        raise UnknownPaperSizeError(str(paper_size), PAPER_SIZES) from None
