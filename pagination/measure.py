#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Length measurement and page status classification.

Word counting is locale-fair for mixed Korean/Latin text: every Hangul
syllable block counts as one word, and whatever remains is counted as
whitespace-delimited tokens. All functions expect plain text; strip markup
first with pagination.markup.strip_html_tags when the content is rich text.

Usage:
    from pagination.measure import count_words, get_page_status

    count_words("안녕하 hello")   # 4
    get_page_status("")           # PageStatus.EMPTY
"""

import re
from enum import Enum

from config.constants import COMPLETE_RATIO, WORDS_PER_PAGE

HANGUL_SYLLABLE_PATTERN = re.compile(r'[\uAC00-\uD7AF]')

COMPLETE_WORD_THRESHOLD = WORDS_PER_PAGE * COMPLETE_RATIO


class PageStatus(str, Enum):
    """Lifecycle state of a page, derived from its content."""
    EMPTY = "empty"
    DRAFT = "draft"
    COMPLETE = "complete"


def count_words(text: str) -> int:
    """
    Count words in plain text.

    Args:
        text: Plain text (no markup).

    Returns:
        Hangul syllable blocks plus whitespace-separated tokens. 0 for empty
        or whitespace-only input.
    """
    if not text.strip():
        return 0

    hangul = len(HANGUL_SYLLABLE_PATTERN.findall(text))
    others = HANGUL_SYLLABLE_PATTERN.sub(' ', text).split()
    return hangul + len(others)


def count_chars(text: str) -> int:
    """Raw character count (code points) of plain text."""
    return len(text)


def get_page_status(content: str) -> PageStatus:
    """
    Classify page content.

    The complete threshold is fixed (WORDS_PER_PAGE * COMPLETE_RATIO) and
    does not follow the active paper size's max_words; it drives the
    editor's progress indicator only.
    """
    word_count = count_words(content)
    if word_count == 0:
        return PageStatus.EMPTY
    if word_count >= COMPLETE_WORD_THRESHOLD:
        return PageStatus.COMPLETE
    return PageStatus.DRAFT
