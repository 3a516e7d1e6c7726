#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Overflow detection and paragraph packing.

pack_paragraphs is the greedy packer shared by load-time chapter splitting
(budget CHARS_PER_PAGE) and edit-time overflow splitting (budget = the paper
size's max_chars). The two budgets are kept apart on purpose: unifying them
would change page counts between loading a chapter and editing it.

Limitation: a single paragraph longer than the budget is emitted as one
oversized block. There is no sentence- or character-level fallback.
"""

import logging
import re
from typing import List

from config.constants import PARAGRAPH_SEPARATOR, PARAGRAPH_SPLIT_PATTERN

from .models import OverflowInfo
from .paper_sizes import PaperSizeLike, get_paper_size

logger = logging.getLogger(__name__)

_PARAGRAPH_SPLIT = re.compile(PARAGRAPH_SPLIT_PATTERN)


def split_paragraphs(text: str) -> List[str]:
    """Split on runs of two or more newlines. Paragraphs are not trimmed."""
    return _PARAGRAPH_SPLIT.split(text)


def pack_paragraphs(text: str, max_chars: int) -> List[str]:
    """
    Greedily pack paragraphs into blocks of at most max_chars characters.

    A block is closed when appending the next paragraph (joined by a blank
    line) would push it past max_chars and the block already holds
    something. Blocks are trimmed; empty blocks are dropped.

    Args:
        text: Plain text to pack.
        max_chars: Character budget per block.

    Returns:
        Ordered list of non-empty blocks (possibly empty).
    """
    blocks: List[str] = []
    current = ""

    for para in split_paragraphs(text):
        candidate = current + PARAGRAPH_SEPARATOR + para if current else para

        if len(candidate) > max_chars and current:
            blocks.append(current.strip())
            current = para
        else:
            current = candidate

    if current.strip():
        blocks.append(current.strip())

    blocks = [b for b in blocks if b]

    oversized = sum(1 for b in blocks if len(b) > max_chars)
    if oversized:
        logger.warning(
            f"{oversized} block(s) exceed {max_chars} chars: "
            f"a single paragraph is longer than the budget"
        )

    return blocks


def check_page_overflow(content: str, paper_size: PaperSizeLike) -> OverflowInfo:
    """
    Check content against a paper size's character budget.

    overflow_amount is exactly max(0, len(content) - max_chars).

    Raises:
        UnknownPaperSizeError: If paper_size is not registered.
    """
    profile = get_paper_size(paper_size)
    char_count = len(content)
    overflow_amount = max(0, char_count - profile.max_chars)

    return OverflowInfo(
        is_overflow=overflow_amount > 0,
        char_count=char_count,
        max_chars=profile.max_chars,
        overflow_amount=overflow_amount,
    )


def split_overflow_content(content: str, paper_size: PaperSizeLike) -> List[str]:
    """
    Split overflowing content into blocks that fit the paper size.

    Content that fits is returned as [content], untouched. Otherwise
    paragraphs are packed under the profile's max_chars, preferring
    paragraph boundaries.
    """
    overflow = check_page_overflow(content, paper_size)
    if not overflow.is_overflow:
        return [content]

    blocks = pack_paragraphs(content, overflow.max_chars)
    logger.debug(
        f"Content of {overflow.char_count} chars overflowed by "
        f"{overflow.overflow_amount}; split into {len(blocks)} blocks"
    )
    # Whitespace-only overflow packs to nothing; keep one (empty) block
    return blocks or [""]
