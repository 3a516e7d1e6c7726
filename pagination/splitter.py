#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ChapterSplitter - turn flat chapter text into pages and back.

Load-time splitting is paper-size agnostic: paragraphs are packed under the
single CHARS_PER_PAGE budget. Paper-size aware splitting happens later, per
edit, in pagination.reflow.

Usage:
    from pagination.splitter import split_chapter_to_pages, merge_pages_to_chapter

    pages = split_chapter_to_pages(chapter_text)
    text = merge_pages_to_chapter(pages)

Manual breaks:
    A chapter containing the page-break marker ('---pagebreak---') is split on
    the marker only. Each segment becomes exactly one page, however long.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from config.constants import PARAGRAPH_SEPARATOR
from config.settings import get_settings

from .models import Page
from .overflow import pack_paragraphs

logger = logging.getLogger(__name__)


class ChapterSplitter:
    """
    Converts chapter text to an ordered page list and back.

    Attributes:
        chars_per_page: Load-time packing budget.
        page_break_marker: Token forcing a page boundary.

    Example:
        >>> splitter = ChapterSplitter()
        >>> [p.content for p in splitter.split("페이지1---pagebreak---페이지2")]
        ['페이지1', '페이지2']
    """

    def __init__(
        self,
        chars_per_page: Optional[int] = None,
        page_break_marker: Optional[str] = None,
    ):
        """
        Initialize ChapterSplitter.

        Args:
            chars_per_page: Packing budget. Defaults to Settings.chars_per_page.
            page_break_marker: Manual break token. Defaults to
                Settings.page_break_marker.
        """
        settings = get_settings()
        self.chars_per_page = chars_per_page or settings.chars_per_page
        self.page_break_marker = page_break_marker or settings.page_break_marker

    def split(
        self,
        content: str,
        start_page_number: int = 1,
        chapter_id: Optional[str] = None,
    ) -> List[Page]:
        """
        Split chapter text into pages numbered from start_page_number.

        Never returns an empty list: blank content yields one empty page.
        """
        if not content.strip():
            return [Page(page_number=start_page_number, content="", chapter_id=chapter_id)]

        if self.page_break_marker in content:
            sections = [s.strip() for s in content.split(self.page_break_marker)]
            logger.debug(f"Manual page breaks: {len(sections)} pages")
        else:
            sections = pack_paragraphs(content, self.chars_per_page)
            logger.debug(
                f"Packed {len(content)} chars into {len(sections)} pages "
                f"(budget {self.chars_per_page})"
            )

        if not sections:
            return [Page(page_number=start_page_number, content="", chapter_id=chapter_id)]

        return [
            Page(page_number=start_page_number + idx, content=section, chapter_id=chapter_id)
            for idx, section in enumerate(sections)
        ]

    @staticmethod
    def merge(pages: Iterable[Page]) -> str:
        """
        Merge pages back into chapter text.

        Pages are ordered by page_number; blank pages are skipped; contents
        are joined with a blank line.
        """
        ordered = sorted(pages, key=lambda p: p.page_number)
        return PARAGRAPH_SEPARATOR.join(p.content for p in ordered if p.content.strip())


def split_chapter_to_pages(
    content: str,
    start_page_number: int = 1,
    chapter_id: Optional[str] = None,
) -> List[Page]:
    """Split chapter text with the default splitter. See ChapterSplitter.split."""
    return ChapterSplitter().split(content, start_page_number, chapter_id)


def merge_pages_to_chapter(pages: Iterable[Page]) -> str:
    """Merge pages into chapter text. See ChapterSplitter.merge."""
    return ChapterSplitter.merge(pages)


def calculate_total_pages(chapters: Iterable[Any]) -> int:
    """
    Total number of pages across chapters at load time.

    Args:
        chapters: Mappings with a 'content' key or objects with a
            'content' attribute.
    """
    splitter = ChapterSplitter()
    total = 0
    for chapter in chapters:
        if isinstance(chapter, dict):
            content = chapter.get("content") or ""
        else:
            content = getattr(chapter, "content", "") or ""
        total += len(splitter.split(content))
    return total


def get_page_range(chapter_number: int, page_counts: Sequence[int]) -> Dict[str, int]:
    """
    First and last book-wide page numbers of a chapter.

    Args:
        chapter_number: 1-based chapter number.
        page_counts: Page count of each chapter, in order. A missing count
            for the requested chapter is treated as 1.

    Returns:
        {"start": int, "end": int}

    Example:
        >>> get_page_range(2, [5, 3, 4])
        {'start': 6, 'end': 8}
    """
    start = 1 + sum(page_counts[:max(chapter_number - 1, 0)])
    count = page_counts[chapter_number - 1] if 0 < chapter_number <= len(page_counts) else 0
    end = start + (count or 1) - 1
    return {"start": start, "end": end}
