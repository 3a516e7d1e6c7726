#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PageReflowCoordinator - keep a chapter's page list consistent while editing.

Two operations, both pure value transforms (input lists are never mutated):

- redistribute: apply an edit to one page; if the new content overflows the
  paper size it is split on paragraph boundaries and the following pages are
  shifted so numbering stays contiguous.
- merge_short_pages: compact a list after content was deleted, fusing
  neighbouring pages only while the result still fits the paper size.

The editing surface owns the mutable page list, debouncing and persistence.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from config.constants import PARAGRAPH_SEPARATOR
from config.settings import get_settings

from .errors import PageNumberError
from .models import Page
from .overflow import split_overflow_content
from .paper_sizes import PaperSizeLike, get_paper_size

logger = logging.getLogger(__name__)


def _ordered(pages: Sequence[Page]) -> List[Page]:
    return sorted(pages, key=lambda p: p.page_number)


def _renumber(pages: Sequence[Page], start: int) -> List[Page]:
    return [page.renumbered(start + idx) for idx, page in enumerate(pages)]


class PageReflowCoordinator:
    """
    Orchestrates single-page edits and compaction of a page list.

    Attributes:
        paper_size: Profile used when a call does not pass one.

    Example:
        >>> coordinator = PageReflowCoordinator("a4")
        >>> pages = coordinator.redistribute(pages, 1, new_text)
    """

    def __init__(self, paper_size: Optional[PaperSizeLike] = None):
        """
        Initialize PageReflowCoordinator.

        Args:
            paper_size: Default paper size name or profile. Defaults to
                Settings.default_paper_size.
        """
        self.paper_size = get_paper_size(paper_size or get_settings().default_paper_size)

    def redistribute(
        self,
        pages: Sequence[Page],
        edited_page_number: int,
        new_content: str,
        paper_size: Optional[PaperSizeLike] = None,
        chapter_id: Optional[str] = None,
    ) -> List[Page]:
        """
        Replace one page's content and reflow the list.

        Args:
            pages: Current page list (any order; numbering must be contiguous).
            edited_page_number: Page being edited. One past the last page
                appends a new page first.
            new_content: The page's new text.
            paper_size: Paper size for overflow detection.
            chapter_id: Chapter id given to pages created by a split.

        Returns:
            New page list, numbered contiguously from the original start.

        Raises:
            PageNumberError: If edited_page_number is neither present nor
                exactly one past the last page.
        """
        profile = get_paper_size(paper_size or self.paper_size)
        ordered = _ordered(pages)
        start = ordered[0].page_number if ordered else 1
        last = ordered[-1].page_number if ordered else start - 1

        if edited_page_number == last + 1:
            logger.debug(f"Appending page {edited_page_number}")
            owner = chapter_id if chapter_id is not None else (ordered[-1].chapter_id if ordered else None)
            ordered.append(Page(page_number=edited_page_number, content="", chapter_id=owner))
        elif not any(p.page_number == edited_page_number for p in ordered):
            logger.warning(f"Rejected edit of page {edited_page_number} (pages {start}..{last})")
            raise PageNumberError(edited_page_number, start, last)

        index = next(i for i, p in enumerate(ordered) if p.page_number == edited_page_number)
        edited = ordered[index]
        blocks = split_overflow_content(new_content, profile)

        if len(blocks) == 1:
            ordered[index] = edited.with_content(blocks[0])
            return _renumber(ordered, start)

        logger.debug(
            f"Page {edited_page_number} overflowed {profile.name} "
            f"({profile.max_chars} chars); reflowed into {len(blocks)} pages"
        )
        replacement = [edited.with_content(blocks[0])] + [
            Page(
                page_number=edited_page_number + offset,
                content=block,
                chapter_id=chapter_id if chapter_id is not None else edited.chapter_id,
            )
            for offset, block in enumerate(blocks[1:], start=1)
        ]
        return _renumber(ordered[:index] + replacement + ordered[index + 1:], start)

    def merge_short_pages(
        self,
        pages: Sequence[Page],
        paper_size: Optional[PaperSizeLike] = None,
        chapter_id: Optional[str] = None,
    ) -> List[Page]:
        """
        Drop blank pages and fuse neighbours that fit together.

        Two pages are fused only when their contents joined by a blank line
        fit within the paper size's max_chars. A page that was already
        oversized is kept as it is.

        Returns:
            New page list numbered contiguously from the original start
            (1 for an empty input). Never empty.
        """
        profile = get_paper_size(paper_size or self.paper_size)
        ordered = _ordered(pages)
        start = ordered[0].page_number if ordered else 1
        filled = [p for p in ordered if not p.is_empty]

        if not filled:
            owner = chapter_id if chapter_id is not None else (ordered[0].chapter_id if ordered else None)
            return [Page(page_number=start, content="", chapter_id=owner)]

        merged: List[Page] = []
        current: Optional[Page] = None

        for page in filled:
            content = page.content.strip()
            if current is None:
                current = page.with_content(content)
                continue

            combined = current.content + PARAGRAPH_SEPARATOR + content
            if len(combined) > profile.max_chars:
                merged.append(current)
                current = page.with_content(content)
            else:
                current = current.with_content(combined)

        merged.append(current)

        if chapter_id is not None:
            merged = [replace(p, chapter_id=chapter_id) for p in merged]

        logger.debug(f"Merged {len(ordered)} pages into {len(merged)} ({profile.name})")
        return _renumber(merged, start)


def redistribute_pages(
    pages: Sequence[Page],
    edited_page_number: int,
    new_content: str,
    paper_size: PaperSizeLike,
    chapter_id: Optional[str] = None,
) -> List[Page]:
    """Apply an edit to one page. See PageReflowCoordinator.redistribute."""
    return PageReflowCoordinator(paper_size).redistribute(
        pages, edited_page_number, new_content, chapter_id=chapter_id
    )


def merge_short_pages(
    pages: Sequence[Page],
    paper_size: PaperSizeLike,
    chapter_id: Optional[str] = None,
) -> List[Page]:
    """Compact a page list. See PageReflowCoordinator.merge_short_pages."""
    return PageReflowCoordinator(paper_size).merge_short_pages(pages, chapter_id=chapter_id)
