"""
Chapter pagination and reflow engine.

Turns chapter text into fixed-capacity pages, keeps the page list consistent
while single pages are edited, and merges pages back into chapter text.

Usage:
    from pagination import (
        split_chapter_to_pages, redistribute_pages,
        merge_short_pages, merge_pages_to_chapter,
    )

    pages = split_chapter_to_pages(chapter_text)
    pages = redistribute_pages(pages, 1, edited_text, "a4", chapter_id)
    text = merge_pages_to_chapter(pages)
"""

from .errors import PaginationError, PageNumberError, UnknownPaperSizeError
from .paper_sizes import (
    PAPER_SIZES,
    PAGE_CHAR_LIMITS,
    PAGE_WORD_LIMITS,
    PaperSizeProfile,
    get_paper_size,
)
from .measure import PageStatus, count_words, count_chars, get_page_status
from .models import Page, OverflowInfo
from .markup import strip_html_tags, get_text_length
from .overflow import check_page_overflow, split_overflow_content
from .splitter import (
    ChapterSplitter,
    split_chapter_to_pages,
    merge_pages_to_chapter,
    calculate_total_pages,
    get_page_range,
)
from .reflow import PageReflowCoordinator, redistribute_pages, merge_short_pages

__all__ = [
    # Errors
    "PaginationError",
    "PageNumberError",
    "UnknownPaperSizeError",
    # Paper sizes
    "PAPER_SIZES",
    "PAGE_CHAR_LIMITS",
    "PAGE_WORD_LIMITS",
    "PaperSizeProfile",
    "get_paper_size",
    # Measurement
    "PageStatus",
    "count_words",
    "count_chars",
    "get_page_status",
    "strip_html_tags",
    "get_text_length",
    # Models
    "Page",
    "OverflowInfo",
    # Splitting / merging
    "ChapterSplitter",
    "split_chapter_to_pages",
    "merge_pages_to_chapter",
    "calculate_total_pages",
    "get_page_range",
    # Overflow / reflow
    "check_page_overflow",
    "split_overflow_content",
    "PageReflowCoordinator",
    "redistribute_pages",
    "merge_short_pages",
]
