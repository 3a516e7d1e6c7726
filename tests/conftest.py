"""
Pytest configuration and shared fixtures for pagination tests.
"""
import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import get_settings
from pagination.models import Page
from pagination.paper_sizes import get_paper_size


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from PAGINATION_* env vars and the settings cache."""
    for name in ("CHARS_PER_PAGE", "PAGE_BREAK_MARKER", "DEFAULT_PAPER_SIZE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"PAGINATION_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def a4():
    """A4 profile (max_chars=1400)."""
    return get_paper_size("a4")


# ============================================================================
# Fixtures: Pages
# ============================================================================

@pytest.fixture
def make_page() -> Callable[..., Page]:
    """Factory for pages in chapter 'ch-1'."""
    def _make(page_number: int = 1, content: str = "테스트 내용", **kwargs) -> Page:
        kwargs.setdefault("chapter_id", "ch-1")
        kwargs.setdefault("id", f"page-{page_number}")
        return Page(page_number=page_number, content=content, **kwargs)
    return _make


@pytest.fixture
def make_pages(make_page) -> Callable[..., List[Page]]:
    """Factory for a contiguous page list from contents."""
    def _make(*contents: str, start: int = 1) -> List[Page]:
        return [make_page(start + i, c) for i, c in enumerate(contents)]
    return _make
