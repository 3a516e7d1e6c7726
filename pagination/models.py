"""
Data Models for the pagination engine.

Pages are immutable values: every operation returns new Page objects. A
page's status and word count are derived from its content on creation and
cannot be passed in, so they never go stale.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from .measure import PageStatus, count_words, get_page_status


@dataclass(frozen=True)
class Page:
    """
    A unit of chapter content at a fixed position.

    Attributes:
        page_number: Position within the chapter's page list (1-based by default).
        content: Raw page text.
        chapter_id: Owning chapter, opaque to the engine.
        id: Persistence id, opaque to the engine. None for pages the engine
            created during a split.
        status: Derived from content.
        word_count: Derived from content.

    Example:
        >>> page = Page(page_number=1, content="안녕하세요")
        >>> page.word_count
        5
    """
    page_number: int
    content: str = ""
    chapter_id: Optional[str] = None
    id: Optional[str] = None
    status: PageStatus = field(init=False)
    word_count: int = field(init=False)

    def __post_init__(self):
        """Derive status and word count from content."""
        object.__setattr__(self, "word_count", count_words(self.content))
        object.__setattr__(self, "status", get_page_status(self.content))

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()

    def with_content(self, content: str) -> "Page":
        """Return a copy holding new content (status/word count re-derived)"""
        return replace(self, content=content)

    def renumbered(self, page_number: int) -> "Page":
        """Return a copy at a new position"""
        if page_number == self.page_number:
            return self
        return replace(self, page_number=page_number)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "chapter_id": self.chapter_id,
            "page_number": self.page_number,
            "content": self.content,
            "status": self.status.value,
            "word_count": self.word_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        """Create from dictionary. Stored status/word_count are ignored."""
        return cls(
            page_number=int(data["page_number"]),
            content=data.get("content") or "",
            chapter_id=data.get("chapter_id"),
            id=data.get("id"),
        )


@dataclass(frozen=True)
class OverflowInfo:
    """Result of checking content against a paper size's character budget."""
    is_overflow: bool
    char_count: int
    max_chars: int
    overflow_amount: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_overflow": self.is_overflow,
            "char_count": self.char_count,
            "max_chars": self.max_chars,
            "overflow_amount": self.overflow_amount,
        }
