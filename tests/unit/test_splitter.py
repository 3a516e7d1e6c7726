"""
Unit tests for pagination/splitter.py - ChapterSplitter
"""
import pytest

from config.constants import CHARS_PER_PAGE
from pagination.measure import PageStatus
from pagination.models import Page
from pagination.splitter import (
    ChapterSplitter,
    calculate_total_pages,
    get_page_range,
    merge_pages_to_chapter,
    split_chapter_to_pages,
)


class TestSplitChapterToPages:
    """Test splitting chapter text into pages."""

    # ========================================================================
    # Test: blank content
    # ========================================================================

    @pytest.mark.parametrize("content", ["", "   ", "\n\n\n"])
    def test_blank_yields_one_empty_page(self, content):
        pages = split_chapter_to_pages(content)
        assert len(pages) == 1
        assert pages[0].content == ""
        assert pages[0].status == PageStatus.EMPTY
        assert pages[0].page_number == 1

    def test_blank_respects_start(self):
        assert split_chapter_to_pages("", start_page_number=7)[0].page_number == 7

    # ========================================================================
    # Test: manual page breaks
    # ========================================================================

    def test_manual_breaks(self):
        content = "페이지1---pagebreak---페이지2---pagebreak---페이지3"
        pages = split_chapter_to_pages(content)
        assert [p.content for p in pages] == ["페이지1", "페이지2", "페이지3"]
        assert [p.page_number for p in pages] == [1, 2, 3]

    def test_manual_breaks_from_start_number(self):
        pages = split_chapter_to_pages("페이지1---pagebreak---페이지2", 5)
        assert [p.page_number for p in pages] == [5, 6]

    def test_manual_break_segments_are_trimmed(self):
        pages = split_chapter_to_pages("  first \n---pagebreak---\n second  ")
        assert [p.content for p in pages] == ["first", "second"]

    def test_manual_breaks_are_never_auto_split(self):
        """A segment over the packing budget stays one page."""
        long_segment = "\n\n".join(["가" * 800] * 3)
        pages = split_chapter_to_pages(f"{long_segment}---pagebreak---끝")
        assert len(pages) == 2
        assert pages[0].content == long_segment

    def test_manual_break_keeps_empty_segments(self):
        pages = split_chapter_to_pages("a---pagebreak------pagebreak---b")
        assert [p.content for p in pages] == ["a", "", "b"]
        assert pages[1].status == PageStatus.EMPTY

    # ========================================================================
    # Test: paragraph packing
    # ========================================================================

    def test_short_content_is_one_page(self):
        pages = split_chapter_to_pages("짧은 내용")
        assert len(pages) == 1
        assert pages[0].content == "짧은 내용"

    def test_long_content_splits_on_paragraphs(self):
        paragraph = "가" * 800
        pages = split_chapter_to_pages(f"{paragraph}\n\n{paragraph}\n\n{paragraph}")
        assert len(pages) == 3
        assert all(p.content == paragraph for p in pages)

    def test_packs_until_budget(self):
        """Paragraphs share a page while the joined length fits."""
        paragraph = "가" * 700
        pages = split_chapter_to_pages("\n\n".join([paragraph] * 4))
        # 700 + 2 + 700 = 1402 <= 1500; a third would be 2104
        assert len(pages) == 2
        assert pages[0].content == f"{paragraph}\n\n{paragraph}"

    def test_budget_boundary_is_inclusive(self):
        """A page of exactly CHARS_PER_PAGE characters is not split."""
        first = "가" * (CHARS_PER_PAGE - 3)
        pages = split_chapter_to_pages(f"{first}\n\n나")
        assert len(pages) == 1
        assert len(pages[0].content) == CHARS_PER_PAGE

    def test_one_over_budget_splits(self):
        first = "가" * (CHARS_PER_PAGE - 2)
        pages = split_chapter_to_pages(f"{first}\n\n나")
        assert [len(p.content) for p in pages] == [CHARS_PER_PAGE - 2, 1]

    def test_oversized_single_paragraph_stays_whole(self):
        paragraph = "가" * (CHARS_PER_PAGE + 500)
        pages = split_chapter_to_pages(paragraph)
        assert len(pages) == 1
        assert pages[0].content == paragraph

    def test_triple_newlines_are_one_boundary(self):
        pages = split_chapter_to_pages("a\n\n\n\nb")
        assert len(pages) == 1
        assert pages[0].content == "a\n\nb"

    def test_single_newline_is_not_a_boundary(self):
        paragraph = "\n".join(["가" * 700] * 3)
        pages = split_chapter_to_pages(paragraph)
        assert len(pages) == 1

    def test_word_count_and_status_computed(self):
        pages = split_chapter_to_pages("안녕하세요")
        assert pages[0].word_count == 5
        assert pages[0].status == PageStatus.DRAFT

    def test_complete_pages(self):
        pages = split_chapter_to_pages("\n\n".join(["가" * 800] * 2))
        assert all(p.status == PageStatus.COMPLETE for p in pages)

    def test_chapter_id_assigned(self):
        pages = split_chapter_to_pages("a---pagebreak---b", chapter_id="ch-9")
        assert {p.chapter_id for p in pages} == {"ch-9"}
        assert all(p.id is None for p in pages)

    def test_numbering_is_contiguous(self):
        text = "\n\n".join(["가" * 900] * 6)
        pages = split_chapter_to_pages(text, start_page_number=3)
        assert [p.page_number for p in pages] == list(range(3, 3 + len(pages)))


class TestChapterSplitterConfig:
    """Test splitter budget and marker configuration."""

    def test_custom_budget(self):
        splitter = ChapterSplitter(chars_per_page=10)
        pages = splitter.split("aaaaa\n\nbbbbb\n\nccccc")
        assert [p.content for p in pages] == ["aaaaa", "bbbbb", "ccccc"]

    def test_custom_marker(self):
        splitter = ChapterSplitter(page_break_marker="<<>>")
        pages = splitter.split("a<<>>b---pagebreak---c")
        assert [p.content for p in pages] == ["a", "b---pagebreak---c"]

    def test_budget_from_env(self, monkeypatch):
        monkeypatch.setenv("PAGINATION_CHARS_PER_PAGE", "4")
        splitter = ChapterSplitter()
        assert splitter.chars_per_page == 4
        assert len(splitter.split("aaa\n\nbbb")) == 2


class TestMergePagesToChapter:
    """Test merging pages back into chapter text."""

    def test_orders_by_page_number(self, make_page):
        pages = [
            make_page(2, "두 번째"),
            make_page(1, "첫 번째"),
            make_page(3, "세 번째"),
        ]
        assert merge_pages_to_chapter(pages) == "첫 번째\n\n두 번째\n\n세 번째"

    def test_skips_blank_pages(self, make_pages):
        pages = make_pages("내용", "", "  ", "다음 내용")
        assert merge_pages_to_chapter(pages) == "내용\n\n다음 내용"

    def test_empty_list(self):
        assert merge_pages_to_chapter([]) == ""

    def test_does_not_mutate_input_order(self, make_page):
        pages = [make_page(2, "b"), make_page(1, "a")]
        merge_pages_to_chapter(pages)
        assert [p.page_number for p in pages] == [2, 1]

    @pytest.mark.parametrize("text", [
        "한 문단",
        "첫 문단\n\n둘째 문단\n\n셋째 문단",
        "\n\n".join(["가" * 700] * 5),
        "\n\n".join(["word " * 100 + "end"] * 12),
        "  leading and trailing whitespace  ",
    ])
    def test_split_then_merge_preserves_text(self, text):
        assert merge_pages_to_chapter(split_chapter_to_pages(text)).strip() == text.strip()

    def test_manual_break_round_trip_drops_markers_only(self):
        text = "하나---pagebreak---둘---pagebreak---셋"
        assert merge_pages_to_chapter(split_chapter_to_pages(text)) == "하나\n\n둘\n\n셋"


class TestCalculateTotalPages:
    def test_counts_pages_per_chapter(self):
        chapters = [{"content": "짧은 내용"}, {"content": "또 다른 짧은 내용"}]
        assert calculate_total_pages(chapters) == 2

    def test_long_chapter(self):
        chapters = [{"content": "\n\n".join(["가" * 800] * 3)}, {"content": ""}]
        assert calculate_total_pages(chapters) == 4

    def test_objects_with_content(self):
        chapters = [Page(page_number=1, content="a---pagebreak---b")]
        assert calculate_total_pages(chapters) == 2

    def test_empty(self):
        assert calculate_total_pages([]) == 0


class TestGetPageRange:
    @pytest.mark.parametrize("chapter,expected", [
        (1, {"start": 1, "end": 5}),
        (2, {"start": 6, "end": 8}),
        (3, {"start": 9, "end": 12}),
    ])
    def test_ranges(self, chapter, expected):
        assert get_page_range(chapter, [5, 3, 4]) == expected

    def test_missing_count_treated_as_one(self):
        assert get_page_range(4, [5, 3, 4]) == {"start": 13, "end": 13}

    def test_zero_count_treated_as_one(self):
        assert get_page_range(2, [2, 0]) == {"start": 3, "end": 3}
