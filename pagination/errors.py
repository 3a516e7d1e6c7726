#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pagination Errors

Operations in this package are total over their documented inputs. These
errors are raised only for caller contract violations.
"""

from typing import Iterable


class PaginationError(Exception):
    """Base error for pagination contract violations"""
    pass


class PageNumberError(PaginationError):
    """Raised when an edit targets a page that is neither present nor next"""
    def __init__(self, page_number: int, first: int, last: int):
        self.page_number = page_number
        self.first = first
        self.last = last
        super().__init__(
            f"Page {page_number} is out of range: expected {first}..{last} "
            f"or {last + 1} to append a page"
        )


class UnknownPaperSizeError(PaginationError, KeyError):
    """Raised when a paper-size name is not in the registry"""
    def __init__(self, name: str, known: Iterable[str]):
        self.name = name
        self.known = tuple(known)
        super().__init__(
            f"Unknown paper size '{name}'. Expected one of: {', '.join(self.known)}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
