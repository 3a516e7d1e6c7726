#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Markup stripping for rich-text page content.

The editor stores page content as HTML. Measurement in this package works on
plain text, so callers strip markup here before counting.
"""

import html
import re

IMG_TAG_PATTERN = re.compile(r'<img\b[^>]*>', re.IGNORECASE)
TAG_PATTERN = re.compile(r'<[^>]+>')
WHITESPACE_PATTERN = re.compile(r'\s+')


def strip_html_tags(text: str) -> str:
    """
    Convert editor HTML to plain text.

    - <img> tags are removed entirely (inline base64 images would otherwise
      dominate character counts)
    - Every other tag becomes a space
    - HTML entities are decoded (&nbsp; becomes a plain space)
    - Whitespace runs collapse to one space; the result is trimmed

    Example:
        >>> strip_html_tags('<h1>제목</h1><p>문단 <strong>굵게</strong></p>')
        '제목 문단 굵게'
    """
    if not text:
        return ""

    text = IMG_TAG_PATTERN.sub('', text)
    text = TAG_PATTERN.sub(' ', text)
    text = html.unescape(text).replace('\xa0', ' ')
    return WHITESPACE_PATTERN.sub(' ', text).strip()


def get_text_length(content: str) -> int:
    """Character length of content after markup stripping."""
    return len(strip_html_tags(content))
