"""Block-level rewrites: headings, paragraphs, lists, quotes, code, rules.

Every function takes the whole buffer and returns a new one. Matching is
single-pass and non-recursive: the first open/close pair wins, so nested
lists are flattened.
"""

import re
from typing import List

from pagemd.converter.cleanup import collapse_blank_lines, strip_tags
from pagemd.converter.elements import replace_elements, start_tag

HEADING_START = start_tag("h[1-6]")
PARAGRAPH_START = start_tag("p")
ORDERED_LIST_START = start_tag("ol")
UNORDERED_LIST_START = start_tag("ul")
BLOCKQUOTE_START = start_tag("blockquote")
PRE_START = start_tag("pre")
# </li> is optional in HTML; an item also ends at the next <li> or the list end.
LIST_ITEM_RE = re.compile(r"<li\b[^<>]*>([\s\S]*?)(?=</li\s*>|<li\b|$)", re.IGNORECASE)
CODE_OPEN_RE = re.compile(r"^\s*<code\b[^<>]*>", re.IGNORECASE)
HR_RE = re.compile(r"<hr\b[^<>]*>", re.IGNORECASE)


def _block(text: str) -> str:
    return f"\n\n{text}\n\n"


def list_items(body: str) -> List[str]:
    """Return the tag-stripped text of each <li> in *body*."""
    return [strip_tags(item).strip() for item in LIST_ITEM_RE.findall(body)]


def convert_headings(html: str) -> str:
    def _heading(m: re.Match, body: str) -> str:
        level = int(m.group("tag")[1])
        text = strip_tags(body).strip()
        return _block(f"{'#' * level} {text}")

    return replace_elements(html, HEADING_START, _heading)


def convert_paragraphs(html: str) -> str:
    """Wrap paragraph content in blank lines; inline tags are kept for later stages."""

    def _paragraph(m: re.Match, body: str) -> str:
        text = body.strip()
        return _block(text) if text else ""

    return replace_elements(html, PARAGRAPH_START, _paragraph)


def convert_lists(html: str, bullet: str = "-") -> str:
    """Ordered lists first (numbered from 1 per list), then unordered lists."""

    def _ordered(m: re.Match, body: str) -> str:
        items = list_items(body)
        return _block("\n".join(f"{i}. {text}" for i, text in enumerate(items, 1)))

    def _unordered(m: re.Match, body: str) -> str:
        items = list_items(body)
        return _block("\n".join(f"{bullet} {text}" for text in items))

    html = replace_elements(html, ORDERED_LIST_START, _ordered)
    return replace_elements(html, UNORDERED_LIST_START, _unordered)


def convert_blockquotes(html: str) -> str:
    def _quote(m: re.Match, body: str) -> str:
        text = collapse_blank_lines(strip_tags(body).strip())
        return _block("\n".join(f"> {line.strip()}" for line in text.split("\n")))

    return replace_elements(html, BLOCKQUOTE_START, _quote)


def convert_code_blocks(html: str, style: str = "fenced") -> str:
    """``<pre><code>`` (or a bare ``<pre>``) to a fenced or indented block."""

    def _code(m: re.Match, body: str) -> str:
        text = strip_tags(CODE_OPEN_RE.sub("", body, count=1)).strip("\n")
        if style == "indented":
            return _block("\n".join(f"    {line}" for line in text.split("\n")))
        return _block(f"```\n{text}\n```")

    return replace_elements(html, PRE_START, _code)


def convert_horizontal_rules(html: str) -> str:
    return HR_RE.sub(_block("---"), html)
