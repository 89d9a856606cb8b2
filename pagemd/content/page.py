"""Page content -- converted Markdown plus the checks callers run before prompting."""

from dataclasses import dataclass
from typing import Optional, Tuple

from pagemd.converter.engine import HtmlToMarkdownConverter, default_converter
from pagemd.utils.config import settings
from pagemd.utils.logger import get_logger

log = get_logger(__name__)


@dataclass
class PageContent:
    """A captured page: where it came from and its Markdown body."""

    url: str
    title: str
    content: str


def truncate_content(text: str, max_chars: Optional[int] = None) -> str:
    """Cut *text* to at most ``max_chars`` characters."""
    limit = settings.max_content_chars if max_chars is None else max_chars
    if limit <= 0 or len(text) <= limit:
        return text
    return text[:limit].rstrip()


def validate_content(
    text: str,
    min_chars: Optional[int] = None,
    min_words: Optional[int] = None,
) -> Tuple[bool, Optional[str]]:
    """Return (ok, reason). ``ok`` is False when there is too little to work with."""
    min_chars = settings.min_content_chars if min_chars is None else min_chars
    min_words = settings.min_content_words if min_words is None else min_words
    if not text or not text.strip():
        return False, "Content is empty."
    if len(text) <= min_chars:
        return False, f"Content is too short ({len(text)} chars, need more than {min_chars})."
    words = len(text.split(" "))
    if words <= min_words:
        return False, f"Content has too few words ({words}, need more than {min_words})."
    return True, None


def is_valid_content(
    text: str,
    min_chars: Optional[int] = None,
    min_words: Optional[int] = None,
) -> bool:
    ok, _ = validate_content(text, min_chars=min_chars, min_words=min_words)
    return ok


def build_page_content(
    html: str,
    url: str = "",
    title: str = "",
    converter: Optional[HtmlToMarkdownConverter] = None,
    max_chars: Optional[int] = None,
) -> PageContent:
    """Convert *html* and package it with its source.

    Insufficient content is logged but still returned; the caller decides.
    """
    markdown = (converter or default_converter()).convert(html)
    markdown = truncate_content(markdown, max_chars=max_chars)
    ok, reason = validate_content(markdown)
    if not ok:
        log.warning("Insufficient content for %s: %s", url or "<fragment>", reason)
    return PageContent(url=url, title=title, content=markdown)
