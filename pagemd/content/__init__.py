"""Content module -- page content packaging and validation."""

from pagemd.content.page import (
    PageContent,
    build_page_content,
    is_valid_content,
    truncate_content,
    validate_content,
)

__all__ = [
    "PageContent",
    "build_page_content",
    "is_valid_content",
    "truncate_content",
    "validate_content",
]
