"""Parse-tree engine backed by markdownify.

Handles nesting the staged pipeline flattens (lists inside blockquotes,
nested lists). Selected with ``engine="tree"``. Output follows the staged
engine's rules where they are fixed: strong is always ``**`` and heading
text is plain.
"""

import re

from markdownify import MarkdownConverter, chomp

from pagemd.converter.cleanup import collapse_blank_lines
from pagemd.converter.options import ConverterOptions
from pagemd.converter.sanitizer import remove_scripts_and_styles
from pagemd.utils.logger import get_logger

log = get_logger(__name__)

FENCED_BLOCK_RE = re.compile(r"```[^\n]*\n([\s\S]*?)\n?```")


class PageMarkdownConverter(MarkdownConverter):
    """markdownify converter with fixed ``**`` strong and plain-text headings."""

    def convert_b(self, el, text, *args, **kwargs):
        prefix, suffix, text = chomp(text)
        if not text:
            return ""
        return f"{prefix}**{text}**{suffix}"

    convert_strong = convert_b

    @staticmethod
    def _heading_text(el) -> str:
        return " ".join(el.get_text().split())

    # markdownify < 1.0 dispatches headings through convert_hn, later
    # releases through _convert_hn.
    def convert_hn(self, n, el, text, *args, **kwargs):
        return super().convert_hn(n, el, self._heading_text(el), *args, **kwargs)

    def _convert_hn(self, n, el, text, *args, **kwargs):
        return super()._convert_hn(n, el, self._heading_text(el), *args, **kwargs)


def _indent_fenced(markdown: str) -> str:
    def _indent(m: re.Match) -> str:
        return "\n".join(f"    {line}" for line in m.group(1).split("\n"))

    return FENCED_BLOCK_RE.sub(_indent, markdown)


def convert_tree(html: str, options: ConverterOptions) -> str:
    """Convert via markdownify, falling back to the staged engine on failure."""
    html = remove_scripts_and_styles(html)
    try:
        md = PageMarkdownConverter(
            heading_style="underlined" if options.heading_style == "setext" else "atx",
            bullets=options.bullet_list_marker,
            strong_em_symbol=options.em_delimiter,
            escape_asterisks=False,
            escape_underscores=False,
        ).convert(html)
    except Exception:
        log.warning("markdownify failed, falling back to the staged engine", exc_info=True)
        from pagemd.converter.engine import HtmlToMarkdownConverter

        return HtmlToMarkdownConverter(options).convert_staged(html)

    if options.code_block_style == "indented":
        md = _indent_fenced(md)
    return collapse_blank_lines(md).strip()
