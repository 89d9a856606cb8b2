"""HTML to Markdown conversion -- the staged rewrite pipeline.

The buffer flows forward through five stages and no stage looks at a later
one's output:

1. sanitizer   -- drop <script>/<style> with their content
2. blocks      -- headings, paragraphs, lists, blockquotes, code, rules
3. inline      -- links, images, emphasis, strong, inline code, <br>
4. tag strip   -- whatever markup is left becomes plain text
5. whitespace  -- decode entities, collapse blank lines, trim

Stage order is observable in the output (headings are emitted before
paragraphs get wrapped, links before images, emphasis before strong), so
keep it.
"""

from typing import Optional

from pagemd.converter import blocks, inline
from pagemd.converter.cleanup import normalize_whitespace, strip_tags
from pagemd.converter.options import ConverterOptions, OptionsLike, options_from_settings, resolve_options
from pagemd.converter.sanitizer import remove_scripts_and_styles
from pagemd.utils.logger import get_logger

log = get_logger(__name__)


class HtmlToMarkdownConverter:
    """Holds resolved options only; ``convert`` is safe to share across threads."""

    def __init__(self, options: OptionsLike = None):
        self.options: ConverterOptions = resolve_options(options)

    def __repr__(self) -> str:
        return f"HtmlToMarkdownConverter({self.options!r})"

    def convert(self, html: Optional[str]) -> str:
        """Convert an HTML fragment to Markdown. Never raises."""
        if not html:
            return ""
        if self.options.engine == "tree":
            from pagemd.converter.tree import convert_tree

            markdown = convert_tree(html, self.options)
        else:
            markdown = self.convert_staged(html)
        log.debug(
            "Converted %d chars of HTML to %d chars of Markdown (%s)",
            len(html), len(markdown), self.options.engine,
        )
        return markdown

    def convert_staged(self, html: str) -> str:
        opts = self.options

        html = remove_scripts_and_styles(html)

        html = blocks.convert_headings(html)
        html = blocks.convert_paragraphs(html)
        html = blocks.convert_lists(html, bullet=opts.bullet_list_marker)
        html = blocks.convert_blockquotes(html)
        html = blocks.convert_code_blocks(html, style=opts.code_block_style)
        html = blocks.convert_horizontal_rules(html)

        html = inline.convert_links(html)
        html = inline.convert_images(html)
        html = inline.convert_emphasis(html, delimiter=opts.em_delimiter)
        html = inline.convert_strong(html)
        html = inline.convert_inline_code(html)
        html = inline.convert_line_breaks(html)

        html = strip_tags(html)

        return normalize_whitespace(html)


_default: Optional[HtmlToMarkdownConverter] = None


def default_converter() -> HtmlToMarkdownConverter:
    """Converter configured from ``settings`` (created on first use)."""
    global _default
    if _default is None:
        _default = HtmlToMarkdownConverter(options_from_settings())
    return _default


def html_to_markdown(html: Optional[str], options: OptionsLike = None) -> str:
    """Convert an HTML string to clean Markdown."""
    if options is None:
        return default_converter().convert(html)
    return HtmlToMarkdownConverter(options).convert(html)
