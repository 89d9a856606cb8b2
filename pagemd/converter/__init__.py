"""Converter module -- staged HTML to Markdown pipeline and its options."""

from pagemd.converter.engine import HtmlToMarkdownConverter, default_converter, html_to_markdown
from pagemd.converter.options import ConverterOptions, options_from_settings, resolve_options

__all__ = [
    "ConverterOptions",
    "HtmlToMarkdownConverter",
    "default_converter",
    "html_to_markdown",
    "options_from_settings",
    "resolve_options",
]
