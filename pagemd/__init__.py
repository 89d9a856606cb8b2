"""pagemd -- turn captured page HTML into clean Markdown for LLM prompts."""

from pagemd.converter import ConverterOptions, HtmlToMarkdownConverter, html_to_markdown

__version__ = "0.1.0"

__all__ = ["ConverterOptions", "HtmlToMarkdownConverter", "html_to_markdown"]
