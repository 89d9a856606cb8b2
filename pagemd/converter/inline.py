"""Inline rewrites: links, images, emphasis, strong, inline code, line breaks."""

import re
from typing import Dict

from pagemd.converter.cleanup import strip_tags
from pagemd.converter.elements import replace_elements, start_tag

ATTR_RE = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")

LINK_START = start_tag("a")
EMPHASIS_START = start_tag("em|i")
STRONG_START = start_tag("strong|b")
INLINE_CODE_START = start_tag("code")
IMAGE_RE = re.compile(r"<img\b([^<>]*)>", re.IGNORECASE)
LINE_BREAK_RE = re.compile(r"<br\b[^<>]*>", re.IGNORECASE)


def parse_attributes(attrs: str) -> Dict[str, str]:
    """Parse the attribute part of a start tag into a lower-cased name -> value dict."""
    result: Dict[str, str] = {}
    for m in ATTR_RE.finditer(attrs):
        name = m.group(1).lower()
        if name not in result:
            result[name] = next(v for v in m.groups()[1:] if v is not None)
    return result


def _image(m: re.Match) -> str:
    attrs = parse_attributes(m.group(1))
    src = attrs.get("src")
    if not src:
        return ""
    return f"![{attrs.get('alt', '')}]({src})"


def convert_links(html: str) -> str:
    """``<a href>`` to ``[text](href)``.

    Images inside the anchor are converted first so they survive as
    ``[![alt](src)](href)``; any other nested markup is stripped.
    """

    def _link(m: re.Match, body: str) -> str:
        href = parse_attributes(m.group("attrs")).get("href")
        text = strip_tags(IMAGE_RE.sub(_image, body)).strip()
        if href is None:
            return text
        return f"[{text}]({href})"

    return replace_elements(html, LINK_START, _link)


def convert_images(html: str) -> str:
    """``<img>`` to ``![alt](src)``; a missing alt gives ``![](src)``."""
    return IMAGE_RE.sub(_image, html)


def _wrap(start: re.Pattern, html: str, delimiter: str) -> str:
    def _sub(m: re.Match, body: str) -> str:
        text = strip_tags(body)
        if not text.strip():
            return ""
        return f"{delimiter}{text}{delimiter}"

    return replace_elements(html, start, _sub)


def convert_emphasis(html: str, delimiter: str = "*") -> str:
    return _wrap(EMPHASIS_START, html, delimiter)


def convert_strong(html: str) -> str:
    return _wrap(STRONG_START, html, "**")


def convert_inline_code(html: str) -> str:
    return _wrap(INLINE_CODE_START, html, "`")


def convert_line_breaks(html: str) -> str:
    return LINE_BREAK_RE.sub("\n", html)
