"""Open/close element matching in a single forward scan.

``replace_elements`` pairs each start tag with the first matching end tag
after it, like a lazy ``<x>[\\s\\S]*?</x>`` pattern, but once an end tag is
known to be missing the remaining start tags of that name are skipped, so
unterminated markup costs linear time instead of one scan per start tag.
"""

import re
from functools import lru_cache
from typing import Callable, List, Pattern, Set

Replacer = Callable[[re.Match, str], str]


def start_tag(names: str) -> Pattern:
    """Compile a start-tag pattern for ``names`` (a regex alternation).

    The tag name is captured as ``tag``, the attribute text as ``attrs``.
    """
    return re.compile(rf"<(?P<tag>{names})\b(?P<attrs>[^<>]*)>", re.IGNORECASE)


@lru_cache(maxsize=64)
def end_tag(name: str) -> Pattern:
    return re.compile(rf"</{re.escape(name)}\s*>", re.IGNORECASE)


def replace_elements(html: str, start: Pattern, replace: Replacer) -> str:
    """Replace every start-tag ... end-tag region with ``replace(match, body)``."""
    parts: List[str] = []
    pos = 0
    unclosed: Set[str] = set()
    for m in start.finditer(html):
        if m.start() < pos:
            continue
        name = m.group("tag").lower()
        if name in unclosed:
            continue
        close = end_tag(name).search(html, m.end())
        if close is None:
            unclosed.add(name)
            continue
        parts.append(html[pos:m.start()])
        parts.append(replace(m, html[m.end():close.start()]))
        pos = close.end()
    parts.append(html[pos:])
    return "".join(parts)
