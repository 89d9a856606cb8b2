"""Tag stripping, entity decoding and whitespace normalisation."""

import re

# A tag token starts with a letter, "/", "!" (comments, doctype) or "?".
TAG_RE = re.compile(r"<[A-Za-z/!?][^<>]*>")

ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "#39": "'",
    "nbsp": " ",
}
ENTITY_RE = re.compile(r"&(amp|lt|gt|quot|#39|nbsp);")

BLANK_RUN_RE = re.compile(r"\n\s*\n\s*\n")


def strip_tags(html: str) -> str:
    """Remove every tag token, keeping the text between them."""
    return TAG_RE.sub("", html)


def decode_entities(text: str) -> str:
    """Decode the supported named entities in a single pass.

    Anything else (``&copy;``, ``&#8212;`` ...) is left as-is.
    """
    return ENTITY_RE.sub(lambda m: ENTITIES[m.group(1)], text)


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of three or more line breaks to one blank line."""
    return BLANK_RUN_RE.sub("\n\n", text)


def normalize_whitespace(text: str) -> str:
    """Final stage: decode entities, collapse blank lines, trim."""
    return collapse_blank_lines(decode_entities(text)).strip()
