"""Drop <script> and <style> elements, content included."""

from pagemd.converter.elements import replace_elements, start_tag

SCRIPT_STYLE_START = start_tag("script|style")


def remove_scripts_and_styles(html: str) -> str:
    """Remove every script/style region.

    The region runs to the first matching close tag, so angle brackets
    inside string literals do not end the element early. An unterminated
    element is left for the tag stripper.
    """
    return replace_elements(html, SCRIPT_STYLE_START, lambda m, body: "")
