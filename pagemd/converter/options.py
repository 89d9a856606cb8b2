"""Converter options -- resolved once, never rejected."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pagemd.utils.logger import get_logger

log = get_logger(__name__)

# field -> (allowed values, default)
ALLOWED_VALUES: Dict[str, Tuple[Tuple[str, ...], str]] = {
    "heading_style": (("atx", "setext"), "atx"),
    "bullet_list_marker": (("-", "*", "+"), "-"),
    "code_block_style": (("fenced", "indented"), "fenced"),
    "em_delimiter": (("*", "_"), "*"),
    "engine": (("staged", "tree"), "staged"),
}

# camelCase names accepted from callers that speak the widget's option names
_CAMEL_CASE_KEYS = {
    "headingStyle": "heading_style",
    "bulletListMarker": "bullet_list_marker",
    "codeBlockStyle": "code_block_style",
    "emDelimiter": "em_delimiter",
}


@dataclass(frozen=True)
class ConverterOptions:
    """Immutable converter configuration.

    Unrecognised values fall back to the field default with a warning, so
    building options never raises.
    """

    heading_style: str = "atx"
    bullet_list_marker: str = "-"
    code_block_style: str = "fenced"
    em_delimiter: str = "*"
    engine: str = "staged"

    def __post_init__(self) -> None:
        for name, (allowed, default) in ALLOWED_VALUES.items():
            raw = getattr(self, name)
            value = str(raw).strip().lower() if raw is not None else ""
            if value not in allowed:
                log.warning("Unsupported %s %r, using %r", name, raw, default)
                value = default
            object.__setattr__(self, name, value)


OptionsLike = Union[ConverterOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> ConverterOptions:
    """Merge caller-supplied *options* over the defaults."""
    if options is None:
        return ConverterOptions()
    if isinstance(options, ConverterOptions):
        return options

    known = {f.name for f in fields(ConverterOptions)}
    kwargs: Dict[str, Any] = {}
    for key, value in options.items():
        name = _CAMEL_CASE_KEYS.get(key, key)
        if name not in known:
            log.debug("Ignoring unknown converter option %r", key)
            continue
        if value is None:
            continue
        kwargs[name] = value
    return ConverterOptions(**kwargs)


def options_from_settings(overrides: Optional[Mapping[str, Any]] = None) -> ConverterOptions:
    """Build options from the environment-backed settings plus *overrides*."""
    from pagemd.utils.config import settings

    base: Dict[str, Any] = {
        "heading_style": settings.heading_style,
        "bullet_list_marker": settings.bullet_list_marker,
        "code_block_style": settings.code_block_style,
        "em_delimiter": settings.em_delimiter,
        "engine": settings.engine,
    }
    if overrides:
        base.update({k: v for k, v in overrides.items() if v is not None})
    return resolve_options(base)
