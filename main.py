"""CLI entry point for the HTML to Markdown converter."""

import argparse
import sys
import time
from typing import List, Optional

from pagemd.content.page import truncate_content, validate_content
from pagemd.converter import HtmlToMarkdownConverter, options_from_settings
from pagemd.utils.logger import get_logger, log_conversion, set_log_level

log = get_logger(__name__)


def run_conversion(
    html: str,
    converter: HtmlToMarkdownConverter,
    source: str = "<stdin>",
    max_chars: Optional[int] = None,
    validate: bool = False,
) -> bool:
    """Convert one document, print it, and return whether it passed validation."""
    log.debug("Converting %s (%d chars)", source, len(html))
    start = time.time()
    markdown = converter.convert(html)
    if max_chars is not None:
        markdown = truncate_content(markdown, max_chars=max_chars)
    elapsed_ms = (time.time() - start) * 1000

    ok = True
    if validate:
        ok, reason = validate_content(markdown)
        if not ok:
            print(f"{source}: {reason}", file=sys.stderr)

    log_conversion(
        source=source,
        engine=converter.options.engine,
        input_chars=len(html),
        output_chars=len(markdown),
        response_time_ms=elapsed_ms,
        valid=ok if validate else None,
    )
    print(markdown)
    return ok


def interactive_mode(converter: HtmlToMarkdownConverter) -> None:
    """REPL loop: one HTML snippet per line."""
    print("HTML to Markdown  (type 'quit' or 'exit' to stop)\n")
    while True:
        try:
            html = input("html> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if html.lower() in ("quit", "exit", "q"):
            print("Goodbye.")
            break
        if not html:
            continue
        run_conversion(html, converter, source="<repl>")
        print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert HTML fragments to Markdown")
    parser.add_argument("files", nargs="*", help="HTML files to convert ('-' for stdin)")
    parser.add_argument("--heading-style", choices=["atx", "setext"], help="Heading style")
    parser.add_argument("--bullet", choices=["-", "*", "+"], help="Unordered list marker")
    parser.add_argument("--code-style", choices=["fenced", "indented"],
                        help="Code block style")
    parser.add_argument("--em", choices=["*", "_"], help="Emphasis delimiter")
    parser.add_argument("--engine", choices=["staged", "tree"], help="Conversion engine")
    parser.add_argument("--max-chars", type=int, help="Truncate output to N characters")
    parser.add_argument("--validate", action="store_true",
                        help="Exit with status 2 if any output has too little content")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Start interactive REPL mode")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    converter = HtmlToMarkdownConverter(options_from_settings({
        "heading_style": args.heading_style,
        "bullet_list_marker": args.bullet,
        "code_block_style": args.code_style,
        "em_delimiter": args.em,
        "engine": args.engine,
    }))

    if args.interactive:
        interactive_mode(converter)
        return 0

    all_ok = True
    for path in args.files or ["-"]:
        if path == "-":
            html, source = sys.stdin.read(), "<stdin>"
        else:
            try:
                with open(path, encoding="utf-8", errors="replace") as f:
                    html = f.read()
            except OSError as exc:
                print(f"Cannot read {path}: {exc.strerror}", file=sys.stderr)
                return 1
            source = path
        ok = run_conversion(html, converter, source=source,
                            max_chars=args.max_chars, validate=args.validate)
        all_ok = all_ok and ok

    return 0 if all_ok else 2


if __name__ == "__main__":
    sys.exit(main())
