#!/usr/bin/env python3
"""
Legal Citations CLI

Command-line interface for extracting, enriching and linking legal citations.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment
load_dotenv()

from legal_citations import (
    enhance_consumer_protection_analysis,
    extract_citations,
    format_citation_with_context,
    get_direct_url_for_citation,
    process_law_references,
    process_law_references_sync,
)
from legal_citations.adapters import get_adapter
from legal_citations.analytics import analyze_citations, build_law_references

logger = logging.getLogger("legal_citations.cli")


def _read_input(path: str | None) -> str:
    """Read text from a file, or stdin when no path (or '-') is given."""
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _print_json(data):
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def cmd_extract(args):
    """List citations found in a document."""
    _print_json(extract_citations(_read_input(args.input)))


def cmd_format(args):
    """Format citations with their statutory context."""
    for citation in args.citation:
        print(format_citation_with_context(citation))


def cmd_resolve(args):
    """Show the direct URL for each citation."""
    _print_json({c: get_direct_url_for_citation(c) for c in args.citation})


def cmd_link(args):
    """Convert citations in a document to links."""
    text = _read_input(args.input)
    if not args.use_async:
        print(process_law_references_sync(text))
        return

    search = get_adapter(args.adapter) if args.adapter else None
    try:
        print(asyncio.run(process_law_references(text, search=search, timeout=args.timeout)))
    finally:
        if search is not None:
            search.close()


def cmd_enhance(args):
    """Annotate consumer protection references with descriptions."""
    print(enhance_consumer_protection_analysis(_read_input(args.input)))


def cmd_map(args):
    """Map a document's citations to knowledge-base law documents."""
    _print_json(build_law_references(_read_input(args.input)))


def cmd_analyze(args):
    """Citation statistics for a directory of JSON documents."""
    docs_dir = Path(args.data_dir)
    documents = []
    for f in sorted(docs_dir.glob("*.json")):
        with open(f, encoding="utf-8") as fp:
            documents.append(json.load(fp))

    if not documents:
        print(f"No JSON documents found in {docs_dir}")
        return 1

    _print_json(analyze_citations(documents, text_field=args.field))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Legal Citations CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py extract analysis.md
  python cli.py format "17.46(b)(1)" 50
  python cli.py resolve "Wal-Mart Stores, Inc. v. Wright"
  python cli.py link analysis.md --async --adapter supabase
  cat analysis.md | python cli.py enhance
  python cli.py map analysis.md
  python cli.py analyze --data-dir data/analyses
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command")

    # Extract
    sub = subparsers.add_parser("extract", help="List citations in a document")
    sub.add_argument("input", nargs="?", help="Input file (default: stdin)")
    sub.set_defaults(func=cmd_extract)

    # Format
    sub = subparsers.add_parser("format", help="Format citations with context")
    sub.add_argument("citation", nargs="+", help="Citation text")
    sub.set_defaults(func=cmd_format)

    # Resolve
    sub = subparsers.add_parser("resolve", help="Direct URLs for citations")
    sub.add_argument("citation", nargs="+", help="Citation text")
    sub.set_defaults(func=cmd_resolve)

    # Link
    sub = subparsers.add_parser("link", help="Convert citations to links")
    sub.add_argument("input", nargs="?", help="Input file (default: stdin)")
    sub.add_argument("--async", dest="use_async", action="store_true", help="Search for unknown citations")
    sub.add_argument("--adapter", "-a", help="Search adapter for --async (static, supabase)")
    sub.add_argument("--timeout", "-t", type=float, help="Seconds allowed per search")
    sub.set_defaults(func=cmd_link)

    # Enhance
    sub = subparsers.add_parser("enhance", help="Describe consumer protection references")
    sub.add_argument("input", nargs="?", help="Input file (default: stdin)")
    sub.set_defaults(func=cmd_enhance)

    # Map
    sub = subparsers.add_parser("map", help="Map citations to law documents")
    sub.add_argument("input", nargs="?", help="Input file (default: stdin)")
    sub.set_defaults(func=cmd_map)

    # Analyze
    sub = subparsers.add_parser("analyze", help="Citation statistics")
    sub.add_argument("--data-dir", "-d", default="data", help="Directory of JSON documents")
    sub.add_argument("--field", "-f", default="text", help="Key holding the document text")
    sub.set_defaults(func=cmd_analyze)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args) or 0
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid input or configuration: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
