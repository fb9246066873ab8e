"""
wikilookup CLI - Run the spreadsheet lookup functions from a terminal.

Usage:
    wikilookup synonyms de:Berlin
        Lists the redirects pointing at an article.

    wikilookup translate de:Berlin --languages en fr [--as-object] [--skip-header]
        Lists language links, optionally limited to some languages.

    wikilookup expand de:Berlin --languages en fr
        Lists translations, each followed by its synonyms.

    wikilookup category-members en:Category:Visitor_attractions_in_Berlin
    wikilookup subcategories en:Category:Visitor_attractions_in_Berlin
    wikilookup inbound-links de:Berlin
    wikilookup outbound-links de:Berlin
    wikilookup mutual-links de:Berlin
    wikilookup geocoordinates de:Berlin [--host-language de]
    wikilookup wikidata-facts de:Berlin
    wikilookup suggest wikipedia [--language de]

Rows print tab-separated, one per line, the way they fill spreadsheet
cells. Use --json for machine-readable output.
"""

import argparse
import json
import logging
import sys

from . import lookups
from .config import config
from .results import LookupResult
from .utils import setup_logging

logger = logging.getLogger(__name__)


def format_rows(rows: list | dict) -> list[str]:
    """Render result rows as tab-separated lines."""
    if isinstance(rows, dict):
        rows = [
            [key, *value] if isinstance(value, list) else [key, value]
            for key, value in rows.items()
        ]

    lines = []
    for row in rows:
        if isinstance(row, list):
            lines.append("\t".join(str(cell) for cell in row))
        else:
            lines.append(str(row))
    return lines


def _print_result(result: LookupResult, args: argparse.Namespace) -> None:
    if result.failed:
        print(f"Error: {result.error}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_cell(), ensure_ascii=False, indent=2))
        return

    for line in format_rows(result.rows):
        print(line)


def cmd_synonyms(args: argparse.Namespace) -> LookupResult:
    return lookups.synonyms(args.article)


def cmd_translate(args: argparse.Namespace) -> LookupResult:
    return lookups.translations(
        args.article, args.languages, as_object=args.as_object, skip_header=args.skip_header
    )


def cmd_expand(args: argparse.Namespace) -> LookupResult:
    return lookups.expand(args.article, args.languages, as_object=args.as_object)


def cmd_category_members(args: argparse.Namespace) -> LookupResult:
    return lookups.category_members(args.category)


def cmd_subcategories(args: argparse.Namespace) -> LookupResult:
    return lookups.subcategories(args.category)


def cmd_inbound_links(args: argparse.Namespace) -> LookupResult:
    return lookups.inbound_links(args.article)


def cmd_outbound_links(args: argparse.Namespace) -> LookupResult:
    return lookups.outbound_links(args.article)


def cmd_mutual_links(args: argparse.Namespace) -> LookupResult:
    return lookups.mutual_links(args.article)


def cmd_geocoordinates(args: argparse.Namespace) -> LookupResult:
    return lookups.geocoordinates(args.article, host_language=args.host_language)


def cmd_wikidata_facts(args: argparse.Namespace) -> LookupResult:
    return lookups.wikidata_facts(args.article)


def cmd_suggest(args: argparse.Namespace) -> LookupResult:
    return lookups.google_suggest(args.keyword, args.language)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikilookup",
        description="Query Wikipedia, Wikidata and Google Suggest like the sheet formulas do",
    )
    parser.add_argument("--config", type=str, help="Path to YAML config file")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    article_help = 'Article as "language:Article_Title" (e.g. "de:Berlin")'
    category_help = 'Category as "language:Category:Title"'

    simple_commands = [
        ("synonyms", "List redirects (synonyms) of an article", cmd_synonyms),
        ("inbound-links", "List pages linking to an article", cmd_inbound_links),
        ("outbound-links", "List pages an article links to", cmd_outbound_links),
        ("mutual-links", "List pages linked in both directions", cmd_mutual_links),
        ("wikidata-facts", "List single-valued Wikidata facts", cmd_wikidata_facts),
    ]
    for name, help_text, func in simple_commands:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("article", help=article_help)
        sub.set_defaults(func=func)

    for name, help_text, func in [
        ("category-members", "List articles in a category", cmd_category_members),
        ("subcategories", "List subcategories of a category", cmd_subcategories),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("category", help=category_help)
        sub.set_defaults(func=func)

    translate_parser = subparsers.add_parser("translate", help="List language links")
    translate_parser.add_argument("article", help=article_help)
    translate_parser.add_argument(
        "--languages", nargs="+", default=None, help="Only keep these language codes"
    )
    translate_parser.add_argument(
        "--as-object", action="store_true", help="Key results by language"
    )
    translate_parser.add_argument(
        "--skip-header", action="store_true", help="Omit the language column"
    )
    translate_parser.set_defaults(func=cmd_translate)

    expand_parser = subparsers.add_parser(
        "expand", help="List translations followed by their synonyms"
    )
    expand_parser.add_argument("article", help=article_help)
    expand_parser.add_argument(
        "--languages", nargs="+", default=None, help="Only keep these language codes"
    )
    expand_parser.add_argument("--as-object", action="store_true", help="Key results by language")
    expand_parser.set_defaults(func=cmd_expand)

    geo_parser = subparsers.add_parser("geocoordinates", help="Show primary coordinates")
    geo_parser.add_argument("article", help=article_help)
    geo_parser.add_argument(
        "--host-language",
        type=str,
        default=None,
        help="Wikipedia edition to query (default: geocoordinates.language setting)",
    )
    geo_parser.set_defaults(func=cmd_geocoordinates)

    suggest_parser = subparsers.add_parser("suggest", help="List Google Suggest completions")
    suggest_parser.add_argument("keyword", help="Keyword to complete")
    suggest_parser.add_argument(
        "--language", type=str, default=None, help="Interface language (default: en)"
    )
    suggest_parser.set_defaults(func=cmd_suggest)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        config.load(args.config)
    setup_logging(verbose=args.verbose)

    logger.debug(f"Running '{args.command}'")
    result = args.func(args)
    _print_result(result, args)


if __name__ == "__main__":
    main()
