"""locroute CLI — inspect how paths parse, translate, and which slugs exist.

Entry point registered as ``locroute`` in ``pyproject.toml``::

    [project.scripts]
    locroute = "locroute.cli:main"
"""

import argparse
import logging
import sys

from locroute.i18n import DEFAULT_LANGUAGE, language_ids


def _add_domain_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--domain",
        default=None,
        metavar="FILE",
        help="JSON domain configuration with routing overrides",
    )


def _enable_debug_logging() -> None:
    logger = logging.getLogger("locroute")
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``locroute`` command."""
    parser = argparse.ArgumentParser(
        prog="locroute",
        description="locroute — localized URL paths for the records dashboard.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution diagnostics to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- locroute parse ---------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Show the route a path resolves to")
    parse_parser.add_argument("path", help="Path to parse (e.g. /empresas/AFF-001)")
    _add_domain_option(parse_parser)

    # -- locroute translate -----------------------------------------------
    translate_parser = subparsers.add_parser("translate", help="Re-render a path in another language")
    translate_parser.add_argument("path", help="Path to translate")
    translate_parser.add_argument(
        "--to",
        dest="language",
        required=True,
        choices=language_ids(),
        help="Target language",
    )
    _add_domain_option(translate_parser)

    # -- locroute slugs ---------------------------------------------------
    slugs_parser = subparsers.add_parser("slugs", help="List every key and its slug")
    slugs_parser.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE,
        choices=language_ids(),
        help="Language to list slugs in",
    )
    _add_domain_option(slugs_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        _enable_debug_logging()

    if args.command == "parse":
        from locroute.cli._paths import run_parse

        run_parse(args)
    elif args.command == "translate":
        from locroute.cli._paths import run_translate

        run_translate(args)
    elif args.command == "slugs":
        from locroute.cli._slugs import run_slugs

        run_slugs(args)
