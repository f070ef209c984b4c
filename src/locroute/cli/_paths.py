"""``locroute parse`` and ``locroute translate`` — inspect a single path."""

import argparse
import dataclasses
import sys

from locroute.cli._domain import load_domain_or_exit
from locroute.routing.route import RouteDescriptor, SlugRef
from locroute.routing.router import parse_pathname, translate_pathname


def _format_value(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, SlugRef):
        if value.key is None:
            return f"? ({value.slug})"
        if value.slug:
            return f"{value.key} ({value.slug})"
        return str(value.key)
    return str(value)


def describe_route(route: RouteDescriptor) -> list[tuple[str, str]]:
    """Return ``(field, value)`` rows describing *route*, kind first."""
    rows = [("kind", str(route.kind))]
    rows.extend(
        (field.name, _format_value(getattr(route, field.name)))
        for field in dataclasses.fields(route)
    )
    return rows


def run_parse(args: argparse.Namespace) -> None:
    """Print the descriptor ``args.path`` resolves to.

    Exits 1 when no route matches.
    """
    domain = load_domain_or_exit(args.domain)
    route = parse_pathname(args.path, domain)
    if route is None:
        print(f"Error: no route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    rows = describe_route(route)
    width = max(len(name) for name, _ in rows)
    for name, value in rows:
        print(f"{name:<{width}}  {value}")


def run_translate(args: argparse.Namespace) -> None:
    """Print ``args.path`` re-rendered in ``args.language``."""
    domain = load_domain_or_exit(args.domain)
    print(translate_pathname(args.path, args.language, domain))
