"""``locroute slugs`` — list every static key and the slug it renders as.

Domain overrides are applied, so the table shows what a deployment
actually puts in its URLs.
"""

import argparse

from locroute.cli._domain import load_domain_or_exit
from locroute.routing.keys import Category, Segment
from locroute.routing.slugs import TAB_SLUGS, category_slug, route_segment, tab_slug


def run_slugs(args: argparse.Namespace) -> None:
    """Print a FAMILY / KEY / SLUG table for ``args.language``."""
    domain = load_domain_or_exit(args.domain)
    language = args.language

    # Build rows: (family, key, slug)
    rows: list[tuple[str, str, str]] = []
    rows.extend(("segment", str(key), route_segment(key, language, domain)) for key in Segment)
    rows.extend(("category", str(key), category_slug(key, language, domain)) for key in Category)
    for context, tabs in TAB_SLUGS.items():
        rows.extend(
            (f"tab:{context}", str(key), tab_slug(key, context, language, domain)) for key in tabs
        )

    max_family = max(max(len(r[0]) for r in rows), 6)  # "FAMILY" header
    max_key = max(max(len(r[1]) for r in rows), 3)  # "KEY" header

    fmt = f"{{:<{max_family}}}  {{:<{max_key}}}  {{}}"
    print(fmt.format("FAMILY", "KEY", "SLUG"))
    sep_len = max_family + max_key + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for family, key, slug in rows:
        print(fmt.format(family, key, slug))
