"""Static slug tables and their reverse indexes.

Three key families appear in URLs: categories, fixed route segments and
tabs (scoped to a parent context). Each family exposes a total
``key -> slug`` function and a ``slug -> key | None`` resolver.

The reverse indexes are built once at import and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from locroute.i18n import DEFAULT_LANGUAGE
from locroute.routing.keys import AffairTab, AssetTab, Category, RenewalTab, Segment, TabContext

if TYPE_CHECKING:
    from locroute.routing.domain import DomainOverride


def normalize(value: str | None) -> str:
    """Canonicalize a slug for comparison: trimmed and lowercased."""
    return (value or "").strip().lower()


def _freeze(table: Mapping) -> Mapping:
    return MappingProxyType(
        {key: _freeze(value) if isinstance(value, Mapping) else value for key, value in table.items()}
    )


# language -> category -> slug
CATEGORY_SLUGS: Mapping[str, Mapping[str, str]] = _freeze(
    {
        "en": {
            Category.COMPANY: "company",
            Category.SUPPLIER: "supplier",
            Category.CUSTOMER: "customer",
            Category.PRODUCT: "product",
            Category.FACILITY: "facility",
            Category.EQUIPMENT: "equipment",
            Category.VEHICLE: "vehicle",
            Category.PERSON: "person",
            Category.OTHER_ASSET: "other_asset",
        },
        "es": {
            Category.COMPANY: "empresas",
            Category.SUPPLIER: "proveedores",
            Category.CUSTOMER: "clientes",
            Category.PRODUCT: "productos",
            Category.FACILITY: "establecimientos",
            Category.EQUIPMENT: "equipos",
            Category.VEHICLE: "vehiculos",
            Category.PERSON: "personas",
            Category.OTHER_ASSET: "otros-activos",
        },
    }
)

# segment -> language -> slug
ROUTE_SEGMENTS: Mapping[str, Mapping[str, str]] = _freeze(
    {
        Segment.CONTROL_PANEL: {"en": "control-panel", "es": "panel-de-control"},
        Segment.DASHBOARD: {"en": "dashboard", "es": "panel"},
        Segment.AFFAIR: {"en": "affair", "es": "asunto"},
        Segment.RENEWAL: {"en": "renewal", "es": "actualizacion"},
    }
)

# context -> tab -> language -> slug
TAB_SLUGS: Mapping[str, Mapping[str, Mapping[str, str]]] = _freeze(
    {
        TabContext.ASSET: {
            AssetTab.INFO: {"en": "info", "es": "informacion"},
            AssetTab.REGULATORY: {"en": "regulatory", "es": "regulatorios"},
            AssetTab.DOSSIER: {"en": "dossier", "es": "expediente"},
            AssetTab.RELATIONS: {"en": "relations", "es": "relaciones"},
        },
        TabContext.AFFAIR: {
            AffairTab.INFO: {"en": "info", "es": "informacion"},
            AffairTab.RENEWALS: {"en": "renewals", "es": "renovaciones"},
        },
        TabContext.RENEWAL: {
            RenewalTab.INFO: {"en": "info", "es": "informacion"},
            RenewalTab.ATTACHMENTS: {"en": "attachments", "es": "adjuntos"},
        },
    }
)


def _index(pairs: Iterable[tuple[str, str]]) -> Mapping[str, str]:
    """Build a read-only ``normalized slug -> key`` index."""
    return MappingProxyType({normalize(slug): key for slug, key in pairs if slug})


_CATEGORY_LOOKUP = _index(
    [(slug, category) for slugs in CATEGORY_SLUGS.values() for category, slug in slugs.items()]
    + [(category, category) for category in Category]
)

_SEGMENT_LOOKUP = _index(
    (slug, segment) for segment, slugs in ROUTE_SEGMENTS.items() for slug in slugs.values()
)

_TAB_LOOKUP: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        context: _index(
            [(slug, tab) for tab, slugs in tabs.items() for slug in slugs.values()]
            + [(tab, tab) for tab in tabs]
        )
        for context, tabs in TAB_SLUGS.items()
    }
)

_SEGMENT_KEYS = frozenset(Segment)


def _is_segment(key: str) -> bool:
    return key in _SEGMENT_KEYS


def _is_not_segment(key: str) -> bool:
    return key not in _SEGMENT_KEYS


# -- categories ----------------------------------------------------------------


def category_slug(
    category: str,
    language: str = DEFAULT_LANGUAGE,
    domain: DomainOverride | None = None,
) -> str:
    """Return the URL slug for *category* in *language*.

    Never fails: falls back to the default language, then to the key.
    """
    if domain is not None:
        override = domain.segment(category, language)
        if override:
            return override
    for lang in (language, DEFAULT_LANGUAGE):
        slug = CATEGORY_SLUGS.get(lang, {}).get(category)
        if slug:
            return slug
    return str(category)


def resolve_category(slug: str | None, domain: DomainOverride | None = None) -> str | None:
    """Return the category key *slug* stands for, or ``None``."""
    if domain is not None:
        resolved = domain.resolve_segment(slug, accept=_is_not_segment)
        if resolved:
            return resolved
    return _CATEGORY_LOOKUP.get(normalize(slug))


# -- fixed route segments ------------------------------------------------------


def route_segment(
    segment: str,
    language: str = DEFAULT_LANGUAGE,
    domain: DomainOverride | None = None,
) -> str:
    """Return the URL slug for a fixed route *segment* in *language*."""
    if domain is not None:
        override = domain.segment(segment, language)
        if override:
            return override
    slugs = ROUTE_SEGMENTS.get(segment, {})
    return slugs.get(language) or slugs.get(DEFAULT_LANGUAGE) or str(segment)


def resolve_route_segment(slug: str | None, domain: DomainOverride | None = None) -> str | None:
    """Return the fixed segment key *slug* stands for, or ``None``."""
    if domain is not None:
        resolved = domain.resolve_segment(slug, accept=_is_segment)
        if resolved:
            return resolved
    return _SEGMENT_LOOKUP.get(normalize(slug))


# -- tabs ----------------------------------------------------------------------


def tab_slug(
    tab: str,
    context: str,
    language: str = DEFAULT_LANGUAGE,
    domain: DomainOverride | None = None,
) -> str:
    """Return the URL slug for *tab* within *context* in *language*."""
    if domain is not None:
        override = domain.tab(context, tab, language)
        if override:
            return override
    slugs = TAB_SLUGS.get(context, {}).get(tab, {})
    return slugs.get(language) or slugs.get(DEFAULT_LANGUAGE) or str(tab)


def resolve_tab(
    slug: str | None,
    context: str,
    domain: DomainOverride | None = None,
) -> str | None:
    """Return the tab key *slug* stands for within *context*, or ``None``.

    The same slug may resolve differently (or not at all) under another
    context.
    """
    if not slug:
        return None
    if domain is not None:
        resolved = domain.resolve_tab(context, slug)
        if resolved:
            return resolved
    return _TAB_LOOKUP.get(context, {}).get(normalize(slug))
