"""Localized path parsing and building.

``parse_pathname`` and ``build_pathname`` are inverses: for every route
descriptor and language, parsing the built path yields the descriptor
back. Neither raises; an unknown page parses to ``None`` and anything
unbuildable builds ``/``.
"""

import logging

from locroute.config import RoutingConfig
from locroute.i18n import DEFAULT_LANGUAGE
from locroute.routing.domain import DomainOverride
from locroute.routing.keys import RouteKind, Segment, TabContext
from locroute.routing.route import (
    AffairRoute,
    AssetRoute,
    CategoryRoute,
    ControlPanelRoute,
    DashboardRoute,
    HomeRoute,
    RenewalRoute,
    RouteDescriptor,
    SlugRef,
)
from locroute.routing.slugs import (
    category_slug,
    resolve_category,
    resolve_route_segment,
    resolve_tab,
    route_segment,
    tab_slug,
)

logger = logging.getLogger("locroute.routing")


def split_pathname(pathname: str) -> list[str]:
    """Split a path into its non-empty segments.

    Examples::

        "/"                      -> []
        "/empresas/AFF-001/"     -> ["empresas", "AFF-001"]
        "//dashboard"            -> ["dashboard"]
    """
    return [part for part in pathname.split("/") if part]


def _tab_ref(slug: str | None, context: str, domain: DomainOverride | None) -> SlugRef | None:
    if not slug:
        return None
    key = resolve_tab(slug, context, domain)
    if key is None:
        logger.debug("Unresolved %s tab slug %r kept raw", context, slug)
    return SlugRef(key=key, slug=slug)


def _category_ref(slug: str | None, domain: DomainOverride | None) -> SlugRef | None:
    if not slug:
        return None
    key = resolve_category(slug, domain)
    if key is None:
        logger.debug("Unresolved related category slug %r kept raw", slug)
    return SlugRef(key=key, slug=slug)


def parse_pathname(pathname: str, domain: DomainOverride | None = None) -> RouteDescriptor | None:
    """Classify *pathname* into a route descriptor.

    Fixed segments are tried before categories, so a fixed keyword wins
    over a category sharing its slug. Unresolvable tab and related
    category slugs are kept raw on the descriptor.

    Returns ``None`` when the first segment names no known page, or when
    an entity root is missing its id.
    """
    segments = split_pathname(pathname)
    if not segments:
        return HomeRoute()

    first, *rest = segments

    match resolve_route_segment(first, domain):
        case Segment.CONTROL_PANEL:
            return ControlPanelRoute()
        case Segment.DASHBOARD:
            return DashboardRoute()
        case Segment.AFFAIR:
            if not rest:
                logger.debug("No affair id in %r", pathname)
                return None
            return AffairRoute(
                affair_id=rest[0],
                tab=_tab_ref(_at(rest, 1), TabContext.AFFAIR, domain),
            )
        case Segment.RENEWAL:
            if not rest:
                logger.debug("No renewal id in %r", pathname)
                return None
            return RenewalRoute(
                renewal_id=rest[0],
                tab=_tab_ref(_at(rest, 1), TabContext.RENEWAL, domain),
            )

    category = resolve_category(first, domain)
    if category is None:
        logger.debug("No route matches %r", pathname)
        return None

    if not rest:
        return CategoryRoute(category=category)

    return AssetRoute(
        category=category,
        asset_id=rest[0],
        tab=_tab_ref(_at(rest, 1), TabContext.ASSET, domain),
        related_category=_category_ref(_at(rest, 2), domain),
    )


def _at(parts: list[str], index: int) -> str | None:
    return parts[index] if index < len(parts) else None


def _tab_part(
    ref: SlugRef | None,
    context: str,
    language: str,
    domain: DomainOverride | None,
) -> str | None:
    if ref is None:
        return None
    if ref.key is not None:
        return tab_slug(ref.key, context, language, domain)
    return ref.slug or None


def _category_part(ref: SlugRef | None, language: str, domain: DomainOverride | None) -> str | None:
    if ref is None:
        return None
    if ref.key is not None:
        return category_slug(ref.key, language, domain)
    return ref.slug or None


def _join(*parts: str | None) -> str:
    return "/" + "/".join(part for part in parts if part)


def build_pathname(
    route: RouteDescriptor | None,
    language: str = DEFAULT_LANGUAGE,
    domain: DomainOverride | None = None,
) -> str:
    """Render *route* as a path in *language*. Never fails.

    A resolved tab or related category is rendered in the target
    language; an unresolved one is reproduced from its raw slug.
    """
    match route:
        case HomeRoute():
            return "/"
        case ControlPanelRoute():
            return _join(route_segment(Segment.CONTROL_PANEL, language, domain))
        case DashboardRoute():
            return _join(route_segment(Segment.DASHBOARD, language, domain))
        case CategoryRoute():
            return _join(category_slug(route.category, language, domain))
        case AssetRoute():
            return _join(
                category_slug(route.category, language, domain),
                route.asset_id,
                _tab_part(route.tab, TabContext.ASSET, language, domain),
                _category_part(route.related_category, language, domain),
            )
        case AffairRoute():
            return _join(
                route_segment(Segment.AFFAIR, language, domain),
                route.affair_id,
                _tab_part(route.tab, TabContext.AFFAIR, language, domain),
            )
        case RenewalRoute():
            return _join(
                route_segment(Segment.RENEWAL, language, domain),
                route.renewal_id,
                _tab_part(route.tab, TabContext.RENEWAL, language, domain),
            )
        case _:
            return "/"


def translate_pathname(
    pathname: str,
    target_language: str = DEFAULT_LANGUAGE,
    domain: DomainOverride | None = None,
) -> str:
    """Re-render *pathname* in *target_language*.

    Paths that do not parse come back unchanged.
    """
    route = parse_pathname(pathname, domain)
    if route is None:
        return pathname
    return build_pathname(route, target_language, domain)


def route_kind(pathname: str, domain: DomainOverride | None = None) -> RouteKind | None:
    """Return the kind of page *pathname* points at, or ``None``."""
    route = parse_pathname(pathname, domain)
    return route.kind if route is not None else None


def is_control_panel_path(pathname: str, domain: DomainOverride | None = None) -> bool:
    return route_kind(pathname, domain) is RouteKind.CONTROL_PANEL


def is_dashboard_path(pathname: str, domain: DomainOverride | None = None) -> bool:
    return route_kind(pathname, domain) is RouteKind.DASHBOARD


class LocalizedRouter:
    """Parse and build paths against one ``RoutingConfig``.

    Usage::

        router = LocalizedRouter(RoutingConfig(language="en"))
        route = router.parse("/empresas/AFF-001/informacion")
        router.build(route)             # "/company/AFF-001/info"
        router.translate("/company", "es")  # "/empresas"
    """

    __slots__ = ("_config",)

    def __init__(self, config: RoutingConfig | None = None) -> None:
        self._config = config or RoutingConfig()

    @property
    def config(self) -> RoutingConfig:
        return self._config

    @property
    def language(self) -> str:
        return self._config.language

    @property
    def domain(self) -> DomainOverride | None:
        return self._config.domain

    def parse(self, pathname: str) -> RouteDescriptor | None:
        return parse_pathname(pathname, self.domain)

    def build(self, route: RouteDescriptor | None, language: str | None = None) -> str:
        return build_pathname(route, language or self.language, self.domain)

    def translate(self, pathname: str, language: str | None = None) -> str:
        return translate_pathname(pathname, language or self.language, self.domain)

    def category_slug(self, category: str, language: str | None = None) -> str:
        return category_slug(category, language or self.language, self.domain)

    def route_segment(self, segment: str, language: str | None = None) -> str:
        return route_segment(segment, language or self.language, self.domain)

    def tab_slug(self, tab: str, context: str, language: str | None = None) -> str:
        return tab_slug(tab, context, language or self.language, self.domain)

    def is_control_panel(self, pathname: str) -> bool:
        return is_control_panel_path(pathname, self.domain)

    def is_dashboard(self, pathname: str) -> bool:
        return is_dashboard_path(pathname, self.domain)
