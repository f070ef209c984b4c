"""locroute — localized URL paths for the records dashboard.

Converts between route descriptors ("which page, with what parameters")
and the path strings shown in the address bar, in Spanish and English,
with optional per-deployment vocabulary overrides.

Basic usage::

    from locroute import build_pathname, parse_pathname

    route = parse_pathname("/empresas/AFF-001/informacion")
    build_pathname(route, "en")   # "/company/AFF-001/info"

With a deployment's own vocabulary::

    from locroute import DomainOverride, translate_pathname

    domain = DomainOverride.from_mapping(domain_config)
    translate_pathname("/empresa/AFF-001", "en", domain)
"""

__version__ = "0.1.0"

# Public name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    # routing.router
    "LocalizedRouter": "locroute.routing.router",
    "build_pathname": "locroute.routing.router",
    "is_control_panel_path": "locroute.routing.router",
    "is_dashboard_path": "locroute.routing.router",
    "parse_pathname": "locroute.routing.router",
    "translate_pathname": "locroute.routing.router",
    # routing.slugs
    "category_slug": "locroute.routing.slugs",
    "normalize": "locroute.routing.slugs",
    "resolve_category": "locroute.routing.slugs",
    "resolve_route_segment": "locroute.routing.slugs",
    "resolve_tab": "locroute.routing.slugs",
    "route_segment": "locroute.routing.slugs",
    "tab_slug": "locroute.routing.slugs",
    # routing.route
    "AffairRoute": "locroute.routing.route",
    "AssetRoute": "locroute.routing.route",
    "CategoryRoute": "locroute.routing.route",
    "ControlPanelRoute": "locroute.routing.route",
    "DashboardRoute": "locroute.routing.route",
    "HomeRoute": "locroute.routing.route",
    "RenewalRoute": "locroute.routing.route",
    "SlugRef": "locroute.routing.route",
    # routing.keys
    "RouteKind": "locroute.routing.keys",
    # routing.domain
    "DomainOverride": "locroute.routing.domain",
    # routing.search
    "SearchHit": "locroute.routing.search",
    "path_for_search_hit": "locroute.routing.search",
    # config, i18n, errors
    "RoutingConfig": "locroute.config",
    "DEFAULT_LANGUAGE": "locroute.i18n",
    "ConfigurationError": "locroute.errors",
    "LocrouteError": "locroute.errors",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import locroute`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
