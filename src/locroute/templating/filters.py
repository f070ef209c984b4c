"""Localized path filters for kida templates.

Each filter is bound to a ``RoutingConfig`` so templates only pass the
language when it differs from the configured one.

Example::

    <a href="{{ request_path | translate_path("en") }}">English</a>
    <a href="{{ "company" | category_slug | prefix_slash }}">Companies</a>
"""

from collections.abc import Callable
from typing import Any

from locroute.config import RoutingConfig
from locroute.routing.route import RouteDescriptor
from locroute.routing.router import LocalizedRouter


def prefix_slash(slug: str) -> str:
    """Turn a single slug into a one-segment path.

    Example:
        {{ "dashboard" | route_segment | prefix_slash }}  → "/panel"
    """
    return "/" + slug.strip("/")


def routing_filters(config: RoutingConfig | None = None) -> dict[str, Callable[..., Any]]:
    """Return the path filters bound to *config*."""
    router = LocalizedRouter(config)

    def translate_path(pathname: str, language: str | None = None) -> str:
        return router.translate(pathname, language)

    def localized_path(route: RouteDescriptor | None, language: str | None = None) -> str:
        return router.build(route, language)

    def category_slug(category: str, language: str | None = None) -> str:
        return router.category_slug(category, language)

    def route_segment(segment: str, language: str | None = None) -> str:
        return router.route_segment(segment, language)

    def tab_slug(tab: str, context: str, language: str | None = None) -> str:
        return router.tab_slug(tab, context, language)

    return {
        "category_slug": category_slug,
        "localized_path": localized_path,
        "prefix_slash": prefix_slash,
        "route_segment": route_segment,
        "tab_slug": tab_slug,
        "translate_path": translate_path,
    }


def routing_globals(config: RoutingConfig | None = None) -> dict[str, Any]:
    """Return the path predicates bound to *config*.

    Navigation chrome uses these to hide back links and breadcrumbs on
    the dashboard and control panel.
    """
    router = LocalizedRouter(config)
    return {
        "is_control_panel_path": router.is_control_panel,
        "is_dashboard_path": router.is_dashboard,
    }
