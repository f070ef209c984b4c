"""Per-deployment overrides of the URL vocabulary.

A deployment ("domain") may rename any segment, category or tab slug.
Overrides are a pure overlay: an entry present here shadows the static
tables entry-for-entry, an absent entry falls through to them.

Expected shape, as found in a domain configuration::

    {
        "routing": {
            "segments": {"company": {"en": "company", "es": "empresa"}},
            "tabRoutes": {"asset": {"info": {"en": "info", "es": "info"}}},
        }
    }
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from locroute.errors import ConfigurationError
from locroute.i18n import DEFAULT_LANGUAGE
from locroute.routing.slugs import normalize

logger = logging.getLogger("locroute.routing")

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _reverse(table: Mapping[str, Mapping[str, str]]) -> Mapping[str, str]:
    """Map every normalized slug in *table* back to its key.

    The first key declaring a slug wins.
    """
    lookup: dict[str, str] = {}
    for key, translations in table.items():
        for slug in (translations or {}).values():
            if slug:
                lookup.setdefault(normalize(slug), key)
    return MappingProxyType(lookup)


def _reverse_all(table: Mapping[str, Mapping[str, str]]) -> Mapping[str, tuple[str, ...]]:
    """Map every normalized slug in *table* to all keys declaring it, in order."""
    lookup: dict[str, list[str]] = {}
    for key, translations in table.items():
        for slug in (translations or {}).values():
            if not slug:
                continue
            keys = lookup.setdefault(normalize(slug), [])
            if key not in keys:
                keys.append(key)
    return MappingProxyType({slug: tuple(keys) for slug, keys in lookup.items()})


@dataclass(frozen=True, slots=True, eq=False)
class DomainOverride:
    """Deployment-specific slug choices.

    Attributes:
        segments: key -> language -> slug. Shared by categories and
            fixed route segments, as deployments declare them together.
        tab_routes: context -> tab key -> language -> slug.
    """

    segments: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    tab_routes: Mapping[str, Mapping[str, Mapping[str, str]]] = field(default_factory=dict)
    _segment_lookup: Mapping[str, tuple[str, ...]] = field(init=False, repr=False)
    _tab_lookup: Mapping[str, Mapping[str, str]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_segment_lookup", _reverse_all(self.segments))
        object.__setattr__(
            self,
            "_tab_lookup",
            MappingProxyType(
                {context: _reverse(tabs or {}) for context, tabs in self.tab_routes.items()}
            ),
        )

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any] | None) -> "DomainOverride":
        """Build an override from a domain configuration mapping.

        Accepts either the full domain configuration (with a ``routing``
        key) or the routing block itself. Missing levels mean "no
        override". Raises ``ConfigurationError`` on a malformed level.
        """
        if config is None:
            return cls()
        _require_mapping(config, "domain")
        routing = config["routing"] if "routing" in config else config
        if routing is None:
            return cls()
        _require_mapping(routing, "routing")

        tab_routes = routing.get("tabRoutes", routing.get("tab_routes"))
        override = cls(
            segments=_slug_table(routing.get("segments"), "routing.segments", depth=2),
            tab_routes=_slug_table(tab_routes, "routing.tabRoutes", depth=3),
        )
        logger.debug(
            "Loaded domain override: %d segments, %d tab contexts",
            len(override.segments),
            len(override.tab_routes),
        )
        return override

    def segment(self, key: str, language: str = DEFAULT_LANGUAGE) -> str | None:
        """Return the override slug for a segment or category key, if any."""
        translations = self.segments.get(key)
        if not translations:
            return None
        return translations.get(language) or translations.get(DEFAULT_LANGUAGE) or None

    def tab(self, context: str, key: str, language: str = DEFAULT_LANGUAGE) -> str | None:
        """Return the override slug for a tab key within *context*, if any."""
        translations = (self.tab_routes.get(context) or _EMPTY).get(key)
        if not translations:
            return None
        return translations.get(language) or translations.get(DEFAULT_LANGUAGE) or None

    def resolve_segment(
        self,
        slug: str | None,
        accept: Callable[[str], bool] | None = None,
    ) -> str | None:
        """Return the first key declaring *slug*, optionally limited by *accept*.

        ``segments`` mixes categories and fixed segments, so callers pass
        *accept* to stay within their own key family.
        """
        for key in self._segment_lookup.get(normalize(slug), ()):
            if accept is None or accept(key):
                return key
        return None

    def resolve_tab(self, context: str, slug: str | None) -> str | None:
        return (self._tab_lookup.get(context) or _EMPTY).get(normalize(slug))


def _require_mapping(value: object, path: str) -> None:
    if not isinstance(value, Mapping):
        msg = f"{path} must be a mapping, got {type(value).__name__}"
        raise ConfigurationError(msg)


def _slug_table(value: object, path: str, *, depth: int) -> dict[str, Any]:
    """Validate a nested ``key -> ... -> slug`` table *depth* levels deep."""
    if value is None:
        return {}
    _require_mapping(value, path)
    table: dict[str, Any] = {}
    for key, item in value.items():  # type: ignore[attr-defined]
        item_path = f"{path}.{key}"
        if depth > 1:
            table[str(key)] = _slug_table(item, item_path, depth=depth - 1)
        elif item is None:
            continue
        elif isinstance(item, str):
            table[str(key)] = item
        else:
            msg = f"{item_path} must be a string slug, got {type(item).__name__}"
            raise ConfigurationError(msg)
    return table
