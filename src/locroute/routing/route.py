"""Route descriptors — the structured form of "which page is this".

One frozen dataclass per route shape. Each carries exactly the
parameters its shape needs; optional trailing parameters are ``None``
when absent, never an empty string. Ids and categories must be
non-empty single path segments; construction raises ``ValueError``
otherwise.
"""

from dataclasses import dataclass
from typing import ClassVar

from locroute.routing.keys import RouteKind


def _require_segment(value: object, name: str) -> None:
    """Reject values that cannot stand as a single path segment."""
    if not isinstance(value, str) or not value or "/" in value:
        msg = f"{name} must be a non-empty path segment without '/', got {value!r}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True, eq=False)
class SlugRef:
    """A trailing path segment that may or may not resolve to a key.

    ``key`` is the resolved semantic key, ``slug`` the text as it
    appeared in the path. At least one of the two is set; a ref with
    neither (or with only an empty slug) raises ``ValueError``.

    Two refs are equal when both resolved to the same key (whatever
    language their slugs were in), or when neither resolved and the raw
    slugs match.
    """

    key: str | None = None
    slug: str | None = None

    def __post_init__(self) -> None:
        if self.key is None and not self.slug:
            msg = "SlugRef needs a key or a non-empty slug"
            raise ValueError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlugRef):
            return NotImplemented
        if self.key is not None or other.key is not None:
            return self.key == other.key
        return self.slug == other.slug

    def __hash__(self) -> int:
        if self.key is not None:
            return hash(("key", str(self.key)))
        return hash(("slug", self.slug))

    @property
    def resolved(self) -> bool:
        return self.key is not None


@dataclass(frozen=True, slots=True)
class HomeRoute:
    kind: ClassVar[RouteKind] = RouteKind.HOME


@dataclass(frozen=True, slots=True)
class ControlPanelRoute:
    kind: ClassVar[RouteKind] = RouteKind.CONTROL_PANEL


@dataclass(frozen=True, slots=True)
class DashboardRoute:
    kind: ClassVar[RouteKind] = RouteKind.DASHBOARD


@dataclass(frozen=True, slots=True)
class CategoryRoute:
    """Listing page for one category of tracked entity."""

    kind: ClassVar[RouteKind] = RouteKind.CATEGORY

    category: str

    def __post_init__(self) -> None:
        _require_segment(self.category, "category")


@dataclass(frozen=True, slots=True)
class AssetRoute:
    """A tracked entity, optionally on a tab and filtered by a related category.

    ``asset_id`` is taken verbatim from the path and never resolved
    against any slug table.
    """

    kind: ClassVar[RouteKind] = RouteKind.ASSET

    category: str
    asset_id: str
    tab: SlugRef | None = None
    related_category: SlugRef | None = None

    def __post_init__(self) -> None:
        _require_segment(self.category, "category")
        _require_segment(self.asset_id, "asset_id")


@dataclass(frozen=True, slots=True)
class AffairRoute:
    kind: ClassVar[RouteKind] = RouteKind.AFFAIR

    affair_id: str
    tab: SlugRef | None = None

    def __post_init__(self) -> None:
        _require_segment(self.affair_id, "affair_id")


@dataclass(frozen=True, slots=True)
class RenewalRoute:
    kind: ClassVar[RouteKind] = RouteKind.RENEWAL

    renewal_id: str
    tab: SlugRef | None = None

    def __post_init__(self) -> None:
        _require_segment(self.renewal_id, "renewal_id")


type RouteDescriptor = (
    HomeRoute
    | ControlPanelRoute
    | DashboardRoute
    | CategoryRoute
    | AssetRoute
    | AffairRoute
    | RenewalRoute
)
