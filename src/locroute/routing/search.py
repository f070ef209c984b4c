"""Navigation targets for search results.

Search hits point at entities rather than pages; this module picks the
page (and tab) a hit should open.
"""

from dataclasses import dataclass

from locroute.i18n import DEFAULT_LANGUAGE
from locroute.routing.domain import DomainOverride
from locroute.routing.keys import AffairTab, AssetTab, RenewalTab
from locroute.routing.route import AffairRoute, AssetRoute, RenewalRoute, RouteDescriptor, SlugRef
from locroute.routing.router import build_pathname


@dataclass(frozen=True, slots=True)
class SearchHit:
    """A single search result.

    Attributes:
        entity_type: ``"asset"``, ``"affair"``, ``"renewal"`` or ``"attachment"``.
        id: Id of the matched entity.
        category: Category key, for assets.
        renewal_id: Owning renewal, for attachments.
        asset_id: Owning asset, for attachments.
        asset_category: Category of the owning asset, for attachments.
    """

    entity_type: str
    id: str
    category: str | None = None
    renewal_id: str | None = None
    asset_id: str | None = None
    asset_category: str | None = None


def route_for_search_hit(hit: SearchHit | None) -> RouteDescriptor | None:
    """Return the route a search hit opens, or ``None`` if it has no page.

    A hit without an id has no page. Attachments open their renewal's attachments tab when they belong to
    a renewal, otherwise their asset's dossier tab.
    """
    if hit is None:
        return None

    match hit.entity_type:
        case "asset":
            if not hit.category or not hit.id:
                return None
            return AssetRoute(category=hit.category, asset_id=hit.id, tab=SlugRef(key=AssetTab.INFO))
        case "affair":
            if not hit.id:
                return None
            return AffairRoute(affair_id=hit.id, tab=SlugRef(key=AffairTab.INFO))
        case "renewal":
            if not hit.id:
                return None
            return RenewalRoute(renewal_id=hit.id, tab=SlugRef(key=RenewalTab.INFO))
        case "attachment":
            if hit.renewal_id:
                return RenewalRoute(
                    renewal_id=hit.renewal_id,
                    tab=SlugRef(key=RenewalTab.ATTACHMENTS),
                )
            if hit.asset_id and hit.asset_category:
                return AssetRoute(
                    category=hit.asset_category,
                    asset_id=hit.asset_id,
                    tab=SlugRef(key=AssetTab.DOSSIER),
                )
            return None
        case _:
            return None


def path_for_search_hit(
    hit: SearchHit | None,
    language: str = DEFAULT_LANGUAGE,
    domain: DomainOverride | None = None,
) -> str | None:
    route = route_for_search_hit(hit)
    if route is None:
        return None
    return build_pathname(route, language, domain)
