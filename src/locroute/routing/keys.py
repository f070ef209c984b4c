"""Semantic keys for the closed vocabularies used in URLs.

Members are ``StrEnum`` so they compare equal to their plain string
values. Keys introduced by a domain override arrive as plain strings and
flow through the same functions.
"""

from enum import StrEnum


class Category(StrEnum):
    """Kinds of tracked entities, each with its own listing page."""

    COMPANY = "company"
    SUPPLIER = "supplier"
    CUSTOMER = "customer"
    PRODUCT = "product"
    FACILITY = "facility"
    EQUIPMENT = "equipment"
    VEHICLE = "vehicle"
    PERSON = "person"
    OTHER_ASSET = "other_asset"


class Segment(StrEnum):
    """Fixed first-segment keywords."""

    CONTROL_PANEL = "control_panel"
    DASHBOARD = "dashboard"
    AFFAIR = "affair"
    RENEWAL = "renewal"


class TabContext(StrEnum):
    """Parent namespace a tab key belongs to."""

    ASSET = "asset"
    AFFAIR = "affair"
    RENEWAL = "renewal"


class AssetTab(StrEnum):
    INFO = "info"
    REGULATORY = "regulatory"
    DOSSIER = "dossier"
    RELATIONS = "relations"


class AffairTab(StrEnum):
    INFO = "info"
    RENEWALS = "renewals"


class RenewalTab(StrEnum):
    INFO = "info"
    ATTACHMENTS = "attachments"


class RouteKind(StrEnum):
    """Discriminant of a route descriptor."""

    HOME = "home"
    CONTROL_PANEL = "control_panel"
    DASHBOARD = "dashboard"
    CATEGORY = "category"
    ASSET = "asset"
    AFFAIR = "affair"
    RENEWAL = "renewal"
