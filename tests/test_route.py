"""Tests for locroute.routing.route — route descriptors and SlugRef equality."""

import dataclasses

import pytest

from locroute.routing.keys import AssetTab, RouteKind
from locroute.routing.route import (
    AffairRoute,
    AssetRoute,
    CategoryRoute,
    ControlPanelRoute,
    DashboardRoute,
    HomeRoute,
    RenewalRoute,
    SlugRef,
)


class TestSlugRef:
    def test_resolved_refs_compare_by_key(self) -> None:
        assert SlugRef(key="info", slug="informacion") == SlugRef(key="info", slug="info")

    def test_unresolved_refs_compare_by_slug(self) -> None:
        assert SlugRef(slug="unknown-tab") == SlugRef(slug="unknown-tab")
        assert SlugRef(slug="unknown-tab") != SlugRef(slug="other-tab")

    def test_resolved_never_equals_unresolved(self) -> None:
        assert SlugRef(key="info", slug="info") != SlugRef(slug="info")

    def test_enum_key_equals_string_key(self) -> None:
        assert SlugRef(key=AssetTab.INFO) == SlugRef(key="info", slug="informacion")

    def test_hash_consistent_with_eq(self) -> None:
        assert hash(SlugRef(key="info", slug="informacion")) == hash(SlugRef(key=AssetTab.INFO))
        assert len({SlugRef(slug="x"), SlugRef(slug="x")}) == 1

    def test_resolved_property(self) -> None:
        assert SlugRef(key="info").resolved is True
        assert SlugRef(slug="raw").resolved is False

    def test_not_equal_to_other_types(self) -> None:
        assert SlugRef(key="info") != "info"


class TestDescriptors:
    @pytest.mark.parametrize(
        ("route", "kind"),
        [
            (HomeRoute(), RouteKind.HOME),
            (ControlPanelRoute(), RouteKind.CONTROL_PANEL),
            (DashboardRoute(), RouteKind.DASHBOARD),
            (CategoryRoute(category="company"), RouteKind.CATEGORY),
            (AssetRoute(category="company", asset_id="A-1"), RouteKind.ASSET),
            (AffairRoute(affair_id="RA-1"), RouteKind.AFFAIR),
            (RenewalRoute(renewal_id="RN-1"), RouteKind.RENEWAL),
        ],
    )
    def test_kind(self, route: object, kind: RouteKind) -> None:
        assert route.kind is kind  # type: ignore[attr-defined]

    def test_optional_parameters_default_to_none(self) -> None:
        route = AssetRoute(category="company", asset_id="A-1")
        assert route.tab is None
        assert route.related_category is None

    def test_frozen(self) -> None:
        route = AffairRoute(affair_id="RA-1")
        with pytest.raises(AttributeError):
            route.affair_id = "RA-2"  # type: ignore[misc]

    def test_equal_across_tab_languages(self) -> None:
        spanish = AssetRoute("company", "A-1", tab=SlugRef(key="info", slug="informacion"))
        english = AssetRoute("company", "A-1", tab=SlugRef(key="info", slug="info"))
        assert spanish == english
        assert hash(spanish) == hash(english)

    def test_kind_is_not_a_field(self) -> None:
        assert [f.name for f in dataclasses.fields(CategoryRoute)] == ["category"]


class TestValidation:
    @pytest.mark.parametrize("kwargs", [{}, {"slug": ""}, {"key": None, "slug": None}])
    def test_empty_slug_ref_rejected(self, kwargs: dict[str, str | None]) -> None:
        with pytest.raises(ValueError, match="key or a non-empty slug"):
            SlugRef(**kwargs)

    def test_key_without_slug_allowed(self) -> None:
        assert SlugRef(key="info").slug is None

    @pytest.mark.parametrize(
        "build",
        [
            lambda: CategoryRoute(category=""),
            lambda: AssetRoute(category="company", asset_id=""),
            lambda: AssetRoute(category="", asset_id="A-1"),
            lambda: AffairRoute(affair_id=""),
            lambda: RenewalRoute(renewal_id=""),
        ],
    )
    def test_empty_id_rejected(self, build) -> None:
        with pytest.raises(ValueError, match="non-empty path segment"):
            build()

    @pytest.mark.parametrize(
        "build",
        [
            lambda: AssetRoute(category="company", asset_id="A/1"),
            lambda: AffairRoute(affair_id="RA-1/info"),
            lambda: RenewalRoute(renewal_id="/RN-1"),
        ],
    )
    def test_id_with_slash_rejected(self, build) -> None:
        with pytest.raises(ValueError, match="without '/'"):
            build()
