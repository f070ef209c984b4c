"""Tests for locroute.config — RoutingConfig frozen dataclass."""

import pytest

from locroute.config import RoutingConfig
from locroute.errors import ConfigurationError
from locroute.routing.domain import DomainOverride


class TestRoutingConfig:
    def test_defaults(self) -> None:
        cfg = RoutingConfig()

        assert cfg.language == "es"
        assert cfg.domain is None
        assert cfg.strict_language is False

    def test_override(self) -> None:
        domain = DomainOverride(segments={"company": {"es": "empresa"}})
        cfg = RoutingConfig(language="en", domain=domain)

        assert cfg.language == "en"
        assert cfg.domain is domain

    def test_frozen(self) -> None:
        cfg = RoutingConfig()

        with pytest.raises(AttributeError):
            cfg.language = "en"  # type: ignore[misc]

    def test_unsupported_language_allowed_by_default(self) -> None:
        cfg = RoutingConfig(language="fr")
        assert cfg.language == "fr"

    def test_strict_language_rejects_unsupported(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            RoutingConfig(language="fr", strict_language=True)
        assert "'fr'" in str(exc_info.value)
        assert "es, en" in str(exc_info.value)

    def test_strict_language_accepts_supported(self) -> None:
        cfg = RoutingConfig(language="en", strict_language=True)
        assert cfg.language == "en"
