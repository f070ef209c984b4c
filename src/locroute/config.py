"""Routing configuration.

RoutingConfig is a frozen dataclass — immutable after creation, shared
freely between threads and requests.
"""

from dataclasses import dataclass

from locroute.errors import ConfigurationError
from locroute.i18n import DEFAULT_LANGUAGE, is_supported_language, language_ids
from locroute.routing.domain import DomainOverride


@dataclass(frozen=True, slots=True, eq=False)
class RoutingConfig:
    """Language and domain defaults for building and parsing paths.

    Override what you need::

        config = RoutingConfig(
            language="en",
            domain=DomainOverride.from_mapping(domain_config),
        )
    """

    # Language paths are built in when none is given
    language: str = DEFAULT_LANGUAGE

    # Deployment-specific vocabulary (None = static tables only)
    domain: DomainOverride | None = None

    # Reject languages without a slug table instead of falling back
    strict_language: bool = False

    def __post_init__(self) -> None:
        if self.strict_language and not is_supported_language(self.language):
            supported = ", ".join(language_ids())
            msg = f"Unsupported language {self.language!r}. Supported languages: {supported}"
            raise ConfigurationError(msg)
