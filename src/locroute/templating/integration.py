"""Kida environment setup.

Binds the localized path filters and globals onto a kida Environment,
either a fresh one or one the application already owns.
"""

from typing import Any

from kida import Environment

from locroute.config import RoutingConfig
from locroute.templating.filters import routing_filters, routing_globals


def register_routing(env: Environment, config: RoutingConfig | None = None) -> Environment:
    """Register the path filters and globals on an existing environment."""
    env.update_filters(routing_filters(config))

    for name, value in routing_globals(config).items():
        env.add_global(name, value)

    return env


def create_environment(
    config: RoutingConfig | None = None,
    loader: Any | None = None,
    *,
    autoescape: bool = True,
) -> Environment:
    """Create a kida Environment with the path filters registered.

    Without a *loader* the environment only renders ``from_string``
    templates.
    """
    options: dict[str, Any] = {"autoescape": autoescape}
    if loader is not None:
        options["loader"] = loader
    return register_routing(Environment(**options), config)
