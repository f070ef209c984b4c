"""Domain file loading — reads a JSON domain configuration from disk.

Shared by every command that accepts ``--domain``.
"""

import json
import logging
import sys
from pathlib import Path

from locroute.errors import ConfigurationError
from locroute.routing.domain import DomainOverride

logger = logging.getLogger("locroute.cli")


def load_domain(path: str | Path | None) -> DomainOverride | None:
    """Load a ``DomainOverride`` from a JSON file.

    Returns ``None`` when *path* is ``None``.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid
            JSON, or does not have the expected routing shape.
    """
    if path is None:
        return None

    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read domain file {str(path)!r}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Domain file {str(path)!r} is not valid JSON: {exc}"
        raise ConfigurationError(msg) from exc

    logger.debug("Loaded domain file %s", path)
    return DomainOverride.from_mapping(data)


def load_domain_or_exit(path: str | Path | None) -> DomainOverride | None:
    """Load a domain file, printing the error and exiting 1 on failure."""
    try:
        return load_domain(path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
