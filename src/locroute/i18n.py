"""Supported UI languages."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Language:
    """A language the URL vocabulary is translated into."""

    id: str
    label: str
    short_label: str


LANGUAGES: tuple[Language, ...] = (
    Language(id="es", label="Español", short_label="ES"),
    Language(id="en", label="English", short_label="EN"),
)

# Every slug lookup falls back to this language before giving up.
DEFAULT_LANGUAGE = "es"


def language_ids() -> tuple[str, ...]:
    """Return the supported language ids in display order."""
    return tuple(lang.id for lang in LANGUAGES)


def is_supported_language(value: str) -> bool:
    return value in language_ids()
