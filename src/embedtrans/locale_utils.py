"""Locale utilities for declared default locales.

Declarations accept any locale identifier and never validate it. These
helpers are for collaborators (translators, query builders) that need a
Babel Locale for an entity's declared default locale.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from .constants import MAX_LOCALE_CACHE_SIZE
from .reflection import default_locale

if TYPE_CHECKING:
    from babel import Locale

    from .registry import MetadataRegistry

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_default_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the get_babel_locale() cache."""
    get_babel_locale.cache_clear()


def get_default_babel_locale(
    type_or_instance: object, *, registry: MetadataRegistry | None = None
) -> Locale | None:
    """Get the Babel Locale of an entity's declared default locale.

    Args:
        type_or_instance: Declared entity type or instance
        registry: Registry to read (default: process-wide registry)

    Returns:
        Babel Locale, or None when the entity declares no default locale

    Raises:
        UsageError: If the entity type never declared translation metadata
        babel.core.UnknownLocaleError: If the declared locale is unknown to CLDR
    """
    code = default_locale(type_or_instance, registry=registry)
    if code is None:
        return None
    return get_babel_locale(str(code))
