"""Shared constants for embedtrans.

This module provides centralized configuration constants used across the
extractor, registry, validator and reflection layers. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Declaration options: Recognized option names and their defaults
- Cache limits: Memory bounds for caching subsystems
- Naming: Package name used in user-facing messages

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Declaration options
    "OPTION_TRANSLATES",
    "OPTION_CONTAINER",
    "OPTION_DEFAULT_LOCALE",
    "RECOGNIZED_OPTIONS",
    "DEFAULT_CONTAINER",
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Naming
    "PACKAGE_NAME",
]

# ============================================================================
# DECLARATION OPTIONS
# ============================================================================

OPTION_TRANSLATES: str = "translates"
"""Required option: sequence of translatable field names."""

OPTION_CONTAINER: str = "container"
"""Optional option: name of the field holding the translations payload."""

OPTION_DEFAULT_LOCALE: str = "default_locale"
"""Optional option: locale of the entity's base (untranslated) fields."""

RECOGNIZED_OPTIONS: frozenset[str] = frozenset(
    (OPTION_TRANSLATES, OPTION_CONTAINER, OPTION_DEFAULT_LOCALE)
)

# Translations container used when a declaration does not name one.
DEFAULT_CONTAINER: str = "translations"

# No default locale unless declared. Any identifier is accepted when declared.
DEFAULT_LOCALE: None = None

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of parsed Babel Locale objects kept by get_babel_locale().
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# NAMING
# ============================================================================

PACKAGE_NAME: str = "embedtrans"
