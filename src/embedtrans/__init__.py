"""embedtrans - Embedded translation metadata for Python entity types.

Declares which fields of an entity type (dataclass, NamedTuple, annotated
class) are translatable, validates the declaration against the entity's own
fields when the type is defined, and answers reflection queries later.

Public API:
    translatable_entity - Class decorator: declare and validate in one step
    declare - Phase 1: extract and register translation metadata
    finalize - Phase 2: validate against the entity's fields, mark usable
    fields - Translatable field names of an entity
    container - Field holding an entity's translations
    default_locale - Declared default locale of an entity
    is_translatable - Whether a field is translatable on an entity
    TranslationMetadata - Immutable metadata record

Exceptions:
    TransError - Base exception class
    ConfigurationError - Malformed declaration options
    DefinitionError - Declaration inconsistent with the entity's fields
    UsageError - Querying a type without usable translation metadata

Submodules:
    embedtrans.registry - MetadataRegistry and the process-wide default
    embedtrans.shape - Entity field discovery
    embedtrans.diagnostics - Error types, codes and formatting
    embedtrans.locale_utils - Babel locale helpers
"""

from .declaration import declare, finalize, translatable_entity
from .diagnostics import (
    ConfigurationError,
    DefinitionError,
    TransError,
    UsageError,
)
from .enums import EntityState
from .metadata import TranslationMetadata
from .reflection import container, default_locale, fields, is_translatable

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("embedtrans")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "DefinitionError",
    "EntityState",
    "TransError",
    "TranslationMetadata",
    "UsageError",
    "__version__",
    "container",
    "declare",
    "default_locale",
    "fields",
    "finalize",
    "is_translatable",
    "translatable_entity",
]
