"""Two-phase declaration protocol for translatable entities.

Phase 1 (declare) extracts the options and registers the metadata.
Phase 2 (finalize) validates the metadata against the entity's final fields
and marks the type usable. The embedding code decides when phase 2 runs; the
translatable_entity() class decorator runs both phases once the class body
(and any decorators below it, such as @dataclass) has been applied.

    >>> @translatable_entity(translates=["title", "body"], default_locale="en")
    ... @dataclass
    ... class Article:
    ...     title: str
    ...     body: str
    ...     translations: dict = field(default_factory=dict)

Lifecycle:
    UNDECLARED --declare--> REGISTERED --finalize--> USABLE
                            REGISTERED --finalize (DefinitionError)--> INVALID

Python 3.13+.
"""

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from .constants import (
    DEFAULT_CONTAINER,
    DEFAULT_LOCALE,
    OPTION_CONTAINER,
    OPTION_DEFAULT_LOCALE,
    OPTION_TRANSLATES,
)
from .diagnostics import DefinitionError, ErrorTemplate, UsageError
from .enums import EntityState
from .metadata import TranslationMetadata, extract_metadata
from .registry import MetadataRegistry, get_default_registry
from .shape import entity_name
from .validation import validate_entity

__all__ = ["declare", "finalize", "translatable_entity"]

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

# Marks an omitted 'translates' so extraction reports it as missing.
_OMITTED: object = object()


def declare(
    entity_type: type,
    /,
    *,
    registry: MetadataRegistry | None = None,
    **options: object,
) -> TranslationMetadata:
    """Declare translation metadata for an entity type (phase 1).

    Args:
        entity_type: The entity class [positional-only]
        registry: Target registry (default: process-wide registry)
        **options: translates (required), container, default_locale

    Returns:
        The registered TranslationMetadata

    Raises:
        ConfigurationError: If the options are malformed or the type was
            already declared. Nothing is registered in that case.
    """
    registry = registry if registry is not None else get_default_registry()
    metadata = extract_metadata(options, entity_type=entity_type)
    registry.register(entity_type, metadata)
    return metadata


def finalize(entity_type: T, /, *, registry: MetadataRegistry | None = None) -> T:
    """Validate a declared entity type and mark it usable (phase 2).

    Call once the entity's fields are final. Finalizing an already usable
    type is a no-op.

    Args:
        entity_type: A declared entity class [positional-only]
        registry: Registry holding the metadata (default: process-wide registry)

    Returns:
        The entity type, for use as the last step of a class decorator

    Raises:
        DefinitionError: If the metadata does not match the entity's fields.
            The type is marked INVALID before the error propagates.
        UsageError: If the type was never declared, or already failed
            validation
    """
    registry = registry if registry is not None else get_default_registry()
    name = entity_name(entity_type)

    match registry.state(entity_type):
        case EntityState.USABLE:
            return entity_type
        case EntityState.INVALID:
            raise UsageError(ErrorTemplate.entity_invalid(name), entity_type=entity_type)
        case EntityState.UNDECLARED:
            raise UsageError(ErrorTemplate.not_declared(name), entity_type=entity_type)
        case EntityState.REGISTERED:
            pass

    try:
        validate_entity(entity_type, registry=registry)
    except DefinitionError as e:
        registry.mark_invalid(entity_type)
        logger.error("Invalid translation metadata for %r: %s", name, e.diagnostic or e)
        raise

    registry.mark_usable(entity_type)
    logger.info("Entity %r is translatable: %s", name, registry.fields(entity_type))
    return entity_type


def translatable_entity(
    *,
    translates: Sequence[str] = _OMITTED,  # type: ignore[assignment]
    container: str = DEFAULT_CONTAINER,
    default_locale: str | None = DEFAULT_LOCALE,
    registry: MetadataRegistry | None = None,
) -> Callable[[T], T]:
    """Class decorator that declares and finalizes an entity type.

    Apply it above @dataclass (or any decorator that shapes the class) so the
    entity's fields are final when validation runs.

    Args:
        translates: Translatable field names (required)
        container: Field holding the translations (default: "translations")
        default_locale: Locale of the untranslated fields (default: None)
        registry: Target registry (default: process-wide registry)

    Returns:
        Decorator returning the class unchanged

    Raises:
        ConfigurationError: At class definition, for malformed options
        DefinitionError: At class definition, for options that do not match
            the entity's fields
    """
    options: dict[str, object] = {
        OPTION_CONTAINER: container,
        OPTION_DEFAULT_LOCALE: default_locale,
    }
    if translates is not _OMITTED:
        options[OPTION_TRANSLATES] = translates

    def decorator(entity_type: T) -> T:
        declare(entity_type, registry=registry, **options)
        return finalize(entity_type, registry=registry)

    return decorator
