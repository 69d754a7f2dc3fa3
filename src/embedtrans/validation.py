"""Definition-time validation of translation metadata.

Checks a registered entity type's metadata against the entity's own fields.
Runs once per type, after the type's fields are final and its metadata has
been registered, and before the type is used.

Architecture:
    - validate_entity(): Main entry point, runs both checks in order
    - _check_translatable_fields(): Pass 1 - every translatable field exists
    - _check_container(): Pass 2 - the translations container field exists

Only the type's declared fields are read; no instance is created or
inspected.

Python 3.13+.
"""

import logging

from .diagnostics import DefinitionError, ErrorTemplate
from .metadata import TranslationMetadata
from .registry import MetadataRegistry, get_default_registry
from .shape import entity_fields, entity_name

__all__ = ["validate_entity"]

logger = logging.getLogger(__name__)


def _check_translatable_fields(
    entity_type: type, metadata: TranslationMetadata, shape: frozenset[str]
) -> None:
    """Raise if any translatable field is missing from the entity's fields.

    Offending fields are reported once each, in declaration order.
    """
    undefined = tuple(
        dict.fromkeys(f for f in metadata.translatable_fields if f not in shape)
    )
    if undefined:
        raise DefinitionError(
            ErrorTemplate.translatable_fields_undefined(
                entity_name(entity_type), undefined
            ),
            entity_type=entity_type,
            fields=undefined,
        )


def _check_container(
    entity_type: type, metadata: TranslationMetadata, shape: frozenset[str]
) -> None:
    """Raise if the translations container is missing from the entity's fields."""
    container = metadata.container_field
    if not isinstance(container, str) or container not in shape:
        raise DefinitionError(
            ErrorTemplate.container_undefined(entity_name(entity_type), str(container)),
            entity_type=entity_type,
            fields=(str(container),),
        )


def validate_entity(
    entity_type: type, *, registry: MetadataRegistry | None = None
) -> None:
    """Validate registered translation metadata against the entity's fields.

    Does not change the entity's lifecycle state; see
    embedtrans.declaration.finalize() for the state transition.

    Args:
        entity_type: Entity type whose metadata is registered
        registry: Registry holding the metadata (default: process-wide registry)

    Raises:
        DefinitionError: If a translatable field or the container field is not
            one of the entity's fields, or the fields cannot be determined
        UsageError: If the type has no registered metadata

    Example:
        >>> @dataclass
        ... class Article:
        ...     title: str
        ...     translations: dict
        >>> declare(Article, translates=["title"])
        >>> validate_entity(Article)  # passes silently
    """
    registry = registry if registry is not None else get_default_registry()
    metadata = registry.metadata(entity_type)
    shape = entity_fields(entity_type)

    _check_translatable_fields(entity_type, metadata, shape)
    _check_container(entity_type, metadata, shape)

    logger.debug(
        "Validated translation metadata for %r against %d fields",
        entity_name(entity_type),
        len(shape),
    )
