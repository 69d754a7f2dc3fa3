"""Runtime reflection over entity translation metadata.

Lets translators, query builders and other collaborators ask about an
entity's translation metadata without re-reading its declaration:

    fields(Article)                  -> ('title', 'body')
    container(Article)               -> 'translations'
    default_locale(Article)          -> 'en'
    is_translatable(Article, "title") -> True

Every function accepts either the entity type or an instance of it.

Python 3.13+.
"""

import dataclasses

from .diagnostics import ErrorTemplate, UsageError
from .enums import EntityState
from .registry import MetadataRegistry, get_default_registry
from .shape import entity_name, resolve_entity_type

__all__ = [
    "container",
    "default_locale",
    "fields",
    "is_translatable",
]


def _registry(registry: MetadataRegistry | None) -> MetadataRegistry:
    return registry if registry is not None else get_default_registry()


def _normalize_field(field: object) -> str:
    """Reduce a field reference to its plain name.

    Accepts a field name (str, including StrEnum members) or a
    dataclasses.Field.
    """
    match field:
        case str():
            return str(field)
        case dataclasses.Field():
            return field.name
        case _:
            msg = f"Field must be a str or dataclasses.Field, got {type(field).__name__}"
            raise TypeError(msg)


def fields(
    type_or_instance: object, *, registry: MetadataRegistry | None = None
) -> tuple[str, ...]:
    """Get the translatable field names of an entity.

    Args:
        type_or_instance: Entity type or instance
        registry: Registry to read (default: process-wide registry)

    Returns:
        Translatable field names, in declaration order

    Raises:
        UsageError: If the entity type never declared translation metadata
    """
    return _registry(registry).fields(resolve_entity_type(type_or_instance))


def container(
    type_or_instance: object, *, registry: MetadataRegistry | None = None
) -> str:
    """Get the name of the field holding an entity's translations.

    Raises:
        UsageError: If the entity type never declared translation metadata
    """
    return _registry(registry).container(resolve_entity_type(type_or_instance))


def default_locale(
    type_or_instance: object, *, registry: MetadataRegistry | None = None
) -> str | None:
    """Get the declared default locale of an entity, or None.

    Raises:
        UsageError: If the entity type never declared translation metadata
    """
    return _registry(registry).default_locale(resolve_entity_type(type_or_instance))


def is_translatable(
    type_or_instance: object,
    field: object,
    *,
    registry: MetadataRegistry | None = None,
) -> bool:
    """Check whether a field is translatable on an entity.

    The entity is checked before the field argument, so an undeclared type
    is reported even when the field reference is itself unusable.

    Args:
        type_or_instance: Entity type or instance
        field: Field name (str) or dataclasses.Field
        registry: Registry to read (default: process-wide registry)

    Returns:
        True if the field is one of the entity's translatable fields

    Raises:
        UsageError: If the entity type never declared translation metadata,
            or its declaration failed validation
        TypeError: If field is neither a str nor a dataclasses.Field

    Example:
        >>> is_translatable(Article, "title")
        True
        >>> is_translatable(Article(title="Hi", body=""), "not_existing")
        False
        >>> is_translatable(dict, "title")
        Traceback (most recent call last):
        embedtrans.diagnostics.errors.UsageError: error[NOT_DECLARED]: dict must declare ...
    """
    reg = _registry(registry)
    entity_type = resolve_entity_type(type_or_instance)

    entry = reg.lookup(entity_type)
    if entry is None:
        raise UsageError(
            ErrorTemplate.not_declared(entity_name(entity_type)),
            entity_type=entity_type,
        )
    if entry.state is EntityState.INVALID:
        raise UsageError(
            ErrorTemplate.entity_invalid(entity_name(entity_type)),
            entity_type=entity_type,
        )

    return _normalize_field(field) in entry.metadata.translatable_fields
