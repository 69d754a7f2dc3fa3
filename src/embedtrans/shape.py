"""Entity shape discovery.

Answers the single question the validator needs about an entity type:
"what are your declared field names?". Resolution order:

    1. __entity_fields__   explicit hook for framework integrations
                           (iterable of names, or a callable returning one;
                           a bare string is rejected)
    2. dataclasses         dataclasses.fields() names
    3. namedtuples         _fields
    4. annotated classes   annotations across the MRO plus __slots__ names

Only the type is inspected. Instances are never created or read.

Python 3.13+. Zero external dependencies.
"""

import dataclasses
import inspect
import typing
from collections.abc import Iterable

from .diagnostics import DefinitionError, ErrorTemplate

__all__ = [
    "entity_fields",
    "entity_name",
    "resolve_entity_type",
]

_CLASSVAR_PREFIXES = ("ClassVar", "typing.ClassVar", "t.ClassVar")


def entity_name(entity_type: type) -> str:
    """Qualified name used to identify an entity type in messages.

    Example:
        >>> entity_name(dict)
        'dict'
    """
    module = getattr(entity_type, "__module__", None)
    qualname = getattr(entity_type, "__qualname__", repr(entity_type))
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


def resolve_entity_type(type_or_instance: object) -> type:
    """Return the type itself, or the type of an instance."""
    if isinstance(type_or_instance, type):
        return type_or_instance
    return type(type_or_instance)


def _is_classvar(annotation: object) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(_CLASSVAR_PREFIXES)
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _annotated_fields(entity_type: type) -> set[str]:
    names: set[str] = set()
    for klass in reversed(entity_type.__mro__):
        if klass is object:
            continue
        for name, annotation in inspect.get_annotations(klass).items():
            if not _is_classvar(annotation):
                names.add(name)
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(slot for slot in slots if slot not in ("__dict__", "__weakref__"))
    return names


def entity_fields(entity_type: type) -> frozenset[str]:
    """Get the declared field names of an entity type.

    Args:
        entity_type: Entity class (dataclass, NamedTuple, annotated class, or
            a class defining __entity_fields__)

    Returns:
        Frozen set of field names

    Raises:
        DefinitionError: If the type exposes no discoverable fields

    Example:
        >>> @dataclasses.dataclass
        ... class Article:
        ...     title: str
        ...     translations: dict
        >>> sorted(entity_fields(Article))
        ['title', 'translations']
    """
    declared = getattr(entity_type, "__entity_fields__", None)
    if declared is not None:
        if callable(declared):
            declared = declared()
        # A bare string would otherwise iterate as single characters.
        if isinstance(declared, str | bytes | bytearray):
            raise DefinitionError(
                ErrorTemplate.shape_unavailable(entity_name(entity_type)),
                entity_type=entity_type,
            )
        return frozenset(typing.cast(Iterable[str], declared))

    if dataclasses.is_dataclass(entity_type):
        return frozenset(f.name for f in dataclasses.fields(entity_type))

    namedtuple_fields = getattr(entity_type, "_fields", None)
    if issubclass(entity_type, tuple) and isinstance(namedtuple_fields, tuple):
        return frozenset(namedtuple_fields)

    names = _annotated_fields(entity_type)
    if not names:
        raise DefinitionError(
            ErrorTemplate.shape_unavailable(entity_name(entity_type)),
            entity_type=entity_type,
        )
    return frozenset(names)
