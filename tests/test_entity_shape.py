"""Tests for shape.py: entity field discovery and type resolution."""

from __future__ import annotations

import dataclasses
from collections import namedtuple
from typing import ClassVar, NamedTuple

import pytest

from embedtrans.declaration import declare, finalize
from embedtrans.diagnostics import DefinitionError, DiagnosticCode
from embedtrans.enums import EntityState
from embedtrans.registry import MetadataRegistry
from embedtrans.shape import entity_fields, entity_name, resolve_entity_type


@dataclasses.dataclass
class DataclassArticle:
    title: str
    body: str
    translations: dict = dataclasses.field(default_factory=dict)
    kind: ClassVar[str] = "article"


class TupleArticle(NamedTuple):
    title: str
    translations: dict


LegacyArticle = namedtuple("LegacyArticle", ["title", "translations"])


class AnnotatedArticle:
    title: str
    translations: dict
    registry_name: ClassVar[str] = "articles"


class SlottedArticle:
    __slots__ = ("title", "translations")


class HookArticle:
    __entity_fields__ = ("title", "translations")


class CallableHookArticle:
    @classmethod
    def __entity_fields__(cls) -> list[str]:
        return ["title", "translations"]


class Bare:
    pass


class TestEntityFields:
    """entity_fields() across supported entity kinds."""

    def test_dataclass(self) -> None:
        """Dataclass fields are read with dataclasses.fields(); ClassVar excluded."""
        assert entity_fields(DataclassArticle) == {"title", "body", "translations"}

    def test_dataclass_subclass_includes_inherited(self) -> None:
        """Inherited dataclass fields belong to the subclass shape."""

        @dataclasses.dataclass
        class Child(DataclassArticle):
            slug: str = ""

        assert entity_fields(Child) == {"title", "body", "translations", "slug"}

    def test_typing_namedtuple(self) -> None:
        """NamedTuple fields come from _fields."""
        assert entity_fields(TupleArticle) == {"title", "translations"}

    def test_collections_namedtuple(self) -> None:
        """collections.namedtuple fields come from _fields."""
        assert entity_fields(LegacyArticle) == {"title", "translations"}

    def test_annotated_class(self) -> None:
        """Plain annotated classes contribute annotations, minus ClassVar."""
        assert entity_fields(AnnotatedArticle) == {"title", "translations"}

    def test_annotated_class_inherits_annotations(self) -> None:
        """Annotations of base classes are part of the shape."""

        class Child(AnnotatedArticle):
            slug: str

        assert entity_fields(Child) == {"title", "translations", "slug"}

    def test_slotted_class(self) -> None:
        """__slots__ names are fields."""
        assert entity_fields(SlottedArticle) == {"title", "translations"}

    def test_hook_iterable(self) -> None:
        """__entity_fields__ given as an iterable wins."""
        assert entity_fields(HookArticle) == {"title", "translations"}

    def test_hook_callable(self) -> None:
        """__entity_fields__ given as a callable is called."""
        assert entity_fields(CallableHookArticle) == {"title", "translations"}

    @pytest.mark.parametrize("hook", ["title", b"title", lambda: "title"])
    def test_hook_bare_string_rejected(self, hook: object) -> None:
        """A bare string hook is not split into single-character names."""
        entity = type("StringHook", (), {"__entity_fields__": hook})

        with pytest.raises(DefinitionError) as exc_info:
            entity_fields(entity)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SHAPE_UNAVAILABLE

    def test_hook_bare_string_fails_validation(self) -> None:
        """A declaration naming a character of a string hook is not accepted."""
        registry = MetadataRegistry()
        entity = type("StringHook", (), {"__entity_fields__": "title"})
        declare(entity, registry=registry, translates=["t"], container="i")

        with pytest.raises(DefinitionError):
            finalize(entity, registry=registry)

        assert registry.state(entity) is EntityState.INVALID

    def test_no_discoverable_fields(self) -> None:
        """A type without any discoverable field is a definition error."""
        with pytest.raises(DefinitionError) as exc_info:
            entity_fields(Bare)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SHAPE_UNAVAILABLE
        assert exc_info.value.entity_type is Bare

    def test_never_instantiates(self) -> None:
        """Shape discovery works on types whose constructor always fails."""

        @dataclasses.dataclass
        class Exploding:
            title: str

            def __post_init__(self) -> None:
                raise AssertionError("instance created")

        assert entity_fields(Exploding) == {"title"}


class TestEntityName:
    """entity_name() formatting."""

    def test_module_qualified(self) -> None:
        """User types are named module.QualName."""
        assert entity_name(DataclassArticle) == f"{__name__}.DataclassArticle"

    def test_builtin_unqualified(self) -> None:
        """Builtins drop the 'builtins.' prefix."""
        assert entity_name(dict) == "dict"

    def test_nested_qualname(self) -> None:
        """Nested classes keep their dotted qualname."""

        class Inner:
            pass

        assert entity_name(Inner).endswith("test_nested_qualname.<locals>.Inner")


class TestResolveEntityType:
    """resolve_entity_type() accepts a type or an instance."""

    def test_type_returned_unchanged(self) -> None:
        assert resolve_entity_type(DataclassArticle) is DataclassArticle

    def test_instance_resolved_to_type(self) -> None:
        article = DataclassArticle(title="t", body="b")
        assert resolve_entity_type(article) is DataclassArticle

    def test_metaclass_instance_is_a_type(self) -> None:
        """Classes are always treated as types, never as instances of type."""
        assert resolve_entity_type(int) is int
