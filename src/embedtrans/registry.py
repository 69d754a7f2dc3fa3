"""Process-wide registry of entity translation metadata.

Maps entity type identity to its TranslationMetadata record and lifecycle
state. Entries are write-once per type and read-many afterwards.

Architecture:
    - RegistryEntry: frozen (metadata, state) pair
    - MetadataRegistry: WeakKeyDictionary[type, RegistryEntry]; an entry lives
      exactly as long as its type
    - get_default_registry(): shared instance behind the public functions

Thread Safety:
    Writes (register, state transitions) serialize on a threading.Lock.
    Reads are lock-free: entries are immutable and a state transition replaces
    the whole entry with a single store, so readers observe either the full
    record or nothing.

Python 3.13+. Zero external dependencies.
"""

import dataclasses
import logging
import threading
import weakref
from dataclasses import dataclass

from .diagnostics import ConfigurationError, ErrorTemplate, UsageError
from .enums import EntityState
from .metadata import TranslationMetadata
from .shape import entity_name

__all__ = ["MetadataRegistry", "RegistryEntry", "get_default_registry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """Registered metadata of one entity type together with its lifecycle state."""

    metadata: TranslationMetadata
    state: EntityState = EntityState.REGISTERED


class MetadataRegistry:
    """Write-once, read-many association from entity type to metadata.

    Example:
        >>> registry = MetadataRegistry()
        >>> class Article: ...
        >>> registry.register(Article, TranslationMetadata(("title",)))
        >>> registry.fields(Article)
        ('title',)
        >>> registry.state(Article)
        <EntityState.REGISTERED: 'registered'>
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._entries: weakref.WeakKeyDictionary[type, RegistryEntry] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = threading.Lock()

    def __contains__(self, entity_type: object) -> bool:
        return entity_type in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, entity_type: type, metadata: TranslationMetadata) -> None:
        """Store metadata for a newly declared entity type.

        Args:
            entity_type: The entity type being declared
            metadata: Extracted metadata record

        Raises:
            ConfigurationError: If the type already has registered metadata
        """
        with self._lock:
            if entity_type in self._entries:
                raise ConfigurationError(
                    ErrorTemplate.already_declared(entity_name(entity_type)),
                    entity_type=entity_type,
                )
            self._entries[entity_type] = RegistryEntry(metadata)
        logger.debug(
            "Registered translation metadata for %r: fields=%s container=%r",
            entity_name(entity_type),
            metadata.translatable_fields,
            metadata.container_field,
        )

    def mark_usable(self, entity_type: type) -> None:
        """Transition a registered type to USABLE."""
        self._transition(entity_type, EntityState.USABLE)

    def mark_invalid(self, entity_type: type) -> None:
        """Transition a registered type to INVALID (terminal)."""
        self._transition(entity_type, EntityState.INVALID)

    def _transition(self, entity_type: type, state: EntityState) -> None:
        with self._lock:
            entry = self._require(entity_type)
            self._entries[entity_type] = dataclasses.replace(entry, state=state)

    def lookup(self, entity_type: type) -> RegistryEntry | None:
        """Get the registry entry for a type, or None if never declared."""
        return self._entries.get(entity_type)

    def state(self, entity_type: type) -> EntityState:
        """Get the lifecycle state of a type (UNDECLARED when absent)."""
        entry = self._entries.get(entity_type)
        return entry.state if entry is not None else EntityState.UNDECLARED

    def _require(self, entity_type: type) -> RegistryEntry:
        entry = self._entries.get(entity_type)
        if entry is None:
            raise UsageError(
                ErrorTemplate.not_declared(entity_name(entity_type)),
                entity_type=entity_type,
            )
        return entry

    def metadata(self, entity_type: type) -> TranslationMetadata:
        """Get the metadata record of a declared type.

        Raises:
            UsageError: If the type never declared translation metadata
        """
        return self._require(entity_type).metadata

    def fields(self, entity_type: type) -> tuple[str, ...]:
        """Translatable field names of a declared type."""
        return self.metadata(entity_type).translatable_fields

    def container(self, entity_type: type) -> str:
        """Translations container field of a declared type."""
        return self.metadata(entity_type).container_field

    def default_locale(self, entity_type: type) -> str | None:
        """Default locale of a declared type, or None."""
        return self.metadata(entity_type).default_locale


_default_registry = MetadataRegistry()


def get_default_registry() -> MetadataRegistry:
    """Get the process-wide registry used when no registry is passed."""
    return _default_registry
