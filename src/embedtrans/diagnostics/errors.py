"""embedtrans exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions may store Diagnostic objects for rich error information.

The three concrete kinds are disjoint: none subclasses another, so callers
can tell a malformed declaration, a declaration inconsistent with the entity,
and a misuse of the reflection API apart with a single ``except`` clause.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TransError(Exception):
    """Base exception for all embedtrans errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TransError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(TransError):
    """Malformed translation declaration.

    Raised by the metadata extractor at definition time, before anything is
    written to the registry:
    - 'translates' missing, not a list of names, or empty
    - Unknown option names
    - Second declaration for an already-declared type

    Attributes:
        entity_type: The type being declared (None if not known)
    """

    def __init__(
        self, message: str | Diagnostic, *, entity_type: type | None = None
    ) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Error message string OR Diagnostic object
            entity_type: The type being declared
        """
        super().__init__(message)
        self.entity_type = entity_type


class DefinitionError(TransError):
    """Declaration inconsistent with the entity's own fields.

    Raised by the definition-time validator after registration and before the
    type becomes usable. The type is marked invalid and must not be used.

    Attributes:
        entity_type: The entity type that failed validation
        fields: Offending field names, in declaration order
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        entity_type: type | None = None,
        fields: tuple[str, ...] = (),
    ) -> None:
        """Initialize DefinitionError.

        Args:
            message: Error message string OR Diagnostic object
            entity_type: The entity type that failed validation
            fields: Offending field names
        """
        super().__init__(message)
        self.entity_type = entity_type
        self.fields = fields


class UsageError(TransError):
    """Reflection query against a type without usable translation metadata.

    Signals caller misuse rather than a malformed declaration: the queried
    type never declared metadata, or its declaration failed validation.

    Attributes:
        entity_type: The queried type
    """

    def __init__(
        self, message: str | Diagnostic, *, entity_type: type | None = None
    ) -> None:
        """Initialize UsageError.

        Args:
            message: Error message string OR Diagnostic object
            entity_type: The queried type
        """
        super().__init__(message)
        self.entity_type = entity_type
