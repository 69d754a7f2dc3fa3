"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for declaration, definition-time
validation, and reflection failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (malformed declaration options)
        2000-2999: Definition errors (options inconsistent with entity shape)
        3000-3999: Usage errors (querying types without usable metadata)
    """

    # Configuration errors (1000-1999)
    TRANSLATES_MISSING = 1001
    TRANSLATES_INVALID = 1002
    TRANSLATES_EMPTY = 1003
    UNKNOWN_OPTION = 1004
    ALREADY_DECLARED = 1005

    # Definition errors (2000-2999)
    TRANSLATABLE_FIELD_UNDEFINED = 2001
    TRANSLATABLE_FIELDS_UNDEFINED = 2002
    CONTAINER_UNDEFINED = 2003
    SHAPE_UNAVAILABLE = 2004

    # Usage errors (3000-3999)
    NOT_DECLARED = 3001
    ENTITY_INVALID = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        entity_name: Qualified name of the entity type involved
        option_name: Declaration option involved (configuration errors)
        field_names: Offending field names (definition errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    entity_name: str | None = None
    option_name: str | None = None
    field_names: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter with its default settings.

        Example output:
            error[TRANSLATABLE_FIELD_UNDEFINED]: app.Article declares 'summary' as ...
              --> app.Article
              = fields: summary
              = help: Add the field to the entity or remove it from 'translates'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
