"""Enumerations for embedtrans type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class EntityState(StrEnum):
    """Lifecycle state of an entity type's translation metadata.

    StrEnum provides automatic string conversion: str(EntityState.USABLE) == "usable"

    Transitions:
        UNDECLARED -> REGISTERED  (declare)
        REGISTERED -> USABLE      (finalize, validation passed)
        REGISTERED -> INVALID     (finalize, validation failed; terminal)
    """

    UNDECLARED = "undeclared"
    """Type never declared translation metadata (absent from the registry)."""

    REGISTERED = "registered"
    """Metadata extracted and stored; definition-time validation pending."""

    USABLE = "usable"
    """Validation passed; the type can be queried freely."""

    INVALID = "invalid"
    """Validation failed; the type must not be used."""


__all__ = [
    "EntityState",
]
