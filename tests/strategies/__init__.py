"""Hypothesis strategies for embedtrans property-based testing.

Strategies are organized by domain:

- entities: field names, dynamic dataclass entities, declaration scenarios

Usage:
    from tests.strategies import entity_scenarios, make_entity
    from tests.strategies.entities import field_names, locale_codes
"""

from .entities import (
    EntityScenario,
    entity_scenarios,
    field_name_sets,
    field_names,
    locale_codes,
    make_entity,
)

__all__ = [
    "EntityScenario",
    "entity_scenarios",
    "field_name_sets",
    "field_names",
    "locale_codes",
    "make_entity",
]
