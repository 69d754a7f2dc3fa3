"""Translation metadata record and extractor.

Parses the options supplied when an entity type is declared into an
immutable TranslationMetadata record:

    translates      (required) sequence of translatable field names
    container       (optional) field holding the translations, default "translations"
    default_locale  (optional) locale of the untranslated fields, default None

Extraction checks only the shape of the options. Whether the named fields
exist on the entity is checked later by embedtrans.validation, once the
entity's fields are final.

Thread Safety:
    Pure functions over immutable results. Safe for concurrent use.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .constants import (
    DEFAULT_CONTAINER,
    DEFAULT_LOCALE,
    OPTION_CONTAINER,
    OPTION_DEFAULT_LOCALE,
    OPTION_TRANSLATES,
    RECOGNIZED_OPTIONS,
)
from .diagnostics import ConfigurationError, ErrorTemplate
from .shape import entity_name

__all__ = ["TranslationMetadata", "extract_metadata"]

# Placeholder used in messages when extraction runs without a target type.
_ANONYMOUS_ENTITY = "<entity>"


@dataclass(frozen=True, slots=True)
class TranslationMetadata:
    """Immutable translation metadata for one entity type.

    Attributes:
        translatable_fields: Translatable field names, in declaration order
        container_field: Name of the field holding the translations payload
        default_locale: Locale of the entity's base fields, if declared

    Example:
        >>> TranslationMetadata(("title", "body"))
        TranslationMetadata(translatable_fields=('title', 'body'), container_field='translations', default_locale=None)
    """

    translatable_fields: tuple[str, ...]
    container_field: str = DEFAULT_CONTAINER
    default_locale: str | None = DEFAULT_LOCALE


def _extract_translatable_fields(
    options: Mapping[str, object], name: str, entity_type: type | None
) -> tuple[str, ...]:
    if OPTION_TRANSLATES not in options:
        raise ConfigurationError(
            ErrorTemplate.translates_missing(name), entity_type=entity_type
        )

    translates = options[OPTION_TRANSLATES]
    # str and bytes are Sequences too; a bare "title" is a mistake, not a list.
    if isinstance(translates, (str, bytes, bytearray)) or not isinstance(
        translates, Sequence
    ):
        raise ConfigurationError(
            ErrorTemplate.translates_invalid(name, type(translates).__name__),
            entity_type=entity_type,
        )

    for item in translates:
        if not isinstance(item, str):
            raise ConfigurationError(
                ErrorTemplate.translates_invalid(
                    name, f"a list containing {type(item).__name__}"
                ),
                entity_type=entity_type,
            )

    if not translates:
        raise ConfigurationError(
            ErrorTemplate.translates_empty(name), entity_type=entity_type
        )

    return tuple(translates)


def extract_metadata(
    options: Mapping[str, object], *, entity_type: type | None = None
) -> TranslationMetadata:
    """Build a TranslationMetadata record from declaration options.

    Args:
        options: Declaration options ('translates', 'container', 'default_locale')
        entity_type: Type being declared, used to name it in error messages

    Returns:
        TranslationMetadata with defaults applied for omitted options

    Raises:
        ConfigurationError: If 'translates' is missing, not a non-string
            sequence of strings, or empty; or if unknown options are present

    Example:
        >>> extract_metadata({"translates": ["title", "body"], "default_locale": "en"})
        TranslationMetadata(translatable_fields=('title', 'body'), container_field='translations', default_locale='en')
    """
    name = entity_name(entity_type) if entity_type is not None else _ANONYMOUS_ENTITY

    unknown = sorted(set(options) - RECOGNIZED_OPTIONS)
    if unknown:
        raise ConfigurationError(
            ErrorTemplate.unknown_options(name, unknown), entity_type=entity_type
        )

    fields = _extract_translatable_fields(options, name, entity_type)
    container = options.get(OPTION_CONTAINER, DEFAULT_CONTAINER)
    default_locale = options.get(OPTION_DEFAULT_LOCALE, DEFAULT_LOCALE)

    return TranslationMetadata(
        translatable_fields=fields,
        container_field=container,  # type: ignore[arg-type]
        default_locale=default_locale,  # type: ignore[arg-type]
    )
