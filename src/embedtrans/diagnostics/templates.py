"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from ..constants import PACKAGE_NAME
from .codes import Diagnostic, DiagnosticCode


def _quote_all(names: Iterable[str]) -> str:
    return ", ".join(f"'{name}'" for name in names)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://embedtrans.readthedocs.io/en/latest"

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def translates_missing(entity_name: str) -> Diagnostic:
        """Declaration without the required 'translates' option.

        Args:
            entity_name: Qualified name of the entity type being declared

        Returns:
            Diagnostic for TRANSLATES_MISSING
        """
        msg = (
            f"{entity_name} requires a 'translates' option that contains "
            f"the list of translatable field names"
        )
        return Diagnostic(
            code=DiagnosticCode.TRANSLATES_MISSING,
            message=msg,
            hint="Pass translates=[...] naming the fields that vary by locale",
            help_url=f"{ErrorTemplate._DOCS_BASE}/declaring.html",
            entity_name=entity_name,
            option_name="translates",
        )

    @staticmethod
    def translates_invalid(entity_name: str, received_type: str) -> Diagnostic:
        """'translates' option that is not a sequence of field names.

        Args:
            entity_name: Qualified name of the entity type being declared
            received_type: Type name of the value actually supplied

        Returns:
            Diagnostic for TRANSLATES_INVALID
        """
        msg = (
            f"{entity_name} 'translates' option must be a list of field names, "
            f"got {received_type}"
        )
        return Diagnostic(
            code=DiagnosticCode.TRANSLATES_INVALID,
            message=msg,
            hint="Use a list or tuple of strings, e.g. translates=['title', 'body']",
            help_url=f"{ErrorTemplate._DOCS_BASE}/declaring.html",
            entity_name=entity_name,
            option_name="translates",
        )

    @staticmethod
    def translates_empty(entity_name: str) -> Diagnostic:
        """'translates' option given as an empty sequence.

        Args:
            entity_name: Qualified name of the entity type being declared

        Returns:
            Diagnostic for TRANSLATES_EMPTY
        """
        msg = f"{entity_name} 'translates' option must name at least one field"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATES_EMPTY,
            message=msg,
            hint="Remove the declaration if the entity has no translatable fields",
            help_url=f"{ErrorTemplate._DOCS_BASE}/declaring.html",
            entity_name=entity_name,
            option_name="translates",
        )

    @staticmethod
    def unknown_options(entity_name: str, options: Iterable[str]) -> Diagnostic:
        """Declaration with unrecognized option names.

        Args:
            entity_name: Qualified name of the entity type being declared
            options: Unrecognized option names, sorted

        Returns:
            Diagnostic for UNKNOWN_OPTION
        """
        names = tuple(options)
        msg = f"{entity_name} received unknown translation options: {_quote_all(names)}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_OPTION,
            message=msg,
            hint="Recognized options are 'translates', 'container' and 'default_locale'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/declaring.html",
            entity_name=entity_name,
            option_name=names[0] if names else None,
        )

    @staticmethod
    def already_declared(entity_name: str) -> Diagnostic:
        """Second declaration for the same entity type.

        Args:
            entity_name: Qualified name of the entity type

        Returns:
            Diagnostic for ALREADY_DECLARED
        """
        msg = f"{entity_name} already declares translation metadata"
        return Diagnostic(
            code=DiagnosticCode.ALREADY_DECLARED,
            message=msg,
            hint="Translation metadata is write-once; declare each entity type exactly once",
            help_url=f"{ErrorTemplate._DOCS_BASE}/declaring.html",
            entity_name=entity_name,
        )

    # ------------------------------------------------------------------
    # Definition errors
    # ------------------------------------------------------------------

    @staticmethod
    def translatable_fields_undefined(
        entity_name: str, field_names: tuple[str, ...]
    ) -> Diagnostic:
        """Translatable fields missing from the entity's own fields.

        Exactly one offending field uses singular phrasing; two or more use
        plural phrasing. Both variants list every offending field.

        Args:
            entity_name: Qualified name of the entity type
            field_names: Offending field names, in declaration order

        Returns:
            Diagnostic for TRANSLATABLE_FIELD_UNDEFINED or
            TRANSLATABLE_FIELDS_UNDEFINED
        """
        listed = _quote_all(field_names)
        if len(field_names) == 1:
            code = DiagnosticCode.TRANSLATABLE_FIELD_UNDEFINED
            msg = (
                f"{entity_name} declares {listed} as translatable "
                f"but it is not defined in the entity's fields"
            )
        else:
            code = DiagnosticCode.TRANSLATABLE_FIELDS_UNDEFINED
            msg = (
                f"{entity_name} declares {listed} as translatable "
                f"but they are not defined in the entity's fields"
            )
        return Diagnostic(
            code=code,
            message=msg,
            hint="Add the missing fields to the entity or remove them from 'translates'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/validation.html",
            entity_name=entity_name,
            option_name="translates",
            field_names=field_names,
        )

    @staticmethod
    def container_undefined(entity_name: str, container: str) -> Diagnostic:
        """Translation container missing from the entity's own fields.

        Args:
            entity_name: Qualified name of the entity type
            container: Declared container field name

        Returns:
            Diagnostic for CONTAINER_UNDEFINED
        """
        msg = (
            f"The field '{container}' used as the translation container "
            f"is not defined in {entity_name} fields"
        )
        return Diagnostic(
            code=DiagnosticCode.CONTAINER_UNDEFINED,
            message=msg,
            hint=f"Add a '{container}' field to the entity or pass container=<existing field>",
            help_url=f"{ErrorTemplate._DOCS_BASE}/validation.html",
            entity_name=entity_name,
            option_name="container",
            field_names=(container,),
        )

    @staticmethod
    def shape_unavailable(entity_name: str) -> Diagnostic:
        """Entity type whose field names cannot be discovered.

        Args:
            entity_name: Qualified name of the entity type

        Returns:
            Diagnostic for SHAPE_UNAVAILABLE
        """
        msg = f"Cannot determine the fields of {entity_name}"
        return Diagnostic(
            code=DiagnosticCode.SHAPE_UNAVAILABLE,
            message=msg,
            hint=(
                "Use a dataclass or NamedTuple, annotate the fields, "
                "or define __entity_fields__"
            ),
            help_url=f"{ErrorTemplate._DOCS_BASE}/entities.html",
            entity_name=entity_name,
        )

    # ------------------------------------------------------------------
    # Usage errors
    # ------------------------------------------------------------------

    @staticmethod
    def not_declared(entity_name: str) -> Diagnostic:
        """Reflection query against a type that never declared metadata.

        Args:
            entity_name: Qualified name of the queried type

        Returns:
            Diagnostic for NOT_DECLARED
        """
        msg = (
            f"{entity_name} must declare translation metadata with {PACKAGE_NAME} "
            f"before it can be queried"
        )
        return Diagnostic(
            code=DiagnosticCode.NOT_DECLARED,
            message=msg,
            hint="Declare translation metadata with @translatable_entity(...) or declare()",
            help_url=f"{ErrorTemplate._DOCS_BASE}/reflection.html",
            entity_name=entity_name,
        )

    @staticmethod
    def entity_invalid(entity_name: str) -> Diagnostic:
        """Reflection query against a type that failed validation.

        Args:
            entity_name: Qualified name of the queried type

        Returns:
            Diagnostic for ENTITY_INVALID
        """
        msg = f"{entity_name} failed translation metadata validation and cannot be used"
        return Diagnostic(
            code=DiagnosticCode.ENTITY_INVALID,
            message=msg,
            hint="Fix the DefinitionError raised when the entity was defined",
            help_url=f"{ErrorTemplate._DOCS_BASE}/validation.html",
            entity_name=entity_name,
        )
