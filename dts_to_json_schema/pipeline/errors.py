"""
Errors raised while generating a schema.

Every error here aborts the run. Recoverable conditions (missing
declarations, type forms without a translation) are logged instead.
"""

from __future__ import annotations


class SchemaGenerationError(Exception):
    """Base class for fatal schema generation failures."""

    pass


class DeclarationSyntaxError(SchemaGenerationError):
    """Raised when the declaration source cannot be parsed."""

    pass


class UnsupportedLiteralError(SchemaGenerationError):
    """Raised for literal types with no schema equivalent (e.g. bigint literals)."""

    pass


class UnexpectedTypeError(SchemaGenerationError):
    """Raised for a qualified reference outside the known kind namespaces."""

    pass


class ValueOfError(SchemaGenerationError):
    """Raised when `ValueOf<T>` has the wrong arity or `T` is not an interface."""

    pass


class UnexpectedMemberError(SchemaGenerationError):
    """Raised for object members that cannot become schema properties.

    This can happen when:
    - The member is not a property signature (index or method signature)
    - The property has no type annotation
    - The property key is a computed name other than a kind constant
    """

    pass


class UnexpectedDeclarationError(SchemaGenerationError):
    """Raised when the resolver meets a declaration kind it cannot translate."""

    pass


class EmptyUnionError(SchemaGenerationError):
    """Raised when every member of a union is excluded."""

    pass


class TranslationDepthError(SchemaGenerationError):
    """Raised when a type expression nests deeper than the configured limit."""

    pass


class MissingRootError(SchemaGenerationError):
    """Raised when the root declaration produced no definition."""

    pass


class ConfigurationError(SchemaGenerationError):
    """Raised when a configuration option has a value the generator does not accept."""

    pass


class SourceLoadError(SchemaGenerationError):
    """Raised when the declaration source cannot be read or fetched."""

    pass


class OutputWriteError(SchemaGenerationError):
    """Raised when the serialized document fails validation before writing."""

    pass
