"""
Node definitions for parsed TypeScript declarations.

These nodes represent the declaration source after parsing, before any
reference resolution or schema translation. Every type node keeps the raw
source text it was parsed from so that diagnostics and placeholder
references can quote it verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TypeNode:
    """Base class for all type expression nodes."""

    # Raw source text of the type expression
    text: str = ""


@dataclass(frozen=True)
class ArrayType(TypeNode):
    """Represents `T[]`."""

    element: TypeNode | None = None


@dataclass(frozen=True)
class UnionType(TypeNode):
    """Represents `A | B | C`."""

    members: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class LiteralType(TypeNode):
    """Represents a literal type such as `"Identifier"`, `1`, `true` or `null`."""

    kind: str = ""  # "string", "number", "boolean", "null", "bigint"
    value: str | bool | None = None


@dataclass(frozen=True)
class TypeReference(TypeNode):
    """Represents a reference to a named type, optionally with type arguments."""

    name: str = ""
    type_arguments: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class QualifiedReference(TypeNode):
    """Represents `Namespace.Member` used as a type (enum member constants)."""

    namespace: str = ""
    member: str = ""


@dataclass(frozen=True)
class HeritageType(TypeNode):
    """Represents one entry of an interface `extends` clause."""

    name: str = ""
    type_arguments: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class ParenthesizedType(TypeNode):
    """Represents `(T)`."""

    inner: TypeNode | None = None


@dataclass(frozen=True)
class KeywordType(TypeNode):
    """Represents a predefined type keyword (`string`, `number`, `any`, ...)."""

    keyword: str = ""


@dataclass(frozen=True)
class UnsupportedType(TypeNode):
    """A syntactically valid type form with no schema translation (tuples, `keyof`, ...)."""

    kind: str = ""


@dataclass(frozen=True)
class PropertyName:
    """Plain property key: an identifier, string or numeric literal."""

    text: str = ""


@dataclass(frozen=True)
class KindKeyedName:
    """Property key written as `[Namespace.Member]`."""

    namespace: str = ""
    member: str = ""

    @property
    def text(self) -> str:
        return f"[{self.namespace}.{self.member}]"


@dataclass(frozen=True)
class ComputedName:
    """Any other bracketed property key."""

    text: str = ""


MemberName = PropertyName | KindKeyedName | ComputedName


@dataclass(frozen=True)
class Member:
    """Base class for members of an interface body or type literal."""

    text: str = ""


@dataclass(frozen=True)
class PropertySignature(Member):
    """Represents `name?: Type`."""

    name: MemberName = field(default_factory=PropertyName)
    type: TypeNode | None = None
    optional: bool = False
    readonly: bool = False


@dataclass(frozen=True)
class IndexSignature(Member):
    """Represents `[key: K]: Type`."""

    key_name: str = ""
    key_type: TypeNode | None = None
    type: TypeNode | None = None


@dataclass(frozen=True)
class MethodSignature(Member):
    """Represents `name(params): Type`."""

    name: MemberName = field(default_factory=PropertyName)
    return_type: TypeNode | None = None


@dataclass(frozen=True)
class CallSignature(Member):
    """Represents `(params): Type` inside an object shape."""

    return_type: TypeNode | None = None


@dataclass(frozen=True)
class TypeLiteral(TypeNode):
    """Represents an inline object shape `{ a: A; b?: B }`."""

    members: tuple[Member, ...] = ()


@dataclass(frozen=True)
class Declaration:
    """Base class for named top-level declarations."""

    name: str = ""
    text: str = ""


@dataclass(frozen=True)
class InterfaceDeclaration(Declaration):
    """Represents `interface Name<T> extends A, B { ... }`."""

    type_parameters: tuple[str, ...] = ()
    heritage: tuple[HeritageType, ...] = ()
    members: tuple[Member, ...] = ()


@dataclass(frozen=True)
class EnumDeclaration(Declaration):
    """Represents `enum Name { A = "A", B = "B" }`."""

    members: tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeAliasDeclaration(Declaration):
    """Represents `type Name<T> = Type;`."""

    type_parameters: tuple[str, ...] = ()
    type: TypeNode | None = None
