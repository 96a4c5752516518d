"""
Declarations module.

Contains the declaration node definitions, the parser for `.d.ts` source
and the declaration table.
"""

from __future__ import annotations

from .nodes import (
    ArrayType,
    CallSignature,
    ComputedName,
    Declaration,
    EnumDeclaration,
    HeritageType,
    IndexSignature,
    InterfaceDeclaration,
    KeywordType,
    KindKeyedName,
    LiteralType,
    MethodSignature,
    ParenthesizedType,
    PropertyName,
    PropertySignature,
    QualifiedReference,
    TypeAliasDeclaration,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
    UnsupportedType,
)
from .parser import DeclarationParser
from .table import DeclarationTable

__all__ = [
    "TypeNode",
    "ArrayType",
    "UnionType",
    "LiteralType",
    "TypeReference",
    "QualifiedReference",
    "HeritageType",
    "ParenthesizedType",
    "KeywordType",
    "TypeLiteral",
    "UnsupportedType",
    "PropertyName",
    "KindKeyedName",
    "ComputedName",
    "PropertySignature",
    "IndexSignature",
    "MethodSignature",
    "CallSignature",
    "Declaration",
    "InterfaceDeclaration",
    "EnumDeclaration",
    "TypeAliasDeclaration",
    "DeclarationParser",
    "DeclarationTable",
]
