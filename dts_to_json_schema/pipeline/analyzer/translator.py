"""
Type translator: converts declaration type nodes into JSON Schema fragments.

Phase 2 of the pipeline. The translator holds no mutable state of its own;
every reference to another declaration goes through the `request` callable
supplied by the resolver, which decides whether that name still needs work.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..config import GeneratorConfig
from ..declarations.nodes import (
    ArrayType,
    HeritageType,
    InterfaceDeclaration,
    KeywordType,
    KindKeyedName,
    LiteralType,
    ParenthesizedType,
    PropertyName,
    PropertySignature,
    QualifiedReference,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)
from ..declarations.table import DeclarationTable
from ..errors import (
    EmptyUnionError,
    TranslationDepthError,
    UnexpectedMemberError,
    UnexpectedTypeError,
    UnsupportedLiteralError,
    ValueOfError,
)

logger = logging.getLogger(__name__)

SchemaFragment = dict[str, Any]

# Predefined keyword types and the JSON Schema type each one maps to
KEYWORD_SCHEMA_TYPES = {
    "string": "string",
    "number": "number",
    "bigint": "number",
    "boolean": "boolean",
    "any": "any",
    "unknown": "any",
    "undefined": "null",
}


def schema_ref(name: str) -> SchemaFragment:
    """Build a reference to a named definition."""
    return {"$ref": f"#/definitions/{name}"}


class TypeTranslator:
    """Translates type nodes and interface declarations into schema fragments."""

    def __init__(
        self,
        table: DeclarationTable,
        request: Callable[[str, str], SchemaFragment],
        config: GeneratorConfig | None = None,
    ):
        """
        Initialize the translator.

        Args:
            table: Declarations available for `ValueOf<T>` lookups
            request: Called with (name, requester) for every referenced
                declaration; returns the reference fragment to embed
            config: Generator configuration
        """
        self.table = table
        self.request = request
        self.config = config or GeneratorConfig()
        self.config.validate()

    def translate(
        self,
        scope_name: str,
        node: TypeNode | InterfaceDeclaration,
        depth: int = 0,
    ) -> SchemaFragment:
        """
        Translate a type node into a schema fragment.

        Args:
            scope_name: Name of the declaration being translated (for diagnostics)
            node: The type node, or an interface declaration to flatten
            depth: Current nesting depth

        Returns:
            The schema fragment for the node
        """
        if depth > self.config.max_depth:
            raise TranslationDepthError(f"{scope_name}: type nesting exceeds {self.config.max_depth} levels")
        inner = depth + 1

        if isinstance(node, ArrayType):
            return {"type": "array", "items": self.translate(scope_name, node.element, inner)}

        if isinstance(node, UnionType):
            return self._translate_union(scope_name, node, inner)

        if isinstance(node, LiteralType):
            return self._translate_literal(node)

        if isinstance(node, HeritageType) and not node.type_arguments:
            return self.request(node.name, scope_name)

        if isinstance(node, QualifiedReference):
            if node.namespace not in self.config.kind_namespaces:
                raise UnexpectedTypeError(f"unexpected type {node.text}")
            return {"type": "string", "enum": [node.member]}

        if isinstance(node, TypeReference):
            if node.name == self.config.value_of_name:
                return self._translate_value_of(node)
            return self.request(node.name, scope_name)

        if isinstance(node, (TypeLiteral, InterfaceDeclaration)):
            return self._translate_object(scope_name, node, inner)

        if isinstance(node, ParenthesizedType):
            return self.translate(scope_name, node.inner, inner)

        if isinstance(node, KeywordType) and node.keyword in KEYWORD_SCHEMA_TYPES:
            return {"type": KEYWORD_SCHEMA_TYPES[node.keyword]}

        # Best-effort placeholder: leave a dangling reference keyed by source text
        logger.warning("%s: no schema translation for %s `%s`", scope_name, self._node_kind(node), node.text)
        return schema_ref(node.text)

    def values_of(self, declaration: InterfaceDeclaration) -> list[str]:
        """
        Collect the string literal values assigned to properties of an interface.

        Values of every interface it extends come first, recursively; the
        result keeps the first occurrence of each value.
        """
        return list(dict.fromkeys(self._collect_values(declaration, set())))

    def _collect_values(self, declaration: InterfaceDeclaration, visited: set[str]) -> list[str]:
        visited.add(declaration.name)
        values: list[str] = []
        for base in declaration.heritage:
            parent = self.table.lookup(base.name)
            if isinstance(parent, InterfaceDeclaration) and parent.name not in visited:
                values.extend(self._collect_values(parent, visited))

        for member in declaration.members:
            if not isinstance(member, PropertySignature):
                continue
            if isinstance(member.type, LiteralType) and member.type.kind == "string":
                values.append(member.type.value)
        return values

    def _translate_union(self, scope_name: str, node: UnionType, depth: int) -> SchemaFragment:
        excluded = set(self.config.excluded_union_members)
        alternatives = [self.translate(scope_name, member, depth) for member in node.members if member.text not in excluded]
        if alternatives or not node.members:
            return {"oneOf": alternatives}

        policy = self.config.empty_union
        if policy == "any":
            return {"type": "any"}
        if policy == "empty":
            return {"oneOf": []}
        raise EmptyUnionError(f"{scope_name}: every member of `{node.text}` is excluded")

    def _translate_literal(self, node: LiteralType) -> SchemaFragment:
        if node.kind == "null":
            return {"type": "null"}
        if node.kind in ("boolean", "string", "number"):
            return {"type": node.kind, "enum": [node.value]}
        raise UnsupportedLiteralError(f"unexpected literal type: {node.kind} ({node.text})")

    def _translate_value_of(self, node: TypeReference) -> SchemaFragment:
        if len(node.type_arguments) != 1:
            raise ValueOfError(f"{node.name} missing or too many type arguments")

        argument = node.type_arguments[0].text
        declaration = self.table.lookup(argument)
        if declaration is None:
            raise ValueOfError(f"unknown type {node.name}<{argument}>")
        if not isinstance(declaration, InterfaceDeclaration):
            raise ValueOfError(f"unexpected type {node.name}<{argument}>")

        return {"type": "string", "enum": self.values_of(declaration)}

    def _translate_object(
        self,
        scope_name: str,
        node: TypeLiteral | InterfaceDeclaration,
        depth: int,
    ) -> SchemaFragment:
        properties: dict[str, SchemaFragment] = {}
        required: list[str] = []
        for member in node.members:
            if not isinstance(member, PropertySignature):
                raise UnexpectedMemberError(f"{scope_name}: unexpected member type `{member.text}`")
            if member.type is None:
                raise UnexpectedMemberError(f"{scope_name}: no type for `{member.text}`")

            name = self._property_name(scope_name, member)
            properties[name] = self.translate(scope_name, member.type, depth)
            if not member.optional and name not in required:
                required.append(name)

        obj = {"type": "object", "properties": properties, "required": required}
        if not isinstance(node, InterfaceDeclaration):
            return obj

        markers = set(self.config.marker_bases)
        bases = [base for base in node.heritage if base.text not in markers]
        if not bases:
            return obj

        return {"allOf": [*(self.translate(scope_name, base, depth) for base in bases), obj]}

    def _property_name(self, scope_name: str, member: PropertySignature) -> str:
        name = member.name
        if isinstance(name, PropertyName):
            return name.text
        if isinstance(name, KindKeyedName) and name.namespace in self.config.kind_key_namespaces:
            return name.member
        raise UnexpectedMemberError(f"{scope_name}: unexpected computed property name {name.text}")

    @staticmethod
    def _node_kind(node: TypeNode) -> str:
        if isinstance(node, KeywordType):
            return f"{node.keyword} keyword"
        if isinstance(node, HeritageType):
            return "ExpressionWithTypeArguments"
        return getattr(node, "kind", "") or type(node).__name__
