"""
Declaration parser that builds declaration nodes from `.d.ts` source.

Phase 1 of the pipeline: parse declaration source text into nodes without
resolving references or translating anything to JSON Schema.
"""

from __future__ import annotations

import functools
import re
from pathlib import Path

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from ..errors import DeclarationSyntaxError
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
    Member,
    MemberName,
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

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}


@functools.cache
def _lark_parser() -> Lark:
    return Lark(
        _GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start="start",
        propagate_positions=True,
        maybe_placeholders=False,
    )


def _decode_string(token: Token) -> str:
    """Strip the quotes of a STRING token and interpret its escapes."""

    def replace(match: re.Match[str]) -> str:
        escape = match.group(1)
        if escape[0] in "ux" and len(escape) > 1:
            return chr(int(escape[1:].strip("{}"), 16))
        return _SIMPLE_ESCAPES.get(escape, escape)

    return _ESCAPE_RE.sub(replace, token.value[1:-1])


def _tokens(tree: Tree, token_type: str) -> list[Token]:
    return [child for child in tree.children if isinstance(child, Token) and child.type == token_type]


def _subtrees(tree: Tree) -> list[Tree]:
    return [child for child in tree.children if isinstance(child, Tree)]


def _find(tree: Tree, data: str) -> Tree | None:
    return next((child for child in _subtrees(tree) if child.data == data), None)


class DeclarationParser:
    """Parses TypeScript declaration source into declaration nodes."""

    # Type names that denote predefined keyword types when used without type arguments
    KEYWORD_TYPES = {
        "any",
        "bigint",
        "boolean",
        "never",
        "number",
        "object",
        "string",
        "symbol",
        "undefined",
        "unknown",
        "void",
    }

    # Grammar rules for type forms with no schema translation, by reported kind
    UNSUPPORTED_KINDS = {
        "intersection_type": "IntersectionType",
        "keyof_type": "TypeOperator",
        "readonly_type": "TypeOperator",
        "unique_type": "TypeOperator",
        "indexed_access_type": "IndexedAccessType",
        "tuple_type": "TupleType",
        "function_type": "FunctionType",
        "constructor_type": "ConstructorType",
        "conditional_type": "ConditionalType",
        "mapped_type": "MappedType",
        "typeof_type": "TypeQuery",
        "import_type": "ImportType",
        "template_type": "TemplateLiteralType",
        "infer_type": "InferType",
        "type_predicate": "TypePredicate",
    }

    def __init__(self) -> None:
        self._source = ""

    def parse(self, source: str) -> list[Declaration]:
        """
        Parse declaration source text.

        Args:
            source: The `.d.ts` source text

        Returns:
            Interface, enum and type alias declarations in source order.
            Other statements are parsed and dropped.

        Raises:
            DeclarationSyntaxError: If the source is not valid declaration syntax
        """
        try:
            tree = _lark_parser().parse(source)
        except UnexpectedInput as e:
            context = e.get_context(source).rstrip()
            raise DeclarationSyntaxError(f"invalid declaration source at line {e.line}, column {e.column}:\n{context}") from e

        self._source = source
        declarations: list[Declaration] = []
        for statement in _subtrees(tree):
            kind = statement.data
            if kind == "interface_decl":
                declarations.append(self._build_interface(statement))
            elif kind == "enum_decl":
                declarations.append(self._build_enum(statement))
            elif kind == "alias_decl":
                declarations.append(self._build_alias(statement))
        return declarations

    def _text(self, tree: Tree) -> str:
        return self._source[tree.meta.start_pos : tree.meta.end_pos]

    def _build_interface(self, tree: Tree) -> InterfaceDeclaration:
        heritage: tuple[HeritageType, ...] = ()
        heritage_clause = _find(tree, "heritage_clause")
        if heritage_clause is not None:
            heritage = tuple(self._build_heritage_type(t) for t in _subtrees(heritage_clause))

        body = _find(tree, "type_literal")
        return InterfaceDeclaration(
            name=_tokens(tree, "NAME")[0].value,
            text=self._text(tree),
            type_parameters=self._build_type_parameters(tree),
            heritage=heritage,
            members=self._build_members(body) if body is not None else (),
        )

    def _build_heritage_type(self, tree: Tree) -> HeritageType:
        return HeritageType(
            text=self._text(tree),
            name=".".join(token.value for token in _tokens(tree, "NAME")),
            type_arguments=self._build_type_arguments(tree),
        )

    def _build_enum(self, tree: Tree) -> EnumDeclaration:
        members = []
        for member in _subtrees(tree):
            key = _find(member, "plain_name")
            members.append(self._build_plain_name(key).text)
        return EnumDeclaration(
            name=_tokens(tree, "NAME")[0].value,
            text=self._text(tree),
            members=tuple(members),
        )

    def _build_alias(self, tree: Tree) -> TypeAliasDeclaration:
        return TypeAliasDeclaration(
            name=_tokens(tree, "NAME")[0].value,
            text=self._text(tree),
            type_parameters=self._build_type_parameters(tree),
            type=self._build_type(tree.children[-1]),
        )

    def _build_type_parameters(self, tree: Tree) -> tuple[str, ...]:
        params = _find(tree, "type_parameters")
        if params is None:
            return ()
        return tuple(_tokens(param, "NAME")[0].value for param in _subtrees(params))

    def _build_type_arguments(self, tree: Tree) -> tuple[TypeNode, ...]:
        args = _find(tree, "type_arguments")
        if args is None:
            return ()
        return tuple(self._build_type(arg) for arg in _subtrees(args))

    def _build_members(self, tree: Tree) -> tuple[Member, ...]:
        return tuple(self._build_member(member) for member in _subtrees(tree))

    def _build_member(self, tree: Tree) -> Member:
        text = self._text(tree)
        optional = bool(_tokens(tree, "OPTIONAL"))
        annotation = _find(tree, "type_annotation")
        annotated_type = self._build_type(annotation.children[0]) if annotation is not None else None

        if tree.data == "index_signature":
            key_type = next(child for child in _subtrees(tree) if child.data not in ("readonly_modifier", "type_annotation"))
            return IndexSignature(
                text=text,
                key_name=_tokens(tree, "NAME")[0].value,
                key_type=self._build_type(key_type),
                type=annotated_type,
            )

        if tree.data in ("method_signature", "call_signature"):
            returns = _find(tree, "return_annotation")
            return_type = self._build_type(returns.children[0]) if returns is not None else None
            if tree.data == "call_signature":
                return CallSignature(text=text, return_type=return_type)
            return MethodSignature(text=text, name=self._build_member_name(tree), return_type=return_type)

        return PropertySignature(
            text=text,
            name=self._build_member_name(tree),
            type=annotated_type,
            optional=optional,
            readonly=_find(tree, "readonly_modifier") is not None,
        )

    def _build_member_name(self, tree: Tree) -> MemberName:
        plain = _find(tree, "plain_name")
        if plain is not None:
            return self._build_plain_name(plain)

        computed = _find(tree, "computed_name")
        parts = _tokens(computed, "NAME")
        if len(parts) == 2 and len(computed.children) == 2:
            return KindKeyedName(namespace=parts[0].value, member=parts[1].value)
        return ComputedName(text=self._text(computed))

    def _build_plain_name(self, tree: Tree) -> PropertyName:
        token = tree.children[0]
        if token.type == "STRING":
            return PropertyName(text=_decode_string(token))
        return PropertyName(text=token.value)

    def _build_type(self, tree: Tree) -> TypeNode:
        """
        Build a type node from a type expression subtree.

        Args:
            tree: Any subtree produced by the `type` grammar rule

        Returns:
            The matching TypeNode; forms with no schema translation become
            UnsupportedType so that later phases can report them.
        """
        kind = tree.data
        text = self._text(tree)

        if kind == "union_type":
            return UnionType(text=text, members=tuple(self._build_type(member) for member in _subtrees(tree)))

        if kind == "array_type":
            return ArrayType(text=text, element=self._build_type(tree.children[0]))

        if kind == "parenthesized_type":
            return ParenthesizedType(text=text, inner=self._build_type(tree.children[0]))

        if kind == "literal_type":
            return self._build_literal(tree, text)

        if kind == "type_reference":
            return self._build_type_reference(tree, text)

        if kind == "type_literal":
            return TypeLiteral(text=text, members=self._build_members(tree))

        return UnsupportedType(text=text, kind=self.UNSUPPORTED_KINDS.get(kind, str(kind)))

    def _build_literal(self, tree: Tree, text: str) -> LiteralType:
        token = tree.children[-1]
        if token.type == "STRING":
            return LiteralType(text=text, kind="string", value=_decode_string(token))
        if token.value.endswith("n"):
            return LiteralType(text=text, kind="bigint", value=text)
        return LiteralType(text=text, kind="number", value=text)

    def _build_type_reference(self, tree: Tree, text: str) -> TypeNode:
        names = [token.value for token in _tokens(tree, "NAME")]
        type_arguments = self._build_type_arguments(tree)

        if len(names) > 1:
            return QualifiedReference(text=text, namespace=".".join(names[:-1]), member=names[-1])

        name = names[0]
        if not type_arguments:
            if name in ("true", "false"):
                return LiteralType(text=text, kind="boolean", value=name == "true")
            if name == "null":
                return LiteralType(text=text, kind="null", value=None)
            if name in self.KEYWORD_TYPES:
                return KeywordType(text=text, keyword=name)

        return TypeReference(text=text, name=name, type_arguments=type_arguments)
