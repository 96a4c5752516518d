"""
Configuration for the schema generator pipeline.

Defaults reproduce the schema published for the typescript-eslint
`ast-spec.d.ts` declarations.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ConfigurationError

DEFAULT_SOURCE_URL = "https://unpkg.com/@typescript-eslint/types@5.41.0/dist/generated/ast-spec.d.ts"

# Accepted values of GeneratorConfig.empty_union
EMPTY_UNION_POLICIES = ("error", "any", "empty")


@dataclass
class GeneratorConfig:
    """Configuration options for schema generation."""

    # Names requested before resolution starts
    root_names: list[str] = field(default_factory=lambda: ["Program", "BaseNode", "BaseToken", "PunctuatorTokenToText"])

    # Definition whose fields are merged at the top level of the document
    root_name: str = "Program"

    # Value of the "$schema" key
    schema_uri: str = "http://json-schema.org/schema#"

    # Union members dropped from "oneOf" alternatives (matched on source text)
    excluded_union_members: list[str] = field(default_factory=lambda: ["RegExp", "RegExpLiteral", "BigIntLiteral"])

    # Base interfaces not flattened into "allOf"
    marker_bases: list[str] = field(default_factory=lambda: ["NodeOrTokenData", "BaseNode", "BaseToken"])

    # Namespaces whose members are node/token kind constants (AST_NODE_TYPES.Program)
    kind_namespaces: list[str] = field(default_factory=lambda: ["AST_NODE_TYPES", "AST_TOKEN_TYPES"])

    # Namespaces allowed in computed property keys ([SyntaxKind.OpenBraceToken])
    kind_key_namespaces: list[str] = field(default_factory=lambda: ["SyntaxKind"])

    # Name of the string-literal extraction form ValueOf<T>
    value_of_name: str = "ValueOf"

    # What a union becomes when all its members are excluded: "error", "any" or "empty"
    empty_union: str = "error"

    # Maximum nesting of type expressions before translation aborts
    max_depth: int = 200

    # JSON indentation of the written document
    indent: int = 2

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Reject option values the generator cannot act on."""
        if self.empty_union not in EMPTY_UNION_POLICIES:
            expected = ", ".join(repr(p) for p in EMPTY_UNION_POLICIES)
            raise ConfigurationError(f"unknown empty_union policy {self.empty_union!r}, expected one of {expected}")

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        config.validate()
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "root_names": self.root_names,
            "root_name": self.root_name,
            "schema_uri": self.schema_uri,
            "excluded_union_members": self.excluded_union_members,
            "marker_bases": self.marker_bases,
            "kind_namespaces": self.kind_namespaces,
            "kind_key_namespaces": self.kind_key_namespaces,
            "value_of_name": self.value_of_name,
            "empty_union": self.empty_union,
            "max_depth": self.max_depth,
            "indent": self.indent,
        }
