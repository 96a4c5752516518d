"""
Schema assembler: wraps resolved definitions into the final document.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .analyzer.translator import SchemaFragment
from .config import GeneratorConfig
from .errors import MissingRootError


class SchemaAssembler:
    """Builds the JSON Schema envelope around the definitions map."""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()

    def assemble(self, definitions: Mapping[str, SchemaFragment]) -> dict[str, Any]:
        """
        Assemble the output document.

        The root definition is taken out of the map and its own keys
        (`type`, `properties`, `required` or `allOf`) are merged at the top
        level. The remaining definitions are emitted sorted by name.

        Args:
            definitions: Resolved definitions, root included

        Returns:
            The JSON Schema document

        Raises:
            MissingRootError: If the root name has no definition
        """
        remaining = dict(definitions)
        root = remaining.pop(self.config.root_name, None)
        if root is None:
            raise MissingRootError(f"no definition for root declaration {self.config.root_name}")

        return {
            "$schema": self.config.schema_uri,
            "definitions": {name: remaining[name] for name in sorted(remaining)},
            **root,
        }
