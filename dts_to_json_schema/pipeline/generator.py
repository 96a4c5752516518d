"""
Pipeline generator: declaration source text to JSON Schema text.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .analyzer.resolver import Resolver
from .assembler import SchemaAssembler
from .config import GeneratorConfig
from .declarations.table import DeclarationTable

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Runs parse, resolve and assemble for one declaration source."""

    def __init__(self, source: str, config: GeneratorConfig | None = None):
        self.source = source
        self.config = config or GeneratorConfig()
        self.table: DeclarationTable | None = None
        self.resolver: Resolver | None = None

    def build(self) -> dict[str, Any]:
        """Produce the schema document as a dictionary."""
        self.table = DeclarationTable.from_source(self.source)
        logger.debug("indexed %d declarations", len(self.table))

        self.resolver = Resolver(self.table, self.config)
        definitions = self.resolver.resolve()
        logger.info(
            "resolved %d definitions, %d missing",
            len(definitions),
            len(self.resolver.missing),
        )

        return SchemaAssembler(self.config).assemble(definitions)

    def generate(self) -> str:
        """Produce the schema document as JSON text."""
        return json.dumps(self.build(), indent=self.config.indent, ensure_ascii=False) + "\n"

    @property
    def missing(self) -> list[str]:
        return list(self.resolver.missing) if self.resolver is not None else []
