"""
Pipeline - TypeScript declarations to JSON Schema generator.

This module turns `.d.ts` declarations into a JSON Schema document in
three phases:

1. Phase 1 (Parser): Parse declaration source into declaration nodes
2. Phase 2 (Analyzer): Resolve requested names and translate type nodes
3. Phase 3 (Assembler): Wrap the sorted definitions in the schema envelope
"""

from __future__ import annotations

from .config import DEFAULT_SOURCE_URL, GeneratorConfig
from .errors import SchemaGenerationError
from .generator import PipelineGenerator
from .source import load_source
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "DEFAULT_SOURCE_URL",
    "SchemaGenerationError",
    "AtomicWriter",
    "load_source",
]
