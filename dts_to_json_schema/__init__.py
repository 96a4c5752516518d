"""TypeScript Declarations to JSON Schema

A Python package for generating a JSON Schema document from TypeScript
interface, enum and type alias declarations, such as the typescript-eslint
AST specification.
"""

__version__ = "0.1.0"

from .pipeline import (
    DEFAULT_SOURCE_URL,
    AtomicWriter,
    GeneratorConfig,
    PipelineGenerator,
    SchemaGenerationError,
    load_source,
)

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "DEFAULT_SOURCE_URL",
    "SchemaGenerationError",
    "AtomicWriter",
    "load_source",
]
