"""
Analyzer module.

Contains the resolution worklist and the type-node translator.
"""

from __future__ import annotations

from .resolver import Resolver
from .translator import SchemaFragment, TypeTranslator, schema_ref

__all__ = [
    "Resolver",
    "TypeTranslator",
    "SchemaFragment",
    "schema_ref",
]
