"""
Resolver: demand-driven worklist of declaration names.

Starting from the configured root names, the resolver translates each
requested declaration exactly once. Translating one declaration may request
others; references always become `$ref` pointers, so recursive and mutually
recursive declarations terminate.
"""

from __future__ import annotations

import logging

from ..config import GeneratorConfig
from ..declarations.nodes import Declaration, EnumDeclaration, InterfaceDeclaration, TypeAliasDeclaration
from ..declarations.table import DeclarationTable
from ..errors import UnexpectedDeclarationError
from .translator import SchemaFragment, TypeTranslator, schema_ref

logger = logging.getLogger(__name__)


class Resolver:
    """Owns the pending names and the definitions map for one run."""

    def __init__(self, table: DeclarationTable, config: GeneratorConfig | None = None):
        self.table = table
        self.config = config or GeneratorConfig()
        self.definitions: dict[str, SchemaFragment] = {}
        self.missing: list[str] = []
        self._pending: list[str] = []
        self._requested: set[str] = set()
        self.translator = TypeTranslator(table, self.request, self.config)

        seeds = list(self.config.root_names)
        if self.config.root_name not in seeds:
            seeds.insert(0, self.config.root_name)
        for name in seeds:
            self.request(name)

    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(self._pending)

    @property
    def requested(self) -> frozenset[str]:
        return frozenset(self._requested)

    def request(self, name: str, requester: str | None = None) -> SchemaFragment:
        """
        Ask for a declaration to be translated.

        Names already pending, in progress, resolved or reported missing are
        not queued again. The reference is returned either way.
        """
        if name not in self._requested:
            logger.debug("%s requested by %s", name, requester or "<root>")
            self._requested.add(name)
            self._pending.append(name)
        return schema_ref(name)

    def resolve(self) -> dict[str, SchemaFragment]:
        """
        Drain the worklist.

        Returns:
            The definitions map, in resolution order
        """
        while self._pending:
            name = self._pending.pop()
            declaration = self.table.lookup(name)
            if declaration is None:
                logger.warning("missing declaration for %s", name)
                self.missing.append(name)
                continue

            logger.debug("resolving %s", name)
            self.definitions[name] = self._translate_declaration(name, declaration)

        return self.definitions

    def _translate_declaration(self, name: str, declaration: Declaration) -> SchemaFragment:
        if isinstance(declaration, InterfaceDeclaration):
            return self.translator.translate(name, declaration)

        if isinstance(declaration, TypeAliasDeclaration):
            return self.translator.translate(name, declaration.type)

        if isinstance(declaration, EnumDeclaration):
            return {"type": "string", "enum": list(declaration.members)}

        raise UnexpectedDeclarationError(f"unexpected declaration type {type(declaration).__name__} for {name}")
