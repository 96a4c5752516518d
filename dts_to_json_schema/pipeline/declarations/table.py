"""
Declaration table: top-level declarations indexed by name.
"""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import Declaration, EnumDeclaration, InterfaceDeclaration, TypeAliasDeclaration
from .parser import DeclarationParser


class DeclarationTable:
    """Read-only lookup of interface, enum and type alias declarations by name."""

    INDEXED_KINDS = (InterfaceDeclaration, EnumDeclaration, TypeAliasDeclaration)

    def __init__(self, declarations: Iterable[Declaration] = ()):
        self._declarations: dict[str, Declaration] = {}
        for declaration in declarations:
            if not isinstance(declaration, self.INDEXED_KINDS):
                continue
            # Last declaration wins on a name collision
            self._declarations[declaration.name] = declaration

    @classmethod
    def from_source(cls, source: str) -> DeclarationTable:
        """Parse declaration source text and index the result."""
        return cls(DeclarationParser().parse(source))

    def lookup(self, name: str) -> Declaration | None:
        return self._declarations.get(name)

    def names(self) -> list[str]:
        return list(self._declarations)

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)
