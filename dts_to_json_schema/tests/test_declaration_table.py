#!/usr/bin/env python3

import pytest

from dts_to_json_schema.pipeline.declarations import (
    Declaration,
    DeclarationTable,
    EnumDeclaration,
    InterfaceDeclaration,
    TypeAliasDeclaration,
)


class TestDeclarationTable:
    """Test cases for declaration indexing"""

    def test_from_source_indexes_all_kinds(self):
        table = DeclarationTable.from_source(
            """
            export declare interface A { x: string; }
            export declare enum B { One = "One" }
            export declare type C = A | B;
            declare const d: string;
            """
        )
        assert table.names() == ["A", "B", "C"]
        assert len(table) == 3
        assert isinstance(table.lookup("A"), InterfaceDeclaration)
        assert isinstance(table.lookup("B"), EnumDeclaration)
        assert isinstance(table.lookup("C"), TypeAliasDeclaration)
        assert "d" not in table

    def test_lookup_unknown_name(self):
        table = DeclarationTable.from_source("type A = string;")
        assert table.lookup("Missing") is None
        assert "Missing" not in table
        assert "A" in table

    def test_last_declaration_wins(self):
        table = DeclarationTable.from_source(
            """
            interface Dup { first: string; }
            type Dup = number;
            """
        )
        assert len(table) == 1
        assert isinstance(table.lookup("Dup"), TypeAliasDeclaration)

    def test_other_declarations_are_skipped(self):
        table = DeclarationTable([Declaration(name="Plain"), EnumDeclaration(name="E", members=("X",))])
        assert table.names() == ["E"]

    def test_empty_source(self):
        table = DeclarationTable.from_source("")
        assert len(table) == 0


if __name__ == "__main__":
    pytest.main([__file__])
