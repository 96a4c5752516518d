#!/usr/bin/env python3

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dts_to_json_schema.dts_to_json_schema import dts_to_json_schema

SAMPLE = Path(__file__).parent / "test_data" / "ast_spec_sample.d.ts"


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Test cases for the command line entry point"""

    def test_generate(self, runner, tmp_path):
        output = tmp_path / "ast-spec.json"
        result = runner.invoke(dts_to_json_schema, [str(SAMPLE), str(output)])

        assert result.exit_code == 0, result.output
        assert "done" in result.output
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["$schema"] == "http://json-schema.org/schema#"
        assert "Program" not in document["definitions"]

    def test_root_and_seed(self, runner, tmp_path):
        output = tmp_path / "identifier.json"
        result = runner.invoke(
            dts_to_json_schema,
            ["--root", "Identifier", "--seed", "Identifier", str(SAMPLE), str(output)],
        )

        assert result.exit_code == 0, result.output
        document = json.loads(output.read_text(encoding="utf-8"))
        assert list(document["definitions"]) == ["Range"]
        assert list(document["properties"]) == ["type", "name", "optional", "range"]

    def test_config_file(self, runner, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(
            json.dumps(
                {
                    "root_names": ["StringLiteral"],
                    "root_name": "StringLiteral",
                    "schema_uri": "http://json-schema.org/draft-07/schema#",
                    "indent": 4,
                    "unknown_option": True,
                }
            )
        )
        output = tmp_path / "out" / "literal.json"
        result = runner.invoke(dts_to_json_schema, ["-c", str(config), str(SAMPLE), str(output)])

        assert result.exit_code == 0, result.output
        text = output.read_text(encoding="utf-8")
        assert text.startswith('{\n    "$schema": "http://json-schema.org/draft-07/schema#"')
        document = json.loads(text)
        assert document["allOf"][0] == {"$ref": "#/definitions/LiteralBase"}
        assert list(document["definitions"]) == ["LiteralBase"]

    def test_invalid_config_value(self, runner, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"empty_union": "ignore"}))
        output = tmp_path / "out.json"
        result = runner.invoke(dts_to_json_schema, ["-c", str(config), str(SAMPLE), str(output)])

        assert result.exit_code == 1
        assert "unknown empty_union policy 'ignore'" in result.output
        assert not output.exists()

    def test_syntax_error_writes_nothing(self, runner, tmp_path):
        source = tmp_path / "broken.d.ts"
        source.write_text("export declare interface {\n")
        output = tmp_path / "broken.json"
        result = runner.invoke(dts_to_json_schema, [str(source), str(output)])

        assert result.exit_code == 1
        assert "invalid declaration source" in result.output
        assert not output.exists()
        assert list(tmp_path.iterdir()) == [source]

    def test_missing_root(self, runner, tmp_path):
        output = tmp_path / "nope.json"
        result = runner.invoke(dts_to_json_schema, ["--root", "Nope", str(SAMPLE), str(output)])

        assert result.exit_code == 1
        assert "no definition for root declaration Nope" in result.output
        assert not output.exists()

    def test_unreadable_source(self, runner, tmp_path):
        result = runner.invoke(dts_to_json_schema, [str(tmp_path / "absent.d.ts"), str(tmp_path / "out.json")])

        assert result.exit_code == 1
        assert "cannot read" in result.output


if __name__ == "__main__":
    pytest.main([__file__])
