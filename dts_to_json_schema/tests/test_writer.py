#!/usr/bin/env python3

import pytest

from dts_to_json_schema.pipeline.errors import OutputWriteError
from dts_to_json_schema.pipeline.writer import AtomicWriter

VALID = '{"$schema": "http://json-schema.org/schema#", "definitions": {}}\n'


class TestAtomicWriter:
    """Test cases for atomic schema writes"""

    def test_write_new_file(self, tmp_path):
        target = tmp_path / "nested" / "schema.json"
        AtomicWriter().write(target, VALID)
        assert target.read_text(encoding="utf-8") == VALID
        assert [p.name for p in target.parent.iterdir()] == ["schema.json"]

    def test_replace_existing_file(self, tmp_path):
        target = tmp_path / "schema.json"
        target.write_text("old")
        AtomicWriter().write(target, VALID)
        assert target.read_text(encoding="utf-8") == VALID

    @pytest.mark.parametrize(
        "content,message",
        [
            ("{not json", "not valid JSON"),
            ("[]", "missing the \\$schema key"),
            ('{"definitions": {}}', "missing the \\$schema key"),
        ],
    )
    def test_invalid_content_keeps_previous_file(self, tmp_path, content, message):
        target = tmp_path / "schema.json"
        target.write_text("old")

        with pytest.raises(OutputWriteError, match=message):
            AtomicWriter().write(target, content)

        assert target.read_text() == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["schema.json"]

    def test_skip_validation(self, tmp_path):
        target = tmp_path / "schema.json"
        AtomicWriter().write(target, "anything", validate=False)
        assert target.read_text(encoding="utf-8") == "anything"

    def test_custom_validator(self, tmp_path):
        seen = []
        AtomicWriter(validate=seen.append).write(tmp_path / "out.txt", "text")
        assert seen == ["text"]

    def test_failing_custom_validator_leaves_no_staged_file(self, tmp_path):
        def reject(content):
            raise ValueError("rejected")

        target = tmp_path / "schema.json"
        with pytest.raises(ValueError, match="rejected"):
            AtomicWriter(validate=reject).write(target, VALID)

        assert list(tmp_path.iterdir()) == []

    def test_unicode_content(self, tmp_path):
        target = tmp_path / "schema.json"
        content = '{"$schema": "x", "enum": ["→"]}'
        AtomicWriter().write(target, content)
        assert target.read_text(encoding="utf-8") == content


if __name__ == "__main__":
    pytest.main([__file__])
