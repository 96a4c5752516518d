#!/usr/bin/env python3

from pathlib import Path

import pytest
import requests

from dts_to_json_schema.pipeline import source
from dts_to_json_schema.pipeline.config import DEFAULT_SOURCE_URL
from dts_to_json_schema.pipeline.errors import SourceLoadError


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class TestIsUrl:
    @pytest.mark.parametrize("location", [DEFAULT_SOURCE_URL, "http://example.com/a.d.ts"])
    def test_urls(self, location):
        assert source.is_url(location)

    @pytest.mark.parametrize("location", ["ast-spec.d.ts", "/tmp/ast-spec.d.ts", "ftp://host/a.d.ts", Path("a.d.ts")])
    def test_local_paths(self, location):
        assert not source.is_url(location)


class TestLoadSource:
    """Test cases for reading declaration source"""

    def test_local_file(self, tmp_path):
        path = tmp_path / "decl.d.ts"
        path.write_text("type A = string;", encoding="utf-8")
        assert source.load_source(path) == "type A = string;"
        assert source.load_source(str(path)) == "type A = string;"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceLoadError, match="cannot read"):
            source.load_source(tmp_path / "absent.d.ts")

    def test_fetch(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse("type A = string;")

        monkeypatch.setattr(source.requests, "get", fake_get)
        assert source.load_source(DEFAULT_SOURCE_URL, timeout=5) == "type A = string;"
        assert calls == [(DEFAULT_SOURCE_URL, 5)]

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(source.requests, "get", lambda url, timeout: FakeResponse("", status_code=404))
        with pytest.raises(SourceLoadError, match="cannot fetch"):
            source.load_source(DEFAULT_SOURCE_URL)

    def test_connection_error(self, monkeypatch):
        def fake_get(url, timeout):
            raise requests.ConnectionError("unreachable")

        monkeypatch.setattr(source.requests, "get", fake_get)
        with pytest.raises(SourceLoadError, match="unreachable"):
            source.load_source(DEFAULT_SOURCE_URL)


if __name__ == "__main__":
    pytest.main([__file__])
