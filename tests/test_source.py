"""
Tests for source document access

Run with: pytest tests/test_source.py -v
"""

import pytest
import requests

from dicomdict import source
from dicomdict.exceptions import DictionaryReadError
from dicomdict.source import is_remote, open_source


class FakeResponse:

    def __init__(self, body: bytes, status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]

    def close(self):
        self.closed = True


class TestLocation:

    @pytest.mark.parametrize("location,expected", [
        ("http://dicom.nema.org/medical/dicom/current/source/docbook/part06/part06.xml", True),
        ("https://example.org/part06.xml", True),
        ("part06.xml", False),
        ("/tmp/http/part06.xml", False),
    ])
    def test_is_remote(self, location, expected):
        assert is_remote(location) is expected


class TestLocalSource:

    def test_reads_chunks(self, sample_path, sample_document):
        with open_source(str(sample_path), chunk_size=100) as chunks:
            data = list(chunks)
        assert b"".join(data) == sample_document
        assert all(len(chunk) <= 100 for chunk in data)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryReadError) as excinfo:
            with open_source(str(tmp_path / "missing.xml")):
                pass
        assert "missing.xml" in excinfo.value.message


class TestRemoteSource:

    def test_streams_response(self, monkeypatch):
        calls = []
        response = FakeResponse(b"<book/>" * 10)

        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            return response

        monkeypatch.setattr(source.requests, "get", fake_get)
        with open_source("https://example.org/part06.xml", chunk_size=7, timeout=5) as chunks:
            assert b"".join(chunks) == b"<book/>" * 10

        assert calls == [("https://example.org/part06.xml", {"stream": True, "timeout": 5})]
        assert response.closed

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(source.requests, "get", lambda url, **kwargs: FakeResponse(b"", 404))
        with pytest.raises(DictionaryReadError) as excinfo:
            with open_source("https://example.org/part06.xml"):
                pass
        assert isinstance(excinfo.value.__cause__, requests.HTTPError)

    def test_connection_error(self, monkeypatch):
        def fake_get(url, **kwargs):
            raise requests.ConnectionError("name resolution failed")

        monkeypatch.setattr(source.requests, "get", fake_get)
        with pytest.raises(DictionaryReadError):
            with open_source("http://dicom.nema.org/part06.xml"):
                pass
