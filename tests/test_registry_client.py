"""Tests for registry fetching and body decompression."""

import gzip
import json
import zlib

import pytest
import requests

from nuget_audit.errors import DecodeError, DecompressionError, FetchError, HttpStatusError, NetworkError
from nuget_audit.registry.client import RegistryClient, decode_body

URL = "https://registry.test/v3/registration/newtonsoft.json/index.json"
PAYLOAD = json.dumps({"count": 1, "items": [{"@id": "https://registry.test/page1", "lower": "12.0.0", "upper": "14.0.0"}]})


def test_gzip_body_matches_uncompressed_payload(settings, session):
    session.add(URL, gzip.compress(PAYLOAD.encode()), headers={"Content-Encoding": "gzip"})
    session.add(URL + "?plain", PAYLOAD)
    client = RegistryClient(settings, session=session)
    assert client.fetch_json(URL) == client.fetch_json(URL + "?plain") == PAYLOAD


def test_deflate_body_is_inflated(settings, session):
    session.add(URL, zlib.compress(PAYLOAD.encode()), headers={"Content-Encoding": "deflate"})
    assert RegistryClient(settings, session=session).fetch_json(URL) == PAYLOAD


def test_raw_deflate_body_is_inflated():
    compressor = zlib.compressobj(wbits=-zlib.MAX_WBITS)
    raw = compressor.compress(PAYLOAD.encode()) + compressor.flush()
    assert decode_body(raw, "deflate") == PAYLOAD


def test_unknown_encoding_is_passed_through():
    assert decode_body(PAYLOAD.encode(), "identity") == PAYLOAD
    assert decode_body(PAYLOAD.encode(), None) == PAYLOAD


def test_corrupt_gzip_is_a_fetch_error(settings, session):
    session.add(URL, b"definitely not gzip", headers={"Content-Encoding": "gzip"})
    with pytest.raises(DecompressionError) as excinfo:
        RegistryClient(settings, session=session).fetch_json(URL)
    assert isinstance(excinfo.value, FetchError)
    assert isinstance(excinfo.value, DecodeError)
    assert excinfo.value.url == URL


def test_http_error_status_is_raised(settings, session):
    with pytest.raises(HttpStatusError) as excinfo:
        RegistryClient(settings, session=session).fetch_json(URL)
    assert excinfo.value.status_code == 404
    assert excinfo.value.url == URL


def test_network_error_is_raised(settings, session):
    session.routes[URL] = requests.Timeout("timed out")
    with pytest.raises(NetworkError):
        RegistryClient(settings, session=session).fetch_json(URL)


def test_fetch_document_parses_json(settings, session):
    session.add(URL, gzip.compress(PAYLOAD.encode()), headers={"Content-Encoding": "gzip"})
    document = RegistryClient(settings, session=session).fetch_document(URL)
    assert document["items"][0]["lower"] == "12.0.0"


def test_fetch_document_rejects_invalid_json(settings, session):
    session.add(URL, "<html>oops</html>")
    with pytest.raises(DecodeError):
        RegistryClient(settings, session=session).fetch_document(URL)
