"""HTTP access to the NuGet registration API.

The ``registration5-gz-semver2`` hive serves gzip-compressed JSON. Bodies are
read from the transport undecoded and decompressed here exactly once, based on
the declared ``Content-Encoding``.
"""

from __future__ import annotations

import gzip
import json
import logging
import zlib
from typing import Any

import requests
import urllib3
from requests import Response

from ..config import Settings
from ..errors import DecodeError, DecompressionError, HttpStatusError, NetworkError

logger = logging.getLogger(__name__)


def _inflate(content: bytes) -> bytes:
    # HTTP "deflate" is meant to be zlib-wrapped, but raw streams are common.
    try:
        return zlib.decompress(content)
    except zlib.error:
        return zlib.decompress(content, -zlib.MAX_WBITS)


def decode_body(content: bytes, encoding: str | None) -> str:
    """Decompress ``content`` according to a Content-Encoding value and decode UTF-8.

    Raises:
        DecompressionError: if the body does not match its declared encoding.
    """
    tokens = [token.strip().lower() for token in (encoding or "").split(",") if token.strip()]
    try:
        if "gzip" in tokens or "x-gzip" in tokens:
            content = gzip.decompress(content)
        elif "deflate" in tokens:
            content = _inflate(content)
    except (OSError, EOFError, zlib.error) as exc:
        raise DecompressionError(f"Failed to decompress {encoding} body: {exc}") from exc

    return content.decode("utf-8-sig", errors="replace")


def _read_raw(response: Response) -> bytes:
    # urllib3 would otherwise decode the body transparently.
    return response.raw.read(decode_content=False)


class RegistryClient:
    """Single point of HTTP access to the package registry."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": settings.user_agent,
                "Accept-Encoding": "gzip, deflate",
            }
        )

    def fetch_json(self, url: str) -> str:
        """Return the JSON document at ``url`` as text.

        Raises:
            NetworkError, HttpStatusError: when the request does not succeed.
            DecompressionError: when the body cannot be decompressed.
        """
        logger.debug("Reading from url: %s", url)
        try:
            response = self.session.get(url, timeout=self.settings.timeout, stream=True)
        except requests.RequestException as exc:
            raise NetworkError(f"Failed to reach {url}: {exc}", url=url) from exc

        with response:
            if not response.ok:
                raise HttpStatusError(
                    f"Unexpected status code {response.status_code} fetching {url}",
                    url=url,
                    status_code=response.status_code,
                )
            try:
                raw = _read_raw(response)
            except (requests.RequestException, urllib3.exceptions.HTTPError) as exc:
                raise NetworkError(f"Failed to read body from {url}: {exc}", url=url) from exc
            encoding = response.headers.get("Content-Encoding")

        try:
            return decode_body(raw, encoding)
        except DecompressionError as exc:
            raise DecompressionError(f"{exc} ({url})", url=url) from exc

    def fetch_document(self, url: str) -> Any:
        """Fetch ``url`` and parse it as JSON."""
        text = self.fetch_json(url)
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Invalid JSON from {url}: {exc.msg}") from exc
