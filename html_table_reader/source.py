"""
Document Source

Resolves a location string to a URL, fetches its bytes from the local
filesystem or over HTTP(S), and parses them into a BeautifulSoup document.
"""

from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse
from urllib.request import url2pathname
import logging

import requests
from bs4 import BeautifulSoup

from .config import ReaderConfig
from .errors import InvalidLocationError, FetchError, ParseError
from .parsers.html_parser import HtmlParser

HTTP_SCHEMES = ("http", "https")


def resolve_location(location: Optional[str]) -> str:
    """Normalize a URL or filesystem path into a URL.

    Bare paths (no scheme, or a Windows drive letter) become ``file:`` URLs.

    Raises:
        InvalidLocationError: If the location is missing or not a usable URL
    """
    if location is None:
        raise InvalidLocationError("Location must not be None")
    if not isinstance(location, str) or not location.strip():
        raise InvalidLocationError(f"Malformed location: '{location}'", location=str(location))

    location = location.strip()
    try:
        parsed = urlparse(location)
    except ValueError as e:
        raise InvalidLocationError(f"Malformed location: '{location}'", location=location) from e

    scheme = parsed.scheme.lower()

    if not scheme or len(scheme) == 1:
        return Path(location).expanduser().resolve().as_uri()

    if scheme in HTTP_SCHEMES:
        if not parsed.netloc:
            raise InvalidLocationError(f"Malformed URL: '{location}'", location=location)
        return location

    if scheme == "file":
        if not parsed.path:
            raise InvalidLocationError(f"Malformed file URL: '{location}'", location=location)
        return location

    raise InvalidLocationError(
        f"Unsupported URL scheme '{parsed.scheme}' in '{location}'", location=location
    )


class DocumentSource:
    """Fetches and parses HTML documents for a resolved location."""

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self.html_parser = HtmlParser(self.config.parser)
        self.logger = logging.getLogger(__name__)

    def load(self, url: str) -> BeautifulSoup:
        """Fetch ``url`` and parse it as HTML.

        Raises:
            FetchError: If the content cannot be read
            ParseError: If no HTML parser accepts the content
        """
        content = self.fetch(url)
        try:
            soup = self.html_parser.parse_html(content)
        except ParseError as e:
            e.location = url
            raise
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Parsed {url}: {self.html_parser.describe(soup)}")
        return soup

    def fetch(self, url: str) -> Union[str, bytes]:
        """Read the raw content behind ``url``."""
        if urlparse(url).scheme.lower() == "file":
            return self._read_file(url)
        return self._fetch_http(url)

    def _read_file(self, url: str) -> str:
        parsed = urlparse(url)
        path = Path(url2pathname(parsed.path))
        self.logger.debug(f"Reading local file {path} as {self.config.charset}")

        try:
            return path.read_bytes().decode(self.config.charset)
        except OSError as e:
            raise FetchError(f"Cannot read {url}", location=url) from e
        except UnicodeDecodeError as e:
            raise FetchError(
                f"Cannot decode {url} as {self.config.charset}", location=url
            ) from e

    def _fetch_http(self, url: str) -> Union[str, bytes]:
        self.logger.debug(f"Fetching {url}")

        try:
            with requests.Session() as session:
                session.headers.update({"User-Agent": self.config.user_agent})
                response = session.get(
                    url, timeout=self.config.request_timeout, allow_redirects=True
                )
        except requests.exceptions.RequestException as e:
            error_msg = f"Cannot read {url}"
            self.logger.error(f"{error_msg}: {e}")
            raise FetchError(error_msg, location=url) from e

        if response.status_code >= 400:
            error_msg = f"HTTP {response.status_code} when fetching {url}"
            self.logger.error(error_msg)
            raise FetchError(
                error_msg,
                location=url,
                status_code=response.status_code,
                details={"body": response.text[:500] if response.text else None},
            )

        self.logger.debug(f"Fetched {len(response.content)} bytes from {url}")

        # Without a declared charset, let the parser sniff the encoding from the bytes
        content_type = response.headers.get("Content-Type", "")
        if "charset" in content_type.lower():
            return response.text
        return response.content
