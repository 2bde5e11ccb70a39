"""
HTML Parser Manager

This module provides HTML parsing with parser fallback so that documents
can be read with whichever BeautifulSoup tree builder is installed.
"""

from typing import Optional, List, Dict, Any, Union
import logging
from bs4 import BeautifulSoup, FeatureNotFound

from ..errors import ParseError

PREFERRED_PARSERS = ["lxml", "html.parser", "html5lib"]


class HtmlParser:
    """HTML parsing manager with fallback detection.

    Tries the available tree builders in order of preference and returns
    the first document that parses.
    """

    def __init__(self, parser: Optional[str] = None):
        """Initialize HTML parser.

        Args:
            parser: Specific parser to use instead of the fallback chain
        """
        self.logger = logging.getLogger(__name__)
        self.requested_parser = parser
        self.available_parsers = self._detect_available_parsers()

    def parse_html(
        self,
        content: Union[str, bytes],
        parser: Optional[str] = None
    ) -> BeautifulSoup:
        """Parse HTML content into a navigable document.

        Args:
            content: HTML content to parse
            parser: Specific parser to use (overrides the instance setting)

        Returns:
            BeautifulSoup parsed document

        Raises:
            ParseError: If parsing fails with all candidate parsers
        """
        parser = parser or self.requested_parser
        if parser:
            self.logger.debug(f"Parsing HTML with requested parser: {parser}")
            try:
                return BeautifulSoup(content, parser)
            except FeatureNotFound as e:
                raise ParseError(
                    f"Requested parser {parser} is not installed",
                    details={"available_parsers": self.available_parsers},
                ) from e

        return self._parse_html_with_fallback(content)

    def _detect_available_parsers(self) -> List[str]:
        """Detect which HTML parsers are available on the system.

        Returns:
            List of available parser names in order of preference
        """
        parsers = []

        for name in PREFERRED_PARSERS:
            try:
                BeautifulSoup("<html></html>", name)
            except FeatureNotFound:
                self.logger.debug(f"Parser {name} is not installed")
                continue
            parsers.append(name)

        return parsers

    def _parse_html_with_fallback(self, html_content: Union[str, bytes]) -> BeautifulSoup:
        """Parse HTML content using best available parser with fallbacks.

        Raises:
            ParseError: If all parsers fail
        """
        last_error = None

        for parser in self.available_parsers:
            try:
                self.logger.debug(f"Attempting to parse HTML with {parser} parser")
                soup = BeautifulSoup(html_content, parser)
            except Exception as e:
                self.logger.debug(f"Parser {parser} failed: {e}")
                last_error = e
                continue

            self.logger.debug(f"Successfully parsed HTML with {parser} parser")
            return soup

        error_msg = f"All HTML parsers failed. Last error: {last_error}"
        self.logger.error(error_msg)
        raise ParseError(
            error_msg,
            details={"available_parsers": self.available_parsers, "last_error": str(last_error)},
        )

    def describe(self, soup: BeautifulSoup) -> Dict[str, Any]:
        """Summarize page structure for debugging.

        Args:
            soup: Parsed BeautifulSoup document

        Returns:
            Dictionary containing page metadata
        """
        title = soup.find("title")
        return {
            "title": title.get_text(strip=True) if title else None,
            "table_count": len(soup.find_all("table")),
            "row_count": len(soup.find_all("tr")),
        }
