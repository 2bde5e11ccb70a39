"""
Table Locator

Finds the one table in a parsed document that a reader works with, either
through an explicit CSS selector or, when none is given, by picking the
densest table in the document.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from .cursor import CellFilter
from .errors import NoTableFoundError, SelectionError


def score_table(table: Tag) -> int:
    """Score a table as rows x cells in its first row.

    A table without rows scores 0.
    """
    rows = table.select("tr")
    if not rows:
        return 0
    return len(rows) * len(rows[0].select(CellFilter.EITHER.value))


class TableLocator:
    """Locate a single table element within an HTML document."""

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger(__name__)

    def locate(
        self,
        document: BeautifulSoup,
        selector: Optional[str] = None,
        index: Optional[int] = None,
    ) -> Tag:
        """Return the table selected by ``selector``/``index``, or the best table.

        An empty selector is treated the same as no selector.

        Raises:
            NoTableFoundError: If no selector is given and no table has rows
            SelectionError: If the selector does not resolve to exactly one table
        """
        if selector:
            return self.select_table(document, selector, index)
        return self.best_table(document)

    def select_table(
        self,
        document: BeautifulSoup,
        selector: str,
        index: Optional[int] = None,
    ) -> Tag:
        try:
            matches = document.select(selector)
        except SelectorSyntaxError as e:
            raise SelectionError(f"Invalid selector: {e}", selector=selector) from e

        self.logger.debug(f"Selector '{selector}' matched {len(matches)} element(s)")

        if index is None:
            if len(matches) != 1:
                raise SelectionError(
                    f"{len(matches)} elements selected",
                    selector=selector,
                    count=len(matches),
                )
            element = matches[0]
        else:
            if not 0 <= index < len(matches):
                raise SelectionError(
                    f"index {index} out of range: {len(matches)} elements selected",
                    selector=selector,
                    count=len(matches),
                    index=index,
                )
            element = matches[index]

        if element.name != "table":
            raise SelectionError(
                f"selected element is a {element.name}, not a table",
                selector=selector,
                count=len(matches),
                index=index,
                tag=element.name,
            )

        return element

    def best_table(self, document: BeautifulSoup) -> Tag:
        best = None
        best_score = -1

        for position, table in enumerate(document.select("table")):
            if table.select_one("tr") is None:
                self.logger.debug(f"Skipping table {position}: no rows")
                continue

            score = score_table(table)
            self.logger.debug(f"Table {position} scored {score}")

            # Strict comparison keeps the first table on ties
            if score > best_score:
                best = table
                best_score = score

        if best is None:
            raise NoTableFoundError("no tables found")

        self.logger.debug(f"Selected best table with score {best_score}")
        return best


def locate(
    document: BeautifulSoup,
    selector: Optional[str] = None,
    index: Optional[int] = None,
) -> Tag:
    """Module-level shortcut for ``TableLocator().locate(...)``."""
    return TableLocator().locate(document, selector, index)
