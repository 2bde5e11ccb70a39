"""
Table Reader

The session object tying the pieces together: it resolves a location, fetches
and parses the document, locates the table, and hands out headings and row
cursors. The located table and its headings are computed lazily, cached,
and invalidated only by ``refresh()``.
"""

import logging
import threading
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from bs4 import Tag

from .config import ReaderConfig
from .cursor import RowCursor, cell_texts
from .headings import heading_names, resolve_headings
from .locator import TableLocator
from .source import DocumentSource, resolve_location


class CacheState(Enum):
    EMPTY = "empty"
    COMPUTED = "computed"


class TableReader:
    """Reads one HTML table from a URL or local file.

    The cache is guarded by a lock, so a reader can be shared between
    threads; fetches still run one at a time.
    """

    def __init__(
        self,
        location: str,
        selector: Optional[str] = None,
        index: Optional[int] = None,
        config: Optional[ReaderConfig] = None,
    ):
        """Initialize a reader.

        Args:
            location: URL or filesystem path of the HTML document
            selector: CSS selector identifying the table (optional)
            index: Position among the selector's matches (optional)
            config: Fetch and parse configuration

        Raises:
            InvalidLocationError: If location is missing or malformed
        """
        self.url = resolve_location(location)
        self.selector = selector
        self.index = index
        self.config = config or ReaderConfig()
        self.source = DocumentSource(self.config)
        self.locator = TableLocator()
        self.logger = logging.getLogger(__name__)

        self._lock = threading.RLock()
        self._table: Optional[Tag] = None
        self._table_state = CacheState.EMPTY
        self._headings: Optional[List[Tag]] = None
        self._headings_state = CacheState.EMPTY

    def table(self) -> Tag:
        """Return the located table, fetching the document on first use."""
        with self._lock:
            if self._table_state is CacheState.EMPTY:
                self._load_table()
            return self._table

    def headings(self) -> List[Tag]:
        """Return the heading cells of the table."""
        with self._lock:
            if self._headings_state is CacheState.EMPTY:
                self._headings = resolve_headings(self.table())
                self._headings_state = CacheState.COMPUTED
            return self._headings

    def heading_names(self) -> List[str]:
        """Return the heading text of each column."""
        return heading_names(self.headings())

    def iterate_rows(self) -> RowCursor:
        """Return a fresh cursor positioned at the first row of the table.

        Headings are resolved first, so the cursor always includes the row
        they were read from.
        """
        with self._lock:
            self.headings()
            return RowCursor.over(self._table)

    def __iter__(self) -> RowCursor:
        return self.iterate_rows()

    def data_rows(self) -> Iterator[List[str]]:
        """Yield the cell text of each row, skipping a leading header row."""
        cursor = self.iterate_rows()
        first = True
        for row in cursor:
            if first:
                first = False
                if row and all(cell.name == "th" for cell in row):
                    continue
            yield cell_texts(row)

    def records(self) -> Iterator[Dict[str, Any]]:
        """Yield each data row as a dict keyed by heading name.

        Short rows are padded with None; cells beyond the last heading are
        dropped. Duplicate heading names keep the rightmost value.
        """
        names = self.heading_names()
        for values in self.data_rows():
            values += [None] * (len(names) - len(values))
            yield dict(zip(names, values))

    def refresh(self) -> None:
        """Discard the cached table and headings and re-read the document."""
        with self._lock:
            self._headings = None
            self._headings_state = CacheState.EMPTY
            self._table = None
            self._table_state = CacheState.EMPTY
            self._load_table()

    def _load_table(self) -> None:
        self.logger.debug(f"Loading {self.table_key()}")
        document = self.source.load(self.url)
        table = self.locator.locate(document, self.selector, self.index)
        self._table = table
        self._table_state = CacheState.COMPUTED

    def table_key(self) -> str:
        """Describe which table this reader targets."""
        return f"Table: {{url: {self.url}, selector: {self.selector}, index: {self.index}}}"

    def close(self) -> None:
        """Release resources held by the reader.

        No handle is kept open between operations, so there is nothing to
        release; this exists for ``with`` statements and symmetry.
        """

    def __enter__(self) -> "TableReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TableReader({self.url!r}, selector={self.selector!r}, index={self.index!r})"


def open_table(
    location: str,
    selector: Optional[str] = None,
    index: Optional[int] = None,
    config: Optional[ReaderConfig] = None,
) -> TableReader:
    """Create a TableReader for ``location``."""
    return TableReader(location, selector=selector, index=index, config=config)
