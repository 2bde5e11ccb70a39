"""
Row Cursor

Forward-only, read-only iteration over the rows of an HTML table. A cursor
cannot rewind; to re-scan from the first row, build a new one with
``RowCursor.over(table)``.
"""

from enum import Enum
from typing import Iterable, Iterator, List

from bs4 import Tag

from .errors import EndOfSequenceError, UnsupportedOperationError

Row = List[Tag]


class CellFilter(Enum):
    """Which cells of a row a cursor returns."""

    HEADER = "th"
    DATA = "td"
    EITHER = "th,td"


class RowCursor:
    """Iterates over table rows, returning the cells of each row."""

    def __init__(self, rows: Iterable[Tag]):
        self._rows: Iterator[Tag] = iter(list(rows))
        self._pending: List[Tag] = []

    @classmethod
    def over(cls, table: Tag) -> "RowCursor":
        """Create a cursor positioned at the first row of ``table``."""
        return cls(table.select("tr"))

    def has_next(self) -> bool:
        """Return True while unconsumed rows remain."""
        if self._pending:
            return True
        try:
            self._pending.append(next(self._rows))
        except StopIteration:
            return False
        return True

    def next(self, cell_filter: CellFilter = CellFilter.EITHER) -> Row:
        """Return the cells of the next row that match ``cell_filter``.

        Raises:
            EndOfSequenceError: If no rows remain
        """
        if not self.has_next():
            raise EndOfSequenceError("No more rows in table")
        row = self._pending.pop()
        return row.select(cell_filter.value)

    def remove(self) -> None:
        raise UnsupportedOperationError("Row cursors are read-only; rows cannot be removed")

    def __iter__(self) -> "RowCursor":
        return self

    def __next__(self) -> Row:
        if not self.has_next():
            raise StopIteration
        return self.next()


def cell_text(cell: Tag) -> str:
    """Return the text of ``cell`` with runs of whitespace collapsed to one space."""
    return " ".join(cell.get_text().split())


def cell_texts(row: Row) -> List[str]:
    """Return the text of each cell in ``row``."""
    return [cell_text(cell) for cell in row]
