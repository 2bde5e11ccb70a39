"""
Heading Resolver

Determines the column headings of a table: the header cells of the first
row when present, otherwise ``col0``, ``col1``, ... synthesized from the
first row's data cells.
"""

import copy
import logging
from typing import List

from bs4 import Tag

from .cursor import CellFilter, RowCursor, cell_text

logger = logging.getLogger(__name__)


def resolve_headings(table: Tag) -> List[Tag]:
    """Return the heading cells for ``table``.

    Never raises for a well-formed table element; a table without rows has
    no headings. Synthesized headings are copies, the document itself is
    left untouched.
    """
    cursor = RowCursor.over(table)
    if not cursor.has_next():
        return []

    headings = cursor.next(CellFilter.HEADER)
    if headings:
        return list(headings)

    # No header cells: peek at the first row of data from a fresh cursor
    cursor = RowCursor.over(table)
    first_row = cursor.next(CellFilter.DATA)

    synthesized = []
    for i, td in enumerate(first_row):
        th = copy.copy(td)
        th.name = "th"
        th.string = f"col{i}"
        synthesized.append(th)

    logger.debug(f"Synthesized {len(synthesized)} default column names")
    return synthesized


def heading_names(headings: List[Tag]) -> List[str]:
    """Return the text of each heading cell, in order."""
    return [cell_text(th) for th in headings]
