"""
HTML Table Reader

Reads a single data table out of an HTML page, fetched from a URL or a local
file, and exposes it as rows with inferred or explicit column headings.
"""

__version__ = "0.1.0"
__description__ = "Extract a data table from an HTML document"

from .errors import (
    TableReaderError,
    InvalidLocationError,
    FetchError,
    ParseError,
    NoTableFoundError,
    SelectionError,
    EndOfSequenceError,
    UnsupportedOperationError,
)
from .config import ReaderConfig, load_config
from .cursor import CellFilter, RowCursor, cell_text, cell_texts
from .headings import resolve_headings
from .locator import TableLocator, locate, score_table
from .reader import TableReader, open_table

__all__ = [
    "TableReader",
    "open_table",
    "TableLocator",
    "locate",
    "score_table",
    "resolve_headings",
    "RowCursor",
    "CellFilter",
    "cell_text",
    "cell_texts",
    "ReaderConfig",
    "load_config",
    "TableReaderError",
    "InvalidLocationError",
    "FetchError",
    "ParseError",
    "NoTableFoundError",
    "SelectionError",
    "EndOfSequenceError",
    "UnsupportedOperationError",
]
