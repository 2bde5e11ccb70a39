"""Formatters for presenting table rows on the command line."""

import csv
import io
import json
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


class BaseFormatter(ABC):
    """Base class for all row formatters."""

    @abstractmethod
    def format_rows(self, headings: Sequence[str], rows: List[List[str]]) -> str:
        """Format headings and rows of cell text."""
        pass

    def format_headings(self, headings: Sequence[str]) -> str:
        """Format heading names, one per line."""
        return "\n".join(headings)

    def truncate_text(self, text: str, max_length: int, suffix: str = "...") -> str:
        """Truncate text to maximum length."""
        if len(text) <= max_length:
            return text
        return text[:max_length - len(suffix)] + suffix


class TextFormatter(BaseFormatter):
    """Aligned plain-text table."""

    def __init__(self, max_width: int = 40):
        self.max_width = max_width

    def format_rows(self, headings: Sequence[str], rows: List[List[str]]) -> str:
        lines = [list(headings)] + [list(row) for row in rows]
        lines = [[self.truncate_text(cell, self.max_width) for cell in line] for line in lines]
        column_count = max(len(line) for line in lines)
        widths = [
            max((len(line[i]) for line in lines if i < len(line)), default=0)
            for i in range(column_count)
        ]

        output = []
        for n, line in enumerate(lines):
            output.append("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(line)).rstrip())
            if n == 0:
                output.append("  ".join("-" * w for w in widths))
        return "\n".join(output)


class CsvFormatter(BaseFormatter):
    """Comma-separated values with a heading line."""

    def format_rows(self, headings: Sequence[str], rows: List[List[str]]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(headings)
        writer.writerows(rows)
        return buffer.getvalue().rstrip("\n")


class JsonFormatter(BaseFormatter):
    """JSON array of objects keyed by heading."""

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent

    def format_rows(self, headings: Sequence[str], rows: List[List[str]]) -> str:
        records = []
        for row in rows:
            padded = list(row) + [None] * (len(headings) - len(row))
            records.append(dict(zip(headings, padded)))
        return json.dumps(records, indent=self.indent, ensure_ascii=False)

    def format_headings(self, headings: Sequence[str]) -> str:
        return json.dumps(list(headings), ensure_ascii=False)


FORMATTERS = {
    "table": TextFormatter,
    "csv": CsvFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Return a formatter instance by name."""
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown output format: {name}")
