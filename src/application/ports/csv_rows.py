"""Application port for reading delimited import files."""

from pathlib import Path
from typing import Protocol


class CsvRowsSourcePort(Protocol):
    """Port returning the rows of a delimited file as string mappings."""

    def read_rows(self, path: Path | str) -> list[dict[str, str]]:
        """Return one dict per data row, keyed by trimmed header."""


__all__ = ["CsvRowsSourcePort"]
