"""Delimited file reader backed by pandas."""

from pathlib import Path

import pandas as pd


class PandasCsvRowsSource:
    """Read semicolon-delimited exports into string rows.

    Every cell is kept as text; empty cells become empty strings. A UTF-8
    byte order mark and quotes around header names are stripped.
    """

    def __init__(self, delimiter: str = ";", encoding: str = "utf-8-sig") -> None:
        self._delimiter = delimiter
        self._encoding = encoding

    def read_rows(self, path: Path | str) -> list[dict[str, str]]:
        """Return one dict per data row, keyed by trimmed header.

        Args:
            path: Location of the export.

        Returns:
            list[dict[str, str]]: Rows with blank lines skipped.

        Raises:
            OSError: When the file cannot be opened.
            ValueError: When the content cannot be parsed.
        """
        df = pd.read_csv(
            path,
            sep=self._delimiter,
            dtype=str,
            encoding=self._encoding,
            keep_default_na=False,
            skip_blank_lines=True,
        )
        df.columns = [self._clean_header(column) for column in df.columns]
        return df.to_dict(orient="records")

    @staticmethod
    def _clean_header(header) -> str:
        cleaned = str(header).lstrip("\ufeff").strip()
        if cleaned.startswith('"'):
            cleaned = cleaned[1:]
        if cleaned.endswith('"'):
            cleaned = cleaned[:-1]
        return cleaned.strip()


__all__ = ["PandasCsvRowsSource"]
