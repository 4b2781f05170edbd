# app/services/csv_import.py
#
# CSV Reading Helpers
# Turns an import file into a lazy stream of trimmed row records.
# Expected layout: one header line, then `title,type,value,category` rows.

import math
from dataclasses import dataclass
from typing import Iterator, Optional

import pandas as pd

from config import IMPORT_CHUNK_SIZE

CSV_COLUMNS = ["title", "type", "value", "category"]


@dataclass(frozen=True)
class CsvTransactionRow:
    """One CSV line after trimming. All fields are strings, possibly empty."""

    title: str
    type: str
    value: str
    category: str

    def has_required_fields(self) -> bool:
        return bool(self.title and self.type and self.value)


def _clean_cell(cell) -> str:
    if cell is None:
        return ""
    if isinstance(cell, float) and math.isnan(cell):
        return ""
    return str(cell).strip()


def parse_value(raw: Optional[str]) -> Optional[float]:
    """
    Convert a trimmed CSV value like '1200' or '49.90' into a float.
    Returns None when the cell is empty or not a finite number.
    """
    if raw is None:
        return None

    s = str(raw).strip()
    if not s:
        return None

    try:
        value = float(s)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    return value


def read_transaction_rows(
    file_path: str,
    chunk_size: Optional[int] = None,
) -> Iterator[CsvTransactionRow]:
    """
    Lazily yield one CsvTransactionRow per data line of `file_path`.

    The header line is skipped. Rows are read in pandas chunks of
    `chunk_size` lines, so only one chunk is held in memory at a time.
    Short lines are padded with empty fields; lines with more than four
    fields are dropped by pandas.

    Raises:
        FileNotFoundError / OSError: if the file cannot be opened
    """
    try:
        reader = pd.read_csv(
            file_path,
            header=None,
            names=list(range(len(CSV_COLUMNS))),
            index_col=False,
            skiprows=1,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines="skip",
            chunksize=chunk_size or IMPORT_CHUNK_SIZE,
        )
        with reader:
            for chunk in reader:
                for cells in chunk.itertuples(index=False, name=None):
                    title, type_, value, category = (_clean_cell(c) for c in cells)
                    yield CsvTransactionRow(
                        title=title,
                        type=type_,
                        value=value,
                        category=category,
                    )
    except pd.errors.EmptyDataError:
        # Empty file or header only
        return
