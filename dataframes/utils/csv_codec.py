# dataframes/utils/csv_codec.py
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..config import CSV_LINE_TERMINATOR, DEFAULT_CSV_FILENAME, DEFAULT_DECIMAL, DEFAULT_DELIMITER
from ..df_types import Row
from .values import cell_to_string, coerce, passes_numeric_test

logger = logging.getLogger(__name__)


# --- Parsing ---

def parse_csv(
    text: str,
    delimiter: str = DEFAULT_DELIMITER,
    decimal: str = DEFAULT_DECIMAL,
) -> Tuple[List[str], List[Row]]:
    """
    Splits a CRLF separated CSV string into column names and coerced rows.

    The first line is the header and is taken verbatim. Every other line is
    split on ``delimiter`` and each field goes through ``coerce``. Only lines
    that are exactly empty are skipped (whitespace-only lines are kept).
    No quoting is supported.

    Returns:
        Tuple[List[str], List[Row]]: (column names, rows)
    """
    lines = text.split(CSV_LINE_TERMINATOR)
    names = lines[0].split(delimiter)
    rows: List[Row] = []
    for line in lines[1:]:
        if line == "":
            continue
        rows.append([coerce(field, decimal) for field in line.split(delimiter)])
    logger.debug("Parsed CSV with %d columns and %d rows", len(names), len(rows))
    return names, rows


# --- Serialization ---

def to_csv(
    names: Sequence[str],
    data: Sequence[Sequence[object]],
    delimiter: str = DEFAULT_DELIMITER,
    decimal: str = DEFAULT_DECIMAL,
) -> str:
    """
    Serializes column names and rows to CSV text.

    Kept byte compatible with files written by earlier versions:
    - the header is the names joined with "," and every "," is then replaced
      by ``delimiter`` (a "," inside a name is turned into the delimiter too);
    - every cell, the last one included, is followed by ``delimiter``;
    - every line ends with CRLF.
    """
    header = ",".join(names).replace(",", delimiter)
    parts = [header, CSV_LINE_TERMINATOR]
    for row in data:
        for cell in row:
            text = cell_to_string(cell)
            if passes_numeric_test(cell):
                text = text.replace(".", decimal, 1)
            parts.append(text + delimiter)
        parts.append(CSV_LINE_TERMINATOR)
    return "".join(parts)


def suggested_filename(filename: str) -> str:
    """Last "/" separated segment of ``filename``, or the default name when it is empty."""
    return filename.split("/")[-1] or DEFAULT_CSV_FILENAME
