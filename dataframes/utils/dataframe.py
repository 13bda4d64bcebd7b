# dataframes/utils/dataframe.py
from __future__ import annotations

import inspect
import json
import locale
import logging
import math
from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Set, Tuple

from ..config import DEFAULT_DECIMAL, DEFAULT_DELIMITER, DEFAULT_FLOAT_PRECISION
from ..df_types import MISSING, Cell, Conditions, PersistFn, Row
from . import csv_codec
from .values import format_cell, is_number, loose_equals

logger = logging.getLogger(__name__)


# --- Internal helpers ---

def _get_col(matrix: List[Row], index: int) -> List[Cell]:
    # rows that do not reach the index contribute the missing marker
    return [row[index] if 0 <= index < len(row) else MISSING for row in matrix]


def _common_indices(index_sets: List[List[int]]) -> List[int]:
    """Intersection of row index lists, ascending. Starts from the first list as candidate pool."""
    candidates: Set[int] = set(index_sets[0])
    for indices in index_sets[1:]:
        candidates &= set(indices)
    return sorted(candidates)


def _unique_key(value: Any) -> Tuple[str, Any]:
    # 12 and 12.0 collapse, 12 and "12" do not, every NaN is the same value
    if is_number(value):
        return ("num", "nan") if math.isnan(value) else ("num", value)
    try:
        hash(value)
    except TypeError:
        return ("obj", id(value))
    return (type(value).__name__, value)


def _json_cell(cell: Any) -> Any:
    if isinstance(cell, float) and not math.isfinite(cell):
        return None  # non-finite numbers are written as null
    return cell


# --- DataFrame ---
class DataFrame:
    """
    Row-major table: ``data`` is a list of rows, ``names`` the ordered column names.

    Data-shape problems (ragged rows, unknown column names) are reported on the
    module logger and tolerated; the table is used as-is.
    """

    def __init__(self, data: Optional[List[Row]] = None, names: Optional[List[str]] = None) -> None:
        data = data if data is not None else []
        names = names if names is not None else []
        if names:
            for row in data:
                if len(row) != len(names):
                    logger.error("Length of row does not match number of column names (%d): %s", len(names), row)
        else:
            # without names, every row must be as wide as the first one
            for row in data:
                if len(row) != len(data[0]):
                    logger.error("Inconsistent length of row: %s", row)
        self.data: List[Row] = data
        self.names: List[str] = names

    def __len__(self) -> int:
        return len(self.data)

    @property
    def size(self) -> Tuple[int, int]:
        """(number of columns, number of rows)"""
        return len(self.names), len(self.data)

    def __repr__(self) -> str:
        return f"DataFrame(names={self.names!r}, rows={len(self.data)})"

    def __str__(self) -> str:
        return self.print()

    # --- JSON ---
    def to_json(self) -> str:
        payload = {
            "names": self.names,
            "data": [[_json_cell(cell) for cell in row] for row in self.data],
        }
        return json.dumps(payload, separators=(",", ":"), allow_nan=False)

    @staticmethod
    def from_json(json_string: str) -> DataFrame:
        payload = json.loads(json_string)
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object with 'names' and 'data', got {type(payload).__name__}.")
        data = [[MISSING if cell is None else cell for cell in row] for row in payload.get("data") or []]
        return DataFrame(data, list(payload.get("names") or []))

    # --- CSV ---
    def load_csv(self, csv_string: str, delimiter: str = DEFAULT_DELIMITER, decimal: str = DEFAULT_DECIMAL) -> None:
        """Replaces names and rows with the content of ``csv_string``."""
        self.names, self.data = csv_codec.parse_csv(csv_string, delimiter, decimal)

    @staticmethod
    def from_csv(csv_string: str, delimiter: str = DEFAULT_DELIMITER, decimal: str = DEFAULT_DECIMAL) -> DataFrame:
        df = DataFrame()
        df.load_csv(csv_string, delimiter, decimal)
        return df

    def to_csv(self, delimiter: str = DEFAULT_DELIMITER, decimal: str = DEFAULT_DECIMAL) -> str:
        return csv_codec.to_csv(self.names, self.data, delimiter, decimal)

    async def write_csv(
        self,
        filename: str,
        persist: PersistFn,
        delimiter: str = DEFAULT_DELIMITER,
        decimal: str = DEFAULT_DECIMAL,
    ) -> None:
        """
        Serializes the table and hands it to ``persist``.

        Args:
            filename (str): Target path; only its last "/" segment is passed on.
            persist (PersistFn): Called as ``persist(name, content)``. When it
                returns an awaitable, the awaitable is awaited.
            delimiter (str): Field delimiter.
            decimal (str): Decimal mark written for numeric cells.
        """
        content = self.to_csv(delimiter, decimal)
        name = csv_codec.suggested_filename(filename)
        logger.info("Writing %d rows as %s", len(self.data), name)
        result = persist(name, content)
        if inspect.isawaitable(result):
            await result

    # --- Access ---
    def column_by_index(self, index: int) -> List[Cell]:
        return _get_col(self.data, index)

    def column_by_name(self, name: str) -> List[Cell]:
        if name not in self.names:
            logger.error("Invalid Column Name: %s", name)
            return []
        return _get_col(self.data, self.names.index(name))

    def row(self, index: int) -> Row:
        # the row itself, not a copy
        return self.data[index]

    def add_column(self, values: List[Cell], name: str) -> None:
        """Appends one value to each row, padding with NaN when ``values`` is too short."""
        for i, row in enumerate(self.data):
            row.append(values[i] if i < len(values) else MISSING)
        self.names.append(name)

    def unique_values(self, column_name: str) -> List[Cell]:
        """Distinct values of a column in first-occurrence order."""
        if column_name not in self.names:
            logger.error("Invalid Column Name: %s", column_name)
            return []
        seen: Dict[Tuple[str, Any], Cell] = {}
        for value in self.column_by_name(column_name):
            seen.setdefault(_unique_key(value), value)
        return list(seen.values())

    # --- Filter ---
    def where(self, conditions: Conditions) -> DataFrame:
        """
        Returns a new DataFrame with the rows matching every ``{column: value}`` pair.

        Cells are compared with ``loose_equals`` (12 matches "12"). An empty
        mapping keeps every row. Rows keep their original order and are shared
        with this table; the column name list is copied.
        """
        if not conditions:
            return DataFrame(list(self.data), list(self.names))

        index_sets: List[List[int]] = []
        for column_name, value in conditions.items():
            column = self.column_by_name(column_name)
            index_sets.append([i for i, cell in enumerate(column) if loose_equals(cell, value)])

        rows = [self.data[i] for i in _common_indices(index_sets)]
        return DataFrame(rows, list(self.names))

    # --- Sort ---
    def sort_by(self, name: str, descending: bool = False) -> None:
        """
        Sorts the rows in place by column ``name``.

        Numbers are compared numerically and strings with the current locale
        collation. A pair mixing types (or holding neither) logs a warning and
        keeps the first value in front, which is not a consistent ordering.
        """
        if name not in self.names:
            logger.warning('"%s" is not a column name.', name)
            return

        index = self.names.index(name)
        sign = -1 if descending else 1

        def compare(a: Row, b: Row) -> float:
            # short rows have no value here and sort like a mixed pair
            left = a[index] if index < len(a) else None
            right = b[index] if index < len(b) else None
            if is_number(left) and is_number(right):
                return (left - right) * sign
            if isinstance(left, str) and isinstance(right, str):
                return locale.strcoll(left, right) * sign
            logger.warning("Trying to sort a column that is neither a number nor a string.")
            return -1

        self.data.sort(key=cmp_to_key(compare))

    # --- Printing ---
    def print(self, float_precision: int = DEFAULT_FLOAT_PRECISION) -> str:
        """
        Fixed-width text rendering: right-aligned header, dash separator, one line per row.

        Each column is as wide as its longest cell or its name, plus one
        trailing space. Non-integral numbers use ``float_precision`` decimals.
        """
        maxlen = [0] * len(self.names)
        rows_for_print: List[List[str]] = []
        for row in self.data:
            printed = [format_cell(cell, float_precision) for cell in row]
            for j, text in enumerate(printed):
                if j >= len(maxlen):
                    maxlen.append(0)
                maxlen[j] = max(maxlen[j], len(text))
            rows_for_print.append(printed)

        header = ""
        for j, col_name in enumerate(self.names):
            header += " " * max(0, maxlen[j] - len(col_name)) + col_name + " "

        lines = [header, "-" * (len(header) - 1)]
        for printed in rows_for_print:
            row_rep = ""
            for j, text in enumerate(printed):
                name_len = len(self.names[j]) if j < len(self.names) else 0
                # align to the header, or to the longest value
                header_len = max(maxlen[j] + 1, name_len + 1)
                num_spaces = max(0, header_len - len(text) - 1)
                row_rep += " " * num_spaces + text + " "
            lines.append(row_rep)
        return "".join(line + "\n" for line in lines)
