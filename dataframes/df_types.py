# dataframes/df_types.py

from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

# --- Cell / Row Types ---

# A cell is either numeric (NaN marks a missing value) or textual
Cell = Union[int, float, str]
Row = List[Cell]

# {column name: value} pairs given to DataFrame.where
Conditions = Dict[str, Any]

# --- Persist Capability ---
# persist(suggested_filename, content); may return an awaitable
PersistFn = Callable[[str, str], Optional[Awaitable[None]]]

# Missing value marker used to pad short columns
MISSING: float = float("nan")
