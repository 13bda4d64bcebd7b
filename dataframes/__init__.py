from .df_types import MISSING, Cell, Row
from .utils import (
    BasePersister,
    DataFrame,
    FilePersister,
    MemoryPersister,
    coerce,
    load_table,
    read_csv,
    read_json,
)

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "Cell",
    "Row",
    "DataFrame",
    "BasePersister",
    "FilePersister",
    "MemoryPersister",
    "coerce",
    "load_table",
    "read_csv",
    "read_json"
]
