from .dataframe import DataFrame
from .loaders import load_table, read_csv, read_json
from .persist import BasePersister, FilePersister, MemoryPersister
from .values import coerce

__all__ = [
    "DataFrame",
    "load_table",
    "read_csv",
    "read_json",
    "BasePersister",
    "FilePersister",
    "MemoryPersister",
    "coerce"
]
