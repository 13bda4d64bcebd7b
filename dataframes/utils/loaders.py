import logging
from pathlib import Path
from typing import Union

from ..config import CSV_LINE_TERMINATOR, DEFAULT_DECIMAL, DEFAULT_DELIMITER, DEFAULT_ENCODING
from .dataframe import DataFrame

logger = logging.getLogger(__name__)


# --- Funções Auxiliares para Leitura de Arquivos ---

def _normalize_newlines(text: str) -> str:
    # "\r\n" and bare "\n" both end up as CRLF
    return text.replace(CSV_LINE_TERMINATOR, "\n").replace("\n", CSV_LINE_TERMINATOR)


def read_csv(
    path: Union[str, Path],
    delimiter: str = DEFAULT_DELIMITER,
    decimal: str = DEFAULT_DECIMAL,
    encoding: str = DEFAULT_ENCODING,
    normalize_newlines: bool = True,
) -> DataFrame:
    """Reads a CSV file and returns a DataFrame."""
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    logger.info("Reading CSV %s (delimiter '%s', decimal '%s')", filepath, delimiter, decimal)
    with filepath.open("r", encoding=encoding, newline="") as fh:
        text = fh.read()
    if normalize_newlines:
        text = _normalize_newlines(text)
    return DataFrame.from_csv(text, delimiter, decimal)


def read_json(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> DataFrame:
    """Reads a ``{"names": [...], "data": [[...]]}`` JSON file and returns a DataFrame."""
    filepath = Path(path)
    logger.info("Reading JSON %s", filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    text = filepath.read_text(encoding=encoding)
    try:
        return DataFrame.from_json(text)
    except ValueError as e:  # json.JSONDecodeError or a payload that is not an object
        logger.error("Error decoding JSON from %s: %s", filepath, e)
        return DataFrame()


def load_table(
    path: Union[str, Path],
    delimiter: str = DEFAULT_DELIMITER,
    decimal: str = DEFAULT_DECIMAL,
    encoding: str = DEFAULT_ENCODING,
) -> DataFrame:
    """Picks the reader from the file extension (.csv or .json)."""
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return read_csv(path, delimiter=delimiter, decimal=decimal, encoding=encoding)
    if suffix == ".json":
        return read_json(path, encoding=encoding)
    raise ValueError(f"Unsupported file type '{suffix}' for {path}. Use .csv or .json.")
