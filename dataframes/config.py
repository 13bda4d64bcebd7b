import logging

# --- Logging Configuration ---
LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(message)s"

# --- CSV Defaults ---
DEFAULT_DELIMITER = ","
DEFAULT_DECIMAL = "."
CSV_LINE_TERMINATOR = "\r\n"
DEFAULT_CSV_FILENAME = "default.csv"  # used when the target path has no last segment
DEFAULT_ENCODING = "utf-8"

# --- Printing ---
DEFAULT_FLOAT_PRECISION = 2


def setup_logging(level: int = logging.INFO) -> None:
    """Configures the root logger with the project format (CLI entry point only)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
