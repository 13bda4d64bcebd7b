# dataframes/utils/persist.py
"""
Persist capabilities handed to ``DataFrame.write_csv``.

The table never touches the filesystem itself: it builds the CSV string and
calls ``persist(suggested_filename, content)``. Any callable with that
signature works; the classes below cover the common cases.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

from ..config import DEFAULT_ENCODING

logger = logging.getLogger(__name__)


# --- Base Strategy ---
class BasePersister:
    def persist(self, filename: str, content: str) -> None:
        raise NotImplementedError("Subclasses must implement the method persist.")

    def __call__(self, filename: str, content: str) -> None:
        self.persist(filename, content)


class FilePersister(BasePersister):
    """Writes each file into ``directory``, keeping CRLF line ends untouched."""

    def __init__(self, directory: Union[str, Path] = ".", encoding: str = DEFAULT_ENCODING):
        self.directory = Path(directory)
        self.encoding = encoding

    def persist(self, filename: str, content: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / filename
        # newline="" disables newline translation so "\r\n" is written as is
        with target.open("w", encoding=self.encoding, newline="") as fh:
            fh.write(content)
        logger.info("Saved %d characters to %s", len(content), target)


class MemoryPersister(BasePersister):
    def __init__(self) -> None:
        self.files: Dict[str, str] = {}

    def persist(self, filename: str, content: str) -> None:
        self.files[filename] = content
        logger.debug("Kept %s in memory (%d characters)", filename, len(content))
