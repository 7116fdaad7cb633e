"""SPDX-License-Identifier: GPL-3.0-only

Lazily populated in-memory index of character records.

The index reads and parses its source at most once. A failed read leaves it
in a terminal FAILED state; callers that want another attempt (for example
after the data package has been installed) call ``reset()`` explicitly.
"""

from __future__ import annotations

import enum
import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Tuple

from .records import Entry, parse_records

LOGGER = logging.getLogger("unicode_prompt.search")

Reader = Callable[[Path], bytes]


class CacheState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    POPULATED = "populated"
    FAILED = "failed"


def _read_file(path: Path) -> bytes:
    return path.read_bytes()


class UnicodeIndex:
    """Owns the parsed entries for one data source.

    Args:
        source: Path of the semicolon-delimited data file.
        reader: Callable returning the raw bytes of ``source``. Defaults to
            reading the file from disk; tests inject counting readers.
    """

    def __init__(self, source: Path, reader: Optional[Reader] = None) -> None:
        self.source = Path(source)
        self._reader = reader or _read_file
        self._lock = threading.Lock()
        self._entries: Tuple[Entry, ...] = ()
        self._state = CacheState.UNINITIALIZED

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def ensure_populated(self) -> bool:
        """Make sure the index is loaded.

        Returns:
            bool: True when entries are available, False when the source
            could not be read (now or on an earlier attempt).
        """
        if self._state is CacheState.POPULATED:
            return True
        with self._lock:
            # Another caller may have finished while we waited.
            if self._state is not CacheState.UNINITIALIZED:
                return self._state is CacheState.POPULATED
            try:
                data = self._reader(self.source)
            except OSError as exc:
                LOGGER.error('Could not read file "%s"', self.source)
                LOGGER.error("%s", exc)
                LOGGER.error("Do you have unicode-data installed?")
                self._state = CacheState.FAILED
                return False
            entries = parse_records(data)
            if not entries:
                LOGGER.warning("No usable records found in %s", self.source)
                self._state = CacheState.FAILED
                return False
            entries.sort(key=lambda e: len(e.description))
            self._entries = tuple(entries)
            self._state = CacheState.POPULATED
            LOGGER.debug("Loaded %s entries from %s", len(self._entries), self.source)
            return True

    def reset(self) -> None:
        """Forget loaded entries and any failure so the next call re-reads."""
        with self._lock:
            self._entries = ()
            self._state = CacheState.UNINITIALIZED
