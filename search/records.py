"""SPDX-License-Identifier: GPL-3.0-only

Record parsing for semicolon-delimited character databases.

Each line of ``UnicodeData.txt`` looks like::

    0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;

Only the first two fields matter here: the hexadecimal code point and the
character name. Lines that do not fit that shape are skipped silently.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional

_HEX_FIELD = re.compile(rb"[0-9A-Fa-f]+")
MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class Entry:
    """A single searchable character.

    Attributes:
        char: The character itself (one code point).
        description: Human readable name used for matching.
    """

    char: str
    description: str

    def display(self) -> str:
        return f"{self.char} {self.description}"


def parse_line(line: bytes) -> Optional[Entry]:
    """Parse one raw line, returning None when it is malformed."""
    fields = line.split(b";")
    if len(fields) < 2:
        return None
    code_field, name_field = fields[0], fields[1]
    if not _HEX_FIELD.fullmatch(code_field):
        return None
    code = int(code_field, 16)
    if code > MAX_CODE_POINT:
        return None
    try:
        description = name_field.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return Entry(char=chr(code), description=description)


def iter_records(data: bytes) -> Iterator[Entry]:
    for line in data.splitlines():
        entry = parse_line(line)
        if entry is not None:
            yield entry


def parse_records(data: bytes) -> List[Entry]:
    """Parse a whole data file into entries, in input order.

    Args:
        data: Raw file contents.

    Returns:
        list[Entry]: Every well-formed record; malformed lines are dropped.
    """
    return list(iter_records(data))
