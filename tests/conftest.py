"""SPDX-License-Identifier: GPL-3.0-only

Test configuration: add project root to sys.path for package imports.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

SAMPLE_DATA = (
    b"0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;\n"
    b"0062;LATIN SMALL LETTER B;Ll;0;L;;;;;N;;;0042;;0042\n"
    b"03B1;GREEK SMALL LETTER ALPHA;Ll;0;L;;;;;N;;;0391;;0391\n"
    b"2603;SNOWMAN;So;0;ON;;;;;N;;;;;\n"
    b"1F600;GRINNING FACE;So;0;ON;;;;;N;;;;;\n"
)


@pytest.fixture(autouse=True)
def clean_logging():
    """Undo any handler setup done by prompt.cli.main."""
    from prompt.logging_config import reset_logging

    yield
    reset_logging()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "UnicodeData.txt"
    path.write_bytes(SAMPLE_DATA)
    return path


class FakeStdin:
    def __init__(self):
        self.written = b""
        self.closed = False

    def write(self, data: bytes) -> int:
        if self.closed:
            raise ValueError("write to closed file")
        self.written += data
        return len(data)

    def close(self) -> None:
        self.closed = True


class FakePopen:
    """Records every launch instead of spawning a process."""

    launches: list = []
    returncode = 0

    def __init__(self, argv, stdin=None, **kwargs):
        self.argv = list(argv)
        self.stdin = FakeStdin()
        FakePopen.launches.append(self)

    def wait(self, timeout=None):
        return FakePopen.returncode


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.launches = []
    FakePopen.returncode = 0
    monkeypatch.setattr("prompt.sink.subprocess.Popen", FakePopen)
    yield FakePopen


class RecordingSink:
    def __init__(self):
        self.delivered: list[str] = []

    def deliver(self, char: str) -> None:
        self.delivered.append(char)


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()
