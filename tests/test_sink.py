"""SPDX-License-Identifier: GPL-3.0-only

Tests for subprocess output sinks (no real processes are spawned).
"""

from __future__ import annotations

import logging
import subprocess

import pytest

from prompt.sink import CommandSink, DeliveryError, clipboard_sink, make_sink, type_sink


def test_presets():
    assert clipboard_sink().argv == ["xsel", "-i"]
    assert type_sink().argv == ["xdotool", "type", "--clearmodifiers", "--file", "-"]
    assert make_sink("type").argv == type_sink().argv
    with pytest.raises(ValueError):
        make_sink("printer")


def test_empty_selection_launches_nothing(fake_popen):
    clipboard_sink().deliver("")
    assert fake_popen.launches == []


def test_deliver_writes_one_char_and_closes(fake_popen):
    clipboard_sink().deliver("☃")
    assert len(fake_popen.launches) == 1
    proc = fake_popen.launches[0]
    assert proc.argv == ["xsel", "-i"]
    assert proc.stdin.written == "☃".encode("utf-8")
    assert proc.stdin.closed is True


def test_only_first_char_is_sent(fake_popen):
    type_sink().deliver("ab")
    assert fake_popen.launches[0].stdin.written == b"a"


def test_launch_failure_raises(monkeypatch):
    def boom(*a, **k):
        raise FileNotFoundError(2, "No such file or directory", "xsel")

    monkeypatch.setattr(subprocess, "Popen", boom)
    with pytest.raises(DeliveryError) as excinfo:
        clipboard_sink().deliver("A")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_write_failure_kills_child(monkeypatch):
    launched = []

    class BrokenStdin:
        def write(self, data):
            raise BrokenPipeError("pipe closed")

    class BrokenPopen:
        def __init__(self, argv, stdin=None, **kwargs):
            self.stdin = BrokenStdin()
            self.killed = False
            self.waited = False
            launched.append(self)

        def kill(self):
            self.killed = True

        def wait(self, timeout=None):
            self.waited = True
            return -9

    monkeypatch.setattr(subprocess, "Popen", BrokenPopen)
    with pytest.raises(DeliveryError) as excinfo:
        clipboard_sink().deliver("A")
    assert isinstance(excinfo.value.__cause__, BrokenPipeError)
    assert launched[0].killed is True
    assert launched[0].waited is True


def test_unencodable_char_raises_before_launch(fake_popen):
    with pytest.raises(DeliveryError):
        CommandSink("cat", encoding="ascii").deliver("é")
    assert fake_popen.launches == []


def test_nonzero_exit_logged(fake_popen, caplog):
    fake_popen.returncode = 1
    with caplog.at_level(logging.WARNING, logger="unicode_prompt.sink"):
        clipboard_sink().deliver("A")
    assert "exited with status 1" in caplog.text


def test_timeout_logged(fake_popen, monkeypatch, caplog):
    def slow_wait(self, timeout=None):
        raise subprocess.TimeoutExpired(self.argv, timeout)

    monkeypatch.setattr(fake_popen, "wait", slow_wait)
    with caplog.at_level(logging.WARNING, logger="unicode_prompt.sink"):
        CommandSink("xdotool", ["type", "--file", "-"], timeout=0.1).deliver("A")
    assert "still running" in caplog.text
