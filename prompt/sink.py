"""SPDX-License-Identifier: GPL-3.0-only

Output sinks that hand a chosen character to an external program.

The program receives the character on stdin and sees end-of-input right
after it. Presets cover the X11 clipboard (``xsel``) and synthetic typing
(``xdotool``).
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Dict, Optional, Protocol, Sequence

LOGGER = logging.getLogger("unicode_prompt.sink")


class DeliveryError(RuntimeError):
    """The output program could not be started or written to."""


class Sink(Protocol):
    def deliver(self, char: str) -> None:
        ...


class CommandSink:
    """Pipe a character into ``command`` followed by ``args``.

    Args:
        command: Executable name or path.
        args: Fixed argument list.
        encoding: Encoding used for the character bytes.
        timeout: Seconds to wait for the program to exit after stdin is
            closed. ``None`` waits indefinitely. A program still running
            after the timeout is left alone and logged.
    """

    def __init__(
        self,
        command: str,
        args: Sequence[str] = (),
        encoding: str = "utf-8",
        timeout: Optional[float] = 5.0,
    ) -> None:
        self.command = command
        self.args = list(args)
        self.encoding = encoding
        self.timeout = timeout

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]

    def __repr__(self) -> str:
        return f"CommandSink({' '.join(self.argv)!r})"

    def deliver(self, char: str) -> None:
        if not char:
            return
        try:
            payload = char[0].encode(self.encoding)
        except UnicodeEncodeError as exc:
            raise DeliveryError(f"Cannot encode U+{ord(char[0]):04X} as {self.encoding}") from exc
        try:
            proc = subprocess.Popen(self.argv, stdin=subprocess.PIPE)
        except OSError as exc:
            raise DeliveryError(f"Failed to start {self.command}: {exc}") from exc
        try:
            proc.stdin.write(payload)  # type: ignore[union-attr]
            proc.stdin.close()  # type: ignore[union-attr]
        except OSError as exc:
            proc.kill()
            proc.wait()
            raise DeliveryError(f"Failed writing to {self.command}: {exc}") from exc
        try:
            rc = proc.wait(timeout=self.timeout)
        except subprocess.TimeoutExpired:
            LOGGER.warning("%s still running after %ss; not waiting further", self.command, self.timeout)
            return
        if rc != 0:
            LOGGER.warning("%s exited with status %s", self.command, rc)
        else:
            LOGGER.debug("Delivered U+%04X via %s", ord(char[0]), self.command)


def clipboard_sink() -> CommandSink:
    """Put the character into the X selection via ``xsel -i``."""
    return CommandSink("xsel", ["-i"])


def type_sink() -> CommandSink:
    """Type the character into the focused window via ``xdotool``."""
    return CommandSink("xdotool", ["type", "--clearmodifiers", "--file", "-"])


SINK_PRESETS: Dict[str, Callable[[], CommandSink]] = {
    "clipboard": clipboard_sink,
    "type": type_sink,
}


def make_sink(name: str) -> CommandSink:
    try:
        return SINK_PRESETS[name]()
    except KeyError:
        raise ValueError(f"Unknown sink {name!r} (choose from {', '.join(sorted(SINK_PRESETS))})") from None
