"""SPDX-License-Identifier: GPL-3.0-only

Centralized logging configuration for the prompt.
Provides:
  configure_logging(level:str='WARNING', json_mode:bool=False, rotate_mb:int=2, log_path=None)
  set_runtime_level(level:str)
  get_runtime_level() -> str

Features:
  * Idempotent setup of the ``unicode_prompt`` logger tree.
  * Diagnostics go to stderr; stdout stays reserved for completions.
  * Optional JSON structured log lines.
  * Optional log file with basic size-based rotation (single .1 rollover).
"""
from __future__ import annotations
import logging, sys, json, threading, time
from pathlib import Path
from typing import Optional, TextIO

ROOT_LOGGER = 'unicode_prompt'

_LOCK = threading.Lock()
_CONFIGURED = False
_CURRENT_LEVEL = 'WARNING'
_HANDLERS: list[logging.Handler] = []


class _SizedRotatingHandler(logging.Handler):
    def __init__(self, path: Path, rotate_mb: int) -> None:
        super().__init__()
        self.path = path
        self.rotate_bytes = max(1, min(rotate_mb, 64)) * 1024 * 1024
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _rotate_if_needed(self, incoming: int) -> None:
        if not self.path.exists() or self.path.stat().st_size + incoming <= self.rotate_bytes:
            return
        rolled = self.path.with_suffix(self.path.suffix + '.1')
        rolled.unlink(missing_ok=True)
        self.path.rename(rolled)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            data = self.format(record) + '\n'
            self._rotate_if_needed(len(data.encode('utf-8')))
            with self.path.open('a', encoding='utf-8') as fh:
                fh.write(data)
        except Exception:  # pragma: no cover
            self.handleError(record)


class _DualFormatter(logging.Formatter):
    def __init__(self, json_mode: bool):
        super().__init__()
        self.json_mode = json_mode

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base = {
            'ts': time.strftime('%Y-%m-%dT%H:%M:%S', time.localtime(record.created)) + f".{int(record.msecs):03d}",
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
        }
        if record.exc_info:
            base['exc'] = self.formatException(record.exc_info)
        if self.json_mode:
            return json.dumps(base, ensure_ascii=False)
        line = f"[{base['ts']}] {base['level']} {base['logger']}: {base['msg']}"
        if 'exc' in base:
            line += '\n' + base['exc']
        return line


def check_level(level: Optional[str]) -> str:
    """Return the upper-cased level name, or raise ValueError if logging does not know it."""
    name = (level or 'WARNING').upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level: {level!r}")
    return name


def configure_logging(
    level: str = 'WARNING',
    json_mode: bool = False,
    rotate_mb: int = 2,
    log_path: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach handlers to the ``unicode_prompt`` logger (once per process).

    Later calls only adjust the level. An unknown level raises ValueError
    before anything is attached.
    """
    global _CONFIGURED, _CURRENT_LEVEL
    name = check_level(level)
    logger = logging.getLogger(ROOT_LOGGER)
    with _LOCK:
        _CURRENT_LEVEL = name
        if _CONFIGURED:
            logger.setLevel(_CURRENT_LEVEL)
            return logger
        formatter = _DualFormatter(bool(json_mode))
        console = logging.StreamHandler(stream or sys.stderr)
        console.setFormatter(formatter)
        _HANDLERS.append(console)
        if log_path:
            rotate = rotate_mb if rotate_mb and rotate_mb > 0 else 2
            file_handler = _SizedRotatingHandler(Path(log_path), rotate)
            file_handler.setFormatter(formatter)
            _HANDLERS.append(file_handler)
        for h in _HANDLERS:
            logger.addHandler(h)
        logger.setLevel(_CURRENT_LEVEL)
        logger.propagate = False
        _CONFIGURED = True
        return logger


def reset_logging() -> None:
    """Detach configured handlers (used by tests)."""
    global _CONFIGURED
    with _LOCK:
        logger = logging.getLogger(ROOT_LOGGER)
        for h in _HANDLERS:
            logger.removeHandler(h)
        _HANDLERS.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
        _CONFIGURED = False


def set_runtime_level(level: str) -> None:
    global _CURRENT_LEVEL
    name = check_level(level)
    with _LOCK:
        _CURRENT_LEVEL = name
        logging.getLogger(ROOT_LOGGER).setLevel(_CURRENT_LEVEL)


def get_runtime_level() -> str:
    return _CURRENT_LEVEL

__all__ = ['check_level', 'configure_logging', 'reset_logging', 'set_runtime_level', 'get_runtime_level']
