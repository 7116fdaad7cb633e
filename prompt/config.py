"""SPDX-License-Identifier: GPL-3.0-only

Runtime configuration for the prompt.

Values come from ``UNICODE_PROMPT_*`` environment variables (so a window
manager keybinding can set them once) and may be overridden by CLI flags.

Environment variables:
    UNICODE_PROMPT_DATA: Path to ``UnicodeData.txt`` or an equivalent file.
    UNICODE_PROMPT_SINK: ``clipboard`` (default) or ``type``.
    UNICODE_PROMPT_PREDICATE: ``substring`` (default), ``prefix`` or ``word``.
    UNICODE_PROMPT_LIMIT: Maximum completions shown (default 20).
    UNICODE_PROMPT_LOG_LEVEL: Logging level name (default WARNING).
    UNICODE_PROMPT_LOG_FILE: Optional rotating log file path.
    UNICODE_PROMPT_JSON_LOGS: '1' to emit JSON log lines.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from search.engine import RESULT_LIMIT

DATA_FILE_CANDIDATES: Sequence[Path] = (
    Path("/usr/share/unicode/UnicodeData.txt"),
    Path("/usr/share/unicode-data/UnicodeData.txt"),
    Path("/usr/share/unicode/ucd/UnicodeData.txt"),
    Path("/usr/local/share/unicode/UnicodeData.txt"),
)

_TRUTHY = {"1", "TRUE", "YES", "Y", "ON"}


def default_data_file(candidates: Optional[Sequence[Path]] = None) -> Path:
    """Return the first existing candidate, or the first candidate if none exist."""
    candidates = candidates or DATA_FILE_CANDIDATES
    for path in candidates:
        if path.is_file():
            return path
    return candidates[0]


@dataclass
class PromptConfig:
    data_file: Path
    sink: str = "clipboard"
    predicate: str = "substring"
    limit: int = RESULT_LIMIT
    log_level: str = "WARNING"
    log_path: Optional[Path] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PromptConfig":
        env = os.environ if environ is None else environ
        data = env.get("UNICODE_PROMPT_DATA", "").strip()
        log_file = env.get("UNICODE_PROMPT_LOG_FILE", "").strip()
        limit_raw = env.get("UNICODE_PROMPT_LIMIT", "").strip()
        try:
            limit = int(limit_raw) if limit_raw else RESULT_LIMIT
        except ValueError:
            limit = RESULT_LIMIT
        return cls(
            data_file=Path(data) if data else default_data_file(),
            sink=env.get("UNICODE_PROMPT_SINK", "clipboard").strip().lower() or "clipboard",
            predicate=env.get("UNICODE_PROMPT_PREDICATE", "substring").strip().lower() or "substring",
            limit=limit,
            log_level=(env.get("UNICODE_PROMPT_LOG_LEVEL", "WARNING").strip() or "WARNING").upper(),
            log_path=Path(log_file) if log_file else None,
            json_logs=env.get("UNICODE_PROMPT_JSON_LOGS", "0").strip().upper() in _TRUTHY,
        )
