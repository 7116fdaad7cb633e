"""SPDX-License-Identifier: GPL-3.0-only

Minimal CLI to search characters and deliver one of them.

    python -m prompt.cli --sink type greek small alpha --pick 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from search.engine import PREDICATES

from .config import PromptConfig
from .logging_config import configure_logging
from .session import build_prompt
from .sink import SINK_PRESETS, DeliveryError

LOGGER = logging.getLogger("unicode_prompt.cli")

EXIT_UNAVAILABLE = 1
EXIT_DELIVERY_FAILED = 2
EXIT_BAD_PICK = 3
EXIT_BAD_CONFIG = 4


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search Unicode characters by name")
    p.add_argument("query", nargs="*", help="Words to match against character names")
    p.add_argument("--data", dest="data_file", help="Path to UnicodeData.txt (default: $UNICODE_PROMPT_DATA or a system location)")
    p.add_argument("--sink", choices=sorted(SINK_PRESETS), help="Where the picked character goes (default: clipboard)")
    p.add_argument("--predicate", choices=sorted(PREDICATES), help="How query words match names (default: substring)")
    p.add_argument("--limit", type=int, help="Maximum completions (default: 20)")
    p.add_argument("--pick", type=int, help="Deliver the N-th completion (1-based)")
    p.add_argument("--log-level", help="Logging level (default: WARNING)")
    p.add_argument("--log-file", help="Optional log file path")
    p.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> PromptConfig:
    config = PromptConfig.from_env()
    overrides = {}
    if args.data_file:
        overrides["data_file"] = Path(args.data_file)
    if args.sink:
        overrides["sink"] = args.sink
    if args.predicate:
        overrides["predicate"] = args.predicate
    if args.limit is not None:
        overrides["limit"] = args.limit
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    if args.log_file:
        overrides["log_path"] = Path(args.log_file)
    if args.json_logs:
        overrides["json_logs"] = True
    return replace(config, **overrides)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = build_config(args)
    try:
        configure_logging(config.log_level, json_mode=config.json_logs, log_path=config.log_path)
        prompt = build_prompt(config)
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return EXIT_BAD_CONFIG

    if not prompt.available():
        return EXIT_UNAVAILABLE

    lines = prompt.complete(" ".join(args.query))
    for n, line in enumerate(lines, start=1):
        print(f"{n:2d}. {line}")

    if args.pick is not None:
        if not 1 <= args.pick <= len(lines):
            LOGGER.error("No completion number %s (have %s)", args.pick, len(lines))
            return EXIT_BAD_PICK
        try:
            prompt.select(lines[args.pick - 1])
        except DeliveryError as exc:
            LOGGER.error("Delivery failed: %s", exc)
            return EXIT_DELIVERY_FAILED
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
