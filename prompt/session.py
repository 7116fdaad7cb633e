"""SPDX-License-Identifier: GPL-3.0-only

Prompt session tying the index, the search engine and an output sink
together. A front-end (window manager prompt, dmenu wrapper, the CLI)
feeds queries to ``complete`` and the chosen line to ``select``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from search.cache import UnicodeIndex
from search import engine
from search.engine import RESULT_LIMIT, PredicateLike, SubstringPredicate, as_predicate, make_predicate

from .config import PromptConfig
from .sink import Sink, make_sink

LOGGER = logging.getLogger("unicode_prompt.session")


class UnicodePrompt:
    """Search-and-deliver session.

    Args:
        index: Character index, populated on first use.
        sink: Receives the selected character.
        predicate: Token matching strategy.
        limit: Maximum completions returned per query.
    """

    def __init__(
        self,
        index: UnicodeIndex,
        sink: Sink,
        predicate: Optional[PredicateLike] = None,
        limit: int = RESULT_LIMIT,
    ) -> None:
        self.index = index
        self.sink = sink
        self.predicate = as_predicate(predicate if predicate is not None else SubstringPredicate())
        self.limit = limit

    def available(self) -> bool:
        return self.index.ensure_populated()

    def complete(self, query: str) -> List[str]:
        """Return display lines (``"<char> <name>"``) matching ``query``."""
        if not query or not self.available():
            return []
        return engine.complete(self.index.entries, self.predicate, query, limit=self.limit)

    def select(self, value: Optional[str]) -> None:
        """Deliver the character at the start of a chosen display line.

        Raises:
            DeliveryError: If the sink program fails to start or accept input.
        """
        if not value:
            return
        LOGGER.debug("Selected %r", value)
        self.sink.deliver(value[0])


def build_prompt(config: PromptConfig) -> UnicodePrompt:
    return UnicodePrompt(
        UnicodeIndex(config.data_file),
        make_sink(config.sink),
        predicate=make_predicate(config.predicate),
        limit=config.limit,
    )
