"""SPDX-License-Identifier: GPL-3.0-only

Unicode Prompt search backend package.

Provides the pieces behind the character prompt:
	* Record parsing of ``UnicodeData.txt``-style files
	* A load-once in-memory index
	* Conjunctive word search with pluggable match predicates
"""

from .records import Entry, parse_records  # noqa: F401
from .cache import CacheState, UnicodeIndex  # noqa: F401
from .engine import (
	RESULT_LIMIT,
	Predicate,
	PrefixPredicate,
	SubstringPredicate,
	WordPrefixPredicate,
	complete,
	make_predicate,
	query_tokens,
	search,
)  # noqa: F401
