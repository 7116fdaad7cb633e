"""SPDX-License-Identifier: GPL-3.0-only

Incremental word search over the character index.

A query is split into upper-cased words; an entry matches when every word
(longer than one character) satisfies the predicate against its description.
"""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterable, List, Protocol, Union

from .records import Entry

RESULT_LIMIT = 20


class Predicate(Protocol):
    def matches(self, token: str, description: str) -> bool:
        ...


class SubstringPredicate:
    """Token occurs anywhere in the description (case-insensitive)."""

    def matches(self, token: str, description: str) -> bool:
        return token.upper() in description.upper()


class PrefixPredicate:
    """Description starts with the token (case-insensitive)."""

    def matches(self, token: str, description: str) -> bool:
        return description.upper().startswith(token.upper())


class WordPrefixPredicate:
    """Some word of the description starts with the token (case-insensitive)."""

    def matches(self, token: str, description: str) -> bool:
        token = token.upper()
        return any(word.startswith(token) for word in description.upper().split())


class _CallablePredicate:
    def __init__(self, fn: Callable[[str, str], bool]) -> None:
        self._fn = fn

    def matches(self, token: str, description: str) -> bool:
        return bool(self._fn(token, description))


PREDICATES = {
    "substring": SubstringPredicate,
    "prefix": PrefixPredicate,
    "word": WordPrefixPredicate,
}

PredicateLike = Union[Predicate, Callable[[str, str], bool]]


def as_predicate(predicate: PredicateLike) -> Predicate:
    """Accept either a Predicate object or a plain ``(token, description)`` function."""
    if hasattr(predicate, "matches"):
        return predicate  # type: ignore[return-value]
    if callable(predicate):
        return _CallablePredicate(predicate)
    raise TypeError(f"Not a predicate: {predicate!r}")


def make_predicate(name: str) -> Predicate:
    try:
        return PREDICATES[name]()
    except KeyError:
        raise ValueError(f"Unknown predicate {name!r} (choose from {', '.join(sorted(PREDICATES))})") from None


def query_tokens(query: str) -> List[str]:
    """Upper-case and split the query, dropping single-letter noise."""
    # Length is checked before upper-casing; "ß".upper() is "SS".
    return [w.upper() for w in query.split() if len(w) > 1]


def search(entries: Iterable[Entry], predicate: PredicateLike, query: str, limit: int = RESULT_LIMIT) -> List[Entry]:
    """Filter entries by a query.

    Args:
        entries: Index entries, already in display order.
        predicate: Matching strategy applied per token.
        query: Raw query text as typed so far.
        limit: Maximum number of results.

    Returns:
        list[Entry]: Up to ``limit`` matches in index order. An empty query
        returns an empty list without scanning ``entries``.
    """
    if not query:
        return []
    pred = as_predicate(predicate)
    tokens = query_tokens(query)
    matched = (e for e in entries if all(pred.matches(t, e.description) for t in tokens))
    return list(islice(matched, max(0, limit)))


def complete(entries: Iterable[Entry], predicate: PredicateLike, query: str, limit: int = RESULT_LIMIT) -> List[str]:
    return [e.display() for e in search(entries, predicate, query, limit=limit)]
