"""Search strategies – interchangeable first-occurrence lookups.

Every strategy returns the lowest matching position wrapped in ``Some`` or
``Nothing()`` when the target is absent.  None of them mutate the sequence.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

from optindex.kernel.errors import UnknownStrategyError
from optindex.kernel.types import Nothing, Option, Some, from_nullable

T = TypeVar("T")


class SearchStrategy(StrEnum):
    SCAN = "scan"
    FILTER_FIRST = "filter_first"
    MATCH_ALL = "match_all"


@runtime_checkable
class IndexStrategy(Protocol):
    def __call__(self, target: Any, sequence: Sequence[Any]) -> Option[int]: ...


def scan_first_index(target: T, sequence: Sequence[T]) -> Option[int]:
    """Forward scan that stops at the first equal element."""
    for position, element in enumerate(sequence):
        if element == target:
            return Some(position)
    return Nothing()


def filter_first_index(target: T, sequence: Sequence[T]) -> Option[int]:
    """Pair elements with positions, filter on equality, take the first pair.

    The filter is a generator, so nothing past the first match is inspected.
    """
    matches = (pair for pair in enumerate(sequence) if pair[1] == target)
    return from_nullable(next(matches, None)).map(lambda pair: pair[0])


def match_all_first_index(target: T, sequence: Sequence[T]) -> Option[int]:
    """Collect every matching position, then keep the lowest one."""
    positions = [position for position, element in enumerate(sequence) if element == target]
    match positions:
        case [first, *_]:
            return Some(first)
        case _:
            return Nothing()


_STRATEGIES: dict[SearchStrategy, IndexStrategy] = {
    SearchStrategy.SCAN: scan_first_index,
    SearchStrategy.FILTER_FIRST: filter_first_index,
    SearchStrategy.MATCH_ALL: match_all_first_index,
}


def available_strategies() -> list[str]:
    return [str(name) for name in _STRATEGIES]


def resolve_strategy(name: str | SearchStrategy) -> IndexStrategy:
    """Return the implementation registered under *name*.

    Raises
    ------
    UnknownStrategyError
        When *name* is not one of :func:`available_strategies`.
    """
    try:
        return _STRATEGIES[SearchStrategy(name)]
    except ValueError as exc:
        raise UnknownStrategyError(str(name), available_strategies(), cause=exc) from exc


__all__ = [
    "IndexStrategy",
    "SearchStrategy",
    "available_strategies",
    "filter_first_index",
    "match_all_first_index",
    "resolve_strategy",
    "scan_first_index",
]
