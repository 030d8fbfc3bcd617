"""Indexed search – find the first position of a target in a sequence.

``find_first_index`` never signals "not found" with ``-1`` or an exception:
the answer is an ``Option[int]``, so position ``0`` and absence stay
distinguishable at the type level.
"""
from __future__ import annotations

from typing import Sequence, TypeVar

from optindex.config.settings import EnvSettingsLoader
from optindex.kernel.types import Option
from optindex.observability.logging import get_logger
from optindex.search.settings import SearchSettings
from optindex.search.strategies import SearchStrategy, resolve_strategy

T = TypeVar("T")


class IndexedSearch:
    """Stateless searcher bound to one strategy.

    Example::

        searcher = IndexedSearch(SearchStrategy.FILTER_FIRST)
        searcher.find_first_index(3, [1, 2, 3, 3]).unwrap()  # 2
    """

    def __init__(self, strategy: str | SearchStrategy = SearchStrategy.SCAN) -> None:
        self._find = resolve_strategy(strategy)
        self._strategy = SearchStrategy(strategy)
        self._log = get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: SearchSettings | None = None) -> "IndexedSearch":
        """Build a searcher from *settings*, or from ``OPTINDEX_*`` env vars."""
        if settings is None:
            settings = EnvSettingsLoader().load(SearchSettings)
        return cls(settings.strategy)

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    def find_first_index(self, target: T, sequence: Sequence[T]) -> Option[int]:
        result = self._find(target, sequence)
        self._log.debug(
            "index_search.completed",
            strategy=str(self._strategy),
            size=len(sequence),
            found=result.is_some(),
            position=result.unwrap_or(None),
        )
        return result


_default_search = IndexedSearch()


def find_first_index(
    target: T,
    sequence: Sequence[T],
    *,
    strategy: str | SearchStrategy | None = None,
) -> Option[int]:
    """Return ``Some(i)`` for the lowest ``i`` with ``sequence[i] == target``.

    Returns ``Nothing()`` when the sequence is empty or holds no equal
    element.  Raises :class:`~optindex.kernel.errors.UnknownStrategyError`
    only for an unregistered *strategy* name.
    """
    searcher = _default_search if strategy is None else IndexedSearch(strategy)
    return searcher.find_first_index(target, sequence)


__all__ = ["IndexedSearch", "find_first_index"]
