"""Popularity Ranking — orders films by like count with a deterministic tie-break.

Invariants:
    - rank_by_popularity is PURE: no table access, no locking, no mutation
    - Order: like count descending, then id ascending (creation order)
    - count larger than the catalog returns every film, never an error
    - count < 1 is rejected with DomainValidationError

Design Decisions:
    - heapq.nsmallest over a full sort: O(n log k) for the usual small k,
      and it is stable on the (-likes, id) key so ties never depend on dict order
"""

import heapq
from collections.abc import Iterable, Mapping

from filmorate.core.domain_types import FilmId
from filmorate.core.entities import Film
from filmorate.core.errors import DomainValidationError


def popularity_key(film: Film, like_counts: Mapping[FilmId, int]) -> tuple[int, int]:
    """Sort key: most likes first, then lowest id."""
    return -like_counts.get(film.id, 0), film.id


def rank_by_popularity(
    films: Iterable[Film], like_counts: Mapping[FilmId, int], count: int,
) -> list[Film]:
    """Return up to `count` films, most liked first."""
    if count < 1:
        raise DomainValidationError(
            f"count must be at least 1, got {count}", field="count",
        )
    return heapq.nsmallest(
        count, films, key=lambda film: popularity_key(film, like_counts),
    )
