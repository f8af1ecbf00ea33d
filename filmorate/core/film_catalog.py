"""Film Catalog — film table plus the per-film like index and popularity query.

Invariants:
    - Titles are NOT unique: the id is the only identity of a film
    - A (user, film) like appears at most once: re-liking is a no-op, not a Conflict
    - add_like/remove_like raise ResourceNotFoundError for a missing film only;
      the catalog does not know whether the user exists (RelationService checks)
    - Deleting a film discards its like set, so popularity never returns it
    - Popularity ties break by ascending id (see core/popularity.py)

Design Decisions:
    - Like sets keyed by film id, not stored on Film: records stay frozen snapshots
      and match the JSON shape exactly
"""

import logging

from filmorate.core.domain_types import EntityKind, FilmId, UserId
from filmorate.core.entities import Film
from filmorate.core.entity_table import InMemoryEntityTable
from filmorate.core.popularity import rank_by_popularity

logger = logging.getLogger(__name__)


class FilmCatalog(InMemoryEntityTable[Film]):
    """In-memory FilmStorage."""

    kind = EntityKind.FILM

    def __init__(self) -> None:
        super().__init__()
        self._likes: dict[FilmId, set[UserId]] = {}

    # ─── Entity hooks ────────────────────────────────────────────

    def _on_created(self, record: Film) -> None:
        self._likes[record.id] = set()

    def _on_deleted(self, record: Film) -> None:
        self._likes.pop(record.id, None)

    # ─── Like index ──────────────────────────────────────────────

    def add_like(self, film_id: FilmId, user_id: UserId) -> None:
        with self._lock:
            self._require(film_id)
            self._likes.setdefault(film_id, set()).add(user_id)
        logger.info(
            f"User {user_id} liked film {film_id}",
            extra={"film_id": film_id, "user_id": user_id},
        )

    def remove_like(self, film_id: FilmId, user_id: UserId) -> None:
        with self._lock:
            self._require(film_id)
            self._likes.get(film_id, set()).discard(user_id)
        logger.info(
            f"User {user_id} removed like from film {film_id}",
            extra={"film_id": film_id, "user_id": user_id},
        )

    def likes_of(self, film_id: FilmId) -> frozenset[UserId]:
        with self._lock:
            self._require(film_id)
            return frozenset(self._likes.get(film_id, ()))

    def like_count(self, film_id: FilmId) -> int:
        with self._lock:
            self._require(film_id)
            return len(self._likes.get(film_id, ()))

    def purge_liker(self, user_id: UserId) -> int:
        """Drop user_id from every like set. Returns how many likes were removed."""
        removed = 0
        with self._lock:
            for likers in self._likes.values():
                if user_id in likers:
                    likers.discard(user_id)
                    removed += 1
        if removed:
            logger.info(
                f"Removed {removed} like(s) of deleted user {user_id}",
                extra={"user_id": user_id},
            )
        return removed

    # ─── Popularity ──────────────────────────────────────────────

    def get_popular_films(self, count: int) -> list[Film]:
        with self._lock:
            counts = {film_id: len(likers) for film_id, likers in self._likes.items()}
            ranked = rank_by_popularity(self._records.values(), counts, count)
        logger.debug(f"Popular films requested: count={count}, returned={len(ranked)}")
        return ranked
