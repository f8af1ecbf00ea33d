"""Storage Protocols — contracts between the core tables and their consumers.

Invariants:
    - RelationService depends on these Protocols, never on the in-memory classes
    - Mutations raise typed errors (core/errors.py); lookups return None for a missing id
    - All methods are synchronous: no IO, no suspension points

Design Decisions:
    - Protocol over ABC: structural subtyping, a durable backend can be dropped in
      without inheriting from the in-memory tables
"""

from typing import Protocol, TypeVar

from filmorate.core.domain_types import FilmId, UserId
from filmorate.core.entities import Film, User

T = TypeVar("T")


class EntityTable(Protocol[T]):
    """Identity assignment plus CRUD for one record kind."""
    def create(self, record: T) -> T: ...
    def update(self, record: T) -> T: ...
    def delete(self, record_id: int) -> None: ...
    def find_by_id(self, record_id: int) -> T | None: ...
    def find_all(self) -> list[T]: ...
    def exists(self, record_id: int) -> bool: ...


class UserStorage(EntityTable[User], Protocol):
    """Account table with the symmetric friend graph layered on top."""
    def add_friend(self, user_id: UserId, friend_id: UserId) -> None: ...
    def remove_friend(self, user_id: UserId, friend_id: UserId) -> None: ...
    def friend_ids(self, user_id: UserId) -> frozenset[UserId]: ...
    def get_friends(self, user_id: UserId) -> list[User]: ...
    def get_common_friends(self, user_id: UserId, other_id: UserId) -> list[User]: ...


class FilmStorage(EntityTable[Film], Protocol):
    """Film table with the per-film like index layered on top."""
    def add_like(self, film_id: FilmId, user_id: UserId) -> None: ...
    def remove_like(self, film_id: FilmId, user_id: UserId) -> None: ...
    def likes_of(self, film_id: FilmId) -> frozenset[UserId]: ...
    def like_count(self, film_id: FilmId) -> int: ...
    def purge_liker(self, user_id: UserId) -> int: ...
    def get_popular_films(self, count: int) -> list[Film]: ...
