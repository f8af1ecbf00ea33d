"""Relation Service — orchestration facade over the user and film tables.

Invariants:
    - Cross-table rules live here: a like needs both the film and the user to exist
    - Each table call takes and releases that table's lock; no lock spans both tables
    - Lower errors propagate with the same kind; NotFound may be enriched with
      which side of the pair was missing (ErrorContext.entity / related_id)
    - get_* raise ResourceNotFoundError, unlike the tables' find_by_id (returns None)
    - Deleting a user also purges that user's likes so popularity never counts them.
      like_film re-checks the user after inserting and undoes the like if a
      concurrent delete_user ran in between, so no like outlives its account

Design Decisions:
    - Tables injected through the constructor (Protocol-typed): no module-level
      singletons, a durable storage can be swapped in without touching this file
    - Friendship calls pass straight through: the self-loop rule belongs to UserDirectory
"""

import logging

from filmorate.core.domain_types import EntityKind, FilmId, UserId
from filmorate.core.entities import Film, User
from filmorate.core.errors import ErrorContext, ResourceNotFoundError
from filmorate.core.repository_protocols import FilmStorage, UserStorage

logger = logging.getLogger(__name__)


class RelationService:
    """Entry point used by the HTTP routes."""

    def __init__(self, users: UserStorage, films: FilmStorage):
        self.users = users
        self.films = films

    # ─── Films ───────────────────────────────────────────────────

    def list_films(self) -> list[Film]:
        return self.films.find_all()

    def get_film(self, film_id: FilmId) -> Film:
        film = self.films.find_by_id(film_id)
        if film is None:
            raise ResourceNotFoundError(EntityKind.FILM.value, film_id)
        return film

    def create_film(self, film: Film) -> Film:
        logger.info(f"Creating film '{film.name}'")
        return self.films.create(film)

    def update_film(self, film: Film) -> Film:
        logger.info(f"Updating film id={film.id}", extra={"film_id": film.id})
        return self.films.update(film)

    def delete_film(self, film_id: FilmId) -> None:
        self.films.delete(film_id)

    def like_film(self, film_id: FilmId, user_id: UserId) -> None:
        """Record that user_id likes film_id. Repeat likes are no-ops."""
        self._require_film(film_id, user_id)
        self._require_user(user_id, film_id)
        self.films.add_like(film_id, user_id)
        if not self.users.exists(user_id):
            # user deleted between the check and the insert
            self.films.remove_like(film_id, user_id)
            self._require_user(user_id, film_id)

    def unlike_film(self, film_id: FilmId, user_id: UserId) -> None:
        # film existence is checked by the catalog itself
        self._require_user(user_id, film_id)
        self.films.remove_like(film_id, user_id)

    def popular_films(self, count: int) -> list[Film]:
        return self.films.get_popular_films(count)

    # ─── Users ───────────────────────────────────────────────────

    def list_users(self) -> list[User]:
        return self.users.find_all()

    def get_user(self, user_id: UserId) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError(EntityKind.USER.value, user_id)
        return user

    def create_user(self, user: User) -> User:
        logger.info(f"Creating user {user.email}")
        return self.users.create(user)

    def update_user(self, user: User) -> User:
        logger.info(f"Updating user id={user.id}", extra={"user_id": user.id})
        return self.users.update(user)

    def delete_user(self, user_id: UserId) -> None:
        self.users.delete(user_id)
        self.films.purge_liker(user_id)

    # ─── Friends ─────────────────────────────────────────────────

    def friend(self, user_id: UserId, friend_id: UserId) -> None:
        self.users.add_friend(user_id, friend_id)

    def unfriend(self, user_id: UserId, friend_id: UserId) -> None:
        self.users.remove_friend(user_id, friend_id)

    def friends_of(self, user_id: UserId) -> list[User]:
        return self.users.get_friends(user_id)

    def common_friends(self, user_id: UserId, other_id: UserId) -> list[User]:
        return self.users.get_common_friends(user_id, other_id)

    # ─── Helpers ─────────────────────────────────────────────────

    def _require_film(self, film_id: FilmId, user_id: UserId) -> None:
        if not self.films.exists(film_id):
            raise ResourceNotFoundError(
                EntityKind.FILM.value, film_id,
                ErrorContext(entity=EntityKind.FILM.value, entity_id=film_id, related_id=user_id),
            )

    def _require_user(self, user_id: UserId, film_id: FilmId) -> None:
        if not self.users.exists(user_id):
            raise ResourceNotFoundError(
                EntityKind.USER.value, user_id,
                ErrorContext(entity=EntityKind.USER.value, entity_id=user_id, related_id=film_id),
            )
