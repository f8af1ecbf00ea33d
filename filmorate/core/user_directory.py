"""User Directory — account table plus the symmetric friend graph.

Invariants:
    - Email is unique across users under case-insensitive comparison
    - Friendship is symmetric: b in friends[a] iff a in friends[b]
    - No self-loops: add_friend(a, a) raises DomainValidationError before any lookup
    - add_friend/remove_friend are idempotent; remove on a non-edge is a no-op,
      but both ids must name existing users (ResourceNotFoundError otherwise)
    - Deleting a user removes it from every other user's friend set
    - Both mirrored entries are written under one lock acquisition

Design Decisions:
    - Email index (casefold -> id) over a scan of all rows: O(1) duplicate check
    - Result lists are sorted by id: callers get a deterministic order for free,
      even though common friends are a set operation
"""

import logging

from filmorate.core.domain_types import EntityKind, UserId
from filmorate.core.entities import User
from filmorate.core.entity_table import InMemoryEntityTable
from filmorate.core.errors import DomainValidationError, DuplicateResourceError

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().casefold()


class UserDirectory(InMemoryEntityTable[User]):
    """In-memory UserStorage."""

    kind = EntityKind.USER

    def __init__(self) -> None:
        super().__init__()
        self._friends: dict[UserId, set[UserId]] = {}
        self._email_index: dict[str, UserId] = {}

    # ─── Entity hooks ────────────────────────────────────────────

    def _prepare(self, record: User) -> User:
        return record.with_display_name()

    def _check_unique(self, record: User, exclude_id: int | None) -> None:
        owner = self._email_index.get(normalize_email(record.email))
        if owner is not None and owner != exclude_id:
            raise DuplicateResourceError(self.kind.value, "email", record.email)

    def _on_created(self, record: User) -> None:
        self._friends[record.id] = set()
        self._email_index[normalize_email(record.email)] = record.id

    def _on_updated(self, previous: User, record: User) -> None:
        del self._email_index[normalize_email(previous.email)]
        self._email_index[normalize_email(record.email)] = record.id

    def _on_deleted(self, record: User) -> None:
        self._email_index.pop(normalize_email(record.email), None)
        for other_id in self._friends.pop(record.id, set()):
            self._friends.get(other_id, set()).discard(record.id)

    # ─── Friend graph ────────────────────────────────────────────

    def add_friend(self, user_id: UserId, friend_id: UserId) -> None:
        if user_id == friend_id:
            raise DomainValidationError(
                f"User {user_id} cannot befriend themselves", field="friend_id",
            )
        with self._lock:
            self._require(user_id)
            self._require(friend_id)
            self._friends.setdefault(user_id, set()).add(friend_id)
            self._friends.setdefault(friend_id, set()).add(user_id)
        logger.info(
            f"User {user_id} and user {friend_id} are now friends",
            extra={"user_id": user_id, "friend_id": friend_id},
        )

    def remove_friend(self, user_id: UserId, friend_id: UserId) -> None:
        """Both users must exist; a missing edge is a no-op."""
        with self._lock:
            self._require(user_id)
            self._require(friend_id)
            self._friends.get(user_id, set()).discard(friend_id)
            self._friends.get(friend_id, set()).discard(user_id)
        logger.info(
            f"User {user_id} and user {friend_id} are no longer friends",
            extra={"user_id": user_id, "friend_id": friend_id},
        )

    def friend_ids(self, user_id: UserId) -> frozenset[UserId]:
        with self._lock:
            self._require(user_id)
            return frozenset(self._friends.get(user_id, ()))

    def get_friends(self, user_id: UserId) -> list[User]:
        """Friends of user_id as records; ids that no longer resolve are skipped."""
        with self._lock:
            self._require(user_id)
            return self._resolve(self._friends.get(user_id, set()))

    def get_common_friends(self, user_id: UserId, other_id: UserId) -> list[User]:
        with self._lock:
            self._require(user_id)
            self._require(other_id)
            common = self._friends.get(user_id, set()) & self._friends.get(other_id, set())
            return self._resolve(common)

    def _resolve(self, ids: set[UserId]) -> list[User]:
        return [self._records[i] for i in sorted(ids) if i in self._records]
