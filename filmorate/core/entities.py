"""Entities — the two record kinds owned by the core tables.

Invariants:
    - Records are frozen: a snapshot handed to a caller never changes under it
    - id is None until the owning table assigns one, then immutable
    - Fields mirror the JSON shapes exactly (adapter is a pure pass-through)
    - Relation data (friends, likes) lives in the tables, never on the record

Design Decisions:
    - frozen dataclass + dataclasses.replace over mutable setters: findAll snapshots
      stay valid after later updates without deep copies
"""

from dataclasses import dataclass, replace
from datetime import date

from filmorate.core.domain_types import FilmId, UserId


@dataclass(frozen=True)
class User:
    """Account record. name falls back to login when blank."""
    email: str
    login: str
    name: str = ""
    birthday: date | None = None
    id: UserId | None = None

    @property
    def display_name(self) -> str:
        return self.name if self.name and self.name.strip() else self.login

    def with_display_name(self) -> "User":
        """Return a copy whose name is filled from login when blank."""
        if self.name == self.display_name:
            return self
        return replace(self, name=self.display_name)


@dataclass(frozen=True)
class Film:
    """Catalog record. duration is in minutes."""
    name: str
    description: str = ""
    release_date: date | None = None
    duration: int = 0
    id: FilmId | None = None
