"""Domain Types — identity wrappers and enums shared across the core.

Invariants:
    - UserId and FilmId wrap positive ints — never use a bare int in domain signatures
    - Ids are assigned by the owning table only; callers never mint them
    - EntityKind names every table that can report a missing id

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (error envelopes carry them)
"""

from datetime import date
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
FilmId = NewType("FilmId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Owning table of a record — used in NotFound/Conflict context."""
    USER = "User"
    FILM = "Film"


# ─── Constants ───────────────────────────────────────────────────

FIRST_ID: int = 1
DEFAULT_POPULAR_COUNT: int = 10
MAX_DESCRIPTION_LENGTH: int = 200
CINEMA_BIRTHDAY: date = date(1895, 12, 28)  # first public film screening
