"""Film Schemas — Pydantic models with field-level validation for the films API.

Invariants:
    - name: stripped, non-empty
    - releaseDate: required, not in the future
    - duration: positive integer (minutes)
    - description length and earliest releaseDate come from the app's Settings:
      routes call check_limits(settings) after parsing, failures are 400
    - FilmUpdate requires id; the core replaces the whole record

Design Decisions:
    - camelCase alias for releaseDate, snake_case attribute: JSON shape matches the
      public contract, Python code stays PEP 8 (populate_by_name accepts both)
    - Configurable limits checked outside field validators: FastAPI parses bodies
      without a validation context, so validators cannot see injected Settings
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filmorate.config import Settings
from filmorate.core.domain_types import FilmId
from filmorate.core.entities import Film
from filmorate.core.errors import DomainValidationError


class FilmBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str | None = None
    release_date: date = Field(alias="releaseDate")
    duration: int = Field(gt=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("release_date")
    @classmethod
    def check_release_date_not_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("releaseDate cannot be in the future")
        return v

    def check_limits(self, settings: Settings) -> None:
        """Apply the configured description length and earliest release date."""
        limit = settings.film_description_max_length
        if self.description is not None and len(self.description) > limit:
            raise DomainValidationError(
                f"description cannot exceed {limit} characters", field="description",
            )
        earliest = settings.earliest_release_date
        if self.release_date < earliest:
            raise DomainValidationError(
                f"releaseDate cannot be before {earliest.isoformat()}",
                field="releaseDate",
            )


class FilmCreate(FilmBase):
    """Film creation payload — id is assigned by the catalog."""

    def to_entity(self) -> Film:
        return Film(
            name=self.name,
            description=self.description or "",
            release_date=self.release_date,
            duration=self.duration,
        )


class FilmUpdate(FilmBase):
    """Full-replace payload for PUT /films."""
    id: int = Field(gt=0)

    def to_entity(self) -> Film:
        return Film(
            id=FilmId(self.id),
            name=self.name,
            description=self.description or "",
            release_date=self.release_date,
            duration=self.duration,
        )


class FilmResponse(BaseModel):
    """Public film shape: {id, name, description, releaseDate, duration}."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: str
    release_date: date | None = Field(alias="releaseDate")
    duration: int

    @classmethod
    def from_entity(cls, film: Film) -> "FilmResponse":
        return cls(
            id=film.id,
            name=film.name,
            description=film.description,
            release_date=film.release_date,
            duration=film.duration,
        )
