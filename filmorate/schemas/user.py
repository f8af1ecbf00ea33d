"""User Schemas — Pydantic models with field-level validation for the users API.

Invariants:
    - email: stripped, non-empty, contains '@'
    - login: non-empty, no whitespace
    - birthday: optional, not in the future
    - blank or missing name is replaced by login
    - UserUpdate requires id; the core replaces the whole record
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from filmorate.core.domain_types import UserId
from filmorate.core.entities import User


class UserBase(BaseModel):
    email: str
    login: str
    name: str | None = None
    birthday: date | None = None

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        v = v.strip()
        if not v or "@" not in v:
            raise ValueError("email must be non-empty and contain '@'")
        return v

    @field_validator("login")
    @classmethod
    def check_login(cls, v: str) -> str:
        if not v or v.isspace():
            raise ValueError("login cannot be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError("login cannot contain whitespace")
        return v

    @field_validator("birthday")
    @classmethod
    def check_birthday(cls, v: date | None) -> date | None:
        if v is not None and v > date.today():
            raise ValueError("birthday cannot be in the future")
        return v

    @model_validator(mode="after")
    def default_name_to_login(self):
        if self.name is None or not self.name.strip():
            self.name = self.login
        return self


class UserCreate(UserBase):
    """User creation payload — id is assigned by the directory."""

    def to_entity(self) -> User:
        return User(
            email=self.email, login=self.login,
            name=self.name, birthday=self.birthday,
        )


class UserUpdate(UserBase):
    """Full-replace payload for PUT /users."""
    id: int = Field(gt=0)

    def to_entity(self) -> User:
        return User(
            id=UserId(self.id), email=self.email, login=self.login,
            name=self.name, birthday=self.birthday,
        )


class UserResponse(BaseModel):
    """Public user shape: {id, email, login, name, birthday}."""
    id: int
    email: str
    login: str
    name: str
    birthday: date | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id, email=user.email, login=user.login,
            name=user.name, birthday=user.birthday,
        )
