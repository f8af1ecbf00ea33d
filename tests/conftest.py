"""Root conftest — fresh in-memory tables for every test."""

import pytest

from filmorate.core.film_catalog import FilmCatalog
from filmorate.core.user_directory import UserDirectory
from filmorate.services.relation_service import RelationService


@pytest.fixture
def users() -> UserDirectory:
    return UserDirectory()


@pytest.fixture
def films() -> FilmCatalog:
    return FilmCatalog()


@pytest.fixture
def service(users, films) -> RelationService:
    return RelationService(users=users, films=films)
