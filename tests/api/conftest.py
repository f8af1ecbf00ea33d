"""API test fixtures — a fresh app (fresh tables) and an httpx client per test."""

import pytest
from httpx import ASGITransport, AsyncClient

from filmorate.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def film_payload():
    def _build(n: int = 1, **overrides) -> dict:
        body = {
            "name": f"Film {n}",
            "description": "A film",
            "releaseDate": "1999-03-31",
            "duration": 136,
        }
        body.update(overrides)
        return body
    return _build


@pytest.fixture
def user_payload():
    def _build(n: int = 1, **overrides) -> dict:
        body = {
            "email": f"user{n}@example.com",
            "login": f"user{n}",
            "name": f"User {n}",
            "birthday": "1990-05-17",
        }
        body.update(overrides)
        return body
    return _build
