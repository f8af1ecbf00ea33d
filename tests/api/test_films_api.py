"""Films API — verifies routes, status codes and JSON shape.

Invariants:
    - POST returns 201 with the assigned id; PUT replaces; GET unknown id → 404
    - Field rules (blank name, long description, early/future date, duration) → 400
    - Like/unlike unknown film or user → 404
    - /films/popular defaults to 10 and rejects count < 1 with 400
    - Settings passed to create_app() drive the default count and film limits
"""

from datetime import date, timedelta

from httpx import ASGITransport, AsyncClient

from filmorate.config import Settings
from filmorate.main import create_app


async def _create_film(client, payload):
    res = await client.post("/films", json=payload)
    assert res.status_code == 201
    return res.json()


async def _create_user(client, n):
    res = await client.post(
        "/users", json={"email": f"u{n}@example.com", "login": f"u{n}"},
    )
    assert res.status_code == 201
    return res.json()


async def test_create_film_returns_201_with_camel_case_shape(client, film_payload):
    res = await client.post("/films", json=film_payload())
    assert res.status_code == 201
    assert res.json() == {
        "id": 1,
        "name": "Film 1",
        "description": "A film",
        "releaseDate": "1999-03-31",
        "duration": 136,
    }


async def test_list_films(client, film_payload):
    await _create_film(client, film_payload(1))
    await _create_film(client, film_payload(2))
    res = await client.get("/films")
    assert res.status_code == 200
    assert [f["id"] for f in res.json()] == [1, 2]


async def test_get_film_and_missing_film(client, film_payload):
    film = await _create_film(client, film_payload())
    res = await client.get(f"/films/{film['id']}")
    assert res.status_code == 200
    assert res.json() == film
    res = await client.get("/films/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_duplicate_titles_are_accepted(client, film_payload):
    await _create_film(client, film_payload(name="Same"))
    res = await client.post("/films", json=film_payload(name="same"))
    assert res.status_code == 201


async def test_update_film_replaces_record(client, film_payload):
    film = await _create_film(client, film_payload())
    body = film_payload(name="New name", duration=100)
    body["id"] = film["id"]
    res = await client.put("/films", json=body)
    assert res.status_code == 200
    assert res.json()["name"] == "New name"
    assert res.json()["duration"] == 100


async def test_update_unknown_film_returns_404(client, film_payload):
    body = film_payload()
    body["id"] = 42
    res = await client.put("/films", json=body)
    assert res.status_code == 404


async def test_update_without_id_returns_400(client, film_payload):
    res = await client.put("/films", json=film_payload())
    assert res.status_code == 400


async def test_blank_name_returns_400(client, film_payload):
    res = await client.post("/films", json=film_payload(name="   "))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_description_limit(client, film_payload):
    ok = await client.post("/films", json=film_payload(description="x" * 200))
    assert ok.status_code == 201
    res = await client.post("/films", json=film_payload(description="x" * 201))
    assert res.status_code == 400


async def test_release_date_bounds(client, film_payload):
    ok = await client.post("/films", json=film_payload(releaseDate="1895-12-28"))
    assert ok.status_code == 201
    early = await client.post("/films", json=film_payload(releaseDate="1895-12-27"))
    assert early.status_code == 400
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    future = await client.post("/films", json=film_payload(releaseDate=tomorrow))
    assert future.status_code == 400


async def test_non_positive_duration_returns_400(client, film_payload):
    for duration in (0, -5):
        res = await client.post("/films", json=film_payload(duration=duration))
        assert res.status_code == 400


async def test_like_and_unlike(client, film_payload):
    film = await _create_film(client, film_payload())
    user = await _create_user(client, 1)
    res = await client.put(f"/films/{film['id']}/like/{user['id']}")
    assert res.status_code == 200
    res = await client.delete(f"/films/{film['id']}/like/{user['id']}")
    assert res.status_code == 200


async def test_like_unknown_user_or_film_returns_404(client, film_payload):
    film = await _create_film(client, film_payload())
    user = await _create_user(client, 1)
    res = await client.put(f"/films/{film['id']}/like/77")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["entity"] == "User"
    res = await client.put(f"/films/77/like/{user['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["entity"] == "Film"


async def test_unlike_unknown_user_returns_404(client, film_payload):
    film = await _create_film(client, film_payload())
    res = await client.delete(f"/films/{film['id']}/like/5")
    assert res.status_code == 404


async def test_popular_films_ranking(client, film_payload):
    f1 = await _create_film(client, film_payload(1))
    f2 = await _create_film(client, film_payload(2))
    f3 = await _create_film(client, film_payload(3))
    people = [await _create_user(client, n) for n in (1, 2, 3)]
    for person in people:
        await client.put(f"/films/{f1['id']}/like/{person['id']}")
    for person in people[:2]:
        await client.put(f"/films/{f2['id']}/like/{person['id']}")
    await client.put(f"/films/{f2['id']}/like/{people[0]['id']}")

    res = await client.get("/films/popular", params={"count": 2})
    assert res.status_code == 200
    assert [f["id"] for f in res.json()] == [f1["id"], f2["id"]]
    res = await client.get("/films/popular")
    assert [f["id"] for f in res.json()] == [f1["id"], f2["id"], f3["id"]]


async def test_popular_default_count_is_ten(client, film_payload):
    for n in range(1, 13):
        await _create_film(client, film_payload(n))
    res = await client.get("/films/popular")
    assert len(res.json()) == 10


async def test_popular_rejects_zero_count(client):
    res = await client.get("/films/popular", params={"count": 0})
    assert res.status_code == 400


async def test_delete_film(client, film_payload):
    film = await _create_film(client, film_payload())
    res = await client.delete(f"/films/{film['id']}")
    assert res.status_code == 200
    assert (await client.get(f"/films/{film['id']}")).status_code == 404
    assert (await client.delete(f"/films/{film['id']}")).status_code == 404


async def test_non_integer_id_returns_400(client):
    res = await client.get("/films/abc")
    assert res.status_code == 400


async def test_app_uses_injected_settings(film_payload):
    settings = Settings(
        popular_films_default_count=2,
        film_description_max_length=5,
        earliest_release_date=date(1950, 1, 1),
    )
    app = create_app(settings=settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as client:
        for n in range(1, 4):
            await _create_film(client, film_payload(n, description="short"))
        res = await client.get("/films/popular")
        assert [f["id"] for f in res.json()] == [1, 2]

        res = await client.post("/films", json=film_payload(description="eleven char"))
        assert res.status_code == 400
        assert res.json()["error"]["context"] is not None

        res = await client.post("/films", json=film_payload(releaseDate="1940-01-01"))
        assert res.status_code == 400

        body = film_payload(description="too long here")
        body["id"] = 1
        res = await client.put("/films", json=body)
        assert res.status_code == 400
