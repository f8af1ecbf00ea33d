"""Films Routes — CRUD, likes and the popularity ranking.

Invariants:
    - Field shape validated by FilmCreate/FilmUpdate before the service is called
    - /films/popular is registered before /films/{film_id} so it is not parsed as an id
    - count defaults to the app settings' popular_films_default_count, must be >= 1
    - Description length and earliest releaseDate checked against the app settings

Design Decisions:
    - Sync core called from async handlers: every core call is a short, lock-guarded
      dict operation with no IO
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from filmorate.api.dependencies import get_app_settings, get_relation_service
from filmorate.config import Settings
from filmorate.core.domain_types import FilmId, UserId
from filmorate.schemas.film import FilmCreate, FilmResponse, FilmUpdate
from filmorate.services.relation_service import RelationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/films", tags=["films"])


@router.get("", response_model=list[FilmResponse])
async def list_films(service: RelationService = Depends(get_relation_service)):
    """List every film."""
    return [FilmResponse.from_entity(f) for f in service.list_films()]


@router.get("/popular", response_model=list[FilmResponse])
async def popular_films(
    count: int | None = Query(None, ge=1),
    service: RelationService = Depends(get_relation_service),
    settings: Settings = Depends(get_app_settings),
):
    """Most liked films first; ties by ascending id."""
    if count is None:
        count = settings.popular_films_default_count
    return [FilmResponse.from_entity(f) for f in service.popular_films(count)]


@router.get("/{film_id}", response_model=FilmResponse)
async def get_film(
    film_id: int, service: RelationService = Depends(get_relation_service),
):
    return FilmResponse.from_entity(service.get_film(FilmId(film_id)))


@router.post("", response_model=FilmResponse, status_code=status.HTTP_201_CREATED)
async def create_film(
    body: FilmCreate,
    service: RelationService = Depends(get_relation_service),
    settings: Settings = Depends(get_app_settings),
):
    """Create a film; the catalog assigns the id."""
    body.check_limits(settings)
    return FilmResponse.from_entity(service.create_film(body.to_entity()))


@router.put("", response_model=FilmResponse)
async def update_film(
    body: FilmUpdate,
    service: RelationService = Depends(get_relation_service),
    settings: Settings = Depends(get_app_settings),
):
    """Replace a film wholesale."""
    body.check_limits(settings)
    return FilmResponse.from_entity(service.update_film(body.to_entity()))


@router.delete("/{film_id}")
async def delete_film(
    film_id: int, service: RelationService = Depends(get_relation_service),
):
    """Delete a film and its likes."""
    service.delete_film(FilmId(film_id))
    return {"status": "deleted", "id": film_id}


@router.put("/{film_id}/like/{user_id}")
async def like_film(
    film_id: int, user_id: int,
    service: RelationService = Depends(get_relation_service),
):
    service.like_film(FilmId(film_id), UserId(user_id))
    return {"status": "ok"}


@router.delete("/{film_id}/like/{user_id}")
async def unlike_film(
    film_id: int, user_id: int,
    service: RelationService = Depends(get_relation_service),
):
    service.unlike_film(FilmId(film_id), UserId(user_id))
    return {"status": "ok"}
