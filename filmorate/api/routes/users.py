"""Users Routes — CRUD and the friend graph.

Invariants:
    - Field shape validated by UserCreate/UserUpdate before the service is called
    - Duplicate email → 409, self-friendship → 400, unknown id → 404
"""

import logging

from fastapi import APIRouter, Depends, status

from filmorate.api.dependencies import get_relation_service
from filmorate.core.domain_types import UserId
from filmorate.schemas.user import UserCreate, UserResponse, UserUpdate
from filmorate.services.relation_service import RelationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(service: RelationService = Depends(get_relation_service)):
    return [UserResponse.from_entity(u) for u in service.list_users()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, service: RelationService = Depends(get_relation_service),
):
    return UserResponse.from_entity(service.get_user(UserId(user_id)))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate, service: RelationService = Depends(get_relation_service),
):
    """Create a user; email must be unique (case-insensitive)."""
    return UserResponse.from_entity(service.create_user(body.to_entity()))


@router.put("", response_model=UserResponse)
async def update_user(
    body: UserUpdate, service: RelationService = Depends(get_relation_service),
):
    """Replace a user wholesale."""
    return UserResponse.from_entity(service.update_user(body.to_entity()))


@router.delete("/{user_id}")
async def delete_user(
    user_id: int, service: RelationService = Depends(get_relation_service),
):
    """Delete a user, their friendships and their likes."""
    service.delete_user(UserId(user_id))
    return {"status": "deleted", "id": user_id}


@router.put("/{user_id}/friends/{friend_id}")
async def add_friend(
    user_id: int, friend_id: int,
    service: RelationService = Depends(get_relation_service),
):
    service.friend(UserId(user_id), UserId(friend_id))
    return {"status": "ok"}


@router.delete("/{user_id}/friends/{friend_id}")
async def remove_friend(
    user_id: int, friend_id: int,
    service: RelationService = Depends(get_relation_service),
):
    service.unfriend(UserId(user_id), UserId(friend_id))
    return {"status": "ok"}


@router.get("/{user_id}/friends", response_model=list[UserResponse])
async def list_friends(
    user_id: int, service: RelationService = Depends(get_relation_service),
):
    return [UserResponse.from_entity(u) for u in service.friends_of(UserId(user_id))]


@router.get(
    "/{user_id}/friends/common/{other_id}", response_model=list[UserResponse],
)
async def common_friends(
    user_id: int, other_id: int,
    service: RelationService = Depends(get_relation_service),
):
    """Friends shared by both users, ordered by id."""
    return [
        UserResponse.from_entity(u)
        for u in service.common_friends(UserId(user_id), UserId(other_id))
    ]
