"""API Dependencies — hands the app's RelationService and Settings to route handlers.

Invariants:
    - One RelationService and one Settings per app instance, both set in create_app()
    - Routes never construct tables or call get_settings() themselves

Design Decisions:
    - app.state over module-level singletons: each test app gets fresh tables
      and can carry its own configuration
"""

from fastapi import Request

from filmorate.config import Settings
from filmorate.services.relation_service import RelationService


def get_relation_service(request: Request) -> RelationService:
    """FastAPI dependency for the relation facade."""
    return request.app.state.relation_service


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the settings the app was built with."""
    return request.app.state.settings
