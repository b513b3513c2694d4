from __future__ import annotations

from fastapi import Request

from registry.services.user_service import UserRegistryService


def get_registry(request: Request) -> UserRegistryService:
    return request.app.state.registry
