from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from registry.api.dependencies import get_registry
from registry.models.schemas import ErrorResponse, User
from registry.services.user_service import UserRegistryService, decode_candidate

router = APIRouter(tags=["users"])

logger = logging.getLogger(__name__)

_USER_LIST = TypeAdapter(list[User])


@router.get("/users", response_model=list[User])
async def list_users(registry: UserRegistryService = Depends(get_registry)) -> Response:
    users = registry.list_users()
    try:
        body = _USER_LIST.dump_json(users, by_alias=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        logger.exception("users.encode_failed", extra={"user_count": len(users)})
        raise HTTPException(status_code=500, detail="failed to encode users") from exc
    return Response(content=body, media_type="application/json")


@router.post(
    "/users",
    status_code=201,
    response_model=User,
    responses={400: {"model": ErrorResponse}},
)
async def create_user(request: Request, registry: UserRegistryService = Depends(get_registry)) -> User:
    # Body is decoded by hand so malformed input answers 400 rather than 422.
    candidate = decode_candidate(await request.body())
    return registry.create_user(candidate)
