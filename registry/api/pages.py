from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from registry.config import get_settings
from registry.models.schemas import HealthResponse

router = APIRouter(tags=["pages"])


@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    return get_settings().index_text


@router.get("/home", response_class=PlainTextResponse)
async def home() -> str:
    return get_settings().home_text


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()
