"""Liveness endpoint."""

from typing import Dict

from fastapi import APIRouter

from crud_dashboard.app.core.config import settings
from crud_dashboard.app.schemas.envelope import Envelope

router = APIRouter()


@router.get("", response_model=Envelope[Dict[str, str]])
async def health() -> dict:
    return {"data": {"status": "ok", "version": settings.api_version}}
