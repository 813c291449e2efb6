from __future__ import annotations

from fastapi import APIRouter

from app.api.v1.endpoints import commands, health, meetings

api_router = APIRouter()
api_router.include_router(health.router, tags=["system"])
api_router.include_router(meetings.router, prefix="/meetings", tags=["meetings"])
api_router.include_router(commands.router, prefix="/commands", tags=["commands"])
