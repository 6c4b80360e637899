"""Placeholder API surface."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/ping", summary="Connectivity probe")
async def ping() -> JSONResponse:
    return JSONResponse({"pong": True})
