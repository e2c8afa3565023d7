"""API version 1 routes."""

from fastapi import APIRouter

from icon_catalog.api.v1 import icons

router = APIRouter(prefix="/api/v1")

router.include_router(icons.router)
