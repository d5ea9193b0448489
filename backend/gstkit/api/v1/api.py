from fastapi import APIRouter
from gstkit.api.v1.endpoints import (
    gst,
    formatting,
)

api_router = APIRouter()
api_router.include_router(gst.router, prefix="/gst", tags=["gst"])
api_router.include_router(formatting.router, prefix="/format", tags=["formatting"])
