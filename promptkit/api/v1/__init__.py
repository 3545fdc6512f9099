"""API v1 routers.

Mounted under ``/api`` by the app factory, so every prompt operation lives at
``/api/v1/<operation>``: ``POST /optimize`` is served as
``POST /api/v1/optimize`` and ``POST /atomize`` as ``POST /api/v1/atomize``.
"""

from fastapi import APIRouter

from .prompts import router as prompts_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(prompts_router)
