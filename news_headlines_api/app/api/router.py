"""
Top‑level API router.

Aggregates the endpoint modules under a single router which
``main.create_app`` mounts at ``/api``.  The index is registered
directly on this router because its path is the mount point itself.
"""

from typing import Any, Dict

from fastapi import APIRouter

from .endpoints import index, news

router = APIRouter()

router.add_api_route("", index.get_index, methods=["GET"], response_model=Dict[str, Any], tags=["index"])
router.include_router(news.router, prefix="/news", tags=["news"])
