"""
Top‑level router.

Aggregates the resource routers.  Reading, searching and counting
people are not part of the API yet; new routers for them would be
included here.
"""

from fastapi import APIRouter

from .endpoints import pessoas

router = APIRouter()

router.include_router(pessoas.router, tags=["pessoas"])
