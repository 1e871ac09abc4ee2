"""
Dependency providers for the HTTP layer.

The person store is created once per application in ``create_app`` and
kept on ``app.state``; services are built around it per request.
"""

from fastapi import Request

from pessoas_api.app.core.store import PersonStore
from pessoas_api.app.services.person_service import PersonService


async def get_raw_body(request: Request) -> bytes:
    """Read the request body so that sync endpoints can use it."""
    return await request.body()


def get_person_store(request: Request) -> PersonStore:
    return request.app.state.person_store


def get_person_service(request: Request) -> PersonService:
    return PersonService(get_person_store(request))
