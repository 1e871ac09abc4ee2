"""
Person endpoints.

Only creation is exposed.  The body is validated by ``PersonService``
rather than by FastAPI's request model binding so that each kind of
rejection keeps its own status code and message; any other method on
``/pessoas`` is answered with 405 by the router.
"""

from fastapi import APIRouter, Depends, Response, status

from pessoas_api.app.api.dependencies import get_person_service, get_raw_body
from pessoas_api.app.services.person_service import PersonService

router = APIRouter()


# Plain ``def``: FastAPI runs each request on its worker thread pool.
@router.post("/pessoas", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_person(
    body: bytes = Depends(get_raw_body),
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Create a person.  Responds with an empty 201 on success."""
    service.create_person(body)
    return Response(status_code=status.HTTP_201_CREATED)
