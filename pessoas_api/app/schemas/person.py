"""
Pydantic models for person data.

``PersonPayload`` mirrors the JSON body accepted by ``POST /pessoas``.
Every field is optional at this level: presence and length rules are
enforced by ``PersonService`` so that a missing field is reported as a
validation failure rather than as an undecodable body.  Type mismatches
(a number where a string is expected, a string where a list is
expected) are rejected here because the body does not have the
expected shape.

``PersonRecord`` is what the store keeps.  ``stack`` is ``None`` when
the client sent no stack (or ``null``) and a tuple, possibly empty,
otherwise.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PersonPayload(BaseModel):
    """Schema for the body of a person creation request."""

    # Strict so that e.g. ``{"apelido": 1}`` is not silently coerced.
    model_config = ConfigDict(strict=True, extra="ignore")

    apelido: Optional[str] = Field(None, examples=["roy"])
    nome: Optional[str] = Field(None, examples=["Roy M"])
    nascimento: Optional[str] = Field(None, examples=["1990-01-01"])
    # ``null`` items are kept so the stack rules can reject them as empty.
    stack: Optional[List[Optional[str]]] = Field(None, examples=[["go", "python"]])


class PersonRecord(BaseModel):
    """A validated person as kept in the store."""

    model_config = ConfigDict(frozen=True)

    apelido: str
    nome: str
    nascimento: str
    stack: Optional[Tuple[str, ...]] = None
