"""
Service layer for person records.

``PersonService.create_person`` runs a creation request through a fixed
sequence of checks and stops at the first one that fails:

1. decode the raw body into a ``PersonPayload`` (``MalformedInput``);
2. required fields and maximum lengths from ``FIELD_RULES``
   (``ValidationError``, listing every failing field);
3. ``nascimento`` matches ``YYYY-MM-DD`` textually
   (``InvalidDateFormat``); no calendar check is made;
4. each ``stack`` item, when a stack was sent, is non-empty and at most
   ``MAX_STACK_ITEM_LENGTH`` characters (``InvalidStackItem``);
5. guarded insert into the store (``DuplicateNickname``).

Steps 1–4 only look at the request and need no locking.  Step 5 is
delegated to ``PersonStore.try_insert``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pydantic

from pessoas_api.app.core.exceptions import (
    DuplicateNickname,
    InvalidDateFormat,
    InvalidStackItem,
    MalformedInput,
    ValidationError,
)
from pessoas_api.app.core.store import PersonStore
from pessoas_api.app.schemas.person import PersonPayload, PersonRecord

logger = logging.getLogger(__name__)

# ASCII digits only; ``\d`` would also accept other Unicode digits.
# Used with ``fullmatch`` so a trailing newline is rejected.
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
MAX_STACK_ITEM_LENGTH = 32


@dataclass(frozen=True)
class FieldRule:
    """Presence and length rule for one required string field."""

    name: str
    max_length: Optional[int] = None

    def check(self, value: Optional[str]) -> Optional[str]:
        """Return a description of the violation, or ``None`` if valid."""
        if not value:
            return f"'{self.name}' é obrigatório"
        if self.max_length is not None and len(value) > self.max_length:
            return f"'{self.name}' deve ter no máximo {self.max_length} caracteres"
        return None


FIELD_RULES: Sequence[FieldRule] = (
    FieldRule("apelido", max_length=32),
    FieldRule("nome", max_length=100),
    FieldRule("nascimento"),
)


def decode_payload(body: bytes) -> PersonPayload:
    """Parse a raw request body into a ``PersonPayload``.

    Parsing is done by pydantic's JSON parser, which also bounds nesting
    depth.  A literal ``null`` body decodes to an empty payload so that
    it is reported by the field rules like any other missing field.
    """
    try:
        return PersonPayload.model_validate_json(body)
    except pydantic.ValidationError as exc:
        errors = exc.errors()
        if len(errors) == 1 and errors[0]["type"] == "model_type" and errors[0]["input"] is None:
            return PersonPayload()
        if any(err["type"] == "json_invalid" for err in errors):
            raise MalformedInput("Erro ao decodificar JSON: corpo inválido") from exc
        if any(err["type"] == "model_type" for err in errors):
            raise MalformedInput("Erro ao decodificar JSON: o corpo deve ser um objeto") from exc
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in errors)
        raise MalformedInput(f"Erro ao decodificar JSON: tipo inválido em {fields}") from exc


def validate_fields(payload: PersonPayload) -> None:
    """Apply ``FIELD_RULES`` and report every failing field at once."""
    problems: List[str] = []
    failed: List[str] = []
    for rule in FIELD_RULES:
        problem = rule.check(getattr(payload, rule.name))
        if problem is not None:
            problems.append(problem)
            failed.append(rule.name)
    if problems:
        raise ValidationError("Erro de validação: " + "; ".join(problems), fields=failed)


def validate_birth_date(value: str) -> None:
    if not DATE_PATTERN.fullmatch(value):
        raise InvalidDateFormat("Formato de nascimento inválido. Use AAAA-MM-DD")


def validate_stack(stack: Optional[List[Optional[str]]]) -> None:
    """Check stack items; an absent stack and an empty one are both valid."""
    if stack is None:
        return
    for index, item in enumerate(stack):
        if not item:
            raise InvalidStackItem(
                f"Item {index} da stack não pode ser vazio",
                index=index,
                value=item,
            )
        if len(item) > MAX_STACK_ITEM_LENGTH:
            raise InvalidStackItem(
                f"Item {index} da stack ({item!r}) deve ter no máximo "
                f"{MAX_STACK_ITEM_LENGTH} caracteres",
                index=index,
                value=item,
            )


class PersonService:
    """Creates person records in a ``PersonStore``."""

    def __init__(self, store: PersonStore) -> None:
        self.store = store

    def create_person(self, body: bytes) -> PersonRecord:
        """Validate ``body`` and insert the resulting record.

        Raises one of the ``ApplicationError`` subclasses from
        ``core.exceptions`` on the first failing check.  On success the
        stored record is returned; the store is only modified when every
        check passed.
        """
        payload = decode_payload(body)
        validate_fields(payload)
        validate_birth_date(payload.nascimento)
        validate_stack(payload.stack)

        record = PersonRecord(
            apelido=payload.apelido,
            nome=payload.nome,
            nascimento=payload.nascimento,
            stack=tuple(payload.stack) if payload.stack is not None else None,
        )
        if not self.store.try_insert(record.apelido, record):
            logger.info("Rejected duplicate nickname %r", record.apelido)
            raise DuplicateNickname("Apelido já existente")
        logger.info("Created person %r", record.apelido)
        return record
