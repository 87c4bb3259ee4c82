"""
Contact Book Backend — Contacts Route Handlers
================================================

What:  The five CRUD endpoints under /api/v1/contacts.
Why:   Entry point for every contact operation from API clients.
How:   Each handler follows the same shape: parse path/body input → call
       ContactService → map the result (or failure) to a response.
Who:   Mounted by create_app() in app/main.py.

Route Inventory:
    GET    /api/v1/contacts        → 200 list            (storage error → 500)
    POST   /api/v1/contacts        → 201 created         (storage error → 400 "Bad Request")
    GET    /api/v1/contacts/{id}   → 200 contact         (bad id → 400, missing → 404, storage → 400)
    PUT    /api/v1/contacts/{id}   → 200 updated contact (bad id/fetch → 500, missing → 404, storage → 400)
    DELETE /api/v1/contacts/{id}   → 204 empty body      (bad id/fetch → 500, missing → 404, storage → 400)

The per-route codes are part of the public contract and differ on purpose;
existing clients key off them.

Body decoding:
    Request bodies are decoded best-effort. A body that is not a JSON object
    contributes no fields, and a field with the wrong type is skipped while
    the other fields are kept (a warning is logged either way). POST stores
    empty strings for skipped fields; PUT keeps the stored values.
"""

import json
import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from fastapi import APIRouter, Depends, Request, Response
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import DatabaseError, InvalidIdError, NotFoundError
from app.schemas.contact import (
    ContactCreate,
    ContactPayload,
    ContactResponse,
    ErrorResponse,
)
from app.services.contact_service import contact_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api/v1/contacts", tags=["Contacts"])

_DECIMAL_ID = re.compile(r"[+-]?[0-9]+")
_TEXT = TypeAdapter(str)


# ══════════════════════════════════════════════════════════════════════════
# Input helpers
# ══════════════════════════════════════════════════════════════════════════

def parse_contact_id(raw_id: str, error_code: int) -> int:
    """
    Convert the `{id}` path segment to an int.

    Raises:
        InvalidIdError with `error_code` when the segment is not an integer.
    """
    # ASCII digits only: int() would also accept "1_0", " 3" and "٣"
    if not _DECIMAL_ID.fullmatch(raw_id):
        raise InvalidIdError(raw_id=raw_id, code=error_code)
    return int(raw_id)


async def read_contact_fields(request: Request) -> Dict[str, Any]:
    """
    Decode the request body into the contact fields it actually contains.

    Returns only keys present in the body with a non-null value; `id` and
    unknown keys are dropped. Malformed JSON yields an empty dict.
    """
    raw = await request.body()
    if not raw:
        return {}

    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed JSON body on %s %s", request.method, request.url.path)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring non-object JSON body on %s %s", request.method, request.url.path)
        return {}

    # Each field stands alone: a wrong-typed one is skipped, the rest are kept
    fields: Dict[str, Any] = {}
    for key in ContactPayload.model_fields:
        value = data.get(key)
        if value is None:
            continue
        try:
            fields[key] = _TEXT.validate_python(value)
        except PydanticValidationError:
            logger.warning("Ignoring contact field %r with invalid value on %s %s",
                           key, request.method, request.url.path)
    return fields


@contextmanager
def storage_errors(code: int, message: Optional[str] = None) -> Iterator[None]:
    """Re-raise a DatabaseError from the wrapped call with this route's code."""
    try:
        yield
    except DatabaseError as e:
        e.code = code
        if message is not None:
            e.message = message
        raise


# ══════════════════════════════════════════════════════════════════════════
# Handlers
# ══════════════════════════════════════════════════════════════════════════

@router.get(
    "",
    response_model=List[ContactResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all contacts",
)
async def list_contacts(
    db: AsyncSession = Depends(get_db_session),
) -> List[ContactResponse]:
    """Return every contact; an empty table yields `[]`."""
    with storage_errors(500):
        return await contact_service.list(db)


@router.post(
    "",
    response_model=ContactResponse,
    status_code=201,
    responses={400: {"description": "Storage error", "model": ErrorResponse}},
    summary="Create a contact",
)
async def create_contact(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> ContactResponse:
    """
    Create a contact from the JSON body.

    Missing fields are stored as empty strings and any `id` in the body is
    ignored. Storage failures answer with a generic "Bad Request".
    """
    fields = await read_contact_fields(request)
    with storage_errors(400, message="Bad Request"):
        return await contact_service.create(db, ContactCreate(**fields))


@router.get(
    "/{contact_id}",
    response_model=ContactResponse,
    responses={
        400: {"description": "Invalid id or storage error", "model": ErrorResponse},
        404: {"description": "Contact not found", "model": ErrorResponse},
    },
    summary="Get a single contact by id",
)
async def get_contact(
    contact_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> ContactResponse:
    cid = parse_contact_id(contact_id, error_code=400)

    with storage_errors(400):
        contact = await contact_service.get_by_id(db, cid)

    if contact is None:
        raise NotFoundError(resource_id=cid)
    return contact


@router.put(
    "/{contact_id}",
    response_model=ContactResponse,
    responses={
        400: {"description": "Storage error while updating", "model": ErrorResponse},
        404: {"description": "Contact not found", "model": ErrorResponse},
        500: {"description": "Invalid id or lookup failure", "model": ErrorResponse},
    },
    summary="Update a contact",
)
async def update_contact(
    contact_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> ContactResponse:
    """
    Partially update a contact.

    The stored record is fetched first; only the keys present in the body
    overwrite it, so omitted fields keep their current values. The merged
    record is then written back in full.
    """
    cid = parse_contact_id(contact_id, error_code=500)

    with storage_errors(500):
        existing = await contact_service.get_by_id(db, cid)

    if existing is None:
        raise NotFoundError(resource_id=cid)

    merged = existing.model_copy(update=await read_contact_fields(request))

    with storage_errors(400):
        await contact_service.update(db, merged)

    return merged


@router.delete(
    "/{contact_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"description": "Storage error while deleting", "model": ErrorResponse},
        404: {"description": "Contact not found", "model": ErrorResponse},
        500: {"description": "Invalid id or lookup failure", "model": ErrorResponse},
    },
    summary="Delete a contact",
)
async def delete_contact(
    contact_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    cid = parse_contact_id(contact_id, error_code=500)

    with storage_errors(500):
        existing = await contact_service.get_by_id(db, cid)

    if existing is None:
        raise NotFoundError(resource_id=cid)

    with storage_errors(400):
        await contact_service.delete(db, existing)

    return Response(status_code=204, media_type="application/json")
