"""
Student Council API — Minutes Routes
======================================

What:  GET /api/minutes (any authenticated caller) and POST /api/minutes
       (Secretary only).

POST declares no body parameter: FastAPI would decode and validate a
declared body before running dependencies. The raw body is validated only
after the role dependency has passed, so a non-Secretary gets 403 even for
malformed JSON.
"""

from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from council.models.user import Capability
from council.schemas.common import ErrorResponse
from council.schemas.meeting import MinutesCreate, MinutesEnvelope, MinutesResponse
from council.security import Identity, require_auth, require_capability
from council.services.meeting_service import meeting_service
from council.store import InMemoryStore, get_store

router = APIRouter(prefix="/api/minutes", tags=["Minutes"])


async def read_minutes_body(request: Request) -> MinutesCreate:
    """
    Validate the raw request body as MinutesCreate.

    Raises:
        RequestValidationError: Malformed JSON or invalid fields (→ 422).
    """
    try:
        return MinutesCreate.model_validate_json(await request.body())
    except PydanticValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err.get("loc", ()))} for err in e.errors()]
        )


@router.get(
    "",
    response_model=List[MinutesResponse],
    summary="List recorded minutes in creation order",
)
async def list_minutes(
    identity: Identity = Depends(require_auth),
    store: InMemoryStore = Depends(get_store),
) -> List[MinutesResponse]:
    return meeting_service.list_minutes(store)


@router.post(
    "",
    response_model=MinutesEnvelope,
    responses={
        403: {"description": "Caller is not the Secretary", "model": ErrorResponse},
        422: {"description": "Malformed JSON or invalid fields", "model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": MinutesCreate.model_json_schema(by_alias=True)},
            },
        },
    },
    summary="Record minutes (Secretary only)",
)
async def create_minutes(
    request: Request,
    identity: Identity = Depends(require_capability(Capability.RECORD_MINUTES)),
    store: InMemoryStore = Depends(get_store),
) -> MinutesEnvelope:
    body = await read_minutes_body(request)
    return MinutesEnvelope(
        minutes=meeting_service.create_minutes(store, body, created_by=identity.id),
    )
