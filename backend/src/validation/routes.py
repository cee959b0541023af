"""Validation routes: one statically bound schema per auth endpoint.

The body is read inside the rate-limited handler, so rejected payloads
count toward the limit like accepted ones.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..config import settings
from ..rate_limit import limiter
from .service import InvalidRequestBody, SchemaKind, validate

router = APIRouter(prefix="/auth/validate", tags=["validation"])


async def _validated_response(request: Request, kind: SchemaKind) -> JSONResponse:
    """Parse and validate the JSON body, answering with the normalized payload.

    Malformed JSON raises InvalidRequestBody; field violations raise
    RequestValidationFailed. Both are handled by exception handlers in main.py.
    """
    try:
        body = await request.json()
    except ValueError:
        raise InvalidRequestBody("Request body is not valid JSON") from None
    payload = validate(kind, body).unwrap()
    # Never echo the password back to the client.
    data = payload.model_dump(mode="json", by_alias=True, exclude={"password"})
    return JSONResponse({"ok": True, "data": data})


@router.post("/login")
@limiter.limit(settings.rate_limit_validate)
async def validate_login(request: Request):
    return await _validated_response(request, SchemaKind.LOGIN)


@router.post("/register-user")
@limiter.limit(settings.rate_limit_validate)
async def validate_register_user(request: Request):
    return await _validated_response(request, SchemaKind.REGISTER_USER)


@router.post("/register-employer")
@limiter.limit(settings.rate_limit_validate)
async def validate_register_employer(request: Request):
    return await _validated_response(request, SchemaKind.REGISTER_EMPLOYER)
