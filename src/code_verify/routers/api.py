"""API routes for Code-Verify."""

import logging

from fastapi import APIRouter, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from code_verify.schemas import VerifyRequest, VerifyResponse
from code_verify.services import verification
from code_verify.services.verification import (
    INVALID_LENGTH_MESSAGE,
    SERVER_ERROR_MESSAGE,
)

router = APIRouter(prefix="/api")

logger = logging.getLogger(__name__)


def _verify_json(payload: VerifyResponse, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(exclude_none=True),
    )


@router.post(
    "/verify",
    response_model=VerifyResponse,
    response_model_exclude_none=True,
    responses={400: {"model": VerifyResponse}, 500: {"model": VerifyResponse}},
)
def verify(body: VerifyRequest):
    """Judge a submitted verification code."""
    try:
        outcome = verification.verify_code(body.code)
    except Exception:
        logger.exception("Unexpected error while verifying code")
        return _verify_json(
            VerifyResponse(success=False, message=SERVER_ERROR_MESSAGE), 500
        )

    return _verify_json(
        VerifyResponse(success=outcome.success, message=outcome.message),
        outcome.status_code,
    )


async def invalid_request_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed verify bodies as an invalid code."""
    if request.url.path != f"{router.prefix}/verify":
        return await request_validation_exception_handler(request, exc)

    logger.info("Malformed verify request: %s", exc.errors())
    return _verify_json(
        VerifyResponse(success=False, message=INVALID_LENGTH_MESSAGE), 400
    )
