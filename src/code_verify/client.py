"""HTTP client for the Code-Verify verification endpoint."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from code_verify.config import Settings
from code_verify.schemas import VerifyResponse

logger = logging.getLogger(__name__)


class VerifyServiceError(Exception):
    """Base error for verification request failures."""


class VerifyConnectionError(VerifyServiceError):
    """Raised when the verification service cannot be reached."""


class VerifyServerError(VerifyServiceError):
    """Raised when the verification service fails internally."""


class VerifyResponseError(VerifyServiceError):
    """Raised when the verification service returns a malformed body."""


class VerifyClient:
    """HTTP client for the verification service."""

    def __init__(
        self,
        settings: Settings,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        self.http = http or httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=httpx.Timeout(settings.request_timeout),
        )

    async def aclose(self) -> None:
        await self.http.aclose()

    async def verify(self, code: str) -> VerifyResponse:
        """Submit a code and return the service's judgement.

        Validation failures (4xx with a well-formed body) are returned, not
        raised. Transport faults, 5xx responses and malformed bodies raise a
        ``VerifyServiceError`` subclass.
        """
        try:
            response = await self.http.post("/api/verify", json={"code": code})
        except httpx.TimeoutException as exc:
            logger.warning("Verification request timed out: %s", exc)
            raise VerifyConnectionError("Verification request timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("Verification request failed: %s", exc)
            raise VerifyConnectionError(f"Connection error: {exc}") from exc

        if response.status_code >= 500:
            logger.warning(
                "Verification service error: status=%s", response.status_code
            )
            raise VerifyServerError(
                f"Verification service returned {response.status_code}"
            )

        try:
            return VerifyResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning(
                "Malformed verification response: status=%s", response.status_code
            )
            raise VerifyResponseError("Malformed verification response") from exc
