"""Verification service for submitted codes."""

import logging
from dataclasses import dataclass
from typing import Optional

CODE_LENGTH = 6
FORBIDDEN_LAST_DIGIT = "7"

INVALID_LENGTH_MESSAGE = "Invalid code. Code must be 6 digits long."
ENDS_IN_SEVEN_MESSAGE = "Verification Error: Code ends in 7"
SERVER_ERROR_MESSAGE = "Server error, please try again later."

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of judging a single code."""

    success: bool
    status_code: int = 200
    message: Optional[str] = None


def verify_code(code: Optional[str]) -> VerificationOutcome:
    """Check code length and reject codes whose last character is '7'.

    Only the length and the final character are inspected; the other
    characters are never checked for being digits.
    """
    if not code or len(code) != CODE_LENGTH:
        logger.info("Rejected code of length %d", len(code or ""))
        return VerificationOutcome(
            success=False, status_code=400, message=INVALID_LENGTH_MESSAGE
        )

    if code[CODE_LENGTH - 1] == FORBIDDEN_LAST_DIGIT:
        logger.info("Rejected code ending in %s", FORBIDDEN_LAST_DIGIT)
        return VerificationOutcome(
            success=False, status_code=400, message=ENDS_IN_SEVEN_MESSAGE
        )

    return VerificationOutcome(success=True)
