"""Code entry form state management."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from code_verify.client import VerifyServiceError
from code_verify.schemas import VerifyResponse

CELL_COUNT = 6

PASTE_ERROR_MESSAGE = "Please paste up to 6 digits."
INVALID_DIGITS_MESSAGE = "Please enter valid 6 digits."
SUCCESS_MESSAGE = "Verification successful!"
FAILED_MESSAGE = "Verification failed."
NETWORK_ERROR_MESSAGE = "Verification error."

_PASTE_PATTERN = re.compile(r"[0-9]{1,6}")

logger = logging.getLogger(__name__)


class Verifier(Protocol):
    async def verify(self, code: str) -> VerifyResponse: ...


class VerificationResult(str, enum.Enum):
    SUCCESS = "success"
    CLIENT_VALIDATION_FAILURE = "client_validation_failure"
    SERVER_VALIDATION_FAILURE = "server_validation_failure"
    NETWORK_ERROR = "network_error"


def _is_digit(value: str) -> bool:
    return len(value) == 1 and value in "0123456789"


@dataclass
class CharacterCell:
    """One single-character input position."""

    value: str = ""
    error: bool = False

    def clear(self) -> None:
        self.value = ""
        self.error = False


@dataclass
class CodeEntryForm:
    """Tracks the six cells, focus and messages of one code entry form.

    The cells are the only stored copy of the code; ``code`` is derived.
    """

    cells: List[CharacterCell] = field(
        default_factory=lambda: [CharacterCell() for _ in range(CELL_COUNT)]
    )
    focus: int = 0
    error: str = ""
    success: str = ""
    submitting: bool = False

    @property
    def code(self) -> str:
        return "".join(cell.value for cell in self.cells)

    @property
    def cell_errors(self) -> List[bool]:
        return [cell.error for cell in self.cells]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"cell index out of range: {index}")

    def enter(self, index: int, value: str) -> None:
        """Apply new content typed into cell ``index``."""
        self._check_index(index)
        value = value[:1]
        cell = self.cells[index]
        cell.value = value
        cell.error = not _is_digit(value)

        if not cell.error and index < CELL_COUNT - 1:
            self.focus = index + 1

    def backspace(self, index: int) -> None:
        """Clear cell ``index`` and step focus back, even if it was empty."""
        self._check_index(index)
        self.cells[index].clear()
        if index > 0:
            self.focus = index - 1

    def paste(self, text: str) -> bool:
        """Distribute pasted digits from the first cell onwards.

        Returns False and leaves the cells untouched unless ``text`` is one
        to six ASCII digits.
        """
        if not _PASTE_PATTERN.fullmatch(text):
            self.error = PASTE_ERROR_MESSAGE
            return False

        self.error = ""
        for cell, char in zip(self.cells, text):
            cell.value = char
            cell.error = False
        self.focus = min(len(text) - 1, CELL_COUNT - 1)
        return True

    def validate(self) -> bool:
        """Flag every cell that does not hold exactly one digit."""
        for cell in self.cells:
            cell.error = not _is_digit(cell.value)
        return not any(self.cell_errors)

    def reset(self) -> None:
        """Empty all cells and clear their error flags."""
        for cell in self.cells:
            cell.clear()

    async def submit(self, verifier: Verifier) -> Optional[VerificationResult]:
        """Validate the cells and send the code for verification.

        Returns None without contacting the verifier when a previous
        submission is still in flight.
        """
        if self.submitting:
            logger.debug("Ignoring submit while a verification is pending")
            return None

        self.error = ""
        self.success = ""

        if not self.validate():
            self.error = INVALID_DIGITS_MESSAGE
            return VerificationResult.CLIENT_VALIDATION_FAILURE

        self.submitting = True
        try:
            response = await verifier.verify(self.code)
        except VerifyServiceError as exc:
            logger.warning("Verification request failed: %s", exc)
            self.error = NETWORK_ERROR_MESSAGE
            return VerificationResult.NETWORK_ERROR
        finally:
            self.submitting = False

        if not response.success:
            self.error = FAILED_MESSAGE
            return VerificationResult.SERVER_VALIDATION_FAILURE

        self.success = SUCCESS_MESSAGE
        self.reset()
        return VerificationResult.SUCCESS
