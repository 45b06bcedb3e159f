# =============================================================================
# lib/result.py - Result Envelope
# =============================================================================
# Every operation returns exactly one of:
#   Success -> {"success": True, ...payload}
#   Failure -> {"success": False, "error": "<message>"}
#
# Callers branch on `.success` only.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from app.exceptions import StudioException, UnknownError


@dataclass(frozen=True)
class Success:
    """Successful outcome with an operation-specific payload."""

    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return True

    def to_envelope(self) -> dict[str, Any]:
        envelope = dict(self.payload)
        envelope["success"] = True
        return envelope


@dataclass(frozen=True)
class Failure:
    """
    Failed outcome carrying a single display-ready message.

    `code` and `stage` are for logs; only `error` goes into the envelope.
    """

    error: str
    code: str = "UNKNOWN_ERROR"
    stage: str | None = None

    @property
    def success(self) -> bool:
        return False

    def to_envelope(self) -> dict[str, Any]:
        return {"success": False, "error": self.error}

    @classmethod
    def from_exception(cls, exc: BaseException) -> Failure:
        """
        Build a Failure from any exception.

        StudioException keeps its own message and category. Anything else
        becomes UNKNOWN_ERROR with the exception text, or the generic message
        when the exception has no text or its text
        cannot be produced.
        """
        if isinstance(exc, StudioException):
            return cls(error=exc.message, code=exc.code, stage=exc.stage)

        try:
            message = str(exc).strip()
        except Exception:
            message = ""
        return cls(error=message or UnknownError.DEFAULT_MESSAGE, code="UNKNOWN_ERROR")


Result = Union[Success, Failure]


def ok(**payload: Any) -> Success:
    """Shorthand for Success(payload={...})."""
    return Success(payload=payload)


def fail(error: str, code: str, stage: str | None = None) -> Failure:
    """Shorthand for a Failure returned through ordinary control flow."""
    return Failure(error=error, code=code, stage=stage)
