# =============================================================================
# lib/events.py - Structured Operation Events
# =============================================================================
# Services report what they are doing through an OperationEvents sink:
#   start   - request received, with its identifying fields
#   success - operation finished
#   failure - operation failed, with the stage that failed
#
# Emitting an event never raises and never changes what an operation returns.
#
# Usage:
#   events = LoggingEvents()
#   events.start("delete_voice", "Incoming request", uid=uid, voice_id=voice_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Protocol

from app.exceptions import StudioException

LOG_PREFIX = "[ServerAction]"

EVENTS_LOGGER = "studio.operations"


class OperationEvents(Protocol):
    """Sink for operation lifecycle events."""

    def start(self, scope: str, message: str, **fields: Any) -> None: ...

    def success(self, scope: str, message: str, **fields: Any) -> None: ...

    def failure(self, scope: str, error: BaseException | str, **fields: Any) -> None: ...


def _format_fields(fields: dict[str, Any]) -> str:
    return " ".join(f"{key}={value!r}" for key, value in fields.items())


def _describe_error(error: BaseException | str) -> dict[str, Any]:
    if isinstance(error, StudioException):
        return error.to_dict()
    if isinstance(error, BaseException):
        return {"error_type": type(error).__name__, "message": str(error)}
    return {"message": error}


class LoggingEvents:
    """
    OperationEvents implementation backed by the standard logging module.

    Lines look like:
        [ServerAction] delete_voice - Incoming request | uid='u-1' voice_id='v-1'

    Timestamps come from the logging formatter configured in app/main.py.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(EVENTS_LOGGER)

    def start(self, scope: str, message: str, **fields: Any) -> None:
        self._emit(logging.INFO, scope, message, fields)

    def success(self, scope: str, message: str, **fields: Any) -> None:
        self._emit(logging.INFO, scope, message, fields)

    def failure(self, scope: str, error: BaseException | str, **fields: Any) -> None:
        self._emit(logging.ERROR, scope, "ERROR", fields, error=error)

    def _emit(
        self,
        level: int,
        scope: str,
        message: str,
        fields: dict[str, Any],
        error: BaseException | str | None = None,
    ) -> None:
        try:
            exc_info = None
            if error is not None:
                fields = {**fields, **_describe_error(error)}
                # Unexpected exceptions get a traceback in the log (never in the envelope)
                if isinstance(error, BaseException) and not isinstance(error, StudioException):
                    exc_info = error
            line = f"{LOG_PREFIX} {scope} - {message}"
            if fields:
                line = f"{line} | {_format_fields(fields)}"
            self._logger.log(level, line, exc_info=exc_info)
        except Exception:
            # Logging is observational only
            pass
