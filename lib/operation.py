# =============================================================================
# lib/operation.py - Operation Boundary
# =============================================================================
# The one place where exceptions become failure envelopes.
#
# Service methods are decorated with @operation(scope, *fields). The decorator:
#   1. emits a start event with the named keyword arguments
#   2. runs the method
#   3. emits success/failure with the outcome
#   4. converts any exception into a Failure
#
# Events are delivered best-effort: an exception raised by the sink is
# dropped and the operation's result is returned unchanged.
#
# Decorated methods must take their inputs as keyword arguments and must
# belong to an object with an `events` attribute (an OperationEvents sink).
# =============================================================================

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from lib.result import Failure, Result

F = TypeVar("F", bound=Callable[..., Result])


def operation(scope: str, *fields: str) -> Callable[[F], F]:
    """
    Wrap a service method in the start/outcome/convert boundary.

    Args:
        scope: Operation name used in every event (e.g. "delete_avatar")
        fields: Keyword argument names to attach to events

    Example:
        class VoiceService:
            @operation("delete_voice", "uid", "voice_id")
            def delete_voice(self, *, uid: str, voice_id: str) -> Result:
                ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Result:
            context = {name: kwargs.get(name) for name in fields}
            events = self.events
            _notify(events.start, scope, "Incoming request", **context)

            try:
                result = func(self, *args, **kwargs)
            except Exception as exc:
                failure = Failure.from_exception(exc)
                _notify(events.failure, scope, exc, **_with_stage(context, failure.stage))
                return failure

            if result.success:
                _notify(events.success, scope, "Completed", **context)
            else:
                _notify(
                    events.failure,
                    scope,
                    result.error,
                    **_with_stage(context, result.stage),
                    code=result.code,
                )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def _notify(callback: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    """Deliver one event; a failing sink never changes the outcome."""
    try:
        callback(*args, **kwargs)
    except Exception:
        pass


def _with_stage(context: dict[str, Any], stage: str | None) -> dict[str, Any]:
    if stage:
        return {**context, "stage": stage}
    return context
