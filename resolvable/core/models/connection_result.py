# resolvable/core/models/connection_result.py
from __future__ import annotations

from dataclasses import dataclass

from resolvable.core.errors import ResolutionTriggerError
from resolvable.core.logging import get_logger
from resolvable.core.resolution.capability import (
    InteractiveContext,
    ResolutionCapability,
)
from resolvable.core.resolution.result_types import ResolutionStartResult
from resolvable.core.types.error_code import ErrorCode
from resolvable.core.types.result import Ok, is_err

logger = get_logger('connection')


@dataclass(slots=True, frozen=True)
class ConnectionResult:
    """
    Outcome of an attempt to connect to the background service.

    Pairs an ``ErrorCode`` with an optional resolution that may fix the
    failure when started. Construction does not check the pairing: a
    resolution attached to ``SUCCESS`` is kept but never treated as
    actionable. A plain ``int`` code is decoded with ``ErrorCode.from_value``.

    Reconnecting always produces a new instance.
    """

    error_code: ErrorCode
    resolution: ResolutionCapability | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.error_code, ErrorCode):
            object.__setattr__(self, 'error_code', ErrorCode.from_value(self.error_code))

    @classmethod
    def success(cls) -> ConnectionResult:
        return cls(ErrorCode.SUCCESS)

    def is_success(self) -> bool:
        return self.error_code == ErrorCode.SUCCESS

    def has_resolution(self) -> bool:
        """Whether start_resolution() will start anything."""
        return self.error_code != ErrorCode.SUCCESS and self.resolution is not None

    def describe(self) -> str:
        return self.error_code.description

    def try_start_resolution(
        self, context: InteractiveContext, request_id: int
    ) -> ResolutionStartResult:
        """Dispatch the resolution into ``context`` tagged with ``request_id``.

        Returns Ok(False) when there is nothing to start, Ok(True) once the
        flow is under way, or Err(DispatchError) when the resolution can no
        longer be dispatched.
        """
        resolution = self.resolution
        if resolution is None or not self.has_resolution():
            return Ok(False)

        dispatched = resolution.dispatch(context, request_id)
        if is_err(dispatched):
            return dispatched
        return Ok(True)

    def start_resolution(self, context: InteractiveContext, request_id: int) -> None:
        """Start the resolution flow, if there is one.

        After the flow completes, ``context`` reports an outcome tagged with
        ``request_id``; on ``ResolutionOutcome.RESULT_OK`` reconnect.

        Raises:
            ResolutionTriggerError: the resolution is canceled, already
                consumed, or its target no longer exists.
        """
        started = self.try_start_resolution(context, request_id)
        if is_err(started):
            error = started.err_value
            logger.warning(
                f'Resolution for {self.error_code.label} could not be started: {error.message}',
                extra={'request_id': error.request_id, 'dispatch_code': error.code.value},
            )
            raise ResolutionTriggerError.from_dispatch_error(
                self.error_code, error
            ) from error.exception

    def __str__(self) -> str:
        return (
            f'ConnectionResult{{statusCode={self.error_code.label}, '
            f'resolution={self.resolution!r}}}'
        )
