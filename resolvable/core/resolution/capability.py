"""Resolution capabilities and the interactive context they dispatch into."""

from __future__ import annotations

import threading
from typing import Any, Protocol, runtime_checkable

from resolvable.core.logging import get_logger
from resolvable.core.models.config import ResolutionConfig, RetriggerPolicy
from resolvable.core.resolution.result_types import (
    DispatchError,
    DispatchErrorCode,
    DispatchResult,
)
from resolvable.core.types.result import Err, Ok, is_err

logger = get_logger('resolution')


@runtime_checkable
class InteractiveContext(Protocol):
    """Surface that presents resolution UI.

    ``launch`` starts the flow for ``handle`` and returns once it is under
    way. Completion is reported later through the context's own callback
    channel, tagged with ``request_id``. Return
    ``Err(DispatchError(TARGET_UNAVAILABLE, ...))`` when the handle no
    longer points at anything that can run.
    """

    def launch(self, handle: Any, request_id: int) -> DispatchResult: ...


@runtime_checkable
class ResolutionCapability(Protocol):
    """An opaque action that may fix a connection error when started."""

    def dispatch(self, context: InteractiveContext, request_id: int) -> DispatchResult: ...


class PendingResolution:
    """Single-use resolution wrapping a platform handle.

    Under ``RetriggerPolicy.REJECT`` the first successful dispatch consumes
    the resolution; dispatches made while a launch is in flight, or after it
    succeeded, return ``ALREADY_DISPATCHED``. Under ``REDISPATCH`` every
    dispatch launches again. A failed launch never consumes it. ``cancel()``
    invalidates it for good.

    ``context.launch`` runs without the lock held, so the context may call
    ``cancel()`` or ``dispatch()`` from inside it.
    """

    __slots__ = (
        '_handle',
        '_config',
        '_lock',
        '_canceled',
        '_launching',
        '_dispatch_count',
    )

    def __init__(self, handle: Any, *, config: ResolutionConfig | None = None) -> None:
        self._handle = handle
        self._config = config if config is not None else ResolutionConfig()
        self._lock = threading.Lock()
        self._canceled = False
        self._launching = 0
        self._dispatch_count = 0

    @property
    def handle(self) -> Any:
        return self._handle

    @property
    def config(self) -> ResolutionConfig:
        return self._config

    @property
    def is_canceled(self) -> bool:
        return self._canceled

    @property
    def dispatch_count(self) -> int:
        """Number of successful launches so far."""
        return self._dispatch_count

    def cancel(self) -> None:
        with self._lock:
            self._canceled = True

    def dispatch(self, context: InteractiveContext, request_id: int) -> DispatchResult:
        if (
            isinstance(request_id, bool)
            or not isinstance(request_id, int)
            or not 0 <= request_id <= self._config.max_request_id
        ):
            return self._reject(
                DispatchErrorCode.INVALID_REQUEST_ID,
                f'request id {request_id!r} outside 0..{self._config.max_request_id}',
                request_id,
            )

        with self._lock:
            if self._canceled:
                return self._reject(
                    DispatchErrorCode.CANCELED,
                    'resolution was canceled',
                    request_id,
                )
            if self._config.retrigger_policy == RetriggerPolicy.REJECT and (
                self._dispatch_count > 0 or self._launching > 0
            ):
                return self._reject(
                    DispatchErrorCode.ALREADY_DISPATCHED,
                    'resolution was already dispatched',
                    request_id,
                )
            self._launching += 1

        launched: DispatchResult
        try:
            launched = context.launch(self._handle, request_id)
        except Exception as exc:
            launched = Err(
                DispatchError(
                    code=DispatchErrorCode.LAUNCH_FAILED,
                    message=f'interactive context failed to launch resolution: {exc}',
                    request_id=request_id,
                    exception=exc,
                )
            )

        with self._lock:
            self._launching -= 1
            if not is_err(launched):
                self._dispatch_count += 1
                count = self._dispatch_count

        if is_err(launched):
            return self._reject(
                launched.err_value.code,
                launched.err_value.message,
                request_id,
                launched.err_value.exception,
            )

        logger.debug(
            f'Dispatched resolution (dispatch #{count})',
            extra={'request_id': request_id},
        )
        return Ok(None)

    def _reject(
        self,
        code: DispatchErrorCode,
        message: str,
        request_id: int,
        exception: BaseException | None = None,
    ) -> DispatchResult:
        logger.debug(
            f'Resolution not dispatched: {message}',
            extra={'request_id': request_id, 'dispatch_code': code.value},
        )
        return Err(
            DispatchError(
                code=code,
                message=message,
                request_id=request_id,
                exception=exception,
            )
        )

    def __repr__(self) -> str:
        state = 'canceled' if self._canceled else f'dispatched={self._dispatch_count}'
        return f'PendingResolution(handle={self._handle!r}, {state})'
