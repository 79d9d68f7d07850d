"""Typed error types for resolution dispatch.

Result propagation policy
-------------------------
* **Capability layer** -- ``ResolutionCapability.dispatch`` returns
  ``DispatchResult``.  It never raises for a stale, canceled or rejected
  capability, and exceptions from the interactive context are captured as
  ``LAUNCH_FAILED``.

* **ConnectionResult.try_start_resolution** -- returns
  ``ResolutionStartResult``: ``Ok(False)`` when there is nothing to start,
  ``Ok(True)`` once dispatched, ``Err(DispatchError)`` otherwise.

* **ConnectionResult.start_resolution** -- the stop line.  Converts ``Err``
  to ``ResolutionTriggerError`` so the caller cannot silently drop it.
  Nothing in the core retries a failed dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from resolvable.core.types.result import Result


class DispatchErrorCode(str, Enum):
    """Categorized dispatch failure codes."""

    CANCELED = 'CANCELED'
    ALREADY_DISPATCHED = 'ALREADY_DISPATCHED'
    TARGET_UNAVAILABLE = 'TARGET_UNAVAILABLE'
    INVALID_REQUEST_ID = 'INVALID_REQUEST_ID'
    LAUNCH_FAILED = 'LAUNCH_FAILED'


@dataclass(slots=True, frozen=True)
class DispatchError:
    """Error payload carried inside Err(...) for dispatch operations.

    Fields:
        code: which failure category
        message: human-readable description
        request_id: the request id the caller asked for
        exception: the original cause (if any)
    """

    code: DispatchErrorCode
    message: str
    request_id: int
    exception: BaseException | None = None


DispatchResult: TypeAlias = Result[None, DispatchError]
ResolutionStartResult: TypeAlias = Result[bool, DispatchError]
