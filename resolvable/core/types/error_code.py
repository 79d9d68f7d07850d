# core/types/error_code.py
"""
Connection error codes and their recoverability classification.
This module should not import from other application modules.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class Recoverability(Enum):
    """Recommended caller reaction to an error code"""

    NONE = 'none'  # Not an error.
    RESOLVABLE = 'resolvable'  # Start the resolution, then reconnect.
    RETRYABLE = 'retryable'  # Reconnect later; no user interaction needed.
    FATAL = 'fatal'  # Retrying or resolving will not help.
    TERMINAL = 'terminal'  # The attempt was abandoned on purpose.


class ErrorCode(IntEnum):
    """
    Outcome of an attempt to connect to the background service.

    Numeric values are fixed for wire and storage compatibility. Value 12 is
    reserved and is never a member. EXTERNAL_STORAGE_REQUIRED is deprecated
    and kept only so persisted codes still decode.
    """

    SUCCESS = 0
    SERVICE_MISSING = 1
    SERVICE_VERSION_UPDATE_REQUIRED = 2
    SERVICE_DISABLED = 3
    SIGN_IN_REQUIRED = 4
    INVALID_ACCOUNT = 5
    RESOLUTION_REQUIRED = 6
    NETWORK_ERROR = 7
    INTERNAL_ERROR = 8
    SERVICE_INVALID = 9
    DEVELOPER_ERROR = 10
    LICENSE_CHECK_FAILED = 11
    # 12 is reserved.
    CANCELED = 13
    TIMEOUT = 14
    INTERRUPTED = 15
    API_UNAVAILABLE = 16

    EXTERNAL_STORAGE_REQUIRED = 1500  # Deprecated.

    @classmethod
    def from_value(cls, value: int) -> ErrorCode:
        """Decode a numeric wire value.

        Raises ValueError for reserved or unknown values.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f'error code must be an int, got {value!r}')
        if value in RESERVED_ERROR_CODE_VALUES:
            raise ValueError(f'error code {value} is reserved')
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f'unknown error code {value}') from None

    @property
    def label(self) -> str:
        """Upper-snake name used in string renderings."""
        return self.name

    @property
    def recoverability(self) -> Recoverability:
        return _RECOVERABILITY[self]

    @property
    def description(self) -> str:
        """Recommended caller action for this code."""
        return _DESCRIPTIONS[self]

    @property
    def is_resolvable(self) -> bool:
        return self in RESOLVABLE_ERROR_CODES

    @property
    def is_retryable(self) -> bool:
        return self in RETRYABLE_ERROR_CODES

    @property
    def is_fatal(self) -> bool:
        return self in FATAL_ERROR_CODES

    @property
    def is_deprecated(self) -> bool:
        return self in DEPRECATED_ERROR_CODES


RESERVED_ERROR_CODE_VALUES: frozenset[int] = frozenset({12})

RESOLVABLE_ERROR_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.SERVICE_MISSING,
    ErrorCode.SERVICE_VERSION_UPDATE_REQUIRED,
    ErrorCode.SERVICE_DISABLED,
    ErrorCode.SIGN_IN_REQUIRED,
    ErrorCode.RESOLUTION_REQUIRED,
    ErrorCode.EXTERNAL_STORAGE_REQUIRED,
})

RETRYABLE_ERROR_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.NETWORK_ERROR,
    ErrorCode.INTERNAL_ERROR,
    ErrorCode.TIMEOUT,
    ErrorCode.INTERRUPTED,
})

FATAL_ERROR_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.INVALID_ACCOUNT,
    ErrorCode.SERVICE_INVALID,
    ErrorCode.DEVELOPER_ERROR,
    ErrorCode.LICENSE_CHECK_FAILED,
    ErrorCode.API_UNAVAILABLE,
})

DEPRECATED_ERROR_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.EXTERNAL_STORAGE_REQUIRED,
})


def _classify(code: ErrorCode) -> Recoverability:
    if code is ErrorCode.SUCCESS:
        return Recoverability.NONE
    if code in RESOLVABLE_ERROR_CODES:
        return Recoverability.RESOLVABLE
    if code in RETRYABLE_ERROR_CODES:
        return Recoverability.RETRYABLE
    if code in FATAL_ERROR_CODES:
        return Recoverability.FATAL
    return Recoverability.TERMINAL


_RECOVERABILITY: dict[ErrorCode, Recoverability] = {
    code: _classify(code) for code in ErrorCode
}

_DESCRIPTIONS: dict[ErrorCode, str] = {
    ErrorCode.SUCCESS: 'The connection was successful.',
    ErrorCode.SERVICE_MISSING: (
        'The service is missing on this device. Start the resolution to '
        'install it.'
    ),
    ErrorCode.SERVICE_VERSION_UPDATE_REQUIRED: (
        'The installed version of the service is out of date. Start the '
        'resolution to update it.'
    ),
    ErrorCode.SERVICE_DISABLED: (
        'The installed service has been disabled. Start the resolution to '
        'enable it.'
    ),
    ErrorCode.SIGN_IN_REQUIRED: (
        'The user is not signed in. Continue without the API or start the '
        'resolution to prompt for sign-in; after RESULT_OK, reconnect.'
    ),
    ErrorCode.INVALID_ACCOUNT: (
        'An invalid account name was specified. Connecting with this '
        'account will keep failing.'
    ),
    ErrorCode.RESOLUTION_REQUIRED: (
        'Completing the connection requires some form of resolution. After '
        'RESULT_OK, reconnect; it will succeed or report the next issue.'
    ),
    ErrorCode.NETWORK_ERROR: 'A network error occurred. Retrying should resolve the problem.',
    ErrorCode.INTERNAL_ERROR: 'An internal error occurred. Retrying should resolve the problem.',
    ErrorCode.SERVICE_INVALID: 'The installed version of the service is not authentic.',
    ErrorCode.DEVELOPER_ERROR: (
        'The application is misconfigured. This error is not recoverable; '
        'check the logs for details.'
    ),
    ErrorCode.LICENSE_CHECK_FAILED: (
        'The application is not licensed to the user. This error is not '
        'recoverable.'
    ),
    ErrorCode.CANCELED: 'The client canceled the connection by disconnecting.',
    ErrorCode.TIMEOUT: 'The timeout was exceeded while waiting for the connection to complete.',
    ErrorCode.INTERRUPTED: 'An interrupt occurred while waiting for the connection to complete.',
    ErrorCode.API_UNAVAILABLE: (
        'The requested API is not available on this device. Updating the '
        'service will not likely help; avoid using the API.'
    ),
    ErrorCode.EXTERNAL_STORAGE_REQUIRED: (
        'External storage is required but not mounted. Recoverable once the '
        'user mounts external storage. Deprecated.'
    ),
}


class ResolutionOutcome(IntEnum):
    """Completion signal reported by the interactive context"""

    RESULT_CANCELED = 0
    RESULT_OK = -1
    RESULT_FIRST_USER = 1  # First value available for custom outcomes.

    @staticmethod
    def should_reconnect(result_code: int) -> bool:
        """Whether the caller should re-attempt the connection."""
        return result_code == ResolutionOutcome.RESULT_OK
