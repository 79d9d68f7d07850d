"""resolvable - connection results with user-interactive resolutions"""

# Install Rust-style error handler on import
from .core.errors import install_error_handler as _install_error_handler

_install_error_handler()

from .core.types.error_code import (
    ErrorCode,
    Recoverability,
    ResolutionOutcome,
    RESERVED_ERROR_CODE_VALUES,
    RESOLVABLE_ERROR_CODES,
    RETRYABLE_ERROR_CODES,
    FATAL_ERROR_CODES,
    DEPRECATED_ERROR_CODES,
)
from .core.models.connection_result import ConnectionResult
from .core.models.config import ResolutionConfig, RetriggerPolicy
from .core.resolution import (
    DispatchError,
    DispatchErrorCode,
    DispatchResult,
    InteractiveContext,
    PendingResolution,
    ResolutionCapability,
    ResolutionStartResult,
)
from .core.errors import (
    ConfigurationError,
    DiagnosticCode,
    MultipleValidationErrors,
    ResolutionTriggerError,
    ResolvableError,
)
from .core.types.result import Result, Ok, Err, is_ok, is_err

__all__ = [
    # Core
    'ConnectionResult',
    'ErrorCode',
    'Recoverability',
    'ResolutionOutcome',
    'RESERVED_ERROR_CODE_VALUES',
    'RESOLVABLE_ERROR_CODES',
    'RETRYABLE_ERROR_CODES',
    'FATAL_ERROR_CODES',
    'DEPRECATED_ERROR_CODES',
    # Resolution
    'InteractiveContext',
    'ResolutionCapability',
    'PendingResolution',
    'DispatchError',
    'DispatchErrorCode',
    'DispatchResult',
    'ResolutionStartResult',
    # Config
    'ResolutionConfig',
    'RetriggerPolicy',
    # Errors
    'ResolvableError',
    'ConfigurationError',
    'ResolutionTriggerError',
    'MultipleValidationErrors',
    'DiagnosticCode',
    # Result
    'Result',
    'Ok',
    'Err',
    'is_ok',
    'is_err',
]
