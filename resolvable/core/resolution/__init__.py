from .capability import InteractiveContext, PendingResolution, ResolutionCapability
from .result_types import (
    DispatchError,
    DispatchErrorCode,
    DispatchResult,
    ResolutionStartResult,
)

__all__ = [
    'InteractiveContext',
    'PendingResolution',
    'ResolutionCapability',
    'DispatchError',
    'DispatchErrorCode',
    'DispatchResult',
    'ResolutionStartResult',
]
