"""Rust-style error display for resolvable configuration and trigger errors."""

from __future__ import annotations

import os
import sys
import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from resolvable.core.resolution.result_types import DispatchError
    from resolvable.core.types.error_code import ErrorCode


class DiagnosticCode(str, Enum):
    """Error codes for library errors.

    - E200-E299: Config errors
    - E400-E499: Resolution trigger errors
    """

    CONFIG_INVALID_ENV = 'E209'
    CONFIG_INVALID_RESOLUTION = 'E210'

    RESOLUTION_TRIGGER_FAILED = 'E400'


_ANSI: dict[str, str] = {
    'reset': '\033[0m',
    'bold': '\033[1m',
    'red': '\033[91m',
    'blue': '\033[94m',
    'green': '\033[92m',
}
_PLAIN: dict[str, str] = dict.fromkeys(_ANSI, '')


def _env_flag(name: str) -> bool:
    return os.environ.get(name, '').lower() in ('1', 'true', 'yes')


def _should_use_colors() -> bool:
    if _env_flag('RESOLVABLE_FORCE_COLOR'):
        return True
    # https://no-color.org/
    if os.environ.get('NO_COLOR') is not None:
        return False
    return hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()


@dataclass
class ResolvableError(Exception):
    """Base exception for resolvable errors, rendered rustc-style:

        error[E400]: resolution for SIGN_IN_REQUIRED could not be started
           = note: dispatch error: CANCELED

           = help:
                show a generic error or fall back to another remediation
    """

    message: str
    code: DiagnosticCode | None = None
    notes: list[str] = field(default_factory=lambda: [])
    help_text: str | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def format_rust_style(self, use_colors: bool | None = None) -> str:
        if use_colors is None:
            use_colors = _should_use_colors()
        c = _ANSI if use_colors else _PLAIN

        code_part = f'[{self.code.value}]' if self.code else ''
        lines = ['', f"{c['bold']}{c['red']}error{code_part}:{c['reset']} {self.message}"]

        note_prefix = f"   {c['blue']}={c['reset']} {c['bold']}{c['blue']}note{c['reset']}: "
        for note in self.notes:
            first, *rest = note.split('\n')
            lines.append(note_prefix + first)
            lines.extend(f'          {line}' for line in rest)

        if self.help_text:
            lines += ['', f"   {c['blue']}={c['reset']} {c['bold']}{c['green']}help{c['reset']}:"]
            lines.extend(f'        {line}' for line in self.help_text.split('\n'))

        return '\n'.join(lines)

    def __str__(self) -> str:
        # Plain text so the message is safe for logs and storage.
        return self.format_rust_style(use_colors=False)


@dataclass
class ConfigurationError(ResolvableError):
    """Raised when resolution configuration is invalid."""


@dataclass
class ResolutionTriggerError(ResolvableError):
    """Raised when a present resolution can no longer be dispatched.

    The resolution path is unusable; the caller needs a fallback such as a
    generic error message. ``dispatch_error`` carries the categorized cause.
    """

    dispatch_error: DispatchError | None = None

    def __post_init__(self) -> None:
        if self.code is None:
            self.code = DiagnosticCode.RESOLUTION_TRIGGER_FAILED
        super().__post_init__()

    @classmethod
    def from_dispatch_error(
        cls, error_code: ErrorCode, error: DispatchError
    ) -> ResolutionTriggerError:
        return cls(
            message=f'resolution for {error_code.label} could not be started',
            notes=[
                f'dispatch error: {error.code.value}',
                f'request_id={error.request_id}',
                error.message,
            ],
            help_text='show a generic error or fall back to another remediation',
            dispatch_error=error,
        )


_original_excepthook = sys.excepthook


def _resolvable_excepthook(
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_tb: Any,
) -> None:
    """Print ResolvableError rustc-style; defer everything else."""
    if _env_flag('RESOLVABLE_PLAIN_ERRORS') or not isinstance(exc_value, ResolvableError):
        _original_excepthook(exc_type, exc_value, exc_tb)
        return

    print(exc_value.format_rust_style(), file=sys.stderr)

    if _env_flag('RESOLVABLE_VERBOSE'):
        # The launch failure raised by the interactive context, if any.
        cause = exc_value.__cause__
        if cause is not None:
            print('\ncaused by:', file=sys.stderr)
            traceback.print_exception(cause, file=sys.stderr)
        print('\nFull traceback (RESOLVABLE_VERBOSE=1):', file=sys.stderr)
        traceback.print_exception(exc_type, exc_value, exc_tb, file=sys.stderr)


def install_error_handler() -> None:
    sys.excepthook = _resolvable_excepthook


def uninstall_error_handler() -> None:
    sys.excepthook = _original_excepthook


class ValidationReport:
    """Collects configuration errors for one validation phase."""

    def __init__(self, phase_name: str) -> None:
        self.phase_name = phase_name
        self.errors: list[ConfigurationError] = []

    def add(self, error: ConfigurationError) -> None:
        self.errors.append(error)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def raise_collected(self) -> None:
        """Raise nothing, the single error as-is, or MultipleValidationErrors."""
        if not self.errors:
            return
        if len(self.errors) == 1:
            raise self.errors[0]
        raise MultipleValidationErrors(
            message=f'{self.phase_name}: aborting due to {len(self.errors)} previous errors',
            report=self,
        )


@dataclass
class MultipleValidationErrors(ConfigurationError):
    """Two or more errors collected by a ValidationReport."""

    report: ValidationReport = field(default_factory=lambda: ValidationReport(''))

    def format_rust_style(self, use_colors: bool | None = None) -> str:
        parts = [error.format_rust_style(use_colors) for error in self.report.errors]
        if use_colors is None:
            use_colors = _should_use_colors()
        c = _ANSI if use_colors else _PLAIN
        parts.append(f"\n{c['bold']}{c['red']}error{c['reset']}: {self.message}")
        return '\n'.join(parts)
