# core/types/result.py
"""Rust-style Result type.

``Ok`` and ``Err`` are frozen wrappers; callers narrow with ``is_ok`` /
``is_err`` (or ``match``) and then read ``ok_value`` / ``err_value``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeAlias, TypeGuard, TypeVar, Union

T = TypeVar('T', covariant=True)
E = TypeVar('E', covariant=True)


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    """Success variant."""

    ok_value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.ok_value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f'called unwrap_err() on Ok({self.ok_value!r})')


@dataclass(slots=True, frozen=True)
class Err(Generic[E]):
    """Failure variant."""

    err_value: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f'called unwrap() on Err({self.err_value!r})')

    def unwrap_err(self) -> E:
        return self.err_value


class UnwrapError(Exception):
    """Raised when unwrapping the wrong variant."""


Result: TypeAlias = Union[Ok[T], Err[E]]


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    return isinstance(result, Err)
