"""Unit tests for the Result type."""

from __future__ import annotations

import pytest

from resolvable.core.types.result import Err, Ok, UnwrapError, is_err, is_ok

pytestmark = pytest.mark.unit


class TestResult:
    def test_ok(self) -> None:
        result = Ok(3)
        assert is_ok(result) and not is_err(result)
        assert result.ok_value == 3
        assert result.unwrap() == 3
        with pytest.raises(UnwrapError):
            result.unwrap_err()

    def test_err(self) -> None:
        result = Err('bad')
        assert is_err(result) and not is_ok(result)
        assert result.err_value == 'bad'
        assert result.unwrap_err() == 'bad'
        with pytest.raises(UnwrapError):
            result.unwrap()

    def test_pattern_matching(self) -> None:
        match Err('bad'):
            case Ok(value):
                pytest.fail(f'unexpected Ok({value})')
            case Err(error):
                assert error == 'bad'

    def test_equality(self) -> None:
        assert Ok(None) == Ok(None)
        assert Ok(1) != Err(1)
