"""Unit tests for ResolutionConfig validation and environment loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from resolvable.core.errors import (
    ConfigurationError,
    DiagnosticCode,
    MultipleValidationErrors,
)
from resolvable.core.models.config import (
    ENV_MAX_REQUEST_ID,
    ENV_RETRIGGER_POLICY,
    ResolutionConfig,
    RetriggerPolicy,
)

pytestmark = pytest.mark.unit


class TestDefaults:
    def test_defaults(self) -> None:
        config = ResolutionConfig()
        assert config.retrigger_policy is RetriggerPolicy.REJECT
        assert config.max_request_id == 0xFFFF

    def test_frozen(self) -> None:
        config = ResolutionConfig()
        with pytest.raises(ValidationError):
            config.max_request_id = 5  # type: ignore[misc]


class TestValidation:
    """Field bounds and cross-field checks."""

    def test_negative_max_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResolutionConfig(max_request_id=-1)

    def test_too_large_max_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResolutionConfig(max_request_id=2**31)

    def test_policy_from_string(self) -> None:
        config = ResolutionConfig(retrigger_policy='redispatch')  # type: ignore[arg-type]
        assert config.retrigger_policy is RetriggerPolicy.REDISPATCH

    def test_redispatch_with_single_id_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ResolutionConfig(
                retrigger_policy=RetriggerPolicy.REDISPATCH,
                max_request_id=0,
            )
        assert exc_info.value.code == DiagnosticCode.CONFIG_INVALID_RESOLUTION
        assert 'retrigger_policy=redispatch' in exc_info.value.notes

    def test_reject_with_single_id_allowed(self) -> None:
        assert ResolutionConfig(max_request_id=0).max_request_id == 0


class TestFromEnv:
    """Tests for ResolutionConfig.from_env()."""

    def test_empty_environment_gives_defaults(self) -> None:
        assert ResolutionConfig.from_env({}) == ResolutionConfig()

    def test_reads_variables(self) -> None:
        config = ResolutionConfig.from_env({
            ENV_RETRIGGER_POLICY: ' REDISPATCH ',
            ENV_MAX_REQUEST_ID: '0x7F',
        })
        assert config.retrigger_policy is RetriggerPolicy.REDISPATCH
        assert config.max_request_id == 127

    def test_decimal_max(self) -> None:
        assert ResolutionConfig.from_env({ENV_MAX_REQUEST_ID: '500'}).max_request_id == 500

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_RETRIGGER_POLICY, 'redispatch')
        monkeypatch.delenv(ENV_MAX_REQUEST_ID, raising=False)
        assert ResolutionConfig.from_env().retrigger_policy is RetriggerPolicy.REDISPATCH

    def test_bad_policy(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ResolutionConfig.from_env({ENV_RETRIGGER_POLICY: 'sometimes'})
        assert exc_info.value.code == DiagnosticCode.CONFIG_INVALID_ENV
        assert 'sometimes' in exc_info.value.message

    def test_both_bad_collected(self) -> None:
        with pytest.raises(MultipleValidationErrors) as exc_info:
            ResolutionConfig.from_env({
                ENV_RETRIGGER_POLICY: 'sometimes',
                ENV_MAX_REQUEST_ID: 'lots',
            })
        assert len(exc_info.value.report.errors) == 2

    def test_out_of_range_max_wrapped(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ResolutionConfig.from_env({ENV_MAX_REQUEST_ID: '-3'})
        assert exc_info.value.code == DiagnosticCode.CONFIG_INVALID_ENV
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_cross_field_error_propagates(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ResolutionConfig.from_env({
                ENV_RETRIGGER_POLICY: 'redispatch',
                ENV_MAX_REQUEST_ID: '0',
            })
        assert exc_info.value.code == DiagnosticCode.CONFIG_INVALID_RESOLUTION
