# resolvable/core/models/config.py
from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from resolvable.core.errors import (
    ConfigurationError,
    DiagnosticCode,
    ValidationReport,
)

ENV_RETRIGGER_POLICY = 'RESOLVABLE_RETRIGGER_POLICY'
ENV_MAX_REQUEST_ID = 'RESOLVABLE_MAX_REQUEST_ID'


class RetriggerPolicy(str, Enum):
    """What a resolution does when dispatched after it already succeeded once."""

    REJECT = 'reject'  # Later dispatches fail with ALREADY_DISPATCHED.
    REDISPATCH = 'redispatch'  # Every dispatch launches the flow again.


class ResolutionConfig(BaseModel):
    """
    Configuration for resolution dispatch.

    Request ids are limited to the lower 16 bits by default, the range host
    result-callback channels accept.
    """

    model_config = ConfigDict(frozen=True)

    retrigger_policy: RetriggerPolicy = Field(
        default=RetriggerPolicy.REJECT,
        description='Behavior of a resolution dispatched a second time',
    )
    max_request_id: Annotated[int, Field(ge=0, le=0x7FFF_FFFF)] = Field(
        default=0xFFFF,
        description='Largest request id accepted by dispatch (inclusive)',
    )

    @model_validator(mode='after')
    def validate_request_ids(self) -> Self:
        report = ValidationReport('resolution')
        if (
            self.retrigger_policy == RetriggerPolicy.REDISPATCH
            and self.max_request_id == 0
        ):
            report.add(
                ConfigurationError(
                    message='max_request_id=0 leaves a single request id for repeated dispatches',
                    code=DiagnosticCode.CONFIG_INVALID_RESOLUTION,
                    notes=[
                        f'retrigger_policy={self.retrigger_policy.value}',
                        f'max_request_id={self.max_request_id}',
                    ],
                    help_text='raise max_request_id or use retrigger_policy=reject',
                )
            )

        report.raise_collected()
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ResolutionConfig:
        """Build a config from RESOLVABLE_* environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        report = ValidationReport('environment')
        values: dict[str, object] = {}

        raw_policy = env.get(ENV_RETRIGGER_POLICY)
        if raw_policy is not None:
            try:
                values['retrigger_policy'] = RetriggerPolicy(raw_policy.strip().lower())
            except ValueError:
                report.add(
                    ConfigurationError(
                        message=f'invalid {ENV_RETRIGGER_POLICY}: {raw_policy!r}',
                        code=DiagnosticCode.CONFIG_INVALID_ENV,
                        help_text=f'use one of: {", ".join(p.value for p in RetriggerPolicy)}',
                    )
                )

        raw_max = env.get(ENV_MAX_REQUEST_ID)
        if raw_max is not None:
            try:
                values['max_request_id'] = int(raw_max.strip(), 0)
            except ValueError:
                report.add(
                    ConfigurationError(
                        message=f'invalid {ENV_MAX_REQUEST_ID}: {raw_max!r}',
                        code=DiagnosticCode.CONFIG_INVALID_ENV,
                        help_text='use a decimal or 0x-prefixed integer',
                    )
                )

        report.raise_collected()

        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigurationError(
                message='invalid resolution configuration from environment',
                code=DiagnosticCode.CONFIG_INVALID_ENV,
                notes=[err['msg'] for err in exc.errors()],
            ) from exc
