# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from aumos_reputation.types import (
    ATTESTATION_COOLDOWN,
    DECAY_THRESHOLD_DAYS,
    MAX_DECAY,
    MONTHLY_DECAY_RATE,
)


class LedgerConfig(BaseModel, frozen=True):
    """
    Configuration for the attestation ledger and decay engine.

    Attributes:
        administrator: Identity allowed to register categories. This is
            fixed for the lifetime of the engine (the deploying principal).
        attestation_cooldown_seconds: Seconds that must strictly elapse
            before a sender may attest to the same target again.
        decay_threshold_days: Days without an update before decay applies.
        monthly_decay_rate: Percent of the counts removed per 30 days.
        max_decay: Upper bound on the percent removed by a single decay.
        max_comment_length: Maximum attestation comment length.
        max_category_name_length: Maximum category name length.
    """

    administrator: Annotated[str, Field(min_length=1)]
    attestation_cooldown_seconds: Annotated[int, Field(gt=0)] = ATTESTATION_COOLDOWN
    decay_threshold_days: Annotated[int, Field(gt=0)] = DECAY_THRESHOLD_DAYS
    monthly_decay_rate: Annotated[int, Field(ge=0, le=100)] = MONTHLY_DECAY_RATE
    max_decay: Annotated[int, Field(ge=0, le=100)] = MAX_DECAY
    max_comment_length: Annotated[int, Field(gt=0)] = 256
    max_category_name_length: Annotated[int, Field(gt=0)] = 64


class AuditConfig(BaseModel, frozen=True):
    """
    Configuration for the AuditLogger.

    Attributes:
        enabled: When False, no audit records are kept.
        max_records: Maximum number of audit records to retain in memory.
            Oldest records are evicted when this limit is reached.
    """

    enabled: bool = True
    max_records: Annotated[int, Field(gt=0)] = 10_000


class ReputationConfig(BaseModel, frozen=True):
    """
    Top-level configuration for the ReputationEngine.

    Only the administrator identity is required.

    Example::

        config = ReputationConfig(
            ledger=LedgerConfig(administrator="deployer"),
            audit=AuditConfig(max_records=5000),
        )
        engine = ReputationEngine(config=config)
    """

    ledger: LedgerConfig
    audit: AuditConfig = Field(default_factory=AuditConfig)
