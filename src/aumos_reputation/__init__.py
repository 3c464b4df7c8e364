# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
aumos-reputation — peer attestations and decaying trust scores.

Quick start::

    from aumos_reputation import LedgerConfig, ReputationConfig, ReputationEngine

    engine = ReputationEngine(ReputationConfig(
        ledger=LedgerConfig(administrator="deployer"),
    ))
    category_id = engine.add_category("deployer", "code-review", now=0)
    engine.make_attestation("alice", "bob", 1, category_id, "solid review", now=1_000)
    print(engine.get_reputation("bob").score)  # 100

    # Thirty days later anyone may trigger decay.
    engine.apply_reputation_decay("carol", "bob", now=1_000 + 30 * 86_400)
"""
from __future__ import annotations

from aumos_reputation.attestation.ledger import AttestationLedger
from aumos_reputation.audit.logger import AuditLogger
from aumos_reputation.audit.query import AuditFilter, AuditQueryResult, aggregate_outcomes
from aumos_reputation.audit.record import AuditRecord
from aumos_reputation.category.index import CategoryIndex
from aumos_reputation.config import AuditConfig, LedgerConfig, ReputationConfig
from aumos_reputation.engine import ReputationEngine
from aumos_reputation.errors import (
    AumOSReputationError,
    CategoryNotFoundError,
    CooldownActiveError,
    NotFoundError,
    ReputationNotFoundError,
    SelfAttestationError,
    UnauthorizedError,
)
from aumos_reputation.reputation.decay import (
    DecayEngine,
    DecayResult,
    calculate_decay_factor,
    calculate_decayed_value,
)
from aumos_reputation.reputation.score import calculate_score
from aumos_reputation.reputation.store import ReputationStore
from aumos_reputation.storage import MemoryStorage, ReputationStorage, StagedStorage, transaction
from aumos_reputation.types import (
    ATTESTATION_COOLDOWN,
    DECAY_THRESHOLD_DAYS,
    DEFAULT_SCORE,
    MAX_DECAY,
    MAX_SCORE,
    MIN_SCORE,
    MONTHLY_DECAY_RATE,
    AttestationRecord,
    Category,
    CategoryCount,
    EventOutcome,
    EventType,
    ReputationRecord,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "ATTESTATION_COOLDOWN",
    "DECAY_THRESHOLD_DAYS",
    "DEFAULT_SCORE",
    "MAX_DECAY",
    "MAX_SCORE",
    "MIN_SCORE",
    "MONTHLY_DECAY_RATE",
    # Core types
    "ReputationRecord",
    "AttestationRecord",
    "Category",
    "CategoryCount",
    "EventType",
    "EventOutcome",
    # Configuration
    "ReputationConfig",
    "LedgerConfig",
    "AuditConfig",
    # Engine
    "ReputationEngine",
    # Components
    "ReputationStore",
    "CategoryIndex",
    "AttestationLedger",
    "DecayEngine",
    "DecayResult",
    "calculate_score",
    "calculate_decay_factor",
    "calculate_decayed_value",
    # Storage
    "ReputationStorage",
    "MemoryStorage",
    "StagedStorage",
    "transaction",
    # Audit
    "AuditLogger",
    "AuditFilter",
    "AuditQueryResult",
    "AuditRecord",
    "aggregate_outcomes",
    # Errors
    "AumOSReputationError",
    "UnauthorizedError",
    "NotFoundError",
    "CategoryNotFoundError",
    "ReputationNotFoundError",
    "CooldownActiveError",
    "SelfAttestationError",
    "__version__",
]
