# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Basic reputation example.

Registers a category, records a few attestations, shows the cooldown and
self-attestation rules, then applies decay after a period of inactivity.

Run with:
    python examples/basic_reputation.py
"""
from __future__ import annotations

from aumos_reputation import (
    AuditFilter,
    CooldownActiveError,
    EventOutcome,
    LedgerConfig,
    ReputationConfig,
    ReputationEngine,
    SelfAttestationError,
    aggregate_outcomes,
)

DAY = 86_400


def main() -> None:
    # ------------------------------------------------------------------ #
    # 1. Build the engine
    # ------------------------------------------------------------------ #
    engine = ReputationEngine(ReputationConfig(ledger=LedgerConfig(administrator="deployer")))
    reliability = engine.add_category("deployer", "reliability", now=0)

    # ------------------------------------------------------------------ #
    # 2. Attest
    # ------------------------------------------------------------------ #
    engine.make_attestation("alice", "bob", 1, reliability, "delivered early", now=1_000)
    engine.make_attestation("carol", "bob", -1, reliability, "missed review", now=1_001)
    engine.make_attestation("dave", "bob", 1, reliability, "solid fix", now=1_002)
    print("bob after three attestations:", engine.get_reputation("bob"))

    try:
        engine.make_attestation("alice", "bob", 1, reliability, "again", now=1_000 + DAY)
    except CooldownActiveError as exc:
        print("rejected:", exc.message)

    try:
        engine.make_attestation("bob", "bob", 1, reliability, "me", now=2_000)
    except SelfAttestationError as exc:
        print("rejected:", exc.message)

    # ------------------------------------------------------------------ #
    # 3. Decay after ninety quiet days
    # ------------------------------------------------------------------ #
    applied = engine.apply_reputation_decay("anyone", "bob", now=1_002 + 90 * DAY)
    print("decay applied:", applied, engine.get_reputation("bob"))

    # ------------------------------------------------------------------ #
    # 4. Inspect the audit trail
    # ------------------------------------------------------------------ #
    rejected = engine.audit.query(AuditFilter(outcome=EventOutcome.REJECTED))
    print("rejected operations:", [record.error_code for record in rejected.records])
    print("summary:", aggregate_outcomes(engine.audit.query().records))


if __name__ == "__main__":
    main()
