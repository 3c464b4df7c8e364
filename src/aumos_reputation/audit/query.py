# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from aumos_reputation.audit.record import AuditRecord
from aumos_reputation.types import EventOutcome


class AuditFilter(BaseModel, frozen=True):
    """
    Filter criteria for querying audit records.

    All fields are optional. Multiple criteria are combined with AND logic.

    Attributes:
        actor: Only include records invoked by this identity.
        target: Only include records about this identity.
        event_type: Only include records of this operation.
        outcome: Only include records with this outcome.
        since: Only include records at or after this transaction time.
        until: Only include records before this transaction time.
        limit: Maximum number of records to return. 0 means no limit.
        offset: Number of records to skip before collecting results.
    """

    actor: str | None = None
    target: str | None = None
    event_type: str | None = None
    outcome: str | None = None
    since: int | None = None
    until: int | None = None
    limit: int = 0
    offset: int = 0


class AuditQueryResult(BaseModel, frozen=True):
    """
    Result of an audit query.

    Attributes:
        records: The matching audit records, ordered oldest-first.
        total_matched: Number of matches before ``limit`` and ``offset``.
        filter_applied: The :class:`AuditFilter` used.
    """

    records: list[AuditRecord]
    total_matched: int
    filter_applied: AuditFilter


def apply_filter(
    records: list[AuditRecord],
    audit_filter: AuditFilter,
) -> AuditQueryResult:
    """Apply an :class:`AuditFilter` to ``records`` in memory."""
    matched = [record for record in records if _record_matches(record, audit_filter)]

    paginated = matched[audit_filter.offset :]
    if audit_filter.limit > 0:
        paginated = paginated[: audit_filter.limit]

    return AuditQueryResult(
        records=paginated,
        total_matched=len(matched),
        filter_applied=audit_filter,
    )


def _record_matches(record: AuditRecord, audit_filter: AuditFilter) -> bool:
    if audit_filter.actor is not None and record.actor != audit_filter.actor:
        return False
    if audit_filter.target is not None and record.target != audit_filter.target:
        return False
    if audit_filter.event_type is not None and record.event_type != audit_filter.event_type:
        return False
    if audit_filter.outcome is not None and record.outcome != audit_filter.outcome:
        return False
    if audit_filter.since is not None and record.timestamp < audit_filter.since:
        return False
    if audit_filter.until is not None and record.timestamp >= audit_filter.until:
        return False
    return True


def aggregate_outcomes(records: list[AuditRecord]) -> dict[str, Any]:
    """
    Count outcomes across ``records``.

    Returns:
        Dict with keys ``'accepted'``, ``'rejected'``, ``'noop'``,
        ``'total'`` and ``'rejection_rate'``.
    """
    counts: dict[str, int] = {
        EventOutcome.ACCEPTED: 0,
        EventOutcome.REJECTED: 0,
        EventOutcome.NOOP: 0,
    }
    for record in records:
        outcome_key = str(record.outcome)
        if outcome_key in counts:
            counts[outcome_key] += 1

    total = len(records)
    rejection_rate = counts[EventOutcome.REJECTED] / total if total > 0 else 0.0

    return {
        "accepted": counts[EventOutcome.ACCEPTED],
        "rejected": counts[EventOutcome.REJECTED],
        "noop": counts[EventOutcome.NOOP],
        "total": total,
        "rejection_rate": rejection_rate,
    }
