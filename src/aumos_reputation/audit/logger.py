# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import collections
from typing import Any

from aumos_reputation.audit.query import AuditFilter, AuditQueryResult, apply_filter
from aumos_reputation.audit.record import AuditRecord
from aumos_reputation.config import AuditConfig
from aumos_reputation.types import EventOutcome, EventType


class AuditLogger:
    """
    Keeps a bounded, in-memory trail of reputation operations.

    The trail is observational only; nothing in the reputation core reads
    it back. When :attr:`~AuditConfig.max_records` is reached the oldest
    record is evicted.

    Example::

        audit = AuditLogger(AuditConfig(max_records=1000))
        audit.log(EventType.ATTESTATION, EventOutcome.ACCEPTED,
                  actor="alice", target="bob", timestamp=1_000)
        rejected = audit.query(AuditFilter(outcome=EventOutcome.REJECTED))
    """

    def __init__(self, config: AuditConfig | None = None) -> None:
        self._config = config or AuditConfig()
        self._records: collections.deque[AuditRecord] = collections.deque(
            maxlen=self._config.max_records
        )

    def log(
        self,
        event_type: EventType,
        outcome: EventOutcome,
        actor: str,
        timestamp: int,
        target: str | None = None,
        category_id: int | None = None,
        error_code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> AuditRecord | None:
        """
        Record one operation.

        Returns:
            The stored :class:`AuditRecord`, or None when auditing is disabled.
        """
        if not self._config.enabled:
            return None
        record = AuditRecord(
            event_type=event_type,
            outcome=outcome,
            actor=actor,
            target=target,
            category_id=category_id,
            error_code=error_code,
            timestamp=timestamp,
            detail=detail or {},
        )
        self._records.append(record)
        return record

    def query(self, audit_filter: AuditFilter | None = None) -> AuditQueryResult:
        """Return records matching ``audit_filter`` (all records when None)."""
        return apply_filter(
            records=list(self._records),
            audit_filter=audit_filter or AuditFilter(),
        )

    def count(self) -> int:
        """Return the number of stored audit records."""
        return len(self._records)

    def clear(self) -> int:
        """Remove all stored records and return how many there were."""
        count = len(self._records)
        self._records.clear()
        return count

    def latest(self, n: int = 10) -> list[AuditRecord]:
        """
        Return the ``n`` most recent audit records, most recent last.

        Raises:
            ValueError: If ``n`` < 1.
        """
        if n < 1:
            raise ValueError(f"n must be >= 1; got {n}.")
        return list(self._records)[-n:]
