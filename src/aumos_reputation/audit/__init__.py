# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from aumos_reputation.audit.logger import AuditLogger
from aumos_reputation.audit.query import AuditFilter, AuditQueryResult, aggregate_outcomes, apply_filter
from aumos_reputation.audit.record import AuditRecord

__all__ = [
    "AuditLogger",
    "AuditFilter",
    "AuditQueryResult",
    "AuditRecord",
    "apply_filter",
    "aggregate_outcomes",
]
