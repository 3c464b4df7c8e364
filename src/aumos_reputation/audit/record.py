# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, Field



class AuditRecord(BaseModel, frozen=True):
    """
    An immutable record of one top-level reputation operation.

    Attributes:
        record_id: Unique UUID for this record.
        event_type: Which operation ran (see :class:`~aumos_reputation.types.EventType`).
        outcome: ``accepted``, ``rejected`` or ``noop``.
        actor: Identity that invoked the operation.
        target: Identity the operation was about, if any.
        category_id: Category involved, if any.
        error_code: Code of the domain error for rejected operations.
        timestamp: Transaction time supplied to the operation.
        detail: Additional key-value metadata.
    """

    record_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str
    outcome: str
    actor: str
    target: str | None = None
    category_id: int | None = None
    error_code: str | None = None
    timestamp: int
    detail: dict[str, Any] = Field(default_factory=dict)
