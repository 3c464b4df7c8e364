# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from pydantic import BaseModel, Field

ATTESTATION_COOLDOWN = 86_400
SECONDS_PER_DAY = 86_400
DAYS_PER_MONTH = 30
MIN_SCORE = 0
MAX_SCORE = 100
DEFAULT_SCORE = 50
DECAY_THRESHOLD_DAYS = 30
MONTHLY_DECAY_RATE = 5
MAX_DECAY = 75


class ReputationRecord(BaseModel, frozen=True):
    """
    The accumulated reputation of a single identity.

    Attributes:
        owner: The identity this record belongs to.
        score: Integer score in ``[MIN_SCORE, MAX_SCORE]``.
        positive_count: Number of positive attestations received (after decay).
        negative_count: Number of negative attestations received (after decay).
        last_updated: Transaction time (seconds) of the last mutation.
    """

    owner: str
    score: int = Field(default=DEFAULT_SCORE, ge=MIN_SCORE, le=MAX_SCORE)
    positive_count: int = Field(default=0, ge=0)
    negative_count: int = Field(default=0, ge=0)
    last_updated: int = Field(ge=0)


class AttestationRecord(BaseModel, frozen=True):
    """
    The latest attestation one identity made about another.

    Only the sign of ``value`` is meaningful: positive values count as a
    positive attestation, negative values as a negative one, and zero
    counts as neither.
    """

    sender: str
    target: str
    value: int
    category_id: int
    timestamp: int = Field(ge=0)
    comment: str = ""


class Category(BaseModel, frozen=True):
    """An administrator-defined attestation category."""

    id: int = Field(ge=1)
    name: str


class CategoryCount(BaseModel, frozen=True):
    """Number of accepted attestations a user received in one category."""

    user: str
    category_id: int
    count: int = Field(default=0, ge=0)


class EventType(str):
    """Top-level operations recorded in the audit trail."""

    INITIALIZE = "initialize_reputation"
    ADD_CATEGORY = "add_category"
    ATTESTATION = "make_attestation"
    DECAY = "apply_reputation_decay"


class EventOutcome(str):
    """Possible outcomes of a top-level operation."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    NOOP = "noop"
