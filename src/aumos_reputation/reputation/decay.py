# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Time-based decay of accumulated attestation counts.

Decay removes ``monthly_decay_rate`` percent of a user's positive and
negative counts for every whole 30 days since their record last changed,
capped at ``max_decay`` percent. Both counts are truncated independently,
so repeated decay can shift the ratio between them (and therefore the
score) slightly. That drift is part of the contract.
"""
from __future__ import annotations

import logging

from pydantic import BaseModel

from aumos_reputation.config import LedgerConfig
from aumos_reputation.errors import ReputationNotFoundError
from aumos_reputation.reputation.score import calculate_score
from aumos_reputation.reputation.store import ReputationStore
from aumos_reputation.types import (
    DAYS_PER_MONTH,
    MAX_DECAY,
    MONTHLY_DECAY_RATE,
    SECONDS_PER_DAY,
    ReputationRecord,
)

logger = logging.getLogger("aumos.reputation.decay")


def calculate_decay_factor(
    days_passed: int,
    monthly_decay_rate: int = MONTHLY_DECAY_RATE,
    max_decay: int = MAX_DECAY,
) -> int:
    """
    Return the retention percent after ``days_passed`` days.

    With the default rate and cap the result lies in ``[25, 100]`` and
    reaches its floor after 15 whole months.

    Args:
        days_passed: Whole days elapsed (>= 0).
        monthly_decay_rate: Percent removed per whole 30 days.
        max_decay: Maximum percent removed.

    Returns:
        Integer percent of the original value that is retained.
    """
    months_elapsed = days_passed // DAYS_PER_MONTH
    decay_percent = min(max_decay, monthly_decay_rate * months_elapsed)
    return 100 - decay_percent


def calculate_decayed_value(original: int, retention_percent: int) -> int:
    """Apply ``retention_percent`` to ``original``, truncating the result."""
    return original * retention_percent // 100


class DecayResult(BaseModel, frozen=True):
    """
    Result of a decay request.

    Attributes:
        applied: True when the record was decayed and rewritten.
        days_since_update: Whole days between the record's last update and
            the request time.
        retention_percent: The retention factor used, or 100 when no decay
            was applied.
        record: The user's record after the request.
    """

    applied: bool
    days_since_update: int
    retention_percent: int
    record: ReputationRecord


class DecayEngine:
    """
    Applies time-based decay to stored reputation records.

    Decay requests go straight to the :class:`ReputationStore` and never
    touch attestation records or category counters.

    Example::

        engine = DecayEngine(ReputationStore(storage), LedgerConfig(administrator="admin"))
        result = engine.apply_decay("alice", now=2_592_000)
        if result.applied:
            print(result.record.score)
    """

    def __init__(self, store: ReputationStore, config: LedgerConfig) -> None:
        self._store = store
        self._config = config

    def apply_decay(self, user: str, now: int) -> DecayResult:
        """
        Decay ``user``'s counts if enough time has passed since the last update.

        Below the threshold the request is a successful no-op and the stored
        record is left untouched. Otherwise both counts are decayed by the
        same retention factor, the score is recomputed from the decayed
        counts, and ``last_updated`` moves to ``now``.

        Args:
            user: Identity whose record should be decayed.
            now: Current transaction time in seconds.

        Returns:
            A :class:`DecayResult` describing what happened.

        Raises:
            ReputationNotFoundError: If ``user`` has no reputation record.
            ValueError: If ``now`` is earlier than the record's last update.
        """
        record = self._store.get(user)
        if record is None:
            raise ReputationNotFoundError(user)
        if now < record.last_updated:
            raise ValueError(
                f"now ({now}) precedes the last update of '{user}' "
                f"({record.last_updated})."
            )

        days_since_update = (now - record.last_updated) // SECONDS_PER_DAY
        if days_since_update < self._config.decay_threshold_days:
            logger.debug(
                "decay_skipped",
                extra={"user": user, "days_since_update": days_since_update},
            )
            return DecayResult(
                applied=False,
                days_since_update=days_since_update,
                retention_percent=100,
                record=record,
            )

        factor = calculate_decay_factor(
            days_since_update,
            monthly_decay_rate=self._config.monthly_decay_rate,
            max_decay=self._config.max_decay,
        )
        decayed_positive = calculate_decayed_value(record.positive_count, factor)
        decayed_negative = calculate_decayed_value(record.negative_count, factor)
        updated = record.model_copy(
            update={
                "score": calculate_score(decayed_positive, decayed_negative),
                "positive_count": decayed_positive,
                "negative_count": decayed_negative,
                "last_updated": now,
            }
        )
        self._store.upsert(updated)

        logger.info(
            "decay_applied",
            extra={
                "user": user,
                "days_since_update": days_since_update,
                "retention_percent": factor,
                "score": updated.score,
            },
        )
        return DecayResult(
            applied=True,
            days_since_update=days_since_update,
            retention_percent=factor,
            record=updated,
        )
