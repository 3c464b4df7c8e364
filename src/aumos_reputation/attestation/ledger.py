# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import logging

from aumos_reputation.category.index import CategoryIndex
from aumos_reputation.config import LedgerConfig
from aumos_reputation.errors import (
    CategoryNotFoundError,
    CooldownActiveError,
    SelfAttestationError,
)
from aumos_reputation.reputation.score import calculate_score
from aumos_reputation.reputation.store import ReputationStore, default_record
from aumos_reputation.storage.interface import ReputationStorage
from aumos_reputation.storage.staged import transaction
from aumos_reputation.types import AttestationRecord

logger = logging.getLogger("aumos.reputation.ledger")


class AttestationLedger:
    """
    Records attestations and applies them to the target's reputation.

    The ledger keeps at most one live attestation per ordered
    ``(sender, target)`` pair. Accepting an attestation touches four pieces
    of state: the target's reputation record, the attestation record, the
    target's counts, and the target's category counter. All of them are
    staged and committed together, and every precondition is checked
    before anything is staged.

    Example::

        ledger = AttestationLedger(storage, LedgerConfig(administrator="admin"))
        ledger.make_attestation("alice", "bob", 1, category_id=1,
                                comment="shipped on time", now=1_000)
    """

    def __init__(self, storage: ReputationStorage, config: LedgerConfig) -> None:
        self._storage = storage
        self._config = config
        self._categories = CategoryIndex(storage, config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def make_attestation(
        self,
        sender: str,
        target: str,
        value: int,
        category_id: int,
        comment: str,
        now: int,
    ) -> AttestationRecord:
        """
        Record an attestation from ``sender`` about ``target``.

        A positive ``value`` adds one positive count, a negative ``value``
        adds one negative count, and zero adds neither while still
        replacing the attestation record and restarting the cooldown.

        Args:
            sender: The attesting identity.
            target: The identity being attested to.
            value: Signed attestation value; only its sign matters.
            category_id: Id of a registered category.
            comment: Free-form comment stored with the attestation.
            now: Current transaction time in seconds.

        Returns:
            The stored :class:`AttestationRecord`.

        Raises:
            SelfAttestationError: If ``sender`` equals ``target``.
            CategoryNotFoundError: If ``category_id`` is not registered.
            CooldownActiveError: If ``sender`` attested to ``target`` within
                the cooldown window.
            ValueError: If an argument violates its declared bounds, or
                ``now`` precedes the target's last reputation update.
        """
        self._validate_arguments(sender, target, comment, now)

        try:
            self._check_preconditions(sender, target, category_id, now)
        except (SelfAttestationError, CategoryNotFoundError, CooldownActiveError) as exc:
            logger.warning(
                "attestation_rejected",
                extra={
                    "sender": sender,
                    "target": target,
                    "category_id": category_id,
                    "code": exc.code,
                },
            )
            raise

        attestation = AttestationRecord(
            sender=sender,
            target=target,
            value=value,
            category_id=category_id,
            timestamp=now,
            comment=comment,
        )

        with transaction(self._storage) as staged:
            reputations = ReputationStore(staged)
            categories = CategoryIndex(staged, self._config)

            record = reputations.get(target)
            if record is None:
                record = default_record(target, now)
                reputations.upsert(record)

            staged.put_attestation(attestation)

            positive = record.positive_count
            negative = record.negative_count
            if value > 0:
                positive += 1
            elif value < 0:
                negative += 1

            reputations.upsert(
                record.model_copy(
                    update={
                        "score": calculate_score(positive, negative),
                        "positive_count": positive,
                        "negative_count": negative,
                        "last_updated": now,
                    }
                )
            )
            categories.increment_category_count(target, category_id)

        logger.info(
            "attestation_accepted",
            extra={
                "sender": sender,
                "target": target,
                "category_id": category_id,
                "value": value,
                "timestamp": now,
            },
        )
        return attestation

    def get_attestation(self, sender: str, target: str) -> AttestationRecord | None:
        """Return the latest attestation from ``sender`` to ``target``, or None."""
        return self._storage.get_attestation(sender, target)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _validate_arguments(
        self,
        sender: str,
        target: str,
        comment: str,
        now: int,
    ) -> None:
        if not sender or not target:
            raise ValueError("sender and target must be non-empty strings.")
        if now < 0:
            raise ValueError(f"now must be >= 0; got {now}.")
        if len(comment) > self._config.max_comment_length:
            raise ValueError(
                f"Comment exceeds {self._config.max_comment_length} characters; "
                f"got {len(comment)}."
            )

    def _check_preconditions(
        self,
        sender: str,
        target: str,
        category_id: int,
        now: int,
    ) -> None:
        """Raise the first failing domain precondition, in a fixed order."""
        if sender == target:
            raise SelfAttestationError(sender)

        if self._categories.get_category(category_id) is None:
            raise CategoryNotFoundError(category_id)

        prior = self._storage.get_attestation(sender, target)
        if prior is not None:
            cooldown_end = prior.timestamp + self._config.attestation_cooldown_seconds
            # Strict: an attestation exactly at the end of the window is rejected.
            if not now > cooldown_end:
                raise CooldownActiveError(
                    sender=sender,
                    target=target,
                    prior_timestamp=prior.timestamp,
                    available_after=cooldown_end + 1,
                )

        record = self._storage.get_reputation(target)
        if record is not None and now < record.last_updated:
            raise ValueError(
                f"now ({now}) precedes the last update of '{target}' "
                f"({record.last_updated})."
            )
