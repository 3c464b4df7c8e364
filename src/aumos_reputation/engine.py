# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import logging
import threading

from aumos_reputation.attestation.ledger import AttestationLedger
from aumos_reputation.audit.logger import AuditLogger
from aumos_reputation.category.index import CategoryIndex
from aumos_reputation.config import ReputationConfig
from aumos_reputation.errors import AumOSReputationError
from aumos_reputation.reputation.decay import DecayEngine
from aumos_reputation.reputation.store import ReputationStore
from aumos_reputation.storage.interface import ReputationStorage
from aumos_reputation.storage.memory import MemoryStorage
from aumos_reputation.types import (
    DEFAULT_SCORE,
    AttestationRecord,
    Category,
    EventOutcome,
    EventType,
    ReputationRecord,
)

logger = logging.getLogger("aumos.reputation")


class ReputationEngine:
    """
    Composes ReputationStore, CategoryIndex, AttestationLedger, DecayEngine
    and AuditLogger behind the public reputation operations.

    Every operation takes the caller's identity and the current transaction
    time explicitly; the engine never reads a clock. Operations are
    serialized with a lock, so each one observes and leaves a consistent
    state even when called from several threads.

    Example::

        engine = ReputationEngine(ReputationConfig(
            ledger=LedgerConfig(administrator="deployer"),
        ))
        category_id = engine.add_category("deployer", "reliability", now=0)
        engine.make_attestation("alice", "bob", 1, category_id, "great", now=1_000)
        print(engine.get_reputation("bob").score)  # 100
    """

    def __init__(
        self,
        config: ReputationConfig,
        storage: ReputationStorage | None = None,
    ) -> None:
        self._config = config
        self._storage = storage or MemoryStorage()
        self._lock = threading.RLock()
        self.reputations = ReputationStore(self._storage)
        self.categories = CategoryIndex(self._storage, config.ledger)
        self.ledger = AttestationLedger(self._storage, config.ledger)
        self.decay = DecayEngine(self.reputations, config.ledger)
        self.audit = AuditLogger(config.audit)

    @property
    def config(self) -> ReputationConfig:
        return self._config

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def initialize_reputation(self, caller: str, now: int) -> bool:
        """
        Create a default reputation record for ``caller`` if absent.

        Idempotent: a second call leaves the record untouched and still
        succeeds.

        Returns:
            Always True.
        """
        if not caller:
            raise ValueError("caller must be a non-empty string.")
        with self._lock:
            created = self.reputations.initialize(caller, now)
            outcome = EventOutcome.ACCEPTED if created else EventOutcome.NOOP
            self.audit.log(EventType.INITIALIZE, outcome, actor=caller, target=caller, timestamp=now)
        logger.info("reputation_initialized", extra={"user": caller, "created": created})
        return True

    def add_category(self, caller: str, name: str, now: int) -> int:
        """
        Register a category. Only the configured administrator may do this.

        Returns:
            The new category id.

        Raises:
            UnauthorizedError: If ``caller`` is not the administrator.
        """
        with self._lock:
            try:
                category_id = self.categories.add_category(caller, name)
            except AumOSReputationError as exc:
                self._log_rejection(EventType.ADD_CATEGORY, exc, caller, now)
                raise
            self.audit.log(
                EventType.ADD_CATEGORY,
                EventOutcome.ACCEPTED,
                actor=caller,
                category_id=category_id,
                timestamp=now,
                detail={"name": name},
            )
        return category_id

    def make_attestation(
        self,
        caller: str,
        target: str,
        value: int,
        category_id: int,
        comment: str,
        now: int,
    ) -> bool:
        """
        Record an attestation from ``caller`` about ``target``.

        Returns:
            True when the attestation was accepted.

        Raises:
            SelfAttestationError: If ``caller`` equals ``target``.
            CategoryNotFoundError: If ``category_id`` is not registered.
            CooldownActiveError: If ``caller`` attested to ``target`` too recently.
        """
        with self._lock:
            try:
                self.ledger.make_attestation(caller, target, value, category_id, comment, now)
            except AumOSReputationError as exc:
                self._log_rejection(
                    EventType.ATTESTATION, exc, caller, now, target=target, category_id=category_id
                )
                raise
            self.audit.log(
                EventType.ATTESTATION,
                EventOutcome.ACCEPTED,
                actor=caller,
                target=target,
                category_id=category_id,
                timestamp=now,
                detail={"value": value},
            )
        return True

    def apply_reputation_decay(self, caller: str, target: str, now: int) -> bool:
        """
        Decay ``target``'s reputation if it has not changed for long enough.

        Any identity may trigger decay for any user.

        Returns:
            True if decay was applied, False if it was not yet due.

        Raises:
            ReputationNotFoundError: If ``target`` has no reputation record.
        """
        with self._lock:
            try:
                result = self.decay.apply_decay(target, now)
            except AumOSReputationError as exc:
                self._log_rejection(EventType.DECAY, exc, caller, now, target=target)
                raise
            self.audit.log(
                EventType.DECAY,
                EventOutcome.ACCEPTED if result.applied else EventOutcome.NOOP,
                actor=caller,
                target=target,
                timestamp=now,
                detail={
                    "days_since_update": result.days_since_update,
                    "retention_percent": result.retention_percent,
                },
            )
        return result.applied

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    def get_reputation(self, user: str) -> ReputationRecord | None:
        with self._lock:
            return self.reputations.get(user)

    def get_score(self, user: str) -> int:
        """Return ``user``'s score, or the neutral default when unknown."""
        record = self.get_reputation(user)
        return DEFAULT_SCORE if record is None else record.score

    def get_attestation(self, sender: str, target: str) -> AttestationRecord | None:
        with self._lock:
            return self.ledger.get_attestation(sender, target)

    def get_category(self, category_id: int) -> Category | None:
        with self._lock:
            return self.categories.get_category(category_id)

    def list_categories(self) -> list[Category]:
        with self._lock:
            return self.categories.list_categories()

    def get_user_category_count(self, user: str, category_id: int) -> int:
        with self._lock:
            return self.categories.get_category_count(user, category_id)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _log_rejection(
        self,
        event_type: str,
        exc: AumOSReputationError,
        caller: str,
        now: int,
        target: str | None = None,
        category_id: int | None = None,
    ) -> None:
        self.audit.log(
            event_type,
            EventOutcome.REJECTED,
            actor=caller,
            target=target,
            category_id=category_id,
            error_code=exc.code,
            timestamp=now,
            detail={"message": exc.message},
        )
        logger.warning(
            "operation_rejected",
            extra={"event_type": event_type, "caller": caller, "code": exc.code},
        )
