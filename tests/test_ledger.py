# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Tests for ReputationStore, CategoryIndex, AttestationLedger and DecayEngine.
"""

from __future__ import annotations

import pytest

from aumos_reputation.attestation.ledger import AttestationLedger
from aumos_reputation.category.index import CategoryIndex
from aumos_reputation.config import LedgerConfig
from aumos_reputation.errors import (
    CategoryNotFoundError,
    CooldownActiveError,
    NotFoundError,
    ReputationNotFoundError,
    SelfAttestationError,
    UnauthorizedError,
)
from aumos_reputation.reputation.decay import DecayEngine
from aumos_reputation.reputation.store import ReputationStore
from aumos_reputation.storage.memory import MemoryStorage
from aumos_reputation.types import ReputationRecord

from conftest import ADMIN, DAY


@pytest.fixture
def categories(storage: MemoryStorage, ledger_config: LedgerConfig) -> CategoryIndex:
    index = CategoryIndex(storage, ledger_config)
    index.add_category(ADMIN, "reliability")
    return index


@pytest.fixture
def ledger(
    storage: MemoryStorage,
    ledger_config: LedgerConfig,
    categories: CategoryIndex,
) -> AttestationLedger:
    return AttestationLedger(storage, ledger_config)


# ---------------------------------------------------------------------------
# TestReputationStore
# ---------------------------------------------------------------------------


class TestReputationStore:
    def test_initialize_creates_default_record(self, storage: MemoryStorage) -> None:
        store = ReputationStore(storage)
        assert store.initialize("alice", now=100) is True
        assert store.get("alice") == ReputationRecord(
            owner="alice", score=50, positive_count=0, negative_count=0, last_updated=100
        )

    def test_initialize_twice_is_a_noop(self, storage: MemoryStorage) -> None:
        store = ReputationStore(storage)
        store.initialize("alice", now=100)
        first = store.get("alice")
        assert store.initialize("alice", now=500) is False
        assert store.get("alice") == first

    def test_upsert_overwrites(self, storage: MemoryStorage) -> None:
        store = ReputationStore(storage)
        store.upsert(ReputationRecord(owner="alice", score=10, last_updated=1))
        store.upsert(ReputationRecord(owner="alice", score=90, last_updated=2))
        assert store.get("alice").score == 90

    def test_upsert_rejects_going_back_in_time(self, storage: MemoryStorage) -> None:
        store = ReputationStore(storage)
        store.upsert(ReputationRecord(owner="alice", last_updated=10))
        with pytest.raises(ValueError):
            store.upsert(ReputationRecord(owner="alice", last_updated=9))


# ---------------------------------------------------------------------------
# TestCategoryIndex
# ---------------------------------------------------------------------------


class TestCategoryIndex:
    def test_ids_are_sequential_from_one(
        self, storage: MemoryStorage, ledger_config: LedgerConfig
    ) -> None:
        index = CategoryIndex(storage, ledger_config)
        assert index.add_category(ADMIN, "a") == 1
        assert index.add_category(ADMIN, "b") == 2
        assert index.add_category(ADMIN, "a") == 3
        assert [category.name for category in index.list_categories()] == ["a", "b", "a"]

    def test_non_admin_is_unauthorized(
        self, storage: MemoryStorage, ledger_config: LedgerConfig
    ) -> None:
        index = CategoryIndex(storage, ledger_config)
        with pytest.raises(UnauthorizedError) as exc_info:
            index.add_category("mallory", "x")
        assert exc_info.value.code == "UNAUTHORIZED"
        assert index.get_category(1) is None
        assert storage.get_last_category_id() == 0

    def test_name_longer_than_bound_raises_value_error(
        self, storage: MemoryStorage
    ) -> None:
        index = CategoryIndex(
            storage, LedgerConfig(administrator=ADMIN, max_category_name_length=3)
        )
        with pytest.raises(ValueError):
            index.add_category(ADMIN, "toolong")

    def test_count_defaults_to_zero_and_increments(self, categories: CategoryIndex) -> None:
        assert categories.get_category_count("bob", 1) == 0
        assert categories.increment_category_count("bob", 1) == 1
        assert categories.increment_category_count("bob", 1) == 2
        assert categories.get_category_count("bob", 1) == 2


# ---------------------------------------------------------------------------
# TestAttestationLedger
# ---------------------------------------------------------------------------


class TestAttestationLedger:
    def test_first_attestation_creates_target_record(
        self, ledger: AttestationLedger, storage: MemoryStorage
    ) -> None:
        ledger.make_attestation("alice", "bob", 1, 1, "good", now=1000)
        assert storage.get_reputation("bob") == ReputationRecord(
            owner="bob", score=100, positive_count=1, negative_count=0, last_updated=1000
        )

    def test_attestation_is_stored_verbatim(self, ledger: AttestationLedger) -> None:
        ledger.make_attestation("alice", "bob", 1, 1, "good", now=1000)
        record = ledger.get_attestation("alice", "bob")
        assert (record.value, record.comment, record.timestamp) == (1, "good", 1000)
        assert record.category_id == 1

    def test_magnitude_beyond_sign_is_ignored(
        self, ledger: AttestationLedger, storage: MemoryStorage
    ) -> None:
        ledger.make_attestation("alice", "bob", 50, 1, "", now=10)
        ledger.make_attestation("carol", "bob", -7, 1, "", now=11)
        record = storage.get_reputation("bob")
        assert (record.positive_count, record.negative_count) == (1, 1)

    def test_zero_value_changes_no_counts_but_resets_cooldown(
        self, ledger: AttestationLedger, storage: MemoryStorage
    ) -> None:
        ledger.make_attestation("alice", "bob", 0, 1, "meh", now=100)
        record = storage.get_reputation("bob")
        assert (record.score, record.positive_count, record.negative_count) == (50, 0, 0)
        assert storage.get_category_count("bob", 1) == 1
        with pytest.raises(CooldownActiveError):
            ledger.make_attestation("alice", "bob", 1, 1, "", now=100 + DAY)

    def test_self_attestation_rejected(self, ledger: AttestationLedger) -> None:
        with pytest.raises(SelfAttestationError):
            ledger.make_attestation("alice", "alice", 1, 1, "", now=10)

    def test_self_attestation_checked_before_category(
        self, ledger: AttestationLedger
    ) -> None:
        with pytest.raises(SelfAttestationError):
            ledger.make_attestation("alice", "alice", -1, 999, "", now=10)

    def test_unknown_category_rejected_without_mutation(
        self, ledger: AttestationLedger, storage: MemoryStorage
    ) -> None:
        with pytest.raises(CategoryNotFoundError) as exc_info:
            ledger.make_attestation("alice", "bob", 1, 2, "", now=10)
        assert isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.code == "NOT_FOUND"
        assert storage.get_reputation("bob") is None
        assert storage.get_attestation("alice", "bob") is None

    def test_cooldown_boundary_is_strict(
        self, ledger: AttestationLedger, storage: MemoryStorage
    ) -> None:
        ledger.make_attestation("alice", "bob", 1, 1, "first", now=1000)
        with pytest.raises(CooldownActiveError) as exc_info:
            ledger.make_attestation("alice", "bob", -1, 1, "second", now=1000 + DAY)
        assert exc_info.value.available_after == 1000 + DAY + 1
        assert ledger.get_attestation("alice", "bob").comment == "first"

        ledger.make_attestation("alice", "bob", -1, 1, "second", now=1000 + DAY + 1)
        assert ledger.get_attestation("alice", "bob").comment == "second"
        record = storage.get_reputation("bob")
        assert (record.positive_count, record.negative_count) == (1, 1)

    def test_cooldown_is_per_ordered_pair(self, ledger: AttestationLedger) -> None:
        ledger.make_attestation("alice", "bob", 1, 1, "", now=10)
        ledger.make_attestation("bob", "alice", 1, 1, "", now=11)
        ledger.make_attestation("carol", "bob", 1, 1, "", now=12)

    def test_comment_longer_than_bound_raises_value_error(
        self, storage: MemoryStorage, categories: CategoryIndex
    ) -> None:
        ledger = AttestationLedger(
            storage, LedgerConfig(administrator=ADMIN, max_comment_length=4)
        )
        with pytest.raises(ValueError):
            ledger.make_attestation("alice", "bob", 1, 1, "too long", now=10)
        assert storage.get_reputation("bob") is None

    def test_now_before_last_update_raises_value_error(
        self, ledger: AttestationLedger, storage: MemoryStorage
    ) -> None:
        ledger.make_attestation("alice", "bob", 1, 1, "", now=500)
        with pytest.raises(ValueError):
            ledger.make_attestation("carol", "bob", 1, 1, "", now=400)
        assert storage.get_attestation("carol", "bob") is None

    def test_failed_commit_leaves_no_partial_state(
        self,
        ledger: AttestationLedger,
        storage: MemoryStorage,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def explode(self: CategoryIndex, user: str, category_id: int) -> int:
            raise RuntimeError("counter unavailable")

        monkeypatch.setattr(CategoryIndex, "increment_category_count", explode)
        with pytest.raises(RuntimeError):
            ledger.make_attestation("alice", "bob", 1, 1, "", now=10)
        assert storage.get_reputation("bob") is None
        assert storage.get_attestation("alice", "bob") is None


# ---------------------------------------------------------------------------
# TestDecayEngine
# ---------------------------------------------------------------------------


class TestDecayEngine:
    def _engine(self, storage: MemoryStorage, config: LedgerConfig) -> DecayEngine:
        return DecayEngine(ReputationStore(storage), config)

    def test_unknown_user_raises_not_found(
        self, storage: MemoryStorage, ledger_config: LedgerConfig
    ) -> None:
        with pytest.raises(ReputationNotFoundError):
            self._engine(storage, ledger_config).apply_decay("ghost", now=10 * DAY)

    def test_below_threshold_is_noop(
        self, storage: MemoryStorage, ledger_config: LedgerConfig
    ) -> None:
        before = ReputationRecord(owner="bob", score=100, positive_count=10, last_updated=0)
        storage.put_reputation(before)
        result = self._engine(storage, ledger_config).apply_decay("bob", now=30 * DAY - 1)
        assert result.applied is False
        assert result.days_since_update == 29
        assert storage.get_reputation("bob") == before

    def test_thirty_days_applies_five_percent(
        self, storage: MemoryStorage, ledger_config: LedgerConfig
    ) -> None:
        storage.put_reputation(
            ReputationRecord(owner="bob", score=100, positive_count=10, last_updated=0)
        )
        result = self._engine(storage, ledger_config).apply_decay("bob", now=2_592_000)
        assert result.applied is True
        assert result.retention_percent == 95
        assert storage.get_reputation("bob") == ReputationRecord(
            owner="bob", score=100, positive_count=9, negative_count=0, last_updated=2_592_000
        )

    def test_score_recomputed_from_decayed_counts(
        self, storage: MemoryStorage, ledger_config: LedgerConfig
    ) -> None:
        storage.put_reputation(
            ReputationRecord(
                owner="bob", score=75, positive_count=3, negative_count=1, last_updated=0
            )
        )
        self._engine(storage, ledger_config).apply_decay("bob", now=30 * DAY)
        record = storage.get_reputation("bob")
        assert (record.positive_count, record.negative_count, record.score) == (2, 0, 100)

    def test_decay_resets_the_clock(
        self, storage: MemoryStorage, ledger_config: LedgerConfig
    ) -> None:
        storage.put_reputation(
            ReputationRecord(owner="bob", score=100, positive_count=100, last_updated=0)
        )
        engine = self._engine(storage, ledger_config)
        assert engine.apply_decay("bob", now=30 * DAY).applied is True
        assert engine.apply_decay("bob", now=31 * DAY).applied is False
        assert storage.get_reputation("bob").positive_count == 95

    def test_long_inactivity_floors_at_quarter(
        self, storage: MemoryStorage, ledger_config: LedgerConfig
    ) -> None:
        storage.put_reputation(
            ReputationRecord(
                owner="bob", score=50, positive_count=100, negative_count=100, last_updated=0
            )
        )
        result = self._engine(storage, ledger_config).apply_decay("bob", now=2_000 * DAY)
        assert result.retention_percent == 25
        record = storage.get_reputation("bob")
        assert (record.positive_count, record.negative_count, record.score) == (25, 25, 50)

    def test_category_counts_are_not_decayed(
        self,
        ledger: AttestationLedger,
        storage: MemoryStorage,
        ledger_config: LedgerConfig,
    ) -> None:
        ledger.make_attestation("alice", "bob", 1, 1, "", now=0)
        self._engine(storage, ledger_config).apply_decay("bob", now=400 * DAY)
        assert storage.get_category_count("bob", 1) == 1
