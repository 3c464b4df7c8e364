# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from aumos_reputation.storage.interface import ReputationStorage
from aumos_reputation.types import AttestationRecord, Category, ReputationRecord


class MemoryStorage(ReputationStorage):
    """
    In-process memory store — suitable for single-process use and testing.

    All state is lost when the process exits. Records are frozen pydantic
    models, so they are stored and returned without copying.
    """

    def __init__(self) -> None:
        self._reputations: dict[str, ReputationRecord] = {}
        self._attestations: dict[tuple[str, str], AttestationRecord] = {}
        self._categories: dict[int, Category] = {}
        self._category_counts: dict[tuple[str, int], int] = {}
        self._last_category_id = 0

    # ─── Reputations ──────────────────────────────────────────────────────────

    def get_reputation(self, user: str) -> ReputationRecord | None:
        return self._reputations.get(user)

    def put_reputation(self, record: ReputationRecord) -> None:
        self._reputations[record.owner] = record

    # ─── Attestations ─────────────────────────────────────────────────────────

    def get_attestation(self, sender: str, target: str) -> AttestationRecord | None:
        return self._attestations.get((sender, target))

    def put_attestation(self, record: AttestationRecord) -> None:
        self._attestations[(record.sender, record.target)] = record

    # ─── Categories ───────────────────────────────────────────────────────────

    def get_category(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def put_category(self, category: Category) -> None:
        self._categories[category.id] = category

    def list_categories(self) -> list[Category]:
        return [self._categories[key] for key in sorted(self._categories)]

    def get_last_category_id(self) -> int:
        return self._last_category_id

    def set_last_category_id(self, category_id: int) -> None:
        self._last_category_id = category_id

    # ─── Category counts ──────────────────────────────────────────────────────

    def get_category_count(self, user: str, category_id: int) -> int:
        return self._category_counts.get((user, category_id), 0)

    def put_category_count(self, user: str, category_id: int, count: int) -> None:
        self._category_counts[(user, category_id)] = count
