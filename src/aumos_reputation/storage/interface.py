# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from abc import ABC, abstractmethod

from aumos_reputation.types import AttestationRecord, Category, ReputationRecord


class ReputationStorage(ABC):
    """
    Minimal persistence contract for the reputation core.

    State is four independent key-value maps plus a single monotonic
    category-id counter. Implementors may back this with any key-value
    store. The default MemoryStorage is suitable for single-process use
    and testing only.
    """

    # ─── Reputations ──────────────────────────────────────────────────────────

    @abstractmethod
    def get_reputation(self, user: str) -> ReputationRecord | None:
        ...

    @abstractmethod
    def put_reputation(self, record: ReputationRecord) -> None:
        ...

    # ─── Attestations ─────────────────────────────────────────────────────────

    @abstractmethod
    def get_attestation(self, sender: str, target: str) -> AttestationRecord | None:
        ...

    @abstractmethod
    def put_attestation(self, record: AttestationRecord) -> None:
        ...

    # ─── Categories ───────────────────────────────────────────────────────────

    @abstractmethod
    def get_category(self, category_id: int) -> Category | None:
        ...

    @abstractmethod
    def put_category(self, category: Category) -> None:
        ...

    @abstractmethod
    def list_categories(self) -> list[Category]:
        ...

    @abstractmethod
    def get_last_category_id(self) -> int:
        ...

    @abstractmethod
    def set_last_category_id(self, category_id: int) -> None:
        ...

    # ─── Category counts ──────────────────────────────────────────────────────

    @abstractmethod
    def get_category_count(self, user: str, category_id: int) -> int:
        ...

    @abstractmethod
    def put_category_count(self, user: str, category_id: int, count: int) -> None:
        ...
