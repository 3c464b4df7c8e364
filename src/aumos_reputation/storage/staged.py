# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Staged writes over a :class:`ReputationStorage`.

A :class:`StagedStorage` buffers every write in an overlay while serving
reads from the overlay first and the base storage second. Nothing reaches
the base until :meth:`StagedStorage.commit` is called, so an operation
that fails part-way leaves the base exactly as it found it.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from aumos_reputation.storage.interface import ReputationStorage
from aumos_reputation.types import AttestationRecord, Category, ReputationRecord


class StagedStorage(ReputationStorage):
    """Write-buffering view of a base storage."""

    def __init__(self, base: ReputationStorage) -> None:
        self._base = base
        self._reputations: dict[str, ReputationRecord] = {}
        self._attestations: dict[tuple[str, str], AttestationRecord] = {}
        self._categories: dict[int, Category] = {}
        self._category_counts: dict[tuple[str, int], int] = {}
        self._last_category_id: int | None = None
        self._closed = False

    @property
    def pending(self) -> int:
        """Number of staged writes not yet committed."""
        return (
            len(self._reputations)
            + len(self._attestations)
            + len(self._categories)
            + len(self._category_counts)
            + (0 if self._last_category_id is None else 1)
        )

    # ─── Reputations ──────────────────────────────────────────────────────────

    def get_reputation(self, user: str) -> ReputationRecord | None:
        if user in self._reputations:
            return self._reputations[user]
        return self._base.get_reputation(user)

    def put_reputation(self, record: ReputationRecord) -> None:
        self._ensure_open()
        self._reputations[record.owner] = record

    # ─── Attestations ─────────────────────────────────────────────────────────

    def get_attestation(self, sender: str, target: str) -> AttestationRecord | None:
        key = (sender, target)
        if key in self._attestations:
            return self._attestations[key]
        return self._base.get_attestation(sender, target)

    def put_attestation(self, record: AttestationRecord) -> None:
        self._ensure_open()
        self._attestations[(record.sender, record.target)] = record

    # ─── Categories ───────────────────────────────────────────────────────────

    def get_category(self, category_id: int) -> Category | None:
        if category_id in self._categories:
            return self._categories[category_id]
        return self._base.get_category(category_id)

    def put_category(self, category: Category) -> None:
        self._ensure_open()
        self._categories[category.id] = category

    def list_categories(self) -> list[Category]:
        merged = {category.id: category for category in self._base.list_categories()}
        merged.update(self._categories)
        return [merged[key] for key in sorted(merged)]

    def get_last_category_id(self) -> int:
        if self._last_category_id is not None:
            return self._last_category_id
        return self._base.get_last_category_id()

    def set_last_category_id(self, category_id: int) -> None:
        self._ensure_open()
        self._last_category_id = category_id

    # ─── Category counts ──────────────────────────────────────────────────────

    def get_category_count(self, user: str, category_id: int) -> int:
        key = (user, category_id)
        if key in self._category_counts:
            return self._category_counts[key]
        return self._base.get_category_count(user, category_id)

    def put_category_count(self, user: str, category_id: int, count: int) -> None:
        self._ensure_open()
        self._category_counts[(user, category_id)] = count

    # ─── Lifecycle ────────────────────────────────────────────────────────────

    def commit(self) -> None:
        """
        Flush every staged write to the base storage and close this view.

        Raises:
            RuntimeError: If the view was already committed or discarded.
        """
        self._ensure_open()
        for record in self._reputations.values():
            self._base.put_reputation(record)
        for attestation in self._attestations.values():
            self._base.put_attestation(attestation)
        for category in self._categories.values():
            self._base.put_category(category)
        if self._last_category_id is not None:
            self._base.set_last_category_id(self._last_category_id)
        for (user, category_id), count in self._category_counts.items():
            self._base.put_category_count(user, category_id, count)
        self._close()

    def discard(self) -> None:
        """Drop every staged write and close this view."""
        self._close()

    def _close(self) -> None:
        self._reputations.clear()
        self._attestations.clear()
        self._categories.clear()
        self._category_counts.clear()
        self._last_category_id = None
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Staged storage is closed; open a new transaction.")


@contextmanager
def transaction(storage: ReputationStorage) -> Iterator[StagedStorage]:
    """
    Run a block of writes as one all-or-nothing transition.

    Commits when the block exits normally. Any exception discards the
    staged writes and propagates unchanged.

    Example::

        with transaction(storage) as staged:
            staged.put_reputation(record)
            staged.put_attestation(attestation)
    """
    staged = StagedStorage(storage)
    try:
        yield staged
    except BaseException:
        staged.discard()
        raise
    staged.commit()
