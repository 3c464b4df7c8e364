# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from aumos_reputation.storage.interface import ReputationStorage
from aumos_reputation.types import ReputationRecord


def default_record(user: str, now: int) -> ReputationRecord:
    """Return a fresh record with the neutral score and no counts."""
    return ReputationRecord(owner=user, last_updated=now)


class ReputationStore:
    """
    Owns the mapping from user identity to :class:`ReputationRecord`.

    The store is a thin view over a :class:`ReputationStorage`; pass a
    staged storage to make its writes part of a larger transition.
    Records are never deleted.
    """

    def __init__(self, storage: ReputationStorage) -> None:
        self._storage = storage

    def get(self, user: str) -> ReputationRecord | None:
        """Return the record for ``user``, or None if none exists."""
        return self._storage.get_reputation(user)

    def upsert(self, record: ReputationRecord) -> None:
        """
        Unconditionally store ``record``, replacing any existing one.

        Raises:
            ValueError: If ``record.last_updated`` is earlier than the stored
                record's, which would move ``last_updated`` backwards.
        """
        existing = self._storage.get_reputation(record.owner)
        if existing is not None and record.last_updated < existing.last_updated:
            raise ValueError(
                f"Reputation for '{record.owner}' was last updated at "
                f"{existing.last_updated}; cannot write an update at "
                f"{record.last_updated}."
            )
        self._storage.put_reputation(record)

    def initialize(self, user: str, now: int) -> bool:
        """
        Create a default record for ``user`` unless one already exists.

        Calling this again is a successful no-op.

        Returns:
            True if a record was created, False if one already existed.
        """
        if self._storage.get_reputation(user) is not None:
            return False
        self._storage.put_reputation(default_record(user, now))
        return True
