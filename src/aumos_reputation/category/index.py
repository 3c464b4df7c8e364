# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import logging

from aumos_reputation.config import LedgerConfig
from aumos_reputation.errors import UnauthorizedError
from aumos_reputation.storage.interface import ReputationStorage
from aumos_reputation.types import Category

logger = logging.getLogger("aumos.reputation.category")


class CategoryIndex:
    """
    Owns category definitions and per-user-per-category counters.

    Categories are created only by the configured administrator, receive
    sequential ids starting at 1, and are never renamed or removed.
    Counters start at 0 and only ever increase.
    """

    def __init__(self, storage: ReputationStorage, config: LedgerConfig) -> None:
        self._storage = storage
        self._config = config

    def add_category(self, requester: str, name: str) -> int:
        """
        Register a new category.

        Args:
            requester: Identity asking for the category to be created.
            name: Display name of the category.

        Returns:
            The id assigned to the new category.

        Raises:
            UnauthorizedError: If ``requester`` is not the administrator.
            ValueError: If ``name`` is longer than the configured bound.
        """
        if requester != self._config.administrator:
            raise UnauthorizedError(requester, self._config.administrator)
        if len(name) > self._config.max_category_name_length:
            raise ValueError(
                f"Category name exceeds {self._config.max_category_name_length} "
                f"characters; got {len(name)}."
            )

        category_id = self._storage.get_last_category_id() + 1
        self._storage.put_category(Category(id=category_id, name=name))
        self._storage.set_last_category_id(category_id)
        logger.info("category_added", extra={"category_id": category_id, "name": name})
        return category_id

    def get_category(self, category_id: int) -> Category | None:
        """Return the category with ``category_id``, or None."""
        return self._storage.get_category(category_id)

    def list_categories(self) -> list[Category]:
        """Return every registered category ordered by id."""
        return self._storage.list_categories()

    def get_category_count(self, user: str, category_id: int) -> int:
        """Return how many accepted attestations ``user`` received in a category."""
        return self._storage.get_category_count(user, category_id)

    def increment_category_count(self, user: str, category_id: int) -> int:
        """Add one to the counter for ``(user, category_id)`` and return it."""
        count = self._storage.get_category_count(user, category_id) + 1
        self._storage.put_category_count(user, category_id, count)
        return count
