# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for aumos-reputation tests."""

from __future__ import annotations

import pytest

from aumos_reputation.config import LedgerConfig, ReputationConfig
from aumos_reputation.engine import ReputationEngine
from aumos_reputation.storage.memory import MemoryStorage

ADMIN = "deployer"
DAY = 86_400


@pytest.fixture
def ledger_config() -> LedgerConfig:
    return LedgerConfig(administrator=ADMIN)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def engine() -> ReputationEngine:
    """A fresh engine with default configuration."""
    return ReputationEngine(ReputationConfig(ledger=LedgerConfig(administrator=ADMIN)))


@pytest.fixture
def engine_with_category(engine: ReputationEngine) -> ReputationEngine:
    """An engine with category 1 ('reliability') registered."""
    engine.add_category(ADMIN, "reliability", now=0)
    return engine
