# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from aumos_reputation.storage.interface import ReputationStorage
from aumos_reputation.storage.memory import MemoryStorage
from aumos_reputation.storage.staged import StagedStorage, transaction

__all__ = [
    "ReputationStorage",
    "MemoryStorage",
    "StagedStorage",
    "transaction",
]
