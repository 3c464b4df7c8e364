# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from aumos_reputation.reputation.decay import (
    DecayEngine,
    DecayResult,
    calculate_decay_factor,
    calculate_decayed_value,
)
from aumos_reputation.reputation.score import calculate_score
from aumos_reputation.reputation.store import ReputationStore, default_record

__all__ = [
    "ReputationStore",
    "default_record",
    "calculate_score",
    "DecayEngine",
    "DecayResult",
    "calculate_decay_factor",
    "calculate_decayed_value",
]
