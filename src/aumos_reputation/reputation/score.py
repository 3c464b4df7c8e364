# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from aumos_reputation.types import DEFAULT_SCORE, MAX_SCORE, MIN_SCORE


def calculate_score(positive_count: int, negative_count: int) -> int:
    """
    Map accumulated attestation counts to a reputation score.

    The score is the truncated percentage of positive attestations.
    Integer arithmetic only, so every evaluation of the same counts yields
    the same score. A user with no counts receives ``DEFAULT_SCORE``.

    Args:
        positive_count: Number of positive attestations (>= 0).
        negative_count: Number of negative attestations (>= 0).

    Returns:
        An integer score in ``[MIN_SCORE, MAX_SCORE]``.
    """
    total = positive_count + negative_count
    if total == 0:
        return DEFAULT_SCORE

    positive_weight = positive_count * 100 // total
    return max(MIN_SCORE, min(MAX_SCORE, positive_weight))
