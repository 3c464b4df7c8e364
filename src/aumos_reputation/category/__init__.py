# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from aumos_reputation.category.index import CategoryIndex

__all__ = ["CategoryIndex"]
