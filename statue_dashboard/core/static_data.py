"""
Fixed cost tables for the Statue of Liberty rebuild.

Plain tuples so they can be read at import time without side effects;
Dataset.from_static() turns them into validated, immutable records.
"""

from __future__ import annotations

from typing import Optional, Tuple

# (category, weight in tons, cost in 1886 USD, estimated cost today USD)
MATERIALS: Tuple[Tuple[str, Optional[float], float, float], ...] = (
    ("Copper", 31, 50000, 2500000),
    ("Steel", 125, 40000, 2000000),
    ("Labor", None, 100000, 7500000),
    ("Pedestal", 27000, 270000, 25000000),
)

# (stage, duration in days)
WORKFLOW_STAGES: Tuple[Tuple[str, float], ...] = (
    ("Design & Engineering", 365),
    ("Copper Skin Forming", 730),
    ("Iron Framework", 540),
    ("Shipping to New York", 30),
    ("Assembly on Pedestal", 120),
)
