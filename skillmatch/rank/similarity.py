"""
Set similarity between candidate and job skills.

The Jaccard index is used: the size of the intersection divided by the
size of the union.  Two empty sets are defined as a perfect match
(1.0) rather than the undefined 0/0.
"""

from __future__ import annotations

from typing import AbstractSet, FrozenSet


def jaccard_similarity(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """Return ``|a ∩ b| / |a ∪ b|``, or 1.0 when both sets are empty."""
    union = len(a | b)
    if union == 0:
        return 1.0
    return len(a & b) / union


def matched_skills(a: AbstractSet[str], b: AbstractSet[str]) -> FrozenSet[str]:
    """Skills present in both sets."""
    return frozenset(a & b)
