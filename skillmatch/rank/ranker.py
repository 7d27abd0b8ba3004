"""
Deterministic ranking of scored jobs.

Results are ordered by descending score.  Ties are broken by ascending
``job_id`` so that the output never depends on input order or on which
worker finished first.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..normalize.schema import MatchResult, validate_top_k

logger = logging.getLogger(__name__)


def rank_results(results: Iterable[MatchResult], top_k: Optional[int] = None) -> List[MatchResult]:
    """Sort results and keep the first ``top_k``.

    Args:
        results: Scored results in any order.  Not modified.
        top_k: Maximum number of results to return; ``None`` keeps all.

    Returns:
        A new list of at most ``top_k`` results.

    Raises:
        ValidationError: If ``top_k`` is negative or not an integer.
    """
    top_k = validate_top_k(top_k)
    ranked = sorted(results, key=lambda r: (-r.score, r.job_id))
    if top_k is not None:
        ranked = ranked[:top_k]
    logger.debug("Ranked results, keeping %d", len(ranked))
    return ranked
