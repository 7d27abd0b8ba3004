"""
Match a candidate against a batch of jobs.

Each job is scored independently of every other job, so the scoring
step fans out over a thread pool when more than one worker is
requested.  Results are joined in input order and handed to the
single-threaded `rank_results`, which makes the output identical for
any worker count.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..normalize.schema import MatchRequest, MatchResult, validate_top_k
from .aggregate import DEFAULT_CONTRIBUTORS, ScoringContributor, score_job
from .ranker import rank_results

logger = logging.getLogger(__name__)


def match_candidate(
    request: MatchRequest,
    max_workers: Optional[int] = None,
    contributors: Sequence[ScoringContributor] = DEFAULT_CONTRIBUTORS,
) -> List[MatchResult]:
    """Score every job in ``request`` and return the ranked top‑K.

    Args:
        request: A validated match request.
        max_workers: Thread pool size for scoring.  ``None`` or 1 scores
            the jobs sequentially.
        contributors: Weighted signals used for the composite score.

    Returns:
        Ranked and truncated `MatchResult` list.
    """
    top_k = validate_top_k(request.top_k)
    candidate = request.candidate
    candidate_skills = candidate.skills
    jobs = request.jobs

    def _score(job):
        return score_job(candidate_skills, job, contributors, candidate=candidate)

    if max_workers and max_workers > 1 and len(jobs) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(_score, jobs))
    else:
        results = [_score(job) for job in jobs]

    ranked = rank_results(results, top_k)
    logger.info(
        "Matched %s (%d skills) against %d jobs, returning %d",
        candidate.name or "candidate",
        len(candidate_skills),
        len(jobs),
        len(ranked),
    )
    return ranked


def match_payload(payload: Mapping[str, Any], **kwargs: Any) -> List[Dict[str, Any]]:
    """Validate a decoded request payload, match it and serialize the results.

    Raises:
        ValidationError: If the payload is malformed.  Nothing is scored
            in that case.
    """
    request = MatchRequest.from_dict(payload)
    return [result.to_dict() for result in match_candidate(request, **kwargs)]
