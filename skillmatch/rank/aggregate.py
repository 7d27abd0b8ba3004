"""
Composite scoring.

Combines independent signals into a single `score` on a fixed 0–100
scale.  Each signal is a `ScoringContributor`: a name, a weight and a
function returning a value in ``[0, 1]``.  The default contributors
mirror the canonical weights

    composite = 100 * (0.60 * skill + 0.25 * experience + 0.15 * other)

where ``skill`` is the Jaccard similarity of the skill sets and the
experience/other signals are placeholders that currently contribute
0.0.  New signals can be added by passing a different contributor
list without changing the shape of `MatchResult`.

The composite is scaled to 0–100 exactly once and then rounded to two
decimal places with Python's built-in `round` (round half to even).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import AbstractSet, Any, Callable, Dict, FrozenSet, Optional, Sequence, Tuple

from ..errors import ConfigError
from ..normalize.schema import Job, MatchResult
from .similarity import jaccard_similarity, matched_skills

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringInput:
    """Everything a contributor may look at for one candidate/job pair."""

    candidate_skills: FrozenSet[str]
    job_skills: FrozenSet[str]
    similarity: float
    candidate: Optional[Any] = None
    job: Optional[Job] = None


@dataclass(frozen=True)
class ScoringContributor:
    name: str
    weight: float
    signal: Callable[[ScoringInput], float]


@dataclass(frozen=True)
class SkillScore:
    similarity: float
    composite: float
    matched: FrozenSet[str]


def skill_signal(inputs: ScoringInput) -> float:
    return inputs.similarity


def no_signal(inputs: ScoringInput) -> float:
    """Placeholder for signals with no data behind them yet."""
    return 0.0


DEFAULT_WEIGHTS: Dict[str, float] = {
    "skill": 0.60,
    "experience": 0.25,
    "other": 0.15,
}

SIGNALS: Dict[str, Callable[[ScoringInput], float]] = {
    "skill": skill_signal,
    "experience": no_signal,
    "other": no_signal,
}


@dataclass
class ScoringConfig:
    """Contributor weights, usually read from the ``scoring`` config section."""

    weights: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_WEIGHTS))


def build_contributors(config: ScoringConfig) -> Tuple[ScoringContributor, ...]:
    """Turn a `ScoringConfig` into an ordered contributor list.

    Raises:
        ConfigError: If a weight names an unknown signal, is negative or
            not finite, or if the weights sum to more than 1.0.
    """
    contributors = []
    for name, weight in config.weights.items():
        if name not in SIGNALS:
            raise ConfigError(f"unknown scoring signal {name!r}")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight < 0:
            raise ConfigError(f"weight for {name!r} must be a non-negative number")
        if not math.isfinite(weight):
            raise ConfigError(f"weight for {name!r} must be finite")
        contributors.append(ScoringContributor(name, float(weight), SIGNALS[name]))
    total = sum(c.weight for c in contributors)
    if total > 1.0 + 1e-9:
        raise ConfigError(f"scoring weights sum to {total:.3f}; the total must not exceed 1.0")
    if total < 1.0 - 1e-9:
        logger.warning("Scoring weights sum to %.3f rather than 1.0", total)
    return tuple(contributors)


DEFAULT_CONTRIBUTORS: Tuple[ScoringContributor, ...] = build_contributors(ScoringConfig())


def explain(similarity: float) -> str:
    return f"skill_jaccard={similarity:.3f}"


def score_skills(
    candidate_skills: AbstractSet[str],
    job_skills: AbstractSet[str],
    contributors: Sequence[ScoringContributor] = DEFAULT_CONTRIBUTORS,
    candidate: Optional[Any] = None,
    job: Optional[Job] = None,
) -> SkillScore:
    """Score one candidate skill set against one job skill set.

    Args:
        candidate_skills: Skills extracted from the candidate's text.
        job_skills: Declared plus extracted skills of the job.
        contributors: Weighted signals to blend.
        candidate: Optional candidate record for non-skill signals.
        job: Optional job record for non-skill signals.

    Returns:
        A `SkillScore` with the Jaccard similarity, the rounded
        composite score and the matched skills.
    """
    cand = frozenset(candidate_skills)
    req = frozenset(job_skills)
    similarity = jaccard_similarity(cand, req)
    inputs = ScoringInput(cand, req, similarity, candidate=candidate, job=job)
    blended = sum(c.weight * c.signal(inputs) for c in contributors)
    composite = round(100.0 * blended, 2)
    return SkillScore(similarity=similarity, composite=composite, matched=matched_skills(cand, req))


def score_job(
    candidate_skills: AbstractSet[str],
    job: Job,
    contributors: Sequence[ScoringContributor] = DEFAULT_CONTRIBUTORS,
    candidate: Optional[Any] = None,
) -> MatchResult:
    """Score a single job and wrap the outcome in a `MatchResult`."""
    job_skills = job.skills
    scored = score_skills(candidate_skills, job_skills, contributors, candidate=candidate, job=job)
    assert scored.matched <= (candidate_skills & job_skills), "matched skills outside intersection"
    logger.debug(
        "Scored job %s: jaccard=%.3f score=%.2f matched=%d",
        job.id,
        scored.similarity,
        scored.composite,
        len(scored.matched),
    )
    return MatchResult(
        job_id=job.id,
        score=scored.composite,
        matched_skills=scored.matched,
        explanation=explain(scored.similarity),
    )
