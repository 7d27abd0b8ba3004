"""Tests for Jaccard similarity and composite scoring."""

from __future__ import annotations

import pytest  # type: ignore

from skillmatch.errors import ConfigError
from skillmatch.normalize.schema import Job
from skillmatch.rank.aggregate import (
    DEFAULT_CONTRIBUTORS,
    ScoringConfig,
    ScoringContributor,
    build_contributors,
    explain,
    score_job,
    score_skills,
)
from skillmatch.rank.similarity import jaccard_similarity, matched_skills

SETS = [
    frozenset(),
    frozenset({"rust"}),
    frozenset({"rust", "python"}),
    frozenset({"docker", "linux", "sql"}),
    frozenset({"python", "sql", "c++", "react"}),
]


@pytest.mark.parametrize("a", SETS)
@pytest.mark.parametrize("b", SETS)
def test_jaccard_bounds_and_symmetry(a, b) -> None:
    sim = jaccard_similarity(a, b)
    assert 0.0 <= sim <= 1.0
    assert sim == jaccard_similarity(b, a)


@pytest.mark.parametrize("a", SETS)
def test_jaccard_self_is_one(a) -> None:
    assert jaccard_similarity(a, a) == 1.0


@pytest.mark.parametrize("a", SETS)
@pytest.mark.parametrize("b", SETS)
def test_matched_is_intersection(a, b) -> None:
    matched = matched_skills(a, b)
    assert matched == a & b
    assert matched <= a and matched <= b


def test_jaccard_disjoint_and_one_empty() -> None:
    assert jaccard_similarity({"rust"}, {"python"}) == 0.0
    assert jaccard_similarity(set(), {"python"}) == 0.0


def test_scenario_a() -> None:
    """Rust and Python candidate against a Rust-only job."""
    scored = score_skills({"python", "rust"}, {"rust"})
    assert scored.similarity == 0.5
    assert scored.matched == {"rust"}
    assert scored.composite == 30.0


def test_scenario_b() -> None:
    """Two empty skill sets are a vacuous perfect match."""
    scored = score_skills(set(), set())
    assert scored.similarity == 1.0
    assert scored.matched == frozenset()
    assert scored.composite == 60.0


def test_composite_is_single_scaled_and_rounded() -> None:
    scored = score_skills({"a", "b", "c"}, {"a"})
    assert scored.composite == 20.0
    scored = score_skills({"docker", "linux"}, {"docker", "linux", "kubernetes", "python", "sql", "rust", "postgresql"})
    assert scored.composite == 17.14
    assert 0.0 <= scored.composite <= 100.0


def test_explanation_reflects_similarity() -> None:
    assert explain(0.5) == "skill_jaccard=0.500"
    assert explain(2 / 7) == "skill_jaccard=0.286"


def test_score_job_builds_result() -> None:
    job = Job(id="rust-dev", title="Rust Dev", description="Looking for a Rust developer")
    result = score_job(frozenset({"rust", "python"}), job)
    assert result.job_id == "rust-dev"
    assert result.score == 30.0
    assert result.matched_skills == {"rust"}
    assert result.explanation == "skill_jaccard=0.500"


def test_custom_contributor_extends_score() -> None:
    """An extra signal changes the composite without changing the result shape."""
    contributors = DEFAULT_CONTRIBUTORS[:2] + (ScoringContributor("other", 0.15, lambda inputs: 1.0),)
    scored = score_skills({"rust"}, {"rust"}, contributors)
    assert scored.composite == 75.0


def test_default_contributors_weights() -> None:
    assert [(c.name, c.weight) for c in DEFAULT_CONTRIBUTORS] == [
        ("skill", 0.60),
        ("experience", 0.25),
        ("other", 0.15),
    ]


def test_build_contributors_rejects_bad_weights() -> None:
    with pytest.raises(ConfigError):
        build_contributors(ScoringConfig(weights={"skill": -0.1}))
    with pytest.raises(ConfigError):
        build_contributors(ScoringConfig(weights={"seniority": 0.5}))
    with pytest.raises(ConfigError):
        build_contributors(ScoringConfig(weights={"skill": "high"}))


def test_build_contributors_custom_weights() -> None:
    contributors = build_contributors(ScoringConfig(weights={"skill": 1.0}))
    assert score_skills({"rust"}, {"rust", "python"}, contributors).composite == 50.0


@pytest.mark.parametrize("weight", [float("inf"), float("nan")])
def test_build_contributors_rejects_non_finite_weights(weight: float) -> None:
    with pytest.raises(ConfigError, match="finite"):
        build_contributors(ScoringConfig(weights={"skill": weight}))


def test_build_contributors_rejects_total_above_one() -> None:
    """Weights summing past 1.0 would push scores beyond 100."""
    with pytest.raises(ConfigError, match="must not exceed 1.0"):
        build_contributors(ScoringConfig(weights={"skill": 0.9, "experience": 0.25}))


def test_build_contributors_allows_total_below_one() -> None:
    contributors = build_contributors(ScoringConfig(weights={"skill": 0.5}))
    assert score_skills({"rust"}, {"rust"}, contributors).composite == 50.0
