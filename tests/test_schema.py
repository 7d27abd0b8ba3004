"""Tests for request records and request validation."""

from __future__ import annotations

from typing import Any, Dict

import pytest  # type: ignore

from skillmatch.errors import ValidationError
from skillmatch.normalize.schema import Candidate, Job, MatchRequest, MatchResult


def test_from_dict_valid(sample_payload: Dict[str, Any]) -> None:
    request = MatchRequest.from_dict(sample_payload)
    assert request.candidate.name == "Jane Doe"
    assert [job.id for job in request.jobs] == ["platform", "backend", "frontend"]
    assert request.top_k is None


def test_job_skills_union_declared_and_extracted() -> None:
    job = Job(
        id="j1",
        title="Backend",
        description="Python services backed by PostgreSQL.",
        required_skills=["Rust", " Docker "],
    )
    assert job.skills == {"rust", "docker", "python", "postgresql", "sql"}


def test_job_without_required_skills() -> None:
    job = Job(id="j1", title="Rust", description="Looking for a Rust developer")
    assert job.skills == {"rust"}


def test_candidate_skills() -> None:
    assert Candidate(raw_text="I know Rust and Python").skills == {"rust", "python"}


def test_match_result_to_dict_sorts_skills() -> None:
    result = MatchResult("j1", 30.0, frozenset({"rust", "c++"}), "skill_jaccard=0.500")
    assert result.to_dict() == {
        "job_id": "j1",
        "score": 30.0,
        "matched_skills": ["c++", "rust"],
        "explanation": "skill_jaccard=0.500",
    }


def test_match_result_is_immutable() -> None:
    result = MatchResult("j1", 30.0, frozenset(), "skill_jaccard=0.000")
    with pytest.raises(AttributeError):
        result.score = 99.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "payload, field",
    [
        ([], "request"),
        ({"jobs": []}, "candidate"),
        ({"candidate": {}}, "candidate.raw_text"),
        ({"candidate": {"raw_text": 42}}, "candidate.raw_text"),
        ({"candidate": {"raw_text": "", "name": 7}}, "candidate.name"),
        ({"candidate": {"raw_text": ""}, "jobs": {}}, "jobs"),
        ({"candidate": {"raw_text": ""}, "jobs": ["x"]}, "jobs[0]"),
        ({"candidate": {"raw_text": ""}, "jobs": [{"title": "t", "description": "d"}]}, "jobs[0].id"),
        (
            {"candidate": {"raw_text": ""}, "jobs": [{"id": "a", "title": "t", "description": "d"}, {"id": "b", "title": "t"}]},
            "jobs[1].description",
        ),
        (
            {"candidate": {"raw_text": ""}, "jobs": [{"id": "a", "title": "t", "description": "d", "required_skills": "rust"}]},
            "jobs[0].required_skills",
        ),
        ({"candidate": {"raw_text": ""}, "top_k": -1}, "top_k"),
        ({"candidate": {"raw_text": ""}, "top_k": 1.5}, "top_k"),
        ({"candidate": {"raw_text": ""}, "top_k": True}, "top_k"),
    ],
)
def test_from_dict_rejects(payload: Any, field: str) -> None:
    """Each malformed payload names the violated field."""
    with pytest.raises(ValidationError) as info:
        MatchRequest.from_dict(payload)
    assert info.value.field == field
    assert field in str(info.value)


def test_from_dict_defaults() -> None:
    request = MatchRequest.from_dict({"candidate": {"raw_text": ""}, "top_k": 0})
    assert request.jobs == []
    assert request.top_k == 0
