# normalize/schema.py
"""
Records exchanged between the request host and the scoring core.

`MatchRequest.from_dict` is the only place where untrusted input is
checked.  It rejects a malformed request as a whole, before any skill
extraction or scoring runs, and names the violated field in the
raised `ValidationError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from ..errors import ValidationError
from .skills import extract_skills, normalize_skills, sorted_skills


@dataclass
class Candidate:
    raw_text: str
    name: Optional[str] = None

    @property
    def skills(self) -> FrozenSet[str]:
        return extract_skills(self.raw_text)


@dataclass
class Job:
    id: str
    title: str
    description: str
    required_skills: Optional[List[str]] = None

    @property
    def skills(self) -> FrozenSet[str]:
        """Declared skills united with the skills found in the description."""
        return normalize_skills(self.required_skills) | extract_skills(self.description)


@dataclass(frozen=True)
class MatchResult:
    job_id: str
    score: float
    matched_skills: FrozenSet[str]
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "job_id": self.job_id,
            "score": self.score,
            "matched_skills": sorted_skills(self.matched_skills),
            "explanation": self.explanation,
        }


@dataclass
class MatchRequest:
    candidate: Candidate
    jobs: List[Job] = field(default_factory=list)
    top_k: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "MatchRequest":
        """Build a request from a decoded JSON payload.

        Raises:
            ValidationError: If any part of the payload is malformed.
        """
        if not isinstance(data, Mapping):
            raise ValidationError("request", "must be an object")
        candidate = _parse_candidate(data.get("candidate"))
        raw_jobs = data.get("jobs", [])
        if not isinstance(raw_jobs, list):
            raise ValidationError("jobs", "must be a list")
        jobs = [_parse_job(raw, i) for i, raw in enumerate(raw_jobs)]
        top_k = validate_top_k(data.get("top_k"))
        return cls(candidate=candidate, jobs=jobs, top_k=top_k)


def validate_top_k(top_k: Any) -> Optional[int]:
    """Return ``top_k`` unchanged if it is ``None`` or a non‑negative int."""
    if top_k is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(top_k, bool) or not isinstance(top_k, int):
        raise ValidationError("top_k", "must be a non-negative integer")
    if top_k < 0:
        raise ValidationError("top_k", f"must be a non-negative integer, got {top_k}")
    return top_k


def _require_str(data: Mapping[str, Any], key: str, path: str) -> str:
    if key not in data or data[key] is None:
        raise ValidationError(f"{path}.{key}", "is required")
    value = data[key]
    if not isinstance(value, str):
        raise ValidationError(f"{path}.{key}", "must be a string")
    return value


def _parse_candidate(data: Any) -> Candidate:
    if not isinstance(data, Mapping):
        raise ValidationError("candidate", "is required and must be an object")
    raw_text = _require_str(data, "raw_text", "candidate")
    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise ValidationError("candidate.name", "must be a string")
    return Candidate(raw_text=raw_text, name=name)


def _parse_job(data: Any, index: int) -> Job:
    path = f"jobs[{index}]"
    if not isinstance(data, Mapping):
        raise ValidationError(path, "must be an object")
    required = data.get("required_skills")
    if required is not None:
        if not isinstance(required, list) or not all(isinstance(s, str) for s in required):
            raise ValidationError(f"{path}.required_skills", "must be a list of strings")
    return Job(
        id=_require_str(data, "id", path),
        title=_require_str(data, "title", path),
        description=_require_str(data, "description", path),
        required_skills=required,
    )
