"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from typing import Any, Dict

import pytest  # type: ignore


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    """A match request with a clear winner, a tie and a non-match."""
    return {
        "candidate": {
            "name": "Jane Doe",
            "raw_text": "Backend engineer: Python, Rust, Docker and PostgreSQL on Linux.",
        },
        "jobs": [
            {
                "id": "platform",
                "title": "Platform Engineer",
                "description": "Run Docker and Kubernetes clusters on Linux.",
            },
            {
                "id": "backend",
                "title": "Backend Developer",
                "description": "Python services backed by PostgreSQL.",
                "required_skills": ["Rust", " Docker "],
            },
            {
                "id": "frontend",
                "title": "Frontend Developer",
                "description": "React, HTML and CSS.",
            },
        ],
    }


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep host configuration variables and .env files out of every test."""
    monkeypatch.delenv("SKILLMATCH_CONFIG", raising=False)
    monkeypatch.delenv("SKILLMATCH_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
