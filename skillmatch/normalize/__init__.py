"""
Normalization helpers for skillmatch.

The `normalize` package defines the request and result records and
turns free text into normalized skill tokens.  Submodules include:

* `schema` – `Candidate`, `Job`, `MatchResult` and `MatchRequest`,
  plus validation of incoming request payloads.
* `skills` – the process‑wide skill pattern catalog and the
  `extract_skills` / `normalize_skills` functions.
"""

from .schema import Candidate, Job, MatchRequest, MatchResult  # noqa: F401
from .skills import SKILL_PATTERNS, extract_skills, normalize_skills  # noqa: F401
