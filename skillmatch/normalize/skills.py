"""
Skill token extraction.

Skills are recognised with a fixed catalog of regular expressions that
is compiled once at import time and never modified afterwards, so it
can be shared freely between threads.  Every match contributes the
lower‑cased text it matched (not the pattern's name), which means
``"Node.js"`` and ``"NodeJS"`` yield two distinct tokens.  Tokens such
as ``c++`` or ``natural language processing`` are kept whole.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillPattern:
    """A single recognition rule in the skill catalog."""

    name: str
    regex: re.Pattern

    @classmethod
    def compile(cls, name: str, pattern: str) -> "SkillPattern":
        return cls(name=name, regex=re.compile(pattern, re.IGNORECASE))


# No leading word boundary: "postgresql" also yields "sql".
SKILL_PATTERNS: Tuple[SkillPattern, ...] = tuple(
    SkillPattern.compile(name, pattern)
    for name, pattern in (
        ("rust", r"rust\b"),
        ("c++", r"c\+\+"),
        ("python", r"python\b"),
        ("java", r"java\b"),
        ("sql", r"sql\b"),
        ("postgresql", r"postgresql\b"),
        ("docker", r"docker\b"),
        ("kubernetes", r"kubernetes\b"),
        ("linux", r"linux\b"),
        ("html", r"html\b"),
        ("css", r"css\b"),
        ("javascript", r"javascript\b"),
        ("react", r"react\b"),
        ("node.js", r"node\.?js\b"),
        ("nlp", r"nlp\b"),
        ("natural language processing", r"natural language processing\b"),
    )
)


def extract_skills(text: Optional[str]) -> FrozenSet[str]:
    """Return the set of skill tokens found in ``text``.

    Args:
        text: Arbitrary text.  ``None`` and the empty string are both
            treated as text without skills.

    Returns:
        A frozenset of lower‑cased matched substrings.
    """
    if not text:
        return frozenset()
    found = set()
    for skill in SKILL_PATTERNS:
        for match in skill.regex.finditer(text):
            found.add(match.group(0).lower())
    logger.debug("Extracted %d skills from %d characters", len(found), len(text))
    return frozenset(found)


def normalize_skills(skills: Optional[Iterable[str]]) -> FrozenSet[str]:
    """Lower‑case and strip declared skills, dropping blank entries."""
    if not skills:
        return frozenset()
    return frozenset(s.strip().lower() for s in skills if s and s.strip())


def sorted_skills(skills: Iterable[str]) -> List[str]:
    """Stable display order for a skill set."""
    return sorted(skills)
