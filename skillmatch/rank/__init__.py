"""
Ranking subsystem for skillmatch.

The `rank` package turns candidate and job skill sets into an ordered
list of matches.  The stages include:

* `similarity` – Jaccard similarity and matched skills of two sets.
* `aggregate` – Blends the similarity with the other weighted signals
  into a composite 0–100 score.
* `ranker` – Sorts by score (ties by job id) and applies top‑K.
* `match` – Fans out scoring over all jobs of a request and ranks the
  joined results.
"""

from .similarity import jaccard_similarity, matched_skills  # noqa: F401
from .aggregate import DEFAULT_CONTRIBUTORS, score_job, score_skills  # noqa: F401
from .ranker import rank_results  # noqa: F401
from .match import match_candidate, match_payload  # noqa: F401
