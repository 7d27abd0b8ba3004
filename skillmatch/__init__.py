"""
Skillmatch package: skill-based matching of a candidate against jobs.

This package contains submodules for extracting skill tokens from free
text, scoring the overlap between a candidate and each job, and ranking
the scored jobs.  Each submodule implements one step of the pipeline.

The high‑level flow is:

1. **resume** – Convert an uploaded document (PDF, DOCX or plain text)
   into plain text.  This step lives at the edge of the system; the
   scoring core never imports it and only ever sees the resulting text.
2. **normalize** – Define the `Candidate`, `Job` and `MatchResult`
   records, validate incoming requests and recognise skill tokens in
   text using a fixed catalog of patterns.
3. **rank** – Compute the Jaccard similarity between the candidate and
   job skill sets, blend it with the other (placeholder) signals into a
   composite 0–100 score, and order the results deterministically.
4. **cli** – Command line entry point wiring together the above
   components.
"""

from importlib import metadata

try:
    __version__ = metadata.version("skillmatch")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0"
