"""
Document conversion for skillmatch.

Turns uploaded résumés and job descriptions into plain text.  The
scoring core never imports this package; hosts call it and pass the
resulting text on.
"""

from .documents import extract_text, extract_text_from_file  # noqa: F401
