"""
Command line interface for skillmatch.

This module exposes subcommands to run each stage of the pipeline:
converting a document into text, listing the skills found in a text,
matching a candidate against a batch of jobs and printing a
human‑readable report of the matches.  The CLI is intentionally
lightweight and delegates the work to the `resume`, `normalize` and
`rank` packages.

Exit status is 0 on success, 2 for a rejected request or invalid
configuration and 1 when a document could not be converted.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Settings, configure_logging, load_settings, resolve_log_level
from .errors import ConfigError, ExtractionFailure, ValidationError
from .normalize.schema import MatchRequest, validate_top_k
from .normalize.skills import extract_skills, sorted_skills
from .rank.aggregate import build_contributors
from .rank.match import match_candidate
from .resume.documents import extract_text_from_file

logger = logging.getLogger("skillmatch.cli")


def _load_json(path: str, what: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise ValidationError(what, f"{path} is not valid JSON ({exc.msg} at line {exc.lineno})") from exc
    except UnicodeDecodeError as exc:
        raise ValidationError(what, f"{path} is not valid UTF-8") from exc


def _write_output(text: str, out: Optional[str]) -> None:
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Wrote output to %s", out)
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def _resolve_documents(payload: Any, resume: Optional[str], base_dir: Path) -> None:
    """Fill in candidate and job text from documents, in place.

    A job whose ``description_file`` cannot be converted is dropped with
    a warning so the remaining jobs are still matched.  A résumé that
    cannot be converted aborts the command.
    """
    if not isinstance(payload, dict):
        return
    if resume:
        candidate = payload.get("candidate")
        if not isinstance(candidate, dict):
            candidate = payload["candidate"] = {}
        candidate["raw_text"] = extract_text_from_file(resume)

    jobs = payload.get("jobs")
    if not isinstance(jobs, list):
        return
    kept: List[Any] = []
    for job in jobs:
        if isinstance(job, dict) and "description" not in job and isinstance(job.get("description_file"), str):
            doc = base_dir / job["description_file"]
            try:
                job = dict(job, description=extract_text_from_file(doc))
            except ExtractionFailure as exc:
                logger.warning("Skipping job %s: %s", job.get("id", "?"), exc)
                continue
            del job["description_file"]
        kept.append(job)
    payload["jobs"] = kept


def cmd_parse(args: argparse.Namespace, settings: Settings) -> None:
    """Convert a document into plain text."""
    text = extract_text_from_file(args.file)
    _write_output(text, args.out)


def cmd_skills(args: argparse.Namespace, settings: Settings) -> None:
    """Print the skills found in a text or document as a JSON list."""
    text = args.text if args.text is not None else extract_text_from_file(args.file)
    print(json.dumps(sorted_skills(extract_skills(text))))


def cmd_match(args: argparse.Namespace, settings: Settings) -> None:
    """Match a candidate against the jobs of a request file."""
    payload = _load_json(args.request, "request")
    _resolve_documents(payload, args.resume, Path(args.request).resolve().parent)
    request = MatchRequest.from_dict(payload)
    if args.topk is not None:
        request.top_k = validate_top_k(args.topk)
    elif request.top_k is None:
        request.top_k = settings.top_k
    if not request.jobs:
        logger.warning("Request contains no jobs")
    contributors = build_contributors(settings.scoring)
    workers = args.workers or settings.max_workers
    results = match_candidate(request, max_workers=workers, contributors=contributors)
    _write_output(json.dumps([r.to_dict() for r in results], indent=2), args.out)


def cmd_report(args: argparse.Namespace, settings: Settings) -> None:
    """Print a simple report from a matches JSON file."""
    rows: List[Dict[str, Any]] = _load_json(args.matches, "matches")
    if not isinstance(rows, list):
        raise ValidationError("matches", "must be a list of match results")
    for i, row in enumerate(rows):
        if not isinstance(row, dict) or not isinstance(row.get("job_id"), str):
            raise ValidationError(f"matches[{i}]", "must be an object with a string job_id")
        score = row.get("score")
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise ValidationError(f"matches[{i}].score", "must be a number")
    limit = args.limit or len(rows)
    for i, row in enumerate(rows[:limit]):
        print(f"{i+1:02d}. {row['job_id']} – {float(row['score']):.2f}")
        matched = ", ".join(row.get("matched_skills") or []) or "none"
        print(f"   Matched: {matched}")
        print(f"   {row.get('explanation', '')}")
        print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skillmatch", description="Skill-based job matching")
    parser.add_argument("--config", help="YAML config file (default: $SKILLMATCH_CONFIG)")
    parser.add_argument("--log-level", dest="log_level", help="DEBUG, INFO, WARNING or ERROR")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Convert a document (pdf, docx, txt) to text")
    parse_cmd.add_argument("--file", required=True, help="Path to the document")
    parse_cmd.add_argument("--out", help="Output text path (default: stdout)")
    parse_cmd.set_defaults(func=cmd_parse)

    skills_cmd = subparsers.add_parser("skills", help="List the skills found in a text")
    source = skills_cmd.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to scan")
    source.add_argument("--file", help="Document to scan")
    skills_cmd.set_defaults(func=cmd_skills)

    match_cmd = subparsers.add_parser("match", help="Match a candidate against jobs")
    match_cmd.add_argument("--request", required=True, help="Path to match request JSON")
    match_cmd.add_argument("--resume", help="Résumé document replacing candidate.raw_text")
    match_cmd.add_argument("--topk", type=int, help="Maximum number of matches to output")
    match_cmd.add_argument("--workers", type=int, help="Scoring threads (default from config)")
    match_cmd.add_argument("--out", help="Output JSON path (default: stdout)")
    match_cmd.set_defaults(func=cmd_match)

    report_cmd = subparsers.add_parser("report", help="Generate a text report from matches JSON")
    report_cmd.add_argument("--matches", required=True, help="Path to matches JSON")
    report_cmd.add_argument("--limit", type=int, default=20, help="Number of top matches to display")
    report_cmd.set_defaults(func=cmd_report)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args.config)
        configure_logging(resolve_log_level(args.log_level, settings))
        args.func(args, settings)
    except (ValidationError, ConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ExtractionFailure as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
