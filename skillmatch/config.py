"""
Host configuration for skillmatch.

The scoring core takes all of its parameters as explicit arguments.
This module is used by hosts such as the CLI to read those parameters
from an optional YAML file:

    scoring:
      weights: {skill: 0.60, experience: 0.25, other: 0.15}
    match:
      top_k: null
      max_workers: 4
    logging:
      level: INFO

The file path is taken from the caller or from ``SKILLMATCH_CONFIG``;
a ``.env`` file in the working directory is loaded first so either
variable can live there.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from .errors import ConfigError, ValidationError
from .normalize.schema import validate_top_k
from .rank.aggregate import ScoringConfig

logger = logging.getLogger(__name__)

KNOWN_SECTIONS = ("scoring", "match", "logging")
LOG_FORMAT = "[%(levelname)s] %(message)s"


@dataclass
class Settings:
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    top_k: Optional[int] = None
    max_workers: int = 4
    log_level: str = "INFO"


def _section(config: Dict[str, Any], name: str, path: str) -> Dict[str, Any]:
    value = config.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"section {name!r} must be a mapping", path)
    return value


def _parse_settings(config: Dict[str, Any], path: str) -> Settings:
    unknown = [s for s in config if s not in KNOWN_SECTIONS]
    if unknown:
        logger.warning("Ignoring unknown configuration sections: %s", ", ".join(unknown))

    settings = Settings()

    scoring = _section(config, "scoring", path)
    weights = scoring.get("weights")
    if weights is not None:
        if not isinstance(weights, dict):
            raise ConfigError("scoring.weights must be a mapping", path)
        settings.scoring = ScoringConfig(weights=dict(weights))

    match = _section(config, "match", path)
    try:
        settings.top_k = validate_top_k(match.get("top_k"))
    except ValidationError as exc:
        raise ConfigError(f"match.top_k {exc.message}", path) from exc
    max_workers = match.get("max_workers", settings.max_workers)
    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
        raise ConfigError("match.max_workers must be a positive integer", path)
    settings.max_workers = max_workers

    log_section = _section(config, "logging", path)
    settings.log_level = str(log_section.get("level", settings.log_level)).upper()
    return settings


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from YAML, falling back to defaults.

    Args:
        path: Explicit config path.  When omitted ``SKILLMATCH_CONFIG`` is
            consulted; if neither is set the defaults are returned.

    Raises:
        ConfigError: If the file is missing, is not valid YAML or holds
            invalid values.
    """
    load_dotenv(dotenv_path=Path.cwd() / ".env")
    path = path or os.getenv("SKILLMATCH_CONFIG")
    if not path:
        return Settings()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError("configuration file not found", str(config_path))
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML ({exc})", str(config_path)) from exc
    if not isinstance(config, dict):
        raise ConfigError("top level must be a mapping", str(config_path))

    settings = _parse_settings(config, str(config_path))
    logger.info("Loaded configuration from %s", config_path)
    return settings


def resolve_log_level(cli_level: Optional[str], settings: Settings) -> str:
    """Command line flag, then ``SKILLMATCH_LOG_LEVEL``, then the config file."""
    return (cli_level or os.getenv("SKILLMATCH_LOG_LEVEL") or settings.log_level).upper()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
