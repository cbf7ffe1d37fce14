"""Load statlab configuration from pyproject.toml and optional .statlab.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class StatlabConfig:
    """Runtime configuration for statlab."""

    # Accepted values are clamped into [min_value, max_value]
    min_value: float = -1000
    max_value: float = 1000
    # Maximum number of values a dataset may hold
    max_points: int = 50

    # Challenges are only offered once the dataset has this many values
    min_challenge_points: int = 3

    # Seed for the sample generators; None draws fresh entropy
    seed: Optional[int] = None

    # Level name passed to logging.basicConfig by the CLI
    log_level: str = "WARNING"


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}


def _apply(cfg: StatlabConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys."""
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key in valid:
            setattr(cfg, key, val)
        else:
            logger.debug("unknown config key %r ignored", key)


def load_config(project_root: Optional[Path] = None) -> StatlabConfig:
    """Load config from pyproject.toml [tool.statlab], then .statlab.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = StatlabConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("statlab", {}))
    local = _read_toml(project_root / ".statlab.toml")
    _apply(cfg, local)
    return cfg
