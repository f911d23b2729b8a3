from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigurationError

REPOS_DIR_VAR = "BSV_REPOS_DIR"
BRCS_REPO_VAR = "BSV_BRCS_REPO"
TIMEOUT_VAR = "BSV_SEARCH_TIMEOUT"
LOG_LEVEL_VAR = "BSV_MCP_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    repos_dir: Path
    brcs_repo: str = "BRCs"
    search_timeout_s: float = 30.0
    log_level: str = "INFO"

    @property
    def brcs_dir(self) -> Path:
        return self.repos_dir / self.brcs_repo


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the process environment (or a given mapping).

    Raises ConfigurationError when BSV_REPOS_DIR is unset or does not point
    to an existing directory, or when the timeout is not a positive number.
    """
    env = os.environ if environ is None else environ

    raw = env.get(REPOS_DIR_VAR, "").strip()
    if not raw or not Path(raw).is_dir():
        raise ConfigurationError(
            f"{REPOS_DIR_VAR} environment variable is not set or points to a "
            f"non-existent directory. Please set {REPOS_DIR_VAR} to the absolute "
            f"path containing the cloned BSV repositories. Current value: {raw or None}"
        )

    timeout_raw = env.get(TIMEOUT_VAR, "30")
    try:
        timeout_s = float(timeout_raw)
    except ValueError:
        raise ConfigurationError(f"{TIMEOUT_VAR} must be a number of seconds, got {timeout_raw!r}")
    if timeout_s <= 0:
        raise ConfigurationError(f"{TIMEOUT_VAR} must be positive, got {timeout_raw!r}")

    return Settings(
        repos_dir=Path(raw).resolve(),
        brcs_repo=env.get(BRCS_REPO_VAR, "BRCs") or "BRCs",
        search_timeout_s=timeout_s,
        log_level=(env.get(LOG_LEVEL_VAR) or "INFO").upper(),
    )
