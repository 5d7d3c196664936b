"""Configuration management for locstack."""
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "LOCSTACK_"


def default_snapshot_dir() -> str:
    return str(Path.home() / ".local" / "locstack")


def _env_flag(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class LocstackConfig:
    snapshot_dir: str
    seed_last: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LocstackConfig":
        """Load configuration from ``LOCSTACK_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            snapshot_dir=env.get(f"{ENV_PREFIX}SNAPSHOT_DIR") or default_snapshot_dir(),
            seed_last=_env_flag(env.get(f"{ENV_PREFIX}SEED_LAST"), True),
            log_level=(env.get(f"{ENV_PREFIX}LOG_LEVEL") or "WARNING").upper(),
        )

    def with_overrides(self, snapshot_dir: Optional[str] = None,
                       log_level: Optional[str] = None) -> "LocstackConfig":
        """Apply command line overrides on top of the environment values."""
        changes = {}
        if snapshot_dir:
            changes["snapshot_dir"] = snapshot_dir
        if log_level:
            changes["log_level"] = log_level.upper()
        return replace(self, **changes)
