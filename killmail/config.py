from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple


DEFAULT_FW_FACTIONS = "Amarr Empire,Minmatar Republic,Caldari State,Gallente Federation"
DEFAULT_REWRITERS = "faction_alliance"


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_csv(name: str, default_csv: str = "") -> Tuple[str, ...]:
    raw = os.getenv(name, default_csv)
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    # keep order; passes run in the listed sequence
    return tuple(dict.fromkeys(parts))


def _get_log_level(name: str, default: str = "WARNING") -> str:
    raw = (os.getenv(name) or "").strip().upper()
    # unknown names ("VERBOSE") fall back rather than break logging.basicConfig
    if not raw or not isinstance(logging.getLevelName(raw), int):
        return default
    return raw


@dataclass(frozen=True)
class Settings:
    # Factional warfare factions that get misfiled as alliances
    fw_factions: Tuple[str, ...]

    # Rewriter passes applied by rewrite_killmail(), in order
    rewriters: Tuple[str, ...]

    # CLI
    selftest_enabled: bool
    log_level: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            fw_factions=_get_csv("KILLMAIL_FW_FACTIONS", DEFAULT_FW_FACTIONS),
            rewriters=_get_csv("KILLMAIL_REWRITERS", DEFAULT_REWRITERS),
            selftest_enabled=_get_bool("KILLMAIL_SELFTEST", True),
            log_level=_get_log_level("KILLMAIL_LOG_LEVEL", "WARNING"),
        )
