from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    retry_invalid: bool = False
    log_level: int = logging.WARNING


def load_settings(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> Settings:
    """Resolve settings: CLI flags first, then environment, then defaults."""
    env = os.environ if environ is None else environ

    retry_invalid = bool(getattr(args, "retry_invalid", False))
    if not retry_invalid:
        retry_invalid = env.get("RPS_RETRY_INVALID", "").strip().lower() in _TRUTHY

    if getattr(args, "verbose", False):
        log_level = logging.DEBUG
    else:
        log_level = _parse_level(env.get("RPS_LOG_LEVEL", ""))

    return Settings(retry_invalid=retry_invalid, log_level=log_level)


def _parse_level(raw: str) -> int:
    name = raw.strip().upper()
    if not name:
        return logging.WARNING
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"RPS_LOG_LEVEL must be a logging level name, got {raw!r}")
    return level
