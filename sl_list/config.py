from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from sl_list.diagnostics import Diagnostics, LoggingDiagnostics, NullDiagnostics
from sl_list.event_log import JsonlDiagnostics

DIAGNOSTICS_BACKENDS = ("null", "logging", "jsonl")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class HandlerConfig:
    """Handler settings, overridable via environment variables.

    Defaults are read when the config is instantiated, not at import time.
    """

    # One of DIAGNOSTICS_BACKENDS.
    diagnostics: str = field(default_factory=lambda: os.getenv("SL_LIST_DIAGNOSTICS", "null"))
    logger_name: str = field(default_factory=lambda: os.getenv("SL_LIST_LOGGER", "sl_list"))
    # Target file for the "jsonl" backend.
    log_path: Optional[str] = field(default_factory=lambda: os.getenv("SL_LIST_LOG_PATH") or None)
    # Report caller contract violations on append (still appends).
    debug: bool = field(default_factory=lambda: _env_flag("SL_LIST_DEBUG"))


def make_diagnostics(config: HandlerConfig | None = None) -> Diagnostics:
    """Build the diagnostics sink selected by ``config``.

    Raises ValueError for an unknown backend, or for "jsonl" without a path.
    """

    cfg = config or HandlerConfig()
    backend = cfg.diagnostics.strip().lower()

    if backend == "null":
        return NullDiagnostics()
    if backend == "logging":
        return LoggingDiagnostics(name=cfg.logger_name)
    if backend == "jsonl":
        if not cfg.log_path:
            raise ValueError("jsonl diagnostics require log_path (or SL_LIST_LOG_PATH)")
        return JsonlDiagnostics(cfg.log_path)

    raise ValueError(
        f"Unknown diagnostics backend {cfg.diagnostics!r}; expected one of {', '.join(DIAGNOSTICS_BACKENDS)}"
    )
