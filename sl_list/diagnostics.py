"""Diagnostic sinks for the list handler.

The handler reports three kinds of events and never raises for them:
- info: a node was removed.
- warn: a predecessor lookup ran against an empty list.
- error: ``remove`` was asked for a node that is not in the chain.

Where those events go is up to the caller. The default sink drops them, which
keeps the handler silent in environments without a logging facility.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Protocol


class DiagnosticKind(str, Enum):
    """What happened.

    A string enum so events serialize cleanly into logs.
    """

    REMOVED = "removed"
    EMPTY_LIST_QUERY = "empty_list_query"
    NOT_FOUND = "not_found"
    CONTRACT_VIOLATION = "contract_violation"


class Diagnostics(Protocol):
    """Severity-leveled sink used by ``Handler``.

    ``fields`` carries structured context (usually ``node_id``).
    """

    def info(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        """Report a normal, successful operation."""

    def warn(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        """Report a non-fatal, suspicious condition."""

    def error(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        """Report a failed operation. The list is left unmodified."""


class NullDiagnostics:
    """Sink that discards everything."""

    def info(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        return None

    def warn(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        return None

    def error(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        return None


class LoggingDiagnostics:
    """Forward events to a stdlib ``logging.Logger``.

    Structured fields travel in ``extra`` under ``sl_list`` so formatters and
    handlers can pick them up without parsing the message.
    """

    def __init__(self, logger: logging.Logger | None = None, *, name: str = "sl_list") -> None:
        self.logger = logger or logging.getLogger(name)

    def _log(self, level: int, kind: DiagnosticKind, message: str, fields: Dict[str, Any]) -> None:
        self.logger.log(level, "%s: %s", kind.value, message, extra={"sl_list": {"kind": kind.value, **fields}})

    def info(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._log(logging.INFO, kind, message, fields)

    def warn(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, kind, message, fields)

    def error(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, kind, message, fields)


def make_event(level: str, kind: DiagnosticKind, message: str, fields: Dict[str, Any]) -> dict[str, Any]:
    """Build the event dict shared by callback and file sinks."""

    ev: dict[str, Any] = {"type": kind.value, "level": level, "message": message}
    ev.update(fields)
    return ev


class EventDiagnostics:
    """Hand each event, as a dict, to an injected ``log_fn``.

    Exceptions raised by ``log_fn`` are counted in ``dropped`` and not
    propagated.
    """

    def __init__(self, log_fn: Callable[[dict], None]) -> None:
        self.log_fn = log_fn
        self.dropped = 0

    def _emit(self, event: dict[str, Any]) -> None:
        try:
            self.log_fn(event)
        except Exception:
            # Logging must never interrupt a list operation.
            self.dropped += 1

    def info(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._emit(make_event("info", kind, message, fields))

    def warn(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._emit(make_event("warn", kind, message, fields))

    def error(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._emit(make_event("error", kind, message, fields))


@dataclass
class RecordingDiagnostics:
    """Keep events in memory, oldest first."""

    events: List[dict[str, Any]] = field(default_factory=list)

    def info(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self.events.append(make_event("info", kind, message, fields))

    def warn(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self.events.append(make_event("warn", kind, message, fields))

    def error(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self.events.append(make_event("error", kind, message, fields))

    def kinds(self) -> list[DiagnosticKind]:
        return [DiagnosticKind(e["type"]) for e in self.events]

    def clear(self) -> None:
        self.events.clear()
