"""JSONL file sink for handler diagnostics.

Each diagnostic becomes one JSON object on its own line, stamped with
``ts_utc``. Writes are flushed and fsynced; reads skip anything that is not a
complete JSON object, so a torn last line after a crash is harmless.
"""

from __future__ import annotations

import json
import os
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Iterator

from sl_list.diagnostics import DiagnosticKind, make_event


def append_event(path: Path, event: dict[str, Any]) -> None:
    """Write ``event`` as one line at the end of ``path``.

    Event values are str/int/None; anything else is written via ``str``.
    Raises OSError when the file cannot be written.
    """

    record = {"ts_utc": datetime.now(timezone.utc).isoformat(), **event}
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("a", encoding="utf-8", newline="\n") as f:
        f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
        f.flush()
        try:
            os.fsync(f.fileno())
        except OSError:
            # Some filesystems do not support fsync.
            pass


def _iter_records(path: Path) -> Iterator[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(obj, dict):
                yield obj


def read_events(path: Path, *, max_events: int | None = None) -> list[dict[str, Any]]:
    """Return the events stored in ``path``, oldest first.

    With ``max_events`` only the most recent ones are kept. A missing file
    reads as empty.
    """

    if not path.exists():
        return []
    return list(deque(_iter_records(path), maxlen=max_events))


def latest_event(events: Iterable[dict[str, Any]], kind: DiagnosticKind | str) -> dict[str, Any] | None:
    wanted = kind.value if isinstance(kind, DiagnosticKind) else kind
    for e in reversed(list(events)):
        if e.get("type") == wanted:
            return e
    return None


class JsonlDiagnostics:
    """``Diagnostics`` sink that appends every event to a JSONL file.

    Best effort: a failed write is counted in ``dropped`` and otherwise
    ignored, so list operations never see an I/O error.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.dropped = 0

    def _write(self, event: dict[str, Any]) -> None:
        try:
            append_event(self.path, event)
        except OSError:
            # Logging must never interrupt a list operation.
            self.dropped += 1

    def info(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._write(make_event("info", kind, message, fields))

    def warn(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._write(make_event("warn", kind, message, fields))

    def error(self, kind: DiagnosticKind, message: str, **fields: Any) -> None:
        self._write(make_event("error", kind, message, fields))
