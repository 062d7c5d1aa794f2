"""Intrusive singly linked list.

The list never allocates, copies or frees nodes. Callers own every ``Node``
and its payload; the ``Handler`` only rewires ``next`` references, comparing
nodes by identity.

Safe to import from anywhere: no side effects at import time.
"""

from sl_list.config import HandlerConfig, make_diagnostics
from sl_list.diagnostics import (
    DiagnosticKind,
    Diagnostics,
    EventDiagnostics,
    LoggingDiagnostics,
    NullDiagnostics,
    RecordingDiagnostics,
)
from sl_list.event_log import JsonlDiagnostics
from sl_list.handler import Handler
from sl_list.node import Node

__all__ = [
    "DiagnosticKind",
    "Diagnostics",
    "EventDiagnostics",
    "Handler",
    "HandlerConfig",
    "JsonlDiagnostics",
    "LoggingDiagnostics",
    "Node",
    "NullDiagnostics",
    "RecordingDiagnostics",
    "make_diagnostics",
]
