from __future__ import annotations

from pathlib import Path

import pytest

from sl_list.config import HandlerConfig, make_diagnostics
from sl_list.diagnostics import LoggingDiagnostics, NullDiagnostics
from sl_list.event_log import JsonlDiagnostics
from sl_list.handler import Handler


def test_config_defaults() -> None:
    cfg = HandlerConfig()

    assert cfg.diagnostics == "null"
    assert cfg.logger_name == "sl_list"
    assert cfg.log_path is None
    assert cfg.debug is False
    assert isinstance(make_diagnostics(cfg), NullDiagnostics)


def test_config_respects_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SL_LIST_DIAGNOSTICS", "jsonl")
    monkeypatch.setenv("SL_LIST_LOG_PATH", str(tmp_path / "d.jsonl"))
    monkeypatch.setenv("SL_LIST_LOGGER", "custom")
    monkeypatch.setenv("SL_LIST_DEBUG", "yes")

    cfg = HandlerConfig()

    assert cfg.diagnostics == "jsonl"
    assert cfg.logger_name == "custom"
    assert cfg.debug is True
    sink = make_diagnostics(cfg)
    assert isinstance(sink, JsonlDiagnostics)
    assert sink.path == tmp_path / "d.jsonl"


def test_logging_backend_uses_logger_name() -> None:
    sink = make_diagnostics(HandlerConfig(diagnostics="Logging", logger_name="sl_list.x"))

    assert isinstance(sink, LoggingDiagnostics)
    assert sink.logger.name == "sl_list.x"


def test_unknown_backend_raises() -> None:
    with pytest.raises(ValueError, match="Unknown diagnostics backend"):
        make_diagnostics(HandlerConfig(diagnostics="syslog"))


def test_jsonl_without_path_raises() -> None:
    with pytest.raises(ValueError, match="log_path"):
        Handler(config=HandlerConfig(diagnostics="jsonl", log_path=None))


def test_handler_builds_sink_from_config() -> None:
    h: Handler = Handler(config=HandlerConfig(diagnostics="logging"))
    assert isinstance(h.diagnostics, LoggingDiagnostics)

    explicit = NullDiagnostics()
    h2: Handler = Handler(explicit, config=HandlerConfig(diagnostics="logging"))
    assert h2.diagnostics is explicit
