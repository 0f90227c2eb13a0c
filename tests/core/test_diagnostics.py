# tests/core/test_diagnostics.py
"""
Testes de logging estruturado do `DiagnosticLog`.

Os testes asseguram que:
- eventos são registrados de forma estruturada e incremental
- campos adicionais são preservados sem perda
- eventos WARNING também são agregados em `warnings`
"""

from atlas_settings.core.diagnostics import DiagnosticLog


def test_structured_log_event():
    log = DiagnosticLog(source="settings.json")
    log.log(level="INFO", message="hello", foo=1)
    assert len(log.events) == 1
    ev = log.events[-1]
    assert ev["source"] == "settings.json"
    assert ev["level"] == "INFO"
    assert ev["message"] == "hello"
    assert ev["foo"] == 1
    assert "timestamp" in ev


def test_level_helpers_and_warning_collection():
    log = DiagnosticLog()
    log.info("i")
    log.warning("w", kind="key_conflict")
    log.error("e", kind="parse_error")
    assert [ev["level"] for ev in log.events] == ["INFO", "WARNING", "ERROR"]
    assert log.warnings == ["w"]
    assert [ev["message"] for ev in log.of_kind("parse_error")] == ["e"]


def test_clear():
    log = DiagnosticLog()
    log.warning("w")
    log.clear()
    assert log.events == []
    assert log.warnings == []
