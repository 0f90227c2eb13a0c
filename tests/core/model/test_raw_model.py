# tests/core/model/test_raw_model.py
"""
Testes do `RawConfigurationModel`.

Os testes asseguram que:
- o construtor entrega um modelo completamente construído
- `update` substitui integralmente o estado anterior
- conteúdo malformado degrada para modelo vazio com diagnóstico
- `reprocess` reaplica a estratégia sem novo parse
- a estratégia injetada é de fato usada
"""

from atlas_settings.core.diagnostics import DiagnosticLog
from atlas_settings.core.model.processors import NamespaceProcessor, PassThroughProcessor, ProcessedRaw
from atlas_settings.core.model.raw import RawConfigurationModel
from atlas_settings.core.model.types import ConfigurationModel, OverrideEntry


def test_constructor_builds_model():
    model = RawConfigurationModel('{"a.b": 1, "[js]": {"a.b": 2}}', "settings.json")
    assert model.contents == {"a": {"b": 1}}
    assert model.overrides == [OverrideEntry("[js]", {"a": {"b": 2}})]
    assert model.keys == ["a.b", "[js]"]
    assert model.raw == {"a.b": 1, "[js]": {"a.b": 2}}
    assert isinstance(model.processor, PassThroughProcessor)


def test_without_content_model_is_empty():
    model = RawConfigurationModel(name="empty")
    assert model.contents == {}
    assert model.overrides == []
    assert model.keys == []
    assert model.diagnostics.source == "empty"


def test_update_fully_replaces_previous_state():
    model = RawConfigurationModel('{"a": 1, "[js]": {"b": 1}}')
    model.update('{"c": 3}')
    assert model.contents == {"c": 3}
    assert model.overrides == []
    assert model.keys == ["c"]


def test_malformed_content_falls_back_to_empty_model():
    model = RawConfigurationModel('{"a": 1}', "settings.json")
    model.update("{not json")
    assert model.contents == {}
    assert model.keys == []
    assert len(model.diagnostics.of_kind("parse_error")) == 1


def test_yaml_format():
    model = RawConfigurationModel("a.b: 1\n", fmt="yaml")
    assert model.get_value("a.b") == 1


def test_injected_diagnostics_receive_events():
    log = DiagnosticLog(source="shared")
    RawConfigurationModel('{"a": 1, "a.b": 2}', "x", diagnostics=log)
    assert len(log.of_kind("key_conflict")) == 1


class _CountingProcessor:
    def __init__(self):
        self.calls = []

    def process(self, raw, diagnostics):
        self.calls.append(dict(raw))
        return ProcessedRaw(model=ConfigurationModel(contents=dict(raw), keys=list(raw)))


def test_reprocess_reuses_snapshot_without_parsing():
    processor = _CountingProcessor()
    model = RawConfigurationModel('{"a": 1}', processor=processor)
    model.reprocess()
    assert processor.calls == [{"a": 1}, {"a": 1}]
    assert model.diagnostics.of_kind("parse_error") == []


def test_raw_accessor_returns_a_copy():
    model = RawConfigurationModel('{"a": 1}', processor=NamespaceProcessor("tasks"))
    model.raw["b"] = 2
    assert model.raw == {"a": 1}
    assert model.contents == {"tasks": {"a": 1}}
