# tests/core/workspace/test_scoped_model.py
"""
Testes do `ScopedConfigurationModel` (domínios standalone).

Os testes asseguram que:
- `contents` tem exatamente uma chave de topo, igual ao escopo
- `keys` permanece sem prefixo
- `update` reencapsula o novo conteúdo
- conteúdo malformado preserva o encapsulamento
"""

import pytest

from atlas_settings.core.errors import InvalidScopeError
from atlas_settings.core.workspace.scoped import ScopedConfigurationModel


def test_contents_are_namespaced_under_scope():
    """
    Verifica o encapsulamento do conteúdo sob a tag de escopo.

    Invariantes:
        - `contents == {scope: <árvore>}`
        - `keys` lista as chaves do conteúdo, sem prefixo
    """
    model = ScopedConfigurationModel(content='{"a":1}', name="tasks", scope="tasks")
    assert model.contents == {"tasks": {"a": 1}}
    assert model.keys == ["a"]
    assert model.scope == "tasks"


def test_update_rewraps_new_content(tasks_json):
    model = ScopedConfigurationModel('{"a": 1}', "tasks.json", "tasks")
    model.update(tasks_json)
    assert list(model.contents) == ["tasks"]
    assert model.get_value("tasks.version") == "2.0.0"
    assert model.keys == ["version", "tasks"]


def test_malformed_content_keeps_single_top_level_key():
    model = ScopedConfigurationModel("{oops", "launch.json", "launch")
    assert model.contents == {"launch": {}}
    assert model.keys == []
    assert len(model.diagnostics.of_kind("parse_error")) == 1


def test_none_content_is_empty_namespaced_model():
    assert ScopedConfigurationModel(None, "tasks.json", "tasks").contents == {"tasks": {}}


def test_no_admission_filtering():
    model = ScopedConfigurationModel('{"terminal.external.exec": "xterm"}', "tasks.json", "tasks")
    assert model.get_value("tasks.terminal.external.exec") == "xterm"
    assert model.rejected_keys == []


@pytest.mark.parametrize("scope", ["", "   ", None])
def test_blank_scope_is_rejected(scope):
    with pytest.raises(InvalidScopeError):
        ScopedConfigurationModel("{}", "x.json", scope)


def test_yaml_non_string_top_level_key_degrades_to_empty_namespace():
    model = ScopedConfigurationModel("true: x\n", "tasks.yaml", "tasks", fmt="yaml")
    assert model.contents == {"tasks": {}}
    assert model.keys == []
    assert len(model.diagnostics.of_kind("parse_error")) == 1


def test_yaml_override_with_non_string_keys_is_ignored():
    model = ScopedConfigurationModel('"[js]":\n  1: x\nversion: 1\n', "tasks.yaml", "tasks", fmt="yaml")
    assert model.contents == {"tasks": {"version": 1}}
    assert model.overrides == []
    assert len(model.diagnostics.of_kind("invalid_override")) == 1
