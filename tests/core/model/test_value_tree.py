# tests/core/model/test_value_tree.py
"""
Testes da construção de árvores de valores a partir de chaves pontuadas.

Os testes asseguram que:
- chaves pontuadas são expandidas em níveis hierárquicos
- conflitos de caminho seguem "última chave declarada vence"
- todo conflito é reportado, nunca levantado
- o mapa de entrada não é mutado
"""

import pytest

try:
    from atlas_settings.core.model.tree import (
        get_value_by_path,
        is_override_key,
        to_values_tree,
    )
except Exception as e:  # noqa: BLE001
    to_values_tree = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing value tree module. Implement:\n"
            "- src/atlas_settings/core/model/tree.py (to_values_tree, get_value_by_path)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_dotted_keys_become_nested_levels():
    _require_imports()
    tree = to_values_tree({"editor.font.size": 12, "editor.font.family": "Mono", "x": 1})
    assert tree == {"editor": {"font": {"size": 12, "family": "Mono"}}, "x": 1}


def test_scalar_in_path_is_replaced_by_later_nested_key():
    """
    Verifica a regra "última chave declarada vence" quando um escalar
    bloqueia o caminho de uma chave declarada depois.

    Invariantes:
        - O escalar anterior é descartado
        - Exatamente um conflito é reportado
    """
    _require_imports()
    conflicts = []
    tree = to_values_tree({"a.b": 1, "a.b.c": 2}, conflicts.append)
    assert tree == {"a": {"b": {"c": 2}}}
    assert len(conflicts) == 1
    assert "a.b.c" in conflicts[0]


def test_later_scalar_replaces_existing_subtree():
    _require_imports()
    conflicts = []
    tree = to_values_tree({"a.b.c": 2, "a.b": 1}, conflicts.append)
    assert tree == {"a": {"b": 1}}
    assert len(conflicts) == 1


def test_nested_object_and_dotted_key_are_combined_without_conflict():
    _require_imports()
    conflicts = []
    raw = {"a": {"x": 1}, "a.y": 2}
    tree = to_values_tree(raw, conflicts.append)
    assert tree == {"a": {"x": 1, "y": 2}}
    assert conflicts == []
    assert raw == {"a": {"x": 1}, "a.y": 2}


def test_conflicts_without_reporter_do_not_raise():
    _require_imports()
    assert to_values_tree({"a": 1, "a.b": 2}) == {"a": {"b": 2}}


def test_get_value_by_path():
    _require_imports()
    tree = {"editor": {"font": {"size": 12}}, "x": None}
    assert get_value_by_path(tree, "editor.font.size") == 12
    assert get_value_by_path(tree, "editor.font") == {"size": 12}
    assert get_value_by_path(tree, "editor.missing") is None
    assert get_value_by_path(tree, "editor.font.size.deeper") is None
    assert get_value_by_path(tree) is tree


@pytest.mark.parametrize(
    "key, expected",
    [("[js]", True), ("[ python ]", True), ("js", False), ("[js", False), ("a.[js]", False)],
)
def test_is_override_key(key, expected):
    _require_imports()
    assert is_override_key(key) is expected
