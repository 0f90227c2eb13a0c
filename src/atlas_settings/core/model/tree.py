# src/atlas_settings/core/model/tree.py
"""
Árvore de valores de configuração.

Este módulo converte mapas planos de chaves pontuadas
(`{"editor.font.size": 12}`) em árvores hierárquicas
(`{"editor": {"font": {"size": 12}}}`) e oferece leitura por caminho.

Política de conflito (v1):
    - A última chave declarada vence
    - Um escalar no meio do caminho é substituído por um nó
    - Um nó existente na folha é substituído pelo valor declarado
    - Todo conflito é reportado, nunca levantado

Chaves de override:
    - Chaves de topo entre colchetes (`[js]`) são seletores de override
    - A extração para `overrides` é responsabilidade de `processors`

Invariantes:
    - Valores inseridos são copiados (a entrada nunca é mutada)
    - A ordem de inserção das chaves é preservada
"""

from __future__ import annotations

import json
import re
from copy import deepcopy
from typing import Any, Callable, Dict, Mapping, Optional

OVERRIDE_PROPERTY_PATTERN = re.compile(r"^\[.*\]$")

ConflictReporter = Callable[[str], None]


def is_override_key(key: Any) -> bool:
    return isinstance(key, str) and bool(OVERRIDE_PROPERTY_PATTERN.match(key))


def _describe(value: Any) -> str:
    return json.dumps(value, default=str, ensure_ascii=False)


def add_to_value_tree(
    root: Dict[str, Any],
    key: str,
    value: Any,
    report: Optional[ConflictReporter] = None,
) -> None:
    """
    Insere `value` em `root` no caminho descrito pela chave pontuada `key`.

    Conflitos de caminho seguem a regra "última chave declarada vence" e
    são reportados via `report` quando fornecido.
    """
    segments = key.split(".")
    last = segments.pop()
    curr = root
    for i, segment in enumerate(segments):
        if segment not in curr:
            curr[segment] = {}
        elif not isinstance(curr[segment], dict):
            if report is not None:
                path = ".".join(segments[: i + 1])
                report(f"Replacing {path} ({_describe(curr[segment])}) to set {key}")
            curr[segment] = {}
        curr = curr[segment]

    if last in curr and report is not None:
        report(f"Overriding {key} ({_describe(curr[last])}) with a later declaration")
    curr[last] = deepcopy(value)


def to_values_tree(
    properties: Mapping[str, Any],
    report: Optional[ConflictReporter] = None,
) -> Dict[str, Any]:
    root: Dict[str, Any] = {}
    for key, value in properties.items():
        add_to_value_tree(root, key, value, report)
    return root


def get_value_by_path(tree: Mapping[str, Any], section: Optional[str] = None) -> Any:
    """
    Lê um valor da árvore pelo caminho pontuado `section`.

    Retorna a árvore inteira quando `section` é None, e None quando
    qualquer segmento do caminho não existe.
    """
    if section is None:
        return tree

    curr: Any = tree
    for segment in section.split("."):
        if not isinstance(curr, Mapping) or segment not in curr:
            return None
        curr = curr[segment]
    return curr
