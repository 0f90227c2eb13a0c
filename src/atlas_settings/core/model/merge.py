# src/atlas_settings/core/model/merge.py
"""
Utilitário canônico de deep-merge de modelos de configuração.

Este módulo implementa a política oficial de merge utilizada pelo
Atlas Settings para consolidar as camadas de uma pasta do workspace
(settings da pasta + domínios standalone como `tasks` e `launch`).

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total (sem merge elemento a elemento)
    - escalar     → sobrescrita direta
    - tipos mistos → o valor da fonte substitui o do alvo

Overrides:
    - São concatenados (entradas da fonte após as do alvo)
    - Não há deduplicação nem merge por seletor nesta camada
    - A ordem da lista é o critério de desempate do resolvedor externo

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves não sobrescritas são preservadas
    - A camada mesclada por último vence em colisões

Limites explícitos:
    - Não valida semântica de domínio
    - Não decide o valor efetivo entre camadas user/workspace/folder
"""

from copy import deepcopy
from typing import Any, Dict, List, Sequence, TypeVar

T = TypeVar("T")


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre duas árvores de valores.

    Args:
        base (Dict[str, Any]): Árvore alvo (camada de menor precedência).
        override (Dict[str, Any]): Árvore fonte (camada de maior precedência).

    Returns:
        Dict[str, Any]: Nova árvore resultante do deep-merge.
    """

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        base_value = result.get(key)

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list, escalar ou tipos mistos -> sobrescrita total
        result[key] = deepcopy(override_value)

    return result


def concat_overrides(target: Sequence[T], source: Sequence[T]) -> List[T]:
    return [*target, *source]


def union_keys(target: Sequence[str], source: Sequence[str]) -> List[str]:
    keys = list(target)
    seen = set(keys)
    for key in source:
        if key not in seen:
            seen.add(key)
            keys.append(key)
    return keys
