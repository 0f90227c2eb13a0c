# src/atlas_settings/core/model/types.py
"""
Tipos canônicos dos modelos de configuração do Atlas Settings.

Componentes principais:
    - OverrideEntry      → sub-árvore aplicada condicionalmente a um seletor
    - ConfigurationModel → valor imutável (contents, keys, overrides)

O `ConfigurationModel` é o formato de troca entre as camadas deste
pacote e o resolvedor multi-camada externo, que combina o modelo
consolidado de cada pasta com as camadas application/user/workspace.

Decisões arquiteturais:
    - Modelos são valores: operações retornam novos modelos
    - A ordem de `overrides` codifica ordem de declaração, não precedência
    - `keys` lista as chaves de topo do mapa bruto, incluindo seletores

Invariantes:
    - Uma instância nunca é alterada após criada
    - `merge` e `override` não mutam nenhum dos modelos envolvidos

Limites explícitos:
    - Não faz parse de conteúdo textual
    - Não aplica filtragem por schema
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .merge import concat_overrides, deep_merge, union_keys
from .tree import get_value_by_path, is_override_key


@dataclass(frozen=True)
class OverrideEntry:
    """
    Entrada de override associada a um seletor (ex.: `[js]`).

    Campos:
        - selector: chave de topo entre colchetes, exatamente como declarada
        - contents: árvore de valores aplicada quando o seletor casa
    """
    selector: str
    contents: Dict[str, Any] = field(default_factory=dict)

    @property
    def identifier(self) -> str:
        if is_override_key(self.selector):
            return self.selector[1:-1].strip()
        return self.selector

    def matches(self, identifier: str) -> bool:
        return identifier in (self.selector, self.identifier)

    def to_dict(self) -> Dict[str, Any]:
        return {"selector": self.selector, "contents": deepcopy(self.contents)}


@dataclass(frozen=True)
class ConfigurationModel:
    """
    Resultado imutável da construção (ou consolidação) de uma camada.

    Campos:
        - contents: árvore de valores, sem as chaves de seletor
        - keys: chaves de topo do mapa bruto, em ordem de declaração
        - overrides: entradas de override, em ordem de declaração

    O congelamento é raso: `contents` e `overrides` são compartilhados com
    quem consulta o modelo e não devem ser mutados. Operações derivadas
    (`override`, `merge`) sempre produzem cópias.
    """
    contents: Dict[str, Any] = field(default_factory=dict)
    keys: List[str] = field(default_factory=list)
    overrides: List[OverrideEntry] = field(default_factory=list)

    def get_value(self, section: Optional[str] = None) -> Any:
        return get_value_by_path(self.contents, section)

    def get_override_contents(self, identifier: str) -> Optional[Dict[str, Any]]:
        matching = [entry for entry in self.overrides if entry.matches(identifier)]
        if not matching:
            return None
        merged: Dict[str, Any] = {}
        for entry in matching:
            merged = deep_merge(merged, entry.contents)
        return merged

    def override(self, identifier: str) -> "ConfigurationModel":
        """
        Retorna um novo modelo com os overrides de `identifier` aplicados.

        `identifier` pode ser o seletor completo (`[js]`) ou apenas o
        identificador (`js`). Entradas são aplicadas na ordem da lista,
        de modo que a última declarada vence.
        """
        override_contents = self.get_override_contents(identifier)
        if override_contents is None:
            return self
        return ConfigurationModel(
            contents=deep_merge(self.contents, override_contents),
            keys=list(self.keys),
            overrides=list(self.overrides),
        )

    def merge(self, *others: "ConfigurationModel") -> "ConfigurationModel":
        contents = self.contents
        keys = list(self.keys)
        overrides = list(self.overrides)
        for other in others:
            contents = deep_merge(contents, other.contents)
            keys = union_keys(keys, other.keys)
            overrides = concat_overrides(overrides, other.overrides)
        return ConfigurationModel(contents=deepcopy(contents), keys=keys, overrides=overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contents": deepcopy(self.contents),
            "keys": list(self.keys),
            "overrides": [entry.to_dict() for entry in self.overrides],
        }
