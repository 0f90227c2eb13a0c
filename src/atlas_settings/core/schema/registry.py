# src/atlas_settings/core/schema/registry.py
"""
Registro de schemas de propriedades de configuração.

Este módulo define o contrato `SchemaProvider`, consultado pelos modelos
de configuração para decidir admissão (chaves executáveis) e projeção por
escopo (WORKSPACE / FOLDER), e o `ConfigurationSchemaRegistry`, a
implementação em memória desse contrato.

Decisões arquiteturais:
    - O provider é injetado no construtor dos modelos, nunca global
    - Modelos apenas consultam o provider, nunca o mutam
    - Mudanças no provider não são detectadas automaticamente: o
      chamador invoca `reprocess()` / `update()` nos modelos afetados
    - Chaves sem schema recebem `DEFAULT_PROPERTY_SCHEMA`

Invariantes:
    - Cada chave possui no máximo um schema registrado
    - A lista de chaves reflete exatamente a ordem de registro

Limites explícitos:
    - Não popula schemas a partir de extensões/plugins
    - Não valida valores de configuração contra o schema
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from ..errors import DuplicateSchemaKeyError, InvalidScopeError


class ConfigurationScope(str, Enum):
    """
    Escopos canônicos de uma propriedade de configuração.

    O escopo restringe qual camada de configuração pode definir a chave.
    Os valores são strings para facilitar a declaração em arquivos de
    schema (YAML/JSON).

    Escopos definidos:
        - APPLICATION: apenas na camada de aplicação
        - WINDOW: por janela (user/workspace)
        - WORKSPACE: no workspace, padrão de chaves sem schema
        - FOLDER: por pasta do workspace
        - LANGUAGE_OVERRIDABLE: por pasta e sobrescrevível por seletor
    """
    APPLICATION = "application"
    WINDOW = "window"
    WORKSPACE = "workspace"
    FOLDER = "folder"
    LANGUAGE_OVERRIDABLE = "language-overridable"

    @classmethod
    def parse(cls, value: Any) -> "ConfigurationScope":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        for scope in cls:
            if scope.value == normalized:
                return scope
        raise InvalidScopeError(f"Escopo de configuração desconhecido: {value!r}")


@dataclass(frozen=True)
class PropertySchema:
    """Schema de uma chave: escopo e se pode disparar execução externa."""
    scope: ConfigurationScope = ConfigurationScope.WORKSPACE
    is_executable: bool = False


DEFAULT_PROPERTY_SCHEMA = PropertySchema()


@runtime_checkable
class SchemaProvider(Protocol):
    """
    Contrato mínimo de consulta de schemas.

    Qualquer objeto com `lookup(key)` pode ser injetado nos modelos,
    o que permite testes determinísticos com schemas fixos.
    """

    def lookup(self, key: str) -> Optional[PropertySchema]:
        """Retorna o schema de `key`, ou None quando não registrado."""
        ...


def resolve_schema(provider: SchemaProvider, key: str) -> PropertySchema:
    schema = provider.lookup(key)
    return schema if schema is not None else DEFAULT_PROPERTY_SCHEMA


@dataclass
class ConfigurationSchemaRegistry:
    """
    Registro em memória de schemas de propriedades.

    Decisões arquiteturais:
        - Registrar uma chave duplicada é erro, salvo `replace=True`
        - A ordem de inserção é preservada separadamente

    Limites explícitos:
        - Não notifica modelos sobre mudanças
    """

    _schemas: Dict[str, PropertySchema] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def register(self, key: str, schema: PropertySchema, *, replace: bool = False) -> None:
        if not isinstance(key, str) or not key.strip():
            raise ValueError("schema key must be a non-empty string")

        if key in self._schemas:
            if not replace:
                raise DuplicateSchemaKeyError(f"Duplicate schema key: {key}")
        else:
            self._order.append(key)

        self._schemas[key] = schema

    def register_many(self, schemas: Mapping[str, PropertySchema], *, replace: bool = False) -> None:
        for key, schema in schemas.items():
            self.register(key, schema, replace=replace)

    def deregister(self, key: str) -> None:
        if self._schemas.pop(key, None) is not None:
            self._order.remove(key)

    def lookup(self, key: str) -> Optional[PropertySchema]:
        return self._schemas.get(key)

    def keys(self) -> List[str]:
        return list(self._order)

    def __contains__(self, key: object) -> bool:
        return key in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)
