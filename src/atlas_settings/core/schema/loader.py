# src/atlas_settings/core/schema/loader.py
"""
Loader canônico de schemas de configuração.

Este módulo carrega, a partir de um arquivo YAML ou JSON, as definições
de schema que alimentam um `ConfigurationSchemaRegistry`. É a forma
declarativa de fornecer um `SchemaProvider` fixo para o engine (ex.: em
ferramentas de linha de comando ou testes de integração).

Formato (v1):

    properties:
      terminal.external.exec:
        scope: window
        is_executable: true
      editor.tabSize:
        scope: language-overridable

Decisões arquiteturais:
    - O arquivo deve existir no momento do carregamento
    - O conteúdo raiz deve ser um dicionário (`dict`)
    - Arquivos vazios produzem um registry vazio
    - Entradas nulas recebem o schema padrão (WORKSPACE, não executável)
    - Erros estruturais são tratados como falhas fatais

Limites explícitos:
    - Não valida valores de configuração
    - Não observa o arquivo por mudanças
"""

from pathlib import Path
from typing import Any, Dict, Mapping

from ..errors import InvalidSchemaDefinitionError, SchemaFileNotFoundError
from ..model.parsing import format_for_suffix, load_text
from .registry import ConfigurationSchemaRegistry, ConfigurationScope, PropertySchema


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de schema e valida sua estrutura básica.

    Raises:
        SchemaFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        ContentParseError: Se o conteúdo for sintaticamente inválido.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise SchemaFileNotFoundError(f"Arquivo de schema não encontrado: {path}")

    fmt = format_for_suffix(path.suffix)

    with path.open("r", encoding="utf-8") as f:
        return load_text(f.read(), fmt)


def _property_schema(key: str, entry: Any) -> PropertySchema:
    if entry is None:
        return PropertySchema()

    if not isinstance(entry, Mapping):
        raise InvalidSchemaDefinitionError(
            f"Schema de '{key}' deve ser dict, recebido: {type(entry).__name__}"
        )

    is_executable = entry.get("is_executable", False)
    if not isinstance(is_executable, bool):
        raise InvalidSchemaDefinitionError(
            f"'is_executable' de '{key}' deve ser bool, recebido: {type(is_executable).__name__}"
        )

    scope = ConfigurationScope.parse(entry.get("scope", ConfigurationScope.WORKSPACE))
    return PropertySchema(scope=scope, is_executable=is_executable)


def schema_registry_from_dict(data: Mapping[str, Any]) -> ConfigurationSchemaRegistry:
    """
    Constrói um registry a partir de um mapa já carregado.

    Raises:
        InvalidSchemaDefinitionError: Se `properties` ou alguma entrada for inválida.
        InvalidScopeError: Se algum escopo declarado for desconhecido.
    """
    properties = data.get("properties") or {}
    if not isinstance(properties, Mapping):
        raise InvalidSchemaDefinitionError(
            f"'properties' deve ser dict, recebido: {type(properties).__name__}"
        )

    registry = ConfigurationSchemaRegistry()
    for key, entry in properties.items():
        registry.register(str(key), _property_schema(str(key), entry))
    return registry


def load_schema_registry(path: str) -> ConfigurationSchemaRegistry:
    """
    Carrega um arquivo de schema e retorna o registry correspondente.

    Args:
        path (str): Caminho para o arquivo `.yaml`, `.yml` ou `.json`.

    Returns:
        ConfigurationSchemaRegistry: Registry populado, na ordem do arquivo.
    """
    return schema_registry_from_dict(_load_file(Path(path)))
