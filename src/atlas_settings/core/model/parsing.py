# src/atlas_settings/core/model/parsing.py
"""
Parse canônico de conteúdo textual de configuração.

Este módulo converte o conteúdo textual de um arquivo de settings (ou de
um domínio standalone) em um mapa plano chave → valor, primeiro passo
da construção de qualquer modelo de configuração.

Formatos suportados (v1):
    - JSON (padrão)
    - YAML

Decisões arquiteturais:
    - O formato é sempre explícito, nunca inferido pelo conteúdo
    - Conteúdo vazio (ou só espaços) é interpretado como mapa vazio
    - O conteúdo raiz deve ser um dicionário (`dict`)
    - Chaves de topo devem ser strings (YAML aceita `1:`, `true:`, `null:`)
    - `load_text` é estrito (levanta); `parse_content` é tolerante
      (registra diagnóstico e retorna mapa vazio)

Limites explícitos:
    - Não lê arquivos do disco
    - Não constrói árvores de valores
"""

import json
from typing import Any, Dict, Optional

import yaml  # PyYAML

from ..diagnostics import DiagnosticLog
from ..errors import (
    ContentParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

SUPPORTED_FORMATS = ("json", "yaml")

_SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def format_for_suffix(suffix: str) -> str:
    fmt = _SUFFIX_FORMATS.get(suffix.lower())
    if fmt is None:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {suffix}")
    return fmt


def ensure_format(fmt: str) -> str:
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {fmt}")
    return fmt


def load_text(content: Optional[str], fmt: str = "json") -> Dict[str, Any]:
    """
    Converte conteúdo textual em dicionário, de forma estrita.

    Args:
        content (Optional[str]): Conteúdo textual (None equivale a vazio).
        fmt (str): "json" ou "yaml".

    Returns:
        Dict[str, Any]: Mapa plano de chaves de topo.

    Raises:
        UnsupportedConfigFormatError: Se `fmt` não for suportado.
        ContentParseError: Se o conteúdo for sintaticamente inválido ou
            possuir chave de topo que não seja string.
        InvalidConfigRootTypeError: Se o root não for um dicionário.
    """
    ensure_format(fmt)

    if content is None or not content.strip():
        return {}

    try:
        if fmt == "yaml":
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (yaml.YAMLError, ValueError) as exc:
        raise ContentParseError(f"Conteúdo {fmt} inválido: {exc}") from exc

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    invalid_keys = [key for key in data if not isinstance(key, str)]
    if invalid_keys:
        raise ContentParseError(
            f"Chaves de topo devem ser strings, recebido: {', '.join(repr(k) for k in invalid_keys)}"
        )

    return data


def parse_content(
    content: Optional[str],
    *,
    fmt: str = "json",
    diagnostics: Optional[DiagnosticLog] = None,
) -> Dict[str, Any]:
    """
    Versão tolerante de `load_text`.

    Conteúdo malformado nunca é propagado ao chamador: um diagnóstico
    ERROR (`kind="parse_error"`) é registrado e um mapa vazio é retornado.
    Formatos não suportados continuam sendo erro de programação.
    """
    try:
        return load_text(content, fmt)
    except (ContentParseError, InvalidConfigRootTypeError) as exc:
        if diagnostics is not None:
            diagnostics.error(str(exc), kind="parse_error", fmt=fmt)
        return {}
