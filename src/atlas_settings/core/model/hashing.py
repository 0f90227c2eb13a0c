# src/atlas_settings/core/model/hashing.py
"""
Hashing canônico de modelos de configuração.

O hash gerado representa a **identidade estrutural** de um
`ConfigurationModel` e permite ao chamador detectar se uma
reconsolidação (ex.: após mudança no registry de schemas) alterou
de fato a camada de uma pasta.

Política de hashing (v1):
    - Serialização JSON canônica de `model.to_dict()`
    - Ordenação estável de chaves
    - Chaves não-string aninhadas são convertidas com `str`
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Modelos estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - A ordem de `keys` e de `overrides` participa do hash
"""


import hashlib
import json
from typing import Any

from .types import ConfigurationModel


def _normalize_keys(value: Any) -> Any:
    # YAML admite chaves não-string aninhadas; sort_keys exige tipos comparáveis
    if isinstance(value, dict):
        return {str(key): _normalize_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalize_keys(item) for item in value]
    return value


def compute_model_hash(model: ConfigurationModel) -> str:
    """
    Gera um hash determinístico de um modelo de configuração.

    Valores não serializáveis em JSON (ex.: datas vindas de YAML) são
    convertidos com `str` antes da serialização.

    Raises:
        TypeError: Se o objeto fornecido não for um `ConfigurationModel`.
    """

    if not isinstance(model, ConfigurationModel):
        raise TypeError(
            f"Modelo para hashing deve ser ConfigurationModel, recebido: {type(model).__name__}"
        )

    canonical_json = json.dumps(
        _normalize_keys(model.to_dict()),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
