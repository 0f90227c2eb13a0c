# src/atlas_settings/core/workspace/scoped.py
"""
Modelo de configuração com escopo fixo (domínios standalone).

Toda a saída de um `ScopedConfigurationModel` fica sob uma única chave
de topo igual à sua tag de escopo: `{"tasks": {...}}`. Isso permite
mesclá-lo à camada de settings da pasta sem risco de colisão.

Nenhuma filtragem de admissão é aplicada aqui; se necessária, é
responsabilidade de quem fornece o conteúdo.
"""

from __future__ import annotations

from typing import Optional

from ..diagnostics import DiagnosticLog
from ..errors import InvalidScopeError
from ..model.processors import NamespaceProcessor
from ..model.raw import RawConfigurationModel


class ScopedConfigurationModel(RawConfigurationModel):
    """Modelo bruto com `NamespaceProcessor` e tag de escopo imutável."""

    def __init__(
        self,
        content: Optional[str],
        name: str,
        scope: str,
        *,
        fmt: str = "json",
        diagnostics: Optional[DiagnosticLog] = None,
    ) -> None:
        if not isinstance(scope, str) or not scope.strip():
            raise InvalidScopeError("scope must be a non-empty string")

        self._scope = scope
        super().__init__(
            content if content is not None else "",
            name,
            processor=NamespaceProcessor(scope),
            fmt=fmt,
            diagnostics=diagnostics,
        )

    @property
    def scope(self) -> str:
        return self._scope
