# src/atlas_settings/core/workspace/folder_settings.py
"""
Modelo de settings principal de uma pasta do workspace.

O `FolderSettingsModel` aplica a política de admissão
`ExecutableSettingsFilter` ao conteúdo do arquivo de settings da pasta
e expõe projeções por escopo (WORKSPACE / FOLDER) da parte admitida.

Decisões arquiteturais:
    - Settings de pasta podem vir de conteúdo versionado não confiável:
      chaves executáveis nunca são admitidas
    - Chaves desconhecidas são admitidas (schemas ainda não registrados)
    - O snapshot bruto sobrevive a `reprocess()`, de modo que uma chave
      antes desconhecida pode passar a ser rejeitada (ou vice-versa)
    - Projeções partem do conteúdo já admitido; a filtragem não é
      reaplicada

Invariantes:
    - Uma chave nunca está ao mesmo tempo em `contents` e `unsupported_keys`
    - Toda chave com schema aparece em exatamente uma das projeções
      WORKSPACE / FOLDER (quando esse for o seu escopo)
    - Chaves sem schema aparecem sempre na projeção WORKSPACE
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Optional

from ..diagnostics import DiagnosticLog
from ..model.processors import ExecutableSettingsFilter, conflict_reporter
from ..model.raw import RawConfigurationModel
from ..model.tree import is_override_key, to_values_tree
from ..model.types import ConfigurationModel
from ..schema.registry import ConfigurationScope, SchemaProvider, resolve_schema


class FolderSettingsModel(RawConfigurationModel):

    def __init__(
        self,
        content: Optional[str],
        name: str,
        *,
        schema_provider: SchemaProvider,
        fmt: str = "json",
        diagnostics: Optional[DiagnosticLog] = None,
    ) -> None:
        self.schema_provider = schema_provider
        super().__init__(
            content if content is not None else "",
            name,
            processor=ExecutableSettingsFilter(schema_provider),
            fmt=fmt,
            diagnostics=diagnostics,
        )

    @property
    def unsupported_keys(self) -> List[str]:
        return self.rejected_keys

    def create_workspace_configuration_model(self) -> ConfigurationModel:
        return self._create_scoped_configuration_model(ConfigurationScope.WORKSPACE)

    def create_folder_scoped_configuration_model(self) -> ConfigurationModel:
        return self._create_scoped_configuration_model(ConfigurationScope.FOLDER)

    def _create_scoped_configuration_model(self, scope: ConfigurationScope) -> ConfigurationModel:
        unsupported = set(self.unsupported_keys)
        projected: Dict[str, Any] = {
            key: value
            for key, value in self._raw.items()
            if key not in unsupported
            and resolve_schema(self.schema_provider, key).scope == scope
        }
        properties = {key: value for key, value in projected.items() if not is_override_key(key)}

        return ConfigurationModel(
            contents=to_values_tree(properties, conflict_reporter(self.diagnostics, unique=True)),
            keys=list(projected),
            overrides=deepcopy(self.overrides),
        )
