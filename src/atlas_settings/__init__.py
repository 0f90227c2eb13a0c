# src/atlas_settings/__init__.py
"""
Atlas Settings: engine de resolução de configuração por pasta do workspace.

Este pacote transforma o conteúdo bruto de configuração de cada pasta
(o arquivo principal de settings e os domínios standalone, como `tasks`
e `launch`) em um único modelo consolidado, filtrado por schema, que é
entregue a um resolvedor multi-camada externo.

Arquitetura em alto nível:
    - core.model     → árvore de valores, merge, parse, estratégias, modelo bruto
    - core.schema    → contrato de schema provider, registry e loader de schemas
    - core.workspace → scoped models, settings da pasta e consolidação

Princípios centrais:
    - Precedência determinística entre camadas
    - Isolamento de namespace entre domínios standalone
    - Admissão guiada por schema (chaves executáveis nunca vêm da pasta)
    - Recomputação incremental sem novo parse quando o schema muda

Limites explícitos:
    - Não lê nem observa arquivos
    - Não decide o valor efetivo final entre user/workspace/folder
"""
# src/atlas_settings/__init__.py
from .core.diagnostics import DiagnosticLog
from .core.model.types import ConfigurationModel, OverrideEntry
from .core.schema.registry import (
    ConfigurationSchemaRegistry,
    ConfigurationScope,
    PropertySchema,
    SchemaProvider,
)
from .core.workspace.folder import FolderConfigurationModel
from .core.workspace.folder_settings import FolderSettingsModel
from .core.workspace.scoped import ScopedConfigurationModel
from .core.workspace.standalone import WORKSPACE_STANDALONE_CONFIGURATIONS

__all__ = [
    "ConfigurationModel",
    "ConfigurationSchemaRegistry",
    "ConfigurationScope",
    "DiagnosticLog",
    "FolderConfigurationModel",
    "FolderSettingsModel",
    "OverrideEntry",
    "PropertySchema",
    "SchemaProvider",
    "ScopedConfigurationModel",
    "WORKSPACE_STANDALONE_CONFIGURATIONS",
]
