# src/atlas_settings/core/workspace/standalone.py
"""
Domínios standalone de configuração de uma pasta.

Um domínio standalone é um assunto de configuração guardado em arquivo
próprio, fora do arquivo principal de settings, e mesclado sob a sua
própria tag de escopo (ex.: `tasks`, `launch`).

O mapa abaixo é a allow-list fixa desses domínios: apenas modelos com
escopo presente nela contribuem para a lista agregada de `keys` da
pasta. Os caminhos são relativos à raiz da pasta e servem ao carregador
externo de arquivos.
"""

from types import MappingProxyType
from typing import Mapping

FOLDER_CONFIG_FOLDER_NAME = ".atlas"

TASKS_CONFIGURATION_KEY = "tasks"
LAUNCH_CONFIGURATION_KEY = "launch"

WORKSPACE_STANDALONE_CONFIGURATIONS: Mapping[str, str] = MappingProxyType({
    TASKS_CONFIGURATION_KEY: f"{FOLDER_CONFIG_FOLDER_NAME}/{TASKS_CONFIGURATION_KEY}.json",
    LAUNCH_CONFIGURATION_KEY: f"{FOLDER_CONFIG_FOLDER_NAME}/{LAUNCH_CONFIGURATION_KEY}.json",
})


def is_standalone_scope(scope: str) -> bool:
    return scope in WORKSPACE_STANDALONE_CONFIGURATIONS
