# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Settings.

Este módulo define fixtures reutilizáveis que fornecem:
- registries de schema fixos e determinísticos
- conteúdo textual de settings de pasta (JSON e YAML)
- conteúdo textual de domínios standalone (`tasks`, `launch`)

Decisões arquiteturais:
    - Conteúdo é fornecido como string, nunca como arquivo
    - Schemas são injetados explicitamente, sem estado global
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Cada teste recebe um registry novo (mutações não vazam)
"""

import pytest


@pytest.fixture
def schema_registry():
    """
    Registry com schemas cobrindo todos os casos de admissão e projeção.

    Schemas registrados:
        - terminal.external.exec → WINDOW, executável
        - git.path               → APPLICATION, executável
        - editor.tabSize         → LANGUAGE_OVERRIDABLE
        - files.exclude          → FOLDER
        - search.exclude         → WORKSPACE
        - editor.fontSize        → WINDOW
    """
    from atlas_settings.core.schema.registry import (
        ConfigurationSchemaRegistry,
        ConfigurationScope,
        PropertySchema,
    )

    registry = ConfigurationSchemaRegistry()
    registry.register(
        "terminal.external.exec",
        PropertySchema(scope=ConfigurationScope.WINDOW, is_executable=True),
    )
    registry.register(
        "git.path",
        PropertySchema(scope=ConfigurationScope.APPLICATION, is_executable=True),
    )
    registry.register("editor.tabSize", PropertySchema(scope=ConfigurationScope.LANGUAGE_OVERRIDABLE))
    registry.register("files.exclude", PropertySchema(scope=ConfigurationScope.FOLDER))
    registry.register("search.exclude", PropertySchema(scope=ConfigurationScope.WORKSPACE))
    registry.register("editor.fontSize", PropertySchema(scope=ConfigurationScope.WINDOW))
    return registry


@pytest.fixture
def empty_schema_registry():
    from atlas_settings.core.schema.registry import ConfigurationSchemaRegistry

    return ConfigurationSchemaRegistry()


@pytest.fixture
def folder_settings_json() -> str:
    """
    Settings de pasta semelhantes a um projeto real.

    Contém chaves executáveis (que devem ser rejeitadas), chaves com
    escopo FOLDER/WORKSPACE, uma chave desconhecida e um override `[js]`.

    Returns:
        str: Conteúdo JSON do arquivo de settings da pasta.
    """
    return """\
{
  "editor.tabSize": 2,
  "terminal.external.exec": "/usr/bin/xterm",
  "files.exclude": {"**/.git": true},
  "search.exclude": {"**/node_modules": true},
  "myext.unknown": "kept",
  "git.path": "/opt/git/bin/git",
  "[js]": {"editor.tabSize": 4}
}
"""


@pytest.fixture
def folder_settings_yaml() -> str:
    return """\
editor.tabSize: 2
terminal.external.exec: /usr/bin/xterm
files.exclude:
  "**/.git": true
"""


@pytest.fixture
def tasks_json() -> str:
    return """\
{
  "version": "2.0.0",
  "tasks": [{"label": "build", "command": "make"}]
}
"""


@pytest.fixture
def launch_json() -> str:
    return """\
{
  "version": "0.2.0",
  "configurations": [{"name": "Run", "type": "python"}]
}
"""
