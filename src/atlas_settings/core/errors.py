# src/atlas_settings/core/errors.py
"""
Exceções canônicas do Atlas Settings.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de schemas, o parse de conteúdo e a composição dos
modelos de configuração de uma pasta do workspace.

As exceções aqui definidas representam **erros de programação ou de
configuração do próprio engine**, e não problemas do conteúdo editado
pelo usuário. Conteúdo malformado, chaves desconhecidas e chaves
executáveis nunca são tratados como erro fatal: viram diagnósticos.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Mensagens de erro são claras e direcionadas ao integrador
    - Conteúdo de usuário degrada para "melhor esforço + diagnóstico"

Invariantes:
    - Todas as exceções do pacote herdam de `SettingsError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra diagnósticos (ver `core.diagnostics`)
"""


class SettingsError(Exception):
    """
    Exceção base para erros do Atlas Settings.

    Permite captura genérica de qualquer falha levantada pelo engine,
    distinguindo-as de erros de execução de outras camadas.
    """


class SchemaFileNotFoundError(SettingsError):
    """
    Exceção levantada quando o arquivo de schema de configuração
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar um schema vazio automaticamente
    """


class UnsupportedConfigFormatError(SettingsError):
    """
    Exceção levantada quando o formato de conteúdo não é suportado.

    Formatos suportados (v1):
        - JSON (.json, fmt="json")
        - YAML (.yaml, .yml, fmt="yaml")

    Decisões arquiteturais:
        - Apenas formatos explícitos são aceitos
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(SettingsError):
    """
    Exceção levantada quando o conteúdo raiz não é um dicionário (`dict`).

    Decisões arquiteturais:
        - Configuração é sempre um mapa chave-valor no nível raiz
        - Listas ou valores escalares no root são inválidos
    """


class ContentParseError(SettingsError):
    """Conteúdo textual sintaticamente inválido para o formato declarado."""


class DuplicateSchemaKeyError(ValueError, SettingsError):
    """
    Exceção levantada quando uma chave de configuração é registrada
    duas vezes no registry de schemas sem `replace=True`.

    Invariantes:
        - Cada chave possui no máximo um `PropertySchema` registrado
    """


class InvalidScopeError(ValueError, SettingsError):
    """
    Exceção levantada quando um escopo inválido é fornecido.

    Exemplos:
        - `FolderConfigurationModel` com escopo diferente de WORKSPACE/FOLDER
        - `ScopedConfigurationModel` com tag de escopo vazia
        - Schema em arquivo declarando escopo desconhecido
    """


class InvalidSchemaDefinitionError(SettingsError):
    """
    Exceção levantada quando a definição de um schema é estruturalmente
    inválida (ex.: `is_executable` não booleano, entrada que não é mapa).
    """
