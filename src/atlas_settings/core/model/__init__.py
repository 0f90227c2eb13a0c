# src/atlas_settings/core/model/__init__.py
"""
Camada de modelo do Atlas Settings.

Responsabilidades do pacote:
    - Parse de conteúdo textual (JSON/YAML) em mapas planos
    - Construção de árvores de valores a partir de chaves pontuadas
    - Extração de overrides por seletor (`[js]`)
    - Deep-merge determinístico de camadas
    - Estratégias de processamento injetáveis
    - Hashing canônico de modelos
"""
