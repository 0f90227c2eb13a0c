# src/atlas_settings/core/workspace/__init__.py
"""
Modelos de configuração de uma pasta do workspace.

Responsabilidades do pacote:
    - Allow-list de domínios standalone (`tasks`, `launch`)
    - Scoped models (conteúdo encapsulado sob a tag do domínio)
    - Settings principal da pasta com admissão guiada por schema
    - Consolidação de todas as camadas de uma pasta
"""
