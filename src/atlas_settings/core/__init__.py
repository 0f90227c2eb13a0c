# src/atlas_settings/core/__init__.py
"""
Core do Atlas Settings.

Componentes principais:
    - errors      → hierarquia canônica de exceções
    - diagnostics → coletor de eventos estruturados não fatais
    - model       → construção e merge de modelos de configuração
    - schema      → schemas de propriedades (escopo, executável)
    - workspace   → modelos de pasta e consolidação

Princípios fundamentais:
    - Transformações síncronas, em memória e sem I/O de settings
    - Conteúdo de usuário degrada para "melhor esforço + diagnóstico"
    - Dependências (schema provider, diagnósticos) são injetadas
"""
