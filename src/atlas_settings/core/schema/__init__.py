# src/atlas_settings/core/schema/__init__.py
"""
Schemas de propriedades de configuração.

Responsabilidades do pacote:
    - Contrato `SchemaProvider` consultado pelos modelos
    - Registry em memória (`ConfigurationSchemaRegistry`)
    - Carregamento declarativo de schemas a partir de YAML/JSON
"""
