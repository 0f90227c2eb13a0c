# src/atlas_settings/core/model/processors.py
"""
Estratégias de processamento de mapas brutos de configuração.

Um modelo de configuração não decide sozinho como transformar o mapa
bruto em `ConfigurationModel`: essa política é injetada como uma
estratégia (`RawProcessor`). Assim, a filtragem de chaves executáveis
e o namespacing por escopo são políticas independentes e testáveis,
aplicadas sobre o mesmo núcleo de construção de árvore e overrides.

Estratégias definidas:
    - PassThroughProcessor    → construção base, nada é rejeitado
    - NamespaceProcessor      → encapsula `contents` sob uma tag de escopo
    - ExecutableSettingsFilter → rejeita chaves com schema executável

Construção base (`build_configuration_model`):
    - Chaves de topo entre colchetes viram `OverrideEntry`
    - Overrides cujo valor não é objeto com chaves string são ignorados
      (diagnóstico WARNING, `kind="invalid_override"`)
    - As demais chaves formam a árvore de valores
    - `keys` lista as chaves do mapa bruto, seletores incluídos
    - Conflitos de caminho viram diagnóstico WARNING (`kind="key_conflict"`)

Invariantes:
    - Estratégias nunca mutam o mapa bruto recebido
    - Chaves sem schema são sempre admitidas
    - Uma chave rejeitada nunca aparece em `contents`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple, runtime_checkable

from ..diagnostics import DiagnosticLog
from ..schema.registry import SchemaProvider
from .tree import ConflictReporter, is_override_key, to_values_tree
from .types import ConfigurationModel, OverrideEntry


@dataclass(frozen=True)
class ProcessedRaw:
    """Saída de uma estratégia: o modelo construído e as chaves rejeitadas."""
    model: ConfigurationModel
    rejected_keys: List[str] = field(default_factory=list)


@runtime_checkable
class RawProcessor(Protocol):
    def process(self, raw: Mapping[str, Any], diagnostics: DiagnosticLog) -> ProcessedRaw:
        """Transforma o mapa bruto em `ProcessedRaw`, sem mutar `raw`."""
        ...


def conflict_reporter(
    diagnostics: Optional[DiagnosticLog],
    *,
    unique: bool = False,
) -> Optional[ConflictReporter]:
    """
    Adapta um `DiagnosticLog` ao callback de conflitos da árvore de valores.

    Com `unique=True`, mensagens já presentes em `diagnostics.warnings` não
    são registradas de novo (projeções repetem conflitos já reportados).
    """
    if diagnostics is None:
        return None

    prefix = f"Conflict in settings file {diagnostics.source}" if diagnostics.source else "Conflict in settings"

    def report(message: str) -> None:
        message = f"{prefix}: {message}"
        if unique and message in diagnostics.warnings:
            return
        diagnostics.warning(message, kind="key_conflict")

    return report


def build_configuration_model(
    raw: Mapping[str, Any],
    diagnostics: Optional[DiagnosticLog] = None,
) -> ConfigurationModel:
    report = conflict_reporter(diagnostics)
    properties: Dict[str, Any] = {}
    overrides: List[OverrideEntry] = []

    for key, value in raw.items():
        if not is_override_key(key):
            properties[key] = value
        elif isinstance(value, Mapping) and all(isinstance(k, str) for k in value):
            overrides.append(OverrideEntry(selector=key, contents=to_values_tree(value, report)))
        elif diagnostics is not None:
            diagnostics.warning(
                f"Ignoring override {key}: value must be an object with string keys",
                kind="invalid_override",
            )

    return ConfigurationModel(
        contents=to_values_tree(properties, report),
        keys=list(raw.keys()),
        overrides=overrides,
    )


@dataclass(frozen=True)
class PassThroughProcessor:
    def process(self, raw: Mapping[str, Any], diagnostics: DiagnosticLog) -> ProcessedRaw:
        return ProcessedRaw(model=build_configuration_model(raw, diagnostics))


@dataclass(frozen=True)
class NamespaceProcessor:
    """
    Encapsula toda a saída sob uma única tag de escopo.

    `contents` passa a ter exatamente uma chave de topo, igual a `scope`,
    o que elimina colisões com outros escopos ou com a camada de settings.
    `keys` permanece sem prefixo; o prefixo é aplicado na consolidação.
    """
    scope: str

    def process(self, raw: Mapping[str, Any], diagnostics: DiagnosticLog) -> ProcessedRaw:
        model = build_configuration_model(raw, diagnostics)
        return ProcessedRaw(
            model=ConfigurationModel(
                contents={self.scope: model.contents},
                keys=model.keys,
                overrides=model.overrides,
            )
        )


@dataclass(frozen=True)
class ExecutableSettingsFilter:
    """
    Política de admissão de settings de pasta.

    Settings de pasta podem vir de conteúdo versionado e não confiável;
    chaves cujo schema é executável são omitidas e reportadas.

    Regras por chave de topo:
        - sem schema           → admitida (compatibilidade com schemas futuros)
        - schema executável    → rejeitada
        - schema não executável → admitida

    A filtragem olha apenas chaves de topo: o conteúdo de blocos de
    override (`[js]`, ...) não é filtrado e entra em `overrides` como veio.
    """
    schema_provider: SchemaProvider

    def is_admitted(self, key: str) -> bool:
        schema = self.schema_provider.lookup(key)
        if schema is None:
            return True
        return not schema.is_executable

    def admit(self, raw: Mapping[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
        admitted: Dict[str, Any] = {}
        rejected: List[str] = []
        for key, value in raw.items():
            if self.is_admitted(key):
                admitted[key] = value
            else:
                rejected.append(key)
        return admitted, rejected

    def process(self, raw: Mapping[str, Any], diagnostics: DiagnosticLog) -> ProcessedRaw:
        admitted, rejected = self.admit(raw)
        if rejected:
            diagnostics.info(
                f"Ignoring executable settings: {', '.join(rejected)}",
                kind="unsupported_keys",
                keys=list(rejected),
            )
        return ProcessedRaw(
            model=build_configuration_model(admitted, diagnostics),
            rejected_keys=rejected,
        )
