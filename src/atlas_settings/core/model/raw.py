# src/atlas_settings/core/model/raw.py
"""
Modelo bruto de configuração.

O `RawConfigurationModel` é a interface única de modelo do Atlas
Settings: guarda o último mapa bruto parseado (snapshot) e o
`ConfigurationModel` derivado dele pela estratégia de processamento
injetada (`RawProcessor`).

Ciclo de vida:
    - `update(content)` → parse do texto + `process_raw`
    - `process_raw(raw)` → guarda o snapshot e aplica a estratégia
    - `reprocess()`      → reaplica a estratégia ao snapshot, sem parse

Decisões arquiteturais:
    - Cada atualização substitui integralmente contents/overrides/keys
    - Falhas de parse não são propagadas (diagnóstico + mapa vazio)
    - `diagnostics` é limpo no início de cada passada (`update`,
      `process_raw`, `reprocess`) e reflete apenas a última delas
    - `contents`/`overrides` expõem o estado interno do modelo congelado
      sem cópia; o chamador não deve mutá-los
    - O snapshot sobrevive a `reprocess()`, permitindo recomputar a
      admissão após mudanças no registry de schemas

Limites explícitos:
    - Não lê arquivos
    - Não sincroniza acesso concorrente (um único escritor por instância)
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..diagnostics import DiagnosticLog
from .parsing import ensure_format, parse_content
from .processors import PassThroughProcessor, ProcessedRaw, RawProcessor
from .types import ConfigurationModel, OverrideEntry


class RawConfigurationModel:
    """
    Modelo construído a partir de conteúdo textual bruto.

    Args:
        content: Conteúdo textual; quando fornecido, o modelo já sai
            completamente construído do construtor.
        name: Nome da origem (ex.: arquivo), usado nos diagnósticos.
        processor: Estratégia de processamento; padrão `PassThroughProcessor`.
        fmt: "json" (padrão) ou "yaml".
        diagnostics: Log de diagnósticos; um novo é criado se omitido.
            Um log injetado é limpo a cada passada deste modelo.
    """

    def __init__(
        self,
        content: Optional[str] = None,
        name: str = "",
        *,
        processor: Optional[RawProcessor] = None,
        fmt: str = "json",
        diagnostics: Optional[DiagnosticLog] = None,
    ) -> None:
        self.name = name
        self.fmt = ensure_format(fmt)
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog(source=name)
        self._processor = processor if processor is not None else PassThroughProcessor()
        self._raw: Dict[str, Any] = {}
        self._processed = ProcessedRaw(model=ConfigurationModel())

        if content is not None:
            self.update(content)

    def update(self, content: Optional[str]) -> None:
        self.diagnostics.clear()
        self._apply(parse_content(content, fmt=self.fmt, diagnostics=self.diagnostics))

    def process_raw(self, raw: Mapping[str, Any]) -> None:
        self.diagnostics.clear()
        self._apply(raw)

    def _apply(self, raw: Mapping[str, Any]) -> None:
        self._raw = dict(raw)
        self._processed = self._processor.process(self._raw, self.diagnostics)

    def reprocess(self) -> None:
        self.process_raw(self._raw)

    @property
    def processor(self) -> RawProcessor:
        return self._processor

    @property
    def raw(self) -> Dict[str, Any]:
        return dict(self._raw)

    @property
    def model(self) -> ConfigurationModel:
        return self._processed.model

    @property
    def contents(self) -> Dict[str, Any]:
        """Árvore de valores do modelo atual. Somente leitura: não mutar."""
        return self._processed.model.contents

    @property
    def overrides(self) -> List[OverrideEntry]:
        return self._processed.model.overrides

    @property
    def keys(self) -> List[str]:
        return list(self._processed.model.keys)

    @property
    def rejected_keys(self) -> List[str]:
        return list(self._processed.rejected_keys)

    def get_value(self, section: Optional[str] = None) -> Any:
        return self._processed.model.get_value(section)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, keys={self.keys!r})"
