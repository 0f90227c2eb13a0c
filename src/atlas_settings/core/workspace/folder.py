# src/atlas_settings/core/workspace/folder.py
"""
Modelo consolidado de configuração de uma pasta do workspace.

O `FolderConfigurationModel` é a raiz de composição: mescla uma projeção
do `FolderSettingsModel` com zero ou mais `ScopedConfigurationModel`
(domínios standalone) em um único `ConfigurationModel`, entregue ao
resolvedor multi-camada externo.

Ordem de merge (precedência crescente):
    1. camada base: o próprio settings model (WORKSPACE) ou a sua
       projeção FOLDER (`create_folder_scoped_configuration_model`)
    2. cada scoped model, na ordem de construção

Política de merge: ver `core.model.merge`. Em colisões (só possíveis
com conteúdo adversarial, pois scoped models são encapsulados sob a
sua tag), a camada mesclada depois vence.

`keys` agrega as chaves do settings model e, para cada scoped model
cujo escopo está em `WORKSPACE_STANDALONE_CONFIGURATIONS`, as suas
chaves prefixadas por `"<escopo>."`. Scoped models fora da allow-list
contribuem para `contents`, mas não para `keys`.

Limites explícitos:
    - Não decide o valor efetivo entre camadas user/workspace/folder
    - Não detecta mudanças no registry de schemas: o chamador invoca `update()`
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple, Union

from ..errors import InvalidScopeError
from ..model.hashing import compute_model_hash
from ..model.merge import concat_overrides, deep_merge
from ..model.types import ConfigurationModel, OverrideEntry
from ..schema.registry import ConfigurationScope
from .folder_settings import FolderSettingsModel
from .scoped import ScopedConfigurationModel
from .standalone import is_standalone_scope

_CONSOLIDATION_SCOPES = (ConfigurationScope.WORKSPACE, ConfigurationScope.FOLDER)


def _do_merge(target: ConfigurationModel, source: Any) -> ConfigurationModel:
    return ConfigurationModel(
        contents=deep_merge(target.contents, source.contents),
        keys=target.keys,
        overrides=concat_overrides(target.overrides, source.overrides),
    )


class FolderConfigurationModel:
    """
    Camada consolidada de uma pasta.

    Args:
        settings_model: Settings principal da pasta.
        scoped_models: Modelos dos domínios standalone, em ordem de merge.
        scope: WORKSPACE ou FOLDER; escolhe a projeção usada como base.

    Raises:
        InvalidScopeError: Se `scope` não for WORKSPACE nem FOLDER.
    """

    def __init__(
        self,
        settings_model: FolderSettingsModel,
        scoped_models: Iterable[ScopedConfigurationModel] = (),
        scope: Union[ConfigurationScope, str] = ConfigurationScope.WORKSPACE,
    ) -> None:
        scope = ConfigurationScope.parse(scope)
        if scope not in _CONSOLIDATION_SCOPES:
            raise InvalidScopeError(
                f"FolderConfigurationModel requer escopo WORKSPACE ou FOLDER, recebido: {scope.value}"
            )

        self.settings_model = settings_model
        self.scope = scope
        self._scoped_models: List[ScopedConfigurationModel] = list(scoped_models)
        self._model = ConfigurationModel()
        self.consolidate()

    def consolidate(self) -> None:
        base = (
            self.settings_model
            if self.scope is ConfigurationScope.WORKSPACE
            else self.settings_model.create_folder_scoped_configuration_model()
        )

        model = _do_merge(ConfigurationModel(), base)
        for scoped_model in self._scoped_models:
            model = _do_merge(model, scoped_model)

        self._model = ConfigurationModel(
            contents=model.contents,
            keys=self._aggregate_keys(),
            overrides=model.overrides,
        )

    def _aggregate_keys(self) -> List[str]:
        keys = list(self.settings_model.keys)
        for scoped_model in self._scoped_models:
            if is_standalone_scope(scoped_model.scope):
                keys.extend(f"{scoped_model.scope}.{key}" for key in scoped_model.keys)
        return keys

    def update(self) -> None:
        """Reaplica a admissão do settings model e reconsolida (após mudança de schema)."""
        self.settings_model.reprocess()
        self.consolidate()

    def replace_scoped_model(self, scoped_model: ScopedConfigurationModel) -> None:
        """
        Substitui o scoped model de mesma tag de escopo (ou o adiciona ao
        final) e reconsolida, para quando o arquivo do domínio muda.
        """
        for i, existing in enumerate(self._scoped_models):
            if existing.scope == scoped_model.scope:
                self._scoped_models[i] = scoped_model
                break
        else:
            self._scoped_models.append(scoped_model)
        self.consolidate()

    @property
    def scoped_models(self) -> Tuple[ScopedConfigurationModel, ...]:
        return tuple(self._scoped_models)

    @property
    def model(self) -> ConfigurationModel:
        return self._model

    @property
    def contents(self) -> dict:
        """Árvore consolidada, sem cópia. Somente leitura: não mutar."""
        return self._model.contents

    @property
    def overrides(self) -> List[OverrideEntry]:
        return self._model.overrides

    @property
    def keys(self) -> List[str]:
        return list(self._model.keys)

    @property
    def fingerprint(self) -> str:
        return compute_model_hash(self._model)

    def get_value(self, section: Optional[str] = None) -> Any:
        return self._model.get_value(section)
