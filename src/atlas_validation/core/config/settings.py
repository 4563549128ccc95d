# src/atlas_validation/core/config/settings.py
"""
Configuração imutável de uma execução de pipeline.

O `ValidationConfig` é passado, sem alterações, a todos os Steps de uma
execução (inclusive pipelines aninhados). O executor inspeciona apenas
três flags:

    - abort_early       → interrompe no primeiro Step que produzir issue
    - abort_pipe_early  → idem, restrito à execução do pipe
    - skip_pipe         → executa apenas o primeiro Step do pipeline

Qualquer outra opção vive em `options` (conjunto aberto) e é lida
apenas pelos Steps que a conhecem.

Invariantes:
    - A configuração é imutável durante a execução
    - Opções desconhecidas são repassadas intactas
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace as _dc_replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from atlas_validation.core.pipeline.trace import RunTrace

from .errors import InvalidConfigRootTypeError, InvalidConfigValueError


FLAG_NAMES = ("abort_early", "abort_pipe_early", "skip_pipe")


@dataclass(frozen=True)
class ValidationConfig:
    """
    Opções de uma execução.

    `trace` é opcional e pertence ao chamador: quando presente, o
    executor registra nele os eventos da execução. Não participa da
    comparação entre configurações.
    """
    abort_early: bool = False
    abort_pipe_early: bool = False
    skip_pipe: bool = False
    options: Mapping[str, Any] = field(default_factory=dict, hash=False)
    trace: Optional[RunTrace] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    def replace(self, **overrides: Any) -> "ValidationConfig":
        """Retorna uma nova configuração com os campos sobrescritos."""
        return _dc_replace(self, **overrides)


def config_from_mapping(mapping: Mapping[str, Any]) -> ValidationConfig:
    """
    Constrói um `ValidationConfig` a partir de uma configuração resolvida.

    Se a chave `validation` existir, apenas essa seção é considerada;
    caso contrário, o próprio mapeamento é tratado como a seção.

    Raises:
        InvalidConfigRootTypeError: Se a seção não for um dicionário.
        InvalidConfigValueError: Se alguma flag não for booleana.
    """
    section = mapping.get("validation", mapping) if isinstance(mapping, Mapping) else mapping
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise InvalidConfigRootTypeError(
            f"Seção 'validation' deve ser dict, recebido: {type(section).__name__}"
        )

    flags: Dict[str, bool] = {}
    options: Dict[str, Any] = {}
    for key, value in section.items():
        if key in FLAG_NAMES:
            if not isinstance(value, bool):
                raise InvalidConfigValueError(
                    f"'{key}' deve ser booleano, recebido: {type(value).__name__}"
                )
            flags[key] = value
        else:
            options[key] = value

    return ValidationConfig(options=options, **flags)
