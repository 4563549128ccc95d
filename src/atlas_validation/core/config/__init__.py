# src/atlas_validation/core/config/__init__.py
"""
Camada de configuração do Atlas Validation.

Responsabilidades do pacote:
    - `ValidationConfig`: opções imutáveis de uma execução
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico

Limites explícitos:
    - Não executa pipeline
    - Não valida semântica de domínio
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .loader import load_config, load_validation_config
from .merge import deep_merge
from .settings import ValidationConfig, config_from_mapping

__all__ = [
    "ValidationConfig",
    "config_from_mapping",
    "load_config",
    "load_validation_config",
    "deep_merge",
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidConfigValueError",
    "UnsupportedConfigFormatError",
]
