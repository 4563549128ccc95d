# src/atlas_validation/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Validation.

As exceções aqui definidas representam **violações estruturais
explícitas** da configuração, e não falhas de validação de dados
(estas são sempre issues).

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de execução de Step
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Atlas Validation.

    Permite captura genérica de erros de configuração e distinção clara
    entre falhas estruturais e issues de validação.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    O arquivo de defaults é obrigatório; não há inferência de defaults.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1): YAML (.yaml, .yml) e JSON (.json).
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um dicionário.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"validation": {"abort_early": false}}
        - override: {"validation": "strict"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidConfigValueError(ConfigError):
    """
    Exceção levantada quando uma flag de execução não é booleana.

    As flags `abort_early`, `abort_pipe_early` e `skip_pipe` não sofrem
    coerção: "yes", 1 ou "true" são rejeitados.
    """
