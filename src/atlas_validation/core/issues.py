# src/atlas_validation/core/issues.py
"""
Atlas Validation — Issues canônicas (v1)

Uma `Issue` é o único canal de falha do pipeline: cada Step que encontra
um problema acrescenta uma issue ao dataset em vez de levantar exceção.

Issues são:
- explícitas
- serializáveis
- acumuladas na ordem em que ocorrem

O executor nunca interpreta o conteúdo de uma issue, apenas sua presença.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple, Union

if TYPE_CHECKING:
    from atlas_validation.core.config.settings import ValidationConfig
    from atlas_validation.core.dataset import Dataset


Message = Union[str, Callable[[Dict[str, Any]], str]]


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Issue:
    """
    Registro imutável de uma falha de validação.

    Campos:
    - kind: tipo semântico do Step que produziu a issue ("schema", "validation", ...)
    - type: código estável do Step (não é texto livre), ex.: "min_length"
    - input: valor recebido pelo Step
    - expected: descrição curta do esperado (ex.: ">=3"), quando aplicável
    - received: descrição curta do recebido (ex.: "2")
    - message: mensagem humana e objetiva
    - path: caminho do valor dentro de estruturas aninhadas
    """

    kind: str
    type: str
    input: Any
    expected: Optional[str]
    received: str
    message: str
    path: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável da issue."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def stringify(value: Any) -> str:
    """Renderiza um valor recebido de forma curta para mensagens."""
    if value is None:
        return "None"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (bool, int, float)):
        return repr(value)
    return type(value).__name__


def _resolve_message(message: Optional[Message], fields: Dict[str, Any]) -> Optional[str]:
    if message is None:
        return None
    if callable(message):
        return message(fields)
    return message


def create_issue(
    step: Any,
    dataset: "Dataset",
    *,
    label: str,
    expected: Optional[str],
    received: str,
    config: "ValidationConfig",
    message: Optional[Message] = None,
) -> Issue:
    """
    Monta uma issue para o Step informado a partir do valor atual do dataset.

    Precedência da mensagem:
        1. `message` do próprio Step
        2. opção "message" da configuração da execução
        3. mensagem padrão: "Invalid <label>: Expected <expected> but received <received>"

    Mensagens podem ser strings ou callables que recebem os campos da issue.
    """
    kind = getattr(step, "kind", None)
    fields: Dict[str, Any] = {
        "kind": getattr(kind, "value", kind),
        "type": getattr(step, "type", type(step).__name__),
        "input": dataset.value,
        "expected": expected,
        "received": received,
    }

    text = _resolve_message(message, fields) or _resolve_message(config.option("message"), fields)
    if text is None:
        text = f"Invalid {label}: "
        text += f"Expected {expected} but received {received}" if expected is not None else f"Received {received}"

    return Issue(message=text, **fields)
