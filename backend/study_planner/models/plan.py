"""
Result of a study plan generation request.

Generation never raises to its callers. It returns a PlanOutcome that is
either Ok (a real outline) or Fallback (a fixed, human-readable sentence).
Both carry displayable text so the client can always show something.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FallbackReason(str, Enum):
    NO_OUTLINE = "no_outline"
    GENERATION_ERROR = "generation_error"


FALLBACK_MESSAGES = {
    FallbackReason.NO_OUTLINE: (
        "Não foi possível gerar o plano de estudo. Tente novamente."
    ),
    FallbackReason.GENERATION_ERROR: (
        "Ocorreu um erro ao gerar o plano de estudo. "
        "Verifique o console para mais detalhes."
    ),
}


@dataclass(frozen=True)
class PlanOutcome:
    """Tagged outcome: Ok(text) | Fallback(reason)."""
    text: str
    reason: Optional[FallbackReason] = None
    input_tokens: int = 0
    output_tokens: int = 0
    model: str = ""

    @classmethod
    def ok(cls, text: str, **usage) -> "PlanOutcome":
        return cls(text=text, **usage)

    @classmethod
    def fallback(cls, reason: FallbackReason, **usage) -> "PlanOutcome":
        return cls(text=FALLBACK_MESSAGES[reason], reason=reason, **usage)

    @property
    def is_fallback(self) -> bool:
        return self.reason is not None

    @property
    def status(self) -> str:
        return "fallback" if self.is_fallback else "ok"
