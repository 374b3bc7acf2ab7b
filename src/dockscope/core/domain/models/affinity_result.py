"""Domain model for affinity scoring results."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .interaction import InteractionRecord


@dataclass(frozen=True)
class AffinityResult:
    """Contains the outcome of scoring one ligand against one receptor."""

    affinity: float  # kcal/mol, negative is favourable
    confidence: int
    interactions: Tuple[InteractionRecord, ...]
    binding_mode: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "affinity": self.affinity,
            "confidence": self.confidence,
            "binding_mode": self.binding_mode,
            "interactions": [i.to_dict() for i in self.interactions],
        }
