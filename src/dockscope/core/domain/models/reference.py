"""Reference binding data and the results of similarity-weighted prediction."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ReferenceEntry:
    """A measured complex from the reference set (affinity in pKd)."""

    affinity: float
    protein: str
    ligand: str
    protein_type: str


@dataclass(frozen=True)
class WeightingScheme:
    """How the nearest reference complexes are combined into one prediction."""

    label: str
    scale: float
    variation_modulus: int
    variation_amplitude: float
    confidence_base: float
    confidence_span: float


class ReferenceScheme(Enum):
    """Neighbour weighting schemes."""

    DECAY = "decay"
    HARMONIC = "harmonic"
    EXPONENTIAL = "exponential"

    @property
    def parameters(self) -> WeightingScheme:
        return _SCHEMES[self]


_SCHEMES = {
    ReferenceScheme.DECAY: WeightingScheme(
        label="Similarity decay",
        scale=1.0,
        variation_modulus=100,
        variation_amplitude=0.3,
        confidence_base=70,
        confidence_span=25,
    ),
    ReferenceScheme.HARMONIC: WeightingScheme(
        label="Harmonic rank",
        scale=0.92,
        variation_modulus=80,
        variation_amplitude=0.4,
        confidence_base=75,
        confidence_span=20,
    ),
    ReferenceScheme.EXPONENTIAL: WeightingScheme(
        label="Exponential rank",
        scale=1.08,
        variation_modulus=120,
        variation_amplitude=0.5,
        confidence_base=80,
        confidence_span=15,
    ),
}


@dataclass(frozen=True)
class ReferencePrediction:
    """Affinity predicted from the closest reference complexes."""

    affinity_score: float  # pKd
    confidence: int
    scheme: str
    neighbours: Tuple[str, ...] = field(default_factory=tuple)
    metric_type: str = "pKd"
    compound_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["neighbours"] = list(self.neighbours)
        return result


REFERENCE_SET: List[ReferenceEntry] = [
    ReferenceEntry(6.4, "glutathione s-transferase", "VWW", "enzyme"),
    ReferenceEntry(5.82, "glutathione s-transferase", "2-mer", "enzyme"),
    ReferenceEntry(4.62, "glutathione s-transferase", "SAS", "enzyme"),
    ReferenceEntry(5.22, "phosphoglycerate kinase", "BIS", "enzyme"),
    ReferenceEntry(4.72, "Enterobacteria phage T4 LYSOZYME", "I4B", "enzyme"),
    ReferenceEntry(3.54, "Enterobacteria phage T4 LYSOZYME", "IND", "enzyme"),
    ReferenceEntry(4.85, "Enterobacteria phage T4 LYSOZYME", "N4B", "enzyme"),
    ReferenceEntry(3.37, "Enterobacteria phage T4 LYSOZYME", "PXY", "enzyme"),
    ReferenceEntry(3.33, "Enterobacteria phage T4 LYSOZYME", "OXE", "enzyme"),
    ReferenceEntry(6.4, "c-src tyrosine kinase", "4-mer", "kinase"),
    ReferenceEntry(5.62, "tyrosine kinase C-src", "4-mer", "kinase"),
    ReferenceEntry(6.7, "c-src tyrosine kinase", "4-mer", "kinase"),
    ReferenceEntry(7.57, "fab 29g11", "HEP", "antibody"),
    ReferenceEntry(1.3, "sucrose-specific porin", "SUC", "transporter"),
    ReferenceEntry(6.4, "tyrosine kinase C-src", "3-mer", "kinase"),
    ReferenceEntry(6.4, "tyrosine kinase C-src", "3-mer", "kinase"),
    ReferenceEntry(6.0, "tyrosine kinase C-src", "4-mer", "kinase"),
    ReferenceEntry(
        9.47,
        "GROWTH HORMONE RECEPTOR",
        "G120R mutant human growth hormone (hGH)",
        "receptor",
    ),
    ReferenceEntry(
        8.29,
        "ligand-binding domain of the human progesterone receptor",
        "STR",
        "receptor",
    ),
    ReferenceEntry(6.3, "thrombin alpha", "4-mer", "protease"),
]
