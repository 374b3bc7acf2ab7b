#!/usr/bin/env python3
# src/dockscope/core/domain/models/receptor.py

"""
Receptor kinds and the calibrated affinity model attached to each of them.

Every receptor carries its coefficients as data. Keys that do not name a known
receptor resolve to ``None`` and callers use ``GENERIC_MODEL`` instead.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .descriptors import MolecularDescriptors


@dataclass(frozen=True)
class IndicatorTerm:
    """Adds ``bonus`` when ``lower < descriptor < upper``, else ``otherwise``."""

    descriptor: str
    lower: float = -math.inf
    upper: float = math.inf
    bonus: float = 0.0
    otherwise: float = 0.0

    def evaluate(self, descriptors: MolecularDescriptors) -> float:
        value = getattr(descriptors, self.descriptor)
        return self.bonus if self.lower < value < self.upper else self.otherwise


# (threshold, label) pairs checked in order against the unrounded affinity
DEFAULT_LADDER: Tuple[Tuple[float, str], ...] = (
    (-7.0, "Strong Inhibitor"),
    (-5.0, "Moderate Binder"),
)
DEFAULT_MODE = "Weak Binder"


@dataclass(frozen=True)
class AffinityModel:
    """Linear indicator model with a seeded perturbation."""

    base: float
    terms: Tuple[IndicatorTerm, ...] = ()
    amplitude: float = 0.0
    ladder: Tuple[Tuple[float, str], ...] = DEFAULT_LADDER
    fallback_mode: str = DEFAULT_MODE

    def score(self, descriptors: MolecularDescriptors, noise: float) -> float:
        """
        Evaluate the model.

        Args:
            descriptors: Descriptors of the ligand
            noise: Seeded random draw in [0, 1)

        Returns:
            Unrounded affinity in kcal/mol
        """
        total = self.base
        for term in self.terms:
            total += term.evaluate(descriptors)
        return total + (noise - 0.5) * self.amplitude

    def binding_mode(self, affinity: float) -> str:
        for threshold, label in self.ladder:
            if affinity < threshold:
                return label
        return self.fallback_mode


GENERIC_MODEL = AffinityModel(base=-5.5, amplitude=2.0)

DEFAULT_RESIDUES = ("TYR45", "ARG78", "PHE203", "LEU156", "ASP92")


class ReceptorKind(Enum):
    """Receptors with a calibrated affinity model."""

    IL6 = "il-6"
    IL10 = "il-10"
    IL17A = "il-17a"
    TNF_ALPHA = "tnf-alpha"

    @classmethod
    def from_key(cls, key: Optional[str]) -> Optional["ReceptorKind"]:
        """Resolve a receptor key (case-insensitive); unknown keys give None."""
        if not key:
            return None
        try:
            return cls(key.strip().lower())
        except ValueError:
            return None

    @property
    def model(self) -> AffinityModel:
        return _MODELS[self]

    @property
    def residues(self) -> Tuple[str, ...]:
        return _RESIDUES[self]

    @property
    def sequence(self) -> str:
        return _SEQUENCES[self]


_MODELS = {
    ReceptorKind.IL6: AffinityModel(
        base=-5.2,
        terms=(
            IndicatorTerm("molecular_weight", lower=500, bonus=-1.0),
            IndicatorTerm("logp", lower=2, upper=4, bonus=0.5, otherwise=-0.3),
            IndicatorTerm("hbd_count", lower=2, bonus=0.4),
        ),
        amplitude=0.5,
    ),
    ReceptorKind.IL10: AffinityModel(
        base=-6.1,
        terms=(
            IndicatorTerm("tpsa", lower=140, bonus=-0.8),
            IndicatorTerm("aromatic_rings", lower=1, bonus=0.6),
        ),
        amplitude=0.4,
    ),
    ReceptorKind.IL17A: AffinityModel(
        base=-7.3,
        terms=(
            IndicatorTerm("rot_bonds", lower=8, bonus=-0.6),
            IndicatorTerm("hetero_atoms", lower=3, bonus=0.3),
        ),
        amplitude=0.3,
    ),
    ReceptorKind.TNF_ALPHA: AffinityModel(
        base=-8.1,
        terms=(
            IndicatorTerm(
                "molecular_weight", lower=300, upper=450, bonus=0.7, otherwise=-0.4
            ),
            IndicatorTerm("hba_count", lower=6, bonus=-0.5),
        ),
        amplitude=0.6,
    ),
}

_RESIDUES = {
    ReceptorKind.IL6: ("TYR31", "ARG30", "PHE74", "LEU57", "ASP34"),
    ReceptorKind.IL10: ("TYR45", "ARG78", "TRP92", "LEU156", "GLU203"),
    ReceptorKind.IL17A: ("PHE169", "TYR44", "ARG171", "LEU117", "ASP166"),
    ReceptorKind.TNF_ALPHA: ("TYR59", "LEU57", "PHE124", "ARG103", "GLU146"),
}

_SEQUENCES = {
    ReceptorKind.IL6: (
        "MNSFSTSAFGPVAFSLGLLLVLPAAFPAPVPPGEDSKDVAAPHRQPLTSSERIDKQIRYILDGISALRKE"
        "TCNKSNMCESSKEALAENNLNLPKMAEKDGCFQSGFNEETCLVKIITGLLEFEVYLEYLQNRFESSEEQ"
        "ARAVQMSTKVLIQFLQKKAKNLDAITTPDPTTNASLLTKLQAQNQWLQDMTTHLILRSFKEFLQSSLRA"
        "LRQM"
    ),
    ReceptorKind.IL10: (
        "MHSSALLCCLVLLTGVRASPGQGTQSENSCTHFPGNLPNMLRDLRDAFSRVKTFFQMKDQLDNLLLKESL"
        "LEDFKGYLGCQALSEMIQFYLEEVMPQAENQDPDIKAHVNSLGENLKTLRLRLRRCHRFLPCENKSKAVE"
        "QVKNAFNKLQEKGIYKAMSEFDIFINYIEAYMTMKIRN"
    ),
    ReceptorKind.IL17A: (
        "MTILYATFMKFVPPALAVLLHGFIPPATPDPTNFSGSLLFVPTFQLCNTNLHSAGFTLNVDSSHLYNHFQ"
        "PLFTVPDIVHQQLRDQYGDFEAMEKSTQALLLVDDFMEELQHLAQIAHELVVVHAMGFKAATLNPFDLRY"
        "AHGDAATQRLQQGVEHEMQTLDHLLQLPAHQAHLPDQGLRELQGLRGLQETGAAVDLLGELHELMERLQA"
        "MAQLHAEHIVDQGGIKPLDKQTQFEENPTV"
    ),
    ReceptorKind.TNF_ALPHA: (
        "MSTESMIRDVELAEEALPKKTGGPQGSRRCLFLSLFSFLIVAGATTLFCLLHFGVIGPQREEFPRDLSLI"
        "SPLAQAVRSSSRTPSDKPVAHVVANPQAEGQLQWLNRRANALLANGVELRDNQLVVPSEGLYLIYSQVLF"
        "KGQGCPSTHVLLTHTISRIAVSYQTKVNLLSAIKSPCQRETPEGAEAKPWYEPIYLGGVFQLEKGDRLSA"
        "EINRPDYLDFAESGQVYFGIIAL"
    ),
}
