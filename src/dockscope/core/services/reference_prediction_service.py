#!/usr/bin/env python3
# src/dockscope/core/services/reference_prediction_service.py

"""
Service predicting pKd from the most similar complexes of a reference set.

Similarity mixes a hash term, an estimated molecular weight term, shared
functional groups and a protein-class weight from sequence composition. The
five nearest entries are combined with one of three rank weightings.
"""

import logging
import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..domain.models.reference import (
    REFERENCE_SET,
    ReferenceEntry,
    ReferencePrediction,
    ReferenceScheme,
)
from ..utils.deterministic import compound_identifier, djb2_hash
from ..utils.formula import count_pattern
from .descriptor_service import round_half_up

logger = logging.getLogger(__name__)

NEIGHBOUR_COUNT = 5
SUMMARY_COUNT = 3
PKD_RANGE = (1.0, 10.0)

# Element pattern -> approximate mass used for similarity only
_ESTIMATE_MASSES = (
    ("C", 12.01),
    ("N", 14.01),
    ("O", 16.00),
    ("S", 32.07),
    ("P", 30.97),
    ("F", 19.00),
    ("Cl", 35.45),
    ("Br", 79.90),
)

# Group name -> substring that marks it
FUNCTIONAL_GROUPS = (
    ("carbonyl", "C=O"),
    ("hydroxyl", "OH"),
    ("amine", "NH"),
    ("aromatic", "c1"),
    ("carboxyl", "C(=O)O"),
    ("amide", "C(=O)N"),
    ("sulfoxide", "S(=O)"),
    ("phosphate", "P(=O)"),
)

_RANK_WEIGHTS: Dict[ReferenceScheme, Callable[[int], float]] = {
    ReferenceScheme.DECAY: lambda i: 0.8**i,
    ReferenceScheme.HARMONIC: lambda i: 1 / (i + 1),
    ReferenceScheme.EXPONENTIAL: lambda i: math.exp(-i * 0.5),
}


def estimate_weight(text: str) -> float:
    return sum(count_pattern(text, pattern) * mass for pattern, mass in _ESTIMATE_MASSES)


def functional_groups(text: str) -> List[str]:
    return [name for name, marker in FUNCTIONAL_GROUPS if marker in text]


def functional_similarity(first: str, second: str) -> float:
    groups1 = functional_groups(first)
    groups2 = functional_groups(second)
    common = [g for g in groups1 if g in groups2]
    total = len(set(groups1) | set(groups2))
    return len(common) / total if total > 0 else 0.0


def weight_similarity(first: str, second: str) -> float:
    mw1, mw2 = estimate_weight(first), estimate_weight(second)
    largest = max(mw1, mw2)
    if largest == 0:
        return 0.0
    return 1 - abs(mw1 - mw2) / largest


def protein_type_weight(sequence: str, protein_type: str) -> float:
    """Weight for a reference protein class given sequence composition."""
    length = len(sequence)
    hydrophobic = count_pattern(sequence, "[AILMFWYV]") / length if length else 0.0
    charged = count_pattern(sequence, "[DEKR]") / length if length else 0.0
    aromatic = count_pattern(sequence, "[FWY]") / length if length else 0.0

    if protein_type == "enzyme":
        return 0.8 if hydrophobic > 0.4 else 0.6
    if protein_type == "kinase":
        return 0.9 if charged > 0.2 else 0.7
    if protein_type == "receptor":
        return 0.8 if aromatic > 0.1 else 0.6
    if protein_type == "antibody":
        return 0.9 if charged > 0.25 else 0.5
    return 0.5


def _signed_remainder(value: int, modulus: int) -> int:
    # Remainder takes the sign of the dividend
    return int(math.fmod(value, modulus))


class ReferencePredictionService:
    """Predicts pKd by weighting the nearest reference complexes."""

    def __init__(self, reference_set: Optional[Sequence[ReferenceEntry]] = None):
        self._reference_set = list(reference_set or REFERENCE_SET)

    def similarity(self, formula: str, sequence: str, entry: ReferenceEntry) -> float:
        """
        Similarity of a ligand/sequence pair to a reference complex.

        Returns:
            0.3 hash + 0.25 weight + 0.25 functional group + 0.2 protein class
        """
        mixed = djb2_hash(formula) + djb2_hash(sequence) - djb2_hash(entry.ligand + entry.protein)
        hash_similarity = 1 - abs(_signed_remainder(mixed, 1000)) / 1000

        return (
            hash_similarity * 0.3
            + weight_similarity(formula, entry.ligand) * 0.25
            + functional_similarity(formula, entry.ligand) * 0.25
            + protein_type_weight(sequence, entry.protein_type) * 0.2
        )

    def nearest(
        self, formula: str, sequence: str
    ) -> List[Tuple[ReferenceEntry, float]]:
        """Reference entries with their similarity, most similar first."""
        scored = [
            (entry, self.similarity(formula, sequence, entry))
            for entry in self._reference_set
        ]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return scored[:NEIGHBOUR_COUNT]

    def predict(
        self,
        formula: str,
        sequence: str,
        scheme: ReferenceScheme = ReferenceScheme.DECAY,
    ) -> ReferencePrediction:
        """
        Predict pKd for a ligand against a receptor sequence.

        Args:
            formula: Ligand formula text
            sequence: Bare receptor sequence (may be empty)
            scheme: Rank weighting of the neighbours

        Returns:
            ReferencePrediction clamped to [1, 10] pKd
        """
        params = scheme.parameters
        rank_weight = _RANK_WEIGHTS[scheme]
        neighbours = self.nearest(formula, sequence)

        if scheme is ReferenceScheme.DECAY:
            weighted = sum(
                entry.affinity * params.scale * rank_weight(i) * similarity
                for i, (entry, similarity) in enumerate(neighbours)
            )
        else:
            weighted = sum(
                entry.affinity * params.scale * rank_weight(i)
                for i, (entry, _) in enumerate(neighbours)
            )
        weighted /= sum(rank_weight(i) for i in range(len(neighbours)))

        key_hash = djb2_hash(f"{formula}_{sequence}_{scheme.value}")
        modulus = params.variation_modulus
        variation = ((key_hash % modulus) / (modulus / 2) - 1) * params.variation_amplitude

        low, high = PKD_RANGE
        affinity = max(low, min(high, weighted + variation))

        mean_similarity = sum(s for _, s in neighbours) / len(neighbours)
        confidence = math.floor(
            params.confidence_base + mean_similarity * params.confidence_span + 0.5
        )

        prediction = ReferencePrediction(
            affinity_score=round_half_up(affinity),
            confidence=int(confidence),
            scheme=params.label,
            neighbours=tuple(
                f"{entry.protein}: {entry.affinity} pKd"
                for entry, _ in neighbours[:SUMMARY_COUNT]
            ),
            compound_id=compound_identifier(formula),
        )
        logger.debug(f"Reference prediction for {formula!r}: {prediction.affinity_score}")
        return prediction
