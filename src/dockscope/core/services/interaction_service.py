#!/usr/bin/env python3
# src/dockscope/core/services/interaction_service.py

"""
Service for classifying close ligand/receptor contacts.
"""

import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from ...config import DEFAULT_CONFIG, ModelingConfig
from ..domain.models.atom import Atom
from ..domain.models.interaction import InteractionRecord, InteractionType

logger = logging.getLogger(__name__)

MAX_STRENGTH = {
    InteractionType.HYDROGEN_BOND: 1.0,
    InteractionType.SALT_BRIDGE: 0.9,
    InteractionType.PI_STACKING: 0.8,
    InteractionType.HYDROPHOBIC: 0.6,
    InteractionType.VAN_DER_WAALS: 0.3,
}

HBOND_ELEMENTS = {"O", "N"}
AROMATIC_RESIDUES = ("PHE", "TYR", "TRP")

HBOND_CUTOFF = 3.5
HYDROPHOBIC_CUTOFF = 4.0
SALT_BRIDGE_CUTOFF = 4.0
VDW_CUTOFF = 4.5


def classify_contact(
    ligand: Atom, receptor: Atom, distance: float
) -> Optional[InteractionType]:
    """
    Classify one atom pair; the first matching rule wins.

    Args:
        ligand: Ligand atom
        receptor: Receptor atom
        distance: Pair distance in Angstroms

    Returns:
        Interaction type, or None when no rule applies
    """
    if (
        ligand.element in HBOND_ELEMENTS
        and receptor.element in HBOND_ELEMENTS
        and distance < HBOND_CUTOFF
    ):
        return InteractionType.HYDROGEN_BOND
    if ligand.element == "C" and receptor.element == "C" and distance < HYDROPHOBIC_CUTOFF:
        return InteractionType.HYDROPHOBIC
    # Checked on the ligand's residue name, before the distance-gated rules below
    if any(name in ligand.residue_name for name in AROMATIC_RESIDUES):
        return InteractionType.PI_STACKING
    if distance < SALT_BRIDGE_CUTOFF and (
        (ligand.element == "N" and receptor.residue_name == "ASP")
        or (ligand.element == "O" and receptor.residue_name == "LYS")
    ):
        return InteractionType.SALT_BRIDGE
    if distance < VDW_CUTOFF:
        return InteractionType.VAN_DER_WAALS
    return None


def contact_strength(interaction_type: InteractionType, distance: float) -> float:
    return MAX_STRENGTH.get(interaction_type, 0.0) * math.exp(-distance / 2)


def distance_matrix(ligand: Sequence[Atom], receptor: Sequence[Atom]) -> np.ndarray:
    """Pairwise distances, shape (len(ligand), len(receptor))."""
    if not ligand or not receptor:
        return np.zeros((len(ligand), len(receptor)))
    lig = np.array([a.coordinates for a in ligand], dtype=float)
    rec = np.array([a.coordinates for a in receptor], dtype=float)
    return np.linalg.norm(lig[:, None, :] - rec[None, :, :], axis=2)


class InteractionService:
    """Enumerates and ranks contacts between two atom sets."""

    def __init__(self, config: Optional[ModelingConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def analyze(
        self, ligand_atoms: Sequence[Atom], receptor_atoms: Sequence[Atom]
    ) -> List[InteractionRecord]:
        """
        Find classified contacts within the cutoff.

        Args:
            ligand_atoms: Ligand atoms with coordinates
            receptor_atoms: Receptor atoms with residue names and numbers

        Returns:
            Strongest contacts first, at most ``max_interactions`` of them
        """
        distances = distance_matrix(ligand_atoms, receptor_atoms)
        records = []

        # Ligand-major order keeps ties in enumeration order after sorting
        for i, j in zip(*np.nonzero(distances <= self._config.contact_cutoff)):
            ligand, receptor = ligand_atoms[i], receptor_atoms[j]
            distance = float(distances[i, j])

            interaction_type = classify_contact(ligand, receptor, distance)
            if interaction_type is None:
                continue

            records.append(
                InteractionRecord(
                    interaction_type=interaction_type,
                    ligand_atom_label=ligand.label,
                    protein_residue_label=receptor.residue_label,
                    distance=distance,
                    strength=contact_strength(interaction_type, distance),
                )
            )

        records.sort(key=lambda r: r.strength, reverse=True)
        logger.debug(
            f"{len(records)} contacts classified from "
            f"{len(ligand_atoms)}x{len(receptor_atoms)} atom pairs"
        )
        return records[: self._config.max_interactions]
