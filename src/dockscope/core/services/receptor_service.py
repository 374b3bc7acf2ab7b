"""Service generating placeholder receptor backbones."""

import logging
import math
from typing import List, Optional, Tuple

from ..domain.models.atom import Atom
from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.receptor import ReceptorKind
from ..utils.sequence import clean_sequence, three_letter_code

logger = logging.getLogger(__name__)

MAX_SEQUENCE_RESIDUES = 200
FALLBACK_RESIDUES = 120

# Backbone atom name, element and (dx, dy) offset from the residue anchor
BACKBONE = (
    ("N", "N", 0.0, 0.0),
    ("CA", "C", 1.5, 0.5),
    ("C", "C", 2.4, 0.0),
    ("O", "O", 3.8, 0.0),
)


def backbone_atoms(
    residue: str, residue_id: int, anchor: Tuple[float, float, float]
) -> List[Atom]:
    """Four backbone atoms of one residue, numbered from ``(residue_id - 1) * 4 + 1``."""
    x, y, z = anchor
    first_id = (residue_id - 1) * len(BACKBONE) + 1
    return [
        Atom(
            atom_id=first_id + k,
            element=element,
            coordinates=(x + dx, y + dy, z),
            residue_name=residue,
            residue_id=residue_id,
            atom_name=name,
        )
        for k, (name, element, dx, dy) in enumerate(BACKBONE)
    ]


def sequence_anchor(i: int, n_residues: int) -> Tuple[float, float, float]:
    """Residue anchor cycling helix (12), strand (6) and loop (2) segments."""
    if i % 20 < 12:
        angle = math.radians(i * 100)
        return 2.3 * math.cos(angle), 2.3 * math.sin(angle), i * 1.5
    if i % 20 < 18:
        return (i % 8) * 3.5 - 14, (i // 8) * 5.0, 100 + math.sin(i * 0.5) * 2
    t = i / n_residues
    angle = t * 4 * math.pi
    return 8 * math.cos(angle), 8 * math.sin(angle), 150 + t * 20


def fallback_anchor(i: int) -> Tuple[str, Tuple[float, float, float]]:
    """Residue name and anchor of the generic 120-residue fold."""
    if i < 30:
        angle = math.radians(i * 100)
        return "ALA", (2.3 * math.cos(angle), 2.3 * math.sin(angle), i * 1.5)
    if i < 60:
        return "VAL", ((i - 30) * 3.5, math.sin((i - 30) * 0.3) * 2, 45.0)
    angle = ((i - 60) / 60) * 2 * math.pi
    return "GLY", (15 * math.cos(angle), 15 * math.sin(angle), 50 + (i - 60) * 0.5)


class ReceptorService:
    """Builds receptor structures from sequences or receptor keys."""

    def structure_from_sequence(self, sequence: str) -> MolecularGraph:
        """
        Backbone-only structure following a raw or FASTA sequence.

        Args:
            sequence: Amino acid sequence, at most the first 200 residues are used

        Returns:
            MolecularGraph with four atoms per residue and no bonds
        """
        residues = clean_sequence(sequence)[:MAX_SEQUENCE_RESIDUES]
        atoms = []
        for i, code in enumerate(residues):
            anchor = sequence_anchor(i, len(residues))
            atoms.extend(backbone_atoms(three_letter_code(code), i + 1, anchor))
        logger.debug(f"Built receptor backbone for {len(residues)} residues")
        return MolecularGraph(atoms, name="REC")

    def fallback_structure(self) -> MolecularGraph:
        atoms = []
        for i in range(FALLBACK_RESIDUES):
            residue, anchor = fallback_anchor(i)
            atoms.extend(backbone_atoms(residue, i + 1, anchor))
        return MolecularGraph(atoms, name="REC")

    def sequence_for(self, receptor_key: Optional[str]) -> str:
        """Built-in sequence of a receptor; IL-6 for unknown keys."""
        receptor = ReceptorKind.from_key(receptor_key) or ReceptorKind.IL6
        return receptor.sequence

    def build(
        self, receptor_key: Optional[str] = None, sequence: Optional[str] = None
    ) -> MolecularGraph:
        """
        Receptor structure for the given inputs.

        A custom sequence wins over the receptor key; a known key uses its
        built-in sequence; anything else gets the generic fold.
        """
        if clean_sequence(sequence):
            return self.structure_from_sequence(sequence)
        receptor = ReceptorKind.from_key(receptor_key)
        if receptor is not None:
            return self.structure_from_sequence(receptor.sequence)
        logger.info(f"No sequence for receptor {receptor_key!r}, using generic fold")
        return self.fallback_structure()
