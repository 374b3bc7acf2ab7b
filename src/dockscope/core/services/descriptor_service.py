"""Service computing formula-derived descriptors."""

import logging
import math

from ..domain.models.descriptors import MolecularDescriptors
from ..utils.formula import count_pattern, tokenize_formula

logger = logging.getLogger(__name__)

ATOMIC_MASSES = {
    "H": 1.008,
    "C": 12.011,
    "N": 14.007,
    "O": 15.999,
    "F": 18.998,
    "P": 30.974,
    "S": 32.06,
    "Cl": 35.45,
    "Br": 79.904,
    "I": 126.90,
}
DEFAULT_MASS = ATOMIC_MASSES["C"]


def round_half_up(value: float, digits: int = 2) -> float:
    """Round with ties toward +infinity."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def molecular_weight(formula: str) -> float:
    return sum(ATOMIC_MASSES.get(e, DEFAULT_MASS) for e in tokenize_formula(formula))


def logp(formula: str) -> float:
    """Fragment-count lipophilicity estimate.

    The halogen term counts characters of the class [FClBrI], so every 'C',
    'l', 'B' and 'r' contributes as well.
    """
    carbons = count_pattern(formula, "C")
    nitrogens = count_pattern(formula, "N")
    oxygens = count_pattern(formula, "O")
    sulfurs = count_pattern(formula, "S")
    halogens = count_pattern(formula, "[FClBrI]")
    return (
        carbons * 0.2
        - oxygens * 0.5
        - nitrogens * 0.3
        + sulfurs * 0.1
        + halogens * 0.4
    )


def tpsa(formula: str) -> float:
    return count_pattern(formula, "O") * 20.2 + count_pattern(formula, "N") * 11.7


def rotatable_bonds(formula: str) -> int:
    single_bonds = count_pattern(formula, "-")
    terminal = count_pattern(formula, "[CH3]")
    return max(0, single_bonds - terminal)


class DescriptorService:
    """Derives MolecularDescriptors from a formula string."""

    def calculate(self, formula: str) -> MolecularDescriptors:
        """
        Compute all eight descriptors.

        Args:
            formula: Formula text; empty or unparseable text gives zeros

        Returns:
            MolecularDescriptors with fractional values rounded to 2 decimals
        """
        formula = formula or ""
        elements = tokenize_formula(formula)

        descriptors = MolecularDescriptors(
            molecular_weight=round_half_up(molecular_weight(formula)),
            logp=round_half_up(logp(formula)),
            hbd_count=count_pattern(formula, "[OH]") + count_pattern(formula, "NH"),
            hba_count=count_pattern(formula, "[NO]"),
            tpsa=round_half_up(tpsa(formula)),
            rot_bonds=rotatable_bonds(formula),
            aromatic_rings=int(round_half_up(count_pattern(formula, "c") / 6, 0)),
            hetero_atoms=sum(1 for e in elements if e not in ("C", "H")),
        )
        logger.debug(f"Descriptors for {formula!r}: {descriptors}")
        return descriptors
