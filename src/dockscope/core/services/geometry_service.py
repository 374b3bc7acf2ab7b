#!/usr/bin/env python3
# src/dockscope/core/services/geometry_service.py

"""
Service for synthesizing 3D ligand coordinates from a formula string.

Atoms are laid out along a helical golden-angle curve and consecutive atoms are
bonded; a damped spring relaxation then pulls every bond toward its ideal
length. The layout depends only on the atom count and the formula's global
double-bond flag, so equal formulas always give equal coordinates.
"""

import logging
import math
from typing import List, Optional

import numpy as np

from ...config import DEFAULT_CONFIG, ModelingConfig
from ..domain.models.atom import Atom
from ..domain.models.bond import Bond, BondType
from ..domain.models.molecular_graph import MolecularGraph
from ..utils.formula import has_double_bond, tokenize_formula

logger = logging.getLogger(__name__)


def initial_positions(
    n_atoms: int, config: ModelingConfig = DEFAULT_CONFIG
) -> np.ndarray:
    """
    Starting coordinates on the helical curve.

    Args:
        n_atoms: Number of atoms to place
        config: Curve parameters

    Returns:
        Array of shape (n_atoms, 3)
    """
    positions = np.zeros((n_atoms, 3))
    for i in range(n_atoms):
        phi = i * config.golden_angle
        h = i * config.helix_step
        positions[i] = (
            config.radius * math.cos(phi) * math.cos(h),
            config.radius * math.sin(phi) * math.cos(h),
            config.radius * math.sin(h),
        )
    return positions


def build_bonds(n_atoms: int, formula: str) -> List[Bond]:
    """Chain bonds between consecutive atoms (1-based ids).

    The bond order is a single flag for the whole molecule: any '=' in the
    formula makes every bond a double bond.
    """
    bond_type = BondType.DOUBLE if has_double_bond(formula) else BondType.SINGLE
    return [Bond(i + 1, i + 2, bond_type) for i in range(n_atoms - 1)]


def relax(
    positions: np.ndarray,
    bonds: List[Bond],
    config: ModelingConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """
    Spring relaxation of bond lengths, updating ``positions`` in place.

    Runs exactly ``config.iterations`` sweeps over the bonds. Each bond moves
    both of its atoms by half of ``(length - ideal) * spring_constant`` along
    the bond axis. Zero-length bonds are skipped for that sweep.

    Args:
        positions: Array of shape (n_atoms, 3), row i is atom id i + 1
        bonds: Bonds between atom ids
        config: Iteration count, spring constant and ideal lengths

    Returns:
        The same array, relaxed
    """
    for _ in range(config.iterations):
        for bond in bonds:
            i, j = bond.atom1_id - 1, bond.atom2_id - 1
            displacement = positions[j] - positions[i]
            length = float(np.linalg.norm(displacement))
            if length == 0.0:
                continue

            ideal = config.ideal_length(bond.bond_order)
            force = (length - ideal) * config.spring_constant
            step = displacement / length * (force / 2)

            positions[i] += step
            positions[j] -= step

    return positions


class GeometryService:
    """Builds relaxed ligand structures from formula strings."""

    def __init__(self, config: Optional[ModelingConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def synthesize(self, formula: str, name: str = "MOL") -> MolecularGraph:
        """
        Generate a relaxed 3D structure.

        Args:
            formula: Formula text; unmatched characters are ignored
            name: Residue name given to every atom

        Returns:
            MolecularGraph with one atom per element token and chain bonds
        """
        tokens = tokenize_formula(formula)
        positions = initial_positions(len(tokens), self._config)
        bonds = build_bonds(len(tokens), formula)
        relax(positions, bonds, self._config)

        atoms = [
            Atom(
                atom_id=i + 1,
                element=element,
                coordinates=tuple(float(c) for c in positions[i]),
                residue_name=name,
            )
            for i, element in enumerate(tokens)
        ]
        logger.debug(f"Synthesized {len(atoms)} atoms, {len(bonds)} bonds for {formula!r}")
        return MolecularGraph(atoms, bonds, name=name)
