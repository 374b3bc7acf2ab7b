#!/usr/bin/env python3
# src/dockscope/config.py

"""
Modelling constants shared by the services.
"""

import math
from dataclasses import dataclass, field
from typing import Dict

GOLDEN_ANGLE_DEGREES = 137.5
HELIX_STEP = 0.3
PLACEMENT_RADIUS = 1.5

RELAXATION_ITERATIONS = 100
SPRING_CONSTANT = 0.1

CONTACT_CUTOFF = 5.0  # Angstroms
MAX_INTERACTIONS = 10

MAX_BATCH_LIGANDS = 20
MIN_FORMULA_LENGTH = 3


@dataclass(frozen=True)
class ModelingConfig:
    """Fixed parameters of the geometry, interaction and batch heuristics."""

    golden_angle: float = math.radians(GOLDEN_ANGLE_DEGREES)
    helix_step: float = HELIX_STEP
    radius: float = PLACEMENT_RADIUS
    iterations: int = RELAXATION_ITERATIONS
    spring_constant: float = SPRING_CONSTANT
    bond_lengths: Dict[int, float] = field(
        default_factory=lambda: {1: 1.54, 2: 1.34}
    )
    contact_cutoff: float = CONTACT_CUTOFF
    max_interactions: int = MAX_INTERACTIONS
    max_batch_ligands: int = MAX_BATCH_LIGANDS
    min_formula_length: int = MIN_FORMULA_LENGTH

    def ideal_length(self, bond_order: int) -> float:
        """Ideal bond length for a bond order (single bond length otherwise)."""
        return self.bond_lengths.get(bond_order, self.bond_lengths[1])


DEFAULT_CONFIG = ModelingConfig()
