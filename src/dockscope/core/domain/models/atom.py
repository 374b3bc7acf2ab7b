#!/usr/bin/env python3
# src/dockscope/core/domain/models/atom.py

"""
Domain model representing an atom in a ligand or receptor structure.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Atom:
    """Represents an atom in a molecular structure."""

    atom_id: int
    element: str
    coordinates: Tuple[float, float, float]
    residue_name: str = "MOL"
    residue_id: int = 1
    chain_id: str = "A"
    atom_name: str = ""
    charge: float = 0.0
    atom_type: str = ""

    def __post_init__(self):
        if not self.atom_name:
            self.atom_name = self.element

    @property
    def label(self) -> str:
        """Ligand-side label such as ``O3``."""
        return f"{self.element}{self.atom_id}"

    @property
    def residue_label(self) -> str:
        """Receptor-side label such as ``ASP34``."""
        return f"{self.residue_name}{self.residue_id}"
