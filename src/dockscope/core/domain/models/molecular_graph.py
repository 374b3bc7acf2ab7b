#!/usr/bin/env python3
# src/dockscope/core/domain/models/molecular_graph.py

"""
Domain model representing a molecular structure as a graph.
"""

from typing import List, Optional

import networkx as nx
import numpy as np

from .atom import Atom
from .bond import Bond


class MolecularGraph:
    """Graph representation of a molecular structure."""

    def __init__(
        self,
        atoms: List[Atom],
        bonds: Optional[List[Bond]] = None,
        name: str = "MOL",
    ):
        """
        Initialize a MolecularGraph.

        Args:
            atoms: List of Atom objects
            bonds: List of Bond objects referencing atom ids
            name: Structure name used in record headers

        Raises:
            ValueError: If a bond references an atom that is not present
        """
        self.atoms = atoms
        self.bonds = bonds or []
        self.name = name

        known_ids = {atom.atom_id for atom in self.atoms}
        for bond in self.bonds:
            if bond.atom1_id not in known_ids or bond.atom2_id not in known_ids:
                raise ValueError(
                    f"Bond {bond.atom1_id}-{bond.atom2_id} references a missing atom"
                )

        self.graph = self._create_graph()

    def _create_graph(self) -> nx.Graph:
        """Create NetworkX graph with atom ids as nodes and bonds as edges."""
        G = nx.Graph()

        for atom in self.atoms:
            G.add_node(
                atom.atom_id,
                element=atom.element,
                name=atom.atom_name,
                residue_name=atom.residue_name,
                residue_id=atom.residue_id,
            )

        for bond in self.bonds:
            G.add_edge(bond.atom1_id, bond.atom2_id, order=bond.bond_order)

        return G

    def __len__(self) -> int:
        return len(self.atoms)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the graph.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self.atoms:
            return np.zeros((0, 3))
        return np.array([atom.coordinates for atom in self.atoms], dtype=float)

    def neighbors(self, atom_id: int) -> List[int]:
        """Ids of the atoms bonded to ``atom_id``."""
        return list(self.graph.neighbors(atom_id))

    def neighbor_elements(self, atom_id: int) -> List[str]:
        """Elements of the atoms bonded to ``atom_id``."""
        return [self.graph.nodes[n]["element"] for n in self.neighbors(atom_id)]
