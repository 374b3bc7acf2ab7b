"""Core domain models and interfaces."""

from .models.atom import Atom
from .models.bond import Bond, BondType
from .models.molecular_graph import MolecularGraph
from .interfaces.structure_source import StructureSource

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "StructureSource",
]
