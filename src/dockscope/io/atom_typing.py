"""Partial charges and AutoDock-style type codes for PDBQT output."""

from dataclasses import replace
from typing import Dict, List, Tuple

from ..core.domain.models.atom import Atom
from ..core.domain.models.molecular_graph import MolecularGraph

POLAR_ELEMENTS = {"N", "O"}

# (element, role) -> partial charge; anything missing is 0.0
PARTIAL_CHARGES: Dict[Tuple[str, str], float] = {
    ("C", "polar"): 0.200,
    ("N", "polar"): -0.250,
    ("N", "apolar"): -0.350,
    ("O", "polar"): -0.300,
    ("O", "apolar"): -0.400,
    ("S", "apolar"): -0.100,
    ("S", "polar"): -0.050,
    ("H", "polar"): 0.200,
    ("F", "apolar"): -0.200,
    ("Cl", "apolar"): -0.100,
    ("Br", "apolar"): -0.080,
    ("I", "apolar"): -0.050,
    ("N", "backbone:N"): -0.350,
    ("C", "backbone:CA"): 0.180,
    ("C", "backbone:C"): 0.240,
    ("O", "backbone:O"): -0.270,
}

# Element -> type code, polar-bonded variant where it differs
_TYPE_CODES: Dict[str, Tuple[str, str]] = {
    "C": ("C", "C"),
    "N": ("NA", "N"),
    "O": ("OA", "OA"),
    "S": ("SA", "SA"),
    "H": ("H", "HD"),
}

# Type code -> element, for reading PDBQT back
TYPE_ELEMENTS = {"A": "C", "NA": "N", "OA": "O", "SA": "S", "HD": "H"}


def partial_charge(element: str, role: str) -> float:
    return PARTIAL_CHARGES.get((element, role), 0.0)


def type_code(element: str, polar: bool = False) -> str:
    """Two-character-max AutoDock type code for an element."""
    codes = _TYPE_CODES.get(element)
    if codes is None:
        return element[:2]
    return codes[1] if polar else codes[0]


def element_from_type(code: str) -> str:
    return TYPE_ELEMENTS.get(code, code)


def type_ligand_atoms(graph: MolecularGraph) -> List[Atom]:
    """
    Copies of the ligand atoms carrying charge and type code.

    An atom's role is ``polar`` when any bonded neighbour is N or O.
    """
    typed = []
    for atom in graph.atoms:
        polar = any(e in POLAR_ELEMENTS for e in graph.neighbor_elements(atom.atom_id))
        role = "polar" if polar else "apolar"
        typed.append(
            replace(
                atom,
                charge=partial_charge(atom.element, role),
                atom_type=type_code(atom.element, polar),
            )
        )
    return typed


def type_receptor_atoms(atoms: List[Atom]) -> List[Atom]:
    """Copies of receptor atoms typed by backbone atom name."""
    return [
        replace(
            atom,
            charge=partial_charge(atom.element, f"backbone:{atom.atom_name}"),
            atom_type=type_code(atom.element),
        )
        for atom in atoms
    ]
