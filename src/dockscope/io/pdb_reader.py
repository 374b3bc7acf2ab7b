"""Readers for the fixed-column records produced by ``pdb_writer``."""

import logging
import re
from typing import List, Tuple

from ..core.domain.models.atom import Atom
from .atom_typing import element_from_type
from .pdb_schema import ATOM_SCHEMA, PDBQT_ATOM_SCHEMA, RecordSchema

logger = logging.getLogger(__name__)

_LETTERS = re.compile(r"[A-Za-z]+")


def _element_from_name(atom_name: str) -> str:
    match = _LETTERS.search(atom_name)
    if not match:
        return ""
    letters = match.group(0)
    return letters[0].upper() + letters[1:2].lower() if len(letters) > 1 else letters


def _parse_atom_line(line: str, schema: RecordSchema) -> Atom:
    values = schema.extract(line)

    if values.get("element"):
        element = values["element"]
    elif values.get("atom_type"):
        element = element_from_type(values["atom_type"])
    else:
        element = _element_from_name(values["atom_name"])

    return Atom(
        atom_id=int(values["serial"]),
        element=element,
        coordinates=(float(values["x"]), float(values["y"]), float(values["z"])),
        residue_name=values["residue_name"],
        residue_id=int(values["residue_id"]),
        chain_id=values["chain_id"] or "A",
        atom_name=values["atom_name"],
        charge=float(values["charge"]) if values.get("charge") else 0.0,
        atom_type=values.get("atom_type", ""),
    )


def parse_atom_records(text: str, schema: RecordSchema = ATOM_SCHEMA) -> List[Atom]:
    """
    Extract atoms from ATOM/HETATM records by fixed column offsets.

    Args:
        text: Structure text
        schema: Column layout the text was written with

    Returns:
        Atoms in file order; malformed records are skipped
    """
    atoms = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.startswith(("ATOM", "HETATM")):
            continue
        try:
            atoms.append(_parse_atom_line(line, schema))
        except (ValueError, IndexError):
            logger.debug(f"Skipping malformed atom record on line {line_number}")
    return atoms


def parse_pdbqt_atoms(text: str) -> List[Atom]:
    return parse_atom_records(text, PDBQT_ATOM_SCHEMA)


def parse_conect_records(text: str) -> List[Tuple[int, int]]:
    """Bonded atom pairs from CONECT records (one pair per partner)."""
    pairs = []
    for line in text.splitlines():
        if not line.startswith("CONECT"):
            continue
        try:
            numbers = [int(x) for x in line[6:].split()]
        except ValueError:
            logger.debug(f"Skipping malformed CONECT record: {line!r}")
            continue
        if not numbers:
            continue
        pairs.extend((numbers[0], partner) for partner in numbers[1:])
    return pairs


def parse_torsdof(text: str) -> int:
    """Rotatable-bond count from a TORSDOF record, 0 when absent."""
    for line in text.splitlines():
        if line.startswith("TORSDOF"):
            parts = line.split()
            if len(parts) > 1 and parts[1].isdigit():
                return int(parts[1])
    return 0
