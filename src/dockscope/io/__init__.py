"""Structure text input/output."""

from .pdb_schema import ATOM_SCHEMA, PDBQT_ATOM_SCHEMA, PDBField, RecordSchema
from .pdb_writer import PDBQTWriter, PDBWriter
from .pdb_reader import (
    parse_atom_records,
    parse_conect_records,
    parse_pdbqt_atoms,
    parse_torsdof,
)

__all__ = [
    "ATOM_SCHEMA",
    "PDBQT_ATOM_SCHEMA",
    "PDBField",
    "RecordSchema",
    "PDBWriter",
    "PDBQTWriter",
    "parse_atom_records",
    "parse_conect_records",
    "parse_pdbqt_atoms",
    "parse_torsdof",
]
