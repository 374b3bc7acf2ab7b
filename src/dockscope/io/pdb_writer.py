"""Writers for PDB and PDBQT structure text."""

import logging
from typing import IO, Iterable, List, Optional, Sequence, Union

from ..core.domain.models.atom import Atom
from ..core.domain.models.bond import Bond
from ..core.domain.models.molecular_graph import MolecularGraph
from .atom_typing import type_ligand_atoms, type_receptor_atoms
from .pdb_schema import (
    ATOM_SCHEMA,
    OCCUPANCY,
    PDBQT_ATOM_SCHEMA,
    TEMPERATURE_FACTOR,
    RecordSchema,
)

logger = logging.getLogger(__name__)


class PDBWriter:
    """Renders a MolecularGraph as ATOM, CONECT and END records."""

    schema: RecordSchema = ATOM_SCHEMA

    def atom_values(self, atom: Atom, serial: int) -> dict:
        return {
            "serial": serial,
            "atom_name": atom.atom_name,
            "residue_name": atom.residue_name,
            "chain_id": atom.chain_id,
            "residue_id": atom.residue_id,
            "x": atom.coordinates[0],
            "y": atom.coordinates[1],
            "z": atom.coordinates[2],
            "occupancy": OCCUPANCY,
            "temperature": TEMPERATURE_FACTOR,
            "element": atom.element,
            "charge": atom.charge,
            "atom_type": atom.atom_type,
        }

    def format_atom(self, atom: Atom, serial: Optional[int] = None) -> str:
        """Format one ATOM record (serial defaults to the atom id)."""
        return self.schema.render(
            self.atom_values(atom, atom.atom_id if serial is None else serial)
        )

    @staticmethod
    def format_bond(bond: Bond) -> str:
        return f"CONECT{bond.atom1_id:>5d}{bond.atom2_id:>5d}"

    def lines(
        self,
        atoms: Sequence[Atom],
        bonds: Iterable[Bond],
        header: Optional[str] = None,
    ) -> List[str]:
        lines = []
        if header:
            lines.append(f"HEADER    {header}")
        lines.extend(self.format_atom(atom) for atom in atoms)
        lines.extend(self.format_bond(bond) for bond in bonds)
        return lines

    def write(self, graph: MolecularGraph, header: Optional[str] = None) -> str:
        """
        Serialize a structure.

        Args:
            graph: Structure to write
            header: Optional HEADER title

        Returns:
            Record text ending with ``END``
        """
        lines = self.lines(graph.atoms, graph.bonds, header)
        lines.append("END")
        logger.debug(
            f"Wrote {len(graph.atoms)} atoms and {len(graph.bonds)} bonds as PDB"
        )
        return "\n".join(lines) + "\n"

    def save(self, text: str, file: Union[str, IO[str]]) -> None:
        """Write already rendered text to a path or open handle."""
        if isinstance(file, str):
            with open(file, "w") as fhandle:
                fhandle.write(text)
        else:
            file.write(text)


class PDBQTWriter(PDBWriter):
    """PDB records extended with partial charge and type code columns."""

    schema: RecordSchema = PDBQT_ATOM_SCHEMA

    def write(
        self,
        graph: MolecularGraph,
        rotatable_bonds: int = 0,
        receptor: bool = False,
        remarks: Sequence[str] = (),
    ) -> str:
        """
        Serialize a typed structure.

        Args:
            graph: Structure to write
            rotatable_bonds: Value of the TORSDOF record (forced to 0 for receptors)
            receptor: Type atoms by backbone name instead of bonded neighbours
            remarks: Text of leading REMARK records

        Returns:
            Record text ending with ``TORSDOF n`` and ``END``
        """
        atoms = type_receptor_atoms(graph.atoms) if receptor else type_ligand_atoms(graph)
        torsions = 0 if receptor else max(0, rotatable_bonds)

        lines = [f"REMARK  {remark}" for remark in remarks]
        lines.extend(self.lines(atoms, graph.bonds))
        lines.append(f"TORSDOF {torsions}")
        lines.append("END")
        logger.debug(f"Wrote {len(atoms)} atoms as PDBQT (TORSDOF {torsions})")
        return "\n".join(lines) + "\n"
