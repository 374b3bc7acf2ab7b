# src/dockscope/core/services/pipeline_service.py
"""
Docking pipeline tying the modelling services together.

A run produces ligand and receptor structure text in both PDB and PDBQT
flavours, the ligand descriptors, the calibrated affinity estimate, contacts
measured between the two synthetic structures and the reference-set
prediction.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...config import DEFAULT_CONFIG, ModelingConfig
from ...exceptions import ConfigurationError
from ...io.atom_typing import type_ligand_atoms, type_receptor_atoms
from ...io.pdb_reader import parse_atom_records, parse_conect_records
from ...io.pdb_writer import PDBQTWriter, PDBWriter
from ..domain.implementations.synthesized_structure_source import (
    SynthesizedStructureSource,
)
from ..domain.interfaces.structure_source import StructureSource
from ..domain.models.affinity_result import AffinityResult
from ..domain.models.atom import Atom
from ..domain.models.bond import Bond
from ..domain.models.descriptors import MolecularDescriptors
from ..domain.models.interaction import InteractionRecord
from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.receptor import ReceptorKind
from ..domain.models.reference import ReferencePrediction, ReferenceScheme
from ..utils.benchmarking import PerformanceStats, timer
from ..utils.sequence import clean_sequence
from .affinity_service import AffinityService
from .descriptor_service import DescriptorService
from .geometry_service import GeometryService
from .interaction_service import InteractionService
from .receptor_service import ReceptorService
from .reference_prediction_service import ReferencePredictionService
from .structure_service import StructureService

logger = logging.getLogger(__name__)


@dataclass
class DockingReport:
    """Everything produced for one ligand/receptor pair."""

    formula: str
    receptor_key: Optional[str]
    ligand_pdb: str
    ligand_pdbqt: str
    receptor_pdb: str
    receptor_pdbqt: str
    structure_source: str
    descriptors: MolecularDescriptors
    affinity: AffinityResult
    contacts: Tuple[InteractionRecord, ...]
    reference: Optional[ReferencePrediction] = None
    timings: Dict[str, float] = field(default_factory=dict)

    def to_dict(self, include_structures: bool = False) -> Dict[str, Any]:
        result = {
            "formula": self.formula,
            "receptor": self.receptor_key,
            "structure_source": self.structure_source,
            "descriptors": self.descriptors.to_dict(),
            "affinity": self.affinity.to_dict(),
            "contacts": [contact.to_dict() for contact in self.contacts],
            "reference": self.reference.to_dict() if self.reference else None,
        }
        if include_structures:
            result.update(
                ligand_pdb=self.ligand_pdb,
                ligand_pdbqt=self.ligand_pdbqt,
                receptor_pdb=self.receptor_pdb,
                receptor_pdbqt=self.receptor_pdbqt,
            )
        return result


class DockingPipeline:
    """Runs every modelling stage for a ligand against a receptor."""

    def __init__(
        self,
        config: Optional[ModelingConfig] = None,
        sources: Optional[Sequence[StructureSource]] = None,
        scheme: ReferenceScheme = ReferenceScheme.DECAY,
    ):
        self.config = config or DEFAULT_CONFIG
        self.scheme = scheme
        self.stats = PerformanceStats()

        self._geometry = GeometryService(self.config)
        self._descriptors = DescriptorService()
        self._affinity = AffinityService(self._descriptors)
        self._interactions = InteractionService(self.config)
        self._receptors = ReceptorService()
        self._reference = ReferencePredictionService()
        self._structures = StructureService(
            sources, SynthesizedStructureSource(self._geometry)
        )
        self._pdb = PDBWriter()
        self._pdbqt = PDBQTWriter()

    def run(
        self,
        formula: Optional[str] = None,
        receptor_key: Optional[str] = None,
        sequence: Optional[str] = None,
        structure_text: Optional[str] = None,
    ) -> DockingReport:
        """
        Model one ligand against one receptor.

        Args:
            formula: Ligand formula text
            receptor_key: Receptor name such as ``"il-6"``
            sequence: Custom receptor sequence (raw or FASTA)
            structure_text: Ligand PDB text used instead of synthesis

        Returns:
            DockingReport for the pair

        Raises:
            ConfigurationError: If neither formula nor structure text is given
        """
        if not formula and not structure_text:
            raise ConfigurationError(
                "Either a ligand formula or ligand structure text is required"
            )
        formula = formula or ""
        run_stats = PerformanceStats()

        with timer("ligand_structure", run_stats):
            ligand, ligand_pdb, source = self._ligand_structure(formula, structure_text)

        with timer("descriptors", run_stats):
            descriptors = self._descriptors.calculate(formula)

        with timer("receptor_structure", run_stats):
            receptor = self._receptors.build(receptor_key, sequence)
            receptor_pdb = self._pdb.write(receptor)
            receptor_pdbqt = self._pdbqt.write(receptor, receptor=True)

        with timer("affinity", run_stats):
            affinity = self._affinity.predict(
                formula, receptor_key, sequence, descriptors=descriptors
            )

        with timer("contacts", run_stats):
            contacts = self._interactions.analyze(
                type_ligand_atoms(ligand), type_receptor_atoms(receptor.atoms)
            )

        reference = None
        if formula:
            with timer("reference", run_stats):
                reference = self._reference.predict(
                    formula, self._reference_sequence(receptor_key, sequence), self.scheme
                )

        ligand_pdbqt = self._pdbqt.write(
            ligand,
            rotatable_bonds=descriptors.rot_bonds,
            remarks=(f"Name = {ligand.name}",),
        )

        timings = {name: s.total_time for name, s in run_stats.stats.items()}
        for name, elapsed in timings.items():
            self.stats.add_timing(name, elapsed)

        logger.info(
            f"{formula or ligand.name} vs {receptor_key or 'generic'}: "
            f"{affinity.affinity} kcal/mol ({affinity.binding_mode}), "
            f"{len(contacts)} contacts"
        )
        return DockingReport(
            formula=formula,
            receptor_key=receptor_key,
            ligand_pdb=ligand_pdb,
            ligand_pdbqt=ligand_pdbqt,
            receptor_pdb=receptor_pdb,
            receptor_pdbqt=receptor_pdbqt,
            structure_source=source,
            descriptors=descriptors,
            affinity=affinity,
            contacts=tuple(contacts),
            reference=reference,
            timings=timings,
        )

    def _ligand_structure(
        self, formula: str, structure_text: Optional[str]
    ) -> Tuple[MolecularGraph, str, str]:
        """Ligand graph, its PDB text and the name of the source used."""
        if structure_text:
            return self._graph_from_text(structure_text), structure_text, "provided"

        record = self._structures.provide_ligand(formula)
        graph = record.graph
        if graph is None:
            graph = self._graph_from_text(record.text)
        return graph, record.text, record.source

    @staticmethod
    def _graph_from_text(text: str) -> MolecularGraph:
        """Graph from PDB text, bonds taken from CONECT records."""
        atoms: List[Atom] = parse_atom_records(text)
        known = {atom.atom_id for atom in atoms}
        pairs = set()
        for a, b in parse_conect_records(text):
            if a != b and a in known and b in known:
                pairs.add((min(a, b), max(a, b)))
        bonds = [Bond(a, b) for a, b in sorted(pairs)]
        return MolecularGraph(
            atoms, bonds, name=atoms[0].residue_name if atoms else "MOL"
        )

    def _reference_sequence(
        self, receptor_key: Optional[str], sequence: Optional[str]
    ) -> str:
        cleaned = clean_sequence(sequence) if sequence else ""
        if cleaned:
            return cleaned
        receptor = ReceptorKind.from_key(receptor_key)
        return receptor.sequence if receptor else ""
