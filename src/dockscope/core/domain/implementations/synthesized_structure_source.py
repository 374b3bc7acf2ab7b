"""Structure source backed by the geometry synthesizer."""

from typing import Optional

from ...services.geometry_service import GeometryService
from ....io.pdb_writer import PDBWriter
from ..interfaces.structure_source import StructureSource
from ..models.molecular_graph import MolecularGraph


class SynthesizedStructureSource(StructureSource):
    """Always succeeds by generating coordinates from the formula."""

    name = "synthesized"

    def __init__(self, geometry_service: Optional[GeometryService] = None):
        self._geometry = geometry_service or GeometryService()
        self._writer = PDBWriter()

    def synthesize(self, formula: str) -> MolecularGraph:
        return self._geometry.synthesize(formula)

    def write(self, graph: MolecularGraph) -> str:
        return self._writer.write(graph)

    def fetch(self, formula: str) -> str:
        return self.write(self.synthesize(formula))
