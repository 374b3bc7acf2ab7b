"""Core domain models, interfaces and modelling services for ligand docking estimates."""

from .domain.models.molecular_graph import MolecularGraph
from .domain.models.descriptors import MolecularDescriptors
from .domain.models.affinity_result import AffinityResult
from .domain.interfaces.structure_source import StructureSource
from .services.geometry_service import GeometryService
from .services.descriptor_service import DescriptorService
from .services.affinity_service import AffinityService

__all__ = [
    "MolecularGraph",
    "MolecularDescriptors",
    "AffinityResult",
    "StructureSource",
    "GeometryService",
    "DescriptorService",
    "AffinityService",
]
