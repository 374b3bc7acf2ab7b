"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondType
from .molecular_graph import MolecularGraph
from .descriptors import MolecularDescriptors
from .interaction import InteractionRecord, InteractionType
from .affinity_result import AffinityResult
from .receptor import AffinityModel, IndicatorTerm, ReceptorKind, GENERIC_MODEL
from .reference import ReferenceEntry, ReferencePrediction, ReferenceScheme

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "MolecularDescriptors",
    "InteractionRecord",
    "InteractionType",
    "AffinityResult",
    "AffinityModel",
    "IndicatorTerm",
    "ReceptorKind",
    "GENERIC_MODEL",
    "ReferenceEntry",
    "ReferencePrediction",
    "ReferenceScheme",
]
