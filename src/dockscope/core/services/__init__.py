"""Core modelling services."""

from .geometry_service import GeometryService
from .descriptor_service import DescriptorService
from .interaction_service import InteractionService
from .affinity_service import AffinityService
from .receptor_service import ReceptorService
from .reference_prediction_service import ReferencePredictionService

__all__ = [
    "GeometryService",
    "DescriptorService",
    "InteractionService",
    "AffinityService",
    "ReceptorService",
    "ReferencePredictionService",
]
