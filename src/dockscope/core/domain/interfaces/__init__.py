"""Domain interfaces."""

from .structure_source import StructureSource

__all__ = ["StructureSource"]
