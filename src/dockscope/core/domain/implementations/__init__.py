"""Structure source implementations."""

from .directory_structure_source import DirectoryStructureSource
from .synthesized_structure_source import SynthesizedStructureSource

__all__ = ["DirectoryStructureSource", "SynthesizedStructureSource"]
