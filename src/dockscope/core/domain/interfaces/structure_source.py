"""Interface for providers of pre-existing ligand structures."""

from abc import ABC, abstractmethod
from typing import Optional


class StructureSource(ABC):
    """Abstract base class for ligand structure lookups."""

    name: str = "source"

    @abstractmethod
    def fetch(self, formula: str) -> Optional[str]:
        """
        Look up structure text for a formula.

        Args:
            formula: Ligand formula text

        Returns:
            PDB text, or None when the source has no structure

        Raises:
            StructureSourceError: If the lookup itself failed
        """
        pass
