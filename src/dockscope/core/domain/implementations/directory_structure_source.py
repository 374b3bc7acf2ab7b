# src/dockscope/core/domain/implementations/directory_structure_source.py
"""Structure source reading pre-computed PDB files from a directory."""

import logging
import os
from typing import Dict, Optional

from ....exceptions import StructureSourceError
from ...utils.deterministic import compound_identifier
from ..interfaces.structure_source import StructureSource

logger = logging.getLogger(__name__)


class DirectoryStructureSource(StructureSource):
    """Serves ``<compound id>.pdb`` files, the id being derived from the formula."""

    name = "directory"

    def __init__(self, data_dir: str):
        """
        Initialize source with data directory.

        Args:
            data_dir: Directory containing structure files
        """
        self._data_dir = data_dir
        self._cache: Dict[str, str] = {}

    def path_for(self, formula: str) -> str:
        return os.path.join(self._data_dir, f"{compound_identifier(formula)}.pdb")

    def fetch(self, formula: str) -> Optional[str]:
        if formula in self._cache:
            return self._cache[formula]

        file_path = self.path_for(formula)
        if not os.path.exists(file_path):
            return None

        try:
            with open(file_path, "r") as f:
                text = f.read()
        except OSError as e:
            raise StructureSourceError(f"Could not read {file_path}: {e}") from e

        if "ATOM" not in text and "HETATM" not in text:
            logger.warning(f"{file_path} contains no atom records, ignoring it")
            return None

        self._cache[formula] = text
        return text
