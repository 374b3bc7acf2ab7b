# src/dockscope/core/services/structure_service.py
"""Service providing ligand structure text from a chain of sources."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ...exceptions import StructureSourceError
from ..domain.implementations.synthesized_structure_source import (
    SynthesizedStructureSource,
)
from ..domain.interfaces.structure_source import StructureSource
from ..domain.models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)


@dataclass
class StructureRecord:
    """Structure text together with the source that produced it.

    Synthesized records also carry the graph the text was written from.
    """

    text: str
    source: str
    graph: Optional[MolecularGraph] = None

    @property
    def synthesized(self) -> bool:
        return self.graph is not None


class StructureService:
    """Tries each source in order and falls back to synthesis."""

    def __init__(
        self,
        sources: Optional[Sequence[StructureSource]] = None,
        fallback: Optional[SynthesizedStructureSource] = None,
    ):
        """
        Initialize service with structure sources.

        Args:
            sources: Sources consulted in order before synthesizing
            fallback: Synthesizer used when no source has a structure
        """
        self._sources: List[StructureSource] = list(sources or [])
        self._fallback = fallback or SynthesizedStructureSource()

    def provide_ligand(self, formula: str) -> StructureRecord:
        """
        Get structure text for a ligand formula.

        Args:
            formula: Ligand formula text

        Returns:
            StructureRecord; never fails since synthesis always succeeds
        """
        for source in self._sources:
            try:
                text = source.fetch(formula)
            except StructureSourceError as e:
                logger.warning(f"Lookup in {source.name} failed for {formula}: {e}")
                continue
            if text:
                logger.info(f"Using {source.name} structure for {formula}")
                return StructureRecord(text=text, source=source.name)

        logger.debug(f"No stored structure for {formula}, synthesizing")
        graph = self._fallback.synthesize(formula)
        return StructureRecord(
            text=self._fallback.write(graph),
            source=self._fallback.name,
            graph=graph,
        )
