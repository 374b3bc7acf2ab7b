# src/dockscope/core/services/batch_service.py
"""Batch docking of several ligands against one receptor."""

import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
from tqdm import tqdm

from ...config import DEFAULT_CONFIG, ModelingConfig
from ...exceptions import ConfigurationError, DockscopeError
from ..domain.models.reference import ReferenceScheme
from .pipeline_service import DockingPipeline, DockingReport

logger = logging.getLogger(__name__)

COLUMNS = [
    "ligand_name",
    "formula",
    "affinity",
    "binding_mode",
    "confidence",
    "pkd",
    "pkd_confidence",
    "scheme",
    "contacts",
    "processing_time_ms",
]


@dataclass
class LigandEntry:
    """One line of batch input: a formula and an optional display name."""

    formula: str
    name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name or self.formula[:20]


def parse_ligand_lines(text: str) -> List[LigandEntry]:
    """
    Parse batch input with one ligand per line.

    Each non-blank line is ``formula [name...]``; everything after the first
    whitespace-separated token is joined back into the name.
    """
    ligands = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        name = " ".join(parts[1:]) or None
        ligands.append(LigandEntry(formula=parts[0], name=name))
    return ligands


def validate_batch(
    ligands: Sequence[LigandEntry], config: ModelingConfig = DEFAULT_CONFIG
) -> None:
    """
    Check batch limits.

    Raises:
        ConfigurationError: If the batch is empty, too large or holds a
            formula shorter than the minimum length
    """
    if not ligands:
        raise ConfigurationError("No ligands found in batch input")
    if len(ligands) > config.max_batch_ligands:
        raise ConfigurationError(
            f"Maximum {config.max_batch_ligands} ligands allowed per batch, "
            f"got {len(ligands)}"
        )
    for ligand in ligands:
        if len(ligand.formula) < config.min_formula_length:
            raise ConfigurationError(f"Invalid ligand formula: {ligand.formula}")


class BatchService:
    """Runs the docking pipeline over a list of ligands."""

    def __init__(
        self,
        pipeline: Optional[DockingPipeline] = None,
        scheme: ReferenceScheme = ReferenceScheme.DECAY,
    ):
        self.pipeline = pipeline or DockingPipeline(scheme=scheme)
        self.results: List[Dict[str, Any]] = []
        self.failures: List[str] = []

    @property
    def stats(self):
        return self.pipeline.stats

    def run(
        self,
        ligands: Sequence[LigandEntry],
        receptor_key: Optional[str] = None,
        sequence: Optional[str] = None,
        show_progress: bool = True,
    ) -> pd.DataFrame:
        """
        Dock every ligand and collect one row per success.

        Args:
            ligands: Validated ligand entries
            receptor_key: Receptor name such as ``"il-6"``
            sequence: Custom receptor sequence
            show_progress: Display a tqdm progress bar

        Returns:
            DataFrame with one row per successfully processed ligand
        """
        validate_batch(ligands, self.pipeline.config)
        logger.info(f"Starting batch of {len(ligands)} ligands")

        self.results = []
        self.failures = []
        for ligand in tqdm(ligands, desc="Docking ligands", disable=not show_progress):
            start = time.perf_counter()
            try:
                report = self.pipeline.run(ligand.formula, receptor_key, sequence)
            except (DockscopeError, ValueError) as e:
                logger.error(f"Failed to process {ligand.label}: {e}")
                self.failures.append(ligand.formula)
                continue
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.results.append(self._row(ligand, report, elapsed_ms))

        logger.info(f"Processed {len(self.results)}/{len(ligands)} ligands successfully")
        return self.to_dataframe()

    @staticmethod
    def _row(ligand: LigandEntry, report: DockingReport, elapsed_ms: float) -> Dict[str, Any]:
        reference = report.reference
        return {
            "ligand_name": ligand.name or "",
            "formula": ligand.formula,
            "affinity": report.affinity.affinity,
            "binding_mode": report.affinity.binding_mode,
            "confidence": report.affinity.confidence,
            "pkd": reference.affinity_score if reference else None,
            "pkd_confidence": reference.confidence if reference else None,
            "scheme": reference.scheme if reference else None,
            "contacts": len(report.contacts),
            "processing_time_ms": round(elapsed_ms, 3),
        }

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.results, columns=COLUMNS)

    def export_csv(self, path: str) -> str:
        """Write the collected rows to ``path`` and return it."""
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        self.to_dataframe().to_csv(path, index=False)
        logger.info(f"Wrote batch results to {path}")
        return path
