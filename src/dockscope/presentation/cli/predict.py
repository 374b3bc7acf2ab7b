# src/dockscope/presentation/cli/predict.py
"""Command-line interface for a single docking estimate."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ...core.domain.implementations.directory_structure_source import (
    DirectoryStructureSource,
)
from ...core.domain.models.reference import ReferenceScheme
from ...core.services.pipeline_service import DockingPipeline
from ...exceptions import DockscopeError
from ...io.pdb_writer import PDBWriter
from .common import add_receptor_arguments, read_sequence, setup_logging

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Estimate ligand binding to a receptor and print a JSON report"
    )
    parser.add_argument("formula", help="Ligand formula, e.g. CCO")
    add_receptor_arguments(parser)
    parser.add_argument(
        "--structure-dir",
        default=None,
        help="Directory of pre-computed ligand structures named <compound id>.pdb",
    )
    parser.add_argument("--pdb-out", default=None, help="Write the ligand PDB here")
    parser.add_argument(
        "--pdbqt-out", default=None, help="Write the ligand PDBQT here"
    )
    parser.add_argument(
        "--scheme",
        choices=[scheme.value for scheme in ReferenceScheme],
        default=ReferenceScheme.DECAY.value,
        help="Neighbour weighting of the reference-set prediction",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the prediction CLI."""
    args = setup_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    sources = []
    if args.structure_dir:
        sources.append(DirectoryStructureSource(args.structure_dir))
    pipeline = DockingPipeline(sources=sources, scheme=ReferenceScheme(args.scheme))

    try:
        report = pipeline.run(
            formula=args.formula,
            receptor_key=args.receptor,
            sequence=read_sequence(args.sequence_file),
        )
    except (DockscopeError, OSError) as e:
        logger.error(f"Prediction failed: {e}")
        return 1

    writer = PDBWriter()
    if args.pdb_out:
        writer.save(report.ligand_pdb, args.pdb_out)
    if args.pdbqt_out:
        writer.save(report.ligand_pdbqt, args.pdbqt_out)

    print(json.dumps(report.to_dict(), indent=2))
    logger.info("Stage timings:\n" + pipeline.stats.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
