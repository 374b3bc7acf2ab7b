# src/dockscope/presentation/cli/batch.py
"""Command-line interface for batch docking estimates."""

import argparse
import logging
import sys
from typing import List, Optional

from ...core.domain.models.reference import ReferenceScheme
from ...core.services.batch_service import (
    BatchService,
    parse_ligand_lines,
    validate_batch,
)
from ...exceptions import DockscopeError
from .common import add_receptor_arguments, read_sequence, setup_logging

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Estimate binding for up to 20 ligands and export a CSV table"
    )
    parser.add_argument(
        "ligand_file", help="Text file with one 'formula [name]' entry per line"
    )
    parser.add_argument("output_csv", help="Path of the CSV results table")
    add_receptor_arguments(parser)
    parser.add_argument(
        "--scheme",
        choices=[scheme.value for scheme in ReferenceScheme],
        default=ReferenceScheme.DECAY.value,
        help="Neighbour weighting of the reference-set prediction",
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the batch CLI."""
    args = setup_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        with open(args.ligand_file, "r") as f:
            ligands = parse_ligand_lines(f.read())
        validate_batch(ligands)

        service = BatchService(scheme=ReferenceScheme(args.scheme))
        service.run(
            ligands,
            receptor_key=args.receptor,
            sequence=read_sequence(args.sequence_file),
            show_progress=not args.no_progress,
        )
        service.export_csv(args.output_csv)
    except (DockscopeError, OSError) as e:
        logger.error(f"Batch processing failed: {e}")
        return 1

    print(
        f"Processed {len(service.results)}/{len(ligands)} ligands, "
        f"results written to {args.output_csv}"
    )
    logger.info("Stage timings:\n" + service.stats.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
