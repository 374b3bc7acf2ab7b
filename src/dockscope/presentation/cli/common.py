# src/dockscope/presentation/cli/common.py
"""Helpers shared by the command-line entry points."""

import argparse
import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure root logging for a CLI run."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def add_receptor_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--receptor",
        default=None,
        help="Receptor key (il-6, il-10, il-17a, tnf-alpha); others use the generic model",
    )
    parser.add_argument(
        "--sequence-file",
        default=None,
        help="Raw or FASTA receptor sequence overriding the receptor's built-in one",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log progress at INFO level"
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")


def read_sequence(path: Optional[str]) -> Optional[str]:
    if not path:
        return None
    with open(path, "r") as f:
        return f.read()
