"""Protein sequence helpers."""

import logging
from io import StringIO
from typing import Optional

from Bio import SeqIO
from Bio.Data.IUPACData import protein_letters_1to3

logger = logging.getLogger(__name__)

DEFAULT_RESIDUE = "ALA"


def clean_sequence(text: Optional[str]) -> str:
    """
    Normalise raw or FASTA-formatted sequence text.

    A leading ``>`` header line is removed; all whitespace is dropped.

    Args:
        text: Raw sequence or single-record FASTA text

    Returns:
        Bare sequence string (empty when nothing usable remains)
    """
    if not text:
        return ""

    stripped = text.strip()
    if stripped.startswith(">"):
        records = list(SeqIO.parse(StringIO(stripped), "fasta"))
        if not records:
            return ""
        if len(records) > 1:
            logger.debug(f"Using first of {len(records)} FASTA records")
        stripped = str(records[0].seq)

    return "".join(stripped.split())


def three_letter_code(residue: str) -> str:
    """Map a one-letter amino acid code to its upper-case three-letter name."""
    name = protein_letters_1to3.get(residue.upper())
    return name.upper() if name else DEFAULT_RESIDUE
