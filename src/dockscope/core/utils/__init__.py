"""Shared helpers for the modelling services."""

from .deterministic import compound_identifier, djb2_hash, seeded_random, stable_hash
from .formula import count_pattern, has_double_bond, tokenize_formula

__all__ = [
    "compound_identifier",
    "djb2_hash",
    "seeded_random",
    "stable_hash",
    "count_pattern",
    "has_double_bond",
    "tokenize_formula",
]
