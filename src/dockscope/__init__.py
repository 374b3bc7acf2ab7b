"""Heuristic ligand structure synthesis, descriptors and affinity scoring."""

__version__ = "0.1.0"
