#!/usr/bin/env python3
# src/dockscope/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum


class BondType(Enum):
    """Bond types produced by the synthesizer."""

    SINGLE = 1
    DOUBLE = 2

    @classmethod
    def from_order(cls, order: int) -> "BondType":
        return cls.DOUBLE if order == 2 else cls.SINGLE


@dataclass(frozen=True)
class Bond:
    """Represents a chemical bond between two atoms (1-based atom ids)."""

    atom1_id: int
    atom2_id: int
    bond_type: BondType = BondType.SINGLE

    def __post_init__(self):
        if self.atom1_id == self.atom2_id:
            raise ValueError(f"Bond cannot join atom {self.atom1_id} to itself")

    @property
    def bond_order(self) -> int:
        return self.bond_type.value
