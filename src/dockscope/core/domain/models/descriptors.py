"""Domain model for formula-derived molecular descriptors."""

from dataclasses import asdict, dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class MolecularDescriptors:
    """Physicochemical estimates computed from a formula string."""

    molecular_weight: float = 0.0
    logp: float = 0.0
    hbd_count: int = 0
    hba_count: int = 0
    tpsa: float = 0.0
    rot_bonds: int = 0
    aromatic_rings: int = 0
    hetero_atoms: int = 0

    def to_dict(self) -> Dict[str, Union[int, float]]:
        return asdict(self)
