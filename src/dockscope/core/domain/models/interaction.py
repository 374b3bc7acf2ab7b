"""Domain model for putative non-covalent interactions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class InteractionType(Enum):
    """Interaction categories reported to consumers."""

    HYDROGEN_BOND = "hydrogen_bond"
    HYDROPHOBIC = "hydrophobic"
    PI_STACKING = "pi_stacking"
    SALT_BRIDGE = "salt_bridge"
    VAN_DER_WAALS = "van_der_waals"
    ELECTROSTATIC = "electrostatic"
    HALOGEN_BOND = "halogen_bond"


@dataclass(frozen=True)
class InteractionRecord:
    """A single ligand/receptor contact with a strength in [0, 1]."""

    interaction_type: InteractionType
    ligand_atom_label: str
    protein_residue_label: str
    distance: float
    strength: float
    angle: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        record = {
            "type": self.interaction_type.value,
            "ligand_atom": self.ligand_atom_label,
            "protein_residue": self.protein_residue_label,
            "distance": self.distance,
            "strength": self.strength,
        }
        if self.angle is not None:
            record["angle"] = self.angle
        return record
