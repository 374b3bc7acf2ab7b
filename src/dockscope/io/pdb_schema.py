#!/usr/bin/env python3
# src/dockscope/io/pdb_schema.py

"""
Fixed-column layout of ATOM records.

Writer and reader both go through these field definitions, so anything written
can be sliced back at the same offsets.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class PDBField:
    """One fixed-width column range (0-based, end exclusive)."""

    name: str
    start: int
    end: int
    justify: str = "right"
    fmt: str = "{}"

    @property
    def width(self) -> int:
        return self.end - self.start

    def render(self, value: Any) -> str:
        """Format ``value`` to exactly ``width`` characters.

        Raises:
            ValueError: If the formatted value does not fit the column
        """
        text = self.fmt.format(value)
        if len(text) > self.width:
            raise ValueError(
                f"Value {text!r} does not fit {self.name} (width {self.width})"
            )
        return text.ljust(self.width) if self.justify == "left" else text.rjust(self.width)

    def extract(self, line: str) -> str:
        return line[self.start : self.end].strip()


@dataclass(frozen=True)
class RecordSchema:
    """Ordered fields of a record type plus its fixed line length."""

    record_name: str
    fields: Tuple[PDBField, ...]
    line_length: int

    def render(self, values: Dict[str, Any]) -> str:
        """Build one record line from field values."""
        line = [" "] * self.line_length
        line[0 : len(self.record_name)] = self.record_name
        for f in self.fields:
            line[f.start : f.end] = f.render(values[f.name])
        return "".join(line)

    def extract(self, line: str) -> Dict[str, str]:
        """Slice a record line back into raw field strings."""
        return {f.name: f.extract(line) for f in self.fields}


_COMMON_FIELDS = (
    PDBField("serial", 6, 11, fmt="{:d}"),
    PDBField("atom_name", 12, 16, justify="left"),
    PDBField("residue_name", 17, 20, justify="left"),
    PDBField("chain_id", 21, 22, justify="left"),
    PDBField("residue_id", 22, 26, fmt="{:d}"),
    PDBField("x", 30, 38, fmt="{:.3f}"),
    PDBField("y", 38, 46, fmt="{:.3f}"),
    PDBField("z", 46, 54, fmt="{:.3f}"),
    PDBField("occupancy", 54, 60, fmt="{:.2f}"),
    PDBField("temperature", 60, 66, fmt="{:.2f}"),
)

ATOM_SCHEMA = RecordSchema(
    record_name="ATOM  ",
    fields=_COMMON_FIELDS + (PDBField("element", 76, 78),),
    line_length=78,
)

PDBQT_ATOM_SCHEMA = RecordSchema(
    record_name="ATOM  ",
    fields=_COMMON_FIELDS
    + (
        PDBField("charge", 70, 76, fmt="{:.3f}"),
        PDBField("atom_type", 77, 79, justify="left"),
    ),
    line_length=79,
)

OCCUPANCY = 1.00
TEMPERATURE_FACTOR = 20.00
