"""Tests for ligand geometry synthesis."""

import math

import numpy as np
import pytest

from dockscope.config import DEFAULT_CONFIG
from dockscope.core.domain.models.bond import Bond, BondType
from dockscope.core.services.geometry_service import (
    GeometryService,
    build_bonds,
    initial_positions,
    relax,
)


def test_first_atom_starts_on_radius():
    positions = initial_positions(3)
    assert positions.shape == (3, 3)
    assert np.allclose(positions[0], [DEFAULT_CONFIG.radius, 0.0, 0.0])


def test_initial_positions_follow_golden_angle():
    positions = initial_positions(2)
    phi = math.radians(137.5)
    h = 0.3
    expected = [
        1.5 * math.cos(phi) * math.cos(h),
        1.5 * math.sin(phi) * math.cos(h),
        1.5 * math.sin(h),
    ]
    assert np.allclose(positions[1], expected)


def test_chain_bonds_for_ethanol():
    bonds = build_bonds(3, "CCO")
    assert [(b.atom1_id, b.atom2_id, b.bond_order) for b in bonds] == [
        (1, 2, 1),
        (2, 3, 1),
    ]


def test_double_bond_flag_is_global():
    bonds = build_bonds(3, "C=CO")
    assert all(b.bond_type is BondType.DOUBLE for b in bonds)


def test_relaxation_moves_toward_ideal_length():
    positions = np.array([[0.0, 0.0, 0.0], [5.0, 0.0, 0.0]])
    before = abs(np.linalg.norm(positions[1] - positions[0]) - 1.54)

    relax(positions, [Bond(1, 2)])

    after = abs(np.linalg.norm(positions[1] - positions[0]) - 1.54)
    assert after < before
    # Symmetric updates keep the midpoint fixed
    assert np.allclose(positions.mean(axis=0), [2.5, 0.0, 0.0])


def test_relaxation_skips_coincident_atoms():
    positions = np.zeros((2, 3))
    relax(positions, [Bond(1, 2)])
    assert np.array_equal(positions, np.zeros((2, 3)))
    assert not np.isnan(positions).any()


class TestGeometryService:
    def test_ethanol_structure(self):
        graph = GeometryService().synthesize("CCO")

        assert [a.element for a in graph.atoms] == ["C", "C", "O"]
        assert len(graph.bonds) == 2
        assert graph.graph.number_of_edges() == 2
        assert graph.neighbors(2) == [1, 3]

        coords = graph.get_coordinates()
        for bond in graph.bonds:
            length = np.linalg.norm(coords[bond.atom2_id - 1] - coords[bond.atom1_id - 1])
            assert length == pytest.approx(1.54, abs=0.01)

    def test_double_bonds_relax_to_shorter_length(self):
        graph = GeometryService().synthesize("C=C")
        coords = graph.get_coordinates()
        assert np.linalg.norm(coords[1] - coords[0]) == pytest.approx(1.34, abs=0.01)

    def test_deterministic(self):
        first = GeometryService().synthesize("CC(=O)Oc1ccccc1C(=O)O")
        second = GeometryService().synthesize("CC(=O)Oc1ccccc1C(=O)O")
        assert np.array_equal(first.get_coordinates(), second.get_coordinates())

    def test_empty_formula(self):
        graph = GeometryService().synthesize("")
        assert len(graph) == 0
        assert graph.bonds == []
        assert graph.get_coordinates().shape == (0, 3)
