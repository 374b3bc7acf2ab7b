"""Tests for formula-derived descriptors."""

import pytest

from dockscope.core.domain.models.descriptors import MolecularDescriptors
from dockscope.core.services.descriptor_service import (
    DescriptorService,
    logp,
    molecular_weight,
    round_half_up,
)


@pytest.fixture
def service():
    return DescriptorService()


def test_ethanol_descriptors(service):
    descriptors = service.calculate("CCO")

    assert descriptors.molecular_weight == 40.02
    assert descriptors.logp == pytest.approx(0.7)
    assert descriptors.hbd_count == 1
    assert descriptors.hba_count == 1
    assert descriptors.tpsa == pytest.approx(20.2)
    assert descriptors.rot_bonds == 0
    assert descriptors.aromatic_rings == 0
    assert descriptors.hetero_atoms == 1


def test_unrounded_weight():
    assert molecular_weight("CCO") == pytest.approx(40.021)


@pytest.mark.parametrize("element", ["C", "N", "O", "S", "Cl", "Br", "I", "Xe"])
def test_weight_increases_with_each_added_token(service, element):
    weights = [
        service.calculate("CC" + element * count).molecular_weight for count in range(4)
    ]
    assert weights == sorted(weights)
    assert len(set(weights)) == len(weights)


def test_empty_formula_gives_zeros(service):
    descriptors = service.calculate("")
    assert descriptors == MolecularDescriptors(0.0, 0.0, 0, 0, 0.0, 0, 0, 0)


def test_halogen_term_counts_characters():
    # 'C', 'C' and 'l' all match the halogen character class
    assert logp("CCl") == pytest.approx(2 * 0.2 + 3 * 0.4)


def test_rotatable_bonds_never_negative(service):
    assert service.calculate("C-C-C").rot_bonds == 0
    assert service.calculate("N-N-N").rot_bonds == 2


def test_aromatic_rings(service):
    assert service.calculate("c1ccccc1").aromatic_rings == 1
    assert service.calculate("c1ccc2ccccc2c1").aromatic_rings == 2


def test_round_half_up():
    assert round_half_up(40.021) == 40.02
    assert round_half_up(0.125) == 0.13
    assert round_half_up(-1.005) == -1.0


def test_to_dict_keys(service):
    assert set(service.calculate("CCO").to_dict()) == {
        "molecular_weight",
        "logp",
        "hbd_count",
        "hba_count",
        "tpsa",
        "rot_bonds",
        "aromatic_rings",
        "hetero_atoms",
    }
