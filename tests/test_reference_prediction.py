"""Tests for similarity-weighted reference-set prediction."""

import pytest

from dockscope.core.domain.models.reference import (
    REFERENCE_SET,
    ReferenceEntry,
    ReferenceScheme,
)
from dockscope.core.services.reference_prediction_service import (
    ReferencePredictionService,
    functional_groups,
    functional_similarity,
    protein_type_weight,
    weight_similarity,
)

ASPIRIN = "CC(=O)Oc1ccccc1C(=O)O"
SEQUENCE = "MKTAYIAKQRQISFVKSHFSRQLEERLGLIEVQAPILSRVGDGTQDNLSGAEKAVQVKVKALPDAQ"


@pytest.fixture
def service():
    return ReferencePredictionService()


def test_reference_set_size():
    assert len(REFERENCE_SET) == 20


@pytest.mark.parametrize("scheme", list(ReferenceScheme))
def test_prediction_is_bounded_and_repeatable(service, scheme):
    first = service.predict(ASPIRIN, SEQUENCE, scheme)
    second = service.predict(ASPIRIN, SEQUENCE, scheme)
    params = scheme.parameters

    assert first == second
    assert 1.0 <= first.affinity_score <= 10.0
    assert params.confidence_base <= first.confidence <= (
        params.confidence_base + params.confidence_span
    )
    assert first.scheme == params.label
    assert len(first.neighbours) == 3
    assert first.metric_type == "pKd"
    assert first.compound_id.startswith("PC_")


def test_nearest_sorted_by_similarity(service):
    neighbours = service.nearest(ASPIRIN, SEQUENCE)
    similarities = [s for _, s in neighbours]

    assert len(neighbours) == 5
    assert similarities == sorted(similarities, reverse=True)
    assert all(0.0 <= s <= 1.0 for s in similarities)


def test_empty_sequence_is_accepted(service):
    prediction = service.predict("CCO", "")
    assert 1.0 <= prediction.affinity_score <= 10.0


def test_small_reference_set():
    entries = [ReferenceEntry(6.0, "Kinase X", "CCO", "kinase")]
    prediction = ReferencePredictionService(entries).predict(
        "CCO", SEQUENCE, ReferenceScheme.HARMONIC
    )
    # 6.0 * 0.92 plus a variation of at most 0.4
    assert prediction.affinity_score == pytest.approx(5.52, abs=0.41)
    assert prediction.neighbours == ("Kinase X: 6.0 pKd",)


def test_functional_groups():
    assert functional_groups(ASPIRIN) == ["aromatic", "carboxyl"]
    assert functional_groups("CC=O") == ["carbonyl"]
    assert functional_similarity(ASPIRIN, ASPIRIN) == 1.0
    assert functional_similarity("CC", "CC") == 0.0


def test_weight_similarity():
    assert weight_similarity("CCO", "CCO") == 1.0
    assert weight_similarity("", "") == 0.0
    assert 0.0 < weight_similarity("CCO", ASPIRIN) < 1.0


def test_protein_type_weight():
    assert protein_type_weight("LLLLL", "enzyme") == 0.8
    assert protein_type_weight("GGGGG", "enzyme") == 0.6
    assert protein_type_weight("", "kinase") == 0.7
    assert protein_type_weight("DEKR", "antibody") == 0.9
    assert protein_type_weight("GGGG", "other") == 0.5


def test_to_dict(service):
    data = service.predict(ASPIRIN, SEQUENCE).to_dict()
    assert isinstance(data["neighbours"], list)
    assert data["metric_type"] == "pKd"
