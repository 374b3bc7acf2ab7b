"""Tests for placeholder receptor structures and sequence handling."""

from dockscope.core.domain.models.receptor import ReceptorKind
from dockscope.core.services.receptor_service import ReceptorService
from dockscope.core.utils.sequence import clean_sequence, three_letter_code


def test_clean_sequence_strips_fasta_header_and_whitespace():
    assert clean_sequence(">sp|P05231|IL6_HUMAN\nMNSF\nSTSA  FG\n") == "MNSFSTSAFG"
    assert clean_sequence("MK T\nA") == "MKTA"
    assert clean_sequence("") == ""
    assert clean_sequence(None) == ""


def test_three_letter_codes():
    assert three_letter_code("M") == "MET"
    assert three_letter_code("w") == "TRP"
    assert three_letter_code("*") == "ALA"


class TestReceptorService:
    def test_custom_sequence_backbone(self):
        graph = ReceptorService().build(sequence="MKT")

        assert len(graph.atoms) == 12
        assert [a.atom_name for a in graph.atoms[:4]] == ["N", "CA", "C", "O"]
        assert [graph.atoms[i].residue_name for i in (0, 4, 8)] == ["MET", "LYS", "THR"]
        assert [a.atom_id for a in graph.atoms] == list(range(1, 13))
        assert graph.bonds == []

    def test_known_receptor_uses_builtin_sequence(self):
        graph = ReceptorService().build("il-6")
        expected = min(len(ReceptorKind.IL6.sequence), 200)
        assert len(graph.atoms) == 4 * expected
        assert graph.atoms[0].residue_name == "MET"

    def test_custom_sequence_wins_over_key(self):
        graph = ReceptorService().build("il-6", ">custom\nGG\n")
        assert len(graph.atoms) == 8
        assert graph.atoms[0].residue_name == "GLY"

    def test_unknown_key_gets_generic_fold(self):
        graph = ReceptorService().build("unknown")
        residue_names = {a.residue_name for a in graph.atoms}

        assert len(graph.atoms) == 120 * 4
        assert residue_names == {"ALA", "VAL", "GLY"}

    def test_long_sequences_are_truncated(self):
        graph = ReceptorService().structure_from_sequence("A" * 250)
        assert graph.atoms[-1].residue_id == 200

    def test_sequence_for_unknown_key_defaults_to_il6(self):
        service = ReceptorService()
        assert service.sequence_for("nope") == ReceptorKind.IL6.sequence
        assert service.sequence_for("il-10") == ReceptorKind.IL10.sequence
