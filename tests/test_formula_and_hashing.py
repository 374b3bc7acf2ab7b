"""Tests for formula tokenizing and the deterministic hash/RNG helpers."""

import pytest

from dockscope.core.utils.deterministic import (
    compound_identifier,
    djb2_hash,
    seeded_random,
    stable_hash,
)
from dockscope.core.utils.formula import count_pattern, has_double_bond, tokenize_formula


def test_tokenize_simple_formula():
    assert tokenize_formula("CCO") == ["C", "C", "O"]


def test_tokenize_two_letter_elements_and_noise():
    assert tokenize_formula("CC(=O)Cl") == ["C", "C", "O", "Cl"]
    assert tokenize_formula("c1ccccc1") == []
    assert tokenize_formula("") == []


def test_count_pattern_and_double_bond_flag():
    assert count_pattern("CCO", "C") == 2
    assert count_pattern("", "C") == 0
    assert has_double_bond("C=CO")
    assert not has_double_bond("CCO")
    assert not has_double_bond("")


class TestStableHash:
    def test_empty_string_is_zero(self):
        assert stable_hash("") == 0

    def test_known_values(self):
        assert stable_hash("a") == 97
        assert stable_hash("ab") == 97 * 31 + 98

    @pytest.mark.parametrize(
        "text", ["CCO", "il-6", "x" * 500, "CC(=O)Oc1ccccc1C(=O)O", "ligand\U0001F600"]
    )
    def test_non_negative_and_stable(self, text):
        assert stable_hash(text) >= 0
        assert stable_hash(text) == stable_hash(str(text))
        assert stable_hash(text) < 2**31 + 1

    def test_djb2(self):
        assert djb2_hash("") == 5381
        assert djb2_hash("a") == 5381 * 33 + 97
        assert djb2_hash("a much longer string to force wrapping") >= 0


class TestSeededRandom:
    def test_zero_seed(self):
        assert seeded_random(0) == 0.0

    @pytest.mark.parametrize("seed", [1, 2, 17, 3105, -42, 2**31, 123456789.5, 1e12])
    def test_range(self, seed):
        value = seeded_random(seed)
        assert 0.0 <= value < 1.0

    def test_repeatable(self):
        assert seeded_random(12345) == seeded_random(12345)
        assert seeded_random(12345) != seeded_random(12346)


def test_compound_identifier_format():
    identifier = compound_identifier("CCO")
    assert identifier.startswith("PC_")
    assert int(identifier[3:]) < 100000000
    assert identifier == compound_identifier("CCO")
