from itertools import product

import pytest

from wordgen.core.generator import CombinationGenerator, PermutationGenerator
from wordgen.core.trtable import TranslationTable


def collect(generator):
    out = []
    generator.generate(out.append)
    return out


def test_combinations_of_two_letters() -> None:
    assert collect(CombinationGenerator("AB", 2)) == ["AA", "AB", "BA", "BB"]


@pytest.mark.parametrize("alphabet,length", [("abc", 1), ("abc", 3), ("01", 4), ("xy!", 2)])
def test_combinations_match_cartesian_product_order(alphabet, length) -> None:
    expected = ["".join(p) for p in product(alphabet, repeat=length)]
    generator = CombinationGenerator(alphabet, length)
    out = collect(generator)
    assert out == expected
    assert len(set(out)) == len(alphabet) ** length == generator.get_total_count()
    assert all(len(word) == length for word in out)


def test_zero_length_emits_empty_string_once() -> None:
    assert collect(CombinationGenerator("ABC", 0)) == [""]
    assert collect(CombinationGenerator("", 0)) == [""]


def test_empty_alphabet_emits_nothing() -> None:
    generator = CombinationGenerator("", 3)
    assert collect(generator) == []
    assert generator.get_total_count() == 0


def test_prefix_is_kept_on_every_combination() -> None:
    assert collect(CombinationGenerator("xy", 1, prefix="A")) == ["Ax", "Ay"]


def test_negative_length_is_rejected() -> None:
    with pytest.raises(ValueError):
        CombinationGenerator("AB", -1)


def test_permutation_branches_on_table_entries() -> None:
    table = TranslationTable({"a": "4 @"})
    assert collect(PermutationGenerator("ab", table)) == ["4b", "@b"]


def test_permutation_of_go() -> None:
    table = TranslationTable({"g": "9 G"})
    assert collect(PermutationGenerator("go", table)) == ["9o", "Go"]


def test_permutation_is_depth_first_left_to_right() -> None:
    table = TranslationTable({"a": "a 4", "s": "s 5"})
    assert collect(PermutationGenerator("as", table)) == ["as", "a5", "4s", "45"]


def test_multi_character_alternatives_change_length() -> None:
    table = TranslationTable({"a": "/-\\", "m": "|\\/|"})
    assert collect(PermutationGenerator("ma", table)) == ["|\\/|/-\\"]


def test_permutation_count_is_product_of_branches() -> None:
    table = TranslationTable({"a": "a A 4 @", "s": "s 5", "w": "w"})
    generator = PermutationGenerator("password", table)
    out = collect(generator)
    assert generator.get_total_count() == 4 * 2 * 2 * 1 == 16
    assert len(out) == 16
    assert len(set(out)) == 16
    assert out[0] == "password"
    assert out[-1] == "p@55word"


def test_empty_table_emits_term_once() -> None:
    generator = PermutationGenerator("hunter2", TranslationTable())
    assert collect(generator) == ["hunter2"]
    assert generator.get_total_count() == 1


def test_empty_term_emits_empty_string() -> None:
    assert collect(PermutationGenerator("", TranslationTable({"a": "4"}))) == [""]


def test_empty_alternative_list_passes_character_through() -> None:
    class StubTable:
        def get(self, char):
            return () if char == "a" else None

    generator = PermutationGenerator("ab", StubTable())
    assert collect(generator) == ["ab"]
    assert generator.get_total_count() == 1
