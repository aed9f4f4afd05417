from __future__ import annotations

from mxm.werotracker.common.collation import collation_key


def test_accented_names_sort_in_alphabetic_position() -> None:
    names = ["Ångström Bank", "Banco Ñ", "Acme Bank", "Zeta Bank", "Érable Crédit"]
    assert sorted(names, key=collation_key) == [
        "Acme Bank",
        "Ångström Bank",
        "Banco Ñ",
        "Érable Crédit",
        "Zeta Bank",
    ]
    # raw code-point order would push accented initials to the end
    assert sorted(names)[-1] == "Érable Crédit"


def test_letters_without_decomposition_sort_before_z() -> None:
    names = [
        "Zeta Bank",
        "Øresund Bank",
        "Łódź Bank",
        "Æble Bank",
        "Oak Bank",
        "Mars Bank",
        "Kiel Bank",
        "Pine Bank",
        "Bank Nord",
    ]
    assert sorted(names, key=collation_key) == [
        "Æble Bank",
        "Bank Nord",
        "Kiel Bank",
        "Łódź Bank",
        "Mars Bank",
        "Oak Bank",
        "Øresund Bank",
        "Pine Bank",
        "Zeta Bank",
    ]


def test_case_does_not_dominate_ordering() -> None:
    assert sorted(["banque b", "Banque A", "BANQUE C"], key=collation_key) == [
        "Banque A",
        "banque b",
        "BANQUE C",
    ]


def test_ties_on_base_letters_are_broken_deterministically() -> None:
    names = ["Banco Ñ", "Banco N"]
    assert sorted(names, key=collation_key) == ["Banco N", "Banco Ñ"]
    assert sorted(reversed(names), key=collation_key) == ["Banco N", "Banco Ñ"]


def test_composed_and_decomposed_spellings_compare_equal() -> None:
    composed = "Ångström"
    decomposed = "A\u030angstro\u0308m"
    assert collation_key(composed) == collation_key(decomposed)
