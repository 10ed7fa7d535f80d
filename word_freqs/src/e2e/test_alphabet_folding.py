import pytest
from freqs.alphabet import AlphabetTable, DEFAULT_TABLE
from freqs.engine import count_words
from freqs.models import Alphabet


@pytest.mark.parametrize("upper,lower", [("A", "a"), ("Z", "z"), ("А", "а"), ("Я", "я"), ("Ж", "ж")])
def test_fold_upper_to_lower(upper, lower):
    assert DEFAULT_TABLE.fold(ord(upper)) == ord(lower)


@pytest.mark.parametrize("ch", ["a", "z", "я", "1", " ", "ё", "Ё", "é", "É"])
def test_fold_leaves_others_alone(ch):
    assert DEFAULT_TABLE.fold(ord(ch)) == ord(ch)


def test_fold_is_idempotent():
    for cp in range(0, 1300):
        once = DEFAULT_TABLE.fold(cp)
        assert DEFAULT_TABLE.fold(once) == once


@pytest.mark.parametrize("ch,expected", [
    ("a", True), ("z", True), ("я", True), ("а", True),
    ("@", False), ("{", False), ("0", False), ("Ѐ", False), ("ё", False), ("é", False),
])
def test_is_alphabetic_on_folded_points(ch, expected):
    assert DEFAULT_TABLE.is_alphabetic(ord(ch)) is expected


@pytest.mark.parametrize("ch", ["[", "\\", "]", "^", "_", "`"])
def test_latin_gap_symbols_are_separators_once_folded(ch):
    folded = DEFAULT_TABLE.fold(ord(ch))
    assert not DEFAULT_TABLE.is_alphabetic(folded)


def test_table_must_be_sorted():
    latin, cyrillic = DEFAULT_TABLE.alphabets
    with pytest.raises(ValueError):
        AlphabetTable([cyrillic, latin])


def test_alphabet_bounds_validated():
    with pytest.raises(ValueError):
        Alphabet(upper_begin=100, lower_begin=90, lower_end=120)


def test_custom_table_can_add_an_alphabet():
    latin, cyrillic = DEFAULT_TABLE.alphabets
    greek = Alphabet(upper_begin=913, lower_begin=945, lower_end=970)
    table = AlphabetTable([latin, greek, cyrillic])
    report = count_words("ΑΒΓ αβγ abc".encode("utf-8"), table=table)
    assert [(c, w) for c, w in report.entries()] == [(2, "ΑΒΓ"), (1, "abc")]


def test_z_is_a_letter():
    report = count_words(b"pizza Zoo zoo")
    assert report.to_bytes() == b"2 Zoo\n1 pizza\n"
