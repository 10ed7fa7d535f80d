import random
from freqs.engine import count_words


def _report(s: str) -> bytes:
    return count_words(s.encode("utf-8")).to_bytes()


def test_counts_then_order():
    assert _report("a a a b b") == b"3 a\n2 b\n"


def test_first_occurrence_spelling_is_rendered():
    assert _report("Cat cat dog") == b"2 Cat\n1 dog\n"
    assert _report("cat Cat dog") == b"2 cat\n1 dog\n"


def test_ties_broken_by_folded_code_points():
    assert _report("c b a") == b"1 a\n1 b\n1 c\n"
    # 'B' < 'a' as raw code points, but ties compare folded values
    assert _report("B a") == b"1 a\n1 B\n"


def test_prefix_sorts_first():
    assert _report("ab a") == b"1 a\n1 ab\n"


def test_latin_before_cyrillic_on_ties():
    assert _report("я z") == "1 z\n1 я\n".encode("utf-8")


def test_cyrillic_case_insensitive():
    assert _report("Мир мир МИР war") == "3 Мир\n1 war\n".encode("utf-8")


def test_empty_input_gives_empty_report():
    report = count_words(b"")
    assert report.to_bytes() == b""
    assert report.occurrences == 0 and report.distinct == 0


def test_no_words_only_separators():
    assert _report("123, 456 ... !?\n") == b""


def test_original_bytes_are_emitted_verbatim():
    # overlong 'a' is accepted by the decoder and re-emitted untouched
    assert count_words(b"\xc1\xa1 a").to_bytes() == b"2 \xc1\xa1\n"


def test_case_variants_give_same_ranking():
    s = "Привет мир, ПРИВЕТ World world hello Мир ok OK ok"
    a = count_words(s.encode("utf-8"))
    b = count_words(s.swapcase().encode("utf-8"))
    assert [(w.count, a.folded_word(w)) for w in a] == [(w.count, b.folded_word(w)) for w in b]


def test_sort_contract_and_totals_on_random_text():
    rng = random.Random(7)
    vocab = ["alpha", "Beta", "gamma", "дом", "Кот", "z", "zz", "ab"]
    seps = [" ", ", ", "\n", "1", "!! ", "—"]
    s = "".join(rng.choice(vocab) + rng.choice(seps) for _ in range(500))
    report = count_words(s.encode("utf-8"))

    assert sum(w.count for w in report) == report.occurrences == 500
    for x, y in zip(report.words, report.words[1:]):
        assert x.count > y.count or (x.count == y.count and report.folded_word(x) <= report.folded_word(y))


def test_entries_limit():
    report = count_words(b"a a b c")
    assert report.entries(limit=2) == [(2, "a"), (1, "b")]
    assert report.entries(limit=0) == []
