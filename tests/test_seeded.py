from itertools import islice

from rxnsim.seeded import SeededRandom, fnv1a_32, score_from_seed, utf16_code_units


def test_fnv1a_reference_values():
    # standard FNV-1a 32-bit vectors (ASCII == UTF-16 code units)
    assert fnv1a_32("") == 0x811C9DC5
    assert fnv1a_32("a") == 0xE40C292C
    assert fnv1a_32("foobar") == 0xBF9CF968


def test_fnv1a_uses_utf16_code_units():
    assert utf16_code_units("é") == (0xE9,)
    # astral characters fold as a surrogate pair
    assert utf16_code_units("\U0001F600") == (0xD83D, 0xDE00)


def test_xorshift_step():
    rng = SeededRandom("x")
    rng.state = 1
    assert rng.next() == 0.270369
    assert rng.state == 270369


def test_xorshift_wraps_to_32_bits():
    rng = SeededRandom("x")
    rng.state = 0xFFFFFFFF
    assert rng.next() == 0.253983
    assert rng.state == 0x3E01F


def test_same_seed_same_stream():
    a = SeededRandom("CCO+O")
    b = SeededRandom("CCO+O")
    assert [a.next() for _ in range(1000)] == [b.next() for _ in range(1000)]


def test_different_seeds_diverge():
    a = list(islice(SeededRandom("CCO"), 20))
    b = list(islice(SeededRandom("CCN"), 20))
    assert a != b


def test_draws_in_unit_interval():
    for seed in ("", "CCO", "ClCCl", "[Na+].[Cl-]", "\U0001F600"):
        rng = SeededRandom(seed)
        for _ in range(1000):
            value = rng.next()
            assert 0.0 <= value < 1.0


def test_score_range():
    for i in range(500):
        score = score_from_seed(f"C{'C' * i}O", str(i))
        assert 5 <= score <= 95
    assert 5 <= score_from_seed("", "") <= 95


def test_score_repeatable():
    first = score_from_seed("CCO.O|O", "tox")
    assert all(score_from_seed("CCO.O|O", "tox") == first for _ in range(100))


def test_score_is_fresh_fold():
    assert score_from_seed("CCO", "tox") == 5 + fnv1a_32("CCO|tox") % 91


def test_lone_surrogates_fold_like_code_units():
    assert fnv1a_32("\ud800") == ((0x811C9DC5 ^ 0xD800) * 16777619) & 0xFFFFFFFF
    assert utf16_code_units("C\udc00") == (0x43, 0xDC00)
    assert 5 <= score_from_seed("C\udc00", "tox") <= 95
    assert 0.0 <= SeededRandom("\ud83d").next() < 1.0


def test_repr_shows_seed_and_state():
    rng = SeededRandom("CCO")
    assert repr(rng) == f"SeededRandom(seed='CCO', state={fnv1a_32('CCO'):#010x})"
