"""Tests for the seeded random stream."""

from designgen.rng import SeededRandom, fold_seed


class TestFoldSeed:
    def test_empty_seed_folds_to_zero(self):
        assert fold_seed("") == 0

    def test_rolling_hash(self):
        assert fold_seed("a") == 97
        assert fold_seed("ab") == 97 * 31 + 98

    def test_wraps_to_32_bits(self):
        state = fold_seed("x" * 500)
        assert 0 <= state <= 0xFFFFFFFF

    def test_uses_utf16_code_units(self):
        # U+1F600 is a surrogate pair, so it folds as two code units.
        assert fold_seed("\U0001F600") == (0xD83D * 31 + 0xDE00) & 0xFFFFFFFF


class TestSeededRandom:
    def test_first_draw_from_empty_seed(self):
        rng = SeededRandom("")
        assert rng.next() == 1013904223 / 2 ** 32

    def test_same_seed_same_sequence(self):
        a = SeededRandom("portfolio")
        b = SeededRandom("portfolio")
        assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_different_seeds_diverge(self):
        a = SeededRandom("portfolio-1")
        b = SeededRandom("portfolio-2")
        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_draws_in_unit_interval(self):
        rng = SeededRandom("range")
        for _ in range(1000):
            v = rng.next()
            assert 0.0 <= v < 1.0

    def test_draw_counter(self):
        rng = SeededRandom("count")
        rng.next()
        rng.choice(("a", "b", "c"))
        rng.chance(0.5)
        assert rng.draws == 3

    def test_index_and_choice_stay_in_bounds(self):
        rng = SeededRandom("bounds")
        options = ("a", "b", "c")
        for _ in range(200):
            assert 0 <= rng.index(7) < 7
            assert rng.choice(options) in options

