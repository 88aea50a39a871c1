"""Tests for arbitraries and the random source."""

import pytest

from propcheck.arbitrary import constant, integer, shrink_integer, tuple_of
from propcheck.rng import MutableRandom


def _values(shrinkables) -> list:
    return [s.value for s in shrinkables]


class TestMutableRandom:
    def test_same_seed_same_draws(self):
        a = MutableRandom(7)
        b = MutableRandom(7)

        assert [a.next_int(0, 100) for _ in range(20)] == [
            b.next_int(0, 100) for _ in range(20)
        ]

    def test_clone_is_independent(self):
        rng = MutableRandom(7)
        clone = rng.clone()

        first = [clone.next_int(0, 1000) for _ in range(5)]
        second = [rng.next_int(0, 1000) for _ in range(5)]

        assert first == second
        assert clone.seed == rng.seed

    def test_skip_matches_discarded_draws(self):
        skipped = MutableRandom(3)
        skipped.skip(5)
        drawn = MutableRandom(3)
        for _ in range(5):
            drawn._random.getrandbits(32)

        assert skipped.next_int(0, 10**6) == drawn.next_int(0, 10**6)

    def test_empty_range_raises(self):
        with pytest.raises(ValueError):
            MutableRandom(1).next_int(5, 4)


class TestIntegerArbitrary:
    def test_values_stay_in_range(self):
        rng = MutableRandom(11)
        arb = integer(-5, 5)

        values = [arb.generate(rng).value for _ in range(200)]

        assert all(-5 <= v <= 5 for v in values)

    def test_shrinks_halve_toward_zero(self):
        assert _values(shrink_integer(150, 0)) == [0, 75, 113, 132, 141, 146, 148, 149]

    def test_negative_values_shrink_toward_zero(self):
        assert _values(shrink_integer(-10, 0)) == [0, -5, -8, -9]

    def test_target_has_no_shrinks(self):
        assert _values(shrink_integer(0, 0)) == []

    def test_target_is_closest_bound(self):
        assert integer(5, 10).target == 5
        assert integer(-10, -5).target == -5
        assert integer(-10, 10).target == 0

    def test_invalid_range_raises(self):
        with pytest.raises(ValueError):
            integer(3, 1)

    def test_shrink_is_replayable(self):
        shrinkable = integer(0, 1000).generate(MutableRandom(5))

        assert _values(shrinkable.shrink()) == _values(shrinkable.shrink())


class TestTupleArbitrary:
    def test_generates_in_declared_order(self):
        arb = tuple_of(constant("a"), integer(1, 1), constant(None))

        assert arb.generate(MutableRandom(0)).value == ("a", 1, None)

    def test_shrinks_leftmost_position_first(self):
        arb = tuple_of(integer(0, 10), integer(0, 10))
        shrinkable = arb.generate(MutableRandom(1))
        first, second = shrinkable.value

        candidates = _values(shrinkable.shrink())

        expected = [(v, second) for v in _values(shrink_integer(first, 0))] + [
            (first, v) for v in _values(shrink_integer(second, 0))
        ]
        assert candidates == expected


class TestDerivedArbitraries:
    def test_map_applies_to_value_and_shrinks(self):
        arb = integer(0, 1000).map(lambda x: x * 2)
        shrinkable = arb.generate(MutableRandom(9))

        assert shrinkable.value % 2 == 0
        assert all(v % 2 == 0 for v in _values(shrinkable.shrink()))

    def test_filter_keeps_only_matching_values(self):
        arb = integer(0, 1000).filter(lambda x: x % 2 == 1)
        rng = MutableRandom(9)

        for _ in range(20):
            shrinkable = arb.generate(rng)
            assert shrinkable.value % 2 == 1
            assert all(v % 2 == 1 for v in _values(shrinkable.shrink()))

    def test_constant_never_shrinks(self):
        shrinkable = constant("x").generate(MutableRandom(0))

        assert shrinkable.value == "x"
        assert _values(shrinkable.shrink()) == []
