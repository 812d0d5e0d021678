"""Tests for the seeded linear congruential generator."""

import math

import pytest

from procnoise.rng import EmptySequenceError, SeededRandom


@pytest.mark.parametrize("seed", [0, 1, 42, 12345, 2**32 - 1])
def test_same_seed_same_sequence(seed):
    """Two generators with the same seed produce identical streams."""
    a = SeededRandom(seed)
    b = SeededRandom(seed)
    assert [a.next() for _ in range(100)] == [b.next() for _ in range(100)]


def test_regression_fixture():
    """SeededRandom(12345): first draw and the following die roll are fixed."""
    rng = SeededRandom(12345)
    assert rng.next() == 87628868 / 2**32
    assert rng.state == 87628868
    assert rng.int(1, 6) == 1
    assert rng.state == 71072467


def test_next_in_unit_interval():
    """next() always returns a value in [0, 1)."""
    rng = SeededRandom(7)
    for _ in range(5000):
        value = rng.next()
        assert 0.0 <= value < 1.0


@pytest.mark.parametrize("low,high", [(1, 6), (-10, 10), (0, 0), (100, 101)])
def test_int_inclusive_range(low, high):
    """int(a, b) returns integers in [a, b] and reaches both ends."""
    rng = SeededRandom(99)
    values = [rng.int(low, high) for _ in range(2000)]
    assert all(isinstance(v, int) for v in values)
    assert min(values) == low
    assert max(values) == high


@pytest.mark.parametrize("low,high", [(0.0, 1.0), (-5.0, 5.0), (2.5, 2.75)])
def test_float_range(low, high):
    """float(a, b) stays within [a, b]."""
    rng = SeededRandom(3)
    for _ in range(2000):
        value = rng.float(low, high)
        assert low <= value <= high


def test_reseed_restarts_sequence():
    """reseed() reproduces the stream from a checkpoint."""
    rng = SeededRandom(555)
    first = [rng.next() for _ in range(10)]
    rng.reseed(555)
    assert [rng.next() for _ in range(10)] == first
    assert rng.seed == 555


def test_reseed_discards_cached_gaussian():
    """A reseed behaves like a fresh generator even mid Box-Muller pair."""
    rng = SeededRandom(5)
    first = rng.gaussian()
    rng.reseed(5)
    assert rng.gaussian() == first


def test_bool_and_sign():
    """bool() is a boolean, sign() is +1 or -1, both sides occur."""
    rng = SeededRandom(21)
    bools = {rng.bool() for _ in range(200)}
    signs = {rng.sign() for _ in range(200)}
    assert bools == {True, False}
    assert signs == {1, -1}


def test_angle_range():
    rng = SeededRandom(8)
    for _ in range(1000):
        assert 0.0 <= rng.angle() < 2 * math.pi


def test_choice_returns_member():
    """choice() only ever returns elements of the input."""
    rng = SeededRandom(17)
    items = ["a", "b", "c"]
    picks = {rng.choice(items) for _ in range(300)}
    assert picks == set(items)


def test_choice_empty_raises():
    """choice() on an empty sequence raises instead of returning a default."""
    rng = SeededRandom(17)
    with pytest.raises(EmptySequenceError):
        rng.choice([])
    with pytest.raises(ValueError):
        rng.choice(())


def test_gaussian_statistics():
    """10,000 samples of gaussian(0, 1) have mean ~0 and stddev ~1."""
    rng = SeededRandom(2024)
    samples = [rng.gaussian(0.0, 1.0) for _ in range(10_000)]
    mean = sum(samples) / len(samples)
    variance = sum((s - mean) ** 2 for s in samples) / (len(samples) - 1)
    assert abs(mean) < 0.1
    assert abs(math.sqrt(variance) - 1.0) < 0.1


def test_gaussian_uses_one_pair_per_two_calls():
    """Box-Muller consumes two uniform draws for every two samples."""
    a = SeededRandom(9)
    a.gaussian()
    a.gaussian()
    b = SeededRandom(9)
    b.next()
    b.next()
    assert a.state == b.state


def test_gaussian_mean_and_stddev_applied():
    a = SeededRandom(11)
    b = SeededRandom(11)
    for _ in range(10):
        assert a.gaussian(10.0, 2.0) == 10.0 + 2.0 * b.gaussian()


def test_in_circle_inside_unit_disk():
    rng = SeededRandom(31)
    for _ in range(2000):
        x, y = rng.in_circle()
        assert x * x + y * y <= 1.0


def test_on_circle_unit_length():
    rng = SeededRandom(32)
    for _ in range(500):
        x, y = rng.on_circle()
        assert math.isclose(math.hypot(x, y), 1.0, rel_tol=1e-12)


def test_unseeded_generator_can_be_replayed():
    """An unseeded generator exposes the entropy seed it picked."""
    rng = SeededRandom()
    assert isinstance(rng.seed, int)
    assert 0 <= rng.seed < 2**32

    replay = SeededRandom(rng.seed)
    assert [rng.next() for _ in range(20)] == [replay.next() for _ in range(20)]


def test_repr_shows_seed():
    assert repr(SeededRandom(4)) == "SeededRandom(seed=4)"
