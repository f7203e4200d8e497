import pytest

from mazegen.domain.generators import ALGORITHMS
from mazegen.domain.grid import Grid
from mazegen.utils.rng import SEED_BITS, SeededRNG, check_seed, new_seed, parse_seed, resolve_seed


def test_same_seed_same_stream():
    first = SeededRNG(5)
    second = SeededRNG(5)
    assert [first.randrange(100) for _ in range(20)] == [second.randrange(100) for _ in range(20)]
    assert [first.coin() for _ in range(20)] == [second.coin() for _ in range(20)]
    assert first.seed == 5


def test_new_seed_fits_in_64_bits():
    for _ in range(20):
        assert 0 <= new_seed() < 2 ** SEED_BITS


def test_resolve_seed_keeps_explicit_seed():
    assert resolve_seed(0) == 0
    assert resolve_seed(123) == 123
    assert resolve_seed(2 ** SEED_BITS - 1) == 2 ** SEED_BITS - 1
    assert isinstance(resolve_seed(None), int)


@pytest.mark.parametrize("seed", [-1, -7, 2 ** SEED_BITS, 2 ** 70, 1.5, "7", True])
def test_rejects_seeds_outside_64_bit_range(seed):
    with pytest.raises(ValueError, match="Seed must be"):
        check_seed(seed)
    with pytest.raises(ValueError):
        resolve_seed(seed)


@pytest.mark.parametrize("name", list(ALGORITHMS))
def test_algorithms_reject_negative_seed(name):
    grid = Grid(8, 8)
    with pytest.raises(ValueError):
        ALGORITHMS[name](grid, -7)
    assert grid.link_count() == 0


@pytest.mark.parametrize("text, expected", [("", None), ("   ", None), ("42", 42), (" 7 ", 7)])
def test_parse_seed(text, expected):
    assert parse_seed(text) == expected


@pytest.mark.parametrize("text", ["abc", "-1", "1.5", str(2 ** SEED_BITS)])
def test_parse_seed_rejects_bad_text(text):
    with pytest.raises(ValueError, match="Seed must be"):
        parse_seed(text)
