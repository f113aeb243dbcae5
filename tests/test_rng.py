import pytest

from mpz import rng


def test_bounded_stays_in_range():
    values = {rng.bounded(5) for _ in range(500)}
    assert values <= set(range(5))
    assert len(values) > 1


def test_bounded_one_is_always_zero():
    assert all(rng.bounded(1) == 0 for _ in range(50))


@pytest.mark.parametrize("maximum", [0, -3])
def test_bounded_rejects_non_positive(maximum):
    with pytest.raises(ValueError):
        rng.bounded(maximum)


def test_generate_uid_is_unsigned_64_bit():
    for _ in range(100):
        uid = rng.generate_uid()
        assert 0 <= uid < 2**64


def test_generate_uid_values_differ():
    uids = {rng.generate_uid() for _ in range(200)}
    assert len(uids) == 200


def test_seed_keeps_generator_usable():
    rng.seed()
    assert 0 <= rng.bounded(10) < 10