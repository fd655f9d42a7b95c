from __future__ import annotations

import numpy as np
import pytest

from metaheuristics.foundation.exceptions import ConfigurationError, GeneratorNotInitializedError
from metaheuristics.foundation.rng import DEFAULT_SEED, ContinuousRandom, DiscreteRandom, RandomEngine


def test_engine_starts_from_default_seed():
    engine = RandomEngine()
    assert engine.seed_value == DEFAULT_SEED
    a = RandomEngine().generator.random(5)
    b = RandomEngine().generator.random(5)
    assert np.array_equal(a, b)


def test_engine_seed_without_entropy_uses_os_entropy():
    engine = RandomEngine()
    engine.seed()
    assert engine.seed_value is None
    assert "os-entropy" in repr(engine)


def test_engine_explicit_seed_is_reproducible():
    a = RandomEngine()
    b = RandomEngine()
    a.seed(42)
    b.seed(42)
    assert np.array_equal(a.generator.random(4), b.generator.random(4))


def test_discrete_uniform_is_inclusive():
    rng = DiscreteRandom()
    rng.init_uniform(0, 2)
    draws = {rng.get_uniform() for _ in range(500)}
    assert draws == {0, 1, 2}


def test_discrete_uniform_single_point_range():
    rng = DiscreteRandom()
    rng.init_uniform(3, 3)
    assert all(rng.get_uniform() == 3 for _ in range(10))


def test_continuous_uniform_is_half_open():
    rng = ContinuousRandom()
    rng.init_uniform(0.0, 1.0)
    draws = rng.uniform_array(2000)
    assert draws.min() >= 0.0
    assert draws.max() < 1.0
    assert isinstance(rng.get_uniform(), float)


def test_binomial_draws():
    discrete = DiscreteRandom()
    discrete.init_binomial(10, 0.5)
    value = discrete.get_binomial()
    assert isinstance(value, int)
    assert 0 <= value <= 10

    continuous = ContinuousRandom()
    continuous.init_binomial(4, 1.0)
    assert continuous.get_binomial() == 4.0


def test_drawing_before_init_raises():
    rng = DiscreteRandom()
    with pytest.raises(GeneratorNotInitializedError) as excinfo:
        rng.get_uniform()
    assert "init_uniform" in str(excinfo.value)
    with pytest.raises(GeneratorNotInitializedError):
        rng.get_binomial()


@pytest.mark.parametrize(
    "call",
    [
        lambda rng: rng.init_uniform(5, 1),
        lambda rng: rng.init_binomial(-1, 0.5),
        lambda rng: rng.init_binomial(3, 1.5),
    ],
)
def test_invalid_distribution_parameters(call):
    with pytest.raises(ConfigurationError):
        call(DiscreteRandom())


def test_reinit_keeps_the_stream_going():
    reference = DiscreteRandom()
    reference.init_uniform(0, 10)
    expected = [reference.get_uniform(), reference.get_uniform()]

    rng = DiscreteRandom()
    rng.init_uniform(0, 10)
    first = rng.get_uniform()
    rng.init_uniform(0, 10)
    second = rng.get_uniform()
    assert [first, second] == expected


def test_generators_share_one_engine():
    engine = RandomEngine()
    discrete = DiscreteRandom(engine)
    continuous = ContinuousRandom(engine)
    discrete.seed(7)
    continuous.init_uniform(0.0, 1.0)
    expected = np.random.default_rng(7).uniform(0.0, 1.0)
    assert continuous.get_uniform() == pytest.approx(expected)


def test_fill_uniform_writes_in_place():
    rng = ContinuousRandom()
    rng.init_uniform(0.0, 1.0)
    buffer = np.full(6, -1.0)
    rng.fill_uniform(buffer)
    assert np.all((buffer >= 0.0) & (buffer < 1.0))

    values = [0.0] * 4
    discrete = DiscreteRandom()
    discrete.init_uniform(1, 3)
    discrete.fill_uniform(values)
    assert len(values) == 4
    assert all(1 <= v <= 3 for v in values)
