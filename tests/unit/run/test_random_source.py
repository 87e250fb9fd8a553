"""
Unit tests for the sources of randomness.
"""

import pytest
from neatstep.run.random_source import NumpyRandom, uniform_range, choice_index


class TestNumpyRandom:
    """Test the numpy-backed RandomSource."""

    def test_draws_lie_in_unit_interval(self):
        rng = NumpyRandom(0)
        draws = [rng.uniform() for _ in range(1000)]
        assert all(0.0 <= d < 1.0 for d in draws)
        assert all(isinstance(d, float) for d in draws)

    def test_same_seed_same_sequence(self):
        rng_a, rng_b = NumpyRandom(42), NumpyRandom(42)
        assert [rng_a.uniform() for _ in range(10)] == [rng_b.uniform() for _ in range(10)]

    def test_different_seeds_differ(self):
        rng_a, rng_b = NumpyRandom(1), NumpyRandom(2)
        assert [rng_a.uniform() for _ in range(10)] != [rng_b.uniform() for _ in range(10)]

    def test_repr(self):
        assert repr(NumpyRandom(7)) == "NumpyRandom(seed=7)"


class TestHelpers:
    """Test uniform_range and choice_index."""

    def test_uniform_range_scales_draw(self, scripted_rng):
        assert uniform_range(scripted_rng([0.0]), -2.0, 2.0) == -2.0
        assert uniform_range(scripted_rng([0.5]), -2.0, 2.0) == 0.0
        assert uniform_range(scripted_rng([0.25]), 0.0, 4.0) == 1.0

    def test_choice_index(self, scripted_rng):
        assert choice_index(scripted_rng([0.0]), 4) == 0
        assert choice_index(scripted_rng([0.26]), 4) == 1
        assert choice_index(scripted_rng([0.99]), 4) == 3

    def test_choice_index_never_reaches_n(self, scripted_rng):
        assert choice_index(scripted_rng([1.0]), 4) == 3

    @pytest.mark.parametrize("n", [0, -1])
    def test_choice_index_without_candidates(self, scripted_rng, n):
        with pytest.raises(ValueError):
            choice_index(scripted_rng([0.5]), n)

    def test_each_helper_takes_one_draw(self, scripted_rng):
        rng = scripted_rng([0.3])
        uniform_range(rng, 0.0, 1.0)
        choice_index(rng, 3)
        assert rng.calls == 2
