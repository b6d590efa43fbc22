import math

import hypothesis

from torchvariates.testing.strategies import (
    invalid_probabilities,
    probabilities,
    trial_counts,
)


class TestStrategies:
    @hypothesis.given(p=probabilities())
    def test_probabilities_open_interval(self, p):
        assert 0.0 < p < 1.0

    @hypothesis.given(p=probabilities(min_value=0.0, max_value=1.0))
    def test_probabilities_excludes_bounds(self, p):
        assert 0.0 < p < 1.0

    @hypothesis.given(p=invalid_probabilities())
    def test_invalid_probabilities(self, p):
        assert math.isnan(p) or p <= 0.0 or p >= 1.0

    @hypothesis.given(n=trial_counts())
    def test_trial_counts(self, n):
        assert isinstance(n, int)
        assert 0 <= n <= 500
