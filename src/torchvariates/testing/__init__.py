"""Testing helpers for torchvariates samplers.

Example usage:

    import hypothesis

    from torchvariates.probability import Binomial
    from torchvariates.testing.strategies import probabilities, trial_counts

    @hypothesis.given(n=trial_counts(), p=probabilities())
    def test_support(n, p):
        ...
"""

from . import strategies

__all__ = [
    "strategies",
]
