"""Hypothesis strategies for distribution parameters."""

from ._probabilities import invalid_probabilities, probabilities
from ._trial_counts import trial_counts

__all__ = [
    "invalid_probabilities",
    "probabilities",
    "trial_counts",
]
