"""Probability distributions: sampling and log probability mass.

Samplers draw from an injected :class:`RandomSource`, so they can be driven
by a seeded :class:`torch.Generator` or by a scripted source in tests.

Example
-------
>>> import torch
>>> from torchvariates.probability import Binomial, GeneratorRandomSource
>>>
>>> binomial = Binomial(100, 0.5)
>>> source = GeneratorRandomSource(torch.Generator().manual_seed(0))
>>> samples = [binomial.sample(source) for _ in range(1000)]
>>>
>>> # Or fill a tensor directly
>>> from torchvariates.probability import binomial_variates
>>> x = binomial_variates(100, 0.5, [1000])
"""

from ._exceptions import DomainError, PrecisionWarning, ProbabilityError
from ._random_source import GeneratorRandomSource, RandomSource
from ._binomial import (
    Binomial,
    binomial_log_probability_mass,
    binomial_variates,
)

__all__ = [
    "DomainError",
    "PrecisionWarning",
    "ProbabilityError",
    # Randomness
    "GeneratorRandomSource",
    "RandomSource",
    # Binomial distribution
    "Binomial",
    "binomial_log_probability_mass",
    "binomial_variates",
]
