"""Binomial distribution sampler."""

from __future__ import annotations

import math
import numbers
import warnings
from dataclasses import dataclass

from torch import Tensor

from torchvariates.special_functions import log_gamma

from .._exceptions import DomainError, PrecisionWarning
from .._random_source import RandomSource
from ._binomial_log_probability_mass import (
    _log_probability_mass,
    binomial_log_probability_mass,
)

# Expected values below this are sampled by simulating every trial.
_DIRECT_SIMULATION_THRESHOLD = 25.0

# Scales the Lorentzian proposal so it dominates the binomial mass.
_ENVELOPE = 1.2

_MAX_EXACT_FLOAT_INTEGER = 2**53


def _validate_trials(n) -> int:
    if isinstance(n, Tensor):
        if n.numel() != 1 or n.is_floating_point() or n.is_complex():
            raise TypeError(
                f"n must be a single integer, got tensor of dtype {n.dtype} "
                f"and shape {tuple(n.shape)}"
            )
        n = n.item()

    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")

    n = int(n)
    if n < 0:
        raise DomainError(f"n must be non-negative, got {n}")

    if n > _MAX_EXACT_FLOAT_INTEGER:
        warnings.warn(
            f"n = {n} exceeds 2**53; trial counts are no longer exactly "
            f"representable in float64 and the rejection sampler loses "
            f"precision.",
            PrecisionWarning,
            stacklevel=4,
        )

    return n


def _validate_probability(p) -> float:
    if isinstance(p, Tensor):
        if p.numel() != 1:
            raise TypeError(
                f"p must be a single value, got tensor of shape "
                f"{tuple(p.shape)}"
            )
        p = p.item()

    p = float(p)
    if not p > 0.0:
        raise DomainError(f"p must be greater than 0, got {p}")
    if not p < 1.0:
        raise DomainError(f"p must be less than 1, got {p}")

    return p


def _sample_direct(n: int, p: float, source: RandomSource) -> int:
    successes = 0
    for _ in range(n):
        if source.bernoulli(p):
            successes += 1
    return successes


def _sample_rejection(n: int, p: float, source: RandomSource) -> int:
    float_n = float(n)
    expected = float_n * p
    q = 1.0 - p

    log_factorial_n = log_gamma(float_n + 1.0)
    log_p = math.log(p)
    log_q = math.log(q)
    sq = math.sqrt(2.0 * expected * q)

    while True:
        # Lorentzian proposal f(x) ~ 1 / (1 + x^2), centred on the mean.
        while True:
            deviate = math.tan(math.pi * source.uniform())
            candidate = expected + sq * deviate
            if 0.0 <= candidate < float_n + 1.0:
                break

        k = math.floor(candidate)

        log_mass = _log_probability_mass(
            float(k), float_n, log_factorial_n, log_p, log_q
        )

        # Target mass over the unnormalised proposal density.
        weight = (
            math.exp(log_mass) * sq * _ENVELOPE * (1.0 + deviate * deviate)
        )

        if weight >= source.uniform():
            return k


@dataclass(frozen=True)
class Binomial:
    r"""The binomial distribution :math:`\mathrm{Binomial}(n, p)`.

    Number of successes in ``n`` independent trials that each succeed with
    probability ``p``:

    .. math::
        P(X = k) = \binom{n}{k} p^k (1-p)^{n-k}, \quad 0 \le k \le n

    Parameters
    ----------
    n : int
        Number of trials. Must be a non-negative integer.
    p : float
        Probability of success, in the open interval (0, 1).

    Raises
    ------
    DomainError
        If ``p <= 0``, ``p >= 1``, ``p`` is NaN, or ``n < 0``.
    TypeError
        If ``n`` is not an integer.

    Warns
    -----
    PrecisionWarning
        If ``n`` exceeds :math:`2^{53}`.

    Notes
    -----
    Instances are immutable; :meth:`sample` keeps no state between calls,
    so one instance can be shared as long as every caller brings its own
    random source.

    Examples
    --------
    >>> binomial = Binomial(20, 0.3)
    >>> source = GeneratorRandomSource(torch.Generator().manual_seed(0))
    >>> 0 <= binomial.sample(source) <= 20
    True
    """

    n: int
    p: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "n", _validate_trials(self.n))
        object.__setattr__(self, "p", _validate_probability(self.p))

    @property
    def mean(self) -> float:
        """Expected number of successes, ``n * p``."""
        return self.n * self.p

    @property
    def variance(self) -> float:
        """Variance, ``n * p * (1 - p)``."""
        return self.n * self.p * (1.0 - self.p)

    def log_prob(self, k):
        """Log probability mass at ``k``.

        See :func:`binomial_log_probability_mass`.
        """
        return binomial_log_probability_mass(k, self.n, self.p)

    def sample(self, source: RandomSource) -> int:
        r"""Draw one variate.

        Parameters
        ----------
        source : RandomSource
            Caller-owned randomness. Consumes a variable number of draws.

        Returns
        -------
        int
            Number of successes in ``[0, n]``.

        Notes
        -----
        The distribution is symmetric under :math:`p \to 1 - p`,
        :math:`k \to n - k`, so sampling works with
        :math:`p' = \min(p, 1 - p)` and flips the result back. When the
        expected value :math:`n p'` is below 25 every trial is simulated;
        otherwise a rejection method with a Lorentzian proposal of scale
        :math:`\sqrt{2 n p' (1 - p')}` is used. The rejection loop has no
        iteration bound; it ends after a geometric number of attempts.
        """
        p = self.p if self.p <= 0.5 else 1.0 - self.p

        expected = self.n * p

        if expected < _DIRECT_SIMULATION_THRESHOLD:
            result = _sample_direct(self.n, p, source)
        else:
            result = _sample_rejection(self.n, p, source)

        if p != self.p:
            return self.n - result

        return result


__all__ = ["Binomial"]
