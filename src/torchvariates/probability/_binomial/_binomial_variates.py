from typing import Sequence

import torch
from torch import Generator, Tensor

from .._random_source import GeneratorRandomSource
from ._binomial import Binomial


def binomial_variates(
    n: int,
    p: float,
    size: Sequence[int],
    *,
    generator: Generator | None = None,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> Tensor:
    """
    Generate a tensor of independent binomial variates.

    Every element is an independent draw from ``Binomial(n, p)``, the
    number of successes in ``n`` trials with success probability ``p``.
    All draws share one :class:`GeneratorRandomSource` over ``generator``,
    so a seeded generator reproduces the whole tensor.

    Parameters
    ----------
    n : int
        Number of trials. Must be a non-negative integer.
    p : float
        Probability of success, in the open interval (0, 1).
    size : Sequence[int]
        Shape of the output tensor.
    generator : torch.Generator, optional
        A pseudorandom number generator for sampling. If None, uses the default
        generator.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Default: torch.int64.
    device : torch.device, optional
        The desired device of the returned tensor. Default: CPU.

    Returns
    -------
    Tensor
        A tensor of shape ``size`` with values in ``[0, n]``.

    Raises
    ------
    DomainError
        If ``p`` is outside (0, 1) or ``n`` is negative.
    ValueError
        If ``size`` contains negative values.

    Examples
    --------
    >>> g = torch.Generator().manual_seed(42)
    >>> x = binomial_variates(20, 0.3, [4, 100], generator=g)
    >>> x.shape
    torch.Size([4, 100])

    Reproducible draws:

    >>> g = torch.Generator().manual_seed(42)
    >>> a = binomial_variates(100, 0.5, [50], generator=g)
    >>> g = torch.Generator().manual_seed(42)
    >>> b = binomial_variates(100, 0.5, [50], generator=g)
    >>> torch.equal(a, b)
    True

    See Also
    --------
    Binomial : The underlying sampler.
    torch.binomial : PyTorch's tensor-parameter binomial sampler.
    """
    size = [int(s) for s in size]
    if any(s < 0 for s in size):
        raise ValueError(f"size must not contain negative values, got {size}")

    distribution = Binomial(n, p)

    if dtype is None:
        dtype = torch.int64

    count = 1
    for s in size:
        count *= s

    source = GeneratorRandomSource(generator)
    values = [distribution.sample(source) for _ in range(count)]

    return torch.tensor(values, dtype=dtype, device=device).reshape(size)


__all__ = ["binomial_variates"]
