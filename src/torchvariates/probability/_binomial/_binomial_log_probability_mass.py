"""Binomial log probability mass function."""

import math

import torch
from torch import Tensor

from torchvariates.special_functions import log_gamma

from .._exceptions import DomainError


def _xlogy(x: float, y: float) -> float:
    # Scalar counterpart of torch.xlogy: 0 * log(0) is 0.
    if x == 0.0:
        return 0.0
    if y == 0.0:
        return -math.inf
    return x * math.log(y)


def _log_probability_mass(
    k: float,
    n: float,
    log_factorial_n: float,
    log_p: float,
    log_q: float,
) -> float:
    # log_factorial_n, log_p and log_q are hoisted out by callers that
    # evaluate many k for the same (n, p).
    return (
        log_factorial_n
        - log_gamma(k + 1.0)
        - log_gamma(n - k + 1.0)
        + k * log_p
        + (n - k) * log_q
    )


def _as_floating_tensors(*values) -> tuple[Tensor, ...]:
    # Python scalars take the dtype of the tensor arguments.
    tensors = [value for value in values if isinstance(value, Tensor)]

    dtype = tensors[0].dtype
    for tensor in tensors[1:]:
        dtype = torch.promote_types(dtype, tensor.dtype)
    if not dtype.is_floating_point:
        dtype = torch.get_default_dtype()

    device = tensors[0].device

    return torch.broadcast_tensors(
        *(
            torch.as_tensor(value, dtype=dtype, device=device)
            for value in values
        )
    )


def binomial_log_probability_mass(k, n, p):
    r"""Log probability mass function of the binomial distribution.

    .. math::
        \log P(X = k) = \log\binom{n}{k} + k \log p + (n-k) \log(1-p)

    with the binomial coefficient evaluated in log space through
    :func:`torchvariates.special_functions.log_gamma`, so large ``n`` does
    not overflow.

    Parameters
    ----------
    k : int, float or Tensor
        Number of successes.
    n : int, float or Tensor
        Number of trials.
    p : float or Tensor
        Probability of success in (0, 1).

    Returns
    -------
    float or Tensor
        Log probability :math:`\log P(X = k)`. A ``float`` when every
        argument is a Python number, otherwise a broadcast floating tensor.

    Raises
    ------
    DomainError
        If every argument is a Python number and ``p`` is outside
        ``[0, 1]``. The tensor path returns NaN instead.

    Notes
    -----
    ``k`` outside ``[0, n]`` returns ``-inf``. Both paths treat
    :math:`0 \log 0` as 0, so ``p = 0`` and ``p = 1`` give ``0`` at the
    certain outcome and ``-inf`` elsewhere.

    Examples
    --------
    >>> binomial_log_probability_mass(3, 10, 0.3)
    -1.3211...
    >>> k = torch.arange(0, 4, dtype=torch.float64)
    >>> binomial_log_probability_mass(k, 10, 0.3)
    tensor([-3.5666, -2.1107, -1.4544, -1.3211], dtype=torch.float64)
    """
    if any(isinstance(value, Tensor) for value in (k, n, p)):
        k, n, p = _as_floating_tensors(k, n, p)

        in_support = (k >= 0) & (k <= n)
        safe_k = torch.where(in_support, k, torch.zeros_like(k))

        result = (
            log_gamma(n + 1.0)
            - log_gamma(safe_k + 1.0)
            - log_gamma(n - safe_k + 1.0)
            + torch.xlogy(safe_k, p)
            + torch.xlogy(n - safe_k, 1.0 - p)
        )

        return torch.where(
            in_support, result, torch.full_like(result, -math.inf)
        )

    k = float(k)
    n = float(n)
    p = float(p)

    if not 0.0 <= p <= 1.0:
        raise DomainError(f"p must be in [0, 1], got {p}")

    if k < 0.0 or k > n:
        return -math.inf

    return (
        log_gamma(n + 1.0)
        - log_gamma(k + 1.0)
        - log_gamma(n - k + 1.0)
        + _xlogy(k, p)
        + _xlogy(n - k, 1.0 - p)
    )
