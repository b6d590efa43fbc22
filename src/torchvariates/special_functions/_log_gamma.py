import math

import torch
from torch import Tensor

from torchvariates.probability._exceptions import DomainError


def log_gamma(x):
    r"""
    Natural logarithm of the gamma function.

    Mathematical Definition
    -----------------------
    .. math::

       \ln \Gamma(x) = \ln \int_0^\infty t^{x-1} e^{-t} \, dt, \quad x > 0

    Used to evaluate :math:`\ln n!` sized terms of binomial coefficients
    without overflow.

    Parameters
    ----------
    x : float or Tensor
        Argument. Python numbers are evaluated with :func:`math.lgamma` and
        return a ``float``; tensors are evaluated elementwise with
        :func:`torch.special.gammaln`.

    Returns
    -------
    float or Tensor
        :math:`\ln \Gamma(x)`. Integer tensors are promoted to the default
        floating dtype.

    Raises
    ------
    DomainError
        If a Python number ``x`` is not strictly positive (or is NaN).
        Tensor elements outside the domain produce NaN instead.

    Examples
    --------
    >>> log_gamma(5.0)  # ln(4!)
    3.1780538303...
    >>> log_gamma(torch.tensor([1.0, 2.0, 0.5], dtype=torch.float64))
    tensor([0.0000, 0.0000, 0.5724], dtype=torch.float64)

    See Also
    --------
    torch.special.gammaln : PyTorch's log-gamma
    scipy.special.gammaln : SciPy's log-gamma
    """
    if isinstance(x, Tensor):
        if not x.is_floating_point():
            x = x.to(torch.get_default_dtype())

        return torch.where(
            x > 0,
            torch.special.gammaln(x),
            torch.full_like(x, math.nan),
        )

    x = float(x)
    if not x > 0.0:
        raise DomainError(f"log_gamma requires x > 0, got {x}")

    return math.lgamma(x)


__all__ = ["log_gamma"]
