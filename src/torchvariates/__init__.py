"""torchvariates: PyTorch-backed random variate generation."""

from . import (
    probability,
    special_functions,
)

__all__ = [
    "probability",
    "special_functions",
]

__version__ = "0.1.0"
