from ._binomial import Binomial
from ._binomial_log_probability_mass import binomial_log_probability_mass
from ._binomial_variates import binomial_variates

__all__ = [
    "Binomial",
    "binomial_log_probability_mass",
    "binomial_variates",
]
