from ._log_gamma import log_gamma

__all__ = [
    "log_gamma",
]
