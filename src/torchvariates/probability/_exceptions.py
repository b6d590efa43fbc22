"""Probability module exceptions."""

__all__ = ["ProbabilityError", "DomainError", "PrecisionWarning"]


class ProbabilityError(ValueError):
    """Base exception for probability module errors."""

    pass


class DomainError(ProbabilityError):
    """Raised when input is outside the valid domain."""

    pass


class PrecisionWarning(UserWarning):
    """Warning when parameters exceed the exactly representable float64 range."""

    pass
