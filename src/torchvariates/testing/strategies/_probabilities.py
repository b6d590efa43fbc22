import hypothesis.strategies


def probabilities(
    min_value: float = 1e-6,
    max_value: float = 1.0 - 1e-6,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for success probabilities strictly inside (0, 1)."""
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        exclude_min=min_value <= 0.0,
        exclude_max=max_value >= 1.0,
        allow_nan=False,
        allow_infinity=False,
    )


def invalid_probabilities() -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for values outside the open interval (0, 1), NaN included."""
    return hypothesis.strategies.one_of(
        hypothesis.strategies.floats(max_value=0.0),
        hypothesis.strategies.floats(min_value=1.0),
        hypothesis.strategies.just(float("nan")),
    )
