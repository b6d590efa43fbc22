"""Randomness sources consumed by the samplers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import torch
from torch import Generator

__all__ = ["RandomSource", "GeneratorRandomSource"]


@runtime_checkable
class RandomSource(Protocol):
    """Capability interface for the randomness a sampler consumes.

    Samplers never own or seed a source; the caller passes one in for the
    duration of a draw. Sources are stateful and must not be shared between
    concurrent callers.
    """

    def bernoulli(self, p: float) -> bool:
        """Return ``True`` with probability ``p``."""
        ...

    def uniform(self) -> float:
        """Return a uniform float in ``[0, 1)``."""
        ...


class GeneratorRandomSource:
    """Random source backed by a :class:`torch.Generator`.

    Uniform float64 values are drawn with :func:`torch.rand` in blocks of
    ``buffer_size`` and handed out one at a time.

    Parameters
    ----------
    generator : torch.Generator, optional
        A pseudorandom number generator for sampling. If None, uses the
        default generator.
    buffer_size : int, optional
        Number of uniforms drawn per call to :func:`torch.rand`.
        Default: 1024.

    Examples
    --------
    >>> g = torch.Generator().manual_seed(42)
    >>> source = GeneratorRandomSource(g)
    >>> 0.0 <= source.uniform() < 1.0
    True
    """

    def __init__(
        self,
        generator: Generator | None = None,
        *,
        buffer_size: int = 1024,
    ) -> None:
        if buffer_size < 1:
            raise ValueError(
                f"buffer_size must be at least 1, got {buffer_size}"
            )

        self.generator = generator
        self.buffer_size = buffer_size

        self._buffer: list[float] = []
        self._position = 0

    def _refill(self) -> None:
        self._buffer = torch.rand(
            self.buffer_size,
            generator=self.generator,
            dtype=torch.float64,
        ).tolist()
        self._position = 0

    def uniform(self) -> float:
        if self._position >= len(self._buffer):
            self._refill()

        value = self._buffer[self._position]
        self._position += 1
        return value

    def bernoulli(self, p: float) -> bool:
        return self.uniform() < p
