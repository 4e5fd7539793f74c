"""Random variables that feed the mobility model."""

from __future__ import annotations

import math
import random


class _RandomStream:
    """Common seeding behaviour for the variables."""

    def __init__(self, stream: int | None = None) -> None:
        self._rng = random.Random(stream)

    def set_stream(self, stream: int) -> None:
        """Reseed the variable so that its draws are reproducible."""
        self._rng = random.Random(stream)


class ConstantVariable(_RandomStream):
    """Always yields the same value."""

    def __init__(self, constant: float = 0.0, stream: int | None = None) -> None:
        super().__init__(stream)
        self.constant = constant

    def __call__(self) -> float:
        return self.constant

    def set_stream(self, stream: int) -> None:
        """Accept a stream number; the value does not depend on it."""
        super().set_stream(stream)


class UniformVariable(_RandomStream):
    """Uniformly distributed in ``[minimum, maximum)``."""

    def __init__(
        self, minimum: float = 0.0, maximum: float = 1.0, stream: int | None = None
    ) -> None:
        if minimum > maximum:
            raise ValueError(f"minimum {minimum} exceeds maximum {maximum}")
        super().__init__(stream)
        self.minimum = minimum
        self.maximum = maximum

    def __call__(self) -> float:
        return self.minimum + (self.maximum - self.minimum) * self._rng.random()

    def set_stream(self, stream: int) -> None:
        """Reseed the variable so that its draws are reproducible."""
        super().set_stream(stream)


class BoundedNormalVariable(_RandomStream):
    """Normally distributed, with draws further than ``bound`` from the mean rejected."""

    def __init__(
        self,
        mean: float = 0.0,
        variance: float = 1.0,
        bound: float = 10.0,
        stream: int | None = None,
    ) -> None:
        if variance < 0:
            raise ValueError(f"variance must not be negative, got {variance}")
        if bound < 0:
            raise ValueError(f"bound must not be negative, got {bound}")
        super().__init__(stream)
        self.mean = mean
        self.variance = variance
        self.bound = bound

    def __call__(self) -> float:
        sigma = math.sqrt(self.variance)
        while True:
            offset = self._rng.gauss(0.0, 1.0) * sigma
            if abs(offset) <= self.bound:
                return self.mean + offset

    def set_stream(self, stream: int) -> None:
        """Reseed the variable so that its draws are reproducible."""
        super().set_stream(stream)