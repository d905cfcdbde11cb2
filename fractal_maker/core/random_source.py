import numpy

from .int32 import INT32_MIN, INT32_MAX


class RandomSource:
    """
    Source of pseudo-random integers for noise formulas.

    Passed into the catalog explicitly, so a seeded instance makes noise
    reproducible.
    """

    def __init__(self, seed=None):
        self._seed = seed
        self._rng = numpy.random.default_rng(seed)

    @property
    def seed(self):
        return self._seed

    def next_int32(self) -> int:
        return int(self._rng.integers(INT32_MIN, INT32_MAX, dtype=numpy.int32, endpoint=True))

    def next_bounded_int(self, bound: int) -> int:
        return int(self.bounded_ints(bound, ()))

    def int32s(self, shape: tuple) -> numpy.ndarray:
        return self._rng.integers(INT32_MIN, INT32_MAX, size=shape or None, dtype=numpy.int32, endpoint=True)

    def bounded_ints(self, bound: int, shape: tuple) -> numpy.ndarray:
        if bound <= 0:
            raise ValueError("Bound must be positive, got {}".format(bound))
        return self._rng.integers(0, bound, size=shape or None, dtype=numpy.int32)
