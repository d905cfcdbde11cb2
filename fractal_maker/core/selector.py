import logging
import time
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait

import numpy

from . import catalog
from .random_source import RandomSource
from .utils import check_pixels, split_rows


logger = logging.getLogger(__name__)


class Selector:
    """
    Holds the currently selected formula and fills pixel buffers with it.

    `advance` and `retreat` only move the selection; the caller is expected to
    `recompute` and redraw afterwards.
    """

    def __init__(self, rng: RandomSource = None, index: int = 0, workers: int = 1):
        if workers < 1:
            raise ValueError("Number of workers must be positive, got {}".format(workers))
        self._rng = rng if rng is not None else RandomSource()
        self._index = index % catalog.FORMULA_COUNT
        self._workers = workers

    @property
    def index(self) -> int:
        return self._index

    @property
    def count(self) -> int:
        return catalog.FORMULA_COUNT

    @property
    def formula(self) -> catalog.Formula:
        return catalog.formula(self._index)

    @property
    def name(self) -> str:
        return self.formula.name

    def label(self) -> str:
        return "[{}/{}] {}".format(self._index + 1, self.count, self.name)

    def select(self, index: int) -> int:
        self._index = index % self.count
        logger.debug("Selected formula %s", self.label())
        return self._index

    def advance(self) -> int:
        return self.select(self._index + 1)

    def retreat(self) -> int:
        return self.select(self._index - 1 + self.count)

    def recompute(self, buffer: numpy.ndarray, width: int, height: int) -> numpy.ndarray:
        check_pixels(buffer, width, height)
        t = time.perf_counter()

        if self._workers > 1 and not self.formula.uses_random:
            bands = split_rows(height, self._workers)
            with ThreadPoolExecutor(max_workers=len(bands) or 1) as executor:
                futures = [
                    executor.submit(catalog.fill, self._index, buffer, width, height, self._rng, band)
                    for band in bands
                ]
                wait(futures, return_when=ALL_COMPLETED)
                for future in futures:
                    future.result()
        else:
            # noise consumes the random stream in a fixed order, so it is never split
            catalog.fill(self._index, buffer, width, height, rng=self._rng)

        logger.debug("Computed %s in %.3f s", self.label(), time.perf_counter() - t)
        return buffer
