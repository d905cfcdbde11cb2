import unittest

import numpy

from fractal_maker.core.catalog import evaluate, FORMULA_COUNT
from fractal_maker.core.random_source import RandomSource
from fractal_maker.core.selector import Selector
from fractal_maker.core.utils import alloc_pixels


DETERMINISTIC = [i for i in range(FORMULA_COUNT) if i not in (9, 10)]


class TestSelection(unittest.TestCase):

    def test_advance_then_retreat(self):
        for index in range(FORMULA_COUNT):
            s = Selector(index=index)
            s.advance()
            s.retreat()
            assert s.index == index

    def test_full_cycle(self):
        for index in range(FORMULA_COUNT):
            s = Selector(index=index)
            for _ in range(FORMULA_COUNT):
                s.advance()
            assert s.index == index

    def test_wraparound(self):
        s = Selector(index=FORMULA_COUNT - 1)
        assert s.advance() == 0
        assert s.retreat() == FORMULA_COUNT - 1

        s = Selector()
        assert s.index == 0
        s.retreat()
        assert s.index == FORMULA_COUNT - 1

    def test_start_index_wraps(self):
        assert Selector(index=FORMULA_COUNT + 2).index == 2
        assert Selector(index=-1).index == FORMULA_COUNT - 1

    def test_select(self):
        s = Selector()
        assert s.select(13) == 13
        assert s.name == "triangle"
        assert s.select(FORMULA_COUNT) == 0

    def test_label(self):
        s = Selector()
        assert s.count == FORMULA_COUNT
        assert s.label() == "[1/15] blue square"
        s.retreat()
        assert s.label() == "[15/15] fading triangle"

    def test_invalid_workers(self):
        with self.assertRaises(ValueError):
            Selector(workers=0)


class TestRecompute(unittest.TestCase):

    def setUp(self):
        self.shape = (19, 11)
        self.width, self.height = self.shape

    def test_touches_every_pixel(self):
        for index in range(FORMULA_COUNT):
            pixels = numpy.full(self.width * self.height, 0x5A5A5A5A, dtype=numpy.int32)
            sentinel = pixels.copy()
            s = Selector(rng=RandomSource(42), index=index)
            s.recompute(pixels, self.width, self.height)
            assert pixels.size == self.width * self.height

            if index in DETERMINISTIC:
                expected = numpy.array([
                    evaluate(index, x, y, width=self.width)
                    for y in range(self.height) for x in range(self.width)
                ], dtype=numpy.int32)
                assert (pixels == expected).all(), index
            else:
                # noise may hit the sentinel by chance, but not everywhere
                assert (pixels != sentinel).any(), index

    def test_sentinel_overwritten(self):
        pixels = numpy.full(self.width * self.height, -123, dtype=numpy.int32)
        Selector(index=0).recompute(pixels, self.width, self.height)
        assert (pixels != -123).all()

    def test_noise_reproducible(self):
        for index in (9, 10):
            a = alloc_pixels(self.shape)
            b = alloc_pixels(self.shape)
            Selector(rng=RandomSource(42), index=index).recompute(a, self.width, self.height)
            Selector(rng=RandomSource(42), index=index).recompute(b, self.width, self.height)
            assert (a == b).all()

    def test_unseeded_noise_differs(self):
        a = alloc_pixels(self.shape)
        b = alloc_pixels(self.shape)
        Selector(rng=RandomSource(), index=9).recompute(a, self.width, self.height)
        Selector(rng=RandomSource(), index=9).recompute(b, self.width, self.height)
        assert (a != b).any()

    def test_parallel_matches_serial(self):
        width, height = 37, 23
        for index in range(FORMULA_COUNT):
            serial = alloc_pixels((width, height))
            parallel = alloc_pixels((width, height))
            Selector(rng=RandomSource(5), index=index).recompute(serial, width, height)
            Selector(rng=RandomSource(5), index=index, workers=4).recompute(parallel, width, height)
            assert (serial == parallel).all(), index

    def test_wrong_buffer_size(self):
        pixels = alloc_pixels((self.width, self.height + 1))
        with self.assertRaises(ValueError):
            Selector().recompute(pixels, self.width, self.height)

    def test_advance_does_not_recompute(self):
        pixels = alloc_pixels(self.shape)
        s = Selector(index=1)
        s.recompute(pixels, self.width, self.height)
        before = pixels.copy()
        s.advance()
        assert (pixels == before).all()


if __name__ == '__main__':
    unittest.main()
