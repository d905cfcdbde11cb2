"""
Catalog of pixel formulas.

Every formula maps pixel coordinates to a packed 0xAARRGGBB color using
32-bit integer arithmetic. Formulas take int32 arrays `x` and `y` (any
broadcastable shapes, 0-d for a single pixel), the image `width` and a
`RandomSource`, and return an int32 array.

Coordinates must be non-negative. The triangle formulas divide by
`(x & y) + 1` and `(~x & y) + 1`, which are only guaranteed to be non-zero
in that domain.
"""
from collections import namedtuple

import numpy

from .int32 import add, constant, mul, shl, tdiv
from .utils import check_pixels


Formula = namedtuple("Formula", ["ordinal", "name", "fn", "uses_random"])


# 255 << 24 does not fit into int32, hence the wrapped constant
OPAQUE = constant(255 << 24)

STRIPES = constant(255 << 23)


def bit_shifted_square(divisor: int, shift: int):
    if divisor == 0:
        raise ValueError("Square fractal divisor must not be zero")

    def square(x, y, width, rng):
        return shl(tdiv(x ^ y, divisor), shift)

    return square


def opaque_square(divisor: int):
    if divisor == 0:
        raise ValueError("Square fractal divisor must not be zero")

    def square(x, y, width, rng):
        return tdiv(x ^ y, divisor) ^ OPAQUE

    return square


def _shape(x, y):
    return numpy.broadcast_shapes(numpy.shape(x), numpy.shape(y))


def random_noise(x, y, width, rng):
    return rng.int32s(_shape(x, y))


def horizontal_noise_bands(x, y, width, rng):
    i = add(x, mul(y, width))
    return i & shl(rng.bounded_ints(256, _shape(x, y)), 8)


def stripes(x, y, width, rng):
    return add(mul(x, 2), tdiv(y, 2)) ^ STRIPES


def quadratic(x, y, width, rng):
    return mul(~x, ~y) ^ tdiv(x ^ y, 2)


def triangle(x, y, width, rng):
    return tdiv(x ^ y, add(x & y, 1)) ^ OPAQUE


def fading_triangle(x, y, width, rng):
    return tdiv(x ^ y, add(~x & y, 1))


_ENTRIES = (
    ("blue square", bit_shifted_square(2, 0), False),
    ("green square", bit_shifted_square(2, 8), False),
    ("red square", bit_shifted_square(2, 16), False),
    ("unit square", bit_shifted_square(1, 0), False),
    ("square, shift 18", bit_shifted_square(2, 18), False),
    ("square, shift 12", bit_shifted_square(2, 12), False),
    ("square, divisor 7 shift 5", bit_shifted_square(7, 5), False),
    ("square, divisor 3 shift 21", bit_shifted_square(3, 21), False),
    ("square, divisor 5 shift 13", bit_shifted_square(5, 13), False),
    ("random noise", random_noise, True),
    ("horizontal noise bands", horizontal_noise_bands, True),
    ("vertical angled stripes", stripes, False),
    ("quadratic", quadratic, False),
    ("triangle", triangle, False),
    ("fading triangle", fading_triangle, False),
)

FORMULAS = tuple(Formula(i, name, fn, uses_random) for i, (name, fn, uses_random) in enumerate(_ENTRIES))

FORMULA_COUNT = len(FORMULAS)


def formula(formula_index: int) -> Formula:
    # negative indices are caller bugs, not offsets from the end
    if not 0 <= formula_index < FORMULA_COUNT:
        raise ValueError("Formula index must be in [0, {}), got {}".format(FORMULA_COUNT, formula_index))
    return FORMULAS[formula_index]


def names() -> list:
    return [f.name for f in FORMULAS]


def _random_formula_check(f: Formula, rng):
    if f.uses_random and rng is None:
        raise ValueError("Formula \"{}\" needs a random source".format(f.name))


def evaluate(formula_index: int, x: int, y: int, width: int = 0, rng=None) -> int:
    """
    Compute the color of a single pixel as a signed 32-bit int.

    `width` only affects formulas using the flat pixel index `x + y * width`.
    Noise formulas draw from `rng`, which is required for them.
    """
    f = formula(formula_index)
    _random_formula_check(f, rng)
    value = f.fn(numpy.int32(x), numpy.int32(y), width, rng)
    return int(value)


def fill(formula_index: int, pixels: numpy.ndarray, width: int, height: int, rng=None, rows: tuple = None):
    """
    Write a formula into a flat row-major pixel buffer, in place.

    Only rows in [rows[0], rows[1]) are written when `rows` is given.
    """
    f = formula(formula_index)
    _random_formula_check(f, rng)
    check_pixels(pixels, width, height)
    start, stop = (0, height) if rows is None else rows
    if not 0 <= start <= stop <= height:
        raise ValueError("Row range {} is outside of image with {} rows".format((start, stop), height))
    if start == stop:
        return pixels

    y, x = numpy.mgrid[start:stop, 0:width].astype(numpy.int32)
    values = f.fn(x, y, width, rng)
    pixels[start * width:stop * width] = numpy.broadcast_to(values, x.shape).ravel()
    return pixels
