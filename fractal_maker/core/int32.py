"""
Fixed-width integer arithmetic on numpy arrays.

Pixel formulas are defined in terms of native 32-bit signed integers: every
intermediate result wraps around in two's complement and division truncates
toward zero. numpy floors on `//` and may widen or raise on Python ints that
do not fit into int32, so arithmetic goes through the helpers below.
Bitwise `^`, `&`, `|` and `~` are exact on int32 and can be used directly.
"""
import numpy


INT32_MIN = -(1 << 31)

INT32_MAX = (1 << 31) - 1


def wrap(value) -> numpy.ndarray:
    """
    Reduce integers of any width modulo 2**32 into signed int32.
    """
    value = numpy.asarray(value, dtype=numpy.int64)
    return (value & 0xFFFF_FFFF).astype(numpy.uint32).astype(numpy.int32)


def constant(value: int) -> numpy.int32:
    return numpy.int32(wrap(value))


def add(a, b):
    return wrap(numpy.asarray(a, dtype=numpy.int64) + numpy.asarray(b, dtype=numpy.int64))


def mul(a, b):
    return wrap(numpy.asarray(a, dtype=numpy.int64) * numpy.asarray(b, dtype=numpy.int64))


def shl(a, shift: int):
    # shift distance is taken modulo 32, as for native ints
    return wrap(numpy.asarray(a, dtype=numpy.int64) << (shift & 31))


def tdiv(a, b):
    """
    Integer division truncating toward zero.

    The divisor must not be zero; formulas guarantee that for non-negative
    coordinates.
    """
    a = numpy.asarray(a, dtype=numpy.int64)
    b = numpy.asarray(b, dtype=numpy.int64)
    q = numpy.abs(a) // numpy.abs(b)
    return wrap(numpy.where((a < 0) != (b < 0), -q, q))


def to_unsigned(value: int) -> int:
    return value & 0xFFFF_FFFF
