import numpy


def alloc_pixels(shape: tuple) -> numpy.ndarray:
    """
    Allocate a flat row-major pixel buffer for an image of shape (width, height).
    """
    width, height = shape
    if width <= 0 or height <= 0:
        raise ValueError("Image shape must be positive, got {}".format(shape))
    return numpy.zeros(width * height, dtype=numpy.int32)


def check_pixels(pixels: numpy.ndarray, width: int, height: int):
    if pixels.ndim != 1 or pixels.size != width * height:
        raise ValueError("Pixel buffer of shape {} does not match image {}x{}".format(pixels.shape, width, height))
    if pixels.dtype != numpy.int32:
        raise ValueError("Pixel buffer must be int32, got {}".format(pixels.dtype))


def as_image(pixels: numpy.ndarray, width: int, height: int) -> numpy.ndarray:
    """
    View of a flat pixel buffer as a (height, width) array; pixel (x, y) is at [y, x].
    """
    check_pixels(pixels, width, height)
    return pixels.reshape((height, width))


def split_rows(height: int, parts: int) -> list:
    parts = max(1, min(parts, height))
    bounds = numpy.linspace(0, height, parts + 1).astype(int)
    return [(int(start), int(stop)) for start, stop in zip(bounds[:-1], bounds[1:]) if stop > start]
