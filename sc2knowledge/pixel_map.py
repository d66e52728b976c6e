import base64
from enum import IntEnum
from typing import Tuple, Union

import numpy as np

from .position import Point2, Size, to_cell


class GridDecodeError(ValueError):
    """
    Image data that cannot be turned into a grid
    """
    pass


class GridShapeError(GridDecodeError):
    """
    Buffer length does not match the width and height in the image header
    """
    pass


class VisibilityDecodeError(GridDecodeError):
    """
    Visibility byte outside of the known visibility states
    """
    pass


class Pixel(IntEnum):
    SET = 0
    EMPTY = 1

    def is_set(self) -> bool:
        return self is Pixel.SET

    def is_empty(self) -> bool:
        return self is Pixel.EMPTY


class Visibility(IntEnum):
    HIDDEN = 0
    FOGGED = 1
    VISIBLE = 2
    FULL_HIDDEN = 3

    def is_hidden(self) -> bool:
        return self is Visibility.HIDDEN

    def is_fogged(self) -> bool:
        return self is Visibility.FOGGED

    def is_visible(self) -> bool:
        return self is Visibility.VISIBLE

    def is_full_hidden(self) -> bool:
        return self is Visibility.FULL_HIDDEN

    def is_explored(self) -> bool:
        return self is not Visibility.HIDDEN


def unpack_bits(byte: int) -> Tuple[Pixel, ...]:
    """ Eight pixels of a packed byte, most significant bit first. """
    return tuple(Pixel((byte >> shift) & 1) for shift in range(7, -1, -1))


def byte_to_pixels(byte: int) -> Tuple[Pixel, ...]:
    if byte == 0:
        return (Pixel.SET,) * 8
    if byte == 255:
        return (Pixel.EMPTY,) * 8
    return unpack_bits(byte)


# row n holds the pixels of byte value n
_PIXEL_TABLE = np.array([byte_to_pixels(n) for n in range(256)], dtype=np.uint8)


def _buffer(data) -> np.ndarray:
    return np.frombuffer(bytes(data), dtype=np.uint8)


def _check_shape(cells: int, width: int, height: int):
    if width < 0 or height < 0:
        raise GridShapeError(f"Invalid grid size {width}x{height}")
    if cells != width * height:
        raise GridShapeError(f"Image data holds {cells} cells, header declares {width}x{height}={width * height}")


def _to_grid(flat: np.ndarray, width: int, height: int) -> np.ndarray:
    """ Wire rows run along x, so the (height, width) buffer is transposed to be indexed as [x, y]. """
    grid = flat.reshape(height, width).T
    grid.flags.writeable = False
    return grid


def decode_pixels(data: bytes, width: int, height: int) -> np.ndarray:
    """ Bit packed image, one cell per bit. A zero bit is Pixel.SET, a one bit is Pixel.EMPTY. """
    buffer = _buffer(data)
    _check_shape(buffer.size * 8, width, height)
    if buffer.size and not buffer.any():
        flat = np.full(buffer.size * 8, int(Pixel.SET), dtype=np.uint8)
    elif buffer.size and (buffer == 255).all():
        flat = np.full(buffer.size * 8, int(Pixel.EMPTY), dtype=np.uint8)
    else:
        flat = _PIXEL_TABLE[buffer].reshape(-1)
    return _to_grid(flat, width, height)


def decode_bytes(data: bytes, width: int, height: int) -> np.ndarray:
    buffer = _buffer(data)
    _check_shape(buffer.size, width, height)
    return _to_grid(buffer.copy(), width, height)


def decode_visibility(data: bytes, width: int, height: int) -> np.ndarray:
    buffer = _buffer(data)
    _check_shape(buffer.size, width, height)
    invalid = buffer > int(Visibility.FULL_HIDDEN)
    if invalid.any():
        raise VisibilityDecodeError(f"Visibility has no state with value {int(buffer[invalid][0])}")
    return _to_grid(buffer.copy(), width, height)


def _image(image) -> Tuple[bytes, Size, int]:
    if isinstance(image, dict):
        data = image.get("data", b"")
        if isinstance(data, str):
            # JSON form of the message carries bytes as base64
            data = base64.b64decode(data)
        return data, Size.from_proto(image.get("size", {})), image.get("bits_per_pixel", 0)
    return image.data, Size.from_proto(image.size), getattr(image, "bits_per_pixel", 0)


class _GridMap:
    """
    Read-only 2D grid indexed as [x, y] with (0, 0) in the bottom left corner.

    Positions are turned into cells with ``to_cell``; use ``at`` to read and
    ``with_value`` to get a changed copy.
    """
    BITS_PER_PIXEL = 8

    def __init__(self, data_numpy: np.ndarray):
        self.data_numpy = data_numpy

    @staticmethod
    def _decode(data, width, height) -> np.ndarray:
        raise NotImplementedError

    @classmethod
    def from_bytes(cls, data: bytes, width: int, height: int):
        return cls(cls._decode(data, width, height))

    @classmethod
    def from_proto(cls, image):
        data, size, bits_per_pixel = _image(image)
        if bits_per_pixel and bits_per_pixel != cls.BITS_PER_PIXEL:
            raise GridDecodeError(f"{cls.__name__} expects {cls.BITS_PER_PIXEL} bits per pixel, got {bits_per_pixel}")
        return cls.from_bytes(data, size.width, size.height)

    @property
    def width(self) -> int:
        return self.data_numpy.shape[0]

    @property
    def height(self) -> int:
        return self.data_numpy.shape[1]

    @property
    def size(self) -> Size:
        return Size((self.width, self.height))

    def _wrap(self, value):
        return int(value)

    def at(self, position: Union[Point2, Tuple[float, float]]):
        return self._wrap(self.data_numpy[to_cell(position)])

    def with_value(self, position: Union[Point2, Tuple[float, float]], value):
        """ New grid equal to this one except for the cell at ``position``. """
        cell = to_cell(position)
        data = self.data_numpy.copy()
        data[cell] = self._wrap(value)
        data.flags.writeable = False
        return type(self)(data)

    def __eq__(self, other):
        return type(self) is type(other) and np.array_equal(self.data_numpy, other.data_numpy)

    def __repr__(self):
        return f"{type(self).__name__}({self.width}x{self.height})"


class PixelMap(_GridMap):
    """ Pathing and placement grids. """
    BITS_PER_PIXEL = 1

    _decode = staticmethod(decode_pixels)

    def _wrap(self, value) -> Pixel:
        return Pixel(int(value))

    def is_set(self, position) -> bool:
        return self.at(position).is_set()

    def is_empty(self, position) -> bool:
        return self.at(position).is_empty()


class ByteMap(_GridMap):
    """ Raw byte grids such as terrain height; callers interpret the values. """
    _decode = staticmethod(decode_bytes)


class VisibilityMap(_GridMap):
    _decode = staticmethod(decode_visibility)

    def _wrap(self, value) -> Visibility:
        return Visibility(int(value))

    def is_visible(self, position) -> bool:
        return self.at(position).is_visible()

    def is_explored(self, position) -> bool:
        return self.at(position).is_explored()
