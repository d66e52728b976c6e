from typing import Tuple


class Point2(tuple):
    """ A world position in map coordinates: x grows to the right, y grows upwards. """

    def __new__(cls, xy):
        x, y = xy
        return super().__new__(cls, (float(x), float(y)))

    @classmethod
    def from_proto(cls, data) -> "Point2":
        if isinstance(data, dict):
            return cls((data.get("x", 0.0), data.get("y", 0.0)))
        return cls((data.x, data.y))

    @property
    def x(self) -> float:
        return self[0]

    @property
    def y(self) -> float:
        return self[1]

    def __repr__(self):
        return f"Point2(({self.x}, {self.y}))"


class Size(tuple):
    """ Width and height of a grid in cells. """

    def __new__(cls, xy):
        width, height = xy
        return super().__new__(cls, (int(width), int(height)))

    @classmethod
    def from_proto(cls, data) -> "Size":
        if isinstance(data, dict):
            return cls((data.get("x", 0), data.get("y", 0)))
        return cls((data.x, data.y))

    @property
    def width(self) -> int:
        return self[0]

    @property
    def height(self) -> int:
        return self[1]


def to_cell(position) -> Tuple[int, int]:
    """
    Grid cell that contains a world position.

    Each axis is rounded half up: 3.4 -> 3, 3.5 -> 4. Every grid read and write goes
    through this function so a position always addresses the same cell.
    """
    x, y = position
    if x + 0.5 < 0 or y + 0.5 < 0:
        raise ValueError(f"Position {tuple(position)} lies outside the map")
    return int(x + 0.5), int(y + 0.5)
