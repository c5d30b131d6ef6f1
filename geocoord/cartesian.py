import math
from abc import ABC, abstractmethod
from typing import Tuple

from geocoord.project_types import PixelCoord, PixelRange, to_pixel_range


class CoordTranslate(ABC):
    """Anything that turns a logical coordinate into a pixel on the drawing surface"""

    @abstractmethod
    def translate(self, point) -> PixelCoord:
        pass


class RangedCoordF64:
    """A linear float axis from start to end"""

    def __init__(self, start: float, end: float):
        self.start = float(start)
        self.end = float(end)

    def map(self, value: float, limit: PixelRange) -> int:
        """Map value onto the pixel interval limit, start -> limit[0] and end -> limit[1]"""
        span = limit[1] - limit[0]
        if span == 0:
            return limit[1]

        try:
            length = (value - self.start) / (self.end - self.start)
        except ZeroDivisionError:
            length = math.copysign(math.inf, value - self.start)

        if math.isnan(length):
            return limit[0]
        if math.isinf(length):
            return limit[0] if length < 0 else limit[1]

        if span > 0:
            return limit[0] + math.floor(span * length + 1e-3)
        return limit[0] + math.ceil(span * length - 1e-3)

    def __repr__(self) -> str:
        return f"RangedCoordF64({self.start}, {self.end})"


class Cartesian2d(CoordTranslate):
    """Maps an (x, y) point in logical space onto a pair of pixel ranges"""

    def __init__(
        self,
        x_range: Tuple[float, float],
        y_range: Tuple[float, float],
        pixel_ranges: Tuple[PixelRange | range, PixelRange | range],
    ):
        self.logic_x = RangedCoordF64(*x_range)
        self.logic_y = RangedCoordF64(*y_range)
        self.back_x: PixelRange = to_pixel_range(pixel_ranges[0])
        self.back_y: PixelRange = to_pixel_range(pixel_ranges[1])

    def translate(self, point: Tuple[float, float]) -> PixelCoord:
        x, y = point
        return (self.logic_x.map(x, self.back_x), self.logic_y.map(y, self.back_y))

    @property
    def pixel_area(self) -> Tuple[PixelRange, PixelRange]:
        return (self.back_x, self.back_y)
