from typing import Iterable, List, Tuple

from geocoord.cartesian import Cartesian2d, CoordTranslate
from geocoord.errors import ProjectionFailure
from geocoord.logger import logger
from geocoord.project_types import (
    Coord,
    GeoRange,
    PixelCoord,
    PixelRange,
    ProjectedRange,
)
from geocoord.projection import ProjectionEngine


class GeoCoordinateSystem(CoordTranslate):
    """
    Translates (lon, lat) pairs into pixels through a projection.

    The projected bounding box of the lon/lat extent is computed once on
    construction and mapped linearly onto the pixel ranges. Errors from
    bounding_box() (Uninitialized, ProjectionFailure) propagate to the caller,
    and an extent that projects to an empty box raises ProjectionFailure.
    """

    def __init__(
        self,
        lon: GeoRange | None,
        lat: GeoRange | None,
        pixel_ranges: Tuple[PixelRange | range, PixelRange | range],
        projection: ProjectionEngine,
    ):
        x_range, y_range = projection.bounding_box(lon, lat)
        # A wrapped central meridian or a zero-width extent collapses an axis
        if x_range[0] >= x_range[1] or y_range[0] >= y_range[1]:
            raise ProjectionFailure(
                f"{projection.name} extent lon={lon} lat={lat} projects to an empty "
                f"or inverted box: x {x_range}, y {y_range}"
            )

        self._lon = lon
        self._lat = lat
        self._x_range: ProjectedRange = x_range
        self._y_range: ProjectedRange = y_range
        self._projection = projection
        self._cartesian = Cartesian2d(x_range, y_range, pixel_ranges)

        logger.info(
            f"{projection.name} bounding box: "
            f"x {x_range[0]:.2f}..{x_range[1]:.2f}, y {y_range[0]:.2f}..{y_range[1]:.2f}"
        )

    @property
    def lon(self) -> GeoRange | None:
        return self._lon

    @property
    def lat(self) -> GeoRange | None:
        return self._lat

    @property
    def x_range(self) -> ProjectedRange:
        return self._x_range

    @property
    def y_range(self) -> ProjectedRange:
        return self._y_range

    @property
    def projection(self) -> ProjectionEngine:
        return self._projection

    @property
    def pixel_area(self) -> Tuple[PixelRange, PixelRange]:
        return self._cartesian.pixel_area

    def translate(self, point: Coord) -> PixelCoord:
        """Project (lon, lat) and map it to a pixel. Points outside the extent are not clipped."""
        lon, lat = point
        return self._cartesian.translate(self._projection.project(lon, lat))

    def translate_many(self, coords: Iterable[Coord]) -> List[PixelCoord]:
        return [self.translate(coord) for coord in coords]
