"""
Projection engines for geocoord.

Each engine wraps one named cartographic projection and its parameters. The
projection maths are done by PROJ through ``pyproj``: an engine only composes
the PROJ definition string and asks the transformer for coordinates.

Engines are configured at construction and must be built before use::

    mercator = Mercator(central_longitude=10.0).build()
    x_range, y_range = mercator.bounding_box()
"""

import math
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple, Type

from pyproj import Proj
from pyproj.exceptions import ProjError

from geocoord.errors import ProjectionFailure, Uninitialized
from geocoord.logger import logger
from geocoord.project_types import (
    GeoRange,
    Lat,
    Lon,
    ProjectedPoint,
    ProjectedRange,
    Projection,
)

WORLD_LON_RANGE: GeoRange = (-180.0, 180.0)


def proj_string(params: List[Tuple[str, str]]) -> str:
    """Join (option, value) pairs into a PROJ definition, e.g. '+proj=merc +units=m'"""
    return " ".join(f"+{option}={value}" for option, value in params)


class ProjectionEngine(ABC):
    """
    Base class for projections backed by a PROJ transformer.

    The transformer is None until build() is called. bounding_box() checks
    every corner it projects and raises ProjectionFailure on bad input.
    project() is the per-point path and returns whatever the engine computes,
    including non-finite values for points outside the projection's domain.
    """

    projection: Projection
    default_lon_range: GeoRange = WORLD_LON_RANGE

    def __init__(
        self,
        central_longitude: float = 0.0,
        min_latitude: float = -90.0,
        max_latitude: float = 90.0,
        false_easting: float = 0.0,
        false_northing: float = 0.0,
    ):
        if min_latitude >= max_latitude:
            raise ValueError("min_latitude must be less than max_latitude")

        self.central_longitude = central_longitude
        self.min_latitude = min_latitude
        self.max_latitude = max_latitude
        self.false_easting = false_easting
        self.false_northing = false_northing

        self._transformer: Proj | None = None

    @property
    def name(self) -> str:
        return self.projection.value

    @abstractmethod
    def definition_params(self) -> List[Tuple[str, str]]:
        """PROJ (option, value) pairs describing this projection"""
        pass

    @property
    def definition(self) -> str:
        return proj_string(self.definition_params())

    @property
    def is_built(self) -> bool:
        return self._transformer is not None

    def build(self):
        """Create the PROJ transformer. Returns self so construction can be chained."""
        if self._transformer is not None:
            raise ValueError(f"{self.name} projection is already built")

        definition = self.definition
        try:
            self._transformer = Proj(definition)
        except ProjError as e:
            raise ProjectionFailure(
                f"Invalid projection definition '{definition}': {e}", e
            ) from e

        logger.info(f"Built {self.name} projection: {definition}")
        return self

    def _require_transformer(self) -> Proj:
        if self._transformer is None:
            raise Uninitialized(self.name)
        return self._transformer

    def _convert_checked(self, transformer: Proj, lon: Lon, lat: Lat) -> ProjectedPoint:
        try:
            x, y = transformer(lon, lat, errcheck=True)
        except ProjError as e:
            raise ProjectionFailure(
                f"{self.name} cannot project ({lon}, {lat}): {e}", e
            ) from e

        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjectionFailure(
                f"{self.name} projected ({lon}, {lat}) to non-finite ({x}, {y})"
            )
        return (x, y)

    def geographic_extent(
        self,
        lon_range: GeoRange | None = None,
        lat_range: GeoRange | None = None,
    ) -> Tuple[GeoRange, GeoRange]:
        """Fill in missing ranges with the projection's default extent"""
        return (
            lon_range if lon_range is not None else self.default_lon_range,
            lat_range if lat_range is not None else (self.min_latitude, self.max_latitude),
        )

    def bounding_box(
        self,
        lon_range: GeoRange | None = None,
        lat_range: GeoRange | None = None,
    ) -> Tuple[ProjectedRange, ProjectedRange]:
        """
        Project the corners of a geographic extent.

        Args:
            lon_range: (min, max) longitude, defaults to the projection's extent
            lat_range: (min, max) latitude, defaults to (min_latitude, max_latitude)

        Returns:
            ((x of bottom-left, x of top-right), (y of bottom-left, y of top-right))

        Only the bottom-left and top-right corners are projected, so the result
        is exact for projections that are monotonic along both axes over the
        extent and an approximation otherwise.
        """
        transformer = self._require_transformer()
        (lon_min, lon_max), (lat_min, lat_max) = self.geographic_extent(
            lon_range, lat_range
        )

        bottom_left = self._convert_checked(transformer, lon_min, lat_min)
        top_right = self._convert_checked(transformer, lon_max, lat_max)

        return ((bottom_left[0], top_right[0]), (bottom_left[1], top_right[1]))

    def project(self, lon: Lon, lat: Lat) -> ProjectedPoint:
        """Forward-project a single point to projected metres"""
        x, y = self._require_transformer()(lon, lat)
        return (x, y)

    def __repr__(self) -> str:
        state = "built" if self.is_built else "unbuilt"
        return f"<{type(self).__name__} {self.definition} ({state})>"


class Mercator(ProjectionEngine):
    projection = Projection.MERCATOR

    def __init__(
        self,
        central_longitude: float = 0.0,
        min_latitude: float = -80.0,
        max_latitude: float = 84.0,
        false_easting: float = 0.0,
        false_northing: float = 0.0,
        latitude_true_scale: float = 0.0,
    ):
        super().__init__(
            central_longitude=central_longitude,
            min_latitude=min_latitude,
            max_latitude=max_latitude,
            false_easting=false_easting,
            false_northing=false_northing,
        )
        # Kept for callers; the definition string does not carry lat_ts yet
        self.latitude_true_scale = latitude_true_scale

    def definition_params(self) -> List[Tuple[str, str]]:
        return [
            ("proj", "merc"),
            ("lon_0", str(self.central_longitude)),
            ("x_0", str(self.false_easting)),
            ("y_0", str(self.false_northing)),
            ("units", "m"),
        ]

    def _convert_checked(self, transformer: Proj, lon: Lon, lat: Lat) -> ProjectedPoint:
        # PROJ returns a huge but finite northing at the poles
        if abs(lat) >= 90.0:
            raise ProjectionFailure(f"{self.name} cannot project the pole ({lon}, {lat})")
        return super()._convert_checked(transformer, lon, lat)


class PlateCarree(ProjectionEngine):
    """Equirectangular projection with the equator as standard parallel"""

    projection = Projection.PLATE_CARREE

    def definition_params(self) -> List[Tuple[str, str]]:
        return [
            ("proj", "eqc"),
            ("lon_0", str(self.central_longitude)),
            ("x_0", str(self.false_easting)),
            ("y_0", str(self.false_northing)),
            ("units", "m"),
        ]


class LambertCylindrical(ProjectionEngine):
    """Lambert cylindrical equal-area projection"""

    projection = Projection.LAMBERT_CYLINDRICAL

    def definition_params(self) -> List[Tuple[str, str]]:
        return [
            ("proj", "cea"),
            ("lon_0", str(self.central_longitude)),
            ("x_0", str(self.false_easting)),
            ("y_0", str(self.false_northing)),
            ("units", "m"),
        ]


class LambertConformal(ProjectionEngine):
    """
    Lambert conformal conic projection.

    Defaults cover North America. Meridians converge on a cone, so the
    corner-based bounding box clips the outer edges of wide extents.
    """

    projection = Projection.LAMBERT_CONFORMAL
    default_lon_range: GeoRange = (-140.0, -50.0)

    def __init__(
        self,
        central_longitude: float = -96.0,
        central_latitude: float = 39.0,
        standard_parallels: Tuple[float, float] = (33.0, 45.0),
        min_latitude: float = 15.0,
        max_latitude: float = 80.0,
        false_easting: float = 0.0,
        false_northing: float = 0.0,
    ):
        super().__init__(
            central_longitude=central_longitude,
            min_latitude=min_latitude,
            max_latitude=max_latitude,
            false_easting=false_easting,
            false_northing=false_northing,
        )
        self.central_latitude = central_latitude
        self.standard_parallels = standard_parallels

    def definition_params(self) -> List[Tuple[str, str]]:
        return [
            ("proj", "lcc"),
            ("lon_0", str(self.central_longitude)),
            ("lat_0", str(self.central_latitude)),
            ("lat_1", str(self.standard_parallels[0])),
            ("lat_2", str(self.standard_parallels[1])),
            ("x_0", str(self.false_easting)),
            ("y_0", str(self.false_northing)),
            ("units", "m"),
        ]


PROJECTION_ENGINES: Dict[Projection, Type[ProjectionEngine]] = {
    Projection.PLATE_CARREE: PlateCarree,
    Projection.LAMBERT_CONFORMAL: LambertConformal,
    Projection.LAMBERT_CYLINDRICAL: LambertCylindrical,
    Projection.MERCATOR: Mercator,
}


def create_projection(projection: Projection, **params) -> ProjectionEngine:
    """
    Create an unbuilt engine for the given projection.

    Args:
        projection: Which projection to use
        **params: Keyword configuration passed to the engine's constructor

    Returns:
        ProjectionEngine that still needs build()
    """
    return PROJECTION_ENGINES[projection](**params)
