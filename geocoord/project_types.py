from enum import Enum
from typing import Dict, List, Tuple

Lon = float
Lat = float
Coord = Tuple[Lon, Lat]
Line = List[Coord]

GeoRange = Tuple[float, float]
ProjectedRange = Tuple[float, float]
ProjectedPoint = Tuple[float, float]
PixelRange = Tuple[int, int]
PixelCoord = Tuple[int, int]


class Projection(Enum):
    """Supported map projections"""

    PLATE_CARREE = "PlateCarree"
    LAMBERT_CONFORMAL = "LambertConformal"
    LAMBERT_CYLINDRICAL = "LambertCylindrical"
    MERCATOR = "Mercator"


def to_pixel_range(pixels: PixelRange | range) -> PixelRange:
    """Normalise a ``range`` or (start, end) pair to an (int, int) tuple"""
    if isinstance(pixels, range):
        return (pixels.start, pixels.stop)
    start, end = pixels
    return (int(start), int(end))


def _validate_geo_range(
    name: str, value: GeoRange | None, lower: float, upper: float
) -> None:
    if value is None:
        return
    if len(value) != 2:
        raise ValueError(f"{name} must be a (min, max) pair")
    if value[0] >= value[1]:
        raise ValueError(f"{name}[0] must be less than {name}[1]")
    if value[0] < lower or value[1] > upper:
        raise ValueError(f"{name} must be between {lower} and {upper}")


class PlotConfig:
    def __init__(
        self,
        output_dir: str,
        projection: Projection = Projection.MERCATOR,
        lon_range: GeoRange | None = None,
        lat_range: GeoRange | None = None,
        width_points: int = 640,
        height_points: int = 480,
        margin_points: int = 20,
        graticule_step: float = 30.0,
        markers: Dict[str, Coord] | None = None,
    ):
        if not output_dir:
            raise ValueError("output_dir is required")
        if not isinstance(projection, Projection):
            raise ValueError(f"projection must be one of {[p.name for p in Projection]}")

        _validate_geo_range("lon_range", lon_range, -180, 180)
        _validate_geo_range("lat_range", lat_range, -90, 90)

        if width_points <= 0 or height_points <= 0:
            raise ValueError("width_points and height_points must be positive")
        if margin_points < 0:
            raise ValueError("margin_points must not be negative")
        if 2 * margin_points >= min(width_points, height_points):
            raise ValueError("margin_points leaves no room for the plot area")
        if graticule_step <= 0:
            raise ValueError("graticule_step must be positive")

        for name, (lon, lat) in (markers or {}).items():
            if lon < -180 or lon > 180 or lat < -90 or lat > 90:
                raise ValueError(f"marker {name} is outside -180..180 / -90..90")

        self.output_dir = output_dir
        self.projection = projection
        self.lon_range = lon_range
        self.lat_range = lat_range
        self.width_points = width_points
        self.height_points = height_points
        self.margin_points = margin_points
        self.graticule_step = graticule_step
        self.markers: Dict[str, Coord] = dict(markers or {})

    @property
    def pixel_ranges(self) -> Tuple[PixelRange, PixelRange]:
        """Plot area inside the page margins, y growing upwards as in PDF space"""
        return (
            (self.margin_points, self.width_points - self.margin_points),
            (self.margin_points, self.height_points - self.margin_points),
        )
