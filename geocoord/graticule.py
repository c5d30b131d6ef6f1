import math
from typing import List

from geocoord.project_types import GeoRange
from geocoord.rendering import FeatureLineData


def _ticks(start: float, end: float, step: float) -> List[float]:
    """Multiples of step between start and end inclusive"""
    first = math.ceil(start / step) * step
    count = math.floor((end - first) / step + 1e-9)
    return [first + i * step for i in range(count + 1)]


def _samples(start: float, end: float, resolution: float) -> List[float]:
    count = max(1, math.ceil((end - start) / resolution))
    return [start + (end - start) * i / count for i in range(count + 1)]


def build_graticule(
    lon_range: GeoRange,
    lat_range: GeoRange,
    step: float,
    resolution: float = 1.0,
) -> List[FeatureLineData]:
    """
    Build meridians and parallels every `step` degrees inside an extent.

    Lines are sampled every `resolution` degrees so that they bend with the
    projection once translated.
    """
    lon_min, lon_max = lon_range
    lat_min, lat_max = lat_range
    lines: List[FeatureLineData] = []

    for lon in _ticks(lon_min, lon_max, step):
        lines.append(
            {
                "type": "meridian",
                "coords": [(lon, lat) for lat in _samples(lat_min, lat_max, resolution)],
                "name": f"{lon:g}°",
            }
        )

    for lat in _ticks(lat_min, lat_max, step):
        lines.append(
            {
                "type": "parallel",
                "coords": [(lon, lat) for lon in _samples(lon_min, lon_max, resolution)],
                "name": f"{lat:g}°",
            }
        )

    return lines
