from tqdm import tqdm
from shapely.geometry import LineString, Point, box
from shapely.geometry.base import BaseGeometry
from reportlab.lib.colors import Color
from reportlab.pdfgen import canvas
from typing import Callable, List, Tuple, TypedDict, Union, NotRequired

from geocoord.cartesian import CoordTranslate
from geocoord.logger import logger
from geocoord.project_types import Coord, PixelRange


class LineStyle(TypedDict):
    stroke_color: Color
    stroke_width: float
    round_cap: NotRequired[bool]


class PointStyle(TypedDict):
    fill_color: Color
    radius: float


class FeatureLineData(TypedDict):
    type: str
    coords: List[Coord]
    name: str | None


class FeaturePointData(TypedDict):
    type: str
    coord: Coord
    name: str | None


PixelLine = List[Tuple[float, float]]


def plot_area_box(plot_area: Tuple[PixelRange, PixelRange]):
    """Shapely box covering a pixel-range pair, whichever way each axis runs"""
    (x0, x1), (y0, y1) = plot_area
    return box(min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))


def _collect_lines(geometry: BaseGeometry) -> List[PixelLine]:
    if geometry.is_empty:
        return []
    if geometry.geom_type == "LineString":
        return [list(geometry.coords)]
    if hasattr(geometry, "geoms"):
        lines: List[PixelLine] = []
        for part in geometry.geoms:
            lines.extend(_collect_lines(part))
        return lines
    # Points left over from touching the clip box are not drawable lines
    return []


def clip_line(pixels: List[Tuple[int, int]], clip_box) -> List[PixelLine]:
    """Clip a pixel polyline to the plot area, returning the visible pieces"""
    if len(pixels) < 2:
        return []
    return _collect_lines(LineString(pixels).intersection(clip_box))


class FeatureRenderer:
    def __init__(
        self,
        canvas: canvas.Canvas,
        coord: CoordTranslate,
        plot_area: Tuple[PixelRange, PixelRange],
    ):
        self.canvas = canvas
        self.translate = coord.translate
        self.clip_box = plot_area_box(plot_area)

    def render_line_features(
        self,
        features: List[FeatureLineData],
        style: Union[LineStyle, Callable[[FeatureLineData], LineStyle]],
        desc: str = "Drawing line features",
    ) -> None:
        """Render a list of line features with the specified style"""
        for feature in tqdm(features, desc=desc):
            try:
                feature_style: LineStyle = (
                    style if not callable(style) else style(feature)
                )
                self._render_line_feature(feature, feature_style)
            except Exception as e:
                logger.warning(f"Failed to render line feature {feature.get('name')}: {e}")

    def _render_line_feature(
        self,
        feature: FeatureLineData,
        style: LineStyle,
    ) -> None:
        """Render a line feature, dropping the parts outside the plot area"""
        coords = feature["coords"]
        if len(coords) < 2:
            return

        pieces = clip_line([self.translate(coord) for coord in coords], self.clip_box)
        if not pieces:
            return

        p = self.canvas.beginPath()
        for piece in pieces:
            x, y = piece[0]
            p.moveTo(x, y)
            for x, y in piece[1:]:
                p.lineTo(x, y)

        self.canvas.setStrokeColor(style["stroke_color"])
        self.canvas.setLineWidth(style["stroke_width"])
        if style.get("round_cap", False):
            self.canvas.setLineCap(1)
            self.canvas.setLineJoin(1)

        self.canvas.drawPath(p, fill=0, stroke=1)

    def render_point_features(
        self,
        features: List[FeaturePointData],
        style: PointStyle,
        desc: str = "Drawing point features",
    ) -> None:
        """
        Render point features as filled circles

        Args:
            features: List of point feature dictionaries
            style: Fill color and circle radius in points
            desc: Description for progress bar
        """
        for feature in tqdm(features, desc=desc):
            try:
                self._render_point_feature(feature, style)
            except Exception as e:
                logger.warning(f"Failed to render point feature {feature.get('name')}: {e}")

    def _render_point_feature(self, feature: FeaturePointData, style: PointStyle) -> None:
        x, y = self.translate(feature["coord"])
        if not self.clip_box.covers(Point(x, y)):
            return

        self.canvas.setFillColor(style["fill_color"])
        self.canvas.circle(x, y, style["radius"], fill=1, stroke=0)

    def render_frame(self, style: LineStyle) -> None:
        """Outline the plot area"""
        min_x, min_y, max_x, max_y = self.clip_box.bounds
        self.canvas.setStrokeColor(style["stroke_color"])
        self.canvas.setLineWidth(style["stroke_width"])
        self.canvas.rect(min_x, min_y, max_x - min_x, max_y - min_y, fill=0, stroke=1)
