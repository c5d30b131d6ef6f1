import logging
from unittest.mock import MagicMock

import pytest
from reportlab.lib.colors import Color
from reportlab.pdfgen import canvas
from shapely.geometry import LineString

from geocoord.cartesian import Cartesian2d, CoordTranslate
from geocoord.geo_coord import GeoCoordinateSystem
from geocoord.graticule import build_graticule
from geocoord.projection import Mercator
from geocoord.rendering import FeatureRenderer, LineStyle, PointStyle, clip_line, plot_area_box

LINE_STYLE: LineStyle = {"stroke_color": Color(0, 0, 0), "stroke_width": 0.5}
POINT_STYLE: PointStyle = {"fill_color": Color(1, 0, 0), "radius": 2.0}
PLOT_AREA = ((0, 100), (0, 100))


def identity_coord() -> Cartesian2d:
    return Cartesian2d((0.0, 100.0), (0.0, 100.0), PLOT_AREA)


def test_plot_area_box_handles_flipped_axes():
    assert plot_area_box(((0, 640), (480, 0))).bounds == (0.0, 0.0, 640.0, 480.0)


def test_clip_line_crossing():
    pieces = clip_line([(-10, 50), (110, 50)], plot_area_box(PLOT_AREA))
    assert len(pieces) == 1
    assert LineString(pieces[0]).length == pytest.approx(100.0)


def test_clip_line_leaving_and_reentering():
    pixels = [(10, 10), (200, 10), (200, 90), (10, 90)]
    pieces = clip_line(pixels, plot_area_box(PLOT_AREA))
    assert len(pieces) == 2


def test_clip_line_outside():
    assert clip_line([(150, 150), (200, 200)], plot_area_box(PLOT_AREA)) == []


def test_clip_line_needs_two_points():
    assert clip_line([(50, 50)], plot_area_box(PLOT_AREA)) == []


def test_render_line_feature_draws_path():
    c = MagicMock()
    renderer = FeatureRenderer(c, identity_coord(), PLOT_AREA)
    renderer.render_line_features(
        [{"type": "line", "coords": [(10.0, 10.0), (90.0, 90.0)], "name": "diagonal"}],
        LINE_STYLE,
    )
    c.drawPath.assert_called_once()
    c.setStrokeColor.assert_called_with(LINE_STYLE["stroke_color"])


def test_render_line_feature_outside_is_skipped():
    c = MagicMock()
    renderer = FeatureRenderer(c, identity_coord(), PLOT_AREA)
    renderer.render_line_features(
        [{"type": "line", "coords": [(150.0, 150.0), (190.0, 190.0)], "name": None}],
        LINE_STYLE,
    )
    c.drawPath.assert_not_called()


def test_render_line_style_callable():
    c = MagicMock()
    style = MagicMock(return_value=LINE_STYLE)
    feature = {"type": "line", "coords": [(10.0, 10.0), (90.0, 90.0)], "name": None}
    FeatureRenderer(c, identity_coord(), PLOT_AREA).render_line_features([feature], style)
    style.assert_called_once_with(feature)


def test_render_points_clipped():
    c = MagicMock()
    renderer = FeatureRenderer(c, identity_coord(), PLOT_AREA)
    renderer.render_point_features(
        [
            {"type": "marker", "coord": (50.0, 50.0), "name": "inside"},
            {"type": "marker", "coord": (150.0, 50.0), "name": "outside"},
        ],
        POINT_STYLE,
    )
    c.circle.assert_called_once_with(50, 50, 2.0, fill=1, stroke=0)


class FailingCoord(CoordTranslate):
    def translate(self, point):
        raise RuntimeError("boom")


def test_failed_feature_is_logged_and_skipped(caplog):
    c = MagicMock()
    renderer = FeatureRenderer(c, FailingCoord(), PLOT_AREA)
    with caplog.at_level(logging.WARNING, logger="geocoord"):
        renderer.render_point_features(
            [{"type": "marker", "coord": (1.0, 1.0), "name": "bad"}], POINT_STYLE
        )
    assert "bad" in caplog.text
    c.circle.assert_not_called()


def test_render_world_pdf(tmp_path):
    output_path = tmp_path / "world.pdf"
    projection = Mercator().build()
    coord = GeoCoordinateSystem(None, None, ((20, 620), (20, 460)), projection)
    lon_range, lat_range = projection.geographic_extent()

    c = canvas.Canvas(str(output_path), pagesize=(640, 480))
    renderer = FeatureRenderer(c, coord, coord.pixel_area)
    renderer.render_line_features(build_graticule(lon_range, lat_range, 30.0), LINE_STYLE)
    renderer.render_point_features(
        [{"type": "marker", "coord": (-0.1276, 51.5072), "name": "London"}], POINT_STYLE
    )
    renderer.render_frame(LINE_STYLE)
    c.save()

    assert output_path.read_bytes().startswith(b"%PDF")
