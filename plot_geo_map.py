import logging
import os
import time
from datetime import datetime
from reportlab.lib.colors import Color
from reportlab.pdfgen import canvas

from config import CONFIG
from geocoord.geo_coord import GeoCoordinateSystem
from geocoord.graticule import build_graticule
from geocoord.logger import logger
from geocoord.project_types import PlotConfig
from geocoord.projection import create_projection
from geocoord.rendering import FeatureRenderer, LineStyle, PointStyle

BACKGROUND_COLOR = Color(0.529, 0.808, 0.922)

GRATICULE_STYLE: LineStyle = {
    "stroke_color": Color(0.4, 0.4, 0.4),
    "stroke_width": 0.5,
    "round_cap": True,
}

FRAME_STYLE: LineStyle = {
    "stroke_color": Color(0, 0, 0),
    "stroke_width": 1.0,
}

MARKER_STYLE: PointStyle = {
    "fill_color": Color(0.8, 0.1, 0.1),
    "radius": 3.0,
}


def render_map(config: PlotConfig, output_path: str) -> GeoCoordinateSystem:
    """Draw the configured projection's graticule and markers to a PDF"""
    projection = create_projection(config.projection).build()
    coord = GeoCoordinateSystem(
        config.lon_range, config.lat_range, config.pixel_ranges, projection
    )
    lon_range, lat_range = projection.geographic_extent(config.lon_range, config.lat_range)

    c = canvas.Canvas(output_path, pagesize=(config.width_points, config.height_points))

    min_x, min_y, max_x, max_y = (
        config.margin_points,
        config.margin_points,
        config.width_points - config.margin_points,
        config.height_points - config.margin_points,
    )
    c.setFillColor(BACKGROUND_COLOR)
    c.rect(min_x, min_y, max_x - min_x, max_y - min_y, fill=1, stroke=0)

    renderer = FeatureRenderer(c, coord, coord.pixel_area)
    renderer.render_line_features(
        features=build_graticule(lon_range, lat_range, config.graticule_step),
        style=GRATICULE_STYLE,
        desc="Rendering graticule",
    )
    renderer.render_point_features(
        features=[
            {"type": "marker", "coord": marker, "name": name}
            for name, marker in config.markers.items()
        ],
        style=MARKER_STYLE,
        desc="Rendering markers",
    )
    renderer.render_frame(FRAME_STYLE)

    c.save()
    return coord


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    start_time = time.time()

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_path = os.path.join(CONFIG.output_dir, f"geo_map_{timestamp}.pdf")
    os.makedirs(CONFIG.output_dir, exist_ok=True)

    logger.info(f"Rendering {CONFIG.projection.value} map...")
    render_map(CONFIG, output_path)

    execution_time = time.time() - start_time
    logger.info(f"Generated map at: {output_path}")
    logger.info(f"Total execution time: {execution_time:.2f} seconds")


if __name__ == "__main__":
    main()
