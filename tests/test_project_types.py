import pytest

from geocoord.project_types import PlotConfig, Projection, to_pixel_range


def test_to_pixel_range():
    assert to_pixel_range(range(0, 640)) == (0, 640)
    assert to_pixel_range((480, 0)) == (480, 0)
    assert to_pixel_range((1.0, 2.0)) == (1, 2)


def test_plot_config_defaults():
    config = PlotConfig(output_dir="maps")
    assert config.projection is Projection.MERCATOR
    assert config.lon_range is None
    assert config.lat_range is None
    assert config.markers == {}
    assert config.pixel_ranges == ((20, 620), (20, 460))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"output_dir": ""},
        {"output_dir": "maps", "projection": "Mercator"},
        {"output_dir": "maps", "lon_range": (10.0, -10.0)},
        {"output_dir": "maps", "lon_range": (-200.0, 10.0)},
        {"output_dir": "maps", "lat_range": (0.0, 95.0)},
        {"output_dir": "maps", "lat_range": (0.0, 10.0, 20.0)},
        {"output_dir": "maps", "width_points": 0},
        {"output_dir": "maps", "margin_points": -1},
        {"output_dir": "maps", "margin_points": 240},
        {"output_dir": "maps", "graticule_step": 0},
        {"output_dir": "maps", "markers": {"Nowhere": (0.0, 100.0)}},
    ],
)
def test_plot_config_validation(kwargs):
    with pytest.raises(ValueError):
        PlotConfig(**kwargs)
