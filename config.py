from geocoord.project_types import PlotConfig, Projection

CONFIG: PlotConfig = PlotConfig(
    output_dir="maps",
    projection=Projection.MERCATOR,
    lon_range=None,  # projection default: (-180, 180)
    lat_range=None,  # projection default: (min_latitude, max_latitude)
    width_points=842,  # A4 landscape
    height_points=595,
    margin_points=24,
    graticule_step=30.0,
    markers={
        "London": (-0.1276, 51.5072),
        "New York": (-74.0060, 40.7128),
        "Sao Paulo": (-46.6333, -23.5505),
        "Tokyo": (139.6503, 35.6762),
        "Sydney": (151.2093, -33.8688),
    },
)
