from geocoord.graticule import build_graticule


def test_world_graticule():
    lines = build_graticule((-180.0, 180.0), (-80.0, 84.0), 30.0)
    meridians = [line for line in lines if line["type"] == "meridian"]
    parallels = [line for line in lines if line["type"] == "parallel"]

    assert [m["coords"][0][0] for m in meridians] == list(range(-180, 181, 30))
    assert [p["coords"][0][1] for p in parallels] == [-60, -30, 0, 30, 60]


def test_lines_span_the_extent():
    lines = build_graticule((-10.0, 10.0), (40.0, 50.0), 5.0, resolution=2.0)
    for line in lines:
        first, last = line["coords"][0], line["coords"][-1]
        if line["type"] == "meridian":
            assert (first[1], last[1]) == (40.0, 50.0)
            assert len(line["coords"]) == 6
        else:
            assert (first[0], last[0]) == (-10.0, 10.0)
            assert len(line["coords"]) == 11


def test_names():
    lines = build_graticule((0.0, 10.0), (0.0, 10.0), 10.0)
    assert [line["name"] for line in lines] == ["0°", "10°", "0°", "10°"]
