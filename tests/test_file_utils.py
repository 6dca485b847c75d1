import io
import os
import pytest
import gpxpy.gpx

from geocoord.exceptions import InvalidCoordinate
from geocoord.file_utils import (
    generate_output_filename,
    load_gpx_file,
    load_gpx_points,
)
from geocoord.geometry import Coordinate

GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="geocoord-tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
)

WAYPOINTS_GPX = GPX_HEADER + (
    '<wpt lat="39.9075" lon="116.39723"><name>Beijing</name></wpt>\n'
    '<wpt lat="48.85341" lon="2.3488"><name>Paris</name></wpt>\n'
    '<rte><rtept lat="1" lon="1"></rtept></rte>\n'
    "</gpx>\n"
)

ROUTE_GPX = GPX_HEADER + (
    '<rte><rtept lat="1" lon="2"></rtept><rtept lat="3" lon="4"></rtept></rte>\n'
    "</gpx>\n"
)

TRACK_GPX = GPX_HEADER + (
    "<trk><trkseg>\n"
    '<trkpt lat="47.12322" lon="-122.85051"></trkpt>\n'
    '<trkpt lat="47.12308" lon="-122.85048"></trkpt>\n'
    "</trkseg></trk>\n"
    "</gpx>\n"
)


def test_waypoints_take_precedence():
    points = load_gpx_points(io.StringIO(WAYPOINTS_GPX))
    assert points == [Coordinate(39.9075, 116.39723), Coordinate(48.85341, 2.3488)]


def test_route_points_used_without_waypoints():
    points = load_gpx_points(io.StringIO(ROUTE_GPX))
    assert points == [Coordinate(1, 2), Coordinate(3, 4)]


def test_track_points_used_as_last_resort():
    points = load_gpx_points(io.StringIO(TRACK_GPX))
    assert points == [
        Coordinate(47.12322, -122.85051),
        Coordinate(47.12308, -122.85048),
    ]


def test_empty_gpx():
    assert load_gpx_points(io.StringIO(GPX_HEADER + "</gpx>\n")) == []


def test_malformed_gpx():
    with pytest.raises(gpxpy.gpx.GPXException):
        load_gpx_points(io.StringIO("this is not gpx"))


def test_out_of_range_point():
    data = GPX_HEADER + '<wpt lat="95" lon="0"></wpt>\n</gpx>\n'
    with pytest.raises((InvalidCoordinate, gpxpy.gpx.GPXException)):
        load_gpx_points(io.StringIO(data))


def test_load_gpx_file(tmp_path):
    gpx_file = tmp_path / "capitals.gpx"
    gpx_file.write_text(WAYPOINTS_GPX, encoding="utf-8")
    assert len(load_gpx_file(str(gpx_file))) == 2


def test_load_missing_gpx_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_gpx_file(str(tmp_path / "missing.gpx"))


def test_generate_output_filename(tmp_path):
    input_file = str(tmp_path / "Trip.GPX")

    first = generate_output_filename(input_file)
    second = generate_output_filename(input_file)

    assert first == os.path.join(str(tmp_path), "Trip route.html")
    assert second == os.path.join(str(tmp_path), "Trip route (1).html")
    assert os.path.exists(first) and os.path.exists(second)


def test_generate_output_filename_without_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert generate_output_filename(None) == "route.html"
    assert generate_output_filename(None) == "route (1).html"
