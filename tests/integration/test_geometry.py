import math

import shapely

from wherekey.geometry import to_geojson, to_polygon, to_wkt


def test_to_polygon(keys):
    placekey = keys.from_h3_string("8a2a1072b59ffff")
    polygon = to_polygon(keys, placekey)

    assert polygon.is_valid
    # closed ring of six vertices
    assert len(polygon.exterior.coords) == 7

    # coordinates are (lng, lat)
    lat, lng = keys.to_geo(placekey)
    assert math.isclose(polygon.centroid.x, lng, abs_tol=1e-5)
    assert math.isclose(polygon.centroid.y, lat, abs_tol=1e-5)
    assert polygon.contains(shapely.Point(lng, lat))


def test_to_polygon_pentagon(keys):
    polygon = to_polygon(keys, keys.from_h3_string("8ac200000007fff"))

    assert len(polygon.exterior.coords) == 6


def test_to_wkt(keys):
    wkt = to_wkt(keys, "@dvt-smp-tvz")

    assert wkt.startswith("POLYGON ((")
    assert shapely.from_wkt(wkt).equals_exact(to_polygon(keys, "@dvt-smp-tvz"), 1e-9)


def test_to_geojson(keys):
    geojson = to_geojson(keys, "@dvt-smp-tvz")

    assert geojson["type"] == "Polygon"
    assert len(geojson["coordinates"]) == 1
    assert len(geojson["coordinates"][0]) == 7
    assert geojson["coordinates"][0][0] == geojson["coordinates"][0][-1]
