from h3viz.models import Feature, FeatureCollection

LINE = {"type": "LineString", "coordinates": [[2.0, 48.0], [2.1, 48.1]]}


def test_feature_geojson_does_not_share_geometry():
    feature = Feature({"type": "LineString", "coordinates": [[2.0, 48.0], [2.1, 48.1]]},
                      {"label": "75 m"})
    data = feature.to_geojson()
    data["geometry"]["coordinates"][0][0] = 99.0
    data["geometry"]["type"] = "Point"
    data["properties"]["label"] = "changed"

    assert feature.geometry == LINE
    assert feature.label == "75 m"


def test_collection_geojson_does_not_share_geometry():
    collection = FeatureCollection((Feature(dict(LINE, coordinates=[[2.0, 48.0], [2.1, 48.1]])),))
    collection.to_geojson()["features"][0]["geometry"]["coordinates"].clear()
    assert collection.features[0].geometry == LINE
