#
# Copyright 2025 The Superpower Institute Ltd.
#
# This file is part of wherekey.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
import json

import shapely
from shapely import Polygon

from .keys import WhereKeys


def to_polygon(keys: WhereKeys, placekey: str) -> Polygon:
    """The cell of a where key as a shapely Polygon.

    Shapely coordinates are (x, y), so vertices are given in
    (longitude, latitude) order, the reverse of `WhereKeys.to_geo_boundary`."""
    boundary = keys.to_geo_boundary(placekey)
    return Polygon([(lng, lat) for lat, lng in boundary])


def to_wkt(keys: WhereKeys, placekey: str) -> str:
    """The cell of a where key as Well Known Text."""
    return to_polygon(keys, placekey).wkt


def to_geojson(keys: WhereKeys, placekey: str) -> dict:
    """The cell of a where key as a GeoJSON geometry mapping."""
    return json.loads(shapely.to_geojson(to_polygon(keys, placekey)))
