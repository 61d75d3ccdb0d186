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

"""General utilities"""

import typing

import numpy as np
from numpy.typing import ArrayLike

T = typing.TypeVar("T", bound=ArrayLike | float)

EARTH_RADIUS_KM = 6371.0

# maximal distance in metres between the centres of two keys which share a
# where prefix of the given length
PREFIX_DISTANCE_MAP = {
    1: 1.274e7,
    2: 2.777e6,
    3: 1.065e6,
    4: 1.524e5,
    5: 2.177e4,
    6: 8227.0,
    7: 1176.0,
    8: 444.3,
    9: 63.47,
}


def geo_distance(lat1: T, lng1: T, lat2: T, lng2: T) -> T:
    """Great circle distance between two (latitude, longitude) coordinates
    using the haversine formula.

    Parameters
    ----------
    lat1
        Latitude of the first point, in degrees
    lng1
        Longitude of the first point, in degrees
    lat2
        Latitude of the second point, in degrees
    lng2
        Longitude of the second point, in degrees

    Returns
    -------
        Distance in metres
    """
    r_lat1, r_lng1, r_lat2, r_lng2 = (np.radians(v) for v in (lat1, lng1, lat2, lng2))
    hav_lat = 0.5 * (1 - np.cos(r_lat1 - r_lat2))
    hav_lng = 0.5 * (1 - np.cos(r_lng1 - r_lng2))
    radical = np.sqrt(hav_lat + np.cos(r_lat1) * np.cos(r_lat2) * hav_lng)
    return 2.0 * EARTH_RADIUS_KM * np.arcsin(radical) * 1000
