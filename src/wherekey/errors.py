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
"""Errors raised while encoding, decoding or validating where keys.

Every error is a ValueError so callers which only care about bad input can
catch that, while callers that need to tell failures apart can catch the
specific class.
"""


class WhereKeyError(ValueError):
    """Base class for all wherekey errors."""


class InvalidLatLngRangeError(WhereKeyError):
    """Latitude outside [-90, 90] or longitude outside [-180, 180]."""

    def __init__(self, lat: float, lng: float):
        super().__init__(f"invalid lat/lng range: ({lat}, {lng})")
        self.lat = lat
        self.lng = lng


class InvalidFormatError(WhereKeyError):
    """The where part does not have the shape of an encoded where code."""


class InvalidPartsError(WhereKeyError):
    """A key contains more than one '@' separator."""


class InvalidResolutionError(WhereKeyError):
    def __init__(self, resolution: int, expected: int):
        super().__init__(f"H3 index has resolution {resolution}, expected {expected}")
        self.resolution = resolution
        self.expected = expected


class IndexInvalidError(WhereKeyError):
    """The decoded index is not a valid cell according to the provider."""


class ProviderClosedError(RuntimeError):
    """A spatial index provider was used after it was closed."""
