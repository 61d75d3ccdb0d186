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
from __future__ import annotations

import wherekey.logger as logger
from .codec import RESOLUTION, decode_to_h3_int, encode_h3_int, infer_resolution
from .config import WhereKeyConfig
from .context import CodecContext, create_context, default_context
from .errors import (
    IndexInvalidError,
    InvalidFormatError,
    InvalidLatLngRangeError,
    InvalidResolutionError,
    WhereKeyError,
)
from .provider import H3Provider, LatLng, SpatialIndexProvider
from .utils import PREFIX_DISTANCE_MAP, geo_distance
from .validation import parse_placekey, what_part_matches, where_part_matches

logger = logger.get_logger(__name__)


class WhereKeys:
    """
    Converts between coordinates, H3 indexes and where keys.

    Without a provider, a WhereKeys creates and owns an H3Provider for the
    duration of a session and should be closed when no longer needed, ideally
    by using it as a context manager. A provider passed in is left for the
    caller to close, so several facades can share one:

        with WhereKeys() as keys:
            keys.from_geo(37.779274, -122.419262)  # '@5vg-7gq-tvz'
    """

    def __init__(
        self,
        provider: SpatialIndexProvider | None = None,
        context: CodecContext | None = None,
        config: WhereKeyConfig | None = None,
    ):
        # only a provider created here is closed along with the facade
        self._owns_provider = provider is None
        if provider is None:
            self.provider = H3Provider()
            self.context = context if context is not None else default_context(self.provider)
        else:
            self.provider = provider
            self.context = context if context is not None else create_context(provider)
        self.config = config if config is not None else WhereKeyConfig.from_env()

    def close(self):
        if self._owns_provider:
            self.provider.close()

    def __enter__(self) -> WhereKeys:
        if self._owns_provider:
            self.provider.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def from_geo(self, lat: float, lng: float) -> str:
        """Convert a (latitude, longitude) into a where key."""
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            raise InvalidLatLngRangeError(lat, lng)
        h3_int = self.provider.latlng_to_index(lat, lng, self.context.resolution)
        return encode_h3_int(h3_int)

    def to_geo(self, placekey: str) -> LatLng:
        """Convert a where key into the (latitude, longitude) of its cell centre."""
        return self.provider.index_to_latlng(self.to_h3_int(placekey))

    def from_h3_int(self, h3_int: int, validate_resolution: bool | None = None) -> str:
        """Convert an H3 integer into a where key."""
        if not 0 <= h3_int < 1 << 64:
            raise InvalidFormatError(f"{h3_int} is not an unsigned 64-bit H3 index")
        if validate_resolution is None:
            validate_resolution = self.config.validate_resolution
        if validate_resolution:
            resolution = infer_resolution(h3_int)
            if resolution != self.context.resolution:
                raise InvalidResolutionError(resolution, self.context.resolution)
        return encode_h3_int(h3_int)

    def from_h3_string(self, h3_string: str, validate_resolution: bool | None = None) -> str:
        """Convert an H3 hexadecimal string into a where key."""
        try:
            h3_int = int(h3_string, 16)
        except ValueError as e:
            raise InvalidFormatError(f"'{h3_string}' is not a hexadecimal H3 index") from e
        return self.from_h3_int(h3_int, validate_resolution=validate_resolution)

    def to_h3_int(self, placekey: str) -> int:
        """Convert a where key, with or without a what part, into an H3 integer."""
        _, where = parse_placekey(placekey)
        if not where_part_matches(where):
            raise InvalidFormatError(f"'{where}' is not a valid where part")
        return decode_to_h3_int(where, self.context.header_int)

    def to_h3_string(self, placekey: str) -> str:
        """Convert a where key into an H3 hexadecimal string."""
        return self.provider.index_to_string(self.to_h3_int(placekey))

    def to_geo_boundary(self, placekey: str) -> list[LatLng]:
        """The boundary of the cell of a where key, as (latitude, longitude) pairs."""
        return self.provider.index_to_boundary(self.to_h3_int(placekey))

    def distance(self, placekey1: str, placekey2: str) -> float:
        """Distance in metres between the cell centres of two where keys."""
        lat1, lng1 = self.to_geo(placekey1)
        lat2, lng2 = self.to_geo(placekey2)
        return float(geo_distance(lat1, lng1, lat2, lng2))

    @staticmethod
    def prefix_distance_map() -> dict[int, float]:
        """Length of a shared where prefix mapped to the maximal distance in
        metres between two keys sharing a prefix of that length."""
        return dict(PREFIX_DISTANCE_MAP)

    def check_index(self, placekey: str) -> int:
        """Decode a where key and make sure it refers to a real cell,
        returning the H3 integer."""
        h3_int = self.to_h3_int(placekey)
        if not self.provider.is_valid_index(h3_int):
            raise IndexInvalidError(f"'{placekey}' does not refer to a valid H3 cell")
        return h3_int

    def format_is_valid(self, placekey: str, check_index: bool | None = None) -> bool:
        """Whether a key is well formed. Unless `check_index` is False, the
        where part must also decode to a valid cell."""
        try:
            what, where = parse_placekey(placekey)
        except WhereKeyError:
            return False
        if check_index is None:
            check_index = self.config.check_index
        if what != "":
            return self.where_part_is_valid(where, check_index) and self.what_part_is_valid(what)
        return self.where_part_is_valid(where, check_index)

    def where_part_is_valid(self, where: str, check_index: bool = True) -> bool:
        if not where_part_matches(where):
            logger.debug(f"Where part '{where}' does not match the where pattern")
            return False
        if not check_index:
            return True
        try:
            h3_int = decode_to_h3_int(where, self.context.header_int)
        except InvalidFormatError:
            # replacement characters which no substitution accounts for
            return False
        return self.provider.is_valid_index(h3_int)

    @staticmethod
    def what_part_is_valid(what: str) -> bool:
        return what_part_matches(what)
