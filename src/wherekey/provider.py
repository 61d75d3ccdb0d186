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
"""Spatial index providers.

The codec never computes cells itself. Everything that needs the hexagonal
grid (coordinates to cells, cell centres, cell boundaries and cell validity)
goes through a SpatialIndexProvider, which is opened for the lifetime of a
session and closed afterwards.
"""
from __future__ import annotations

import abc

import h3

import wherekey.logger as logger
from .errors import IndexInvalidError, ProviderClosedError

logger = logger.get_logger(__name__)

LatLng = tuple[float, float]


class SpatialIndexProvider(abc.ABC):
    """Capability interface over a hierarchical hexagonal grid, addressed by
    unsigned 64-bit integer indexes."""

    def __init__(self):
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def open(self) -> SpatialIndexProvider:
        """Acquire any underlying session. Providers are usable immediately
        after construction, so this only has to be called after close()."""
        self._closed = False
        return self

    def close(self):
        """Release the underlying session. Safe to call more than once."""
        if not self._closed:
            logger.debug(f"Closing {type(self).__name__}")
        self._closed = True

    def __enter__(self) -> SpatialIndexProvider:
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _check_open(self):
        if self._closed:
            raise ProviderClosedError(f"{type(self).__name__} has been closed")

    @abc.abstractmethod
    def latlng_to_index(self, lat: float, lng: float, resolution: int) -> int:
        """Index of the cell containing (lat, lng) at the given resolution."""

    @abc.abstractmethod
    def index_to_latlng(self, index: int) -> LatLng:
        """Centre of the cell as (lat, lng)."""

    @abc.abstractmethod
    def index_to_boundary(self, index: int) -> list[LatLng]:
        """Vertices of the cell boundary as (lat, lng) pairs."""

    @abc.abstractmethod
    def is_valid_index(self, index: int) -> bool:
        """Whether the index refers to a real cell (hexagon or pentagon)."""

    def index_to_string(self, index: int) -> str:
        """Canonical text form of an index: lowercase hex without padding."""
        return format(index, "x")


class H3Provider(SpatialIndexProvider):
    """SpatialIndexProvider backed by the `h3` package (v4 API)."""

    def _check_cell(self, index: int):
        if not self.is_valid_index(index):
            raise IndexInvalidError(f"{index:x} is not a valid H3 cell")

    def latlng_to_index(self, lat: float, lng: float, resolution: int) -> int:
        self._check_open()
        return h3.str_to_int(h3.latlng_to_cell(lat, lng, resolution))

    def index_to_latlng(self, index: int) -> LatLng:
        self._check_cell(index)
        return h3.cell_to_latlng(h3.int_to_str(index))

    def index_to_boundary(self, index: int) -> list[LatLng]:
        self._check_cell(index)
        return [tuple(vertex) for vertex in h3.cell_to_boundary(h3.int_to_str(index))]

    def is_valid_index(self, index: int) -> bool:
        self._check_open()
        # h3 rejects values which do not fit in 64 bits before validating
        if index < 0 or index >= 1 << 64:
            return False
        return h3.is_valid_cell(h3.int_to_str(index))

    def index_to_string(self, index: int) -> str:
        return h3.int_to_str(index)
