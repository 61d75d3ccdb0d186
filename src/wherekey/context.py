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
import threading

import attrs

import wherekey.logger as logger
from .codec import RESOLUTION, header_of
from .provider import SpatialIndexProvider

logger = logger.get_logger(__name__)


@attrs.frozen
class CodecContext:
    """Values shared by every encode and decode call, derived once from the
    spatial index provider."""

    resolution: int
    """Resolution at which coordinates are indexed."""

    header_int: int
    """Header bits of every index at `resolution`, in place in a 64-bit
    integer. Decoding only reproduces the encoded index when the same header
    is used on both sides."""


def create_context(provider: SpatialIndexProvider, resolution: int = RESOLUTION) -> CodecContext:
    """Derive the codec context from the index of (0, 0) at `resolution`."""
    origin = provider.latlng_to_index(0.0, 0.0, resolution)
    header_int = header_of(origin)
    logger.debug(f"Created codec context for resolution {resolution}, header {header_int}")
    return CodecContext(resolution=resolution, header_int=header_int)


_default_context: CodecContext | None = None
_default_context_lock = threading.Lock()


def default_context(provider: SpatialIndexProvider) -> CodecContext:
    """Process-wide codec context, created on first use.

    The provider is only consulted by the first call; later calls return the
    cached context.
    """
    global _default_context
    with _default_context_lock:
        if _default_context is None:
            _default_context = create_context(provider)
        return _default_context
