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
"""Conversion between full H3 integers and the short payload that is
actually encoded.

H3 index layout (most significant bit first): 1 reserved bit, 4 mode bits,
3 reserved bits, 4 resolution bits, 7 base cell bits, then 15 three-bit
resolution digits. Digits finer than the index resolution hold 7.
"""

MAX_RESOLUTION = 15
RESOLUTION = 10
BASE_RESOLUTION = 12

DIGIT_BITS = 3
HEADER_BITS = 12
LOCATION_BITS = 64 - HEADER_BITS

# keeps the base cell bits positive while the header is cut away
BASE_CELL_INCREMENT = 1 << (DIGIT_BITS * MAX_RESOLUTION)
UNUSED_DIGITS_SHIFT = DIGIT_BITS * (MAX_RESOLUTION - BASE_RESOLUTION)
UNUSED_RESOLUTION_FILLER = (1 << UNUSED_DIGITS_SHIFT) - 1

UNUSED_DIGIT = (1 << DIGIT_BITS) - 1

# payloads at or above this spill into the header when unshortened
MAX_SHORT_INT = 1 << (LOCATION_BITS - UNUSED_DIGITS_SHIFT)


def header_of(h3_int: int) -> int:
    """The non-location header bits of an index, left in place."""
    return (h3_int >> LOCATION_BITS) << LOCATION_BITS


def shorten_h3_int(h3_int: int) -> int:
    """Shorten an H3 integer to only include location data up to the base
    resolution."""
    # cuts off the 12 left-most bits that don't code location
    out = (h3_int + BASE_CELL_INCREMENT) % (1 << LOCATION_BITS)
    # cuts off the rightmost bits corresponding to resolutions greater than the base resolution
    return out >> UNUSED_DIGITS_SHIFT


def unshorten_h3_int(short_h3_int: int, header_int: int) -> int:
    """Rebuild a full H3 integer from a short payload and the header shared
    by every index at the target resolution."""
    unshifted_int = short_h3_int << UNUSED_DIGITS_SHIFT
    return header_int + UNUSED_RESOLUTION_FILLER - BASE_CELL_INCREMENT + unshifted_int


def infer_resolution(h3_int: int) -> int:
    """Resolution implied by the digits of an index: 15 less the number of
    trailing digits that are unused."""
    unused = 0
    digits = h3_int
    while unused < MAX_RESOLUTION and digits & UNUSED_DIGIT == UNUSED_DIGIT:
        unused += 1
        digits >>= DIGIT_BITS
    return MAX_RESOLUTION - unused
