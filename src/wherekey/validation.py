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
"""Shape checks for where keys and the splitting of a key into its parts.

Shape checks only look at characters and grouping. Whether a where part
points at a real cell is a separate question answered by the spatial index
provider, see `WhereKeys.where_part_is_valid`.
"""
import re

from .codec import alphabet, padding_char, replacement_chars
from .errors import InvalidPartsError

first_tuple_regex = "[" + alphabet + replacement_chars + padding_char + "]{3}"
tuple_regex = "[" + alphabet + replacement_chars + "]{3}"

WHERE_REGEX = re.compile("^" + "-".join([first_tuple_regex, tuple_regex, tuple_regex]) + "$")
WHAT_REGEX = re.compile("^[" + alphabet + "]{3}(-[" + alphabet + "]{3})?$")


def parse_placekey(placekey: str) -> tuple[str, str]:
    """Split a key into its (what, where) parts. A key without '@' is a bare
    where part."""
    if "@" not in placekey:
        return "", placekey
    parts = placekey.split("@")
    if len(parts) != 2:
        raise InvalidPartsError(f"invalid key parts: '{placekey}'")
    what, where = parts
    return what, where


def where_part_matches(where: str) -> bool:
    return WHERE_REGEX.match(where.removeprefix("@")) is not None


def what_part_matches(what: str) -> bool:
    return WHAT_REGEX.match(what) is not None
