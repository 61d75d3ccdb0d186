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
"""Text codec between H3 integers and where codes."""

from .base28 import alphabet, decode_string, encode_short_int
from .normalizer import (
    BASE_RESOLUTION,
    MAX_RESOLUTION,
    MAX_SHORT_INT,
    RESOLUTION,
    header_of,
    infer_resolution,
    shorten_h3_int,
    unshorten_h3_int,
)
from .profanity import REPLACEMENTS, clean_string, dirty_string, replacement_chars
from .tuples import code_length, format_where, padding_char, strip_encoding, tuple_length
from .where import decode_to_h3_int, encode_h3_int
