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
from wherekey.errors import InvalidFormatError

from .base28 import decode_string, encode_short_int
from .normalizer import MAX_SHORT_INT, shorten_h3_int, unshorten_h3_int
from .profanity import clean_string, dirty_string
from .tuples import format_where, strip_encoding


def encode_h3_int(h3_int: int) -> str:
    """Encode a full H3 integer at the target resolution as an
    `@xxx-xxx-xxx` where part."""
    short_h3_int = shorten_h3_int(h3_int)
    encoded_short_h3 = encode_short_int(short_h3_int)
    clean_encoded_short_h3 = clean_string(encoded_short_h3)
    return format_where(clean_encoded_short_h3)


def decode_to_h3_int(where: str, header_int: int) -> int:
    """Decode a where part back to the full H3 integer it was built from.

    The where part is expected to have been shape checked already, see
    `wherekey.validation.where_part_matches`.
    """
    code = strip_encoding(where)
    dirty_encoding = dirty_string(code)
    short_h3_int = decode_string(dirty_encoding)
    if short_h3_int >= MAX_SHORT_INT:
        raise InvalidFormatError(f"'{where}' is out of range for an H3 index")
    return unshorten_h3_int(short_h3_int, header_int)
