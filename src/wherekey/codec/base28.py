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

alphabet = '23456789bcdfghjkmnpqrstvwxyz'
alphabet_length = len(alphabet)


def encode_short_int(v: int) -> str:
    """
    Encode a non-negative integer as a base-28 string over `alphabet`,
    most significant symbol first.
    """
    if v == 0:
        return alphabet[0]
    output = ''
    remaining = v
    while remaining > 0:
        remaining, digit = divmod(remaining, alphabet_length)
        output = f"{alphabet[digit]}{output}"
    return output


def decode_string(v: str) -> int:
    """
    Decode a value encoded with encode_short_int back to an integer.
    """
    if v == '':
        raise InvalidFormatError("cannot decode an empty code")
    output = 0
    weight = 1
    for digit in reversed(v):
        value = alphabet.find(digit)
        if value < 0:
            raise InvalidFormatError(f"'{digit}' is not part of the encoding alphabet")
        output += value * weight
        weight *= alphabet_length
    return output
