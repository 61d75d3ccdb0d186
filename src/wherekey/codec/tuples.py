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

code_length = 9
tuple_length = 3
padding_char = 'a'
separator = '-'
where_prefix = '@'


def format_where(code: str) -> str:
    """
    Pad a cleaned code on the left to the full code length, split it into
    tuples and join them into an `@xxx-xxx-xxx` where part.
    """
    if len(code) > code_length:
        raise InvalidFormatError(f"code '{code}' is longer than {code_length} characters")
    padded = code.rjust(code_length, padding_char)
    tuples = [padded[i:i + tuple_length] for i in range(0, code_length, tuple_length)]
    return where_prefix + separator.join(tuples)


def strip_encoding(where: str) -> str:
    """
    Remove the prefix, separators and padding from a where part, leaving the
    cleaned code.
    """
    for char in (where_prefix, separator, padding_char):
        where = where.replace(char, '')
    return where
