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
"""Ordered substitutions which keep generated codes from spelling out a
handful of unwanted words.

Each replacement differs from its word in the last character only, and that
character ('e' or 'u') is never produced by the base-28 alphabet, so the
reverse pass can find exactly the substrings the forward pass introduced.
The table is applied in order in both directions.
"""

replacement_chars = 'eu'

REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("prn", "pre"),
    ("f4nny", "f4nne"),
    ("tw4t", "tw4e"),
    ("ngr", "ngu"),  # 'u' avoids introducing 'gey'
    ("dck", "dce"),
    ("vjn", "vju"),  # 'u' avoids introducing 'jew'
    ("fck", "fce"),
    ("pns", "pne"),
    ("sht", "she"),
    ("kkk", "kke"),
    ("fgt", "fgu"),  # 'u' avoids introducing 'gey'
    ("dyk", "dye"),
    ("bch", "bce"),
)


def clean_string(s: str) -> str:
    """Replace every unwanted word in a freshly encoded code."""
    for naughty, replacement in REPLACEMENTS:
        if naughty in s:
            s = s.replace(naughty, replacement)
    return s


def dirty_string(s: str) -> str:
    """Undo clean_string before decoding."""
    for naughty, replacement in REPLACEMENTS:
        if replacement in s:
            s = s.replace(replacement, naughty)
    return s
