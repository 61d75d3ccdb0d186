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
import argparse
import os
import typing
from typing import Self

import attrs
from environs import Env


class WhereKeyConfigOptions(typing.TypedDict, total=False):
    validate_resolution: bool
    check_index: bool


@attrs.frozen
class WhereKeyConfig:
    """Behaviour switches for encoding and validating where keys."""

    validate_resolution: bool = True
    """Reject H3 indexes whose resolution differs from the codec resolution
    instead of silently encoding the wrong cell."""

    check_index: bool = True
    """Ask the spatial index provider whether a decoded where part is a real
    cell when validating keys. When False, only the shape is checked."""

    @classmethod
    def from_env(cls) -> Self:
        """Load config from environment variables, or an `.env` file."""
        env = Env(expand_vars=True)
        env.read_env()

        return cls(
            validate_resolution=env.bool("WHEREKEY_VALIDATE_RESOLUTION", True),
            check_index=env.bool("WHEREKEY_CHECK_INDEX", True),
        )


def load_config_from_env(**overrides: typing.Unpack[WhereKeyConfigOptions]) -> WhereKeyConfig:
    """Load config from the environment, replacing any values passed as
    keyword arguments."""
    return attrs.evolve(WhereKeyConfig.from_env(), **overrides)


def parse_cli_to_env(args: argparse.Namespace):
    """
    Copy config related CLI arguments into environment variables so they can
    be read in by the config.
    """
    if getattr(args, "no_validate_resolution", False):
        os.environ["WHEREKEY_VALIDATE_RESOLUTION"] = "false"

    if getattr(args, "shape_only", False):
        os.environ["WHEREKEY_CHECK_INDEX"] = "false"
