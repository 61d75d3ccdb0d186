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

"""Command line entry point for converting and validating where keys"""
import argparse
import json
import logging
import sys

import prettyprinter

import wherekey.logger as logger
from .config import load_config_from_env, parse_cli_to_env
from .errors import WhereKeyError
from .geometry import to_geojson, to_wkt
from .keys import WhereKeys

logger = logger.get_logger(__name__)

prettyprinter.install_extras(["attrs"])


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wherekey",
        description="Convert coordinates and H3 indexes to and from where keys",
    )
    parser.add_argument(
        "--no-validate-resolution",
        action="store_true",
        help="encode H3 indexes of any resolution without complaint",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="encode a latitude and longitude")
    encode.add_argument("lat", type=float)
    encode.add_argument("lng", type=float)

    decode = commands.add_parser("decode", help="decode a key to its cell centre")
    decode.add_argument("key")

    to_h3 = commands.add_parser("h3", help="decode a key to an H3 index")
    to_h3.add_argument("key")

    from_h3 = commands.add_parser("from-h3", help="encode an H3 index")
    from_h3.add_argument("h3_index")

    validate = commands.add_parser("validate", help="check whether a key is valid")
    validate.add_argument("key")
    validate.add_argument(
        "--shape-only",
        action="store_true",
        help="only check the shape of the key, not the cell it refers to",
    )

    distance = commands.add_parser("distance", help="distance in metres between two keys")
    distance.add_argument("key1")
    distance.add_argument("key2")

    boundary = commands.add_parser("boundary", help="boundary of the cell of a key")
    boundary.add_argument("key")
    boundary.add_argument("--format", choices=["list", "wkt", "geojson"], default="list")

    return parser.parse_args(argv)


def run(args: argparse.Namespace, keys: WhereKeys) -> str:
    match args.command:
        case "encode":
            return keys.from_geo(args.lat, args.lng)
        case "decode":
            lat, lng = keys.to_geo(args.key)
            return f"{lat} {lng}"
        case "h3":
            return keys.to_h3_string(args.key)
        case "from-h3":
            return keys.from_h3_string(args.h3_index)
        case "validate":
            return "valid" if keys.format_is_valid(args.key) else "invalid"
        case "distance":
            return f"{keys.distance(args.key1, args.key2):.2f}"
        case "boundary":
            if args.format == "wkt":
                return to_wkt(keys, args.key)
            if args.format == "geojson":
                return json.dumps(to_geojson(keys, args.key))
            return "\n".join(f"{lat} {lng}" for lat, lng in keys.to_geo_boundary(args.key))
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = parse_cli_args(argv)
    parse_cli_to_env(args)
    config = load_config_from_env()

    if logger.level <= logging.DEBUG:
        prettyprinter.cpprint(config)

    logger.info(f"Running {args.command}")
    with WhereKeys(config=config) as keys:
        try:
            print(run(args, keys))
        except WhereKeyError as e:
            logger.error(str(e))
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
