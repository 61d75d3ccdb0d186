"""Compact, shareable where keys for H3 cells."""

import importlib.metadata

import dotenv

__version__ = importlib.metadata.version("wherekey")


# Load environment variables from a local .env file
dotenv.load_dotenv()

from .config import WhereKeyConfig, load_config_from_env  # noqa: E402
from .context import CodecContext, create_context, default_context  # noqa: E402
from .errors import (  # noqa: E402
    IndexInvalidError,
    InvalidFormatError,
    InvalidLatLngRangeError,
    InvalidPartsError,
    InvalidResolutionError,
    ProviderClosedError,
    WhereKeyError,
)
from .keys import WhereKeys  # noqa: E402
from .provider import H3Provider, SpatialIndexProvider  # noqa: E402
