import os
import pathlib
from pathlib import Path

import dotenv
import pytest

from wherekey.config import WhereKeyConfig
from wherekey.keys import WhereKeys
from wherekey.provider import H3Provider


@pytest.fixture(scope="session")
def root_dir() -> pathlib.Path:
    return Path(__file__).parent.parent


# This fixture will be automatically used by all tests to setup the required env variables
@pytest.fixture(autouse=True)
def env(monkeypatch, root_dir):
    initial_env = dict(os.environ)

    # Use the example .env file to drive the tests
    dotenv.load_dotenv(dotenv_path=root_dir / ".env.example", override=True)

    yield

    # Reset environment to initial state
    os.environ.clear()
    os.environ.update(initial_env)


@pytest.fixture(scope="session")
def provider() -> H3Provider:
    return H3Provider()


@pytest.fixture()
def config() -> WhereKeyConfig:
    return WhereKeyConfig()


@pytest.fixture()
def keys(config):
    """A WhereKeys backed by its own H3 provider, closed after the test."""
    with H3Provider() as h3_provider, WhereKeys(provider=h3_provider, config=config) as where_keys:
        yield where_keys


@pytest.fixture(scope="session")
def example_locations() -> list[dict]:
    """Known locations with their resolution 10 H3 cell and where key."""
    return [
        {
            "name": "0,0",
            "lat": 0.0,
            "lng": 0.0,
            "h3": "8a754e64992ffff",
            "where": "@dvt-smp-tvz",
        },
        {
            "name": "SF City Hall",
            "lat": 37.779274,
            "lng": -122.419262,
            "h3": "8a2830828767fff",
            "where": "@5vg-7gq-tvz",
        },
        {
            "name": "EXO",
            "lat": -34.63582919120901,
            "lng": -58.41313384603939,
            "h3": "8ac2e31064effff",
            "where": "@nxd-g5g-xyv",
        },
    ]
