import math

import pytest

from wherekey.errors import IndexInvalidError, ProviderClosedError
from wherekey.provider import H3Provider


def test_h3_provider_latlng_to_index(provider):
    assert provider.latlng_to_index(0.0, 0.0, 10) == 0x8a754e64992ffff
    assert provider.latlng_to_index(37.779274, -122.419262, 10) == 0x8a2830828767fff


def test_h3_provider_index_to_latlng(provider):
    lat, lng = provider.index_to_latlng(0x8a2a1072b59ffff)

    assert math.isclose(lat, 40.68942184369931, abs_tol=1e-7)
    assert math.isclose(lng, -74.04443139990863, abs_tol=1e-7)


def test_h3_provider_index_to_boundary(provider):
    hexagon = provider.index_to_boundary(0x8a2a1072b59ffff)
    assert len(hexagon) == 6
    # one known vertex of the hexagon
    assert any(
        math.isclose(lat, 40.6900586009536, abs_tol=1e-7)
        and math.isclose(lng, -74.04415176176158, abs_tol=1e-7)
        for lat, lng in hexagon
    )

    pentagon = provider.index_to_boundary(0x8ac200000007fff)
    assert len(pentagon) == 5


def test_h3_provider_is_valid_index(provider):
    assert provider.is_valid_index(0x8a754e64992ffff)
    assert not provider.is_valid_index(0)
    assert not provider.is_valid_index(-1)
    assert not provider.is_valid_index(1 << 64)


def test_h3_provider_index_to_string(provider):
    assert provider.index_to_string(0x8a754e64992ffff) == "8a754e64992ffff"


def test_h3_provider_closed():
    h3_provider = H3Provider()

    with h3_provider:
        assert h3_provider.latlng_to_index(0.0, 0.0, 10) == 0x8a754e64992ffff
    assert h3_provider.closed

    with pytest.raises(ProviderClosedError):
        h3_provider.latlng_to_index(0.0, 0.0, 10)

    # closing twice is fine
    h3_provider.close()

    h3_provider.open()
    assert not h3_provider.closed
    assert h3_provider.is_valid_index(0x8a754e64992ffff)


def test_h3_provider_closed_on_error():
    h3_provider = H3Provider()

    with pytest.raises(RuntimeError):
        with h3_provider:
            raise RuntimeError("session failed")

    assert h3_provider.closed


def test_h3_provider_invalid_cell(provider):
    with pytest.raises(IndexInvalidError):
        provider.index_to_latlng(0)
    with pytest.raises(IndexInvalidError):
        provider.index_to_boundary(0x8a754e64992f000)
