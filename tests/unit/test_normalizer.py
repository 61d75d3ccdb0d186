import random

from wherekey.codec.normalizer import (
    BASE_CELL_INCREMENT,
    MAX_SHORT_INT,
    UNUSED_RESOLUTION_FILLER,
    header_of,
    infer_resolution,
    shorten_h3_int,
    unshorten_h3_int,
)

# header of every resolution 10 index
HEADER_INT = 621496748577128448

expected_short_ints = {
    0x8a754e64992ffff: 4099330591103, # 0,0
    0x8a2830828767fff: 1449619897151, # SF City Hall
    0x8a283082a677fff: 1449619960767, # Ferry Building in San Francisco
    0x8ac2e31064effff: 6764984739711, # EXO
}


def test_constants():
    assert BASE_CELL_INCREMENT == 2 ** 45
    assert UNUSED_RESOLUTION_FILLER == 0b111_111_111
    assert MAX_SHORT_INT == 2 ** 43


def test_header_of():
    for h3_int in expected_short_ints.keys():
        assert header_of(h3_int) == HEADER_INT


def test_shorten_h3_int():
    for h3_int, short_h3_int in expected_short_ints.items():
        assert shorten_h3_int(h3_int) == short_h3_int


def test_unshorten_h3_int():
    for h3_int, short_h3_int in expected_short_ints.items():
        assert unshorten_h3_int(short_h3_int, HEADER_INT) == h3_int


def test_short_payload_round_trip():
    # the edges of the payload range, plus a deterministic sample of the rest
    payloads = [0, 1, MAX_SHORT_INT - 1]
    rng = random.Random(20201)
    payloads += [rng.randrange(MAX_SHORT_INT) for _ in range(1000)]

    for payload in payloads:
        h3_int = unshorten_h3_int(payload, HEADER_INT)
        assert shorten_h3_int(h3_int) == payload


def test_short_payload_fits_in_nine_symbols():
    for h3_int in expected_short_ints.keys():
        assert 0 <= shorten_h3_int(h3_int) < MAX_SHORT_INT
    assert MAX_SHORT_INT < 28 ** 9


def test_oversized_payload_leaves_resolution_10():
    # payloads beyond 43 bits overwrite the resolution in the header
    h3_int = unshorten_h3_int(28 ** 9 - 1, HEADER_INT)
    assert header_of(h3_int) != HEADER_INT
    assert shorten_h3_int(h3_int) != 28 ** 9 - 1


def test_infer_resolution():
    assert infer_resolution(0x8a754e64992ffff) == 10
    assert infer_resolution(0x8c194ad30d067ff) == 12
    assert infer_resolution(0x8928308280fffff) == 9
    assert infer_resolution(0x8f2830828052d25) == 15
    # every digit unused
    assert infer_resolution(0x8001fffffffffff) == 0


def test_unshortened_index_has_target_resolution():
    rng = random.Random(7)
    for _ in range(100):
        h3_int = unshorten_h3_int(rng.randrange(MAX_SHORT_INT), HEADER_INT)
        # digits 13-15 are always filled as unused
        assert h3_int & UNUSED_RESOLUTION_FILLER == UNUSED_RESOLUTION_FILLER
        assert header_of(h3_int) == HEADER_INT
