"""
Property-based tests for geohash decoding and encoding.
"""

import pytest
from hypothesis import given, settings, strategies as st

from listing_catalog.error_handling import InvalidCoordinateError, InvalidInputError
from listing_catalog.geo import BASE32, decode, decode_bounds, encode


# Strategy for generating valid 7-character geohashes
geohashes = st.text(alphabet=BASE32, min_size=7, max_size=7)

# Characters outside the base-32 alphabet, which has no a, i, l or o
invalid_chars = st.sampled_from(list("ailoAILO!@#-_.,/"))

latitudes = st.floats(min_value=-90.0, max_value=90.0, allow_nan=False)
longitudes = st.floats(min_value=-180.0, max_value=180.0, allow_nan=False)


@given(geohash=geohashes)
@settings(max_examples=200)
def test_decode_is_case_insensitive(geohash):
    """
    Decoding an upper-cased geohash yields exactly the same coordinate as
    decoding the lower-case form.
    """
    assert decode(geohash.upper()) == decode(geohash)


@given(geohash=geohashes)
@settings(max_examples=200)
def test_decode_is_deterministic_and_in_range(geohash):
    """Repeated decodes agree and always land on the globe."""
    latitude, longitude = decode(geohash)

    assert (latitude, longitude) == decode(geohash)
    assert -90.0 <= latitude <= 90.0
    assert -180.0 <= longitude <= 180.0


@given(geohash=geohashes)
@settings(max_examples=100)
def test_decode_returns_cell_centre(geohash):
    """The decoded coordinate is the midpoint of the decoded cell."""
    lat_min, lat_max, lon_min, lon_max = decode_bounds(geohash)
    latitude, longitude = decode(geohash)

    assert lat_min < latitude < lat_max
    assert lon_min < longitude < lon_max
    assert latitude == pytest.approx((lat_min + lat_max) / 2)
    assert longitude == pytest.approx((lon_min + lon_max) / 2)


@given(
    prefix=st.text(alphabet=BASE32, max_size=3),
    bad=invalid_chars,
    suffix=st.text(alphabet=BASE32, max_size=3)
)
@settings(max_examples=100)
def test_decode_rejects_characters_outside_alphabet(prefix, bad, suffix):
    """Any character outside the alphabet fails with InvalidInputError naming it."""
    with pytest.raises(InvalidInputError) as exc_info:
        decode(prefix + bad + suffix)

    assert exc_info.value.character == bad
    assert f"Invalid geohash character: {bad}" in str(exc_info.value)


@pytest.mark.parametrize("geohash,bad", [
    ("9v6\u212apmr", "\u212a"),  # KELVIN SIGN lowercases to k
    ("\u0130v6kpmr", "\u0130"),  # LATIN CAPITAL I WITH DOT lowercases to i + combining dot
    ("9v6kpm\uff52", "\uff52"),  # FULLWIDTH r
])
def test_decode_rejects_non_ascii_lookalikes(geohash, bad):
    """Non-ASCII characters never fold into the alphabet and are reported as sent."""
    with pytest.raises(InvalidInputError) as exc_info:
        decode(geohash)

    assert exc_info.value.character == bad


@given(
    prefix=st.text(alphabet=BASE32, max_size=3),
    bad=st.characters(min_codepoint=128).filter(lambda c: not c.isspace()),
    suffix=st.text(alphabet=BASE32, max_size=3)
)
@settings(max_examples=100)
def test_decode_rejects_any_non_ascii_character(prefix, bad, suffix):
    with pytest.raises(InvalidInputError) as exc_info:
        decode(prefix + bad + suffix)

    assert exc_info.value.character == bad


@pytest.mark.parametrize("geohash", ["", "   ", None])
def test_decode_rejects_empty_geohash(geohash):
    with pytest.raises(InvalidInputError, match="cannot be null or empty"):
        decode(geohash)


def test_decode_known_geohash():
    """ezs42 is the textbook example cell near León, Spain."""
    latitude, longitude = decode("ezs42")

    assert latitude == pytest.approx(42.605, abs=0.001)
    assert longitude == pytest.approx(-5.603, abs=0.001)


def test_decode_first_bit_narrows_longitude():
    # "g" = 01111: longitude lower half first, then latitude upper half
    lat_min, lat_max, lon_min, lon_max = decode_bounds("g")

    assert (lon_min, lon_max) == (-45.0, 0.0)
    assert (lat_min, lat_max) == (45.0, 90.0)


@given(geohash=geohashes)
@settings(max_examples=200)
def test_encode_of_cell_centre_returns_same_geohash(geohash):
    latitude, longitude = decode(geohash)
    assert encode(latitude, longitude, precision=7) == geohash


@given(latitude=latitudes, longitude=longitudes)
@settings(max_examples=200)
def test_encoded_cell_contains_coordinate(latitude, longitude):
    lat_min, lat_max, lon_min, lon_max = decode_bounds(encode(latitude, longitude))

    assert lat_min <= latitude <= lat_max
    assert lon_min <= longitude <= lon_max


def test_encode_rejects_invalid_arguments():
    with pytest.raises(InvalidInputError):
        encode(10.0, 10.0, precision=0)
    with pytest.raises(InvalidCoordinateError):
        encode(91.0, 0.0)
    with pytest.raises(InvalidCoordinateError):
        encode(0.0, -180.5)
