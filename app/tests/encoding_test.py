import hashlib

import pytest

from app.utils.encoding import (
    ALPHABET,
    decode_base62,
    encode_base62,
    hash_fallback_number,
    is_valid_custom_code,
    is_valid_url,
)


def test_alphabet_order():
    assert len(ALPHABET) == 62
    assert ALPHABET[:10] == "0123456789"
    assert ALPHABET[10] == "A"
    assert ALPHABET[36] == "a"


@pytest.mark.parametrize("num, expected", [
    (0, "0"),
    (9, "9"),
    (10, "A"),
    (61, "z"),
    (62, "10"),
    (1000, "G8"),
    (1001, "G9"),
    (62 ** 2, "100"),
])
def test_encode_base62(num, expected):
    assert encode_base62(num) == expected


def test_encode_negative_rejected():
    with pytest.raises(ValueError):
        encode_base62(-1)


def test_decode_base62():
    assert decode_base62("G8") == 1000
    assert decode_base62("zz") == 62 * 62 - 1


def test_decode_rejects_foreign_characters():
    with pytest.raises(ValueError):
        decode_base62("ab-c")
    with pytest.raises(ValueError):
        decode_base62("")


def test_hash_fallback_number_matches_sha256_prefix():
    url = "https://example.com"
    expected_digest = hashlib.sha256(url.encode() + (1001).to_bytes(8, "little")).digest()
    assert hash_fallback_number(url, 1001) == int.from_bytes(expected_digest[:8], "little")


def test_hash_fallback_number_depends_on_counter():
    url = "https://example.com"
    assert hash_fallback_number(url, 1001) != hash_fallback_number(url, 1002)
    assert 0 <= hash_fallback_number(url, 1001) < 2 ** 64


@pytest.mark.parametrize("url", ["http://x.com", "https://x.com", "http://", "https://a b"])
def test_valid_urls(url):
    assert is_valid_url(url)


@pytest.mark.parametrize("url", ["not-a-url", "ftp://x.com", "HTTP://x.com", " https://x.com", ""])
def test_invalid_urls(url):
    assert not is_valid_url(url)


@pytest.mark.parametrize("code", ["abc", "my-link_1", "A" * 20, "GitHub", "lists", "stats2"])
def test_valid_custom_codes(code):
    assert is_valid_custom_code(code)


@pytest.mark.parametrize("code", [
    "ab",             # too short
    "A" * 21,         # too long
    "has space",
    "slash/code",
    "dot.code",
    "cafés",     # non-ASCII letter
    "１２３",  # full-width digits
    "api",
    "STATS",
    "Admin",
    "list",
])
def test_invalid_custom_codes(code):
    assert not is_valid_custom_code(code)
