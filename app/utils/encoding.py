import hashlib
import string

# Base62 alphabet: digits, then uppercase, then lowercase
ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
BASE = len(ALPHABET)

MIN_CUSTOM_CODE_LENGTH = 3
MAX_CUSTOM_CODE_LENGTH = 20
CUSTOM_CODE_EXTRA_CHARS = "-_"

# Path segments of the API that a custom code may not shadow
RESERVED_WORDS = frozenset({"api", "stats", "admin", "www", "app", "short", "url", "list"})

URL_SCHEMES = ("http://", "https://")


def encode_base62(num: int) -> str:
    """Encode a non-negative integer to Base62, most significant digit first."""
    if num < 0:
        raise ValueError("Cannot encode a negative number")
    if num == 0:
        return ALPHABET[0]
    out = []
    while num:
        num, rem = divmod(num, BASE)
        out.append(ALPHABET[rem])
    return ''.join(reversed(out))


def decode_base62(s: str) -> int:
    """Decode a Base62 string back to its integer value."""
    if not s:
        raise ValueError("Cannot decode an empty string")
    n = 0
    for ch in s:
        idx = ALPHABET.find(ch)
        if idx < 0:
            raise ValueError(f"Invalid Base62 character: {ch!r}")
        n = n * BASE + idx
    return n


def hash_fallback_number(url: str, counter: int) -> int:
    """Number derived from SHA-256(url || counter as 8 little-endian bytes).

    The first 8 bytes of the digest are read as an unsigned little-endian
    64-bit integer.
    """
    digest = hashlib.sha256()
    digest.update(url.encode("utf-8"))
    digest.update(counter.to_bytes(8, "little"))
    return int.from_bytes(digest.digest()[:8], "little")


def is_valid_url(url: str) -> bool:
    return url.startswith(URL_SCHEMES)


def is_valid_custom_code(code: str) -> bool:
    if not MIN_CUSTOM_CODE_LENGTH <= len(code) <= MAX_CUSTOM_CODE_LENGTH:
        return False

    for ch in code:
        if not (ch.isascii() and ch.isalnum()) and ch not in CUSTOM_CODE_EXTRA_CHARS:
            return False

    return code.lower() not in RESERVED_WORDS
