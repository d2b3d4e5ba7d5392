import math

# Base62 alphabet: digits, then uppercase, then lowercase
ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)

INT64_MAX = 2**63 - 1
INT64_MIN = -2**63


def scale_to_int64(number: float) -> int:
    """Scale a draw in [0, 1) onto the signed 64-bit range, truncating toward zero.

    Out-of-range products saturate, so 1.0 lands exactly on INT64_MAX.
    """
    if math.isnan(number):
        return 0
    scaled = number * float(INT64_MAX)
    if scaled >= 2.0**63:
        return INT64_MAX
    if scaled <= -2.0**63:
        return INT64_MIN
    return int(scaled)


def encode_int_base62(value: int) -> str:
    """Encode integer to Base62 string, most significant digit first."""
    if value == 0:
        return ALPHABET[0]
    out = []
    while value > 0:
        value, rem = divmod(value, BASE)
        out.append(ALPHABET[rem])
    return ''.join(reversed(out))


def encode_base62(number: float) -> str:
    """Encode a float in [0, 1) to a Base62 string of at most 11 characters.

    Lossy: distinct floats that scale to the same integer share a code.
    """
    return encode_int_base62(scale_to_int64(number))
