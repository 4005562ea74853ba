"""
Base-N positional encoding over an arbitrary ordered alphabet.

Digits are written most-significant first and are never padded, so the
encoded length grows with the value. Only unsigned 64-bit values are
supported.
"""

BASE62_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE16_LOWER_ALPHABET = "0123456789abcdef"
BASE16_UPPER_ALPHABET = "0123456789ABCDEF"
BASE64_URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
# Crockford base32: excludes I, L, O and U
CROCKFORD_BASE32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

DEFAULT_ALPHABET = BASE62_ALPHABET

ALPHABETS = {
    "base62": BASE62_ALPHABET,
    "base36": BASE36_ALPHABET,
    "base16": BASE16_LOWER_ALPHABET,
    "base16_upper": BASE16_UPPER_ALPHABET,
    "base64_url": BASE64_URL_ALPHABET,
    "crockford32": CROCKFORD_BASE32_ALPHABET,
}

MAX_UINT64 = 2**64 - 1


def encode(number, alphabet, base=None):
    """Encode ``number`` in base ``len(alphabet)``."""
    if base is None:
        base = len(alphabet)
    if base < 2:
        raise ValueError("alphabet must contain at least 2 characters")
    if not 0 <= number <= MAX_UINT64:
        raise ValueError(f"number {number} is outside the unsigned 64-bit range")

    if number == 0:
        return alphabet[0]

    chars = []
    while number > 0:
        number, remainder = divmod(number, base)
        chars.append(alphabet[remainder])

    return "".join(reversed(chars))


def decode(text, alphabet):
    """Decode a string produced by :func:`encode` back into an integer."""
    if not text:
        raise ValueError("cannot decode an empty string")

    digits = {char: index for index, char in enumerate(alphabet)}
    base = len(alphabet)
    number = 0
    for char in text:
        try:
            digit = digits[char]
        except KeyError:
            raise ValueError(f"character {char!r} is not in the alphabet") from None
        number = number * base + digit

    if number > MAX_UINT64:
        raise ValueError(f"{text!r} decodes to a value outside the unsigned 64-bit range")
    return number
