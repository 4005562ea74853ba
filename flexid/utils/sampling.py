"""Unbiased random characters from an alphabet."""

from flexid.core.errors import RandomSourceError


def sample(length, alphabet, random_source, base=None):
    """
    Draw ``length`` characters uniformly from ``alphabet``.

    Bytes are read from ``random_source(n)`` in batches of ``length``. A byte
    is only kept when it falls below the largest multiple of the base that
    fits in a byte, which removes modulo bias for bases that do not divide
    256.
    """
    if length == 0:
        return ""

    if base is None:
        base = len(alphabet)
    if not 2 <= base <= 256:
        raise ValueError(f"alphabet size must be between 2 and 256, got {base}")

    max_valid_byte = (256 // base) * base - 1
    chars = []

    while len(chars) < length:
        try:
            batch = random_source(length)
        except (OSError, ValueError) as exc:
            raise RandomSourceError("failed to read random bytes", context={"length": length}, cause=exc) from exc
        if not batch:
            raise RandomSourceError("random source is exhausted", context={"length": length})

        for random_byte in batch:
            if random_byte > max_valid_byte:
                continue
            chars.append(alphabet[random_byte % base])
            if len(chars) == length:
                break

    return "".join(chars)
