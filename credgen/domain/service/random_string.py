"""Cryptographically secure random strings of an exact length."""

import math
import secrets
from base64 import b64encode

from credgen.domain.error import ValidationError
from credgen.domain.value import EncodingFormat

# Base64 renders 3 bytes as 4 characters. The extra bytes keep the unpadded
# text strictly longer than the requested length, so the partially filled
# final character is always cut off by truncation.
BASE64_MARGIN_BYTES = 2


def required_bytes(length: int, encoding: EncodingFormat) -> int:
    """Number of random bytes needed for at least ``length`` characters.

    Args:
        length: Requested output length in characters
        encoding: Target text encoding

    Returns:
        Byte count to draw from the random source
    """
    if encoding == EncodingFormat.HEX:
        return math.ceil(length / 2)
    return math.ceil(length * 3 / 4) + BASE64_MARGIN_BYTES


def generate_random_string(
    length: int, encoding: EncodingFormat | str = EncodingFormat.HEX
) -> str:
    """Generate a random string using cryptographically secure random bytes.

    Bytes are drawn with :mod:`secrets`, rendered in the requested encoding
    and truncated to exactly ``length`` characters.

    - hex: lowercase ``[0-9a-f]``
    - base64: standard alphabet, ``=`` padding kept if it falls within length
    - base64url: ``-`` and ``_`` instead of ``+`` and ``/``, no padding

    Args:
        length: Number of characters to return (integer >= 1)
        encoding: Encoding format (default: hex)

    Returns:
        Random string of exactly ``length`` characters

    Raises:
        ValidationError: If length is not a positive integer or the encoding
            is not supported

    Example:
        >>> token = generate_random_string(32, "base64url")
        >>> len(token)
        32
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValidationError("length", "length must be a positive integer")

    try:
        encoding = EncodingFormat(encoding)
    except ValueError:
        raise ValidationError(
            "encoding",
            "encoding must be one of: " + ", ".join(EncodingFormat.choices()),
        ) from None

    raw = secrets.token_bytes(required_bytes(length, encoding))

    if encoding == EncodingFormat.HEX:
        text = raw.hex()
    elif encoding == EncodingFormat.BASE64URL:
        text = (
            b64encode(raw)
            .decode("ascii")
            .replace("+", "-")
            .replace("/", "_")
            .replace("=", "")
        )
    else:
        text = b64encode(raw).decode("ascii")

    return text[:length]
