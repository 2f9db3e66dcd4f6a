"""Domain value types for credential generation."""

from enum import Enum


class EncodingFormat(str, Enum):
    """Text rendering of raw random bytes."""

    HEX = "hex"
    BASE64 = "base64"
    BASE64URL = "base64url"

    @classmethod
    def choices(cls) -> list[str]:
        """Return the accepted values in declaration order."""
        return [member.value for member in cls]

    def __str__(self) -> str:
        return self.value
