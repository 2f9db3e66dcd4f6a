"""Unit tests for domain value types."""

from credgen.domain.value import EncodingFormat


class TestEncodingFormat:
    """Tests for EncodingFormat."""

    def test_choices(self):
        """Exactly three encodings are supported, in a stable order."""
        assert EncodingFormat.choices() == ["hex", "base64", "base64url"]

    def test_is_string_compatible(self):
        """Members compare equal to and print as their values."""
        assert EncodingFormat.BASE64URL == "base64url"
        assert str(EncodingFormat.HEX) == "hex"
        assert EncodingFormat("base64") is EncodingFormat.BASE64


class TestValuePackage:
    """Tests for the credgen.domain.value exports."""

    def test_exports(self):
        """The value package exposes exactly the encoding enum."""
        from credgen.domain import value

        assert value.__all__ == ["EncodingFormat"]
        assert value.EncodingFormat is EncodingFormat
