"""
Unit Tests for Token Streams
============================
Tests for value encoding and stream transformation.
"""

import pytest


class TestTokenHelpers:
    """Tests for token splitting and marking."""

    def test_split_tokens(self):
        """Should split on ';' and the first '='."""
        from asc100_core.streams import split_tokens

        pairs = split_tokens("user=alice; app:query=a=b;; mode=")

        assert pairs == [("user", "alice"), ("app:query", "a=b"), ("mode", "")]

    def test_split_tokens_missing_equals(self):
        """Entries without '=' should raise TokenFormatError."""
        from asc100_core.streams import split_tokens
        from asc100_core.exceptions import TokenFormatError

        with pytest.raises(TokenFormatError):
            split_tokens("user=alice; broken")

    def test_is_marked(self):
        """Either suffix marks a pair as encoded."""
        from asc100_core.streams import is_marked

        assert is_marked("user_asc", "Qog")
        assert is_marked("user", "Qog:a")
        assert not is_marked("user", "Qog")


class TestValueEncoder:
    """Tests for ValueEncoder."""

    def test_key_suffix_mode(self):
        """Key suffix mode should rename the key and encode the value."""
        from asc100_core.streams import core_key

        key, value = core_key().encode_pair("user", "AB")

        assert key == "user_asc"
        assert value == "Qog"

    def test_value_suffix_mode(self):
        """Value suffix mode should append ':a' to the value."""
        from asc100_core.streams import core_value

        assert core_value().encode_pair("user", "AB") == ("user", "Qog:a")

    def test_both_mode(self):
        """Both mode should mark key and value."""
        from asc100_core.streams import extensions_both

        key, value = extensions_both().encode_pair("content", "done #EOF#")

        assert key == "content_asc"
        assert value.endswith(":a")

    def test_decode_pair_passthrough(self):
        """Unmarked pairs should be returned untouched."""
        from asc100_core.streams import core_key

        assert core_key().decode_pair("mode", "debug") == ("mode", "debug")

    def test_decode_value_strips_mark(self):
        """decode_value should accept a value carrying ':a'."""
        from asc100_core.streams import core_value

        assert core_value().decode_value("Qog:a") == "AB"

    def test_token_string_round_trip(self):
        """Encoded token strings should decode back to the original."""
        from asc100_core.streams import core_key, extensions_key

        stream = "content=Hello, World!; app:version=1.0"
        for encoder in (core_key(), extensions_key()):
            encoded = encoder.encode_token_string(stream)
            assert "content_asc=" in encoded
            assert "app:version_asc=" in encoded
            assert encoder.decode_token_string(encoded) == stream


class TestStreamTransformer:
    """Tests for StreamTransformer."""

    def test_encode_then_decode(self):
        """Decoder should reverse the key-marked encoder."""
        from asc100_core.streams import encoder_key, decoder

        stream = "user=alice; mode=debug"
        encoded = encoder_key().transform_stream(stream)

        assert encoded.startswith("user_asc=")
        assert decoder().transform_stream(encoded) == stream

    def test_value_marked_encoder(self):
        """Value-marked output should decode too."""
        from asc100_core.streams import encoder_value, decoder

        encoded = encoder_value().transform_stream("a=AB")

        assert encoded == "a=Qog:a"
        assert decoder().transform_stream(encoded) == "a=AB"

    def test_bidirectional(self):
        """Bidirectional should encode plain pairs and decode marked ones."""
        from asc100_core.streams import bidirectional

        result = bidirectional().transform_stream("a=AB; b_asc=Qog")

        assert result == "a_asc=Qog; b=AB"

    def test_transform_selective(self):
        """Only listed keys (ignoring namespace) should change."""
        from asc100_core.streams import encoder_key

        result = encoder_key().transform_selective("app:user=AB; mode=debug", ["user"])

        assert result == "app:user_asc=Qog; mode=debug"

    def test_chain_transform(self):
        """The transformed stream should feed the next stage."""
        from asc100_core.streams import encoder_key

        assert encoder_key().chain_transform("a=AB", str.upper) == "A_ASC=QOG"

    def test_compression_gate(self):
        """Short streams should pass through unchanged."""
        from asc100_core.streams import encoder_key

        transformer = encoder_key()

        assert transformer.compression_gate("a=AB", min_size=100) == "a=AB"
        assert transformer.compression_gate("a=AB", min_size=4) == "a_asc=Qog"

    def test_fork_encode(self):
        """Should return the original alongside the transformed stream."""
        from asc100_core.streams import encoder_key

        original, encoded = encoder_key().fork_encode("a=AB")

        assert original == "a=AB"
        assert encoded == "a_asc=Qog"

    def test_extensions_markers_in_values(self):
        """Markers inside values should survive the extensions pipeline."""
        from asc100_core.streams import extensions_encoder, extensions_decoder

        stream = "body=line one#NL#line two#EOF#"
        encoded = extensions_encoder().transform_stream(stream)

        assert extensions_decoder().transform_stream(encoded) == stream
