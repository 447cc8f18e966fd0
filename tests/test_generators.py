"""
Unit Tests for Random Generators
================================
"""

import string
import uuid

import pytest


class TestRandomStrings:
    """Tests for random string helpers."""

    def test_lengths_and_alphabets(self):
        """Should respect length and character set."""
        from asc100_core.generators import rand_alnum, rand_alpha, rand_hex, rand_string

        assert len(rand_alnum(12)) == 12
        assert rand_alnum(50).isalnum()
        assert all(c in string.ascii_letters for c in rand_alpha(40))
        assert all(c in "0123456789abcdef" for c in rand_hex(40))
        assert set(rand_string(30, "xy")) <= {"x", "y"}

    def test_empty_charset(self):
        """An empty charset is an error."""
        from asc100_core.generators import rand_string

        with pytest.raises(ValueError):
            rand_string(3, "")

    def test_uuid(self):
        """Should return a valid UUID4 string."""
        from asc100_core.generators import rand_uuid

        assert uuid.UUID(rand_uuid()).version == 4

    def test_choice(self):
        """Should pick from the sequence and reject empty input."""
        from asc100_core.generators import rand_choice

        assert rand_choice(["only"]) == "only"
        with pytest.raises(IndexError):
            rand_choice([])


class TestTokenGenerators:
    """Tests for token and stream generators."""

    def test_gen_token(self):
        """Should build a namespaced key=value token."""
        from asc100_core.generators import gen_token, ValueType

        token = gen_token("user", ValueType.HEX, namespace="app", length=6)
        key, _, value = token.partition("=")

        assert key == "app:user"
        assert len(value) == 6

    def test_gen_token_stream_parses(self):
        """Generated streams should split into the requested number of tokens."""
        from asc100_core.generators import gen_token_stream
        from asc100_core.streams import split_tokens

        assert len(split_tokens(gen_token_stream(8, namespaced=True))) == 8

    def test_gen_token_stream_encodes(self):
        """Generated streams should survive an encode/decode cycle."""
        from asc100_core.generators import gen_token_stream
        from asc100_core.streams import encoder_key, decoder

        stream = gen_token_stream(5)

        assert decoder().transform_stream(encoder_key().transform_stream(stream)) == stream

    def test_gen_marker_text(self):
        """Marker text should round-trip under extensions."""
        from asc100_core.codec import Asc100Codec
        from asc100_core.generators import gen_marker_text

        text = gen_marker_text(30, markers=["#EOF#", "#NL#"])
        codec = Asc100Codec.extensions()

        assert len(text.split()) >= 30
        assert codec.decode(codec.encode(text)) == text
