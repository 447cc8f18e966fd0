"""
Token Stream Integration
========================
Apply the codec to values in ``key=value; key=value`` token streams.

Usage:
    from asc100_core.streams import encoder_key, decoder

    wire = encoder_key().transform_stream("user=alice; mode=debug")
    # "user_asc=...; mode_asc=..."
    decoder().transform_stream(wire)
    # "user=alice; mode=debug"
"""

# Re-export all public APIs
from .models import (
    KEY_SUFFIX,
    VALUE_SUFFIX,
    EncodingMarkMode,
    TransformMode,
    split_tokens,
    join_tokens,
    is_marked,
)
from .value_encoder import (
    ValueEncoder,
    core_key,
    core_value,
    extensions_key,
    extensions_both,
)
from .transformer import (
    StreamTransformer,
    encoder_key,
    encoder_value,
    decoder,
    bidirectional,
    extensions_encoder,
    extensions_decoder,
)

__all__ = [
    # Models
    "KEY_SUFFIX",
    "VALUE_SUFFIX",
    "EncodingMarkMode",
    "TransformMode",
    "split_tokens",
    "join_tokens",
    "is_marked",
    # Value encoder
    "ValueEncoder",
    "core_key",
    "core_value",
    "extensions_key",
    "extensions_both",
    # Transformer
    "StreamTransformer",
    "encoder_key",
    "encoder_value",
    "decoder",
    "bidirectional",
    "extensions_encoder",
    "extensions_decoder",
]
