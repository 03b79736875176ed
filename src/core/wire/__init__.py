"""
Wire: бинарный формат пакета ордеров.

Header Codec (заголовок) и Batch Codec (заголовок + записи ордеров).
"""

from src.core.wire.batch_codec import decode_batch, encode_batch, encode_batch_into
from src.core.wire.errors import (
    BufferTooSmall,
    InvalidMagic,
    MalformedPacket,
    PacketError,
    TruncatedPacket,
    UnsupportedVersion,
)
from src.core.wire.header_codec import (
    DEFAULT_CODEC_CONFIG,
    CodecConfig,
    decode_header,
    encode_header,
)
from src.core.wire.layout import (
    BYTE_ORDER,
    HEADER_SIZE,
    LATEST_VERSION,
    ORDER_SIZE,
    PACKET_MAGIC,
    required_size,
)

__all__ = [
    # Layout
    "PACKET_MAGIC",
    "LATEST_VERSION",
    "BYTE_ORDER",
    "HEADER_SIZE",
    "ORDER_SIZE",
    "required_size",
    # Config
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    # Header Codec
    "encode_header",
    "decode_header",
    # Batch Codec
    "encode_batch",
    "encode_batch_into",
    "decode_batch",
    # Errors
    "PacketError",
    "BufferTooSmall",
    "MalformedPacket",
    "InvalidMagic",
    "UnsupportedVersion",
    "TruncatedPacket",
]
