"""
Header Codec: кодирование/декодирование заголовка пакета

Заголовок: magic (uint32) | version (uint16) | count (uint16), 8 байт, little-endian.

Проверки при декодировании (в этом порядке):
1. Длина входа >= HEADER_SIZE → иначе MalformedPacket
2. magic == 0xCAFEBABE → иначе InvalidMagic
3. version == поддерживаемая версия → иначе UnsupportedVersion

Кодирование - чистая тотальная функция: count не сверяется с реальным
числом записей, это ответственность вызывающего кода.
"""

import logging
from dataclasses import dataclass

from src.core.domain.packet import PacketHeader
from src.core.wire.errors import InvalidMagic, MalformedPacket, UnsupportedVersion
from src.core.wire.layout import (
    HEADER_SIZE,
    HEADER_STRUCT,
    LATEST_VERSION,
    PACKET_MAGIC,
    UINT16_MAX,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CodecConfig:
    """
    Конфигурация кодека пакетов.

    Attributes:
        supported_version: Единственная версия, принимаемая при декодировании
        strict_length: Отклонять байты после последней объявленной записи
    """

    supported_version: int = LATEST_VERSION
    strict_length: bool = False

    def __post_init__(self):
        if not 0 <= self.supported_version <= UINT16_MAX:
            raise ValueError(
                f"supported_version must fit uint16, got {self.supported_version}"
            )


DEFAULT_CODEC_CONFIG = CodecConfig()


# =============================================================================
# HEADER CODEC
# =============================================================================


def _check_uint16(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if not 0 <= value <= UINT16_MAX:
        raise ValueError(f"{name} must be in [0, {UINT16_MAX}], got {value}")


def encode_header(version: int, count: int) -> bytes:
    """
    Кодирование заголовка пакета.

    Args:
        version: Версия протокола (uint16)
        count: Количество ордеров, которые будут записаны следом (uint16)

    Returns:
        HEADER_SIZE байт: magic, version, count

    Raises:
        ValueError: Если version или count не помещаются в uint16
    """
    _check_uint16("version", version)
    _check_uint16("count", count)
    return HEADER_STRUCT.pack(PACKET_MAGIC, version, count)


def decode_header(data, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> PacketHeader:
    """
    Декодирование и валидация заголовка пакета.

    Читаются только первые HEADER_SIZE байт; остаток буфера игнорируется.

    Args:
        data: bytes, bytearray или memoryview (длина считается в байтах)
        config: Конфигурация кодека

    Returns:
        PacketHeader

    Raises:
        MalformedPacket: Если вход короче HEADER_SIZE
        InvalidMagic: Если magic != 0xCAFEBABE
        UnsupportedVersion: Если version != config.supported_version
    """
    view = memoryview(data).cast("B")
    length = view.nbytes
    if length < HEADER_SIZE:
        logger.warning("Rejected packet: %d bytes is shorter than header", length)
        raise MalformedPacket(
            f"Packet too short: {length} bytes, header requires {HEADER_SIZE}", length
        )

    magic, version, count = HEADER_STRUCT.unpack_from(view, 0)

    if magic != PACKET_MAGIC:
        logger.warning("Rejected packet: invalid magic 0x%08X", magic)
        raise InvalidMagic(magic, PACKET_MAGIC)

    if version != config.supported_version:
        logger.warning(
            "Rejected packet: version %d, supported %d", version, config.supported_version
        )
        raise UnsupportedVersion(version, config.supported_version)

    return PacketHeader(magic=magic, version=version, count=count)
