"""
Batch Codec: кодирование/декодирование пакета ордеров

Пакет = заголовок (через Header Codec) + count записей Order по 12 байт.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Количество записанных байт == required_size(len(orders)), не больше
2. При нехватке места в буфере назначения ничего не записывается (BufferTooSmall)
3. Декодер не читает за пределами буфера: count сверяется с длиной (TruncatedPacket)
4. Порядок ордеров сохраняется при записи и чтении
5. Доменная валидация цены/количества не выполняется
"""

import logging
from typing import Sequence

from src.core.domain.order import Order
from src.core.domain.packet import DecodedBatch
from src.core.wire.errors import BufferTooSmall, MalformedPacket, TruncatedPacket
from src.core.wire.header_codec import (
    DEFAULT_CODEC_CONFIG,
    CodecConfig,
    decode_header,
    encode_header,
)
from src.core.wire.layout import (
    HEADER_SIZE,
    LATEST_VERSION,
    ORDER_SIZE,
    ORDER_STRUCT,
    required_size,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENCODE
# =============================================================================


def _as_order_tuple(orders: Sequence[Order]) -> tuple[Order, ...]:
    batch = tuple(orders)
    for index, order in enumerate(batch):
        if not isinstance(order, Order):
            raise TypeError(
                f"orders[{index}] must be Order, got {type(order).__name__}"
            )
    return batch


def _write_batch(view: memoryview, batch: tuple[Order, ...], version: int, offset: int) -> int:
    # view: байтовый memoryview (format "B"), batch уже проверен
    header = encode_header(version, len(batch))

    required = required_size(len(batch))
    available = view.nbytes - offset
    if required > available:
        raise BufferTooSmall(required, max(available, 0))

    view[offset : offset + HEADER_SIZE] = header
    pos = offset + HEADER_SIZE
    for order in batch:
        ORDER_STRUCT.pack_into(view, pos, *order.to_wire_tuple())
        pos += ORDER_SIZE

    written = pos - offset
    logger.debug("Encoded packet: version=%d orders=%d bytes=%d", version, len(batch), written)
    return written


def encode_batch_into(
    buffer,
    orders: Sequence[Order],
    version: int = LATEST_VERSION,
    offset: int = 0,
) -> int:
    """
    Запись пакета в буфер фиксированной ёмкости, предоставленный вызывающим кодом.

    Ёмкость и offset считаются в байтах, независимо от формата memoryview.

    Args:
        buffer: Записываемый буфер (bytearray или memoryview)
        orders: Ордера в порядке записи (не изменяются)
        version: Версия протокола для заголовка
        offset: Смещение начала пакета в буфере (в байтах)

    Returns:
        Количество записанных байт (HEADER_SIZE + ORDER_SIZE * len(orders))

    Raises:
        BufferTooSmall: Если ёмкость буфера за offset меньше требуемого размера
        ValueError: Если version или len(orders) не помещаются в uint16
        TypeError: Если элемент orders не Order
    """
    if offset < 0:
        raise ValueError(f"offset cannot be negative: {offset}")

    batch = _as_order_tuple(orders)
    return _write_batch(memoryview(buffer).cast("B"), batch, version, offset)


def encode_batch(orders: Sequence[Order], version: int = LATEST_VERSION) -> bytes:
    """
    Кодирование пакета в новый буфер точного размера.

    Args:
        orders: Ордера в порядке записи (не изменяются)
        version: Версия протокола для заголовка

    Returns:
        bytes длиной required_size(len(orders))

    Raises:
        ValueError: Если version или len(orders) не помещаются в uint16
        TypeError: Если элемент orders не Order

    Examples:
        >>> data = encode_batch([Order(id=1, price=100, quantity=5)])
        >>> len(data)
        20
    """
    batch = _as_order_tuple(orders)
    buffer = bytearray(required_size(len(batch)))
    _write_batch(memoryview(buffer), batch, version, 0)
    return bytes(buffer)


# =============================================================================
# DECODE
# =============================================================================


def decode_batch(data, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> DecodedBatch:
    """
    Декодирование и валидация пакета ордеров.

    Ошибки заголовка пробрасываются из decode_header без изменений.

    Args:
        data: bytes, bytearray или memoryview (длина считается в байтах)
        config: Конфигурация кодека

    Returns:
        DecodedBatch(header, orders, bytes_consumed)

    Raises:
        MalformedPacket: Вход короче заголовка; лишние байты при strict_length
        InvalidMagic: Неверный magic number
        UnsupportedVersion: Версия != config.supported_version
        TruncatedPacket: В буфере меньше полных записей, чем header.count
    """
    view = memoryview(data).cast("B")
    header = decode_header(view, config)

    length = view.nbytes
    available_records = (length - HEADER_SIZE) // ORDER_SIZE
    if header.count > available_records:
        logger.warning(
            "Rejected packet: declares %d orders, %d bytes hold %d",
            header.count,
            length,
            available_records,
        )
        raise TruncatedPacket(header.count, available_records, length)

    consumed = required_size(header.count)
    if config.strict_length and length != consumed:
        logger.warning("Rejected packet: %d trailing bytes", length - consumed)
        raise MalformedPacket(
            f"Packet has {length - consumed} trailing bytes after {header.count} orders",
            length,
        )

    orders = []
    pos = HEADER_SIZE
    for _ in range(header.count):
        orders.append(Order.from_wire_tuple(ORDER_STRUCT.unpack_from(view, pos)))
        pos += ORDER_SIZE

    logger.debug(
        "Decoded packet: version=%d orders=%d bytes=%d", header.version, header.count, pos
    )
    return DecodedBatch(header=header, orders=tuple(orders), bytes_consumed=pos)
