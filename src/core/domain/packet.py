"""
Packet: Заголовок пакета и результат декодирования

PacketHeader: magic (uint32), version (uint16), count (uint16).
DecodedBatch: заголовок + упорядоченные ордера, прочитанные из буфера.
"""

from typing import Any, Dict, Final, NamedTuple

from pydantic import BaseModel, Field

from .order import UINT32_MAX, Order

# Верхняя граница uint16
UINT16_MAX: Final[int] = 0xFFFF


class PacketHeader(BaseModel):
    """
    Заголовок пакета ордеров.

    Инвариант: count равен количеству записей, следующих за заголовком.
    Immutable модель (frozen=True).
    """

    magic: int = Field(..., ge=0, le=UINT32_MAX, description="Magic number пакета")
    version: int = Field(..., ge=0, le=UINT16_MAX, description="Версия протокола")
    count: int = Field(..., ge=0, le=UINT16_MAX, description="Количество ордеров в пакете")

    model_config = {"frozen": True}  # Immutable


class DecodedBatch(NamedTuple):
    """
    Результат decode_batch.

    Поддерживает распаковку: header, orders, _ = decode_batch(data)
    """

    header: PacketHeader
    orders: tuple[Order, ...]
    # Сколько байт буфера занял пакет (заголовок + записи)
    bytes_consumed: int

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-совместимое представление пакета.

        Формат соответствует контракту contracts/schema/order_packet.json.
        """
        return {
            "header": self.header.model_dump(),
            "orders": [order.model_dump() for order in self.orders],
            "bytes_consumed": self.bytes_consumed,
        }
