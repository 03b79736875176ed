"""
Order: Модель торгового ордера в пакете

Immutable Pydantic модель фиксированного размера: три беззнаковых
32-битных поля (id, price, quantity). На проводе занимает 12 байт.

Доменная валидация (диапазоны цены и количества) не выполняется:
проверяется только, что значения помещаются в uint32.
"""

from typing import Final

from pydantic import BaseModel, Field

# Верхняя граница uint32
UINT32_MAX: Final[int] = 0xFFFFFFFF


class Order(BaseModel):
    """
    Торговый ордер (payload пакета).

    Immutable модель (frozen=True). Идентичность определяется только полями.
    """

    id: int = Field(..., ge=0, le=UINT32_MAX, description="Идентификатор ордера (uint32)")
    price: int = Field(..., ge=0, le=UINT32_MAX, description="Цена (uint32)")
    quantity: int = Field(..., ge=0, le=UINT32_MAX, description="Количество (uint32)")

    model_config = {"frozen": True}  # Immutable

    def to_wire_tuple(self) -> tuple[int, int, int]:
        """Поля в порядке раскладки на проводе: (id, price, quantity)."""
        return (self.id, self.price, self.quantity)

    @classmethod
    def from_wire_tuple(cls, fields: tuple[int, int, int]) -> "Order":
        """
        Создание Order из кортежа, прочитанного с провода.

        Args:
            fields: (id, price, quantity)

        Returns:
            Order
        """
        order_id, price, quantity = fields
        return cls(id=order_id, price=price, quantity=quantity)
