"""
Wire Layout: фиксированная раскладка пакета ордеров

Пакет = заголовок (8 байт) + count записей по 12 байт, без выравнивания.

    offset  field             width
    0       magic             4   (0xCAFEBABE)
    4       version           2
    6       count             2
    8+12*i  order[i].id       4
    12+12*i order[i].price    4
    16+12*i order[i].quantity 4

ПОРЯДОК БАЙТ: little-endian для всех полей, и при записи, и при чтении.
Стандартные форматы struct ('<') не добавляют padding.
"""

import struct
from typing import Final

from src.core.domain.order import UINT32_MAX
from src.core.domain.packet import UINT16_MAX

# =============================================================================
# КОНСТАНТЫ ПРОТОКОЛА
# =============================================================================

# Magic number для распознавания пакета
PACKET_MAGIC: Final[int] = 0xCAFEBABE

# Единственная поддерживаемая версия протокола
LATEST_VERSION: Final[int] = 1

# Порядок байт на проводе
BYTE_ORDER: Final[str] = "<"


# =============================================================================
# STRUCT ФОРМАТЫ
# =============================================================================

# magic:u32, version:u16, count:u16
HEADER_STRUCT: Final[struct.Struct] = struct.Struct(BYTE_ORDER + "IHH")

# id:u32, price:u32, quantity:u32
ORDER_STRUCT: Final[struct.Struct] = struct.Struct(BYTE_ORDER + "III")

HEADER_SIZE: Final[int] = HEADER_STRUCT.size  # 8
ORDER_SIZE: Final[int] = ORDER_STRUCT.size  # 12


def required_size(count: int) -> int:
    """
    Размер пакета в байтах для count записей.

    Args:
        count: Количество ордеров

    Returns:
        HEADER_SIZE + ORDER_SIZE * count

    Raises:
        ValueError: Если count отрицательный
    """
    if count < 0:
        raise ValueError(f"count cannot be negative: {count}")
    return HEADER_SIZE + ORDER_SIZE * count
