"""
Domain models and value objects.

Contains fundamental domain entities: Order, PacketHeader, DecodedBatch.
"""

from src.core.domain.order import UINT32_MAX, Order
from src.core.domain.packet import UINT16_MAX, DecodedBatch, PacketHeader

__all__ = [
    "UINT16_MAX",
    "UINT32_MAX",
    # Order model
    "Order",
    # Packet models
    "PacketHeader",
    "DecodedBatch",
]
