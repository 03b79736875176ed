"""
Contract Validation Module

Модуль для валидации JSON контрактов пакета ордеров.
"""

from .validators import (
    ContractValidator,
    OrderPacketValidator,
    SchemaLoader,
    validate_order_packet,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderPacketValidator",
    # Functions
    "validate_order_packet",
]
