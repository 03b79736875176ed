"""
Tests for JSON Schema Contract Validators

Тестирование контракта order_packet:
- Валидность самой схемы
- Валидация DecodedBatch.to_dict() после декодирования
- Детекция нарушений required полей, типов и диапазонов
- Инвариант header.count == len(orders)
"""

import copy
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import OrderPacketValidator, SchemaLoader, validate_order_packet
from src.core.domain import Order
from src.core.wire import decode_batch, encode_batch


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_order_packet():
    """Валидный order_packet, полученный через кодек."""
    orders = [
        Order(id=1, price=100, quantity=5),
        Order(id=2, price=250, quantity=3),
    ]
    return decode_batch(encode_batch(orders)).to_dict()


# =============================================================================
# SCHEMA LOADER
# =============================================================================


def test_schema_loads_and_is_cached():
    loader = SchemaLoader()
    schema = loader.load_schema("order_packet")
    assert schema["title"] == "order_packet"
    assert loader.load_schema("order_packet") is schema


def test_missing_schema():
    with pytest.raises(FileNotFoundError):
        SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# VALID DATA
# =============================================================================


def test_decoded_packet_is_valid(valid_order_packet):
    validate_order_packet(valid_order_packet)
    assert OrderPacketValidator().is_valid(valid_order_packet)


def test_empty_packet_is_valid():
    validate_order_packet(decode_batch(encode_batch([])).to_dict())


# =============================================================================
# VIOLATIONS
# =============================================================================


def test_missing_required_field(valid_order_packet):
    data = copy.deepcopy(valid_order_packet)
    del data["orders"][0]["price"]
    with pytest.raises(ValidationError):
        validate_order_packet(data)


def test_wrong_magic(valid_order_packet):
    data = copy.deepcopy(valid_order_packet)
    data["header"]["magic"] = 0xDEADBEEF
    with pytest.raises(ValidationError):
        validate_order_packet(data)


@pytest.mark.parametrize("value", [-1, 2**32, "100", 1.5])
def test_price_outside_uint32(valid_order_packet, value):
    data = copy.deepcopy(valid_order_packet)
    data["orders"][1]["price"] = value
    with pytest.raises(ValidationError):
        validate_order_packet(data)


def test_additional_property_rejected(valid_order_packet):
    data = copy.deepcopy(valid_order_packet)
    data["orders"][0]["side"] = "buy"
    assert not OrderPacketValidator().is_valid(data)
    assert len(list(OrderPacketValidator().iter_errors(data))) == 1


def test_count_mismatch(valid_order_packet):
    data = copy.deepcopy(valid_order_packet)
    data["orders"].pop()
    with pytest.raises(ValueError):
        validate_order_packet(data)


def test_count_mismatch_is_not_valid(valid_order_packet):
    """is_valid и iter_errors видят те же инварианты, что и validate."""
    data = copy.deepcopy(valid_order_packet)
    data["orders"].pop()
    validator = OrderPacketValidator()
    assert validator.is_valid(data) is False
    errors = list(validator.iter_errors(data))
    assert len(errors) == 1
    assert "header.count" in errors[0].message


@pytest.mark.parametrize("bytes_consumed", [8, 31, 33, 42])
def test_bytes_consumed_mismatch(valid_order_packet, bytes_consumed):
    data = copy.deepcopy(valid_order_packet)
    data["bytes_consumed"] = bytes_consumed
    validator = OrderPacketValidator()
    with pytest.raises(ValueError):
        validator.validate(data)
    assert validator.is_valid(data) is False
    assert "bytes_consumed" in list(validator.iter_errors(data))[0].message


def test_valid_packet_has_no_errors(valid_order_packet):
    assert list(OrderPacketValidator().iter_errors(valid_order_packet)) == []


def test_schema_shipped_inside_package():
    """Схема лежит рядом с модулем валидаторов, а не в корне проекта."""
    import src.core.contracts.validators as validators

    schema_path = Path(validators.__file__).parent / "schema" / "order_packet.json"
    assert schema_path.is_file()
