"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления декодированного пакета ордеров
(DecodedBatch.to_dict()) согласно формальному JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схеме.

Схемы:
- order_packet.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.wire.layout import required_size


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (поставляются как package data).
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'order_packet')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Базовый класс для валидаторов контрактов."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если данные валидны, False иначе (без exception)."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class OrderPacketValidator(ContractValidator):
    """
    Валидатор для order_packet контракта.

    Помимо схемы проверяет инварианты пакета:
    - header.count == len(orders)
    - bytes_consumed == HEADER_SIZE + ORDER_SIZE * header.count

    Инварианты проверяются только для данных, прошедших схему.
    """

    def __init__(self):
        super().__init__("order_packet")

    def _invariant_violations(self, data: Dict[str, Any]) -> List[str]:
        count = data["header"]["count"]
        violations = []
        if count != len(data["orders"]):
            violations.append(
                f"header.count {count} does not match {len(data['orders'])} orders"
            )
        if data["bytes_consumed"] != required_size(count):
            violations.append(
                f"bytes_consumed {data['bytes_consumed']} does not match "
                f"{required_size(count)} for {count} orders"
            )
        return violations

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация order_packet данных.

        Raises:
            ValidationError: Если данные не соответствуют схеме
            ValueError: Если нарушены инварианты count / bytes_consumed
        """
        super().validate(data)
        violations = self._invariant_violations(data)
        if violations:
            raise ValueError("; ".join(violations))

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если данные проходят схему и инварианты, False иначе."""
        if not self.validator.is_valid(data):
            return False
        return not self._invariant_violations(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам: сначала ошибки схемы, затем (если схема пройдена)
        нарушения инвариантов в виде ValidationError.
        """
        schema_errors = list(self.validator.iter_errors(data))
        if schema_errors:
            yield from schema_errors
            return
        for message in self._invariant_violations(data):
            yield ValidationError(message)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_order_packet(data: Dict[str, Any]) -> None:
    """
    Валидация order_packet данных.

    Args:
        data: Данные для валидации (например, DecodedBatch.to_dict())

    Raises:
        ValidationError: Если данные не соответствуют схеме
        ValueError: Если нарушены инварианты count / bytes_consumed
    """
    OrderPacketValidator().validate(data)
