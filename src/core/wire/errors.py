"""
Ошибки бинарного протокола пакетов ордеров.

Все ошибки возвращаются вызывающему коду как исключения; кодек ничего
не восстанавливает и не повторяет. Повтор с тем же входом даёт ту же ошибку.
"""


class PacketError(Exception):
    """Базовый класс для всех ошибок кодирования/декодирования пакета."""

    pass


class BufferTooSmall(PacketError):
    """
    Буфер назначения меньше требуемого размера пакета.

    В буфер при этом ничего не записывается.
    """

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Destination buffer too small: required {required} bytes, available {available}"
        )


class MalformedPacket(PacketError):
    """Вход короче заголовка (или содержит лишние байты в strict режиме)."""

    def __init__(self, message: str, length: int):
        self.length = length
        super().__init__(message)


class InvalidMagic(PacketError):
    """Magic number не равен 0xCAFEBABE."""

    def __init__(self, magic: int, expected: int):
        self.magic = magic
        self.expected = expected
        super().__init__(f"Invalid magic 0x{magic:08X}, expected 0x{expected:08X}")


class UnsupportedVersion(PacketError):
    """
    Версия пакета отличается от поддерживаемой.

    Обратной совместимости нет: любая версия кроме текущей отклоняется.
    """

    def __init__(self, version: int, supported: int):
        self.version = version
        self.supported = supported
        super().__init__(f"Unsupported packet version {version}, supported: {supported}")


class TruncatedPacket(PacketError):
    """Заголовок объявляет больше записей, чем есть байт в буфере."""

    def __init__(self, declared_count: int, available_records: int, length: int):
        self.declared_count = declared_count
        self.available_records = available_records
        self.length = length
        super().__init__(
            f"Truncated packet: header declares {declared_count} orders, "
            f"buffer of {length} bytes holds {available_records}"
        )
