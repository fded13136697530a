"""
Digits — Таблица цифр позиционных систем счисления

Единственный источник соответствия символ ↔ значение цифры:
- '0'..'9' → 0..9
- 'A'..'Z' → 10..35 (декодирование без учёта регистра)

Таблица строится один раз при импорте и далее только читается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица биективна: value_to_digit(digit_to_value(c)) == c.upper()
2. Значение любой цифры строго меньше основания, в котором она читается
3. Кодирование всегда возвращает символ в верхнем регистре
"""

from types import MappingProxyType
from typing import Final, Mapping

# =============================================================================
# ГРАНИЦЫ ОСНОВАНИЯ
# =============================================================================

# Минимальное поддерживаемое основание
MIN_RADIX: Final[int] = 2

# Максимальное поддерживаемое основание (ограничено алфавитом 0-9A-Z)
MAX_RADIX: Final[int] = 36

# Алфавит цифр в порядке возрастания значения
DIGITS: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


# =============================================================================
# ТАБЛИЦА
# =============================================================================

DIGIT_TO_VALUE: Final[Mapping[str, int]] = MappingProxyType(
    {char: value for value, char in enumerate(DIGITS)}
)

VALUE_TO_DIGIT: Final[Mapping[int, str]] = MappingProxyType(
    {value: char for value, char in enumerate(DIGITS)}
)


class DigitRangeError(ValueError):
    """
    Символ не является цифрой или значение вне диапазона [0, 35].

    Внутренний сигнал: на границе движка транслируется в FORMAT.
    """

    pass


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def digit_to_value(char: str) -> int:
    """
    Декодирование цифры в её значение.

    Args:
        char: Одиночный символ ('0'-'9', 'A'-'Z', 'a'-'z')

    Returns:
        Значение цифры 0..35

    Raises:
        DigitRangeError: Если символ не распознан

    Examples:
        >>> digit_to_value("7")
        7
        >>> digit_to_value("f")
        15
        >>> digit_to_value("P")
        25
    """
    # Только ASCII: 'ı'.upper() == 'I', 'ſ'.upper() == 'S'
    value = DIGIT_TO_VALUE.get(char.upper()) if len(char) == 1 and char.isascii() else None
    if value is None:
        raise DigitRangeError(f"Not a digit: {char!r}")
    return value


def value_to_digit(value: int) -> str:
    """
    Кодирование значения цифры в символ (верхний регистр).

    Args:
        value: Значение цифры 0..35

    Returns:
        Символ цифры

    Raises:
        DigitRangeError: Если значение вне [0, 35]
    """
    char = VALUE_TO_DIGIT.get(value)
    if char is None:
        raise DigitRangeError(f"Digit value out of range [0, {MAX_RADIX - 1}]: {value}")
    return char


def is_valid_radix(radix: object) -> bool:
    """Проверка, что основание является целым числом в [MIN_RADIX, MAX_RADIX]."""
    if isinstance(radix, bool) or not isinstance(radix, int):
        return False
    return MIN_RADIX <= radix <= MAX_RADIX
