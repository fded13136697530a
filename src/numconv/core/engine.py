"""
Conversion Engine — Конверсия записи числа между основаниями 2..36

Модуль обеспечивает:
- Разбор записи в основании B в целое значение (parse_to_decimal)
- Вывод целого значения в основании B (render_from_decimal)
- Прямую конверсию между основаниями (convert)
- Проверку записи на допустимость цифр (validate_numeral)
- Быстрые unsafe-варианты без проверок для уже проверенных данных

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Основание вне [2, 36] → RANGE, независимо от цифр
2. Цифра со значением >= основания или нераспознанный символ → FORMAT
3. Значение > max_value (по умолчанию 2^64 - 1) → OVERFLOW; проверяются
   и умножение, и сложение на каждом шаге накопления
4. Ноль выводится как "0", ведущие нули не выводятся
5. Все операции чистые: без состояния, без I/O, без логирования

Пользовательские ошибки возвращаются как ConversionResult, а не бросаются.
"""

import re
from dataclasses import dataclass
from typing import Any, Final

from numconv.core.digits import (
    MAX_RADIX,
    MIN_RADIX,
    DigitRangeError,
    digit_to_value,
    is_valid_radix,
    value_to_digit,
)
from numconv.core.errors import ConversionErrorKind, ConversionResult

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное 64-битное беззнаковое значение
UINT64_MAX: Final[int] = 2**64 - 1

# Беззнаковый десятичный литерал: пробелы по краям и необязательный '+'
_UNSIGNED_LITERAL: Final[re.Pattern[str]] = re.compile(r"\s*\+?([0-9]+)\s*", re.ASCII)

# Число десятичных цифр в UINT64_MAX; более длинный литерал не разбирается
_UINT64_DIGITS: Final[int] = len(str(UINT64_MAX))


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация движка.

    max_value: верхняя граница допустимого значения (включительно).
    По умолчанию 2^64 - 1; например, 2^32 - 1 для 32-битной границы.
    """

    max_value: int = UINT64_MAX

    def __post_init__(self) -> None:
        if isinstance(self.max_value, bool) or not isinstance(self.max_value, int):
            raise ValueError(f"max_value must be an int, got {self.max_value!r}")
        if not 0 < self.max_value <= UINT64_MAX:
            raise ValueError(f"max_value must be in (0, {UINT64_MAX}], got {self.max_value}")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_numeral(numeral: str, radix: int) -> bool:
    """
    Проверка, что каждый символ записи является допустимой цифрой в основании radix.

    Проверка диапазона основания остаётся за вызывающим кодом.

    Args:
        numeral: Запись числа (старшая цифра первой)
        radix: Основание

    Returns:
        False если запись пустая, не строка, содержит нераспознанный символ
        или цифру со значением >= radix; иначе True

    Examples:
        >>> validate_numeral("1010", 2)
        True
        >>> validate_numeral("12", 2)
        False
        >>> validate_numeral("ff", 16)
        True
    """
    if not isinstance(numeral, str) or not numeral:
        return False

    for char in numeral:
        try:
            if digit_to_value(char) >= radix:
                return False
        except DigitRangeError:
            return False

    return True


def _radix_error(radix: object, label: str) -> ConversionResult[Any]:
    return ConversionResult.failure(
        ConversionErrorKind.RANGE,
        f"{label} must be an int in [{MIN_RADIX}, {MAX_RADIX}], got {radix!r}",
    )


# =============================================================================
# ДВИЖОК
# =============================================================================


class NumberConverter:
    """Движок конверсии между основаниями 2..36.

    Экземпляр не хранит изменяемого состояния и безопасен для
    одновременного использования из нескольких потоков.
    """

    def __init__(self, config: ConverterConfig | None = None):
        """
        Args:
            config: конфигурация движка (опционально, используется default)
        """
        self.config = config or ConverterConfig()

    # -------------------------------------------------------------------------
    # Проверенный путь
    # -------------------------------------------------------------------------

    def convert(self, numeral: str, from_radix: int, to_radix: int) -> ConversionResult[str]:
        """
        Конверсия записи из основания from_radix в основание to_radix.

        Оба основания проверяются до разбора цифр.

        Args:
            numeral: Запись числа в основании from_radix
            from_radix: Исходное основание
            to_radix: Целевое основание

        Returns:
            ConversionResult со строкой в основании to_radix или ошибкой
            RANGE / FORMAT / OVERFLOW

        Examples:
            >>> NumberConverter().convert("FF", 16, 2).value
            '11111111'
            >>> NumberConverter().convert("Z", 36, 10).value
            '35'
        """
        if not is_valid_radix(from_radix):
            return _radix_error(from_radix, "from_radix")
        if not is_valid_radix(to_radix):
            return _radix_error(to_radix, "to_radix")

        parsed = self.parse_to_decimal(numeral, from_radix)
        if not parsed.ok:
            return parsed

        return self.render_from_decimal(parsed.value, to_radix)

    def parse_to_decimal(self, numeral: str, radix: int) -> ConversionResult[int]:
        """
        Разбор записи в основании radix в целое значение.

        Позиционный вес: цифра на позиции i (слева, с нуля) записи длины L
        даёт digit * radix^(L-1-i). Накопление идёт по схеме Горнера
        (acc = acc * radix + digit), что даёт тот же вес; умножение
        и сложение проверяются на переполнение на каждом шаге.

        Args:
            numeral: Запись числа (старшая цифра первой)
            radix: Основание записи

        Returns:
            ConversionResult с целым значением в [0, max_value] или ошибкой
        """
        if not is_valid_radix(radix):
            return _radix_error(radix, "radix")

        if not validate_numeral(numeral, radix):
            return ConversionResult.failure(
                ConversionErrorKind.FORMAT,
                f"Invalid numeral for radix {radix}: {numeral!r}",
            )

        max_value = self.config.max_value
        result = 0
        for char in numeral:
            result *= radix
            if result > max_value:
                return self._overflow(numeral, radix)
            result += digit_to_value(char)
            if result > max_value:
                return self._overflow(numeral, radix)

        return ConversionResult.success(result)

    def parse_to_decimal_string(self, numeral: str, radix: int) -> ConversionResult[str]:
        """То же, что parse_to_decimal, но значение в виде десятичной строки."""
        parsed = self.parse_to_decimal(numeral, radix)
        if not parsed.ok:
            return parsed
        return ConversionResult.success(str(parsed.value))

    def render_from_decimal(self, value: int, radix: int) -> ConversionResult[str]:
        """
        Вывод целого значения в основании radix.

        Повторное деление: остаток value % radix даёт очередную младшую цифру,
        затем value //= radix, пока значение не станет нулём.
        Ноль выводится как "0".

        Args:
            value: Целое значение в [0, max_value]
            radix: Целевое основание

        Returns:
            ConversionResult со строкой (верхний регистр, без ведущих нулей)
        """
        if not is_valid_radix(radix):
            return _radix_error(radix, "radix")

        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return ConversionResult.failure(
                ConversionErrorKind.FORMAT,
                f"Value must be a non-negative int, got {value!r}",
            )

        if value > self.config.max_value:
            return ConversionResult.failure(
                ConversionErrorKind.OVERFLOW,
                f"Value {value} exceeds {self.config.max_value}",
            )

        return ConversionResult.success(_render(value, radix))

    def render_from_decimal_string(self, text: str, radix: int) -> ConversionResult[str]:
        """
        Вывод значения, заданного десятичной строкой, в основании radix.

        Допустимый литерал: ASCII-цифры, необязательный ведущий '+',
        пробелы по краям.

        Args:
            text: Десятичный беззнаковый литерал
            radix: Целевое основание

        Returns:
            ConversionResult со строкой или ошибкой RANGE / FORMAT / OVERFLOW
        """
        if not is_valid_radix(radix):
            return _radix_error(radix, "radix")

        match = _UNSIGNED_LITERAL.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            return ConversionResult.failure(
                ConversionErrorKind.FORMAT,
                f"Not an unsigned integer literal: {text!r}",
            )

        digits = match.group(1).lstrip("0") or "0"
        if len(digits) > _UINT64_DIGITS:
            return ConversionResult.failure(
                ConversionErrorKind.OVERFLOW,
                f"Literal with {len(digits)} significant digits exceeds {self.config.max_value}",
            )

        return self.render_from_decimal(int(digits), radix)

    def _overflow(self, numeral: str, radix: int) -> ConversionResult[Any]:
        return ConversionResult.failure(
            ConversionErrorKind.OVERFLOW,
            f"Numeral {numeral!r} in radix {radix} exceeds {self.config.max_value}",
        )

    validate_numeral = staticmethod(validate_numeral)

    # -------------------------------------------------------------------------
    # Unsafe путь (без проверок)
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_to_decimal_unsafe(numeral: str, radix: int) -> int:
        """
        Разбор записи без проверки цифр и переполнения.

        ВНИМАНИЕ: только для уже проверенных данных. Арифметика
        заворачивается по модулю 2^64. Нераспознанный символ
        вызывает DigitRangeError.
        """
        result = 0
        for char in numeral:
            result = (result * radix + digit_to_value(char)) & UINT64_MAX
        return result

    @staticmethod
    def render_from_decimal_unsafe(value: int, radix: int) -> str:
        """
        Вывод значения без проверки основания и значения.

        ВНИМАНИЕ: radix обязан быть в [2, 36], value >= 0.
        """
        return _render(value, radix)

    def convert_unsafe(self, numeral: str, from_radix: int, to_radix: int) -> str:
        """Конверсия без проверок; см. parse_to_decimal_unsafe."""
        value = self.parse_to_decimal_unsafe(numeral, from_radix)
        return self.render_from_decimal_unsafe(value, to_radix)


def _render(value: int, radix: int) -> str:
    if value == 0:
        return "0"

    digits = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(value_to_digit(remainder))
    return "".join(reversed(digits))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Экземпляр по умолчанию (64-битная граница)
_DEFAULT_CONVERTER = NumberConverter()


def convert(numeral: str, from_radix: int, to_radix: int) -> ConversionResult[str]:
    """Конверсия записи между основаниями (64-битная граница)."""
    return _DEFAULT_CONVERTER.convert(numeral, from_radix, to_radix)


def parse_to_decimal(numeral: str, radix: int) -> ConversionResult[int]:
    """Разбор записи в целое значение (64-битная граница)."""
    return _DEFAULT_CONVERTER.parse_to_decimal(numeral, radix)


def parse_to_decimal_string(numeral: str, radix: int) -> ConversionResult[str]:
    """Разбор записи в десятичную строку (64-битная граница)."""
    return _DEFAULT_CONVERTER.parse_to_decimal_string(numeral, radix)


def render_from_decimal(value: int, radix: int) -> ConversionResult[str]:
    """Вывод целого значения в основании radix."""
    return _DEFAULT_CONVERTER.render_from_decimal(value, radix)


def render_from_decimal_string(text: str, radix: int) -> ConversionResult[str]:
    """Вывод десятичного литерала в основании radix."""
    return _DEFAULT_CONVERTER.render_from_decimal_string(text, radix)


def convert_unsafe(numeral: str, from_radix: int, to_radix: int) -> str:
    """Конверсия без проверок (только для проверенных данных)."""
    return _DEFAULT_CONVERTER.convert_unsafe(numeral, from_radix, to_radix)


def parse_to_decimal_unsafe(numeral: str, radix: int) -> int:
    """Разбор записи без проверок (только для проверенных данных)."""
    return NumberConverter.parse_to_decimal_unsafe(numeral, radix)


def render_from_decimal_unsafe(value: int, radix: int) -> str:
    """Вывод значения без проверок (только для проверенных данных)."""
    return NumberConverter.render_from_decimal_unsafe(value, radix)
