"""
Errors — Таксономия ошибок конверсии и результат операции

Три непересекающихся вида ошибок:
- RANGE: основание вне [2, 36]
- FORMAT: недопустимая цифра, пустая запись или некорректный десятичный литерал
- OVERFLOW: значение превышает 18446744073709551615 (2^64 - 1)

Движок не бросает исключения для пользовательских ошибок: он возвращает
ConversionResult. Исключения нужны только вызывающему коду, который
предпочитает unwrap().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Generic, TypeVar

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class ConversionErrorKind(str, Enum):
    """Вид ошибки конверсии"""

    RANGE = "RANGE"
    FORMAT = "FORMAT"
    OVERFLOW = "OVERFLOW"


# Сообщения по умолчанию для слоя представления
ERROR_MESSAGES: Final[dict[ConversionErrorKind, str]] = {
    ConversionErrorKind.RANGE: "Invalid Base",
    ConversionErrorKind.FORMAT: "Invalid Number",
    ConversionErrorKind.OVERFLOW: "Number too large",
}


def describe_error(kind: ConversionErrorKind) -> str:
    """Человекочитаемое сообщение для вида ошибки."""
    return ERROR_MESSAGES[ConversionErrorKind(kind)]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionError(Exception):
    """Базовое исключение конверсии (используется только в unwrap())."""

    kind: ConversionErrorKind


class RadixRangeError(ConversionError):
    """Основание вне [MIN_RADIX, MAX_RADIX]."""

    kind = ConversionErrorKind.RANGE


class NumeralFormatError(ConversionError):
    """Запись числа содержит недопустимые символы."""

    kind = ConversionErrorKind.FORMAT


class ValueOverflowError(ConversionError):
    """Значение не помещается в 64-битное беззнаковое целое."""

    kind = ConversionErrorKind.OVERFLOW


_EXCEPTIONS: Final[dict[ConversionErrorKind, type[ConversionError]]] = {
    ConversionErrorKind.RANGE: RadixRangeError,
    ConversionErrorKind.FORMAT: NumeralFormatError,
    ConversionErrorKind.OVERFLOW: ValueOverflowError,
}


def exception_for(kind: ConversionErrorKind) -> type[ConversionError]:
    """Класс исключения, соответствующий виду ошибки."""
    return _EXCEPTIONS[ConversionErrorKind(kind)]


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    """
    Результат операции движка: либо значение, либо вид ошибки.

    Ровно одно из полей value / error имеет смысл:
    - ok=True: value содержит результат, error is None
    - ok=False: error содержит вид ошибки, value is None

    details: диагностическая строка, не часть контракта.
    """

    value: T | None = None
    error: ConversionErrorKind | None = None
    details: str = ""

    def __post_init__(self) -> None:
        if self.error is None and self.value is None:
            raise ValueError("ConversionResult requires either value or error")
        if self.error is not None and self.value is not None:
            raise ValueError("ConversionResult cannot carry both value and error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ConversionResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ConversionErrorKind, details: str = "") -> "ConversionResult[T]":
        return cls(error=ConversionErrorKind(kind), details=details)

    def unwrap(self) -> T:
        """
        Извлечение значения.

        Returns:
            value при успехе

        Raises:
            ConversionError: Подкласс, соответствующий виду ошибки
        """
        if self.error is not None:
            raise exception_for(self.error)(self.details or describe_error(self.error))
        return self.value  # type: ignore[return-value]
