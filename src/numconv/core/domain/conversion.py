"""
Conversion — Модели запроса и ответа конверсии

Immutable Pydantic модели для границы вызова слоем представления.
Соответствуют схемам conversion_request.json / conversion_response.json.

Диапазон основания [2, 36] модель НЕ проверяет: это делает движок,
чтобы вызывающий получал вид ошибки RANGE, а не ошибку модели.
"""

from pydantic import BaseModel, Field, model_validator

from numconv.core.errors import (
    ConversionErrorKind,
    ConversionResult,
    describe_error,
)

# Основания передаются в беззнаковом 8-битном диапазоне
RADIX_FIELD_MAX = 255


# =============================================================================
# REQUEST
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос конверсии: запись числа и два основания.
    """

    numeral: str = Field(..., description="Запись числа в исходном основании")
    from_radix: int = Field(..., ge=0, le=RADIX_FIELD_MAX, description="Исходное основание")
    to_radix: int = Field(..., ge=0, le=RADIX_FIELD_MAX, description="Целевое основание")

    model_config = {"frozen": True, "strict": True}


# =============================================================================
# RESPONSE
# =============================================================================


class ConversionResponse(BaseModel):
    """
    Ответ конверсии.

    Ровно одно из полей result / error заполнено:
    - ok=True: result содержит запись в целевом основании
    - ok=False: error содержит вид ошибки, message содержит сообщение для пользователя
    """

    ok: bool = Field(..., description="Успешность конверсии")
    result: str | None = Field(None, min_length=1, description="Запись в целевом основании")
    error: ConversionErrorKind | None = Field(None, description="Вид ошибки")
    message: str | None = Field(None, description="Сообщение об ошибке для пользователя")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_outcome(self) -> "ConversionResponse":
        """Проверка согласованности ok / result / error"""
        if self.ok:
            if self.result is None or self.error is not None:
                raise ValueError("successful response requires result and no error")
        else:
            if self.error is None or self.result is not None:
                raise ValueError("failed response requires error and no result")
        return self

    @classmethod
    def from_result(cls, result: ConversionResult[str]) -> "ConversionResponse":
        """Построение ответа из результата движка."""
        if result.ok:
            return cls(ok=True, result=result.value)
        return cls(ok=False, error=result.error, message=describe_error(result.error))
