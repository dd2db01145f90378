"""
Coefficient — Модель коэффициента цепной дроби

Immutable Pydantic модель одного члена a_i разложения
a0 + 1/(a1 + 1/(a2 + ...)).

Коэффициент хранится как (модуль, знак, маркер периода). Маркер
периода отмечает коэффициент, с которого начинается повторяющийся блок
периодической цепной дроби.
"""

from pydantic import BaseModel, Field, model_validator

from cfrac.core.math.numerical_safeguards import INT64_MAX, validate_int64


class Coefficient(BaseModel):
    """
    Коэффициент цепной дроби.

    Immutable модель (frozen=True): любое изменение последовательности
    коэффициентов создаёт новые экземпляры.

    Равенство определяется знаковым значением И маркером периода:
    коэффициент, начинающий период, не равен такому же по значению
    коэффициенту без маркера.
    """

    magnitude: int = Field(..., ge=0, le=INT64_MAX + 1, description="Модуль коэффициента")
    is_negative: bool = Field(False, description="Флаг отрицательности")
    is_periodic_marker: bool = Field(False, description="Флаг начала периодической части")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_signed_range(self) -> "Coefficient":
        """
        Проверка знакового диапазона int64 и отсутствия "-0".

        Модуль 2**63 допустим только для отрицательного коэффициента.
        """
        if self.magnitude == 0 and self.is_negative:
            raise ValueError("zero coefficient cannot be negative")
        validate_int64(self.signed_value)
        return self

    @classmethod
    def of(cls, value: int, periodic: bool = False) -> "Coefficient":
        """
        Создание коэффициента из знакового целого.

        Args:
            value: Знаковое значение коэффициента
            periodic: Отмечает начало периодической части

        Returns:
            Новый Coefficient

        Raises:
            CoefficientOverflowError: Если value вне int64
        """
        validate_int64(value)
        return cls(magnitude=abs(value), is_negative=value < 0, is_periodic_marker=periodic)

    @property
    def signed_value(self) -> int:
        """Знаковое значение коэффициента."""
        return -self.magnitude if self.is_negative else self.magnitude

    def with_value(self, value: int) -> "Coefficient":
        """Новый коэффициент с тем же маркером периода и другим значением."""
        return Coefficient.of(value, periodic=self.is_periodic_marker)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coefficient):
            return NotImplemented
        return (
            self.signed_value == other.signed_value
            and self.is_periodic_marker == other.is_periodic_marker
        )

    def __hash__(self) -> int:
        return hash((self.signed_value, self.is_periodic_marker))

    def __repr__(self) -> str:
        marker = ", periodic" if self.is_periodic_marker else ""
        return f"Coefficient({self.signed_value}{marker})"
