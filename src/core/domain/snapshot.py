"""
CheckedIntSnapshot — сериализуемое представление checked-значения

Immutable Pydantic модель {kind, value, error} для передачи значений через
JSON и восстановления их с явным флагом ошибки.

На границе применяется инвариант маскирования: snapshot failed значения
всегда несёт value == 0.

value и error валидируются в strict режиме: bool, строки и float не
приводятся, так же как их отвергает конструктор CheckedInt.
"""

from pydantic import BaseModel, Field, model_validator

from src.core.domain.checked_int import CheckedInt
from src.core.domain.safe_types import checked_type_for
from src.core.math.int_kinds import IntKind


class CheckedIntSnapshot(BaseModel):
    """Снимок checked-значения"""

    kind: IntKind = Field(..., description="Целочисленный тип (int8 ... uint64)")
    value: int = Field(..., strict=True, description="Значение; 0 для failed")
    error: bool = Field(default=False, strict=True, description="Sticky error флаг")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_value_range(self) -> "CheckedIntSnapshot":
        """Значение должно помещаться в kind; failed snapshot несёт 0"""
        if not self.kind.contains(self.value):
            raise ValueError(
                f"value {self.value} does not fit in {self.kind.value} "
                f"[{self.kind.min_value}, {self.kind.max_value}]"
            )

        if self.error and self.value != 0:
            raise ValueError(f"failed snapshot must carry value 0, got {self.value}")

        return self


def snapshot_of(value: CheckedInt) -> CheckedIntSnapshot:
    """Снимок checked-значения (value маскируется через get())."""
    return CheckedIntSnapshot(kind=value.KIND, value=value.get(), error=value.failure())


def restore(snapshot: CheckedIntSnapshot) -> CheckedInt:
    """
    Восстановление checked-значения из снимка.

    Использует конструирование из литерала с явным флагом ошибки.
    """
    return checked_type_for(snapshot.kind)(snapshot.value, snapshot.error)
