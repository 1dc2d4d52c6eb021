"""
Snapshots — Immutable state of growth/decay records

Immutable Pydantic модели, фиксирующие согласованное состояние записи
в момент вызова snapshot(). Снимок не меняется при последующих modify_*
вызовах исходной записи.

Соответствует схемам:
- exponential_record.json
- ratio_decay_record.json
"""

from pydantic import BaseModel, Field


class ExponentialState(BaseModel):
    """
    Снимок ExponentialRecord.

    Инвариант: final_value ≈ principal * e^(rate * time).
    """

    principal: float = Field(..., description="Начальное значение R0")
    rate: float = Field(..., description="Константа роста k (< 0 → распад)")
    time: float = Field(..., description="Прошедшее время t")
    final_value: float = Field(..., description="Конечное значение Rt")

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def is_growth(self) -> bool:
        """True для роста (k > 0)."""
        return self.rate > 0

    @property
    def is_decay(self) -> bool:
        """True для распада (k < 0)."""
        return self.rate < 0


class RatioDecayState(BaseModel):
    """
    Снимок RatioDecayRecord.

    Инвариант: rt ≈ r0 * e^(-decay_constant * time).
    """

    r0: float = Field(..., description="Исходное отношение R0")
    decay_constant: float = Field(..., description="Decay constant k")
    time: float = Field(..., description="Прошедшее время t")
    rt: float = Field(..., description="Отношение Rt в момент t")

    model_config = {"frozen": True, "allow_inf_nan": False}
