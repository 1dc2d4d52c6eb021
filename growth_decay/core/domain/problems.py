"""
Problems — Tagged variants "which field is unknown"

Immutable Pydantic модели, описывающие задачу для решателя: какой
параметр неизвестен и значения трёх остальных. Discriminated union по полю
`unknown` делает невыразимыми состояния "ноль неизвестных" и "несколько
неизвестных".

ExponentialProblem (Rt = R0 * e^(k*t)):
- SolveForPrincipal(rate, time, final_value)
- SolveForRate(principal, time, final_value)
- SolveForTime(principal, rate, final_value)
- SolveForFinalValue(principal, rate, time)

RatioDecayProblem (Rt = R0 * e^(-k*t), k всегда известна):
- SolveForR0(decay_constant, time, rt)
- SolveForDecayTime(r0, decay_constant, rt)
- SolveForRt(r0, decay_constant, time)
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from growth_decay.core.math.numerical_safeguards import InvalidInput, require_finite

# Общая конфигурация всех вариантов: immutable, без NaN/Inf, без лишних полей
_PROBLEM_MODEL_CONFIG = {"frozen": True, "allow_inf_nan": False, "extra": "forbid"}


# =============================================================================
# EXPONENTIAL PROBLEMS
# =============================================================================


class SolveForPrincipal(BaseModel):
    """Неизвестно начальное значение R0."""

    unknown: Literal["principal"] = "principal"
    rate: float = Field(..., description="Константа роста k")
    time: float = Field(..., description="Прошедшее время t")
    final_value: float = Field(..., description="Конечное значение Rt")

    model_config = _PROBLEM_MODEL_CONFIG


class SolveForRate(BaseModel):
    """Неизвестна константа роста k."""

    unknown: Literal["rate"] = "rate"
    principal: float = Field(..., description="Начальное значение R0")
    time: float = Field(..., description="Прошедшее время t")
    final_value: float = Field(..., description="Конечное значение Rt")

    model_config = _PROBLEM_MODEL_CONFIG


class SolveForTime(BaseModel):
    """Неизвестно прошедшее время t."""

    unknown: Literal["time"] = "time"
    principal: float = Field(..., description="Начальное значение R0")
    rate: float = Field(..., description="Константа роста k")
    final_value: float = Field(..., description="Конечное значение Rt")

    model_config = _PROBLEM_MODEL_CONFIG


class SolveForFinalValue(BaseModel):
    """Неизвестно конечное значение Rt."""

    unknown: Literal["final_value"] = "final_value"
    principal: float = Field(..., description="Начальное значение R0")
    rate: float = Field(..., description="Константа роста k")
    time: float = Field(..., description="Прошедшее время t")

    model_config = _PROBLEM_MODEL_CONFIG


ExponentialProblem = Annotated[
    Union[SolveForPrincipal, SolveForRate, SolveForTime, SolveForFinalValue],
    Field(discriminator="unknown"),
]

_EXPONENTIAL_VARIANTS: dict[str, type[BaseModel]] = {
    "principal": SolveForPrincipal,
    "rate": SolveForRate,
    "time": SolveForTime,
    "final_value": SolveForFinalValue,
}

_EXPONENTIAL_PROBLEM_ADAPTER = TypeAdapter(ExponentialProblem)


# =============================================================================
# RATIO DECAY PROBLEMS
# =============================================================================


class SolveForR0(BaseModel):
    """Неизвестно исходное отношение R0."""

    unknown: Literal["r0"] = "r0"
    decay_constant: float = Field(..., description="Decay constant k")
    time: float = Field(..., description="Прошедшее время t")
    rt: float = Field(..., description="Отношение Rt в момент t")

    model_config = _PROBLEM_MODEL_CONFIG


class SolveForDecayTime(BaseModel):
    """Неизвестно время распада t (например, возраст образца)."""

    unknown: Literal["time"] = "time"
    r0: float = Field(..., description="Исходное отношение R0")
    decay_constant: float = Field(..., description="Decay constant k")
    rt: float = Field(..., description="Отношение Rt в момент t")

    model_config = _PROBLEM_MODEL_CONFIG


class SolveForRt(BaseModel):
    """Неизвестно отношение Rt в момент t."""

    unknown: Literal["rt"] = "rt"
    r0: float = Field(..., description="Исходное отношение R0")
    decay_constant: float = Field(..., description="Decay constant k")
    time: float = Field(..., description="Прошедшее время t")

    model_config = _PROBLEM_MODEL_CONFIG


RatioDecayProblem = Annotated[
    Union[SolveForR0, SolveForDecayTime, SolveForRt],
    Field(discriminator="unknown"),
]

_RATIO_DECAY_VARIANTS: dict[str, type[BaseModel]] = {
    "r0": SolveForR0,
    "time": SolveForDecayTime,
    "rt": SolveForRt,
}

_RATIO_DECAY_PROBLEM_ADAPTER = TypeAdapter(RatioDecayProblem)


# =============================================================================
# BUILDERS
# =============================================================================


def _single_unknown(values: dict[str, Optional[float]]) -> str:
    """Имя единственного отсутствующего поля или InvalidInput."""
    missing = [name for name, value in values.items() if value is None]

    if not missing:
        raise InvalidInput(
            f"Exactly one of {', '.join(values)} must be missing, none is "
            f"(system is over-determined)"
        )

    if len(missing) > 1:
        raise InvalidInput(
            f"Exactly one of {', '.join(values)} must be missing, got "
            f"{len(missing)} missing: {', '.join(missing)} (system is ambiguous)"
        )

    return missing[0]


def exponential_problem(
    principal: Optional[float] = None,
    rate: Optional[float] = None,
    time: Optional[float] = None,
    final_value: Optional[float] = None,
) -> ExponentialProblem:
    """
    Построение tagged variant из четырёх optional значений.

    Args:
        principal: R0 или None
        rate: k или None
        time: t или None
        final_value: Rt или None

    Returns:
        Вариант ExponentialProblem для единственного отсутствующего поля

    Raises:
        InvalidInput: Если отсутствует не ровно одно поле или вход NaN/Inf

    Examples:
        >>> exponential_problem(principal=100.0, rate=0.1, time=2.0)
        SolveForFinalValue(unknown='final_value', principal=100.0, rate=0.1, time=2.0)
    """
    values = {
        "principal": principal,
        "rate": rate,
        "time": time,
        "final_value": final_value,
    }
    unknown = _single_unknown(values)

    known = {
        name: require_finite(value, name)
        for name, value in values.items()
        if value is not None
    }
    return _EXPONENTIAL_VARIANTS[unknown](**known)


def ratio_decay_problem(
    r0: Optional[float] = None,
    decay_constant: Optional[float] = None,
    time: Optional[float] = None,
    rt: Optional[float] = None,
) -> RatioDecayProblem:
    """
    Построение tagged variant для ratio-задачи.

    decay_constant обязательна: в этом варианте она не выводится.

    Raises:
        InvalidInput: Если decay_constant отсутствует, если среди r0/time/rt
            отсутствует не ровно одно поле, или вход NaN/Inf
    """
    if decay_constant is None:
        raise InvalidInput("decay_constant must be supplied (it is never solved for)")

    values = {"r0": r0, "time": time, "rt": rt}
    unknown = _single_unknown(values)

    known = {
        name: require_finite(value, name)
        for name, value in values.items()
        if value is not None
    }
    known["decay_constant"] = require_finite(decay_constant, "decay_constant")
    return _RATIO_DECAY_VARIANTS[unknown](**known)


def parse_exponential_problem(data: dict[str, Any]) -> ExponentialProblem:
    """
    Валидация plain dict в ExponentialProblem по дискриминатору `unknown`.

    Raises:
        pydantic.ValidationError: Если данные не соответствуют ни одному варианту
    """
    return _EXPONENTIAL_PROBLEM_ADAPTER.validate_python(data)


def parse_ratio_decay_problem(data: dict[str, Any]) -> RatioDecayProblem:
    """
    Валидация plain dict в RatioDecayProblem по дискриминатору `unknown`.

    Raises:
        pydantic.ValidationError: Если данные не соответствуют ни одному варианту
    """
    return _RATIO_DECAY_PROBLEM_ADAPTER.validate_python(data)
