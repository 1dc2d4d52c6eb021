"""
Exponential — Closed-form solvers for Rt = R0 * e^(k*t)

Модуль содержит алгебраические перестановки экспоненциального тождества:
- Решение относительно каждого из четырёх параметров (R0, k, t, Rt)
- Decay sign convention для ratio-задач: Rt = R0 * e^(-k*t)
- Half-life / mean lifetime ↔ decay constant
- Конверсия periodic rate (1 + r)^t ↔ continuous rate e^(k*t)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая функция либо возвращает конечный float, либо бросает DomainError
2. ln берётся только от строго положительного отношения
3. Деление на нулевой time/rate/decay_constant → DomainError
4. Функции чистые: без состояния, без побочных эффектов

ФОРМУЛЫ (growth convention, знак k произвольный):
    Rt = R0 * e^(k*t)
    R0 = Rt / e^(k*t)
    k  = ln(Rt / R0) / t
    t  = ln(Rt / R0) / k

ФОРМУЛЫ (decay convention, k > 0 означает распад):
    Rt = R0 * e^(-k*t)
    R0 = Rt * e^(k*t)
    t  = ln(Rt / R0) / (-k)

    k = ln(2) / half_life
    k = 1 / mean_lifetime
"""

import math
from typing import Final, Iterable

from growth_decay.core.math.numerical_safeguards import (
    ZERO_TOL_DEFAULT,
    DomainError,
    checked_divide,
    require_finite,
    require_finite_result,
    safe_exp,
    safe_log_ratio,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# ln(2): связь half-life и decay constant
LN2: Final[float] = math.log(2.0)

# Порог переключения log(1+r) → log1p(r) для численной стабильности
LOG1P_SWITCH_THRESHOLD: Final[float] = 0.01

# Half-life углерода-14 (годы), стандартное значение для радиоуглеродного датирования
CARBON_14_HALF_LIFE_YEARS: Final[float] = 5730.0


# =============================================================================
# GROWTH CONVENTION: Rt = R0 * e^(k*t)
# =============================================================================


def solve_final_value(principal: float, rate: float, time: float) -> float:
    """
    Rt = R0 * e^(k*t).

    Args:
        principal: Начальное значение R0
        rate: Константа роста k (отрицательная → распад)
        time: Прошедшее время t

    Returns:
        Конечное значение Rt (0.0 при principal == 0 при любых k*t)

    Raises:
        DomainError: Если результат переполняется

    Examples:
        >>> solve_final_value(100.0, 0.0, 5.0)
        100.0
        >>> solve_final_value(0.0, 1.0, 1000.0)
        0.0
    """
    if principal == 0.0:
        return 0.0

    growth = safe_exp(rate * time, "final_value")
    return require_finite_result(principal * growth, "final_value")


def solve_principal(rate: float, time: float, final_value: float) -> float:
    """
    R0 = Rt / e^(k*t).

    Вычисляется как Rt * e^(-k*t), чтобы не делить на e^(k*t),
    которое может уйти в ноль при больших отрицательных k*t.
    При final_value == 0 результат 0.0 без вычисления экспоненты.

    Raises:
        DomainError: Если результат переполняется
    """
    if final_value == 0.0:
        return 0.0

    decay = safe_exp(-rate * time, "principal")
    return require_finite_result(final_value * decay, "principal")


def solve_rate(
    principal: float,
    time: float,
    final_value: float,
    zero_tol: float = ZERO_TOL_DEFAULT,
) -> float:
    """
    k = ln(Rt / R0) / t.

    Args:
        principal: Начальное значение R0
        time: Прошедшее время t
        final_value: Конечное значение Rt
        zero_tol: |time| <= zero_tol считается нулём

    Returns:
        Константа роста k

    Raises:
        DomainError: Если time == 0 или Rt/R0 <= 0

    Examples:
        >>> round(solve_rate(100.0, 1.0, 100.0 * math.e), 12)
        1.0
    """
    # time == 0 проверяется до логарифма: отдельная причина ошибки
    if abs(time) <= zero_tol:
        raise DomainError("rate", f"division by zero time ({time})")

    log_ratio = safe_log_ratio(final_value, principal, "rate")
    return checked_divide(log_ratio, time, "rate", "time", tol=zero_tol)


def solve_time(
    principal: float,
    rate: float,
    final_value: float,
    zero_tol: float = ZERO_TOL_DEFAULT,
) -> float:
    """
    t = ln(Rt / R0) / k.

    Результат может быть отрицательным: при росте (k > 0) и Rt < R0
    значение Rt достигалось в прошлом.

    Raises:
        DomainError: Если rate == 0 или Rt/R0 <= 0

    Examples:
        >>> round(solve_time(1_200_000.0, 0.025, 2_000_000.0), 3)
        20.433
    """
    if abs(rate) <= zero_tol:
        raise DomainError("time", f"division by zero rate ({rate})")

    log_ratio = safe_log_ratio(final_value, principal, "time")
    return checked_divide(log_ratio, rate, "time", "rate", tol=zero_tol)


# =============================================================================
# DECAY CONVENTION: Rt = R0 * e^(-k*t)
# =============================================================================


def solve_decayed_ratio(r0: float, decay_constant: float, time: float) -> float:
    """
    Rt = R0 * e^(-k*t).

    Examples:
        >>> solve_decayed_ratio(1.0, LN2, 1.0)
        0.5
    """
    return solve_final_value(r0, -decay_constant, time)


def solve_initial_ratio(decay_constant: float, time: float, rt: float) -> float:
    """
    R0 = Rt * e^(k*t).
    """
    if rt == 0.0:
        return 0.0

    growth = safe_exp(decay_constant * time, "r0")
    return require_finite_result(rt * growth, "r0")


def solve_decay_time(
    r0: float,
    decay_constant: float,
    rt: float,
    zero_tol: float = ZERO_TOL_DEFAULT,
) -> float:
    """
    t = ln(Rt / R0) / (-k).

    Raises:
        DomainError: Если decay_constant == 0 или Rt/R0 <= 0

    Examples:
        >>> round(solve_decay_time(1.0, LN2, 0.25), 12)
        2.0
    """
    if abs(decay_constant) <= zero_tol:
        raise DomainError("time", f"division by zero decay_constant ({decay_constant})")

    log_ratio = safe_log_ratio(rt, r0, "time")
    return checked_divide(log_ratio, -decay_constant, "time", "decay_constant", tol=zero_tol)


# =============================================================================
# HALF-LIFE / MEAN LIFETIME
# =============================================================================


def decay_constant_from_half_life(half_life: float) -> float:
    """
    Decay constant из half-life: k = ln(2) / half_life.

    Args:
        half_life: Время, за которое величина уменьшается вдвое (> 0)

    Returns:
        Decay constant k > 0

    Raises:
        InvalidInput: Если half_life не число или NaN/Inf
        DomainError: Если half_life <= 0

    Examples:
        >>> round(decay_constant_from_half_life(CARBON_14_HALF_LIFE_YEARS), 8)
        0.00012097
    """
    half_life = require_finite(half_life, "half_life")
    if half_life <= 0.0:
        raise DomainError("decay_constant", f"half_life must be positive, got {half_life}")

    return LN2 / half_life


def half_life_from_decay_constant(decay_constant: float) -> float:
    """
    Half-life из decay constant: half_life = ln(2) / k.

    Raises:
        DomainError: Если decay_constant <= 0 (величина не распадается)
    """
    if not math.isfinite(decay_constant) or decay_constant <= 0.0:
        raise DomainError(
            "half_life", f"decay_constant must be positive, got {decay_constant}"
        )

    return require_finite_result(LN2 / decay_constant, "half_life")


def decay_constant_from_mean_lifetime(mean_lifetime: float) -> float:
    """
    Decay constant из среднего времени жизни τ: k = 1 / τ.

    Эквивалентная запись закона распада: Rt = R0 * e^(-t/τ).

    Raises:
        InvalidInput: Если mean_lifetime не число или NaN/Inf
        DomainError: Если mean_lifetime <= 0
    """
    mean_lifetime = require_finite(mean_lifetime, "mean_lifetime")
    if mean_lifetime <= 0.0:
        raise DomainError(
            "decay_constant", f"mean_lifetime must be positive, got {mean_lifetime}"
        )

    return 1.0 / mean_lifetime


def mean_lifetime_from_decay_constant(decay_constant: float) -> float:
    """
    Среднее время жизни из decay constant: τ = 1 / k.

    Raises:
        DomainError: Если decay_constant <= 0
    """
    if not math.isfinite(decay_constant) or decay_constant <= 0.0:
        raise DomainError(
            "mean_lifetime", f"decay_constant must be positive, got {decay_constant}"
        )

    return require_finite_result(1.0 / decay_constant, "mean_lifetime")


# =============================================================================
# PERIODIC ↔ CONTINUOUS RATE
# =============================================================================


def continuous_rate_from_periodic(periodic_rate: float) -> float:
    """
    Continuous rate из periodic: (1 + r)^t = e^(k*t) → k = ln(1 + r).

    Для |r| < LOG1P_SWITCH_THRESHOLD используется log1p(r).

    Args:
        periodic_rate: Доходность за период r (например, 0.05 для 5%)

    Returns:
        Continuous rate k

    Raises:
        InvalidInput: Если r NaN/Inf
        DomainError: Если r <= -1

    Examples:
        >>> continuous_rate_from_periodic(0.0)
        0.0
        >>> round(continuous_rate_from_periodic(math.e - 1.0), 12)
        1.0
    """
    r = require_finite(periodic_rate, "periodic_rate")

    if r <= -1.0:
        raise DomainError("rate", f"periodic rate must be > -1, got {r}")

    if abs(r) < LOG1P_SWITCH_THRESHOLD:
        return math.log1p(r)
    return math.log(1.0 + r)


def periodic_rate_from_continuous(rate: float) -> float:
    """
    Periodic rate из continuous: r = e^k - 1 (через expm1).

    Raises:
        InvalidInput: Если rate NaN/Inf
        DomainError: Если результат переполняется
    """
    k = require_finite(rate, "rate")

    try:
        result = math.expm1(k)
    except OverflowError:
        raise DomainError("periodic_rate", f"e^({k}) - 1 overflows")

    return result


# =============================================================================
# TRAJECTORY
# =============================================================================


def exponential_trajectory(
    principal: float,
    rate: float,
    times: Iterable[float],
) -> list[float]:
    """
    Значения R0 * e^(k*t) для последовательности моментов времени.

    Args:
        principal: Начальное значение R0
        rate: Константа роста k
        times: Моменты времени

    Returns:
        Список значений той же длины, что и times

    Examples:
        >>> exponential_trajectory(100.0, 0.0, [0.0, 1.0, 2.0])
        [100.0, 100.0, 100.0]
        >>> exponential_trajectory(100.0, 0.1, [])
        []
    """
    return [
        solve_final_value(principal, rate, require_finite(t, "time"))
        for t in times
    ]
