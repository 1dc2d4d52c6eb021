"""
Numerical Safeguards — Guarded primitives for the exponential identity

Модуль обеспечивает численную корректность всех преобразований
Rt = R0 * e^(k*t):
- Таксономия ошибок (InvalidInput / DomainError)
- Проверка входов на NaN/Inf
- Защищённый ln(ratio): ratio > 0, знаменатель != 0
- Защищённый exp: переполнение → DomainError, а не Inf
- Защищённое деление для решения относительно rate/time
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не возвращаются вызывающему коду (ни на входе, ни на выходе)
2. ln от неположительного отношения никогда не вычисляется
3. Деление на нулевой rate/time/decay_constant никогда не выполняется
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог нулевого делителя по умолчанию: |x| <= ZERO_TOL_DEFAULT → x считается нулём.
# 0.0 означает точное сравнение с нулём.
ZERO_TOL_DEFAULT: Final[float] = 0.0

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExponentialModelError(Exception):
    """Базовая ошибка growth_decay."""


class InvalidInput(ExponentialModelError, ValueError):
    """
    Система не может быть решена из-за формы входа.

    Возникает, когда среди решаемых полей отсутствует ноль или больше одного
    значения, когда не передана обязательная decay_constant, или когда вход
    содержит NaN/Inf.
    """


class DomainError(ExponentialModelError, ValueError):
    """
    Нарушение области определения при выводе значения.

    Attributes:
        derivation: Имя выводимого поля (например, 'rate', 'time', 'half_life')
        reason: Человекочитаемое описание нарушения
    """

    def __init__(self, derivation: str, reason: str):
        self.derivation = derivation
        self.reason = reason
        super().__init__(f"Cannot derive {derivation}: {reason}")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def require_finite(value: float, name: str) -> float:
    """
    Проверка входного значения на NaN/Inf.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к float

    Raises:
        InvalidInput: Если value не число или NaN/Inf

    Examples:
        >>> require_finite(1, "principal")
        1.0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a real number, got {value!r}")

    value = float(value)
    if not is_valid_float(value):
        raise InvalidInput(f"{name} must be finite (not NaN/Inf), got {value}")

    return value


def require_finite_result(value: float, derivation: str) -> float:
    """
    Проверка результата вычисления на NaN/Inf.

    Raises:
        DomainError: Если результат не конечен (переполнение)
    """
    if not is_valid_float(value):
        raise DomainError(derivation, f"result is not finite ({value})")
    return value


# =============================================================================
# ЗАЩИЩЁННЫЕ ПРИМИТИВЫ
# =============================================================================


def is_zero(value: float, tol: float = ZERO_TOL_DEFAULT) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: 0.0, точный ноль)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def safe_exp(exponent: float, derivation: str) -> float:
    """
    e^exponent без переполнения в Inf.

    Args:
        exponent: Показатель степени
        derivation: Имя выводимого поля (для DomainError)

    Returns:
        e^exponent

    Raises:
        DomainError: Если результат не представим конечным float

    Examples:
        >>> safe_exp(0.0, "final_value")
        1.0
    """
    try:
        result = math.exp(exponent)
    except OverflowError:
        raise DomainError(derivation, f"e^({exponent}) overflows")

    return result


def safe_log_ratio(numerator: float, denominator: float, derivation: str) -> float:
    """
    ln(numerator / denominator) с доменной проверкой.

    Отношение должно быть строго положительным. Нулевой знаменатель
    (например, principal == 0) отвергается первым. Деление не выполняется,
    поэтому отношения вида 1e-200/1e200 логарифмируются корректно.

    Args:
        numerator: Числитель отношения (например, final_value)
        denominator: Знаменатель отношения (например, principal)
        derivation: Имя выводимого поля (для DomainError)

    Returns:
        ln(numerator / denominator)

    Raises:
        DomainError: Если denominator == 0 или ratio <= 0

    Examples:
        >>> safe_log_ratio(math.e, 1.0, "rate")
        1.0
        >>> safe_log_ratio(-1.0, 2.0, "rate")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DomainError: Cannot derive rate: ...
    """
    if denominator == 0.0:
        raise DomainError(
            derivation,
            f"ratio {numerator}/{denominator} has a zero denominator",
        )

    # Знак отношения определяется по операндам: частное может уйти в 0 или Inf
    if numerator == 0.0 or (numerator > 0.0) != (denominator > 0.0):
        raise DomainError(
            derivation,
            f"logarithm of non-positive ratio {numerator}/{denominator}",
        )

    return math.log(abs(numerator)) - math.log(abs(denominator))


def checked_divide(
    numerator: float,
    denominator: float,
    derivation: str,
    divisor_name: str,
    tol: float = ZERO_TOL_DEFAULT,
) -> float:
    """
    Деление с запретом нулевого делителя.

    В отличие от fallback-деления здесь нулевой делитель является ошибкой домена:
    rate/time, выведенные через деление на ноль, не существуют.

    Args:
        numerator: Числитель
        denominator: Делитель (time, rate или decay_constant)
        derivation: Имя выводимого поля
        divisor_name: Имя делителя (для сообщения)
        tol: |denominator| <= tol считается нулём

    Returns:
        numerator / denominator

    Raises:
        DomainError: Если делитель нулевой или результат не конечен

    Examples:
        >>> checked_divide(1.0, 4.0, "time", "rate")
        0.25
    """
    if is_zero(denominator, tol):
        raise DomainError(derivation, f"division by zero {divisor_name} ({denominator})")

    return require_finite_result(numerator / denominator, derivation)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
