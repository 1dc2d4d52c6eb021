"""
ExponentialRecord — General growth/decay record

Запись из четырёх взаимно согласованных полей экспоненциального тождества:

    final_value = principal * e^(rate * time)

Ровно одно поле неизвестно при создании и вычисляется из трёх остальных.
После создания поля доступны только на чтение; любое изменение выполняется
через modify_* операции, которые пересчитывают ровно одно зависимое поле:

| Операция             | Устанавливает | Пересчитывает |
|----------------------|---------------|---------------|
| modify_principal     | principal     | final_value   |
| modify_rate          | rate          | final_value   |
| modify_time          | time          | final_value   |
| modify_final_value   | final_value   | time          |

Обновление атомарно: при DomainError запись остаётся в предыдущем
согласованном состоянии.

Потокобезопасность: внутренней синхронизации нет. Если запись разделяется
между потоками, вызывающий код обеспечивает одного писателя за раз.
"""

import logging
from typing import Iterable, Optional

from growth_decay.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from growth_decay.core.domain.problems import (
    ExponentialProblem,
    SolveForFinalValue,
    SolveForPrincipal,
    SolveForRate,
    SolveForTime,
    exponential_problem,
)
from growth_decay.core.domain.snapshots import ExponentialState
from growth_decay.core.math.exponential import (
    LN2,
    exponential_trajectory,
    half_life_from_decay_constant,
    solve_final_value,
    solve_principal,
    solve_rate,
    solve_time,
)
from growth_decay.core.math.numerical_safeguards import (
    DomainError,
    InvalidInput,
    is_close,
    require_finite,
    require_finite_result,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SOLVER
# =============================================================================


def solve_exponential_problem(
    problem: ExponentialProblem,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> tuple[float, float, float, float]:
    """
    Решение задачи относительно неизвестного поля.

    Args:
        problem: Tagged variant с тремя известными значениями
        config: Конфигурация решателя (zero_tol)

    Returns:
        (principal, rate, time, final_value)

    Raises:
        DomainError: Если неизвестное не выводится (ln неположительного
            отношения, нулевой делитель, переполнение)
        InvalidInput: Если problem не является ExponentialProblem
    """
    if isinstance(problem, SolveForFinalValue):
        final_value = solve_final_value(problem.principal, problem.rate, problem.time)
        return problem.principal, problem.rate, problem.time, final_value

    if isinstance(problem, SolveForPrincipal):
        principal = solve_principal(problem.rate, problem.time, problem.final_value)
        return principal, problem.rate, problem.time, problem.final_value

    if isinstance(problem, SolveForRate):
        rate = solve_rate(
            problem.principal, problem.time, problem.final_value, zero_tol=config.zero_tol
        )
        return problem.principal, rate, problem.time, problem.final_value

    if isinstance(problem, SolveForTime):
        time = solve_time(
            problem.principal, problem.rate, problem.final_value, zero_tol=config.zero_tol
        )
        return problem.principal, problem.rate, time, problem.final_value

    raise InvalidInput(f"Unsupported exponential problem: {problem!r}")


# =============================================================================
# EXPONENTIAL RECORD
# =============================================================================


class ExponentialRecord:
    """
    Запись экспоненциального роста/распада Rt = R0 * e^(k*t).

    Создание:
        >>> record = ExponentialRecord(principal=1_200_000, rate=0.025, time=18)
        >>> round(record.final_value, 1)
        1881974.6

    Изменение:
        >>> record.modify_final_value(2_000_000)
        >>> round(record.time, 3)
        20.433
    """

    def __init__(
        self,
        principal: Optional[float] = None,
        rate: Optional[float] = None,
        time: Optional[float] = None,
        final_value: Optional[float] = None,
        config: Optional[SolverConfig] = None,
    ):
        """
        Args:
            principal: Начальное значение R0 (None → вычисляется)
            rate: Константа роста k (None → вычисляется)
            time: Прошедшее время t (None → вычисляется)
            final_value: Конечное значение Rt (None → вычисляется)
            config: Конфигурация решателя (опционально, используется default)

        Raises:
            InvalidInput: Если отсутствует не ровно одно поле или вход NaN/Inf
            DomainError: Если отсутствующее поле не выводится
        """
        problem = exponential_problem(
            principal=principal, rate=rate, time=time, final_value=final_value
        )
        self._solve(problem, config)

    @classmethod
    def from_problem(
        cls,
        problem: ExponentialProblem,
        config: Optional[SolverConfig] = None,
    ) -> "ExponentialRecord":
        """
        Создание записи из tagged variant.

        Raises:
            DomainError: Если неизвестное поле не выводится
        """
        record = cls.__new__(cls)
        record._solve(problem, config)
        return record

    def _solve(self, problem: ExponentialProblem, config: Optional[SolverConfig]) -> None:
        self._config = config or DEFAULT_SOLVER_CONFIG
        (
            self._principal,
            self._rate,
            self._time,
            self._final_value,
        ) = solve_exponential_problem(problem, self._config)

        logger.debug("ExponentialRecord solved for %s: %r", problem.unknown, self)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def principal(self) -> float:
        """Начальное значение R0."""
        return self._principal

    @property
    def rate(self) -> float:
        """Константа роста k (> 0 рост, < 0 распад)."""
        return self._rate

    @property
    def time(self) -> float:
        """Прошедшее время t."""
        return self._time

    @property
    def final_value(self) -> float:
        """Конечное значение Rt."""
        return self._final_value

    @property
    def config(self) -> SolverConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def _commit(
        self,
        principal: float,
        rate: float,
        time: float,
        final_value: float,
        changed: str,
        recomputed: str,
    ) -> None:
        """Атомарная запись всех четырёх полей после успешного пересчёта."""
        self._principal = principal
        self._rate = rate
        self._time = time
        self._final_value = final_value

        logger.debug(
            "ExponentialRecord %s modified, %s recomputed: %r", changed, recomputed, self
        )

    def modify_principal(self, new_principal: float) -> None:
        """
        Установка principal с пересчётом final_value (rate, time фиксированы).

        Raises:
            InvalidInput: Если new_principal NaN/Inf
            DomainError: Если final_value переполняется
        """
        principal = require_finite(new_principal, "principal")
        if principal == self._principal:
            return

        final_value = solve_final_value(principal, self._rate, self._time)
        self._commit(principal, self._rate, self._time, final_value, "principal", "final_value")

    def modify_rate(self, new_rate: float) -> None:
        """
        Установка rate с пересчётом final_value (principal, time фиксированы).

        Raises:
            InvalidInput: Если new_rate NaN/Inf
            DomainError: Если final_value переполняется
        """
        rate = require_finite(new_rate, "rate")
        if rate == self._rate:
            return

        final_value = solve_final_value(self._principal, rate, self._time)
        self._commit(self._principal, rate, self._time, final_value, "rate", "final_value")

    def modify_time(self, new_time: float) -> None:
        """
        Установка time с пересчётом final_value (principal, rate фиксированы).

        Raises:
            InvalidInput: Если new_time NaN/Inf
            DomainError: Если final_value переполняется
        """
        time = require_finite(new_time, "time")
        if time == self._time:
            return

        final_value = solve_final_value(self._principal, self._rate, time)
        self._commit(self._principal, self._rate, time, final_value, "time", "final_value")

    def modify_final_value(self, new_final_value: float) -> None:
        """
        Установка final_value с пересчётом time (principal, rate фиксированы).

        final_value трактуется как исход, а time как параметр, который
        чаще всего решают заново под выбранную цель.

        Raises:
            InvalidInput: Если new_final_value NaN/Inf
            DomainError: Если rate == 0 или new_final_value / principal <= 0
        """
        final_value = require_finite(new_final_value, "final_value")
        if final_value == self._final_value:
            return

        time = solve_time(self._principal, self._rate, final_value, zero_tol=self._config.zero_tol)
        self._commit(self._principal, self._rate, time, final_value, "final_value", "time")

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def value_at(self, time: float) -> float:
        """
        Значение R0 * e^(k*t) в произвольный момент без изменения записи.

        Raises:
            InvalidInput: Если time NaN/Inf
            DomainError: Если результат переполняется
        """
        return solve_final_value(self._principal, self._rate, require_finite(time, "time"))

    def trajectory(self, times: Iterable[float]) -> list[float]:
        """Значения value_at для каждого момента times."""
        return exponential_trajectory(self._principal, self._rate, times)

    @property
    def doubling_time(self) -> float:
        """
        Время удвоения ln(2) / k.

        Raises:
            DomainError: Если rate <= 0 (величина не растёт)
        """
        if not self._rate > 0:
            raise DomainError("doubling_time", f"rate must be positive, got {self._rate}")

        return require_finite_result(LN2 / self._rate, "doubling_time")

    @property
    def half_life(self) -> float:
        """
        Период полураспада ln(2) / (-k).

        Raises:
            DomainError: Если rate >= 0 (величина не распадается)
        """
        if not self._rate < 0:
            raise DomainError("half_life", f"rate must be negative, got {self._rate}")

        return half_life_from_decay_constant(-self._rate)

    def is_consistent(
        self,
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None,
    ) -> bool:
        """
        Проверка инварианта final_value ≈ principal * e^(rate * time).

        Args:
            rel_tol: Относительная толерантность (default из config)
            abs_tol: Абсолютная толерантность (default из config)
        """
        expected = solve_final_value(self._principal, self._rate, self._time)
        return is_close(
            self._final_value,
            expected,
            rel_tol=self._config.consistency_rel_tol if rel_tol is None else rel_tol,
            abs_tol=self._config.consistency_abs_tol if abs_tol is None else abs_tol,
        )

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def snapshot(self) -> ExponentialState:
        """Immutable снимок текущего состояния."""
        return ExponentialState(
            principal=self._principal,
            rate=self._rate,
            time=self._time,
            final_value=self._final_value,
        )

    def to_dict(self) -> dict[str, float]:
        """Текущее состояние как plain dict (соответствует exponential_record.json)."""
        return self.snapshot().model_dump()

    def copy(self) -> "ExponentialRecord":
        """Независимая запись с тем же состоянием и config."""
        clone = self.__class__.__new__(self.__class__)
        clone._config = self._config
        clone._principal = self._principal
        clone._rate = self._rate
        clone._time = self._time
        clone._final_value = self._final_value
        return clone

    def __repr__(self) -> str:
        return (
            f"ExponentialRecord(principal={self._principal!r}, rate={self._rate!r}, "
            f"time={self._time!r}, final_value={self._final_value!r})"
        )
