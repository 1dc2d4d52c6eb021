"""
RatioDecayRecord — Ratio / half-life record for decay problems

Специализация для задач распада, выраженных отношением R0:Rt
(например, радиоуглеродное датирование). Decay sign convention:

    rt = r0 * e^(-decay_constant * time)

decay_constant всегда задаётся (напрямую, через half-life или через mean
lifetime) и никогда не выводится. Ровно одно из {r0, time, rt} неизвестно
при создании.

| Операция               | Устанавливает   | Пересчитывает |
|------------------------|-----------------|---------------|
| modify_r0              | r0              | rt            |
| modify_decay_constant  | decay_constant  | rt            |
| modify_time            | time            | rt            |
| modify_rt              | rt              | time          |

Потокобезопасность: как у ExponentialRecord, один писатель за раз,
синхронизация на стороне вызывающего кода.
"""

import logging
from typing import Optional

from growth_decay.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from growth_decay.core.domain.problems import (
    RatioDecayProblem,
    SolveForDecayTime,
    SolveForR0,
    SolveForRt,
    ratio_decay_problem,
)
from growth_decay.core.domain.snapshots import RatioDecayState
from growth_decay.core.math.exponential import (
    decay_constant_from_half_life,
    decay_constant_from_mean_lifetime,
    half_life_from_decay_constant,
    mean_lifetime_from_decay_constant,
    solve_decay_time,
    solve_decayed_ratio,
    solve_initial_ratio,
)
from growth_decay.core.math.numerical_safeguards import (
    InvalidInput,
    is_close,
    require_finite,
)

logger = logging.getLogger(__name__)


def solve_ratio_decay_problem(
    problem: RatioDecayProblem,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> tuple[float, float, float, float]:
    """
    Решение ratio-задачи относительно неизвестного поля.

    Returns:
        (r0, decay_constant, time, rt)

    Raises:
        DomainError: Если time не выводится (decay_constant == 0 или
            rt/r0 <= 0) или результат переполняется
    """
    k = problem.decay_constant

    if isinstance(problem, SolveForRt):
        return problem.r0, k, problem.time, solve_decayed_ratio(problem.r0, k, problem.time)

    if isinstance(problem, SolveForR0):
        return solve_initial_ratio(k, problem.time, problem.rt), k, problem.time, problem.rt

    if isinstance(problem, SolveForDecayTime):
        time = solve_decay_time(problem.r0, k, problem.rt, zero_tol=config.zero_tol)
        return problem.r0, k, time, problem.rt

    raise InvalidInput(f"Unsupported ratio decay problem: {problem!r}")


class RatioDecayRecord:
    """
    Запись распада отношения rt = r0 * e^(-k*t).

    Радиоуглеродное датирование:
        >>> record = RatioDecayRecord.from_half_life(5730.0, r0=1.0, time=8223.0)
        >>> round(record.rt, 4)
        0.3698
    """

    def __init__(
        self,
        r0: Optional[float] = None,
        decay_constant: Optional[float] = None,
        time: Optional[float] = None,
        rt: Optional[float] = None,
        config: Optional[SolverConfig] = None,
    ):
        """
        Args:
            r0: Исходное отношение R0 (None → вычисляется)
            decay_constant: Decay constant k (обязательна)
            time: Прошедшее время t (None → вычисляется)
            rt: Отношение в момент t (None → вычисляется)
            config: Конфигурация решателя (опционально)

        Raises:
            InvalidInput: Если decay_constant отсутствует, если среди
                r0/time/rt отсутствует не ровно одно поле, или вход NaN/Inf
            DomainError: Если отсутствующее поле не выводится
        """
        problem = ratio_decay_problem(r0=r0, decay_constant=decay_constant, time=time, rt=rt)
        self._solve(problem, config)

    @classmethod
    def from_problem(
        cls,
        problem: RatioDecayProblem,
        config: Optional[SolverConfig] = None,
    ) -> "RatioDecayRecord":
        """Создание записи из tagged variant."""
        record = cls.__new__(cls)
        record._solve(problem, config)
        return record

    @classmethod
    def from_half_life(
        cls,
        half_life: float,
        r0: Optional[float] = None,
        time: Optional[float] = None,
        rt: Optional[float] = None,
        config: Optional[SolverConfig] = None,
    ) -> "RatioDecayRecord":
        """
        Создание записи с decay_constant = ln(2) / half_life.

        Raises:
            InvalidInput: Если half_life не число или NaN/Inf
            DomainError: Если half_life <= 0
        """
        decay_constant = decay_constant_from_half_life(half_life)
        return cls(r0=r0, decay_constant=decay_constant, time=time, rt=rt, config=config)

    @classmethod
    def from_mean_lifetime(
        cls,
        mean_lifetime: float,
        r0: Optional[float] = None,
        time: Optional[float] = None,
        rt: Optional[float] = None,
        config: Optional[SolverConfig] = None,
    ) -> "RatioDecayRecord":
        """
        Создание записи с decay_constant = 1 / mean_lifetime
        (закон распада rt = r0 * e^(-t / mean_lifetime)).

        Raises:
            InvalidInput: Если mean_lifetime не число или NaN/Inf
            DomainError: Если mean_lifetime <= 0
        """
        decay_constant = decay_constant_from_mean_lifetime(mean_lifetime)
        return cls(r0=r0, decay_constant=decay_constant, time=time, rt=rt, config=config)

    def _solve(self, problem: RatioDecayProblem, config: Optional[SolverConfig]) -> None:
        self._config = config or DEFAULT_SOLVER_CONFIG
        (
            self._r0,
            self._decay_constant,
            self._time,
            self._rt,
        ) = solve_ratio_decay_problem(problem, self._config)

        logger.debug("RatioDecayRecord solved for %s: %r", problem.unknown, self)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def r0(self) -> float:
        return self._r0

    @property
    def decay_constant(self) -> float:
        return self._decay_constant

    @property
    def time(self) -> float:
        return self._time

    @property
    def rt(self) -> float:
        return self._rt

    @property
    def config(self) -> SolverConfig:
        return self._config

    @property
    def half_life(self) -> float:
        """
        Период полураспада ln(2) / k.

        Raises:
            DomainError: Если decay_constant <= 0
        """
        return half_life_from_decay_constant(self._decay_constant)

    @property
    def mean_lifetime(self) -> float:
        """
        Среднее время жизни 1 / k.

        Raises:
            DomainError: Если decay_constant <= 0
        """
        return mean_lifetime_from_decay_constant(self._decay_constant)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def _commit(
        self,
        r0: float,
        decay_constant: float,
        time: float,
        rt: float,
        changed: str,
        recomputed: str,
    ) -> None:
        self._r0 = r0
        self._decay_constant = decay_constant
        self._time = time
        self._rt = rt

        logger.debug("RatioDecayRecord %s modified, %s recomputed: %r", changed, recomputed, self)

    def modify_r0(self, new_r0: float) -> None:
        """Установка r0 с пересчётом rt."""
        r0 = require_finite(new_r0, "r0")
        if r0 == self._r0:
            return

        rt = solve_decayed_ratio(r0, self._decay_constant, self._time)
        self._commit(r0, self._decay_constant, self._time, rt, "r0", "rt")

    def modify_decay_constant(self, new_decay_constant: float) -> None:
        """Установка decay_constant с пересчётом rt."""
        decay_constant = require_finite(new_decay_constant, "decay_constant")
        if decay_constant == self._decay_constant:
            return

        rt = solve_decayed_ratio(self._r0, decay_constant, self._time)
        self._commit(self._r0, decay_constant, self._time, rt, "decay_constant", "rt")

    def modify_time(self, new_time: float) -> None:
        """Установка time с пересчётом rt."""
        time = require_finite(new_time, "time")
        if time == self._time:
            return

        rt = solve_decayed_ratio(self._r0, self._decay_constant, time)
        self._commit(self._r0, self._decay_constant, time, rt, "time", "rt")

    def modify_rt(self, new_rt: float) -> None:
        """
        Установка rt с пересчётом time (r0, decay_constant фиксированы).

        Raises:
            InvalidInput: Если new_rt NaN/Inf
            DomainError: Если decay_constant == 0 или new_rt / r0 <= 0
        """
        rt = require_finite(new_rt, "rt")
        if rt == self._rt:
            return

        time = solve_decay_time(self._r0, self._decay_constant, rt, zero_tol=self._config.zero_tol)
        self._commit(self._r0, self._decay_constant, time, rt, "rt", "time")

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def value_at(self, time: float) -> float:
        """Отношение r0 * e^(-k*t) в произвольный момент без изменения записи."""
        return solve_decayed_ratio(self._r0, self._decay_constant, require_finite(time, "time"))

    def is_consistent(
        self,
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None,
    ) -> bool:
        """Проверка инварианта rt ≈ r0 * e^(-decay_constant * time)."""
        expected = solve_decayed_ratio(self._r0, self._decay_constant, self._time)
        return is_close(
            self._rt,
            expected,
            rel_tol=self._config.consistency_rel_tol if rel_tol is None else rel_tol,
            abs_tol=self._config.consistency_abs_tol if abs_tol is None else abs_tol,
        )

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def snapshot(self) -> RatioDecayState:
        """Immutable снимок текущего состояния."""
        return RatioDecayState(
            r0=self._r0,
            decay_constant=self._decay_constant,
            time=self._time,
            rt=self._rt,
        )

    def to_dict(self) -> dict[str, float]:
        return self.snapshot().model_dump()

    def copy(self) -> "RatioDecayRecord":
        clone = self.__class__.__new__(self.__class__)
        clone._config = self._config
        clone._r0 = self._r0
        clone._decay_constant = self._decay_constant
        clone._time = self._time
        clone._rt = self._rt
        return clone

    def __repr__(self) -> str:
        return (
            f"RatioDecayRecord(r0={self._r0!r}, decay_constant={self._decay_constant!r}, "
            f"time={self._time!r}, rt={self._rt!r})"
        )
