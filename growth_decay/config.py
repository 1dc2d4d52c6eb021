"""
Solver configuration.

Толерантности, общие для ExponentialRecord и RatioDecayRecord.
"""

from dataclasses import dataclass

from growth_decay.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ZERO_TOL_DEFAULT,
)


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация решателя.

    Параметры нулевого делителя и проверки инварианта.
    """

    # |time|, |rate|, |decay_constant| <= zero_tol → деление на ноль (DomainError)
    zero_tol: float = ZERO_TOL_DEFAULT

    # Толерантности is_consistent(): Rt ≈ R0 * e^(k*t)
    consistency_rel_tol: float = EPS_FLOAT_COMPARE_REL
    consistency_abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        if self.zero_tol < 0:
            raise ValueError(f"zero_tol must be non-negative, got {self.zero_tol}")
        if self.consistency_rel_tol < 0 or self.consistency_abs_tol < 0:
            raise ValueError("consistency tolerances must be non-negative")


DEFAULT_SOLVER_CONFIG = SolverConfig()
