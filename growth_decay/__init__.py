"""
growth_decay — exponential growth/decay calculator

Решение тождества Rt = R0 * e^(k*t) относительно любого одного неизвестного
параметра и поддержание согласованности всех четырёх полей при изменениях.
"""

import logging

from growth_decay.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from growth_decay.core.domain import (
    ExponentialRecord,
    ExponentialState,
    RatioDecayRecord,
    RatioDecayState,
    exponential_problem,
    ratio_decay_problem,
)
from growth_decay.core.math import (
    DomainError,
    ExponentialModelError,
    InvalidInput,
    continuous_rate_from_periodic,
    decay_constant_from_half_life,
    decay_constant_from_mean_lifetime,
    half_life_from_decay_constant,
    periodic_rate_from_continuous,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SOLVER_CONFIG",
    "SolverConfig",
    "ExponentialRecord",
    "ExponentialState",
    "RatioDecayRecord",
    "RatioDecayState",
    "exponential_problem",
    "ratio_decay_problem",
    "DomainError",
    "ExponentialModelError",
    "InvalidInput",
    "continuous_rate_from_periodic",
    "decay_constant_from_half_life",
    "decay_constant_from_mean_lifetime",
    "half_life_from_decay_constant",
    "periodic_rate_from_continuous",
]
