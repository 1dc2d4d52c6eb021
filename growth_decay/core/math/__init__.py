"""
Core math modules для growth_decay

Перестановки тождества Rt = R0 * e^(k*t) с гарантией численной корректности.
"""

# Numerical Safeguards
from growth_decay.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ZERO_TOL_DEFAULT,
    # Exceptions
    DomainError,
    ExponentialModelError,
    InvalidInput,
    # Guards
    checked_divide,
    is_close,
    is_valid_float,
    is_zero,
    require_finite,
    require_finite_result,
    safe_exp,
    safe_log_ratio,
)

# Exponential solvers
from growth_decay.core.math.exponential import (
    CARBON_14_HALF_LIFE_YEARS,
    LN2,
    LOG1P_SWITCH_THRESHOLD,
    continuous_rate_from_periodic,
    decay_constant_from_half_life,
    decay_constant_from_mean_lifetime,
    exponential_trajectory,
    half_life_from_decay_constant,
    mean_lifetime_from_decay_constant,
    periodic_rate_from_continuous,
    solve_decay_time,
    solve_decayed_ratio,
    solve_final_value,
    solve_initial_ratio,
    solve_principal,
    solve_rate,
    solve_time,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ZERO_TOL_DEFAULT",
    # Numerical Safeguards — Exceptions
    "DomainError",
    "ExponentialModelError",
    "InvalidInput",
    # Numerical Safeguards — Guards
    "checked_divide",
    "is_close",
    "is_valid_float",
    "is_zero",
    "require_finite",
    "require_finite_result",
    "safe_exp",
    "safe_log_ratio",
    # Exponential — Constants
    "CARBON_14_HALF_LIFE_YEARS",
    "LN2",
    "LOG1P_SWITCH_THRESHOLD",
    # Exponential — Growth convention
    "solve_final_value",
    "solve_principal",
    "solve_rate",
    "solve_time",
    # Exponential — Decay convention
    "solve_decay_time",
    "solve_decayed_ratio",
    "solve_initial_ratio",
    # Exponential — Half-life / lifetime
    "decay_constant_from_half_life",
    "decay_constant_from_mean_lifetime",
    "half_life_from_decay_constant",
    "mean_lifetime_from_decay_constant",
    # Exponential — Rate conversion
    "continuous_rate_from_periodic",
    "periodic_rate_from_continuous",
    "exponential_trajectory",
]
