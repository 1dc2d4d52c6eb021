"""
Domain models and value objects.

Contains the growth/decay records, the tagged "unknown field" variants and
immutable state snapshots.
"""

from growth_decay.core.domain.exponential_record import (
    ExponentialRecord,
    solve_exponential_problem,
)
from growth_decay.core.domain.problems import (
    ExponentialProblem,
    RatioDecayProblem,
    SolveForDecayTime,
    SolveForFinalValue,
    SolveForPrincipal,
    SolveForR0,
    SolveForRate,
    SolveForRt,
    SolveForTime,
    exponential_problem,
    parse_exponential_problem,
    parse_ratio_decay_problem,
    ratio_decay_problem,
)
from growth_decay.core.domain.ratio_decay_record import (
    RatioDecayRecord,
    solve_ratio_decay_problem,
)
from growth_decay.core.domain.snapshots import ExponentialState, RatioDecayState

__all__ = [
    # Records
    "ExponentialRecord",
    "RatioDecayRecord",
    "solve_exponential_problem",
    "solve_ratio_decay_problem",
    # Problems
    "ExponentialProblem",
    "RatioDecayProblem",
    "SolveForPrincipal",
    "SolveForRate",
    "SolveForTime",
    "SolveForFinalValue",
    "SolveForR0",
    "SolveForDecayTime",
    "SolveForRt",
    "exponential_problem",
    "ratio_decay_problem",
    "parse_exponential_problem",
    "parse_ratio_decay_problem",
    # Snapshots
    "ExponentialState",
    "RatioDecayState",
]
