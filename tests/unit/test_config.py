"""
Тесты для SolverConfig
"""

from dataclasses import FrozenInstanceError

import pytest

from growth_decay import DEFAULT_SOLVER_CONFIG, SolverConfig


class TestSolverConfig:

    def test_defaults(self) -> None:
        config = SolverConfig()
        assert config.zero_tol == 0.0
        assert config.consistency_rel_tol == 1e-9
        assert config.consistency_abs_tol == 1e-12
        assert DEFAULT_SOLVER_CONFIG == config

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_SOLVER_CONFIG.zero_tol = 1.0  # type: ignore

    def test_negative_zero_tol_rejected(self) -> None:
        with pytest.raises(ValueError, match="zero_tol must be non-negative"):
            SolverConfig(zero_tol=-1e-12)

    def test_negative_consistency_tolerance_rejected(self) -> None:
        with pytest.raises(ValueError):
            SolverConfig(consistency_rel_tol=-1.0)
