"""
Тесты для RatioDecayRecord

Проверяемые инварианты:
1. rt ≈ r0 * e^(-decay_constant * time) после каждой успешной операции
2. decay_constant обязательна и никогда не выводится
3. Half-life / mean lifetime конструкторы
4. Атомарность и идемпотентность modify_*
"""

import math

import pytest

from growth_decay import DomainError, InvalidInput, RatioDecayRecord
from growth_decay.core.domain import RatioDecayState, SolveForDecayTime, solve_ratio_decay_problem
from growth_decay.core.math.exponential import CARBON_14_HALF_LIFE_YEARS

LN2 = math.log(2.0)


def _invariant_holds(record: RatioDecayRecord) -> bool:
    expected = record.r0 * math.exp(-record.decay_constant * record.time)
    return math.isclose(record.rt, expected, rel_tol=1e-9, abs_tol=1e-12)


def _fields(record: RatioDecayRecord) -> tuple[float, float, float, float]:
    return record.r0, record.decay_constant, record.time, record.rt


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def carbon_sample() -> RatioDecayRecord:
    """C-14 образец: r0 = 1, возраст 8223 года."""
    return RatioDecayRecord.from_half_life(CARBON_14_HALF_LIFE_YEARS, r0=1.0, time=8223.0)


# =============================================================================
# ТЕСТЫ: Построение
# =============================================================================


class TestConstruction:

    def test_carbon_dating(self, carbon_sample: RatioDecayRecord) -> None:
        """half_life 5730 → k ≈ 1.2097e-4; rt = e^(-k * 8223)"""
        assert carbon_sample.decay_constant == pytest.approx(LN2 / 5730.0, rel=1e-15)
        assert carbon_sample.decay_constant == pytest.approx(1.2097e-4, rel=1e-4)
        assert carbon_sample.rt == pytest.approx(math.exp(-LN2 / 5730.0 * 8223.0), rel=1e-12)
        assert carbon_sample.rt == pytest.approx(0.3698, abs=1e-4)

    def test_solve_rt(self) -> None:
        record = RatioDecayRecord(r0=8.0, decay_constant=LN2, time=3.0)
        assert record.rt == pytest.approx(1.0, rel=1e-12)

    def test_solve_r0(self) -> None:
        record = RatioDecayRecord(decay_constant=LN2, time=2.0, rt=0.25)
        assert record.r0 == pytest.approx(1.0, rel=1e-12)
        assert _invariant_holds(record)

    def test_solve_time(self) -> None:
        """Возраст образца по оставшейся доле C-14"""
        record = RatioDecayRecord.from_half_life(5730.0, r0=1.0, rt=0.5)
        assert record.time == pytest.approx(5730.0, rel=1e-12)

    def test_tiny_reference_ratio(self) -> None:
        """Реальные отношения C-14/C-12 порядка 1e-12"""
        record = RatioDecayRecord.from_mean_lifetime(8223.0, r0=1e-12, time=8500.0)
        assert record.rt == pytest.approx(1e-12 * math.exp(-8500.0 / 8223.0), rel=1e-12)
        assert record.rt == pytest.approx(3.5569e-13, rel=1e-4)

    def test_from_mean_lifetime(self) -> None:
        record = RatioDecayRecord.from_mean_lifetime(10.0, r0=1.0, time=10.0)
        assert record.decay_constant == 0.1
        assert record.rt == pytest.approx(math.exp(-1.0), rel=1e-12)
        assert record.mean_lifetime == pytest.approx(10.0)

    def test_negative_decay_constant_grows(self) -> None:
        """k < 0 в decay convention означает рост"""
        record = RatioDecayRecord(r0=1.0, decay_constant=-LN2, time=1.0)
        assert record.rt == pytest.approx(2.0, rel=1e-12)

    def test_from_problem(self) -> None:
        record = RatioDecayRecord.from_problem(
            SolveForDecayTime(r0=1.0, decay_constant=LN2, rt=0.125)
        )
        assert record.time == pytest.approx(3.0, rel=1e-12)

    def test_solve_ratio_decay_problem(self) -> None:
        r0, k, time, rt = solve_ratio_decay_problem(
            SolveForDecayTime(r0=2.0, decay_constant=LN2, rt=1.0)
        )
        assert (r0, k, rt) == (2.0, LN2, 1.0)
        assert time == pytest.approx(1.0, rel=1e-12)


class TestConstructionErrors:

    def test_missing_decay_constant(self) -> None:
        with pytest.raises(InvalidInput, match="decay_constant"):
            RatioDecayRecord(r0=1.0, time=1.0)

    def test_nothing_missing(self) -> None:
        with pytest.raises(InvalidInput):
            RatioDecayRecord(r0=1.0, decay_constant=0.1, time=1.0, rt=0.9)

    def test_two_missing(self) -> None:
        with pytest.raises(InvalidInput):
            RatioDecayRecord(decay_constant=0.1, time=1.0)

    @pytest.mark.parametrize("half_life", [0.0, -5730.0])
    def test_non_positive_half_life(self, half_life: float) -> None:
        with pytest.raises(DomainError, match="half_life must be positive"):
            RatioDecayRecord.from_half_life(half_life, r0=1.0, time=1.0)

    def test_non_positive_mean_lifetime(self) -> None:
        with pytest.raises(DomainError):
            RatioDecayRecord.from_mean_lifetime(0.0, r0=1.0, time=1.0)

    def test_time_with_zero_decay_constant(self) -> None:
        with pytest.raises(DomainError, match="division by zero decay_constant") as exc_info:
            RatioDecayRecord(r0=1.0, decay_constant=0.0, rt=0.5)
        assert exc_info.value.derivation == "time"

    @pytest.mark.parametrize("rt", [0.0, -0.5])
    def test_time_with_non_positive_ratio(self, rt: float) -> None:
        with pytest.raises(DomainError, match="non-positive ratio"):
            RatioDecayRecord(r0=1.0, decay_constant=0.1, rt=rt)


# =============================================================================
# ТЕСТЫ: Mutation
# =============================================================================


class TestModify:

    def test_modify_r0_recomputes_rt(self, carbon_sample) -> None:
        k, time = carbon_sample.decay_constant, carbon_sample.time
        carbon_sample.modify_r0(2.0)
        assert carbon_sample.r0 == 2.0
        assert (carbon_sample.decay_constant, carbon_sample.time) == (k, time)
        assert carbon_sample.rt == pytest.approx(2.0 * math.exp(-k * time), rel=1e-12)

    def test_modify_decay_constant_recomputes_rt(self, carbon_sample) -> None:
        carbon_sample.modify_decay_constant(LN2 / 8223.0)
        assert carbon_sample.time == 8223.0
        assert carbon_sample.rt == pytest.approx(0.5, rel=1e-12)
        assert carbon_sample.half_life == pytest.approx(8223.0, rel=1e-12)

    def test_modify_time_recomputes_rt(self, carbon_sample) -> None:
        carbon_sample.modify_time(2 * 5730.0)
        assert carbon_sample.rt == pytest.approx(0.25, rel=1e-12)

    def test_modify_rt_recomputes_time(self, carbon_sample) -> None:
        """Какой возраст у образца с остатком 10%?"""
        carbon_sample.modify_rt(0.1)
        assert carbon_sample.rt == 0.1
        assert carbon_sample.time == pytest.approx(5730.0 * math.log2(10.0), rel=1e-12)
        assert carbon_sample.r0 == 1.0

    @pytest.mark.parametrize(
        "operation, value",
        [
            ("modify_r0", 0.7),
            ("modify_decay_constant", 3e-4),
            ("modify_time", 100.0),
            ("modify_rt", 0.9),
        ],
    )
    def test_invariant_after_every_modify(self, carbon_sample, operation: str, value: float) -> None:
        getattr(carbon_sample, operation)(value)
        assert _invariant_holds(carbon_sample)
        assert carbon_sample.is_consistent()


class TestModifyErrors:

    def test_rt_with_zero_decay_constant(self) -> None:
        record = RatioDecayRecord(r0=1.0, decay_constant=0.0, time=5.0)
        before = _fields(record)
        with pytest.raises(DomainError):
            record.modify_rt(0.5)
        assert _fields(record) == before

    @pytest.mark.parametrize("rt", [0.0, -0.1])
    def test_rt_non_positive_ratio(self, carbon_sample, rt: float) -> None:
        before = _fields(carbon_sample)
        with pytest.raises(DomainError):
            carbon_sample.modify_rt(rt)
        assert _fields(carbon_sample) == before

    def test_nan_time(self, carbon_sample) -> None:
        before = _fields(carbon_sample)
        with pytest.raises(InvalidInput):
            carbon_sample.modify_time(float("nan"))
        assert _fields(carbon_sample) == before


class TestIdempotence:

    @pytest.mark.parametrize(
        "operation, field",
        [
            ("modify_r0", "r0"),
            ("modify_decay_constant", "decay_constant"),
            ("modify_time", "time"),
            ("modify_rt", "rt"),
        ],
    )
    def test_idempotent(self, carbon_sample, operation: str, field: str) -> None:
        before = _fields(carbon_sample)
        getattr(carbon_sample, operation)(getattr(carbon_sample, field))
        assert _fields(carbon_sample) == before


# =============================================================================
# ТЕСТЫ: Encapsulation / export
# =============================================================================


class TestReadOnlyAndExport:

    @pytest.mark.parametrize("field", ["r0", "decay_constant", "time", "rt"])
    def test_fields_are_read_only(self, carbon_sample, field: str) -> None:
        with pytest.raises(AttributeError):
            setattr(carbon_sample, field, 1.0)

    def test_half_life_requires_decay(self) -> None:
        record = RatioDecayRecord(r0=1.0, decay_constant=0.0, time=1.0)
        with pytest.raises(DomainError):
            _ = record.half_life

    def test_value_at(self, carbon_sample) -> None:
        assert carbon_sample.value_at(5730.0) == pytest.approx(0.5, rel=1e-12)
        assert carbon_sample.time == 8223.0

    def test_snapshot_and_dict(self, carbon_sample) -> None:
        state = carbon_sample.snapshot()
        assert isinstance(state, RatioDecayState)
        assert state.rt == carbon_sample.rt
        assert carbon_sample.to_dict() == state.model_dump()

    def test_copy_is_independent(self, carbon_sample) -> None:
        clone = carbon_sample.copy()
        clone.modify_rt(0.9)
        assert carbon_sample.time == 8223.0
        assert clone.time != 8223.0
