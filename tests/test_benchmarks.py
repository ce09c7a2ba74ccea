"""Tests for net-worth projection and age benchmarks."""

from decimal import Decimal

import pytest

from money_ladder import (
    FinancialSnapshot,
    ValidationError,
    benchmark_net_worth,
    get_value_for_age,
    net_worth_trajectory,
    project_net_worth,
)
from money_ladder.benchmarks import (
    AVERAGE_AMERICAN_NET_WORTH,
    NET_WORTH_TARGETS,
    WEALTH_ARCHITECT_NET_WORTH,
    WEALTH_MULTIPLIERS,
)


class TestGetValueForAge:
    """Test suite for table interpolation."""

    def test_exact_age(self):
        assert get_value_for_age(WEALTH_MULTIPLIERS, 30) == Decimal("23.06")

    def test_interpolates_between_ages(self):
        """27 is 2/5 of the way from 25 (0.5x) to 30 (1x)."""
        assert get_value_for_age(NET_WORTH_TARGETS, 27) == Decimal("0.7")

    def test_fractional_age(self):
        assert get_value_for_age(NET_WORTH_TARGETS, 27.5) == Decimal("0.75")

    def test_clamps_below_first_age(self):
        assert get_value_for_age(AVERAGE_AMERICAN_NET_WORTH, 18) == Decimal("10000")

    def test_clamps_above_last_age(self):
        assert get_value_for_age(NET_WORTH_TARGETS, 80) == Decimal("20")

    def test_unsorted_float_table(self):
        table = {40: 4.0, 20: 2.0}
        assert get_value_for_age(table, 30) == Decimal("3")

    def test_empty_table(self):
        with pytest.raises(ValidationError) as exc_info:
            get_value_for_age({}, 30)

        assert exc_info.value.field == "table"

    def test_tables_cover_working_life(self):
        for table in (
            WEALTH_MULTIPLIERS,
            NET_WORTH_TARGETS,
            AVERAGE_AMERICAN_NET_WORTH,
            WEALTH_ARCHITECT_NET_WORTH,
        ):
            assert max(table) == 65


class TestProjectNetWorth:
    """Tests for inflation-adjusted projection."""

    def test_discounts_by_inflation(self):
        projected = project_net_worth(
            Decimal("1000"), Decimal("0"), 30, 31, nominal_return=0, inflation=0.03
        )
        assert projected == Decimal("1000") / Decimal("1.03")

    def test_compounds_growth(self):
        projected = project_net_worth(
            Decimal("10000"), Decimal("0"), 30, 32, nominal_return=0.08, inflation=0
        )
        assert projected == Decimal("11664")

    def test_savings_added_after_growth(self):
        """Each year grows first and then adds that year's savings."""
        projected = project_net_worth(
            Decimal("0"), Decimal("1000"), 30, 32, nominal_return=0.1, inflation=0
        )
        assert projected == Decimal("2100")

    @pytest.mark.parametrize("from_age,to_age", [(65, 65), (70, 65)])
    def test_no_years_returns_current(self, from_age: int, to_age: int):
        assert project_net_worth(Decimal("5000"), Decimal("1000"), from_age, to_age) == Decimal("5000")

    def test_default_rates_beat_inflation(self):
        projected = project_net_worth(Decimal("10000"), Decimal("0"), 30, 65)
        assert projected > Decimal("10000")


class TestBenchmarkNetWorth:
    """Tests for comparing a snapshot with the benchmarks."""

    @pytest.fixture
    def snapshot(self) -> FinancialSnapshot:
        return FinancialSnapshot(
            annual_income=Decimal("60000"),
            tax_rate=Decimal("22"),
            age=30,
            net_worth=Decimal("60000"),
        )

    def test_targets_at_thirty(self, snapshot: FinancialSnapshot):
        benchmark = benchmark_net_worth(snapshot)

        assert benchmark.age == 30
        assert benchmark.wealth_multiplier == Decimal("23.06")
        assert benchmark.target_multiplier == Decimal("1")
        assert benchmark.target_net_worth == Decimal("60000")
        assert benchmark.current_multiplier == Decimal("1")
        assert benchmark.average_american_net_worth == Decimal("22000")
        assert benchmark.wealth_architect_net_worth == Decimal("270292")

    def test_ahead_of_target(self, snapshot: FinancialSnapshot):
        assert benchmark_net_worth(snapshot).is_ahead_of_target is True
        behind = snapshot.with_updates(net_worth=Decimal("30000"))
        assert benchmark_net_worth(behind).is_ahead_of_target is False

    def test_annual_savings(self, snapshot: FinancialSnapshot):
        """312/month savings allocation plus retirement contributions."""
        assert benchmark_net_worth(snapshot).annual_savings == Decimal("3744")

        contributing = snapshot.with_updates(retirement_contributions=Decimal("6000"))
        assert benchmark_net_worth(contributing).annual_savings == Decimal("9744")

    def test_wealth_architect_at_eighty_percent(self, snapshot: FinancialSnapshot):
        """0.8 * 270292 = 216233.6"""
        assert benchmark_net_worth(snapshot).is_wealth_architect is False
        assert benchmark_net_worth(
            snapshot.with_updates(net_worth=Decimal("216234"))
        ).is_wealth_architect is True

    def test_projection_matches_project_net_worth(self, snapshot: FinancialSnapshot):
        benchmark = benchmark_net_worth(snapshot, retirement_age=40)

        assert benchmark.projected_net_worth_at_retirement == project_net_worth(
            Decimal("60000"), Decimal("3744"), 30, 40
        )

    def test_zero_income(self):
        benchmark = benchmark_net_worth(FinancialSnapshot(net_worth=Decimal("5000")))

        assert benchmark.current_multiplier == 0
        assert benchmark.target_net_worth == 0

    def test_age_zero_uses_default_age(self, snapshot: FinancialSnapshot):
        benchmark = benchmark_net_worth(snapshot.with_updates(age=0))

        assert benchmark.age == 30

    def test_includes_trajectory(self, snapshot: FinancialSnapshot):
        benchmark = benchmark_net_worth(snapshot)

        assert [m.age for m in benchmark.trajectory] == [30, 40, 50, 60, 65]
        assert benchmark.trajectory[-1].projected_net_worth == (
            benchmark.projected_net_worth_at_retirement
        )


class TestNetWorthTrajectory:
    """Tests for milestone projections."""

    def test_current_age_milestone_is_current_net_worth(self):
        milestones = net_worth_trajectory(Decimal("60000"), Decimal("3744"), Decimal("60000"), 30)

        first = milestones[0]
        assert first.age == 30
        assert first.projected_net_worth == Decimal("60000")
        assert first.target_net_worth == Decimal("60000")
        assert first.wealth_architect_net_worth == Decimal("270292")
        assert first.is_on_architect_track is False

    def test_later_milestones_are_projected(self):
        milestones = net_worth_trajectory(Decimal("60000"), Decimal("3744"), Decimal("60000"), 30)
        by_age = {m.age: m for m in milestones}

        assert by_age[40].projected_net_worth == project_net_worth(
            Decimal("60000"), Decimal("3744"), 30, 40
        )
        # 6.5x income at 50
        assert by_age[50].target_net_worth == Decimal("390000")

    def test_skips_milestones_already_passed(self):
        milestones = net_worth_trajectory(Decimal("200000"), Decimal("10000"), Decimal("90000"), 45)

        assert [m.age for m in milestones] == [50, 60, 65]
        assert milestones[0].projected_net_worth == project_net_worth(
            Decimal("200000"), Decimal("10000"), 45, 50
        )

    def test_past_every_milestone(self):
        assert net_worth_trajectory(Decimal("500000"), Decimal("0"), Decimal("0"), 70) == []

    def test_architect_track_at_eighty_percent(self):
        """0.8 * 270292 = 216233.6 at age 30."""
        on_track = net_worth_trajectory(Decimal("216234"), Decimal("0"), Decimal("60000"), 30)
        behind = net_worth_trajectory(Decimal("216233"), Decimal("0"), Decimal("60000"), 30)

        assert on_track[0].is_on_architect_track is True
        assert behind[0].is_on_architect_track is False

    def test_custom_milestones(self):
        milestones = net_worth_trajectory(
            Decimal("10000"), Decimal("0"), Decimal("50000"), 30,
            milestone_ages=(31,), nominal_return=0, inflation=0,
        )

        assert len(milestones) == 1
        assert milestones[0].projected_net_worth == Decimal("10000")
