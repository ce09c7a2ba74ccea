"""Tests for single-debt amortization projections."""

from datetime import date
from decimal import Decimal

import pytest

from money_ladder import (
    DebtItem,
    DebtPayoffProjection,
    add_months,
    calculate_all_debt_payoffs,
    calculate_debt_payoff,
)
from money_ladder.amortization import latest_payoff_date, round_whole


TODAY = date(2026, 1, 15)


@pytest.fixture
def credit_card() -> DebtItem:
    """A typical credit card paid at its minimum."""
    return DebtItem(
        id="visa",
        name="Visa",
        balance=Decimal("5000"),
        interest_rate=Decimal("20"),
        minimum_payment=Decimal("150"),
    )


class TestAddMonths:
    """Tests for calendar month arithmetic."""

    def test_same_day_next_month(self):
        assert add_months(date(2026, 1, 15), 1) == date(2026, 2, 15)

    def test_crosses_year_boundary(self):
        assert add_months(date(2026, 11, 15), 3) == date(2027, 2, 15)

    def test_clamps_to_end_of_month(self):
        """Jan 31 + 1 month lands on the last day of February."""
        assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_zero_months(self):
        assert add_months(TODAY, 0) == TODAY

    def test_thirty_years(self):
        assert add_months(TODAY, 360) == date(2056, 1, 15)


class TestCalculateDebtPayoff:
    """Test suite for calculate_debt_payoff."""

    def test_returns_projection(self, credit_card: DebtItem):
        """Should return a DebtPayoffProjection carrying the debt's details."""
        projection = calculate_debt_payoff(credit_card, today=TODAY)

        assert isinstance(projection, DebtPayoffProjection)
        assert projection.debt_id == "visa"
        assert projection.name == "Visa"
        assert projection.original_balance == Decimal("5000")
        assert projection.interest_rate == Decimal("20")
        assert projection.minimum_payment == Decimal("150")
        assert projection.is_mortgage is False

    def test_credit_card_payoff(self, credit_card: DebtItem):
        """5000 at 20% APR paying 150/month takes 50 months."""
        projection = calculate_debt_payoff(credit_card, today=TODAY)

        assert projection.months_to_payoff == 50
        assert Decimal("2300") <= projection.total_interest_paid <= Decimal("2420")
        assert projection.payoff_date == date(2030, 3, 15)
        assert not projection.never_pays_off

    def test_interest_rounded_to_whole_units(self, credit_card: DebtItem):
        projection = calculate_debt_payoff(credit_card, today=TODAY)

        assert projection.total_interest_paid == projection.total_interest_paid.to_integral_value()

    def test_zero_interest_debt(self):
        """Without interest the balance falls by exactly the payment."""
        debt = DebtItem(
            name="Family loan",
            balance=Decimal("1200"),
            interest_rate=Decimal("0"),
            minimum_payment=Decimal("100"),
        )
        projection = calculate_debt_payoff(debt, today=TODAY)

        assert projection.months_to_payoff == 12
        assert projection.total_interest_paid == 0
        assert projection.payoff_date == date(2027, 1, 15)

    def test_final_payment_is_partial(self):
        """A last payment larger than the balance only clears the balance."""
        debt = DebtItem(
            balance=Decimal("250"),
            interest_rate=Decimal("0"),
            minimum_payment=Decimal("100"),
        )
        projection = calculate_debt_payoff(debt, today=TODAY)

        assert projection.months_to_payoff == 3

    def test_payment_below_interest_never_pays_off(self):
        """A minimum payment that does not cover interest hits the 360 marker."""
        debt = DebtItem(
            name="Store card",
            balance=Decimal("10000"),
            interest_rate=Decimal("24"),
            minimum_payment=Decimal("100"),
        )
        projection = calculate_debt_payoff(debt, today=TODAY)

        assert projection.months_to_payoff == 360
        assert projection.never_pays_off
        # Only the first month's interest accrues before the simulation stops
        assert projection.total_interest_paid == Decimal("200")
        assert projection.payoff_date == date(2056, 1, 15)

    def test_payment_equal_to_interest_never_pays_off(self):
        debt = DebtItem(
            balance=Decimal("12000"),
            interest_rate=Decimal("12"),
            minimum_payment=Decimal("120"),
        )
        projection = calculate_debt_payoff(debt, today=TODAY)

        assert projection.months_to_payoff == 360

    @pytest.mark.parametrize(
        "balance,minimum",
        [
            (Decimal("0"), Decimal("100")),
            (Decimal("-50"), Decimal("100")),
            (Decimal("5000"), Decimal("0")),
            (Decimal("5000"), Decimal("-25")),
        ],
    )
    def test_zero_projection_for_empty_inputs(self, balance, minimum):
        """Non-positive balance or payment gives an immediate zero projection."""
        debt = DebtItem(balance=balance, interest_rate=Decimal("18"), minimum_payment=minimum)
        projection = calculate_debt_payoff(debt, today=TODAY)

        assert projection.months_to_payoff == 0
        assert projection.total_interest_paid == 0
        assert projection.payoff_date == TODAY

    @pytest.mark.parametrize(
        "balance,rate,minimum",
        [
            ("5000", "20", "150"),
            ("800", "29.99", "25"),
            ("25000", "6.5", "300"),
            ("150000", "4", "900"),
            ("300", "0", "35"),
        ],
    )
    def test_amortizing_debt_terminates(self, balance, rate, minimum):
        """Any payment above the first month's interest pays the debt off."""
        debt = DebtItem(
            balance=Decimal(balance),
            interest_rate=Decimal(rate),
            minimum_payment=Decimal(minimum),
        )
        projection = calculate_debt_payoff(debt, today=TODAY)

        assert projection.months_to_payoff < 360
        assert projection.total_interest_paid >= 0

    def test_custom_horizon(self):
        debt = DebtItem(
            balance=Decimal("10000"),
            interest_rate=Decimal("24"),
            minimum_payment=Decimal("100"),
        )
        projection = calculate_debt_payoff(debt, today=TODAY, max_months=120)

        assert projection.months_to_payoff == 120
        assert projection.never_pays_off

    def test_horizon_reached_while_amortizing(self, credit_card: DebtItem):
        """Running out of horizon is not the same as never paying off."""
        projection = calculate_debt_payoff(credit_card, today=TODAY, max_months=48)

        assert projection.months_to_payoff == 48
        assert not projection.never_pays_off

    def test_mortgage_flag_carried(self):
        debt = DebtItem(
            balance=Decimal("200000"),
            interest_rate=Decimal("4"),
            minimum_payment=Decimal("1200"),
            is_mortgage=True,
        )
        assert calculate_debt_payoff(debt, today=TODAY).is_mortgage is True


class TestCalculateAllDebtPayoffs:
    """Tests for projecting several debts independently."""

    def test_preserves_input_order(self, credit_card: DebtItem):
        loan = DebtItem(
            id="loan",
            balance=Decimal("1200"),
            interest_rate=Decimal("0"),
            minimum_payment=Decimal("100"),
        )
        projections = calculate_all_debt_payoffs([loan, credit_card], today=TODAY)

        assert [p.debt_id for p in projections] == ["loan", "visa"]

    def test_empty(self):
        assert calculate_all_debt_payoffs([], today=TODAY) == []


class TestLatestPayoffDate:
    """Tests for the latest payoff date across debts."""

    def test_skips_never_paid_off_and_mortgages(self, credit_card: DebtItem):
        stuck = DebtItem(
            balance=Decimal("10000"),
            interest_rate=Decimal("24"),
            minimum_payment=Decimal("100"),
        )
        mortgage = DebtItem(
            balance=Decimal("200000"),
            interest_rate=Decimal("4"),
            minimum_payment=Decimal("1200"),
            is_mortgage=True,
        )
        projections = calculate_all_debt_payoffs([credit_card, stuck, mortgage], today=TODAY)

        assert latest_payoff_date(projections, today=TODAY) == date(2030, 3, 15)

    def test_skips_never_paid_off_with_short_horizon(self, credit_card: DebtItem):
        stuck = DebtItem(
            balance=Decimal("10000"),
            interest_rate=Decimal("24"),
            minimum_payment=Decimal("100"),
        )
        projections = calculate_all_debt_payoffs(
            [credit_card, stuck], today=TODAY, max_months=120
        )

        assert latest_payoff_date(projections, today=TODAY) == date(2030, 3, 15)

    def test_defaults_to_today(self):
        assert latest_payoff_date([], today=TODAY) == TODAY


def test_round_whole_rounds_half_up():
    assert round_whole(Decimal("2.5")) == Decimal("3")
    assert round_whole(Decimal("2.49")) == Decimal("2")
