#!/usr/bin/env python3
"""
Money Ladder Plan Demonstration

This script walks through a complete plan for one user:
1. Build a financial snapshot with a few debts
2. Run the plan calculator
3. Print the ladder step, budget, payoff strategies and benchmarks

Run: python examples/plan_demo.py
"""

from datetime import date
from decimal import Decimal

from money_ladder import (
    FinancialSnapshot,
    MoneyLadderCalculator,
    SpendingCategory,
    compare_to_budget,
    get_config,
    get_ladder_step,
)
from money_ladder.logging_config import configure_logging


def create_sample_snapshot() -> FinancialSnapshot:
    """Create a sample snapshot with realistic data."""
    snapshot = FinancialSnapshot(
        annual_income=Decimal("72000"),
        tax_rate=Decimal("24"),
        age=32,
        net_worth=Decimal("38000"),
        emergency_fund=Decimal("4500"),
        highest_deductible=Decimal("2000"),
        retirement_contributions=Decimal("4320"),
        employer_match=Decimal("100"),
        employer_match_limit=Decimal("4"),
        has_health_insurance=True,
    )

    # Debts
    snapshot, _ = snapshot.with_debt_added(
        name="Chase Sapphire",
        balance=Decimal("6200"),
        interest_rate=Decimal("23.99"),
        minimum_payment=Decimal("185"),
    )
    snapshot, _ = snapshot.with_debt_added(
        name="Student loan",
        balance=Decimal("18500"),
        interest_rate=Decimal("5.5"),
        minimum_payment=Decimal("210"),
    )
    snapshot, _ = snapshot.with_debt_added(
        name="Honda Civic",
        balance=Decimal("11000"),
        interest_rate=Decimal("6.9"),
        minimum_payment=Decimal("320"),
        is_car_debt=True,
    )

    # What the user actually spends
    for category, amount in (
        (SpendingCategory.HOUSING, "1900"),
        (SpendingCategory.FOOD, "650"),
        (SpendingCategory.SAVINGS, "300"),
    ):
        snapshot = snapshot.with_user_expense(category, Decimal(amount))

    return snapshot


def main():
    """Run the plan demonstration."""
    configure_logging(config=get_config())

    print("=" * 70)
    print("MONEY LADDER - Plan Demo")
    print("=" * 70)
    print()

    # Step 1: Create sample data
    print("Step 1: Creating sample snapshot...")
    snapshot = create_sample_snapshot()
    print(f"  - Monthly Net Income: ${snapshot.monthly_net_income:,.2f}")
    print(f"  - Debts: {len(snapshot.debt_items)}")
    print(f"  - High-Interest Debt: ${snapshot.high_interest_debt:,.2f}")
    print()

    # Step 2: Run calculations
    print("Step 2: Running plan calculations...")
    result = MoneyLadderCalculator().calculate(snapshot, today=date.today())
    step = get_ladder_step(result.current_step)
    print(f"  - Current Step: {step.step} ({step.title})")
    print(f"  - Progress: {result.progress_percentage:.0f}%")
    print()

    # Step 3: Budget
    print("Step 3: Suggested budget vs actual")
    for comparison in compare_to_budget(snapshot, result.spending_limits):
        marker = "ok" if comparison.is_on_track else "over"
        print(
            f"  - {comparison.category.value:<15} "
            f"${comparison.suggested_amount:>9,.2f}  "
            f"actual ${comparison.user_amount:>9,.2f}  [{marker}]"
        )
    print(f"  - Daily spending from net worth: "
          f"${result.spending_limits.daily_spending_by_net_worth:,.2f}")
    print()

    # Step 4: Debt payoff
    print("Step 4: Debt payoff")
    for p in result.debt_projections:
        print(f"  - {p.name}: {p.months_to_payoff} months, "
              f"${p.total_interest_paid:,.0f} interest, paid off {p.payoff_date}")
    comparison = result.strategy_comparison
    for s in comparison.strategies:
        print(f"  - {s.name}: {s.months_to_payoff} months, "
              f"saves ${s.interest_saved:,.0f} and {s.time_saved} months "
              f"with ${s.extra_monthly_payment:,.0f}/month extra")
    if comparison.best:
        print(f"  - Best: {comparison.best.value}")
    print()

    # Step 5: Net worth
    benchmark = result.net_worth_benchmark
    print("Step 5: Net worth benchmarks")
    print(f"  - Target for age {benchmark.age}: ${benchmark.target_net_worth:,.0f}")
    print(f"  - Average American: ${benchmark.average_american_net_worth:,.0f}")
    print(f"  - Projected at retirement (today's dollars): "
          f"${benchmark.projected_net_worth_at_retirement:,.0f}")
    for milestone in benchmark.trajectory:
        track = "on track" if milestone.is_on_architect_track else "behind"
        print(f"  - Age {milestone.age}: ${milestone.projected_net_worth:,.0f} "
              f"(target ${milestone.target_net_worth:,.0f}, {track})")
    print()

    for warning in result.warnings:
        print(f"WARNING: {warning}")

    print("=" * 70)
    print("Demo complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
