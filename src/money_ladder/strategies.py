"""Multi-debt payoff strategies: avalanche versus snowball.

Unlike the single-debt projection in ``amortization``, debts here are
simulated together. Every month each unpaid debt pays its minimum, then an
extra monthly payment goes to one target debt:

- avalanche: the highest interest rate, ordered once up front
- snowball: the smallest remaining balance, re-ordered every month with
  paid-off debts moved to the back

Two behaviours differ from the single-debt projection on purpose:

1. A minimum payment that does not cover interest lets the balance grow
   by the shortfall, so the other debts keep being simulated.
2. The extra payment only reaches the current target. Money left over
   after clearing it is not passed on to the next debt that month.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Union

import structlog

from .amortization import calculate_all_debt_payoffs, round_whole
from .exceptions import ValidationError
from .models import (
    NEVER_PAID_OFF_MONTHS,
    DebtItem,
    PayoffStrategy,
    SpendingLimits,
    StrategyComparison,
    StrategyOutcome,
    StrategyResult,
)

logger = structlog.get_logger()

STRATEGY_DESCRIPTIONS = {
    PayoffStrategy.AVALANCHE: (
        "Avalanche Method",
        "Pay highest interest first - saves the most money",
    ),
    PayoffStrategy.SNOWBALL: (
        "Snowball Method",
        "Pay smallest balance first - quick wins for motivation",
    ),
}


@dataclass
class _DebtState:
    """Mutable per-run copy of a debt's balance."""

    interest_rate: Decimal
    minimum_payment: Decimal
    remaining: Decimal


def _coerce_strategy(strategy: Union[PayoffStrategy, str]) -> PayoffStrategy:
    try:
        return PayoffStrategy(strategy)
    except ValueError as e:
        raise ValidationError(
            f"Unknown payoff strategy: {strategy!r}",
            field="strategy",
            value=strategy,
            constraint=f"Must be one of: {', '.join(s.value for s in PayoffStrategy)}",
        ) from e


def _snowball_key(state: _DebtState) -> tuple[bool, Decimal]:
    # Paid-off debts sort after every open one
    return (state.remaining <= 0, state.remaining)


def simulate_strategy(
    debts: Iterable[DebtItem],
    extra_monthly_payment: Decimal,
    strategy: Union[PayoffStrategy, str],
    max_months: int = NEVER_PAID_OFF_MONTHS,
) -> StrategyOutcome:
    """Simulate paying off all debts with an extra monthly payment.

    Args:
        debts: Debts to pay off; the sequence is copied, never mutated
        extra_monthly_payment: Amount on top of the minimums each month
        strategy: ``PayoffStrategy`` or its value ("avalanche", "snowball")
        max_months: Simulation horizon

    Returns:
        StrategyOutcome with total interest rounded to whole units. An
        empty debt list or a non-positive extra payment gives a zero
        outcome without simulating.

    Raises:
        ValidationError: If ``strategy`` is not a known strategy.
    """
    strategy = _coerce_strategy(strategy)
    extra = Decimal(str(extra_monthly_payment))
    states = [
        _DebtState(
            interest_rate=d.interest_rate,
            minimum_payment=d.minimum_payment,
            remaining=d.balance,
        )
        for d in debts
    ]

    if not states or extra <= 0:
        return StrategyOutcome()

    if strategy is PayoffStrategy.AVALANCHE:
        states.sort(key=lambda s: s.interest_rate, reverse=True)
    else:
        states.sort(key=lambda s: s.remaining)

    total_interest = Decimal("0")
    months = 0

    while any(s.remaining > 0 for s in states) and months < max_months:
        for state in states:
            if state.remaining <= 0:
                continue

            interest = state.remaining * (state.interest_rate / 100 / 12)
            total_interest += interest

            if state.minimum_payment <= interest:
                state.remaining += interest - state.minimum_payment
            else:
                principal = min(state.minimum_payment - interest, state.remaining)
                state.remaining = max(Decimal("0"), state.remaining - principal)

        target = next((s for s in states if s.remaining > 0), None)
        if target is not None:
            target.remaining -= min(extra, target.remaining)

        months += 1

        if strategy is PayoffStrategy.SNOWBALL:
            states.sort(key=_snowball_key)

    logger.debug(
        "strategy_simulated",
        strategy=strategy.value,
        debts=len(states),
        months=months,
        total_interest=str(total_interest),
    )

    return StrategyOutcome(
        total_interest=round_whole(total_interest),
        months_to_payoff=months,
    )


def calculate_current_payoff(
    debts: Iterable[DebtItem],
    today: Optional[date] = None,
    max_months: int = NEVER_PAID_OFF_MONTHS,
) -> StrategyOutcome:
    """Cost of paying only the minimums, each debt projected on its own.

    Total interest is the sum of the per-debt projections and the duration
    is the longest of them.
    """
    projections = calculate_all_debt_payoffs(debts, today=today, max_months=max_months)
    if not projections:
        return StrategyOutcome()

    return StrategyOutcome(
        total_interest=sum((p.total_interest_paid for p in projections), Decimal("0")),
        months_to_payoff=max(p.months_to_payoff for p in projections),
    )


def suggested_extra_payment(limits: SpendingLimits) -> Decimal:
    """Half of the monthly fun money budget, in whole units."""
    return round_whole(limits.monthly_fun_money / 2)


def compare_strategies(
    debts: Iterable[DebtItem],
    extra_monthly_payment: Decimal,
    today: Optional[date] = None,
    max_months: int = NEVER_PAID_OFF_MONTHS,
) -> StrategyComparison:
    """Compare avalanche and snowball against the minimum-payment plan.

    Mortgages are left out. No strategies are produced when there is no
    non-mortgage debt or no extra payment to allocate.
    """
    non_mortgage = [d for d in debts if not d.is_mortgage]
    extra = Decimal(str(extra_monthly_payment))
    current = calculate_current_payoff(non_mortgage, today=today, max_months=max_months)

    if not non_mortgage or extra <= 0:
        return StrategyComparison(current_plan=current)

    results: list[StrategyResult] = []
    for strategy in (PayoffStrategy.AVALANCHE, PayoffStrategy.SNOWBALL):
        outcome = simulate_strategy(non_mortgage, extra, strategy, max_months=max_months)
        name, description = STRATEGY_DESCRIPTIONS[strategy]
        results.append(StrategyResult(
            strategy=strategy,
            name=name,
            description=description,
            total_interest=outcome.total_interest,
            months_to_payoff=outcome.months_to_payoff,
            interest_saved=max(Decimal("0"), current.total_interest - outcome.total_interest),
            time_saved=max(0, current.months_to_payoff - outcome.months_to_payoff),
            extra_monthly_payment=extra,
        ))

    # First strategy wins ties
    best = results[0]
    for result in results[1:]:
        if result.interest_saved > best.interest_saved:
            best = result

    return StrategyComparison(
        current_plan=current,
        strategies=results,
        best=best.strategy,
    )
