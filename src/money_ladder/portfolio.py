"""Summary statistics across a collection of debts.

All totals are plain sums, so every function here gives the same answer
for any ordering of the input debts.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from .models import DebtItem, DebtSummary

HIGH_INTEREST_THRESHOLD = Decimal("6")
ONE_DECIMAL = Decimal("0.1")


def get_debt_summary(debts: Iterable[DebtItem]) -> DebtSummary:
    """Summarize balances, payments and weighted interest.

    The weighted average interest covers non-mortgage debt only and is
    0 when there is no non-mortgage balance.
    """
    all_debts = list(debts or ())
    non_mortgage = [d for d in all_debts if not d.is_mortgage]

    total_balance = sum((d.balance for d in all_debts), Decimal("0"))
    non_mortgage_balance = sum((d.balance for d in non_mortgage), Decimal("0"))
    total_min_payment = sum((d.minimum_payment for d in all_debts), Decimal("0"))
    non_mortgage_min_payment = sum(
        (d.minimum_payment for d in non_mortgage), Decimal("0")
    )

    if non_mortgage_balance > 0:
        weighted = (
            sum((d.balance * d.interest_rate for d in non_mortgage), Decimal("0"))
            / non_mortgage_balance
        )
    else:
        weighted = Decimal("0")

    return DebtSummary(
        total_balance=total_balance,
        non_mortgage_balance=non_mortgage_balance,
        total_min_payment=total_min_payment,
        non_mortgage_min_payment=non_mortgage_min_payment,
        weighted_average_interest=weighted.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP),
        debt_count=len(all_debts),
        non_mortgage_count=len(non_mortgage),
    )


def get_car_debt_payments(debts: Iterable[DebtItem]) -> Decimal:
    """Total monthly minimum payments on car debt."""
    return sum((d.minimum_payment for d in debts or () if d.is_car_debt), Decimal("0"))


def get_high_interest_debt(
    debts: Iterable[DebtItem],
    threshold: Decimal = HIGH_INTEREST_THRESHOLD,
) -> Decimal:
    """Total balance of non-mortgage debt with an APR above ``threshold``."""
    threshold = Decimal(str(threshold))
    return sum(
        (d.balance for d in debts or () if d.is_high_interest(threshold)),
        Decimal("0"),
    )


def get_monthly_debt_payment(debts: Iterable[DebtItem]) -> Decimal:
    """Total minimum payments on non-mortgage debt."""
    return sum(
        (d.minimum_payment for d in debts or () if not d.is_mortgage),
        Decimal("0"),
    )
