"""Single-debt amortization under a fixed minimum payment.

Each debt is simulated month by month: interest accrues on the balance
before the payment, and the rest of the payment reduces principal. A debt
whose minimum payment does not cover a month's interest never amortizes;
the simulation stops there, flags the projection as never paid off and
reports the full horizon (360 months by default) instead of letting the
balance grow. A debt that is still amortizing when the horizon runs out is
not flagged.
"""

import calendar
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

import structlog

from .models import NEVER_PAID_OFF_MONTHS, DebtItem, DebtPayoffProjection

logger = structlog.get_logger()

WHOLE_UNITS = Decimal("1")


def round_whole(amount: Decimal) -> Decimal:
    """Round to whole currency units, halves away from zero."""
    return amount.quantize(WHOLE_UNITS, rounding=ROUND_HALF_UP)


def add_months(start: date, months: int) -> date:
    """Move ``start`` forward by calendar months.

    The day is clamped to the last day of the target month, so
    Jan 31 + 1 month is Feb 28 (or 29).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def calculate_debt_payoff(
    debt: DebtItem,
    today: Optional[date] = None,
    max_months: int = NEVER_PAID_OFF_MONTHS,
) -> DebtPayoffProjection:
    """Project how long a debt takes to pay off at its minimum payment.

    Args:
        debt: The debt to project
        today: Reference date for the payoff date (default: date.today())
        max_months: Simulation horizon; also the "never paid off" value

    Returns:
        DebtPayoffProjection with interest rounded to whole units
    """
    today = today or date.today()
    balance = debt.balance
    minimum_payment = debt.minimum_payment

    if balance <= 0 or minimum_payment <= 0:
        return DebtPayoffProjection(
            debt_id=debt.id,
            name=debt.name,
            original_balance=balance,
            interest_rate=debt.interest_rate,
            minimum_payment=minimum_payment,
            total_interest_paid=Decimal("0"),
            months_to_payoff=0,
            payoff_date=today,
            is_mortgage=debt.is_mortgage,
        )

    monthly_rate = debt.interest_rate / 100 / 12
    remaining = balance
    total_interest = Decimal("0")
    months = 0
    stuck = False

    while remaining > 0 and months < max_months:
        interest = remaining * monthly_rate
        total_interest += interest

        if minimum_payment <= interest:
            logger.debug(
                "debt_never_pays_off",
                debt_id=debt.id,
                minimum_payment=str(minimum_payment),
                monthly_interest=str(interest),
            )
            months = max_months
            stuck = True
            break

        remaining -= min(minimum_payment - interest, remaining)
        months += 1

    return DebtPayoffProjection(
        debt_id=debt.id,
        name=debt.name,
        original_balance=balance,
        interest_rate=debt.interest_rate,
        minimum_payment=minimum_payment,
        total_interest_paid=round_whole(total_interest),
        months_to_payoff=months,
        payoff_date=add_months(today, months),
        is_mortgage=debt.is_mortgage,
        never_pays_off=stuck,
    )


def calculate_all_debt_payoffs(
    debts: Iterable[DebtItem],
    today: Optional[date] = None,
    max_months: int = NEVER_PAID_OFF_MONTHS,
) -> list[DebtPayoffProjection]:
    """Project every debt independently, preserving input order."""
    today = today or date.today()
    return [calculate_debt_payoff(d, today=today, max_months=max_months) for d in debts]


def latest_payoff_date(
    projections: Iterable[DebtPayoffProjection],
    today: Optional[date] = None,
) -> date:
    """Latest payoff date among debts that do get paid off.

    Mortgages and never-paid-off debts are skipped; ``today`` is returned
    when nothing qualifies.
    """
    latest = today or date.today()
    for projection in projections:
        if projection.is_mortgage or projection.never_pays_off:
            continue
        if projection.payoff_date > latest:
            latest = projection.payoff_date
    return latest
