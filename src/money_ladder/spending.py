"""Monthly spending limits from net income, net worth and debt payments.

Net income is split across the eight budget categories by their suggested
percentages. Fun money and miscellaneous share one pool (10% + 10% of net
income) that is reduced by the monthly non-mortgage debt payment. A daily
allowance comes from net worth ($1 per day per $10,000), also reduced by
debt payments.
"""

from decimal import Decimal
from typing import Optional

from .models import BudgetComparison, FinancialSnapshot, SpendingCategory, SpendingLimits

NET_WORTH_PER_DAILY_DOLLAR = Decimal("10000")
DAYS_PER_MONTH = Decimal("30")
INTENSITY_SATURATION = Decimal("50")

# Categories whose pool is shared and reduced by debt payments
SHARED_POOL_CATEGORIES = (SpendingCategory.FUN_MONEY, SpendingCategory.MISCELLANEOUS)


def calculate_spending_limits(snapshot: FinancialSnapshot) -> SpendingLimits:
    """Suggest a monthly budget for a snapshot.

    Never raises; negative net income or net worth clamp to zero amounts.
    """
    net_income = snapshot.monthly_net_income
    debt_payment = snapshot.monthly_debt_payment
    base = max(Decimal("0"), net_income)

    shared_pool = sum(
        (net_income * c.suggested_percentage / 100 for c in SHARED_POOL_CATEGORIES),
        Decimal("0"),
    )
    adjusted_pool = max(Decimal("0"), shared_pool - debt_payment)

    spending_by_income: dict[SpendingCategory, Decimal] = {}
    for category in SpendingCategory:
        if category in SHARED_POOL_CATEGORIES:
            spending_by_income[category] = adjusted_pool / 2
        else:
            spending_by_income[category] = base * category.suggested_percentage / 100

    daily_by_net_worth = snapshot.net_worth / NET_WORTH_PER_DAILY_DOLLAR
    daily = max(Decimal("0"), daily_by_net_worth - debt_payment / DAYS_PER_MONTH)

    return SpendingLimits(
        spending_by_income=spending_by_income,
        daily_spending_by_net_worth=daily,
        weekly_fun_money=daily * 7,
        monthly_fun_money=spending_by_income[SpendingCategory.FUN_MONEY],
        monthly_net_income=net_income,
    )


def compare_to_budget(
    snapshot: FinancialSnapshot,
    limits: Optional[SpendingLimits] = None,
) -> list[BudgetComparison]:
    """Compare the user's entered expenses with the suggested budget.

    For savings, being at or above the suggestion is on track; for every
    other category, being at or below it is. A category with no entered
    amount (or no suggestion) is always on track.
    """
    limits = limits or calculate_spending_limits(snapshot)
    comparisons = []

    for category in SpendingCategory:
        user_amount = snapshot.expense_for(category)
        suggested = limits.suggested(category)

        if user_amount == 0 or suggested == 0:
            comparisons.append(BudgetComparison(
                category=category,
                user_amount=user_amount,
                suggested_amount=suggested,
                is_on_track=True,
            ))
            continue

        percent_diff = (user_amount - suggested) / suggested * 100
        if category is SpendingCategory.SAVINGS:
            on_track = percent_diff >= 0
        else:
            on_track = percent_diff <= 0

        comparisons.append(BudgetComparison(
            category=category,
            user_amount=user_amount,
            suggested_amount=suggested,
            percent_difference=percent_diff,
            is_on_track=on_track,
            intensity=min(abs(percent_diff) / INTENSITY_SATURATION, Decimal("1")),
        ))

    return comparisons
