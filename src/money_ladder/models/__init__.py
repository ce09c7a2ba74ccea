"""Data models for money-ladder.

This package provides:
- Financial inputs: the immutable snapshot and its debts (financial.py)
- Derived results: projections, budgets, benchmarks (results.py)
- Calculation audit entries (audit.py)
"""

from money_ladder.models.audit import AuditEntry
from money_ladder.models.financial import (
    PREMIUM_CATEGORIES,
    SUGGESTED_PERCENTAGES,
    DebtItem,
    FinancialSnapshot,
    SpendingCategory,
)
from money_ladder.models.results import (
    NEVER_PAID_OFF_MONTHS,
    BudgetComparison,
    DebtPayoffProjection,
    DebtSummary,
    DeductibleProgress,
    FinancialPlanResult,
    LadderStep,
    NetWorthBenchmark,
    NetWorthMilestone,
    PayoffStrategy,
    SpendingLimits,
    StepStatus,
    StrategyComparison,
    StrategyOutcome,
    StrategyResult,
)

__all__ = [
    # Inputs
    "SpendingCategory",
    "SUGGESTED_PERCENTAGES",
    "PREMIUM_CATEGORIES",
    "DebtItem",
    "FinancialSnapshot",
    # Debt results
    "NEVER_PAID_OFF_MONTHS",
    "DebtPayoffProjection",
    "DebtSummary",
    "PayoffStrategy",
    "StrategyOutcome",
    "StrategyResult",
    "StrategyComparison",
    # Spending
    "SpendingLimits",
    "BudgetComparison",
    # Ladder
    "StepStatus",
    "LadderStep",
    "DeductibleProgress",
    # Net worth
    "NetWorthBenchmark",
    "NetWorthMilestone",
    # Plan
    "AuditEntry",
    "FinancialPlanResult",
]
