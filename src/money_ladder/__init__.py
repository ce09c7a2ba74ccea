"""Money Ladder - Personal finance calculations for wealth building."""

__version__ = "0.1.0"

from .amortization import add_months, calculate_all_debt_payoffs, calculate_debt_payoff
from .benchmarks import (
    benchmark_net_worth,
    get_value_for_age,
    net_worth_trajectory,
    project_net_worth,
)
from .calculator import MoneyLadderCalculator
from .config import LadderConfig, get_config, load_config
from .exceptions import ConfigurationError, LadderError, ValidationError
from .ladder import (
    LADDER_STEPS,
    calculate_current_step,
    deductible_progress,
    get_ladder_step,
    progress_percentage,
    step_status,
)
from .models import (
    BudgetComparison,
    DebtItem,
    DebtPayoffProjection,
    DebtSummary,
    FinancialPlanResult,
    FinancialSnapshot,
    NetWorthMilestone,
    PayoffStrategy,
    SpendingCategory,
    SpendingLimits,
    StrategyComparison,
    StrategyOutcome,
)
from .portfolio import get_car_debt_payments, get_debt_summary
from .spending import calculate_spending_limits, compare_to_budget
from .strategies import (
    calculate_current_payoff,
    compare_strategies,
    simulate_strategy,
    suggested_extra_payment,
)

__all__ = [
    # Calculator
    "MoneyLadderCalculator",
    # Models
    "FinancialSnapshot",
    "DebtItem",
    "SpendingCategory",
    "DebtPayoffProjection",
    "DebtSummary",
    "PayoffStrategy",
    "StrategyOutcome",
    "StrategyComparison",
    "SpendingLimits",
    "BudgetComparison",
    "FinancialPlanResult",
    "NetWorthMilestone",
    # Money Ladder
    "LADDER_STEPS",
    "calculate_current_step",
    "get_ladder_step",
    "progress_percentage",
    "step_status",
    "deductible_progress",
    # Spending
    "calculate_spending_limits",
    "compare_to_budget",
    # Debt
    "add_months",
    "calculate_debt_payoff",
    "calculate_all_debt_payoffs",
    "get_debt_summary",
    "get_car_debt_payments",
    "simulate_strategy",
    "calculate_current_payoff",
    "compare_strategies",
    "suggested_extra_payment",
    # Net worth
    "get_value_for_age",
    "project_net_worth",
    "net_worth_trajectory",
    "benchmark_net_worth",
    # Config and errors
    "LadderConfig",
    "load_config",
    "get_config",
    "LadderError",
    "ValidationError",
    "ConfigurationError",
]
