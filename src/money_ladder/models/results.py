"""Derived result models returned by the calculation functions."""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .audit import AuditEntry
from .financial import SpendingCategory

NEVER_PAID_OFF_MONTHS = 360


# =============================================================================
# DEBT PAYOFF
# =============================================================================

class DebtPayoffProjection(BaseModel):
    """Payoff projection for one debt paying only its minimum."""

    debt_id: str
    name: str
    original_balance: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    total_interest_paid: Decimal
    months_to_payoff: int = Field(ge=0)
    payoff_date: date
    is_mortgage: bool = False
    never_pays_off: bool = Field(
        default=False,
        description=(
            "Minimum payment does not cover the monthly interest; "
            "months_to_payoff is then the simulation horizon"
        ),
    )


class DebtSummary(BaseModel):
    """Portfolio-level totals across all debts."""

    total_balance: Decimal
    non_mortgage_balance: Decimal
    total_min_payment: Decimal
    non_mortgage_min_payment: Decimal
    weighted_average_interest: Decimal = Field(
        description="Balance-weighted APR of non-mortgage debt, one decimal place"
    )
    debt_count: int
    non_mortgage_count: int


class PayoffStrategy(str, Enum):
    """How the extra monthly payment is targeted."""

    AVALANCHE = "avalanche"  # highest interest rate first
    SNOWBALL = "snowball"  # smallest balance first


class StrategyOutcome(BaseModel):
    """Aggregate cost and duration of paying off a set of debts."""

    total_interest: Decimal = Decimal("0")
    months_to_payoff: int = 0


class StrategyResult(BaseModel):
    """A strategy's outcome measured against the minimum-payment plan."""

    strategy: PayoffStrategy
    name: str
    description: str
    total_interest: Decimal
    months_to_payoff: int
    interest_saved: Decimal
    time_saved: int
    extra_monthly_payment: Decimal


class StrategyComparison(BaseModel):
    """Current plan versus avalanche and snowball."""

    current_plan: StrategyOutcome
    strategies: list[StrategyResult] = Field(default_factory=list)
    best: Optional[PayoffStrategy] = None


# =============================================================================
# SPENDING
# =============================================================================

class SpendingLimits(BaseModel):
    """Suggested monthly budget derived from net income and net worth."""

    spending_by_income: dict[SpendingCategory, Decimal]
    daily_spending_by_net_worth: Decimal
    weekly_fun_money: Decimal
    monthly_fun_money: Decimal
    monthly_net_income: Decimal

    def suggested(self, category: SpendingCategory) -> Decimal:
        """Suggested monthly amount for a category."""
        return self.spending_by_income[SpendingCategory(category)]


class BudgetComparison(BaseModel):
    """A user's actual spending in one category against the suggestion."""

    category: SpendingCategory
    user_amount: Decimal
    suggested_amount: Decimal
    percent_difference: Optional[Decimal] = Field(
        default=None,
        description="(user - suggested) / suggested * 100; None if either is 0",
    )
    is_on_track: bool
    intensity: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=1,
        description="How far off the suggestion, saturating at 50%",
    )


# =============================================================================
# MONEY LADDER
# =============================================================================

class StepStatus(str, Enum):
    """Where a ladder step sits relative to the user's current step."""

    COMPLETED = "completed"
    CURRENT = "current"
    UPCOMING = "upcoming"


class LadderStep(BaseModel):
    """One of the nine wealth-building milestones."""

    model_config = {"frozen": True}

    step: int = Field(ge=1, le=9)
    title: str
    description: str
    target: str


class DeductibleProgress(BaseModel):
    """Progress toward covering the highest insurance deductible."""

    highest_deductible: Decimal
    emergency_fund: Decimal
    is_covered: bool
    shortfall: Decimal
    percent_covered: Optional[Decimal] = None


# =============================================================================
# NET WORTH
# =============================================================================

class NetWorthMilestone(BaseModel):
    """Projected net worth at one milestone age."""

    age: int
    projected_net_worth: Decimal
    target_net_worth: Decimal = Field(
        description="Annual income times the income-multiple target for the age"
    )
    wealth_architect_net_worth: Decimal
    is_on_architect_track: bool


class NetWorthBenchmark(BaseModel):
    """Net worth compared with age-indexed benchmarks."""

    age: int
    net_worth: Decimal
    wealth_multiplier: Decimal = Field(
        description="How much $1 invested today could grow to by 65"
    )
    target_multiplier: Decimal
    target_net_worth: Decimal
    current_multiplier: Decimal
    average_american_net_worth: Decimal
    wealth_architect_net_worth: Decimal
    annual_savings: Decimal
    projected_net_worth_at_retirement: Decimal
    is_ahead_of_target: bool
    is_wealth_architect: bool
    trajectory: list[NetWorthMilestone] = Field(default_factory=list)


# =============================================================================
# FULL PLAN
# =============================================================================

class FinancialPlanResult(BaseModel):
    """Everything the engine derives from one snapshot."""

    current_step: int = Field(ge=1, le=9)
    progress_percentage: Decimal
    spending_limits: SpendingLimits
    debt_projections: list[DebtPayoffProjection]
    debt_summary: DebtSummary
    car_debt_payments: Decimal
    strategy_comparison: StrategyComparison
    net_worth_benchmark: NetWorthBenchmark
    audit_log: list[AuditEntry]
    calculated_on: date
    warnings: list[str] = Field(default_factory=list)
