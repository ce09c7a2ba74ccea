"""The Money Ladder: nine ordered wealth-building steps.

The current step is found by an ordered chain of guards. The first guard
that is not yet satisfied decides the step, so later steps are never
reached while an earlier one is incomplete. Step 7 (planning for big
goals) is tracked by the user and has no guard of its own.
"""

from decimal import Decimal

from .exceptions import ValidationError
from .models import DeductibleProgress, FinancialSnapshot, LadderStep, StepStatus

TOTAL_STEPS = 9

# Monthly expenses are estimated as 70% of gross monthly income
EXPENSE_RATIO = Decimal("0.7")
EMERGENCY_FUND_MONTHS = 3

# 2024 contribution limits
ROTH_IRA_LIMIT = Decimal("7000")
HSA_LIMIT = Decimal("4150")
RETIREMENT_401K_LIMIT = Decimal("23000")

WEALTH_ACCELERATION_RATE = Decimal("0.25")


LADDER_STEPS: tuple[LadderStep, ...] = (
    LadderStep(
        step=1,
        title="Deductibles Covered",
        description="Save enough to cover your highest insurance deductible",
        target="Have 1-2 months of expenses saved",
    ),
    LadderStep(
        step=2,
        title="Employer Match",
        description="Contribute enough to get your full employer 401(k) match",
        target="Don't leave free money on the table",
    ),
    LadderStep(
        step=3,
        title="High-Interest Debt",
        description="Pay off credit cards and loans with interest rates above 6%",
        target="Eliminate debt costing you more than investments earn",
    ),
    LadderStep(
        step=4,
        title="Emergency Fund",
        description="Build 3-6 months of expenses in liquid savings",
        target="Financial security for unexpected events",
    ),
    LadderStep(
        step=5,
        title="Roth IRA / HSA",
        description="Max out tax-advantaged accounts for growth",
        target="Roth IRA: $7,000/yr, HSA: $4,150/yr (2024)",
    ),
    LadderStep(
        step=6,
        title="Max Retirement",
        description="Max out your 401(k) contributions",
        target="$23,000/year (2024 limit)",
    ),
    LadderStep(
        step=7,
        title="Plan for Big Goals",
        description="Save for kids' education, dream purchases, legacy",
        target="Build wealth for future milestones",
    ),
    LadderStep(
        step=8,
        title="Eliminate All Debt",
        description="Pay off mortgage and other low-interest loans early",
        target="Become completely debt-free",
    ),
    LadderStep(
        step=9,
        title="Wealth Acceleration",
        description="Save 25%+ of gross income for long-term growth",
        target="Taxable brokerage accounts for flexibility",
    ),
)


def calculate_current_step(snapshot: FinancialSnapshot) -> int:
    """Return the step (1-9) the user is currently working on."""
    monthly_expenses = snapshot.monthly_income * EXPENSE_RATIO

    # 1: emergency fund covers the highest deductible (or one month of expenses)
    if snapshot.highest_deductible > 0:
        deductible_target = snapshot.highest_deductible
    else:
        deductible_target = monthly_expenses
    if snapshot.emergency_fund < deductible_target:
        return 1

    # 2: contributing enough to capture the full employer match
    max_match_contribution = snapshot.annual_income * snapshot.employer_match_limit / 100
    if snapshot.employer_match > 0 and snapshot.retirement_contributions < max_match_contribution:
        return 2

    # 3: no high-interest debt left
    if snapshot.high_interest_debt > 0:
        return 3

    # 4: three months of expenses saved
    if snapshot.emergency_fund < monthly_expenses * EMERGENCY_FUND_MONTHS:
        return 4

    # 5: Roth IRA and HSA maxed
    if snapshot.roth_ira_contributions < ROTH_IRA_LIMIT or snapshot.hsa_contributions < HSA_LIMIT:
        return 5

    # 6: 401(k) maxed
    if snapshot.retirement_contributions < RETIREMENT_401K_LIMIT:
        return 6

    # 7 has no automatic check

    # 8: low-interest debt gone, including the mortgage
    if snapshot.student_loans > 0 or snapshot.car_loans > 0 or snapshot.mortgage > 0:
        return 8

    # 9: saving 25% of gross income
    if not is_saving_quarter_of_income(snapshot):
        return 9

    # Every step complete; stay on the last one
    return TOTAL_STEPS


def is_saving_quarter_of_income(snapshot: FinancialSnapshot) -> bool:
    """True when annual savings reach 25% of gross income."""
    total_savings = (
        snapshot.retirement_contributions
        + snapshot.roth_ira_contributions
        + snapshot.hsa_contributions
        + snapshot.taxable_investments
    )
    return total_savings >= snapshot.annual_income * WEALTH_ACCELERATION_RATE


def get_ladder_step(step: int) -> LadderStep:
    """Look up a step from the catalog.

    Raises:
        ValidationError: If ``step`` is outside 1..9.
    """
    if not 1 <= step <= TOTAL_STEPS:
        raise ValidationError(
            f"Ladder step {step} does not exist",
            field="step",
            value=step,
            constraint=f"Must be between 1 and {TOTAL_STEPS}",
        )
    return LADDER_STEPS[step - 1]


def progress_percentage(current_step: int) -> Decimal:
    """Share of the ladder completed before the current step."""
    return Decimal(current_step - 1) / TOTAL_STEPS * 100


def step_status(step: int, current_step: int) -> StepStatus:
    if step < current_step:
        return StepStatus.COMPLETED
    if step == current_step:
        return StepStatus.CURRENT
    return StepStatus.UPCOMING


def deductible_progress(snapshot: FinancialSnapshot) -> DeductibleProgress:
    """How much of the highest deductible the emergency fund covers.

    ``percent_covered`` is None until a deductible has been entered.
    """
    deductible = snapshot.highest_deductible
    fund = snapshot.emergency_fund

    if deductible <= 0:
        return DeductibleProgress(
            highest_deductible=deductible,
            emergency_fund=fund,
            is_covered=False,
            shortfall=Decimal("0"),
        )

    return DeductibleProgress(
        highest_deductible=deductible,
        emergency_fund=fund,
        is_covered=fund >= deductible,
        shortfall=max(Decimal("0"), deductible - fund),
        percent_covered=min(fund / deductible * 100, Decimal("100")),
    )
