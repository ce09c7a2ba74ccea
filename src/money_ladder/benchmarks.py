"""Net-worth projection and age-indexed benchmarks.

Benchmark tables map an age to a value and are sparse; values for ages in
between are interpolated linearly and ages outside a table take the
nearest boundary value.

Sources:
- Wealth multiplier and income-multiple targets: Money Guy
  (https://moneyguy.com/guide/wealth-multiplier/)
- Average American: median investable assets by age
- Wealth Architect: top-tier savers (20%+ of income), 2025 survey
"""

from decimal import Decimal
from typing import Iterable, Mapping, Optional, Union

from .exceptions import ValidationError
from .models import (
    FinancialSnapshot,
    NetWorthBenchmark,
    NetWorthMilestone,
    SpendingCategory,
    SpendingLimits,
)
from .spending import calculate_spending_limits

Number = Union[Decimal, int, float, str]

DEFAULT_NOMINAL_RETURN = Decimal("0.08")
DEFAULT_INFLATION = Decimal("0.03")
RETIREMENT_AGE = 65
DEFAULT_AGE = 30
WEALTH_ARCHITECT_THRESHOLD = Decimal("0.8")
MILESTONE_AGES = (30, 40, 50, 60, 65)


# =============================================================================
# BENCHMARK TABLES
# =============================================================================

# How much $1 invested at a given age grows to by 65 (~10% historical return)
WEALTH_MULTIPLIERS: dict[int, Decimal] = {
    0: Decimal("647.47"), 1: Decimal("606.64"), 2: Decimal("565.81"),
    3: Decimal("524.98"), 4: Decimal("484.15"), 5: Decimal("443.32"),
    6: Decimal("402.49"), 7: Decimal("361.66"), 8: Decimal("320.83"),
    9: Decimal("280.00"),
    10: Decimal("239.18"), 11: Decimal("224.10"), 12: Decimal("209.01"),
    13: Decimal("193.93"), 14: Decimal("178.85"), 15: Decimal("163.77"),
    16: Decimal("148.68"), 17: Decimal("133.60"), 18: Decimal("118.52"),
    19: Decimal("103.43"),
    20: Decimal("88.35"), 21: Decimal("81.82"), 22: Decimal("75.29"),
    23: Decimal("68.76"), 24: Decimal("62.23"), 25: Decimal("55.71"),
    26: Decimal("49.18"), 27: Decimal("42.65"), 28: Decimal("36.12"),
    29: Decimal("29.59"),
    30: Decimal("23.06"), 31: Decimal("21.49"), 32: Decimal("19.92"),
    33: Decimal("18.34"), 34: Decimal("16.77"), 35: Decimal("15.20"),
    36: Decimal("13.63"), 37: Decimal("12.06"), 38: Decimal("10.48"),
    39: Decimal("8.91"),
    40: Decimal("7.34"), 41: Decimal("6.89"), 42: Decimal("6.44"),
    43: Decimal("5.99"), 44: Decimal("5.54"), 45: Decimal("5.10"),
    46: Decimal("4.65"), 47: Decimal("4.20"), 48: Decimal("3.75"),
    49: Decimal("3.30"),
    50: Decimal("2.85"), 51: Decimal("2.70"), 52: Decimal("2.55"),
    53: Decimal("2.40"), 54: Decimal("2.25"), 55: Decimal("2.10"),
    56: Decimal("1.95"), 57: Decimal("1.80"), 58: Decimal("1.65"),
    59: Decimal("1.50"),
    60: Decimal("1.35"), 61: Decimal("1.28"), 62: Decimal("1.21"),
    63: Decimal("1.14"), 64: Decimal("1.07"), 65: Decimal("1.00"),
}

# Target net worth as a multiple of annual income
NET_WORTH_TARGETS: dict[int, Decimal] = {
    25: Decimal("0.5"),
    30: Decimal("1"),
    35: Decimal("2"),
    40: Decimal("3"),
    45: Decimal("4.5"),
    50: Decimal("6.5"),
    55: Decimal("10"),
    60: Decimal("13.7"),
    65: Decimal("20"),
}

AVERAGE_AMERICAN_NET_WORTH: dict[int, Decimal] = {
    25: Decimal("10000"),
    30: Decimal("22000"),
    35: Decimal("28000"),
    40: Decimal("34000"),
    45: Decimal("45000"),
    50: Decimal("56000"),
    55: Decimal("62000"),
    60: Decimal("70000"),
    65: Decimal("103000"),
}

WEALTH_ARCHITECT_NET_WORTH: dict[int, Decimal] = {
    20: Decimal("18352"), 21: Decimal("35000"), 22: Decimal("52000"),
    23: Decimal("68000"), 24: Decimal("85000"), 25: Decimal("100000"),
    26: Decimal("110352"), 27: Decimal("148470"), 28: Decimal("187000"),
    29: Decimal("228000"), 30: Decimal("270292"), 31: Decimal("316203"),
    32: Decimal("365103"), 33: Decimal("583848"), 34: Decimal("640000"),
    35: Decimal("700858"), 36: Decimal("767769"), 37: Decimal("834680"),
    38: Decimal("901591"), 39: Decimal("968502"), 40: Decimal("1035413"),
    41: Decimal("1119136"), 42: Decimal("1186047"), 43: Decimal("1319869"),
    44: Decimal("1386760"), 45: Decimal("1453691"), 46: Decimal("1520602"),
    47: Decimal("1587513"), 48: Decimal("1654424"), 49: Decimal("1721335"),
    50: Decimal("1788246"), 51: Decimal("1855157"), 52: Decimal("1922068"),
    53: Decimal("1988979"), 54: Decimal("2022000"), 55: Decimal("2055891"),
    56: Decimal("2122802"), 57: Decimal("2189713"), 58: Decimal("2256624"),
    59: Decimal("2323535"), 60: Decimal("2390446"), 61: Decimal("2457357"),
    62: Decimal("2524179"), 63: Decimal("2591001"), 64: Decimal("2691000"),
    65: Decimal("2791912"),
}


def get_value_for_age(table: Mapping[int, Decimal], age: Number) -> Decimal:
    """Interpolate a benchmark table at ``age``.

    Args:
        table: Sparse mapping of age to value
        age: Age to look up; fractional ages are allowed

    Returns:
        The interpolated value, clamped to the first and last entries

    Raises:
        ValidationError: If the table is empty.
    """
    if not table:
        raise ValidationError(
            "Benchmark table has no entries",
            field="table",
            constraint="At least one age/value pair is required",
        )

    ages = sorted(table)
    age = Decimal(str(age))

    if age <= ages[0]:
        return Decimal(str(table[ages[0]]))
    if age >= ages[-1]:
        return Decimal(str(table[ages[-1]]))

    lower, upper = ages[0], ages[-1]
    for left, right in zip(ages, ages[1:]):
        if left <= age <= right:
            lower, upper = left, right
            break

    low_value = Decimal(str(table[lower]))
    high_value = Decimal(str(table[upper]))
    ratio = (age - lower) / (upper - lower)
    return low_value + (high_value - low_value) * ratio


def project_net_worth(
    current_net_worth: Number,
    annual_savings: Number,
    from_age: int,
    to_age: int,
    nominal_return: Number = DEFAULT_NOMINAL_RETURN,
    inflation: Number = DEFAULT_INFLATION,
) -> Decimal:
    """Project net worth forward in today's money.

    Each year the balance grows by ``nominal_return`` and then receives
    ``annual_savings``. The final value is discounted by ``inflation`` over
    the same number of years. A span of zero or fewer years returns the
    current net worth unchanged; a target age in the past is never
    inflated backwards.
    """
    net_worth = Decimal(str(current_net_worth))
    savings = Decimal(str(annual_savings))
    growth = 1 + Decimal(str(nominal_return))
    years = to_age - from_age

    if years <= 0:
        return net_worth

    for _ in range(years):
        net_worth = net_worth * growth + savings

    return net_worth / (1 + Decimal(str(inflation))) ** years


def net_worth_trajectory(
    current_net_worth: Number,
    annual_savings: Number,
    annual_income: Number,
    current_age: int,
    milestone_ages: Iterable[int] = MILESTONE_AGES,
    nominal_return: Number = DEFAULT_NOMINAL_RETURN,
    inflation: Number = DEFAULT_INFLATION,
) -> list[NetWorthMilestone]:
    """Project net worth at each milestone age from ``current_age`` on.

    Milestones before the current age are skipped. At the current age the
    projection is the current net worth itself.
    """
    net_worth = Decimal(str(current_net_worth))
    income = Decimal(str(annual_income))
    milestones = []

    for age in milestone_ages:
        if age < current_age:
            continue

        if age == current_age:
            projected = net_worth
        else:
            projected = project_net_worth(
                net_worth,
                annual_savings,
                current_age,
                age,
                nominal_return=nominal_return,
                inflation=inflation,
            )

        architect = get_value_for_age(WEALTH_ARCHITECT_NET_WORTH, age)
        milestones.append(NetWorthMilestone(
            age=age,
            projected_net_worth=projected,
            target_net_worth=income * get_value_for_age(NET_WORTH_TARGETS, age),
            wealth_architect_net_worth=architect,
            is_on_architect_track=projected >= architect * WEALTH_ARCHITECT_THRESHOLD,
        ))

    return milestones


def benchmark_net_worth(
    snapshot: FinancialSnapshot,
    limits: Optional[SpendingLimits] = None,
    retirement_age: int = RETIREMENT_AGE,
    nominal_return: Number = DEFAULT_NOMINAL_RETURN,
    inflation: Number = DEFAULT_INFLATION,
) -> NetWorthBenchmark:
    """Compare a snapshot's net worth with the age benchmarks.

    Annual savings are the suggested monthly savings allocation times twelve
    plus retirement contributions. ``limits`` is computed from the snapshot
    when not supplied.
    """
    limits = limits or calculate_spending_limits(snapshot)

    age = snapshot.age or DEFAULT_AGE
    net_worth = snapshot.net_worth
    annual_income = snapshot.annual_income

    annual_savings = (
        limits.suggested(SpendingCategory.SAVINGS) * 12
        + snapshot.retirement_contributions
    )

    target_multiplier = get_value_for_age(NET_WORTH_TARGETS, age)
    target_net_worth = annual_income * target_multiplier
    architect = get_value_for_age(WEALTH_ARCHITECT_NET_WORTH, age)

    if annual_income > 0:
        current_multiplier = net_worth / annual_income
    else:
        current_multiplier = Decimal("0")

    return NetWorthBenchmark(
        age=age,
        net_worth=net_worth,
        wealth_multiplier=get_value_for_age(WEALTH_MULTIPLIERS, age),
        target_multiplier=target_multiplier,
        target_net_worth=target_net_worth,
        current_multiplier=current_multiplier,
        average_american_net_worth=get_value_for_age(AVERAGE_AMERICAN_NET_WORTH, age),
        wealth_architect_net_worth=architect,
        annual_savings=annual_savings,
        projected_net_worth_at_retirement=project_net_worth(
            net_worth,
            annual_savings,
            age,
            retirement_age,
            nominal_return=nominal_return,
            inflation=inflation,
        ),
        is_ahead_of_target=net_worth >= target_net_worth,
        is_wealth_architect=net_worth >= architect * WEALTH_ARCHITECT_THRESHOLD,
        trajectory=net_worth_trajectory(
            net_worth,
            annual_savings,
            annual_income,
            age,
            nominal_return=nominal_return,
            inflation=inflation,
        ),
    )
