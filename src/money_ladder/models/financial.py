"""Financial input models for the Money Ladder engine.

This module provides the snapshot handed to every calculation:
- Spending categories with their suggested share of net income
- Individual debts (credit cards, loans, mortgages)
- The complete, immutable financial snapshot of a user

Derived values (monthly income, net income, high-interest debt, monthly debt
payment) are computed from the source fields on every read and are never
stored, so they cannot drift out of date.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, computed_field, field_validator


class SpendingCategory(str, Enum):
    """The eight monthly budget categories.

    Each category carries its suggested percentage of monthly net income
    (``suggested_percentage``) and whether the app shows it to premium users
    only (``requires_premium``). Entitlement checks stay with the caller.
    """

    HOUSING = "housing"
    TRANSPORTATION = "transportation"
    FOOD = "food"
    UTILITIES = "utilities"
    INSURANCE = "insurance"
    SAVINGS = "savings"
    FUN_MONEY = "fun_money"
    MISCELLANEOUS = "miscellaneous"

    @property
    def suggested_percentage(self) -> Decimal:
        """Suggested share of monthly net income, in percent."""
        return SUGGESTED_PERCENTAGES[self]

    @property
    def requires_premium(self) -> bool:
        """Whether the category is part of the premium budget view."""
        return self in PREMIUM_CATEGORIES


SUGGESTED_PERCENTAGES: dict[SpendingCategory, Decimal] = {
    SpendingCategory.HOUSING: Decimal("28"),  # rent/mortgage, property tax, HOA
    SpendingCategory.TRANSPORTATION: Decimal("12"),
    SpendingCategory.FOOD: Decimal("12"),
    SpendingCategory.UTILITIES: Decimal("6"),
    SpendingCategory.INSURANCE: Decimal("4"),  # post-tax premiums only
    SpendingCategory.SAVINGS: Decimal("8"),  # cash savings on top of 401(k)/HSA
    SpendingCategory.FUN_MONEY: Decimal("10"),
    SpendingCategory.MISCELLANEOUS: Decimal("10"),
}

PREMIUM_CATEGORIES = frozenset({
    SpendingCategory.FOOD,
    SpendingCategory.SAVINGS,
    SpendingCategory.FUN_MONEY,
    SpendingCategory.MISCELLANEOUS,
})


def _new_debt_id() -> str:
    return uuid4().hex


class DebtItem(BaseModel):
    """A single debt owed by the user.

    Amounts are accepted as entered; the engine clamps rather than rejects
    negative or zero values. A debt is either a mortgage, a car debt or
    neither; keeping the two flags exclusive is up to the caller.
    """

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Visa",
                    "balance": "5000.00",
                    "interest_rate": "22.99",
                    "minimum_payment": "150.00",
                }
            ]
        },
    }

    id: str = Field(
        default_factory=_new_debt_id,
        description="Unique, stable identifier",
    )
    name: str = Field(default="", description="Display name, e.g. 'Visa'")
    balance: Decimal = Field(default=Decimal("0"), description="Current balance owed")
    interest_rate: Decimal = Field(
        default=Decimal("0"),
        description="Annual percentage rate, e.g. 19.99 for 19.99%",
    )
    minimum_payment: Decimal = Field(
        default=Decimal("0"),
        description="Required monthly payment",
    )
    is_mortgage: bool = False
    is_car_debt: bool = False

    def is_high_interest(self, threshold: Decimal = Decimal("6")) -> bool:
        """True for non-mortgage debt with an APR above ``threshold``."""
        return self.interest_rate > threshold and not self.is_mortgage


class FinancialSnapshot(BaseModel):
    """Complete financial picture of a user at one point in time.

    Snapshots are immutable. The ``with_*`` methods return a new snapshot
    with the change applied; derived values follow automatically.

    ``user_expenses`` is copied on validation, so later changes to the dict a
    snapshot was built from do not reach it. Because that field is a dict,
    snapshots are not hashable; compare them with ``==`` instead.
    """

    model_config = {"frozen": True}

    # Income
    annual_income: Decimal = Decimal("0")
    tax_rate: Decimal = Field(
        default=Decimal("22"),
        description="Effective tax rate as a percentage (22 for 22%)",
    )

    # Personal
    age: int = Field(default=30, description="Current age, used for benchmarks")

    # Net worth: investable assets minus non-mortgage debt
    net_worth: Decimal = Decimal("0")

    # Savings and investments (annual contributions)
    emergency_fund: Decimal = Decimal("0")
    retirement_contributions: Decimal = Decimal("0")
    employer_match: Decimal = Field(
        default=Decimal("0"),
        description="Percentage of contributions the employer matches",
    )
    employer_match_limit: Decimal = Field(
        default=Decimal("0"),
        description="Percentage of salary up to which the employer matches",
    )
    hsa_contributions: Decimal = Decimal("0")
    roth_ira_contributions: Decimal = Decimal("0")
    taxable_investments: Decimal = Decimal("0")

    # Legacy aggregate debt fields, still read by the ladder classifier
    student_loans: Decimal = Decimal("0")
    car_loans: Decimal = Decimal("0")
    mortgage: Decimal = Decimal("0")

    debt_items: tuple[DebtItem, ...] = ()

    # Insurance
    has_health_insurance: bool = False
    has_life_insurance: bool = False
    has_disability_insurance: bool = False
    highest_deductible: Decimal = Field(
        default=Decimal("0"),
        description="Highest insurance deductible (health, auto, home)",
    )

    user_expenses: dict[SpendingCategory, Decimal] = Field(default_factory=dict)

    @field_validator("user_expenses", mode="before")
    @classmethod
    def drop_empty_expenses(cls, v):
        """Treat missing user expense entries as zero."""
        if v is None:
            return {}
        return v

    @computed_field
    @property
    def monthly_income(self) -> Decimal:
        """Gross monthly income."""
        return self.annual_income / 12

    @computed_field
    @property
    def monthly_net_income(self) -> Decimal:
        """Monthly income after the effective tax rate."""
        return self.monthly_income * (1 - self.tax_rate / 100)

    @computed_field
    @property
    def high_interest_debt(self) -> Decimal:
        """Total balance of non-mortgage debt above 6% APR."""
        from ..portfolio import get_high_interest_debt

        return get_high_interest_debt(self.debt_items)

    @computed_field
    @property
    def monthly_debt_payment(self) -> Decimal:
        """Total minimum payments on non-mortgage debt."""
        from ..portfolio import get_monthly_debt_payment

        return get_monthly_debt_payment(self.debt_items)

    def expense_for(self, category: SpendingCategory) -> Decimal:
        """User-entered monthly amount for a category, 0 if not set."""
        return self.user_expenses.get(category, Decimal("0"))

    def _source_fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields}

    def with_updates(self, **fields: Any) -> "FinancialSnapshot":
        """Return a copy with the given source fields replaced."""
        return type(self).model_validate({**self._source_fields(), **fields})

    def with_user_expense(
        self, category: SpendingCategory, amount: Decimal
    ) -> "FinancialSnapshot":
        """Return a copy with one user expense category set."""
        expenses = dict(self.user_expenses)
        expenses[SpendingCategory(category)] = amount
        return self.with_updates(user_expenses=expenses)

    def with_debt_added(
        self,
        name: str,
        balance: Decimal,
        interest_rate: Decimal,
        minimum_payment: Decimal,
        is_mortgage: bool = False,
        is_car_debt: bool = False,
        debt_id: Optional[str] = None,
    ) -> tuple["FinancialSnapshot", DebtItem]:
        """Append a new debt.

        Returns:
            Tuple of (new snapshot, the created DebtItem)
        """
        item_fields: dict[str, Any] = {
            "name": name,
            "balance": balance,
            "interest_rate": interest_rate,
            "minimum_payment": minimum_payment,
            "is_mortgage": is_mortgage,
            # A mortgage is never also a car debt
            "is_car_debt": is_car_debt and not is_mortgage,
        }
        if debt_id is not None:
            item_fields["id"] = debt_id
        item = DebtItem(**item_fields)
        return self.with_updates(debt_items=(*self.debt_items, item)), item

    def with_debt_updated(self, debt_id: str, **updates: Any) -> "FinancialSnapshot":
        """Return a copy with the matching debt's fields replaced.

        Unknown ids leave the debts unchanged.
        """
        debts = tuple(
            DebtItem.model_validate({**item.model_dump(), **updates, "id": item.id})
            if item.id == debt_id
            else item
            for item in self.debt_items
        )
        return self.with_updates(debt_items=debts)

    def with_debt_removed(self, debt_id: str) -> "FinancialSnapshot":
        """Return a copy without the matching debt."""
        return self.with_updates(
            debt_items=tuple(item for item in self.debt_items if item.id != debt_id)
        )
