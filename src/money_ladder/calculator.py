"""Full financial plan calculation for a single snapshot.

MoneyLadderCalculator runs every engine component over one snapshot:
ladder step, spending limits, debt projections and summary, strategy
comparison and net-worth benchmarks. Each step is recorded in an audit log
and emitted as a structured log event so a result can be traced back to
its inputs.
"""

from datetime import date
from typing import Optional

import structlog

from .amortization import calculate_all_debt_payoffs
from .benchmarks import benchmark_net_worth
from .config import LadderConfig, get_config
from .ladder import calculate_current_step, get_ladder_step, progress_percentage
from .models import AuditEntry, FinancialPlanResult, FinancialSnapshot
from .portfolio import get_car_debt_payments, get_debt_summary, get_high_interest_debt
from .spending import calculate_spending_limits
from .strategies import compare_strategies, suggested_extra_payment

logger = structlog.get_logger()


class MoneyLadderCalculator:
    """
    Calculate a complete financial plan from a snapshot.

    The calculator holds no financial state between calls; only the audit
    log of the most recent calculation is kept on the instance.
    """

    def __init__(self, config: Optional[LadderConfig] = None):
        """
        Initialize calculator.

        Args:
            config: Engine settings (default: loaded from the environment)
        """
        self.config = config or get_config()
        self._audit_log: list[AuditEntry] = []

    def _log_step(
        self,
        step: str,
        input_value: str,
        output_value: str,
        source: str,
        notes: Optional[str] = None
    ) -> None:
        """Add an entry to the audit log."""
        entry = AuditEntry(
            step=step,
            input_value=input_value,
            output_value=output_value,
            source=source,
            notes=notes,
        )
        self._audit_log.append(entry)
        logger.info(
            "calculation_step",
            step=step,
            input=input_value,
            output=output_value,
            source=source,
        )

    def calculate(
        self,
        snapshot: FinancialSnapshot,
        today: Optional[date] = None,
    ) -> FinancialPlanResult:
        """
        Run every calculation over a snapshot.

        Args:
            snapshot: Complete financial picture at a point in time
            today: Reference date for payoff dates (default: date.today())

        Returns:
            FinancialPlanResult with audit trail and warnings
        """
        self._audit_log = []
        warnings: list[str] = []
        today = today or date.today()
        payoff = self.config.payoff
        projection = self.config.projection

        # Step 1: Money Ladder position
        current_step = calculate_current_step(snapshot)
        ladder_step = get_ladder_step(current_step)
        self._log_step(
            step="current_step",
            input_value=(
                f"emergency_fund={snapshot.emergency_fund}, "
                f"high_interest_debt={snapshot.high_interest_debt}"
            ),
            output_value=str(current_step),
            source="Money Ladder guard chain",
            notes=ladder_step.title,
        )

        # Step 2: Spending limits
        limits = calculate_spending_limits(snapshot)
        self._log_step(
            step="spending_limits",
            input_value=(
                f"monthly_net_income={limits.monthly_net_income}, "
                f"monthly_debt_payment={snapshot.monthly_debt_payment}"
            ),
            output_value=f"monthly_fun_money={limits.monthly_fun_money}",
            source="Fixed category percentages",
        )

        # Step 3: Per-debt projections at minimum payment
        projections = calculate_all_debt_payoffs(
            snapshot.debt_items, today=today, max_months=payoff.max_months
        )
        for p in projections:
            self._log_step(
                step=f"debt_payoff_{p.debt_id}",
                input_value=(
                    f"balance={p.original_balance}, rate={p.interest_rate}, "
                    f"minimum={p.minimum_payment}"
                ),
                output_value=f"months={p.months_to_payoff}, interest={p.total_interest_paid}",
                source="Monthly amortization",
                notes=p.name,
            )
            if p.never_pays_off:
                warnings.append(
                    f"Minimum payment on {p.name or 'a debt'} does not cover the "
                    "monthly interest; increase the payment to pay it off."
                )

        # Step 4: Portfolio summary
        summary = get_debt_summary(snapshot.debt_items)
        car_payments = get_car_debt_payments(snapshot.debt_items)
        high_interest = get_high_interest_debt(
            snapshot.debt_items, threshold=payoff.high_interest_threshold
        )
        self._log_step(
            step="debt_summary",
            input_value=f"{summary.debt_count} debts",
            output_value=(
                f"non_mortgage_balance={summary.non_mortgage_balance}, "
                f"weighted_interest={summary.weighted_average_interest}, "
                f"high_interest={high_interest}"
            ),
            source="Debt portfolio",
        )

        # Step 5: Avalanche vs snowball using half the fun money budget
        extra = suggested_extra_payment(limits)
        comparison = compare_strategies(
            snapshot.debt_items, extra, today=today, max_months=payoff.max_months
        )
        self._log_step(
            step="strategy_comparison",
            input_value=f"extra_monthly_payment={extra}",
            output_value=f"best={comparison.best.value if comparison.best else None}",
            source="Payoff strategy simulation",
        )

        # Step 6: Net worth benchmarks
        benchmark = benchmark_net_worth(
            snapshot,
            limits=limits,
            retirement_age=projection.retirement_age,
            nominal_return=projection.nominal_return,
            inflation=projection.inflation,
        )
        self._log_step(
            step="net_worth_benchmark",
            input_value=f"net_worth={snapshot.net_worth}, age={benchmark.age}",
            output_value=(
                f"target={benchmark.target_net_worth}, "
                f"projected={benchmark.projected_net_worth_at_retirement}"
            ),
            source=f"Projection at {projection.nominal_return} return, "
                   f"{projection.inflation} inflation",
        )

        if snapshot.net_worth < 0:
            warnings.append(
                "Negative net worth: daily spending is held at zero until "
                "debts are paid down."
            )

        if snapshot.annual_income == 0:
            warnings.append(
                "Zero income: spending limits and income targets will be zero."
            )

        return FinancialPlanResult(
            current_step=current_step,
            progress_percentage=progress_percentage(current_step),
            spending_limits=limits,
            debt_projections=projections,
            debt_summary=summary,
            car_debt_payments=car_payments,
            strategy_comparison=comparison,
            net_worth_benchmark=benchmark,
            audit_log=self._audit_log,
            calculated_on=today,
            warnings=warnings,
        )
