"""Aggregation over a transaction collection.

All functions take the full collection from the caller and return new
values; an empty collection yields zeros, never an error.
"""

from collections.abc import Iterable

from finance_robot.categorization.rules import UNCATEGORIZED
from finance_robot.schemas.insights import Advice, Severity, Summary, Totals
from finance_robot.schemas.transaction import Transaction

LOW_SAVINGS_RATE = 0.10


def compute_totals(transactions: Iterable[Transaction]) -> Totals:
    """Income, expenses, net and expense magnitude per category.

    Positive amounts count as income. Everything else (zero included) counts
    as an expense of ``abs(amount)``, which is also added to its category.
    """
    income = 0.0
    expenses = 0.0
    by_category: dict[str, float] = {}

    for txn in transactions:
        if txn.amount > 0:
            income += txn.amount
            continue
        spend = abs(txn.amount)
        expenses += spend
        category = txn.category or UNCATEGORIZED
        by_category[category] = by_category.get(category, 0.0) + spend

    return Totals(income=income, expenses=expenses, net=income - expenses, by_category=by_category)


def compute_summary(transactions: Iterable[Transaction]) -> Summary:
    totals = compute_totals(transactions)
    savings_rate = totals.net / totals.income if totals.income > 0 else 0.0
    return Summary(
        income=totals.income,
        expenses=totals.expenses,
        net=totals.net,
        savings_rate=savings_rate,
    )


def build_advice(transactions: Iterable[Transaction]) -> list[Advice]:
    """Advisory messages for the current cash flow.

    The overspending and low-savings checks are independent and can both
    fire. The "on track" message only appears when neither does.
    """
    summary = compute_summary(transactions)
    advice: list[Advice] = []

    if summary.net < 0:
        advice.append(
            Advice(
                title="Spending exceeds income",
                detail=f"You're down ${abs(summary.net):.2f}. Start by cutting 1–2 categories.",
                severity=Severity.URGENT,
            )
        )

    if summary.income > 0 and summary.savings_rate < LOW_SAVINGS_RATE:
        advice.append(
            Advice(
                title="Low savings rate",
                detail=f"Savings rate is {summary.savings_rate * 100:.1f}%. Try automating 10%.",
                severity=Severity.WARN,
            )
        )

    if not advice:
        advice.append(
            Advice(
                title="You're on track",
                detail="Cash flow looks healthy. Next step: build a 3–6 month emergency fund.",
                severity=Severity.INFO,
            )
        )

    return advice
