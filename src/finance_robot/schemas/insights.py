"""Aggregate and advisory response schemas.

Field names are serialized in camelCase (``byCategory``, ``savingsRate``) to
match what the dashboard front-end reads.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Totals(_CamelModel):
    """Income/expense totals with per-category expense breakdown."""

    income: float = Field(0.0, description="Sum of positive amounts")
    expenses: float = Field(0.0, description="Sum of |amount| for non-positive amounts")
    net: float = Field(0.0, description="income - expenses")
    by_category: dict[str, float] = Field(
        default_factory=dict, description="Expense magnitude per category"
    )


class Summary(_CamelModel):
    """Cash-flow summary with savings rate."""

    income: float = 0.0
    expenses: float = 0.0
    net: float = 0.0
    savings_rate: float = Field(0.0, description="net / income, or 0 when there is no income")


class Severity(str, Enum):
    INFO = "info"
    WARN = "warn"
    URGENT = "urgent"


class Advice(BaseModel):
    """One advisory message derived from the summary."""

    title: str
    detail: str
    severity: Severity
