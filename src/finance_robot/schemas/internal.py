"""Internal data schemas for imported CSV rows.

These models represent the intermediate row shape produced by the row
normalizer, before amounts are signed and categories resolved.
"""

from pydantic import BaseModel, ConfigDict, Field


class CanonicalRow(BaseModel):
    """A single CSV row mapped onto canonical field names.

    Values are kept as raw strings; nothing is parsed or validated here.
    """

    date: str = Field("", description="Raw date, truncated to 10 characters")
    raw_name: str | None = Field(None, description="Raw description / merchant name")
    raw_amount: str | None = Field(
        None, description="Raw amount (may contain '$', ',' or parentheses)"
    )
    bank_category: str | None = Field(None, description="Category supplied by the bank export")

    model_config = ConfigDict(frozen=True)
