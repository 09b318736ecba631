"""Transaction record and request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Transaction(BaseModel):
    """A finalized transaction.

    Positive amounts are income/credits, negative amounts are expenses/debits.
    Records are immutable once built.
    """

    id: str = Field(description="Opaque unique identifier (UUID4)")
    date: str = Field(description="First 10 characters of the source date")
    name: str = Field(description="Display name")
    amount: float = Field(description="Signed amount (+income, -expense)")
    category: str = Field(description="Resolved category")

    model_config = ConfigDict(frozen=True)

    @field_validator("name", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Names and categories are never empty."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v


class ManualTransactionRequest(BaseModel):
    """Request body for a manually entered transaction.

    The caller decides the sign of ``amount``; no sign inference is applied.
    """

    date: str = Field(description="Transaction date (YYYY-MM-DD)")
    name: str | None = Field("", description="Description / payee")
    amount: float = Field(allow_inf_nan=False, description="Signed amount (+income, -expense)")


class ImportResponse(BaseModel):
    """Result of a CSV import."""

    imported: int = Field(description="Number of transactions created")
    sample: list[Transaction] = Field(
        default_factory=list, description="First few created transactions"
    )


class ResetResponse(BaseModel):
    """Result of clearing the transaction store."""

    ok: bool = True
