"""Transaction endpoints: list, manual entry, CSV import and reset."""

import logging

from fastapi import APIRouter, Depends, File, UploadFile, status

from finance_robot.api.deps import get_store
from finance_robot.config import settings
from finance_robot.core.exceptions import UploadError
from finance_robot.repositories.transaction import TransactionStore
from finance_robot.schemas.transaction import (
    ImportResponse,
    ManualTransactionRequest,
    ResetResponse,
    Transaction,
)
from finance_robot.services.transactions import build_manual_transaction, import_csv

logger = logging.getLogger(__name__)

UPLOAD_CHUNK_SIZE = 64 * 1024

router = APIRouter(tags=["transactions"])


async def read_upload(file: UploadFile, max_bytes: int) -> bytes:
    """Read an upload in chunks, failing as soon as it passes ``max_bytes``.

    Raises:
        UploadError: API_002 if the upload is larger than ``max_bytes``
    """
    buf = bytearray()
    total = 0
    while chunk := await file.read(UPLOAD_CHUNK_SIZE):
        total += len(chunk)
        if total > max_bytes:
            raise UploadError("API_002", details={"read": total, "max": max_bytes})
        buf.extend(chunk)
    return bytes(buf)


@router.get(
    "/transactions",
    response_model=list[Transaction],
    summary="List all transactions",
)
async def list_transactions(store: TransactionStore = Depends(get_store)) -> list[Transaction]:
    return store.list_all()


@router.post(
    "/transactions",
    response_model=Transaction,
    status_code=status.HTTP_201_CREATED,
    summary="Add a transaction manually",
    description="""
    Add one transaction with a caller-supplied sign.

    - Positive **amount** is income, negative is an expense
    - An empty **name** is stored as "(No description)" and left Uncategorized
    - **date** is kept as its first 10 characters
    """,
)
async def create_transaction(
    payload: ManualTransactionRequest,
    store: TransactionStore = Depends(get_store),
) -> Transaction:
    txn = build_manual_transaction(payload.date, payload.name, payload.amount)
    return store.add(txn)


@router.post(
    "/transactions/import/csv",
    response_model=ImportResponse,
    summary="Import transactions from a CSV export",
    description="""
    Upload a bank CSV export as multipart field `file`.

    Column names are matched against known aliases (Date / Trans. Date,
    Description / Merchant, Amount / Amount (USD), Category). Rows without a
    date and an amount, or with a non-numeric amount, are skipped.

    Imported amounts are expenses unless the description or bank category
    looks like a payment, credit or refund.

    ## Error Codes
    - API_001: Missing file field
    - API_002: File too large
    - API_003: File is not UTF-8 text
    - CSV_001: CSV could not be parsed (nothing is imported)
    """,
)
async def import_transactions_csv(
    file: UploadFile | None = File(None),
    store: TransactionStore = Depends(get_store),
) -> ImportResponse:
    if file is None:
        raise UploadError("API_001")

    max_bytes = settings.csv_max_size_mb * 1024 * 1024
    data = await read_upload(file, max_bytes)

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UploadError("API_003", details={"reason": str(e)}) from e

    outcome = import_csv(text, sample_size=settings.import_sample_size)
    store.extend(outcome.transactions)

    return ImportResponse(imported=outcome.imported, sample=outcome.sample)


@router.post(
    "/reset",
    response_model=ResetResponse,
    summary="Delete every stored transaction",
)
async def reset_transactions(store: TransactionStore = Depends(get_store)) -> ResetResponse:
    store.reset()
    logger.info("Transaction store reset")
    return ResetResponse(ok=True)
