"""Aggregate views over the stored transactions."""

from fastapi import APIRouter, Depends

from finance_robot.api.deps import get_store
from finance_robot.repositories.transaction import TransactionStore
from finance_robot.schemas.insights import Advice, Summary, Totals
from finance_robot.services.insights import build_advice, compute_summary, compute_totals

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get(
    "/totals",
    response_model=Totals,
    summary="Income, expenses, net and spending by category",
)
async def get_totals(store: TransactionStore = Depends(get_store)) -> Totals:
    return compute_totals(store.list_all())


@router.get(
    "/summary",
    response_model=Summary,
    summary="Cash-flow summary with savings rate",
)
async def get_summary(store: TransactionStore = Depends(get_store)) -> Summary:
    return compute_summary(store.list_all())


@router.get(
    "/advice",
    response_model=list[Advice],
    summary="Advisory messages for the current cash flow",
)
async def get_advice(store: TransactionStore = Depends(get_store)) -> list[Advice]:
    return build_advice(store.list_all())
