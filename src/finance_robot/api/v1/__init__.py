"""API version 1 routes."""

from fastapi import APIRouter

from finance_robot.api.v1 import insights, transactions

router = APIRouter(prefix="/api/v1")

# Include routers
router.include_router(transactions.router)
router.include_router(insights.router)
