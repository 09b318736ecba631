"""FastAPI dependency injection."""

from fastapi import Request

from finance_robot.repositories.transaction import TransactionStore


def get_store(request: Request) -> TransactionStore:
    """Return the transaction store owned by the running app."""
    return request.app.state.store
