import pytest
from httpx import ASGITransport, AsyncClient

from finance_robot.main import create_app
from finance_robot.repositories.transaction import TransactionStore


@pytest.fixture
def store() -> TransactionStore:
    """Fresh, empty transaction store per test."""
    return TransactionStore()


@pytest.fixture
def app(store: TransactionStore):
    return create_app(store=store)


@pytest.fixture
async def client(app):
    """Provide an HTTP client bound to a fresh app instance."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def discover_csv() -> str:
    """A small Discover-style export with a payment, a refund and purchases."""
    return (
        "Trans. Date,Post Date,Description,Amount,Category\n"
        "01/03/2024,01/04/2024,WHOLE FOODS MARKET #123,54.32,Supermarkets\n"
        "01/05/2024,01/05/2024,INTERNET PAYMENT - THANK YOU,-200.00,Payments and Credits\n"
        "01/07/2024,01/08/2024,SHELL OIL 5744,40.10,Gasoline\n"
        "01/09/2024,01/09/2024,AMAZON RETURN,(15.99),Merchandise\n"
    )
