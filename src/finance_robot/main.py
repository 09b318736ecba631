from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from finance_robot import __version__
from finance_robot.api.middleware.error_handler import (
    handle_finance_robot_error,
    handle_generic_error,
    handle_validation_error,
)
from finance_robot.api.middleware.logging import RequestLoggingMiddleware, configure_logging
from finance_robot.api.v1 import router as v1_router
from finance_robot.api.v1.health import router as health_router
from finance_robot.config import settings
from finance_robot.core.exceptions import FinanceRobotError
from finance_robot.repositories.transaction import TransactionStore


def create_app(store: TransactionStore | None = None) -> FastAPI:
    configure_logging(settings.log_level, json_logs=settings.log_json)

    app = FastAPI(
        title="Finance Robot API",
        description="Personal transaction import, categorization and cash-flow insights",
        version=__version__,
        debug=settings.debug,
    )
    app.state.store = store if store is not None else TransactionStore()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(FinanceRobotError, handle_finance_robot_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_generic_error)

    # Register routers
    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
